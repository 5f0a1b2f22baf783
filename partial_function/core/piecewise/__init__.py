"""
Piecewise — Builder и Evaluator кусочно-заданных функций.

Один общий механизм (base) с двумя режимами доступа:
- dual_bounded: сегменты [lower, higher)
- lower_bounded: сегменты [lower, ...) до следующего lower
"""

from partial_function.core.piecewise.base import (
    INSERT_OK,
    InsertCheck,
    PiecewiseFunction,
    SegmentBuilder,
)
from partial_function.core.piecewise.dual_bounded import PartialFunction, PartialFunctionBuilder
from partial_function.core.piecewise.lower_bounded import (
    LowerPartialFunction,
    LowerPartialFunctionBuilder,
)

__all__ = [
    # Base
    "INSERT_OK",
    "InsertCheck",
    "PiecewiseFunction",
    "SegmentBuilder",
    # Dual-bounded
    "PartialFunction",
    "PartialFunctionBuilder",
    # Lower-bounded
    "LowerPartialFunction",
    "LowerPartialFunctionBuilder",
]
