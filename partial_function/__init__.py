"""
partial_function — кусочно-заданные функции на упорядоченном domain

Функция собирается из независимых под-функций, каждая из которых действует
на своём интервале. Builder проверяет, что интервалы не пересекаются;
построенная функция immutable и находит governing сегмент для входа.

Два режима:
- PartialFunction: сегменты [lower, higher)
- LowerPartialFunction: сегменты [lower, ...) до следующего lower
"""

from partial_function.core.domain import (
    BuilderConsumedError,
    ContractViolation,
    DefinitionError,
    DualBoundedSegment,
    DuplicateLowerBoundViolation,
    FunctionDomainViolation,
    InvalidBoundsViolation,
    LowerBoundedSegment,
    PartialFunctionError,
    SegmentOverlapViolation,
    UndefinedInputError,
)
from partial_function.core.math import Ordering, partial_cmp
from partial_function.core.piecewise import (
    InsertCheck,
    LowerPartialFunction,
    LowerPartialFunctionBuilder,
    PartialFunction,
    PartialFunctionBuilder,
)
from partial_function.loader import (
    LoaderConfig,
    check_definition,
    load_partial_function,
    load_partial_function_file,
)

__version__ = "0.1.0"

__all__ = [
    # Functions and builders
    "PartialFunction",
    "PartialFunctionBuilder",
    "LowerPartialFunction",
    "LowerPartialFunctionBuilder",
    "InsertCheck",
    # Segments
    "DualBoundedSegment",
    "LowerBoundedSegment",
    # Ordering
    "Ordering",
    "partial_cmp",
    # Loader
    "LoaderConfig",
    "load_partial_function",
    "load_partial_function_file",
    "check_definition",
    # Errors
    "PartialFunctionError",
    "ContractViolation",
    "SegmentOverlapViolation",
    "DuplicateLowerBoundViolation",
    "InvalidBoundsViolation",
    "BuilderConsumedError",
    "UndefinedInputError",
    "FunctionDomainViolation",
    "DefinitionError",
]
