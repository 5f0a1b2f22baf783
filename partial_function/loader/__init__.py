"""
Loader — декларативные описания кусочно-заданных функций.

JSON описание → Pydantic модели → resolve() стандартных функций →
insert()/build() core.
"""

from .loader import (
    DEFAULT_LOADER_CONFIG,
    LoaderConfig,
    build_partial_function,
    check_definition,
    load_partial_function,
    load_partial_function_file,
    make_builder,
    parse_definition,
)
from .models import (
    AffineDescriptor,
    ConstantDescriptor,
    ExponentialDescriptor,
    FunctionDescriptor,
    InverseDescriptor,
    LogarithmicDescriptor,
    PiecewiseDefinition,
    PiecewiseMode,
    PolynomialDescriptor,
    SegmentSpec,
)

__all__ = [
    # Config
    "DEFAULT_LOADER_CONFIG",
    "LoaderConfig",
    # Models
    "PiecewiseMode",
    "FunctionDescriptor",
    "ConstantDescriptor",
    "AffineDescriptor",
    "LogarithmicDescriptor",
    "ExponentialDescriptor",
    "InverseDescriptor",
    "PolynomialDescriptor",
    "SegmentSpec",
    "PiecewiseDefinition",
    # Functions
    "parse_definition",
    "make_builder",
    "build_partial_function",
    "load_partial_function",
    "load_partial_function_file",
    "check_definition",
]
