"""
Core math modules для partial_function

Политика частичного порядка и стандартные функции сегментов.
"""

# Ordering policy
from partial_function.core.math.ordering import (
    Ordering,
    compare_bounds,
    in_half_open,
    in_half_open_left,
    is_eq,
    is_ge,
    is_gt,
    is_le,
    is_lt,
    is_ne,
    is_self_comparable,
    partial_cmp,
    segment_sort_key,
)

# Numerical Safeguards
from partial_function.core.math.numerical_safeguards import (
    EPS_POLE,
    ensure_finite_result,
    is_valid_float,
    safe_pole_divide,
    validate_finite,
)

# Standard Functions
from partial_function.core.math.standard_functions import (
    STANDARD_FUNCTION_KINDS,
    Affine,
    Constant,
    Exponential,
    Inverse,
    Logarithmic,
    Polynomial,
    make_standard_function,
)

__all__ = [
    # Ordering: Types
    "Ordering",
    # Ordering: Functions
    "compare_bounds",
    "in_half_open",
    "in_half_open_left",
    "is_eq",
    "is_ge",
    "is_gt",
    "is_le",
    "is_lt",
    "is_ne",
    "is_self_comparable",
    "partial_cmp",
    "segment_sort_key",
    # Numerical Safeguards: Constants
    "EPS_POLE",
    # Numerical Safeguards: Functions
    "ensure_finite_result",
    "is_valid_float",
    "safe_pole_divide",
    "validate_finite",
    # Standard Functions: Registry
    "STANDARD_FUNCTION_KINDS",
    # Standard Functions: Types
    "Affine",
    "Constant",
    "Exponential",
    "Inverse",
    "Logarithmic",
    "Polynomial",
    # Standard Functions: Functions
    "make_standard_function",
]
