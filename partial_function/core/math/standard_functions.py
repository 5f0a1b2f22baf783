"""
Standard Functions — стандартные унарные функции для сегментов

Исполняемые формы именованных функций из декларативных описаний:

    constant:     f(x) = value
    affine:       f(x) = slope * x + intercept
    logarithmic:  f(x) = scale * log_base(x) + offset
    exponential:  f(x) = scale * exp(rate * x) + offset
    inverse:      f(x) = scale / (x - shift) + offset
    polynomial:   f(x) = c0 + c1*x + c2*x^2 + ...   (Horner)

Все функции immutable и без побочных эффектов: безопасны для
конкурентного eval().

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Коэффициенты всегда finite (ValueError при создании)
2. Вычисление вне области определения → FunctionDomainViolation,
   никогда не NaN/Inf
"""

import math
from dataclasses import dataclass
from typing import Callable, Final

from partial_function.core.domain.errors import FunctionDomainViolation
from partial_function.core.math.numerical_safeguards import (
    ensure_finite_result,
    safe_pole_divide,
    validate_finite,
)


# =============================================================================
# ФУНКЦИИ
# =============================================================================


@dataclass(frozen=True)
class Constant:
    value: float

    def __post_init__(self):
        validate_finite(self.value, "value")

    def __call__(self, x: float) -> float:
        return self.value


@dataclass(frozen=True)
class Affine:
    slope: float
    intercept: float = 0.0

    def __post_init__(self):
        validate_finite(self.slope, "slope")
        validate_finite(self.intercept, "intercept")

    def __call__(self, x: float) -> float:
        try:
            y = self.slope * x + self.intercept
        except OverflowError:
            raise FunctionDomainViolation(f"affine function overflows at x={x}")
        return ensure_finite_result(y, "affine", x)


@dataclass(frozen=True)
class Logarithmic:
    """
    f(x) = scale * log_base(x) + offset

    Область определения: x > 0. Основание по умолчанию — e.
    """

    scale: float = 1.0
    offset: float = 0.0
    base: float = math.e

    def __post_init__(self):
        validate_finite(self.scale, "scale")
        validate_finite(self.offset, "offset")
        validate_finite(self.base, "base")
        if self.base <= 0 or self.base == 1.0:
            raise ValueError(f"base must be positive and != 1, got {self.base}")

    def __call__(self, x: float) -> float:
        if not x > 0:
            raise FunctionDomainViolation(f"logarithmic function is undefined at x={x}")
        return ensure_finite_result(self.scale * math.log(x, self.base) + self.offset, "logarithmic", x)


@dataclass(frozen=True)
class Exponential:
    scale: float = 1.0
    rate: float = 1.0
    offset: float = 0.0

    def __post_init__(self):
        validate_finite(self.scale, "scale")
        validate_finite(self.rate, "rate")
        validate_finite(self.offset, "offset")

    def __call__(self, x: float) -> float:
        try:
            grown = math.exp(self.rate * x)
        except OverflowError:
            raise FunctionDomainViolation(f"exponential function overflows at x={x}")
        return ensure_finite_result(self.scale * grown + self.offset, "exponential", x)


@dataclass(frozen=True)
class Inverse:
    """
    f(x) = scale / (x - shift) + offset

    Полюс в x == shift → FunctionDomainViolation.
    """

    scale: float = 1.0
    shift: float = 0.0
    offset: float = 0.0

    def __post_init__(self):
        validate_finite(self.scale, "scale")
        validate_finite(self.shift, "shift")
        validate_finite(self.offset, "offset")

    def __call__(self, x: float) -> float:
        try:
            y = safe_pole_divide(self.scale, x, self.shift) + self.offset
        except OverflowError:
            raise FunctionDomainViolation(f"inverse function overflows at x={x}")
        return ensure_finite_result(y, "inverse", x)


@dataclass(frozen=True)
class Polynomial:
    """Коэффициенты по возрастанию степени: (c0, c1, c2, ...)."""

    coefficients: tuple

    def __post_init__(self):
        if len(self.coefficients) == 0:
            raise ValueError("polynomial requires at least one coefficient")
        object.__setattr__(self, "coefficients", tuple(float(c) for c in self.coefficients))
        for i, c in enumerate(self.coefficients):
            validate_finite(c, f"coefficients[{i}]")

    @property
    def degree(self) -> int:
        return len(self.coefficients) - 1

    def __call__(self, x: float) -> float:
        y = self.coefficients[-1]
        try:
            for c in reversed(self.coefficients[:-1]):
                y = c + x * y
        except OverflowError:
            raise FunctionDomainViolation(f"polynomial function overflows at x={x}")
        return ensure_finite_result(y, "polynomial", x)


# =============================================================================
# РЕЕСТР
# =============================================================================

STANDARD_FUNCTION_KINDS: Final[dict[str, Callable[..., Callable[[float], float]]]] = {
    "constant": Constant,
    "affine": Affine,
    "logarithmic": Logarithmic,
    "exponential": Exponential,
    "inverse": Inverse,
    "polynomial": Polynomial,
}


def make_standard_function(kind: str, **coefficients: float) -> Callable[[float], float]:
    """
    Создание стандартной функции по имени типа.

    Args:
        kind: Имя типа (см. STANDARD_FUNCTION_KINDS)
        **coefficients: Именованные коэффициенты

    Returns:
        Унарный callable

    Raises:
        ValueError: Неизвестный kind или невалидные коэффициенты

    Examples:
        >>> make_standard_function("affine", slope=2.0, intercept=1.0)(3.0)
        7.0
    """
    try:
        factory = STANDARD_FUNCTION_KINDS[kind]
    except KeyError:
        raise ValueError(f"Unknown function kind {kind!r}, expected one of {sorted(STANDARD_FUNCTION_KINDS)}")
    return factory(**coefficients)
