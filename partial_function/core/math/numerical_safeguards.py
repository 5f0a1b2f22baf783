"""
Numerical Safeguards — примитивы для стандартных функций сегментов

Модуль обеспечивает численную устойчивость стандартных функций
(constant, affine, logarithmic, exponential, inverse, polynomial):
- NaN/Inf проверки коэффициентов
- Epsilon-защита полюса для inverse
- Проверка результата на переполнение

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Коэффициенты стандартных функций всегда finite
2. Деление на ноль никогда не происходит молча (FunctionDomainViolation)
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

from partial_function.core.domain.errors import FunctionDomainViolation

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Минимальное расстояние до полюса inverse-функции
# |x - shift| < EPS_POLE → FunctionDomainViolation
EPS_POLE: Final[float] = 1e-12


# =============================================================================
# NaN/Inf ПРОВЕРКИ
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def validate_finite(value: float, name: str) -> None:
    """
    Валидация коэффициента стандартной функции.

    Args:
        value: Проверяемое значение
        name: Имя параметра (для сообщения об ошибке)

    Raises:
        ValueError: Если value NaN/Inf
    """
    if not is_valid_float(value):
        raise ValueError(f"{name} must be a valid float (not NaN/Inf), got {value}")


def ensure_finite_result(value: float, kind: str, x: float) -> float:
    """
    Проверка результата вычисления стандартной функции.

    Args:
        value: Результат вычисления
        kind: Тип функции (для сообщения об ошибке)
        x: Аргумент

    Returns:
        value если finite

    Raises:
        FunctionDomainViolation: если результат NaN/Inf
    """
    if not is_valid_float(value):
        raise FunctionDomainViolation(
            f"{kind} function produced non-finite value {value} at x={x}"
        )
    return value


# =============================================================================
# БЕЗОПАСНОЕ ДЕЛЕНИЕ
# =============================================================================


def safe_pole_divide(numerator: float, x: float, pole: float, eps: float = EPS_POLE) -> float:
    """
    Деление numerator / (x - pole) с защитой от полюса.

    В отличие от fallback-деления, результат вблизи полюса не подменяется:
    значение без смысла → явный FunctionDomainViolation.

    Args:
        numerator: Числитель
        x: Аргумент
        pole: Положение полюса
        eps: Минимальное допустимое |x - pole|

    Returns:
        numerator / (x - pole)

    Raises:
        FunctionDomainViolation: если |x - pole| < eps
        ValueError: если eps <= 0
    """
    if eps <= 0:
        raise ValueError(f"eps must be positive, got {eps}")

    denominator = x - pole
    if abs(denominator) < eps:
        raise FunctionDomainViolation(
            f"inverse function is undefined at x={x} (pole at {pole})"
        )

    return numerator / denominator
