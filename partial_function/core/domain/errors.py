"""
Errors — иерархия исключений partial_function

Две категории:
- Contract violations: ошибка построения (пересечение интервалов, дубликат
  lower bound, повторное использование Builder). Всегда активны, не зависят
  от режима запуска (никаких assert, снимаемых под -O).
- Domain gaps: вход вне всех сегментов. Это ожидаемый исход, eval()
  возвращает None; exception только при явном вызове через __call__.
"""

from typing import Any


class PartialFunctionError(Exception):
    """Базовый класс всех ошибок partial_function."""
    pass


# =============================================================================
# CONTRACT VIOLATIONS (construction-time)
# =============================================================================


class ContractViolation(PartialFunctionError, ValueError):
    """
    Нарушение контракта при построении функции.

    Программная/конфигурационная ошибка: build прерывается немедленно.
    Для не-фатального пути используйте Builder.check_insert() / try_insert().
    """
    pass


class SegmentOverlapViolation(ContractViolation):
    """Новый dual-bounded сегмент пересекается с уже вставленным."""

    def __init__(self, lower: Any, higher: Any, conflict: Any):
        self.lower = lower
        self.higher = higher
        self.conflict = conflict
        super().__init__(
            f"Segment [{lower!r}, {higher!r}) overlaps existing segment "
            f"[{conflict.lower!r}, {conflict.higher!r})"
        )


class DuplicateLowerBoundViolation(ContractViolation):
    """Lower-bounded сегмент с таким же lower уже вставлен."""

    def __init__(self, lower: Any, conflict: Any):
        self.lower = lower
        self.conflict = conflict
        super().__init__(f"Segment with lower bound {lower!r} already exists")


class InvalidBoundsViolation(ContractViolation):
    """Bounds не образуют валидный интервал (lower > higher, NaN, несравнимые)."""
    pass


class BuilderConsumedError(ContractViolation):
    """Builder уже использован build() и не может быть переиспользован."""
    pass


# =============================================================================
# EVALUATION
# =============================================================================


class UndefinedInputError(PartialFunctionError, KeyError):
    """
    Вход вне всех сегментов при вызове через __call__.

    eval() и get() в этой ситуации возвращают None / default.
    """

    def __init__(self, x: Any):
        self.x = x
        super().__init__(x)

    def __str__(self) -> str:
        return f"Partial function is undefined at {self.x!r}"


class FunctionDomainViolation(PartialFunctionError, ValueError):
    """
    Стандартная функция вычислена вне своей области определения.

    Например: log(x) при x <= 0, inverse в полюсе, переполнение exp.
    """
    pass


# =============================================================================
# LOADER
# =============================================================================


class DefinitionError(PartialFunctionError, ValueError):
    """Декларативное описание не прошло schema/model валидацию."""

    def __init__(self, message: str, errors: list[str] | None = None):
        self.errors = list(errors or [])
        super().__init__(message)
