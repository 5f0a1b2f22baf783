"""
Ordering — политика частичного порядка для значений domain

Общий примитив для Builder (сортировка, проверка пересечений) и Evaluator
(проверка принадлежности интервалу).

Domain не обязан быть вполне упорядоченным: float содержит NaN, значения
разных типов вообще несравнимы. Поэтому каждое сравнение возвращает явный
трёхзначный результат + UNORDERED, вместо предположения о total order.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. partial_cmp никогда не бросает exception (TypeError → UNORDERED)
2. Все предикаты возвращают False для UNORDERED
3. Сортировка сегментов детерминирована и стабильна даже для UNORDERED границ
"""

from enum import Enum
from functools import cmp_to_key
from typing import Any, Callable


# =============================================================================
# ORDERING
# =============================================================================


class Ordering(str, Enum):
    """Результат сравнения двух значений domain."""

    LESS = "LESS"
    EQUAL = "EQUAL"
    GREATER = "GREATER"
    UNORDERED = "UNORDERED"

    @property
    def is_ordered(self) -> bool:
        return self is not Ordering.UNORDERED

    def to_int(self) -> int:
        """
        Конверсия в int для cmp-функций.

        Returns:
            -1 / 0 / +1 (UNORDERED трактуется как 0, т.е. "равный порядок")
        """
        if self is Ordering.LESS:
            return -1
        if self is Ordering.GREATER:
            return 1
        return 0


def partial_cmp(a: Any, b: Any) -> Ordering:
    """
    Частичное сравнение двух значений.

    Алгоритм:
        a < b  → LESS
        a > b  → GREATER
        a == b → EQUAL
        иначе  → UNORDERED (NaN, несравнимые множества, и т.д.)

    Args:
        a: Левое значение
        b: Правое значение

    Returns:
        Ordering; TypeError при сравнении трактуется как UNORDERED

    Examples:
        >>> partial_cmp(1.0, 2.0)
        <Ordering.LESS: 'LESS'>
        >>> partial_cmp(float('nan'), 0.0)
        <Ordering.UNORDERED: 'UNORDERED'>
        >>> partial_cmp("a", 1.0)
        <Ordering.UNORDERED: 'UNORDERED'>
    """
    try:
        if a < b:
            return Ordering.LESS
        if a > b:
            return Ordering.GREATER
        if a == b:
            return Ordering.EQUAL
    except TypeError:
        return Ordering.UNORDERED
    return Ordering.UNORDERED


# =============================================================================
# ПРЕДИКАТЫ
# =============================================================================


def is_lt(a: Any, b: Any) -> bool:
    return partial_cmp(a, b) is Ordering.LESS


def is_le(a: Any, b: Any) -> bool:
    return partial_cmp(a, b) in (Ordering.LESS, Ordering.EQUAL)


def is_gt(a: Any, b: Any) -> bool:
    return partial_cmp(a, b) is Ordering.GREATER


def is_ge(a: Any, b: Any) -> bool:
    return partial_cmp(a, b) in (Ordering.GREATER, Ordering.EQUAL)


def is_eq(a: Any, b: Any) -> bool:
    return partial_cmp(a, b) is Ordering.EQUAL


def is_ne(a: Any, b: Any) -> bool:
    """Упорядочены и не равны. Для UNORDERED тоже False."""
    return partial_cmp(a, b) in (Ordering.LESS, Ordering.GREATER)


def is_self_comparable(value: Any) -> bool:
    """
    Проверка, что значение сравнимо само с собой.

    NaN и подобные значения не равны сами себе: такой bound никогда не сможет
    ничего ограничить, поэтому Builder их отвергает.
    """
    return partial_cmp(value, value) is Ordering.EQUAL


def in_half_open(x: Any, lower: Any, higher: Any) -> bool:
    """x ∈ [lower, higher)"""
    return is_ge(x, lower) and is_lt(x, higher)


def in_half_open_left(x: Any, lower: Any, higher: Any) -> bool:
    """x ∈ (lower, higher]"""
    return is_gt(x, lower) and is_le(x, higher)


# =============================================================================
# СОРТИРОВКА
# =============================================================================


def compare_bounds(
    lower_a: Any,
    lower_b: Any,
    higher_a: Any = None,
    higher_b: Any = None,
) -> int:
    """
    cmp-функция порядка сегментов при build().

    Правило:
    1. Сравнение по lower
    2. Если lower равны или несравнимы → сравнение по higher (если заданы)
    3. Если и это несравнимо → равный порядок (stable sort сохраняет
       порядок вставки)

    Returns:
        -1 / 0 / +1
    """
    by_lower = partial_cmp(lower_a, lower_b)
    if by_lower in (Ordering.LESS, Ordering.GREATER):
        return by_lower.to_int()

    if higher_a is None and higher_b is None:
        return 0

    return partial_cmp(higher_a, higher_b).to_int()


def segment_sort_key(
    lower_of: Callable[[Any], Any],
    higher_of: Callable[[Any], Any] | None = None,
):
    """
    Ключ сортировки сегментов для sorted().

    Args:
        lower_of: Извлечение lower bound из сегмента
        higher_of: Извлечение higher bound (None для lower-bounded режима)

    Returns:
        key-объект, построенный через functools.cmp_to_key
    """

    def _cmp(a: Any, b: Any) -> int:
        if higher_of is None:
            return compare_bounds(lower_of(a), lower_of(b))
        return compare_bounds(lower_of(a), lower_of(b), higher_of(a), higher_of(b))

    return cmp_to_key(_cmp)
