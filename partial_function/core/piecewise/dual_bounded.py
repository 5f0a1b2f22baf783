"""
Dual-bounded режим — сегменты [lower, higher)

Правила границ:
- Внутри сегмента действует [lower, higher)
- Точка higher принадлежит сегменту, если её не занимает непосредственный
  сосед (next.lower == higher). Для последнего сегмента higher включён всегда.
- При касании (a.higher == b.lower) позже начинающийся сегмент b выигрывает
  в общей точке: eval(a.higher) → b

Example:
    f = (
        PartialFunction.builder()
        .insert(0.0, 1.0, lambda x: x)
        .insert(1.0, 2.0, lambda x: 5.0)
        .build()
    )
    f.eval(0.5)   # 0.5
    f.eval(1.0)   # 5.0  (позже начинающийся сегмент)
    f.eval(2.0)   # 5.0  (закрытый конец последнего сегмента)
    f.eval(2.1)   # None
"""

from typing import Any, Callable, Generic, Iterable, Optional, Tuple, TypeVar

from partial_function.core.domain.errors import InvalidBoundsViolation, SegmentOverlapViolation
from partial_function.core.domain.segment import DualBoundedSegment
from partial_function.core.math.ordering import (
    Ordering,
    in_half_open,
    in_half_open_left,
    is_eq,
    is_ge,
    is_le,
    is_ne,
    is_self_comparable,
    partial_cmp,
    segment_sort_key,
)
from partial_function.core.piecewise.base import (
    INSERT_OK,
    InsertCheck,
    PiecewiseFunction,
    SegmentBuilder,
)

B = TypeVar("B")
O = TypeVar("O")


# =============================================================================
# PARTIAL FUNCTION
# =============================================================================


class PartialFunction(PiecewiseFunction[DualBoundedSegment, B, O], Generic[B, O]):
    """Immutable функция из dual-bounded сегментов, отсортированных по lower."""

    __slots__ = ()

    @staticmethod
    def builder() -> "PartialFunctionBuilder":
        """Новый пустой Builder."""
        return PartialFunctionBuilder()

    @classmethod
    def from_segments(cls, segments: Iterable[Tuple[B, B, Callable[[B], O]]]) -> "PartialFunction[B, O]":
        """
        Построение из литерального списка (lower, higher, func).

        Example:
            PartialFunction.from_segments([
                (0.0, 1.0, lambda x: x),
                (1.0, 2.0, lambda x: 5.0),
            ])

        Raises:
            SegmentOverlapViolation / InvalidBoundsViolation: как insert()
        """
        builder = cls.builder()
        for lower, higher, func in segments:
            builder.insert(lower, higher, func)
        return builder.build()

    def _governs(self, index: int, x: B) -> bool:
        segment = self._segments[index]

        if segment.contains(x):
            return True

        if not is_eq(x, segment.higher):
            return False

        # x == higher: точка принадлежит сегменту, если её не занимает
        # непосредственно следующий сегмент
        if index + 1 >= len(self._segments):
            return True
        return is_ne(self._segments[index + 1].lower, segment.higher)

    def domain_bounds(self) -> Optional[tuple]:
        """
        Крайние точки области определения.

        Returns:
            (lower первого сегмента, максимальный higher) или None если
            сегментов нет. Между ними возможны gaps.
        """
        if not self._segments:
            return None

        highest = self._segments[0].higher
        for segment in self._segments[1:]:
            if partial_cmp(segment.higher, highest) is Ordering.GREATER:
                highest = segment.higher
        return (self._segments[0].lower, highest)


# =============================================================================
# BUILDER
# =============================================================================


class PartialFunctionBuilder(SegmentBuilder[DualBoundedSegment], Generic[B, O]):
    """
    Builder для PartialFunction.

    Каждая вставка проверяется на пересечение с уже вставленными
    сегментами. Касание интервалов (new.lower == existing.higher и наоборот)
    разрешено.
    """

    _function_type = PartialFunction
    _mode_name = "dual_bounded"

    def insert(self, lower: B, higher: B, func: Callable[[B], O]) -> "PartialFunctionBuilder[B, O]":
        """
        Добавление сегмента [lower, higher) с функцией func.

        Args:
            lower: Нижняя граница (включена)
            higher: Верхняя граница (см. правила границ модуля)
            func: Унарная функция сегмента

        Returns:
            self для цепочки вызовов

        Raises:
            SegmentOverlapViolation: если интервал пересекается с существующим
            InvalidBoundsViolation: если lower > higher или bounds несравнимы
            BuilderConsumedError: если build() уже вызывался
        """
        self._insert(func, lower, higher)
        return self

    def try_insert(self, lower: B, higher: B, func: Callable[[B], O]) -> InsertCheck:
        """
        Не-фатальная вставка для непроверенных источников.

        Returns:
            InsertCheck; сегмент добавлен только если check.allowed
        """
        return self._try_insert(func, lower, higher)

    def check_insert(self, lower: B, higher: B) -> InsertCheck:
        """Проверка вставки без изменения состояния и без exception."""
        return self._check_bounds(lower, higher)

    def can_insert(self, lower: B, higher: B) -> bool:
        """
        Можно ли безопасно вставить [lower, higher).

        False если для любого существующего сегмента b:
        - lower ∈ [b.lower, b.higher)   (начало внутри b)
        - higher ∈ (b.lower, b.higher]  (конец внутри b)
        - lower <= b.lower и higher >= b.higher  (новый содержит b)
        """
        return self._check_bounds(lower, higher).allowed

    # -------------------------------------------------------------------------
    # Правила режима
    # -------------------------------------------------------------------------

    def _check_bounds(self, lower: B, higher: B) -> InsertCheck:
        if not (is_self_comparable(lower) and is_self_comparable(higher)):
            return InsertCheck(allowed=False, reason="unordered_bounds")

        order = partial_cmp(lower, higher)
        if order is Ordering.UNORDERED:
            return InsertCheck(allowed=False, reason="unordered_bounds")
        if order is Ordering.GREATER:
            return InsertCheck(allowed=False, reason="lower_above_higher")

        for existing in self._segments:
            if in_half_open(lower, existing.lower, existing.higher):
                return InsertCheck(allowed=False, reason="starts_inside", conflict=existing)
            if in_half_open_left(higher, existing.lower, existing.higher):
                return InsertCheck(allowed=False, reason="ends_inside", conflict=existing)
            if is_le(lower, existing.lower) and is_ge(higher, existing.higher):
                return InsertCheck(allowed=False, reason="contains_existing", conflict=existing)

        return INSERT_OK

    def _violation(self, check: InsertCheck, lower: Any, higher: Any) -> Exception:
        if check.conflict is not None:
            return SegmentOverlapViolation(lower, higher, check.conflict)
        return InvalidBoundsViolation(
            f"Invalid segment bounds [{lower!r}, {higher!r}): {check.reason}"
        )

    def _make_segment(self, func: Callable[[B], O], lower: B, higher: B) -> DualBoundedSegment:
        return DualBoundedSegment(func=func, lower=lower, higher=higher)

    def _sort_key(self):
        return segment_sort_key(lambda s: s.lower, lambda s: s.higher)
