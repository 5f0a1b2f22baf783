"""
Lower-bounded режим — сегменты [lower, ...)

Каждый сегмент действует от своего lower до lower следующего сегмента
(последний — до +infinity). Поиск возвращает последний сегмент, чей
lower <= x.

Example:
    [0.0 ..[ = 1
    [1.0 ..[ = 2

    f(-1.0) = None
    f(0.5)  = 1
    f(1.0)  = 2
    f(70.0) = 2
"""

from typing import Any, Callable, Generic, Iterable, Optional, Tuple, TypeVar

from partial_function.core.domain.errors import DuplicateLowerBoundViolation, InvalidBoundsViolation
from partial_function.core.domain.segment import LowerBoundedSegment
from partial_function.core.math.ordering import is_eq, is_ge, is_gt, is_self_comparable, segment_sort_key
from partial_function.core.piecewise.base import (
    INSERT_OK,
    InsertCheck,
    PiecewiseFunction,
    SegmentBuilder,
)

B = TypeVar("B")
O = TypeVar("O")


class LowerPartialFunction(PiecewiseFunction[LowerBoundedSegment, B, O], Generic[B, O]):
    """Immutable функция из lower-bounded сегментов, отсортированных по lower."""

    __slots__ = ()

    @staticmethod
    def builder() -> "LowerPartialFunctionBuilder":
        return LowerPartialFunctionBuilder()

    @classmethod
    def from_segments(cls, segments: Iterable[Tuple[B, Callable[[B], O]]]) -> "LowerPartialFunction[B, O]":
        """Построение из литерального списка (lower, func)."""
        builder = cls.builder()
        for lower, func in segments:
            builder.insert(lower, func)
        return builder.build()

    def _governs(self, index: int, x: B) -> bool:
        segment = self._segments[index]
        if not is_ge(x, segment.lower):
            return False

        if index + 1 >= len(self._segments):
            return True
        return is_gt(self._segments[index + 1].lower, x)

    def domain_bounds(self) -> Optional[tuple]:
        """(lower первого сегмента, None) — сверху область не ограничена."""
        if not self._segments:
            return None
        return (self._segments[0].lower, None)


class LowerPartialFunctionBuilder(SegmentBuilder[LowerBoundedSegment], Generic[B, O]):
    """
    Builder для LowerPartialFunction.

    Lower bounds вставляются в любом порядке; запрещены только точные
    дубликаты lower.
    """

    _function_type = LowerPartialFunction
    _mode_name = "lower_bounded"

    def insert(self, lower: B, func: Callable[[B], O]) -> "LowerPartialFunctionBuilder[B, O]":
        """
        Добавление сегмента [lower, ...) с функцией func.

        Raises:
            DuplicateLowerBoundViolation: если сегмент с таким lower уже есть
            InvalidBoundsViolation: если lower несравним сам с собой (NaN)
            BuilderConsumedError: если build() уже вызывался
        """
        self._insert(func, lower)
        return self

    def try_insert(self, lower: B, func: Callable[[B], O]) -> InsertCheck:
        return self._try_insert(func, lower)

    def check_insert(self, lower: B) -> InsertCheck:
        return self._check_bounds(lower)

    def can_insert(self, lower: B) -> bool:
        """False если любой существующий сегмент имеет тот же lower."""
        return self._check_bounds(lower).allowed

    def _check_bounds(self, lower: B) -> InsertCheck:
        if not is_self_comparable(lower):
            return InsertCheck(allowed=False, reason="unordered_bounds")

        for existing in self._segments:
            if is_eq(lower, existing.lower):
                return InsertCheck(allowed=False, reason="duplicate_lower", conflict=existing)

        return INSERT_OK

    def _violation(self, check: InsertCheck, lower: Any) -> Exception:
        if check.conflict is not None:
            return DuplicateLowerBoundViolation(lower, check.conflict)
        return InvalidBoundsViolation(f"Invalid lower bound {lower!r}: {check.reason}")

    def _make_segment(self, func: Callable[[B], O], lower: B) -> LowerBoundedSegment:
        return LowerBoundedSegment(func=func, lower=lower)

    def _sort_key(self):
        return segment_sort_key(lambda s: s.lower)
