"""
Segment — запись (bounds, function) кусочно-заданной функции

Immutable dataclass модели. Сегмент эксклюзивно владеет своим callable.

Два вида:
- DualBoundedSegment: [lower, higher) + правила границ Evaluator
- LowerBoundedSegment: [lower, ...) до lower следующего сегмента
"""

from dataclasses import dataclass
from typing import Callable, Generic, TypeVar

from partial_function.core.math.ordering import in_half_open

B = TypeVar("B")
O = TypeVar("O")


@dataclass(frozen=True)
class DualBoundedSegment(Generic[B, O]):
    """Сегмент с явными lower и higher bounds."""

    func: Callable[[B], O]
    lower: B
    higher: B

    def contains(self, x: B) -> bool:
        """x ∈ [lower, higher) с учётом частичного порядка."""
        return in_half_open(x, self.lower, self.higher)

    def apply(self, x: B) -> O:
        return self.func(x)

    def __repr__(self) -> str:
        return f"DualBoundedSegment([{self.lower!r}, {self.higher!r}), func={self.func!r})"


@dataclass(frozen=True)
class LowerBoundedSegment(Generic[B, O]):
    """
    Сегмент только с lower bound.

    Верхняя граница неявная: lower следующего сегмента после сортировки
    (или +infinity для последнего).
    """

    func: Callable[[B], O]
    lower: B

    def apply(self, x: B) -> O:
        return self.func(x)

    def __repr__(self) -> str:
        return f"LowerBoundedSegment([{self.lower!r}, ...), func={self.func!r})"
