"""
Piecewise core — общий механизм Builder/Evaluator для обоих режимов

Оба режима (dual-bounded и lower-bounded) используют один и тот же цикл:
- Builder: накопление сегментов с валидацией каждой вставки,
  сортировка при build(), одноразовое превращение в immutable функцию
- Evaluator: линейный проход по отсортированным сегментам,
  первый governing сегмент выигрывает

Режимы отличаются только правилами:
- _check_bounds(): какие вставки запрещены
- _governs(): какой сегмент управляет входом x

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Валидация вставки всегда активна (не assert)
2. Отвергнутая вставка не меняет состояние Builder
3. Builder после build() не переиспользуется (BuilderConsumedError)
4. Построенная функция immutable; eval() не имеет побочных эффектов
5. eval() никогда не бросает exception на gaps и несравнимых входах
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Generic, Iterator, Optional, Sequence, TypeVar

from partial_function.core.domain.errors import BuilderConsumedError, UndefinedInputError

logger = logging.getLogger(__name__)

B = TypeVar("B")
O = TypeVar("O")
S = TypeVar("S")


# =============================================================================
# INSERT CHECK
# =============================================================================


@dataclass(frozen=True)
class InsertCheck:
    """Результат проверки вставки (не бросает exception)."""

    allowed: bool
    reason: str

    # Сегмент, с которым конфликтует вставка (None если allowed)
    conflict: Optional[Any] = None

    def __bool__(self) -> bool:
        return self.allowed


INSERT_OK = InsertCheck(allowed=True, reason="")


# =============================================================================
# BUILT FUNCTION
# =============================================================================


class PiecewiseFunction(Generic[S, B, O]):
    """
    Immutable кусочно-заданная функция.

    Владеет отсортированным tuple сегментов. После __init__ любые
    присваивания атрибутов запрещены.
    """

    __slots__ = ("_segments",)

    def __init__(self, segments: Sequence[S]):
        object.__setattr__(self, "_segments", tuple(segments))

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name: str) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    # -------------------------------------------------------------------------
    # Search
    # -------------------------------------------------------------------------

    def _governs(self, index: int, x: B) -> bool:
        """Управляет ли сегмент index входом x (правило режима)."""
        raise NotImplementedError

    def find_segment(self, x: B) -> Optional[S]:
        """
        Поиск governing сегмента.

        Args:
            x: Значение domain

        Returns:
            Первый (по возрастанию lower) сегмент, управляющий x,
            или None если x вне всех сегментов / несравним
        """
        for index, segment in enumerate(self._segments):
            if self._governs(index, x):
                return segment
        return None

    def eval(self, x: B) -> Optional[O]:
        """
        Вычисление функции.

        Returns:
            Результат функции governing сегмента или None если функция
            не определена в x
        """
        segment = self.find_segment(x)
        if segment is None:
            return None
        return segment.apply(x)

    # -------------------------------------------------------------------------
    # Mapping-like API
    # -------------------------------------------------------------------------

    def __call__(self, x: B) -> O:
        segment = self.find_segment(x)
        if segment is None:
            raise UndefinedInputError(x)
        return segment.apply(x)

    def get(self, x: B, default: Any = None) -> Any:
        segment = self.find_segment(x)
        if segment is None:
            return default
        return segment.apply(x)

    def is_defined_at(self, x: B) -> bool:
        return self.find_segment(x) is not None

    def __contains__(self, x: B) -> bool:
        return self.is_defined_at(x)

    @property
    def segments(self) -> tuple:
        return self._segments

    def __len__(self) -> int:
        return len(self._segments)

    def __iter__(self) -> Iterator[S]:
        return iter(self._segments)

    def __repr__(self) -> str:
        return "%s(%r)" % (type(self).__name__, list(self._segments))


# =============================================================================
# BUILDER
# =============================================================================


class SegmentBuilder(Generic[S]):
    """
    Mutable накопитель сегментов.

    Порядок вставки произвольный: сортировка выполняется в build().
    Не thread-safe: вставки должны сериализоваться вызывающей стороной.
    """

    # Переопределяются режимами
    _function_type: type = PiecewiseFunction
    _mode_name: str = "piecewise"

    def __init__(self):
        self._segments: list[S] = []
        self._consumed = False

    # -------------------------------------------------------------------------
    # Правила режима
    # -------------------------------------------------------------------------

    def _check_bounds(self, *bounds: Any) -> InsertCheck:
        raise NotImplementedError

    def _violation(self, check: InsertCheck, *bounds: Any) -> Exception:
        raise NotImplementedError

    def _make_segment(self, func: Callable, *bounds: Any) -> S:
        raise NotImplementedError

    def _sort_key(self):
        raise NotImplementedError

    # -------------------------------------------------------------------------
    # Общий цикл вставки
    # -------------------------------------------------------------------------

    def _ensure_open(self) -> None:
        if self._consumed:
            raise BuilderConsumedError(
                f"{type(self).__name__} was already consumed by build()"
            )

    def _insert(self, func: Callable, *bounds: Any) -> None:
        self._ensure_open()
        check = self._check_bounds(*bounds)
        if not check.allowed:
            raise self._violation(check, *bounds)
        self._segments.append(self._make_segment(func, *bounds))

    def _try_insert(self, func: Callable, *bounds: Any) -> InsertCheck:
        self._ensure_open()
        check = self._check_bounds(*bounds)
        if check.allowed:
            self._segments.append(self._make_segment(func, *bounds))
        else:
            logger.debug("Rejected %s segment %r: %s", self._mode_name, bounds, check.reason)
        return check

    def __len__(self) -> int:
        return len(self._segments)

    @property
    def consumed(self) -> bool:
        return self._consumed

    def build(self) -> PiecewiseFunction:
        """
        Финализация: сортировка по lower и создание immutable функции.

        Одноразовая операция: Builder после неё не переиспользуется.

        Returns:
            Immutable функция с сегментами по возрастанию lower

        Raises:
            BuilderConsumedError: если build() уже вызывался
        """
        self._ensure_open()
        ordered = sorted(self._segments, key=self._sort_key())
        self._consumed = True
        self._segments = []

        logger.debug("Built %s function with %d segment(s)", self._mode_name, len(ordered))
        return self._function_type(ordered)
