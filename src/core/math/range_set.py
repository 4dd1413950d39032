"""
RangeSet — Объединение непересекающихся интервалов

Упорядоченная коллекция Range, представляющая объединение непересекающихся
интервалов. Поддерживает пересечение и дополнение (логическое отрицание) над
расширенной вещественной прямой.

ИНВАРИАНТ (на входе и выходе каждой публичной операции):
    ranges отсортированы по lo по возрастанию, никакие два не пересекаются.
    Касающиеся интервалы ([10, 20] и (20, 30]) НЕ сливаются: упрощение
    представления сознательно не выполняется.

ДОПОЛНЕНИЕ (inverse) строится в три фазы:
    1. Левый хвост:  (-Inf, lowest_lo)   если lowest_lo != -Inf
    2. Промежутки:   (a.hi, b.lo)        для каждой соседней пары (a, b)
    3. Правый хвост: (highest_hi, Inf)   если highest_hi != Inf
    Граница каждого нового конца равна inverse() соответствующей исходной границы.
"""

import math
from dataclasses import dataclass
from typing import Iterable, Iterator, Optional

from src.core.math.intervals import Boundary, IntervalConsistencyError, Range


# =============================================================================
# EXCEPTIONS
# =============================================================================


class RangeSetInvariantViolation(IntervalConsistencyError):
    """Последовательность интервалов не отсортирована или содержит пересечения."""

    pass


class EmptyRangeSetError(IntervalConsistencyError):
    """Аксессор границ вызван на пустом RangeSet."""

    pass


# =============================================================================
# RANGE SET
# =============================================================================


@dataclass(frozen=True)
class RangeSet:
    """
    Объединение непересекающихся интервалов.

    Immutable: intersect() и inverse() возвращают новые экземпляры.
    Пустой RangeSet является валидным пустым множеством, но intersect() его
    никогда не возвращает (вместо этого None).
    """

    ranges: tuple[Range, ...] = ()

    # -------------------------------------------------------------------------
    # Конструкторы
    # -------------------------------------------------------------------------

    @classmethod
    def new(
        cls, lo_boundary: Boundary, lo: float, hi: float, hi_boundary: Boundary
    ) -> "RangeSet":
        """RangeSet из одного интервала (InvalidRange при lo > hi)"""
        return cls((Range.new(lo_boundary, lo, hi, hi_boundary),))

    @classmethod
    def closed(cls, lo: float, hi: float) -> "RangeSet":
        return cls((Range.closed(lo, hi),))

    @classmethod
    def from_range(cls, range_: Range) -> "RangeSet":
        return cls((range_,))

    @classmethod
    def empty(cls) -> "RangeSet":
        return cls(())

    @classmethod
    def full(cls) -> "RangeSet":
        """(-Inf, Inf)"""
        return cls.new(Boundary.OPEN, -math.inf, math.inf, Boundary.OPEN)

    @classmethod
    def from_ranges(cls, ranges: Iterable[Range]) -> "RangeSet":
        """
        RangeSet из нескольких интервалов с проверкой инварианта.

        Raises:
            RangeSetInvariantViolation: если интервалы не отсортированы по lo
                или какие-то два из них пересекаются
        """
        items = tuple(ranges)
        for a, b in zip(items, items[1:]):
            if a.lo > b.lo:
                raise RangeSetInvariantViolation(f"Ranges are not sorted by lo: {a} before {b}")
        # Вырожденный (10, 10) может стоять между [0, 10] и [10, 20],
        # поэтому проверяются все пары, а не только соседние.
        for i, a in enumerate(items):
            for b in items[i + 1 :]:
                if a.intersects_with(b):
                    raise RangeSetInvariantViolation(f"Ranges must not intersect: {a} and {b}")
        return cls(items)

    # -------------------------------------------------------------------------
    # Аксессоры (частичные: требуют непустого множества)
    # -------------------------------------------------------------------------

    def _first(self) -> Range:
        if not self.ranges:
            raise EmptyRangeSetError("RangeSet should contain at least one range")
        return self.ranges[0]

    def _last(self) -> Range:
        if not self.ranges:
            raise EmptyRangeSetError("RangeSet should contain at least one range")
        return self.ranges[-1]

    @property
    def lowest_lo(self) -> float:
        return self._first().lo

    @property
    def highest_hi(self) -> float:
        return self._last().hi

    @property
    def lowest_boundary(self) -> Boundary:
        return self._first().lo_boundary

    @property
    def highest_boundary(self) -> Boundary:
        return self._last().hi_boundary

    def is_empty(self) -> bool:
        return not self.ranges

    # -------------------------------------------------------------------------
    # Дополнение
    # -------------------------------------------------------------------------

    def _left_tail(self) -> Optional[Range]:
        """(-Inf, lowest_lo) с инвертированной нижней границей первого интервала"""
        if self.lowest_lo == -math.inf:
            return None
        return Range(Boundary.OPEN, -math.inf, self.lowest_lo, self.lowest_boundary.inverse())

    def _gaps(self) -> list[Range]:
        """Промежутки между соседними интервалами"""
        return [
            Range(a.hi_boundary.inverse(), a.hi, b.lo, b.lo_boundary.inverse())
            for a, b in zip(self.ranges, self.ranges[1:])
        ]

    def _right_tail(self) -> Optional[Range]:
        """(highest_hi, Inf) с инвертированной верхней границей последнего интервала"""
        if self.highest_hi == math.inf:
            return None
        return Range(self.highest_boundary.inverse(), self.highest_hi, math.inf, Boundary.OPEN)

    def inverse(self) -> "RangeSet":
        """
        Дополнение над расширенной вещественной прямой.

        Пустое множество → (-Inf, Inf); (-Inf, Inf) → пустое множество.

        Returns:
            Новый RangeSet, отсортированный по возрастанию
        """
        if not self.ranges:
            return RangeSet.full()

        left = self._left_tail()
        right = self._right_tail()

        new_ranges: list[Range] = []
        if left is not None:
            new_ranges.append(left)
        new_ranges.extend(self._gaps())
        if right is not None:
            new_ranges.append(right)

        return RangeSet(tuple(new_ranges))

    # -------------------------------------------------------------------------
    # Пересечение
    # -------------------------------------------------------------------------

    def intersects_with(self, other: "RangeSet") -> bool:
        # TODO: оба списка отсортированы, можно заменить на однопроходный merge
        return any(x.intersects_with(y) for x in self.ranges for y in other.ranges)

    def intersect(self, other: "RangeSet") -> Optional["RangeSet"]:
        """
        Попарное пересечение всех интервалов.

        Returns:
            RangeSet, отсортированный по lo, или None если пересечение пусто
            (пустой-но-присутствующий RangeSet не возвращается)
        """
        intersected: list[Range] = []
        for x in self.ranges:
            for y in other.ranges:
                r = x.intersect(y)
                if r is not None:
                    intersected.append(r)
        if not intersected:
            return None

        # сортировка стабильна: равные lo сохраняют порядок обхода
        intersected.sort(key=lambda r: r.lo)
        return RangeSet(tuple(intersected))

    # -------------------------------------------------------------------------
    # Протокол коллекции
    # -------------------------------------------------------------------------

    def __iter__(self) -> Iterator[Range]:
        return iter(self.ranges)

    def __len__(self) -> int:
        return len(self.ranges)

    def __bool__(self) -> bool:
        return bool(self.ranges)

    def __contains__(self, value: object) -> bool:
        if not isinstance(value, (int, float)):
            return False
        return any(r.contains_point(value) for r in self.ranges)

    def __str__(self) -> str:
        return " ".join(str(r) for r in self.ranges)

    def __repr__(self) -> str:
        return f"RangeSet({self})"
