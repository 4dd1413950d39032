"""
Intervals — Range и Boundary для алгебры разбиений

Основа генератора тестовых входов: один непрерывный интервал над вещественными
значениями с независимо открытыми/закрытыми концами.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. lo <= hi (иначе InvalidRange)
2. NaN никогда не является концом интервала (IntervalConsistencyError)
3. Range immutable: все операции возвращают новые экземпляры
4. ±inf по соглашению идут с OPEN границей, нормализация не выполняется

ПРАВИЛО СОВПАДАЮЩИХ КОНЦОВ:
    При равных lo (или hi) у двух операндов пересечения граница результата
    CLOSED только если обе границы CLOSED.
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Final, Optional, Protocol, TypeVar

# =============================================================================
# NOTATION CONSTANTS
# =============================================================================

POS_INF_TOKEN: Final[str] = "Inf"
NEG_INF_TOKEN: Final[str] = "-Inf"


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidRange(ValueError):
    """
    Попытка построить Range с lo > hi.

    Единственная восстанавливаемая ошибка алгебры: вызывающий код трактует её
    как отклонённую конфигурацию.
    """

    pass


class IntervalConsistencyError(Exception):
    """
    Нарушение внутренней согласованности (NaN, нарушенный инвариант RangeSet).

    Это ошибка программирования выше по стеку, а не пользовательская ошибка.
    """

    pass


# =============================================================================
# BOUNDARY
# =============================================================================


class Boundary(str, Enum):
    """Граница интервала: OPEN (конец исключён) или CLOSED (конец включён)"""

    OPEN = "open"
    CLOSED = "closed"

    def inverse(self) -> "Boundary":
        """OPEN ↔ CLOSED"""
        if self is Boundary.OPEN:
            return Boundary.CLOSED
        return Boundary.OPEN


def _both_closed(a: Boundary, b: Boundary) -> Boundary:
    if a is Boundary.CLOSED and b is Boundary.CLOSED:
        return Boundary.CLOSED
    return Boundary.OPEN


# =============================================================================
# INTERSECTABLE CONTRACT
# =============================================================================

T = TypeVar("T")


class Intersectable(Protocol[T]):
    """Общий контракт Range и RangeSet."""

    def intersects_with(self, other: T) -> bool: ...

    def intersect(self, other: T) -> Optional[T]: ...


# =============================================================================
# RENDERING
# =============================================================================


def format_endpoint(value: float) -> str:
    """
    Отображение конца интервала в нотации.

    Examples:
        >>> format_endpoint(5.0)
        '5'
        >>> format_endpoint(-math.inf)
        '-Inf'
        >>> format_endpoint(2.5)
        '2.5'
    """
    if value == math.inf:
        return POS_INF_TOKEN
    if value == -math.inf:
        return NEG_INF_TOKEN
    if float(value).is_integer():
        return str(int(value))
    return repr(float(value))


# =============================================================================
# RANGE
# =============================================================================


@dataclass(frozen=True)
class Range:
    """
    Один непрерывный интервал.

    Прямой вызов конструктора проверяет инвариант так же, как Range.new(),
    поэтому ни один producer не может создать lo > hi.
    """

    lo_boundary: Boundary
    lo: float
    hi: float
    hi_boundary: Boundary

    def __post_init__(self) -> None:
        if math.isnan(self.lo) or math.isnan(self.hi):
            raise IntervalConsistencyError(
                f"NaN is not a valid range endpoint: lo={self.lo}, hi={self.hi}"
            )
        if self.lo > self.hi:
            raise InvalidRange(f"Invalid range: lo ({self.lo}) is greater than hi ({self.hi})")

    @classmethod
    def new(cls, lo_boundary: Boundary, lo: float, hi: float, hi_boundary: Boundary) -> "Range":
        """
        Валидированный конструктор.

        Raises:
            InvalidRange: если lo > hi
        """
        return cls(lo_boundary, float(lo), float(hi), hi_boundary)

    @classmethod
    def closed(cls, lo: float, hi: float) -> "Range":
        """[lo, hi]"""
        return cls.new(Boundary.CLOSED, lo, hi, Boundary.CLOSED)

    @classmethod
    def closed_point(cls, value: float) -> "Range":
        """[value, value]"""
        return cls.new(Boundary.CLOSED, value, value, Boundary.CLOSED)

    def contains_point(self, value: float) -> bool:
        return (
            (self.lo < value < self.hi)
            or (value == self.lo and self.lo_boundary is Boundary.CLOSED)
            or (value == self.hi and self.hi_boundary is Boundary.CLOSED)
        )

    def intersects_with(self, other: "Range") -> bool:
        """
        Есть ли у двух интервалов общая точка.

        Касание в одной точке даёт пересечение только если обе границы в этой
        точке CLOSED: [10, 10] ∩ [10, 20] непусто, (10, 20] ∩ [0, 10] пусто.
        """
        doesnt_intersect = (
            self.lo > other.hi
            or other.lo > self.hi
            or (
                self.lo == other.hi
                and (self.lo_boundary is Boundary.OPEN or other.hi_boundary is Boundary.OPEN)
            )
            or (
                other.lo == self.hi
                and (other.lo_boundary is Boundary.OPEN or self.hi_boundary is Boundary.OPEN)
            )
        )
        return not doesnt_intersect

    def intersect(self, other: "Range") -> Optional["Range"]:
        """
        Пересечение двух интервалов.

        Returns:
            Новый Range или None, если пересечения нет
        """
        if not self.intersects_with(other):
            return None

        if self.lo > other.lo:
            lo, lo_boundary = self.lo, self.lo_boundary
        elif other.lo > self.lo:
            lo, lo_boundary = other.lo, other.lo_boundary
        else:
            lo, lo_boundary = self.lo, _both_closed(self.lo_boundary, other.lo_boundary)

        if self.hi < other.hi:
            hi, hi_boundary = self.hi, self.hi_boundary
        elif other.hi < self.hi:
            hi, hi_boundary = other.hi, other.hi_boundary
        else:
            hi, hi_boundary = self.hi, _both_closed(self.hi_boundary, other.hi_boundary)

        return Range(lo_boundary, lo, hi, hi_boundary)

    def __str__(self) -> str:
        lo_bracket = "[" if self.lo_boundary is Boundary.CLOSED else "("
        hi_bracket = "]" if self.hi_boundary is Boundary.CLOSED else ")"
        return f"{lo_bracket}{format_endpoint(self.lo)}, {format_endpoint(self.hi)}{hi_bracket}"

    def __repr__(self) -> str:
        return f"Range({self})"
