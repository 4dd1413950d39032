"""
Core math modules

Интервальная алгебра: Range, RangeSet, пересечение и дополнение.
"""

# Intervals
from src.core.math.intervals import (
    NEG_INF_TOKEN,
    POS_INF_TOKEN,
    Boundary,
    Intersectable,
    IntervalConsistencyError,
    InvalidRange,
    Range,
    format_endpoint,
)

# Range sets
from src.core.math.range_set import (
    EmptyRangeSetError,
    RangeSet,
    RangeSetInvariantViolation,
)

__all__ = [
    # Intervals — Constants
    "NEG_INF_TOKEN",
    "POS_INF_TOKEN",
    # Intervals — Exceptions
    "IntervalConsistencyError",
    "InvalidRange",
    # Intervals — Types
    "Boundary",
    "Intersectable",
    "Range",
    # Intervals — Functions
    "format_endpoint",
    # Range sets — Exceptions
    "EmptyRangeSetError",
    "RangeSetInvariantViolation",
    # Range sets — Types
    "RangeSet",
]
