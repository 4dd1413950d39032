"""
Notation — текстовая нотация интервалов

Формат одного интервала:  <[|(><lo>, <hi><]|)>
    [  / ]: CLOSED граница
    (  / ): OPEN граница
    -Inf / Inf: бесконечности

RangeSet записывается как последовательность интервалов через пробелы,
по возрастанию: "(-Inf, 10) [20, 30) (40, Inf)". Пустая строка означает пустое
множество.
"""

import logging
import math
import re
from dataclasses import dataclass
from typing import Optional

from src.core.math.intervals import (
    NEG_INF_TOKEN,
    POS_INF_TOKEN,
    Boundary,
    Range,
)
from src.core.math.range_set import RangeSet

logger = logging.getLogger(__name__)


# =============================================================================
# CONFIG
# =============================================================================


@dataclass(frozen=True)
class NotationConfig:
    """
    Настройки нотации.

    Токены бесконечности сравниваются без учёта регистра. "inf", "+inf" и
    "infinity" принимаются всегда через float().
    """

    pos_inf_token: str = POS_INF_TOKEN
    neg_inf_token: str = NEG_INF_TOKEN


DEFAULT_NOTATION_CONFIG = NotationConfig()


class NotationError(ValueError):
    """Строка не соответствует нотации интервалов."""

    pass


# =============================================================================
# PARSING
# =============================================================================

_NUMBER = r"[^\s,\[\]()]+"
_RANGE_RE = re.compile(
    rf"\s*(?P<lo_b>[\[(])\s*(?P<lo>{_NUMBER})\s*,\s*(?P<hi>{_NUMBER})\s*(?P<hi_b>[\])])"
)


def _parse_endpoint(token: str, config: NotationConfig) -> float:
    lowered = token.lower()
    if lowered == config.pos_inf_token.lower():
        return float("inf")
    if lowered == config.neg_inf_token.lower():
        return float("-inf")

    try:
        value = float(token)
    except ValueError:
        raise NotationError(f"Invalid range endpoint: {token!r}") from None

    if math.isnan(value):
        raise NotationError(f"NaN is not a valid range endpoint: {token!r}")
    return value


def _match_to_range(match: "re.Match[str]", config: NotationConfig) -> Range:
    lo_boundary = Boundary.CLOSED if match.group("lo_b") == "[" else Boundary.OPEN
    hi_boundary = Boundary.CLOSED if match.group("hi_b") == "]" else Boundary.OPEN
    lo = _parse_endpoint(match.group("lo"), config)
    hi = _parse_endpoint(match.group("hi"), config)
    return Range.new(lo_boundary, lo, hi, hi_boundary)


def parse_range(text: str, config: Optional[NotationConfig] = None) -> Range:
    """
    Разбор одного интервала.

    Args:
        text: Например "[5, 10)" или "(-Inf, 3]"
        config: Настройки нотации (default: DEFAULT_NOTATION_CONFIG)

    Returns:
        Range

    Raises:
        NotationError: Если строка не является одним интервалом
        InvalidRange: Если lo > hi

    Examples:
        >>> str(parse_range("[5, 10)"))
        '[5, 10)'
    """
    config = config or DEFAULT_NOTATION_CONFIG
    match = _RANGE_RE.fullmatch(text.strip())
    if match is None:
        raise NotationError(f"Invalid range notation: {text!r}")
    return _match_to_range(match, config)


def parse_range_set(text: str, config: Optional[NotationConfig] = None) -> RangeSet:
    """
    Разбор последовательности интервалов через пробелы.

    Raises:
        NotationError: Если между интервалами есть посторонний текст
        InvalidRange: Если у какого-то интервала lo > hi
        RangeSetInvariantViolation: Если интервалы не отсортированы или пересекаются
    """
    config = config or DEFAULT_NOTATION_CONFIG
    ranges: list[Range] = []
    pos = 0
    stripped = text.strip()

    while pos < len(stripped):
        match = _RANGE_RE.match(stripped, pos)
        if match is None:
            raise NotationError(
                f"Invalid range set notation at position {pos}: {stripped[pos:]!r}"
            )
        ranges.append(_match_to_range(match, config))
        pos = match.end()
        while pos < len(stripped) and stripped[pos].isspace():
            pos += 1

    logger.debug("Parsed %d range(s) from %r", len(ranges), text)
    return RangeSet.from_ranges(ranges)


# =============================================================================
# RENDERING
# =============================================================================


def format_range(range_: Range) -> str:
    """[5, 10) — та же строка, что и str(range_)"""
    return str(range_)


def format_range_set(range_set: RangeSet) -> str:
    """Интервалы через один пробел; пустое множество — пустая строка"""
    return str(range_set)
