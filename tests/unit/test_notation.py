"""
Тесты для текстовой нотации интервалов

Проверяет:
1. Разбор одного интервала (границы, бесконечности, пробелы)
2. Разбор последовательности интервалов
3. Ошибки нотации и проброс InvalidRange / RangeSetInvariantViolation
4. Отображение обратно в нотацию
"""

import math

import pytest

from src.core.math.intervals import Boundary, InvalidRange, Range
from src.core.math.range_set import RangeSet, RangeSetInvariantViolation
from src.parser.notation import (
    NotationConfig,
    NotationError,
    format_range,
    format_range_set,
    parse_range,
    parse_range_set,
)


# =============================================================================
# PARSE RANGE
# =============================================================================


class TestParseRange:
    """Тесты для parse_range"""

    @pytest.mark.parametrize(
        "text,expected",
        [
            ("[5, 10]", Range(Boundary.CLOSED, 5.0, 10.0, Boundary.CLOSED)),
            ("(5, 10]", Range(Boundary.OPEN, 5.0, 10.0, Boundary.CLOSED)),
            ("[5, 10)", Range(Boundary.CLOSED, 5.0, 10.0, Boundary.OPEN)),
            ("(5, 10)", Range(Boundary.OPEN, 5.0, 10.0, Boundary.OPEN)),
            ("(-Inf, 10)", Range(Boundary.OPEN, -math.inf, 10.0, Boundary.OPEN)),
            ("(-Inf, Inf)", Range(Boundary.OPEN, -math.inf, math.inf, Boundary.OPEN)),
            ("[-2.5, 1e3]", Range(Boundary.CLOSED, -2.5, 1000.0, Boundary.CLOSED)),
        ],
    )
    def test_valid(self, text: str, expected: Range) -> None:
        assert parse_range(text) == expected

    def test_whitespace_tolerant(self) -> None:
        assert parse_range("  [ 5 ,10 ]  ") == Range.closed(5, 10)

    @pytest.mark.parametrize("token", ["inf", "INF", "+inf", "infinity"])
    def test_infinity_spellings(self, token: str) -> None:
        assert parse_range(f"(0, {token})").hi == math.inf

    def test_custom_infinity_tokens(self) -> None:
        config = NotationConfig(pos_inf_token="oo", neg_inf_token="-oo")
        assert parse_range("(-oo, oo)", config) == parse_range("(-Inf, Inf)")

    @pytest.mark.parametrize(
        "text",
        ["", "5, 10", "[5 10]", "[5, 10", "{5, 10}", "[a, 10]", "[5, 10] [20, 30]", "[nan, 1]"],
    )
    def test_invalid_notation(self, text: str) -> None:
        with pytest.raises(NotationError):
            parse_range(text)

    def test_lo_greater_than_hi(self) -> None:
        with pytest.raises(InvalidRange):
            parse_range("[10, 5]")


# =============================================================================
# PARSE RANGE SET
# =============================================================================


class TestParseRangeSet:
    """Тесты для parse_range_set"""

    def test_empty_string_is_empty_set(self) -> None:
        assert parse_range_set("") == RangeSet.empty()
        assert parse_range_set("   ") == RangeSet.empty()

    def test_multiple_ranges(self) -> None:
        s = parse_range_set("(-Inf, 10)   [20, 30)\t(40, Inf)")
        assert s.ranges == (
            parse_range("(-Inf, 10)"),
            parse_range("[20, 30)"),
            parse_range("(40, Inf)"),
        )

    def test_garbage_between_ranges(self) -> None:
        with pytest.raises(NotationError):
            parse_range_set("[0, 1] and [2, 3]")

    def test_unsorted_rejected(self) -> None:
        with pytest.raises(RangeSetInvariantViolation):
            parse_range_set("[20, 30] [0, 10]")

    def test_overlapping_rejected(self) -> None:
        with pytest.raises(RangeSetInvariantViolation):
            parse_range_set("[0, 10] [5, 20]")


# =============================================================================
# FORMATTING
# =============================================================================


class TestFormatting:
    """Отображение в нотации"""

    def test_format_range(self) -> None:
        assert format_range(Range.closed(5, 10)) == "[5, 10]"
        assert format_range(parse_range("(3, 67)")) == "(3, 67)"

    def test_format_range_set(self) -> None:
        text = "[-42, 3) (3, 67) (100, 101) [205, 607] (700, Inf)"
        assert format_range_set(parse_range_set(text)) == text

    def test_format_empty_set(self) -> None:
        assert format_range_set(RangeSet.empty()) == ""
