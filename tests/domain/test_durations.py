"""Tests for the duration display format and its parser."""

import math

import pytest

from legtime.domain.durations import (
    coerce_minutes,
    format_minutes,
    leading_int,
    parse_display,
    round_half_up,
    split_minutes,
)


class TestRoundHalfUp:
    @pytest.mark.parametrize(
        "value,expected",
        [(119.5, 120), (118.5, 119), (119.4, 119), (119.6, 120), (0.5, 1), (0.0, 0), (-0.5, 0)],
    )
    def test_rounding(self, value: float, expected: int) -> None:
        assert round_half_up(value) == expected


class TestLeadingInt:
    def test_plain(self) -> None:
        assert leading_int("42") == 42

    def test_trailing_text(self) -> None:
        assert leading_int("42 min") == 42

    def test_leading_whitespace(self) -> None:
        assert leading_int("  07") == 7

    def test_sign(self) -> None:
        assert leading_int("-5") == -5

    def test_decimal_truncated(self) -> None:
        assert leading_int("12.9") == 12

    def test_no_digits(self) -> None:
        assert leading_int("abc") is None
        assert leading_int("") is None


class TestCoerceMinutes:
    def test_int(self) -> None:
        assert coerce_minutes(90) == 90

    def test_numeric_string(self) -> None:
        assert coerce_minutes("120") == 120

    def test_float_truncates(self) -> None:
        assert coerce_minutes(90.7) == 90

    def test_rejects_bool(self) -> None:
        assert coerce_minutes(True) is None

    def test_rejects_nan(self) -> None:
        assert coerce_minutes(math.nan) is None

    def test_rejects_other_types(self) -> None:
        assert coerce_minutes(None) is None
        assert coerce_minutes([90]) is None


class TestFormatMinutes:
    def test_minutes_only(self) -> None:
        assert format_minutes(45, "min", "h") == "45 min"

    def test_zero(self) -> None:
        assert format_minutes(0, "min", "h") == "0 min"

    def test_hours_and_minutes(self) -> None:
        assert format_minutes(90, "min", "h") == "1:30 h"

    def test_zero_padded_minutes(self) -> None:
        assert format_minutes(125, "min", "h") == "2:05 h"

    def test_exact_hour(self) -> None:
        assert format_minutes(60, "min", "h") == "1:00 h"

    def test_negative_span(self) -> None:
        assert format_minutes(-90, "min", "h") == "-1:30 h"

    def test_split(self) -> None:
        assert split_minutes(119) == (1, 59)
        assert split_minutes(120) == (2, 0)


class TestParseDisplay:
    def test_minutes(self) -> None:
        assert parse_display("45 min", "min", "h") == 45

    def test_hours(self) -> None:
        assert parse_display("1:30 h", "min", "h") == 90

    def test_hours_without_space(self) -> None:
        assert parse_display("1:30h", "min", "h") == 90

    def test_hours_without_colon(self) -> None:
        assert parse_display("2 h", "min", "h") == 0

    def test_non_numeric_hours(self) -> None:
        assert parse_display("x:30 h", "min", "h") == 0

    def test_non_numeric_minutes(self) -> None:
        assert parse_display("abc min", "min", "h") == 0

    def test_no_unit(self) -> None:
        assert parse_display("45", "min", "h") == 0

    def test_empty_and_non_string(self) -> None:
        assert parse_display("", "min", "h") == 0
        assert parse_display(None, "min", "h") == 0
        assert parse_display(45, "min", "h") == 0

    def test_empty_unit_is_ignored(self) -> None:
        """An empty suffix would match every string; it must not."""
        assert parse_display("45 min", "min", "") == 45

    def test_german_units(self) -> None:
        assert parse_display("45 Min", "Min", "h") == 45
        assert parse_display("2:15 h", "Min", "h") == 135

    def test_round_trip(self) -> None:
        for total in range(0, 10000, 7):
            assert parse_display(format_minutes(total, "min", "h"), "min", "h") == total
