"""Tests for shared value types."""

from datetime import date

import pytest
from pydantic import ValidationError

from legtime.domain.timeofday import TimeOfDay
from legtime.domain.types import NO_DURATION, DurationResult, ZonedMoment


class TestDurationResult:
    def test_construction(self) -> None:
        result = DurationResult(text="1:30 h", hours=1, minutes=30, total_minutes=90)
        assert result.total_minutes == 90

    def test_empty(self) -> None:
        result = DurationResult.empty()
        assert result.text == NO_DURATION
        assert (result.hours, result.minutes, result.total_minutes) == (0, 0, 0)

    def test_total_must_match(self) -> None:
        with pytest.raises(ValidationError):
            DurationResult(text="x", hours=1, minutes=30, total_minutes=91)

    def test_minutes_bounded(self) -> None:
        with pytest.raises(ValidationError):
            DurationResult(text="x", hours=0, minutes=60, total_minutes=60)

    def test_frozen(self) -> None:
        result = DurationResult.empty()
        with pytest.raises(ValidationError):
            result.text = "changed"  # type: ignore[misc]


class TestZonedMoment:
    def test_value_equality(self) -> None:
        a = ZonedMoment(date(2024, 1, 15), TimeOfDay(10, 0), "UTC")
        b = ZonedMoment(date(2024, 1, 15), TimeOfDay(10, 0), "UTC")
        assert a == b
