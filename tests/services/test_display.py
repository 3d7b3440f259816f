"""Tests for localized date display."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone

import pytest

from legtime.services.display import (
    civil_date_to_iso_date,
    date_to_localized_full_date,
    instant_to_localized_short_date,
)


class TestCivilDateToIsoDate:
    def test_plain_date(self) -> None:
        assert civil_date_to_iso_date(date(2024, 1, 5)) == "2024-01-05"

    def test_datetime_in_utc(self) -> None:
        value = datetime(2024, 1, 15, 23, 30, tzinfo=UTC)
        assert civil_date_to_iso_date(value) == "2024-01-15"

    def test_datetime_in_zone(self) -> None:
        value = datetime(2024, 1, 15, 23, 30, tzinfo=UTC)
        assert civil_date_to_iso_date(value, "Europe/Vienna") == "2024-01-16"

    def test_naive_is_utc(self) -> None:
        value = datetime(2024, 1, 15, 23, 30)
        assert civil_date_to_iso_date(value, "America/New_York") == "2024-01-15"

    def test_bad_zone_uses_utc_fields(self) -> None:
        value = datetime(2024, 1, 15, 1, 0, tzinfo=timezone(timedelta(hours=2)))
        assert civil_date_to_iso_date(value, "Bad/Zone") == "2024-01-14"

    @pytest.mark.parametrize("value", [None, "2024-01-15", 20240115])
    def test_not_a_date(self, value) -> None:
        assert civil_date_to_iso_date(value) == ""


class TestInstantToLocalizedShortDate:
    def test_german(self) -> None:
        result = instant_to_localized_short_date("2025-05-17T08:00:00Z", "Europe/Vienna", "DE")
        assert result == "17. Mai"

    def test_english(self) -> None:
        result = instant_to_localized_short_date("2025-05-17T08:00:00Z", "Europe/Vienna", "EN")
        assert result == "17. May"

    def test_zone_moves_day(self) -> None:
        result = instant_to_localized_short_date("2025-05-16T23:30:00Z", "Europe/Vienna", "EN")
        assert result == "17. May"

    def test_custom_pattern(self) -> None:
        result = instant_to_localized_short_date(
            "2025-05-17T08:00:00Z", "UTC", "EN", pattern="dd. MMM yyyy"
        )
        assert result == "17. May 2025"

    @pytest.mark.parametrize("language", ["", None])
    def test_missing_language(self, language) -> None:
        assert instant_to_localized_short_date("2025-05-17T08:00:00Z", "UTC", language) == ""

    def test_invalid_instant(self) -> None:
        assert instant_to_localized_short_date("invalid", "UTC", "EN") == ""

    def test_invalid_zone(self) -> None:
        assert instant_to_localized_short_date("2025-05-17T08:00:00Z", "Bad/Zone", "EN") == ""


class TestDateToLocalizedFullDate:
    def test_english(self) -> None:
        assert date_to_localized_full_date(date(2025, 5, 17), "EN") == "17. May 2025"

    def test_german(self) -> None:
        assert date_to_localized_full_date(date(2025, 3, 3), "DE") == "03. März 2025"

    def test_datetime_read_in_utc(self) -> None:
        value = datetime(2025, 5, 17, 0, 30, tzinfo=timezone(timedelta(hours=2)))
        assert date_to_localized_full_date(value, "EN") == "16. May 2025"

    def test_missing_language(self) -> None:
        assert date_to_localized_full_date(date(2025, 5, 17), "") == ""

    def test_not_a_date(self) -> None:
        assert date_to_localized_full_date("2025-05-17", "EN") == ""


class TestNonStringLanguage:
    def test_short_date(self) -> None:
        assert instant_to_localized_short_date("2025-05-17T08:00:00Z", "UTC", 5) == ""

    def test_full_date(self) -> None:
        assert date_to_localized_full_date(date(2025, 5, 17), 5) == ""


class TestFullDatePattern:
    def test_custom_pattern(self) -> None:
        assert date_to_localized_full_date(date(2025, 5, 17), "EN", "d MMM yyyy") == "17 May 2025"


class TestEarlyYears:
    def test_iso_date_pads_year(self) -> None:
        assert civil_date_to_iso_date(datetime(99, 1, 1, tzinfo=UTC)) == "0099-01-01"
