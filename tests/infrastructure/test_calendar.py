"""Tests for the zoneinfo/babel calendar capability."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta, timezone
from zoneinfo import ZoneInfo

import pytest

from legtime.domain.timeofday import TimeOfDay
from legtime.domain.types import ZonedMoment
from legtime.infrastructure.calendar import (
    as_civil_date,
    format_pattern,
    format_utc_iso,
    invalid_reason,
    is_valid,
    negotiate_locale,
    normalize_zone_name,
    resolve_moment,
    resolve_zone,
    start_of_day,
    to_utc_instant,
    zoned,
)

VIENNA = ZoneInfo("Europe/Vienna")


class TestResolveZone:
    @pytest.mark.parametrize("name", ["UTC", "utc", "Z", "GMT"])
    def test_utc_aliases(self, name: str) -> None:
        assert resolve_zone(name) is UTC

    def test_iana(self) -> None:
        assert resolve_zone("Europe/Vienna") == VIENNA

    def test_fixed_offset(self) -> None:
        assert resolve_zone("+02:00") == timezone(timedelta(hours=2))
        assert resolve_zone("-0530") == timezone(-timedelta(hours=5, minutes=30))

    def test_local(self) -> None:
        assert resolve_zone("local") is not None
        assert normalize_zone_name(None) == "local"
        assert normalize_zone_name("  ") == "local"

    @pytest.mark.parametrize("name", ["No/Such_Zone", "+25:00", "../etc/passwd"])
    def test_invalid(self, name: str) -> None:
        with pytest.raises(ValueError):
            resolve_zone(name)


class TestParsing:
    def test_instant_with_z(self) -> None:
        assert to_utc_instant("2024-01-15T13:30:00Z") == datetime(2024, 1, 15, 13, 30, tzinfo=UTC)

    def test_instant_with_offset(self) -> None:
        dt = to_utc_instant("2024-01-15T14:30:00+01:00")
        assert dt == datetime(2024, 1, 15, 13, 30, tzinfo=UTC)
        assert dt.tzinfo is UTC

    def test_naive_text_is_utc(self) -> None:
        assert to_utc_instant("2024-01-15T10:00:00") == datetime(2024, 1, 15, 10, tzinfo=UTC)

    def test_datetime_passthrough(self) -> None:
        aware = datetime(2024, 1, 15, 11, 0, tzinfo=VIENNA)
        assert to_utc_instant(aware) == datetime(2024, 1, 15, 10, 0, tzinfo=UTC)

    @pytest.mark.parametrize("value", ["not-a-date", "", None, 12])
    def test_invalid_instant(self, value: object) -> None:
        with pytest.raises(ValueError):
            to_utc_instant(value)

    def test_civil_date_sources(self) -> None:
        assert as_civil_date(date(2024, 1, 15)) == date(2024, 1, 15)
        assert as_civil_date(datetime(2024, 1, 15, 23, 0)) == date(2024, 1, 15)
        assert as_civil_date("2024-01-15") == date(2024, 1, 15)

    def test_civil_date_invalid(self) -> None:
        with pytest.raises(ValueError):
            as_civil_date("2024-02-30")
        with pytest.raises(ValueError):
            as_civil_date(None)

    def test_format_utc_iso(self) -> None:
        dt = datetime(2024, 1, 15, 14, 30, tzinfo=VIENNA)
        assert format_utc_iso(dt) == "2024-01-15T13:30:00Z"


class TestZoned:
    def test_standard_time(self) -> None:
        dt = zoned(date(2024, 1, 15), TimeOfDay(14, 30), VIENNA)
        assert dt.utcoffset() == timedelta(hours=1)

    def test_daylight_time(self) -> None:
        dt = zoned(date(2024, 7, 15), TimeOfDay(14, 30), VIENNA)
        assert dt.utcoffset() == timedelta(hours=2)

    def test_gap_shifts_forward(self) -> None:
        """02:30 does not exist on 2024-03-31 in Vienna; it becomes 03:30 CEST."""
        dt = zoned(date(2024, 3, 31), TimeOfDay(2, 30), VIENNA)
        assert (dt.hour, dt.minute) == (3, 30)
        assert dt.astimezone(UTC) == datetime(2024, 3, 31, 1, 30, tzinfo=UTC)

    def test_overlap_takes_earlier(self) -> None:
        """02:30 happens twice on 2024-10-27 in Vienna; the CEST one wins."""
        dt = zoned(date(2024, 10, 27), TimeOfDay(2, 30), VIENNA)
        assert dt.astimezone(UTC) == datetime(2024, 10, 27, 0, 30, tzinfo=UTC)

    def test_resolve_moment(self) -> None:
        moment = ZonedMoment(date(2024, 1, 15), TimeOfDay(10, 0), "Europe/Vienna")
        assert resolve_moment(moment).astimezone(UTC).hour == 9

    def test_resolve_moment_bad_zone(self) -> None:
        moment = ZonedMoment(date(2024, 1, 15), TimeOfDay(10, 0), "Mars/Olympus")
        with pytest.raises(ValueError):
            resolve_moment(moment)


class TestValidity:
    def test_valid_moment(self) -> None:
        moment = ZonedMoment(date(2024, 1, 15), TimeOfDay(10, 0), "Europe/Vienna")
        assert is_valid(moment)
        assert invalid_reason(moment) is None

    def test_unknown_zone_reason(self) -> None:
        moment = ZonedMoment(date(2024, 1, 15), TimeOfDay(10, 0), "Mars/Olympus")
        assert not is_valid(moment)
        assert "Mars/Olympus" in invalid_reason(moment)

    def test_malformed_fields(self) -> None:
        moment = ZonedMoment("2024-01-15", TimeOfDay(10, 0), "UTC")  # type: ignore[arg-type]
        assert "Malformed moment" in invalid_reason(moment)


class TestDayStart:
    def test_start_of_day(self) -> None:
        dt = datetime(2024, 1, 15, 17, 45, tzinfo=VIENNA)
        assert start_of_day(dt) == datetime(2024, 1, 15, 0, 0, tzinfo=VIENNA)
        assert start_of_day(dt).astimezone(UTC) == datetime(2024, 1, 14, 23, 0, tzinfo=UTC)


class TestLocaleFormatting:
    def test_negotiate_known(self) -> None:
        loc = negotiate_locale("de-DE")
        assert (loc.language, loc.territory) == ("de", "DE")

    def test_negotiate_falls_back_to_language(self) -> None:
        assert negotiate_locale("ja-JA").language == "ja"

    def test_negotiate_unknown(self) -> None:
        with pytest.raises(ValueError):
            negotiate_locale("qq-QQ")

    def test_format_date(self) -> None:
        assert format_pattern(date(2025, 5, 17), "dd. MMM yyyy", "en-GB") == "17. May 2025"

    def test_format_datetime_keeps_zone(self) -> None:
        dt = datetime(2025, 5, 16, 23, 30, tzinfo=UTC).astimezone(VIENNA)
        assert format_pattern(dt, "dd. MMM", "de-DE") == "17. Mai"
