"""Local wall-clock <-> UTC conversion.

Activity times are configured as local wall-clock values ("09:00" in
Europe/Vienna); the routing backend speaks UTC. These helpers translate
between the two for a given civil date, so DST offsets are taken from
that date rather than from today.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta

import structlog

from legtime.domain.timeofday import parse_time_of_day
from legtime.domain.types import MIDNIGHT_UTC, NO_INSTANT, NO_TIME
from legtime.infrastructure.calendar import (
    as_civil_date,
    format_utc_iso,
    resolve_zone,
    start_of_day,
    to_utc_instant,
    zoned,
)
from legtime.services._helpers import RECOVERABLE_ERRORS, ensure_aware, now_utc

log = structlog.get_logger(__name__)


def _wall_clock(local_time: str, civil_date: object, timezone: str) -> datetime:
    """Aware datetime for *local_time* on *civil_date* in *timezone*."""
    zone = resolve_zone(timezone)
    return zoned(as_civil_date(civil_date), parse_time_of_day(local_time), zone)


def local_time_to_utc_time_of_day(local_time: str, civil_date: object, timezone: str) -> str:
    """Convert a local time on *civil_date* to a UTC ``HH:mm:ss`` string.

    Returns ``"00:00:00"`` on invalid input.
    """
    try:
        return _wall_clock(local_time, civil_date, timezone).astimezone(UTC).strftime("%H:%M:%S")
    except RECOVERABLE_ERRORS as exc:
        log.warning(
            "local_time_to_utc_failed",
            reason=str(exc),
            local_time=local_time,
            civil_date=str(civil_date),
            timezone=timezone,
        )
        return MIDNIGHT_UTC


def local_time_to_utc_instant(local_time: str, civil_date: object, timezone: str) -> str:
    """Convert a local time on *civil_date* to a full UTC ISO-8601 instant.

    Returns ``"0000-00-00T00:00:00Z"`` on invalid input.
    """
    try:
        return format_utc_iso(_wall_clock(local_time, civil_date, timezone))
    except RECOVERABLE_ERRORS as exc:
        log.warning(
            "local_time_to_utc_instant_failed",
            reason=str(exc),
            local_time=local_time,
            civil_date=str(civil_date),
            timezone=timezone,
        )
        return NO_INSTANT


def config_time_to_local_display(config_time: str, civil_date: object, timezone: str) -> str:
    """Reformat a configured time, already in *timezone*, as ``HH:mm``.

    No cross-zone conversion happens; the date and zone only validate the
    moment (and move DST-gap times forward). Returns ``"--:--"`` on
    invalid input.
    """
    try:
        return _wall_clock(config_time, civil_date, timezone).strftime("%H:%M")
    except RECOVERABLE_ERRORS as exc:
        log.warning(
            "config_time_to_local_failed",
            reason=str(exc),
            config_time=config_time,
            civil_date=str(civil_date),
            timezone=timezone,
        )
        return NO_TIME


def utc_instant_to_local_display(iso_instant: str, timezone: str) -> str:
    """Render a UTC instant as ``HH:mm`` wall-clock time in *timezone*.

    Returns ``"--:--"`` on invalid input.
    """
    try:
        return to_utc_instant(iso_instant).astimezone(resolve_zone(timezone)).strftime("%H:%M")
    except RECOVERABLE_ERRORS as exc:
        log.warning(
            "utc_to_local_failed",
            reason=str(exc),
            iso_instant=str(iso_instant),
            timezone=timezone,
        )
        return NO_TIME


def _civil_date_in_zone(value: object, timezone: str) -> date:
    if isinstance(value, datetime):
        return ensure_aware(value).astimezone(resolve_zone(timezone)).date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            return to_utc_instant(value).astimezone(resolve_zone(timezone)).date()
    msg = f"Not a date: {value!r}"
    raise ValueError(msg)


def utc_midnight_of(
    civil_date_input: object,
    fallback_zoned_day: datetime,
    timezone: str = "UTC",
) -> datetime:
    """UTC midnight of the calendar day *civil_date_input* falls on in *timezone*.

    Instants (datetimes, ISO instants) are first viewed in *timezone*;
    plain dates and ``YYYY-MM-DD`` text are taken as-is. When the input is
    missing or invalid, the start of *fallback_zoned_day* in its own zone
    is returned, converted to UTC. If that is not a datetime either, UTC
    midnight of the current UTC day is returned.
    """
    try:
        day = _civil_date_in_zone(civil_date_input, timezone)
        return datetime(day.year, day.month, day.day, tzinfo=UTC)
    except RECOVERABLE_ERRORS as exc:
        log.warning(
            "utc_midnight_fallback",
            reason=str(exc),
            civil_date_input=str(civil_date_input),
            timezone=timezone,
        )
    if isinstance(fallback_zoned_day, datetime):
        try:
            return start_of_day(ensure_aware(fallback_zoned_day)).astimezone(UTC)
        except RECOVERABLE_ERRORS as exc:
            reason = str(exc)
    else:
        reason = f"Fallback is not a datetime: {fallback_zoned_day!r}"
    log.warning("utc_midnight_fallback_invalid", reason=reason)
    today = now_utc().date()
    return datetime(today.year, today.month, today.day, tzinfo=UTC)


def add_minutes_to_instant(iso_instant: str, minutes: int) -> str:
    """Shift a UTC instant by *minutes* (negative moves backwards).

    Unlike the display helpers this is arithmetic, so bad input raises.

    Raises:
        ValueError: If *iso_instant* is not a valid ISO-8601 instant.
    """
    return format_utc_iso(to_utc_instant(iso_instant) + timedelta(minutes=minutes))
