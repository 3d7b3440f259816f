"""Default activity date selection.

When the widget opens it preselects a date: today, unless there is no
longer time to get there, do the activity, and finish before the
activity's latest end time. A fixed travel/preparation buffer is
subtracted on top of the activity duration.
"""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta

import structlog

from legtime.domain.durations import coerce_minutes
from legtime.domain.timeofday import parse_time_of_day
from legtime.infrastructure.calendar import resolve_zone, zoned
from legtime.services._helpers import RECOVERABLE_ERRORS, ensure_aware, now_utc

log = structlog.get_logger(__name__)

TRAVEL_BUFFER_MINUTES = 60


def select_default_date(
    timezone: str,
    latest_end_time: str,
    duration_minutes: int | str,
    *,
    now: datetime | None = None,
    buffer_minutes: int = TRAVEL_BUFFER_MINUTES,
) -> date:
    """Pick today or tomorrow as the default activity date.

    threshold = today's *latest_end_time* in *timezone*
                - *duration_minutes* - *buffer_minutes*

    Tomorrow is chosen only when *now* is strictly after the threshold.
    Both candidates are civil dates in *timezone*.

    Args:
        timezone: IANA zone the activity is configured in.
        latest_end_time: ``"HH:MM"`` or ``"HH:MM:SS"``.
        duration_minutes: Activity length as an int or numeric string.
        now: Injected clock; defaults to the real current instant. Naive
            values are read as UTC.
        buffer_minutes: Travel/preparation allowance.

    Returns:
        The default civil date. On any failure, today's date in the
        system's local zone.
    """
    current = ensure_aware(now) if now is not None else now_utc()
    try:
        zone = resolve_zone(timezone)
        local_now = current.astimezone(zone)
        end_time = parse_time_of_day(latest_end_time)
        duration = coerce_minutes(duration_minutes)
        if duration is None:
            msg = f"Duration is not numeric: {duration_minutes!r}"
            raise ValueError(msg)

        latest_end_today = zoned(local_now.date(), end_time, zone)
        threshold = latest_end_today.astimezone(UTC) - timedelta(
            minutes=duration + buffer_minutes
        )
        if current.astimezone(UTC) > threshold:
            return local_now.date() + timedelta(days=1)
        return local_now.date()
    except RECOVERABLE_ERRORS as exc:
        log.warning(
            "select_default_date_failed",
            reason=str(exc),
            timezone=timezone,
            latest_end_time=latest_end_time,
            duration_minutes=duration_minutes,
        )
        return current.astimezone().date()
