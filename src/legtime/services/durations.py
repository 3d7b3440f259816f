"""Duration computation and display.

Durations are shown as ``"45 min"`` or ``"1:30 h"`` with unit suffixes
from the host's translation function. See :mod:`legtime.domain.durations`
for the format itself.
"""

from __future__ import annotations

from datetime import UTC, datetime

import structlog

from legtime.domain.durations import (
    coerce_minutes,
    format_minutes,
    parse_display,
    round_half_up,
    split_minutes,
)
from legtime.domain.types import (
    END_BEFORE_START_FALLBACK,
    KEY_END_BEFORE_START,
    KEY_HOURS_SHORT,
    KEY_MINUTES_SHORT,
    NO_DURATION,
    DurationResult,
    Translator,
    ZonedMoment,
)
from legtime.infrastructure.calendar import resolve_moment, to_utc_instant
from legtime.services._helpers import RECOVERABLE_ERRORS

log = structlog.get_logger(__name__)


def _units(t: Translator) -> tuple[str, str]:
    return str(t(KEY_MINUTES_SHORT)), str(t(KEY_HOURS_SHORT))


def _minutes_between(start: datetime, end: datetime) -> int:
    # Same-tzinfo datetimes subtract as naive wall time; go through UTC.
    start, end = start.astimezone(UTC), end.astimezone(UTC)
    return round_half_up((end - start).total_seconds() / 60)


def instant_diff_display(start_instant: object, end_instant: object, t: Translator) -> str:
    """Elapsed time between two UTC instants as display text.

    Returns ``"--"`` when either instant cannot be parsed.
    """
    try:
        start = to_utc_instant(start_instant)
        end = to_utc_instant(end_instant)
    except RECOVERABLE_ERRORS as exc:
        log.warning(
            "instant_diff_failed",
            reason=str(exc),
            start=str(start_instant),
            end=str(end_instant),
        )
        return NO_DURATION
    minutes_unit, hours_unit = _units(t)
    return format_minutes(_minutes_between(start, end), minutes_unit, hours_unit)


def _resolve(moment: ZonedMoment | datetime | None) -> datetime:
    if isinstance(moment, ZonedMoment):
        return resolve_moment(moment).astimezone(UTC)
    if isinstance(moment, datetime) and moment.tzinfo is not None:
        return moment.astimezone(UTC)
    msg = f"Not a zoned moment: {moment!r}"
    raise ValueError(msg)


def zoned_diff(
    start: ZonedMoment | datetime | None,
    end: ZonedMoment | datetime | None,
    t: Translator,
) -> DurationResult:
    """Duration between two zoned wall-clock moments.

    Accepts ZonedMoment values or aware datetimes. An invalid moment gives
    ``text="--"``; *end* before *start* gives the translated
    ``errors.endDateBeforeStart`` text. Both carry zeroed numbers, so
    callers detect the condition by the text alone.
    """
    try:
        start_dt = _resolve(start)
        end_dt = _resolve(end)
    except RECOVERABLE_ERRORS as exc:
        log.warning("zoned_diff_invalid_moment", reason=str(exc), start=str(start), end=str(end))
        return DurationResult.empty()

    if end_dt < start_dt:
        error_text = t(KEY_END_BEFORE_START)
        if not isinstance(error_text, str) or not error_text:
            error_text = END_BEFORE_START_FALLBACK
        log.info("zoned_diff_end_before_start", start=start_dt.isoformat(), end=end_dt.isoformat())
        return DurationResult.empty(error_text)

    total = _minutes_between(start_dt, end_dt)
    hours, minutes = split_minutes(total)
    minutes_unit, hours_unit = _units(t)
    return DurationResult(
        text=format_minutes(total, minutes_unit, hours_unit),
        hours=hours,
        minutes=minutes,
        total_minutes=total,
    )


def minutes_to_display(total_minutes: object, t: Translator) -> str:
    """Render a minute count (int or numeric string) as display text.

    Returns ``"--"`` unless the input reads as a non-negative integer.
    """
    minutes = coerce_minutes(total_minutes)
    if minutes is None or minutes < 0:
        log.debug("minutes_to_display_rejected", value=repr(total_minutes))
        return NO_DURATION
    minutes_unit, hours_unit = _units(t)
    return format_minutes(minutes, minutes_unit, hours_unit)


def parse_display_to_minutes(duration_text: object, t: Translator) -> int:
    """Parse display text (``"45 min"``, ``"1:30 h"``) back into minutes.

    Returns 0 for anything that is not recognizable display text.
    """
    minutes_unit, hours_unit = _units(t)
    return parse_display(duration_text, minutes_unit, hours_unit)
