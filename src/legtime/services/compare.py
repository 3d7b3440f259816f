"""Pick the later or earlier of two ``HH:mm`` wall-clock times."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime

import structlog

from legtime.domain.timeofday import parse_hhmm
from legtime.domain.types import NO_TIME
from legtime.infrastructure.calendar import REFERENCE_DATE, resolve_zone, zoned
from legtime.services._helpers import RECOVERABLE_ERRORS

log = structlog.get_logger(__name__)


def _pick(
    time_a: str,
    time_b: str,
    timezone: str,
    choose: Callable[[datetime, datetime], datetime],
    op: str,
) -> str:
    try:
        zone = resolve_zone(timezone)
        a = zoned(REFERENCE_DATE, parse_hhmm(time_a), zone)
        b = zoned(REFERENCE_DATE, parse_hhmm(time_b), zone)
    except RECOVERABLE_ERRORS as exc:
        log.warning(
            f"{op}_failed", reason=str(exc), time_a=time_a, time_b=time_b, timezone=timezone
        )
        return time_a or time_b or NO_TIME
    return choose(a, b).strftime("%H:%M")


def later_of(time_a: str, time_b: str, timezone: str) -> str:
    """The later of two ``HH:mm`` times, normalized to ``HH:mm``.

    On a parse failure returns whichever input is non-empty, else ``"--:--"``.
    """
    return _pick(time_a, time_b, timezone, lambda a, b: a if a > b else b, "later_of")


def earlier_of(time_a: str, time_b: str, timezone: str) -> str:
    """The earlier of two ``HH:mm`` times, normalized to ``HH:mm``.

    On a parse failure returns whichever input is non-empty, else ``"--:--"``.
    """
    return _pick(time_a, time_b, timezone, lambda a, b: a if a < b else b, "earlier_of")
