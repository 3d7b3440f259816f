"""Date display formatting.

Short and full dates are rendered with CLDR month names for the widget
language (``"17. Mai"``, ``"17. May 2025"``).
"""

from __future__ import annotations

from datetime import UTC, date, datetime

import structlog

from legtime.domain.locales import locale_for_language
from legtime.domain.types import NO_DATE
from legtime.infrastructure.calendar import format_pattern, resolve_zone, to_utc_instant
from legtime.services._helpers import RECOVERABLE_ERRORS, ensure_aware

log = structlog.get_logger(__name__)

SHORT_DATE_PATTERN = "dd. MMM"
FULL_DATE_PATTERN = "dd. MMM yyyy"


def _utc_fields_iso(value: date) -> str:
    if isinstance(value, datetime):
        value = ensure_aware(value).astimezone(UTC)
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def civil_date_to_iso_date(value: date | datetime | None, timezone: str = "utc") -> str:
    """Format a date value as ``yyyy-MM-dd`` as seen in *timezone*.

    Datetimes are converted to *timezone* first (naive ones count as UTC);
    plain dates are already civil and are formatted unchanged. If the zone
    cannot be resolved the UTC fields are used instead. Returns ``""`` for
    anything that is not a date.
    """
    if not isinstance(value, date):
        return NO_DATE
    if not isinstance(value, datetime):
        return value.isoformat()
    try:
        return ensure_aware(value).astimezone(resolve_zone(timezone)).date().isoformat()
    except RECOVERABLE_ERRORS as exc:
        log.warning("iso_date_zone_fallback", reason=str(exc), timezone=timezone)
        return _utc_fields_iso(value)


def instant_to_localized_short_date(
    iso_instant: object,
    timezone: str,
    language: str | None,
    pattern: str = SHORT_DATE_PATTERN,
) -> str:
    """Render a UTC instant as a localized short date in *timezone*.

    Returns ``""`` for an invalid instant, zone, or missing language.
    """
    if not isinstance(language, str) or not language:
        return NO_DATE
    try:
        local = to_utc_instant(iso_instant).astimezone(resolve_zone(timezone))
        return format_pattern(local, pattern, locale_for_language(language))
    except RECOVERABLE_ERRORS as exc:
        log.warning(
            "short_date_failed",
            reason=str(exc),
            iso_instant=str(iso_instant),
            timezone=timezone,
            language=language,
        )
        return NO_DATE


def date_to_localized_full_date(
    value: date | datetime | None,
    language: str | None,
    pattern: str = FULL_DATE_PATTERN,
) -> str:
    """Render a date as ``dd. MMM yyyy`` (or *pattern*) in the widget language.

    The value already names the intended calendar day: datetimes are read
    in UTC, never reinterpreted per zone. Returns ``""`` on invalid input.
    """
    if not isinstance(value, date) or not isinstance(language, str) or not language:
        return NO_DATE
    try:
        day = ensure_aware(value).astimezone(UTC).date() if isinstance(value, datetime) else value
        return format_pattern(day, pattern, locale_for_language(language))
    except RECOVERABLE_ERRORS as exc:
        log.warning("full_date_failed", reason=str(exc), value=str(value), language=language)
        return NO_DATE
