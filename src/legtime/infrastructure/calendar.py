"""Calendar/timezone capability backed by ``zoneinfo`` and ``babel``.

Everything zone- or locale-aware funnels through this module so the
service layer never touches tzinfo objects or CLDR data directly.

DST policy for wall-clock moments that a transition makes invalid:
  - non-existent (spring-forward gap): read with the pre-transition offset,
    which shifts the moment forward past the gap (02:30 -> 03:30 in Vienna);
  - ambiguous (fall-back overlap): the earlier occurrence wins (``fold=0``).

All helpers raise ``ValueError`` on bad input; the service layer turns
those into sentinels.
"""

from __future__ import annotations

import logging
import re
from datetime import UTC, date, datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from babel import Locale, UnknownLocaleError
from babel.dates import format_date, format_datetime

from legtime.domain.timeofday import TimeOfDay
from legtime.domain.types import ZonedMoment

logger = logging.getLogger(__name__)

_OFFSET_RE = re.compile(r"^([+-])(\d{2}):?(\d{2})$")

# Anchor for comparisons where only the time of day matters.
REFERENCE_DATE = date(2000, 1, 1)


# --- Zones ---


def normalize_zone_name(name: str | None) -> str:
    """Canonicalize a zone identifier.

    ``None``/blank/"local"/"system" -> "local"; "utc"/"z"/"gmt" -> "UTC";
    anything else (IANA names, fixed offsets) is returned stripped.
    """
    if name is None:
        return "local"
    s = str(name).strip()
    if not s:
        return "local"
    low = s.lower()
    if low in {"local", "system"}:
        return "local"
    if low in {"utc", "z", "gmt", "etc/utc"}:
        return "UTC"
    return s


def resolve_zone(name: str | None) -> tzinfo:
    """Resolve a zone identifier into a tzinfo.

    Raises:
        ValueError: For unknown IANA names or out-of-range offsets.
    """
    zone_name = normalize_zone_name(name)

    if zone_name == "UTC":
        return UTC
    if zone_name == "local":
        return datetime.now().astimezone().tzinfo or UTC

    m = _OFFSET_RE.match(zone_name)
    if m:
        sign_s, hh_s, mm_s = m.groups()
        hh, mm = int(hh_s), int(mm_s)
        if hh > 23 or mm > 59:
            msg = f"Invalid timezone offset: {zone_name!r}"
            raise ValueError(msg)
        sign = 1 if sign_s == "+" else -1
        return timezone(timedelta(minutes=sign * (hh * 60 + mm)))

    try:
        return ZoneInfo(zone_name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        msg = f"Invalid timezone identifier: {zone_name!r}"
        raise ValueError(msg) from exc


# --- Parsing ---


def as_civil_date(value: object) -> date:
    """Read a civil date from a ``date``, a ``datetime``, or ISO date text.

    A ``datetime`` contributes its own wall-clock date, whatever its zone.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        return date.fromisoformat(value.strip())
    msg = f"Not a date: {value!r}"
    raise ValueError(msg)


def to_utc_instant(value: object) -> datetime:
    """Read an instant from ISO-8601 text or a ``datetime``.

    Text may carry ``Z`` or a numeric offset; naive values are UTC.
    """
    if isinstance(value, datetime):
        dt = value
    elif isinstance(value, str):
        s = value.strip()
        if not s:
            msg = "Empty instant"
            raise ValueError(msg)
        dt = datetime.fromisoformat(s)
    else:
        msg = f"Not an instant: {value!r}"
        raise ValueError(msg)
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=UTC)
    return dt.astimezone(UTC)


def format_utc_iso(dt: datetime) -> str:
    """Render an instant as ``YYYY-MM-DDTHH:MM:SSZ``."""
    utc = dt.astimezone(UTC)
    return f"{utc.date().isoformat()}T{utc:%H:%M:%S}Z"


# --- Zoned construction ---


def zoned(day: date, time_of_day: TimeOfDay, zone: tzinfo) -> datetime:
    """Build the aware datetime for *time_of_day* on *day* in *zone*.

    The result is normalized through UTC so wall times inside a DST gap
    come back shifted forward (see module docstring).
    """
    naive_wall = datetime(
        day.year,
        day.month,
        day.day,
        time_of_day.hour,
        time_of_day.minute,
        time_of_day.second,
    )
    aware = naive_wall.replace(tzinfo=zone, fold=0)
    return aware.astimezone(UTC).astimezone(zone)


def resolve_moment(moment: ZonedMoment) -> datetime:
    """Resolve a ZonedMoment to an aware datetime, or raise ValueError."""
    if not isinstance(moment.day, date) or not isinstance(moment.time, TimeOfDay):
        msg = f"Malformed moment: {moment!r}"
        raise ValueError(msg)
    return zoned(moment.day, moment.time, resolve_zone(moment.zone))


def invalid_reason(moment: ZonedMoment) -> str | None:
    """Why *moment* cannot be resolved, or None when it can."""
    try:
        resolve_moment(moment)
    except ValueError as exc:
        return str(exc)
    return None


def is_valid(moment: ZonedMoment) -> bool:
    return invalid_reason(moment) is None


def start_of_day(dt: datetime) -> datetime:
    """Midnight of *dt*'s civil date in *dt*'s own zone."""
    zone = dt.tzinfo if dt.tzinfo is not None else UTC
    return zoned(dt.date(), TimeOfDay(0), zone)


# --- Locale formatting ---


def negotiate_locale(identifier: str) -> Locale:
    """Load CLDR data for *identifier* (``"de-DE"`` style).

    Identifiers CLDR does not know, such as a synthesized ``"ja-JA"``,
    fall back to the bare language.
    """
    try:
        return Locale.parse(identifier, sep="-")
    except (UnknownLocaleError, ValueError):
        language = identifier.split("-", 1)[0]
        logger.debug("Locale %s unknown, falling back to %s", identifier, language)
        try:
            return Locale.parse(language)
        except (UnknownLocaleError, ValueError) as exc:
            msg = f"Unknown locale: {identifier!r}"
            raise ValueError(msg) from exc


def format_pattern(value: date, pattern: str, locale_id: str) -> str:
    """Format a date or aware datetime with a CLDR *pattern* in *locale_id*.

    Datetimes are rendered in their own zone.
    """
    loc = negotiate_locale(locale_id)
    if isinstance(value, datetime):
        if value.tzinfo is None:
            value = value.replace(tzinfo=UTC)
        return format_datetime(value, pattern, tzinfo=value.tzinfo, locale=loc)
    return format_date(value, pattern, locale=loc)
