"""Duration display format and its inverse parser.

Display text is a small two-shape format:
  - under one hour: ``"{minutes} {minutes_unit}"``, e.g. ``"45 min"``
  - one hour or more: ``"{hours}:{MM} {hours_unit}"``, e.g. ``"1:30 h"``

Other parts of the widget parse previously displayed text back into
minutes, so ``format_minutes`` and ``parse_display`` must stay inverses.

INVARIANT: minute totals are rounded (half up) before being split into
hours and minutes, never after.
"""

from __future__ import annotations

import math
import re

_LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")


def round_half_up(value: float) -> int:
    """Round to the nearest integer, ties away from negative infinity.

    ``round()`` uses banker's rounding (``round(118.5) == 118``); duration
    display needs ``118.5 -> 119``.
    """
    return math.floor(value + 0.5)


def leading_int(text: str) -> int | None:
    """Parse the leading integer of *text* the way ``parseInt`` would.

    Examples:
        >>> leading_int(" 42 min")
        42
        >>> leading_int("12.9")
        12
        >>> leading_int("abc") is None
        True
    """
    m = _LEADING_INT_RE.match(text)
    if not m:
        return None
    return int(m.group(1))


def coerce_minutes(value: object) -> int | None:
    """Coerce an int, float, or numeric string to whole minutes.

    Floats are truncated and strings are read up to the first non-digit.
    Returns None for anything else, including booleans and NaN.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        return int(value)
    if isinstance(value, str):
        return leading_int(value)
    return None


def split_minutes(total_minutes: int) -> tuple[int, int]:
    """Split a non-negative minute total into ``(hours, minutes)``."""
    return total_minutes // 60, total_minutes % 60


def format_minutes(total_minutes: int, minutes_unit: str, hours_unit: str) -> str:
    """Render whole minutes as display text.

    Negative totals are rendered as the positive span with a leading ``-``.
    """
    if total_minutes < 0:
        return "-" + format_minutes(-total_minutes, minutes_unit, hours_unit)
    hours, minutes = split_minutes(total_minutes)
    if hours == 0:
        return f"{minutes} {minutes_unit}"
    return f"{hours}:{minutes:02d} {hours_unit}"


def parse_display(text: object, minutes_unit: str, hours_unit: str) -> int:
    """Parse display text produced by ``format_minutes`` back into minutes.

    The hours unit is checked first. Returns 0 for empty or non-string
    input, for text carrying neither unit, and for unparsable numbers.
    """
    if not isinstance(text, str) or not text:
        return 0

    if hours_unit and hours_unit in text:
        head, sep, tail = text.replace(hours_unit, "", 1).partition(":")
        if not sep:
            return 0
        hours = leading_int(head)
        minutes = leading_int(tail)
        if hours is None or minutes is None:
            return 0
        return max(0, hours * 60 + minutes)

    if minutes_unit and minutes_unit in text:
        minutes = leading_int(text.replace(minutes_unit, "", 1).strip())
        if minutes is None:
            return 0
        return max(0, minutes)

    return 0
