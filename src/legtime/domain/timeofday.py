"""Wall-clock time-of-day parsing.

Configured times arrive as ``"H"``, ``"HH:MM"`` or ``"HH:MM:SS"`` strings.
Missing components default to zero, so ``"14"`` reads as 14:00:00.

INVARIANT: a parsed TimeOfDay always satisfies hour in [0, 23] and
minute/second in [0, 59].
"""

from __future__ import annotations

import re
from dataclasses import dataclass

_CLOCK_RE = re.compile(r"^\s*(\d{1,2})(?::(\d{1,2}))?(?::(\d{1,2}))?\s*$")
_HHMM_RE = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*$")


@dataclass(frozen=True)
class TimeOfDay:
    """A validated wall-clock time without date or zone."""

    hour: int
    minute: int = 0
    second: int = 0

    def __post_init__(self) -> None:
        if not (0 <= self.hour <= 23 and 0 <= self.minute <= 59 and 0 <= self.second <= 59):
            msg = f"Time out of range: {self.hour}:{self.minute}:{self.second}"
            raise ValueError(msg)

    @property
    def hhmm(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}"

    @property
    def hhmmss(self) -> str:
        return f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"


def parse_time_of_day(value: str) -> TimeOfDay:
    """Parse ``"H"``, ``"HH:MM"`` or ``"HH:MM:SS"`` into a TimeOfDay.

    Raises:
        ValueError: If *value* is not a string of that shape or is out of range.
    """
    if not isinstance(value, str):
        msg = f"Time of day must be a string, got {type(value).__name__}"
        raise ValueError(msg)
    m = _CLOCK_RE.match(value)
    if not m:
        msg = f"Invalid time of day: {value!r}"
        raise ValueError(msg)
    hour, minute, second = (int(g) if g is not None else 0 for g in m.groups())
    return TimeOfDay(hour, minute, second)


def parse_hhmm(value: str) -> TimeOfDay:
    """Strict ``"H:MM"`` / ``"HH:MM"`` parsing (no seconds) for comparisons."""
    if not isinstance(value, str):
        msg = f"HH:MM must be a string, got {type(value).__name__}"
        raise ValueError(msg)
    m = _HHMM_RE.match(value)
    if not m:
        msg = f"Invalid HH:MM: {value!r}"
        raise ValueError(msg)
    return TimeOfDay(int(m.group(1)), int(m.group(2)))
