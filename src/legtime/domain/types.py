"""Value types and sentinel constants shared across the package.

Every public operation is total: instead of raising, it returns one of the
sentinels below. Callers render sentinels as-is.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Protocol

from pydantic import BaseModel, Field, model_validator

from legtime.domain.timeofday import TimeOfDay

# --- Sentinels ---

NO_TIME = "--:--"
NO_DURATION = "--"
MIDNIGHT_UTC = "00:00:00"
NO_INSTANT = "0000-00-00T00:00:00Z"
NO_DATE = ""

# --- Translation keys consumed from the host ---

KEY_MINUTES_SHORT = "durationMinutesShort"
KEY_HOURS_SHORT = "durationHoursShort"
KEY_END_BEFORE_START = "errors.endDateBeforeStart"

END_BEFORE_START_FALLBACK = "End before start"


class Translator(Protocol):
    """Host-supplied lookup: ``t(key) -> str``."""

    def __call__(self, key: str) -> str: ...


@dataclass(frozen=True)
class ZonedMoment:
    """A civil date plus time-of-day, read in the named IANA zone.

    Construction never fails; an unresolvable moment (unknown zone, for
    example) is reported by the calendar capability when it is resolved.
    """

    day: date
    time: TimeOfDay
    zone: str


class DurationResult(BaseModel):
    """Elapsed time split into display text and whole hours/minutes.

    INVARIANT: ``total_minutes == hours * 60 + minutes``.
    """

    model_config = {"frozen": True}

    text: str
    hours: int = Field(default=0, ge=0)
    minutes: int = Field(default=0, ge=0, le=59)
    total_minutes: int = Field(default=0, ge=0)

    @model_validator(mode="after")
    def _check_total(self) -> DurationResult:
        if self.total_minutes != self.hours * 60 + self.minutes:
            msg = (
                f"total_minutes={self.total_minutes} does not match "
                f"hours={self.hours}, minutes={self.minutes}"
            )
            raise ValueError(msg)
        return self

    @classmethod
    def empty(cls, text: str = NO_DURATION) -> DurationResult:
        """A zeroed result carrying only *text*."""
        return cls(text=text)
