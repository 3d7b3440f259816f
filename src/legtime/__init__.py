"""legtime: timezone-aware activity scheduling and duration helpers.

The public operations are re-exported here so hosts can write
``from legtime import minutes_to_display``.
"""

from __future__ import annotations

__version__ = "0.1.0"

from legtime.domain.timeofday import TimeOfDay, parse_time_of_day
from legtime.domain.translations import translator_for
from legtime.domain.types import DurationResult, ZonedMoment
from legtime.services.compare import earlier_of, later_of
from legtime.services.conversion import (
    add_minutes_to_instant,
    config_time_to_local_display,
    local_time_to_utc_instant,
    local_time_to_utc_time_of_day,
    utc_instant_to_local_display,
    utc_midnight_of,
)
from legtime.services.display import (
    civil_date_to_iso_date,
    date_to_localized_full_date,
    instant_to_localized_short_date,
)
from legtime.services.durations import (
    instant_diff_display,
    minutes_to_display,
    parse_display_to_minutes,
    zoned_diff,
)
from legtime.services.scheduling import select_default_date

__all__ = [
    "DurationResult",
    "TimeOfDay",
    "ZonedMoment",
    "__version__",
    "add_minutes_to_instant",
    "civil_date_to_iso_date",
    "config_time_to_local_display",
    "date_to_localized_full_date",
    "earlier_of",
    "instant_diff_display",
    "instant_to_localized_short_date",
    "later_of",
    "local_time_to_utc_instant",
    "local_time_to_utc_time_of_day",
    "minutes_to_display",
    "parse_display_to_minutes",
    "parse_time_of_day",
    "select_default_date",
    "translator_for",
    "utc_instant_to_local_display",
    "utc_midnight_of",
    "zoned_diff",
]
