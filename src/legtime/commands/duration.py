"""Commands: duration display, parsing, and elapsed time."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from legtime.commands._base import LegtimeCommand

if TYPE_CHECKING:
    from legtime.commands._context import AppContext


@click.command(
    cls=LegtimeCommand,
    examples="""\
    legtime duration 45
    legtime --lang DE duration 90
    """,
)
@click.argument("minutes")
@click.pass_obj
def duration(app: AppContext, minutes: str) -> None:
    """Render a number of minutes as display text."""
    from legtime.domain.types import NO_DURATION
    from legtime.services.durations import minutes_to_display
    from legtime.services.result import ServiceResult

    text = minutes_to_display(minutes, app.t)
    warning = f"Not a non-negative minute count: {minutes!r}" if text == NO_DURATION else None
    app.emit(ServiceResult.success("duration", {"text": text}, warning=warning))


@click.command(
    "parse-duration",
    cls=LegtimeCommand,
    examples="""\
    legtime parse-duration "1:30 h"
    legtime parse-duration "45 min"
    """,
)
@click.argument("text")
@click.pass_obj
def parse_duration(app: AppContext, text: str) -> None:
    """Parse display text back into minutes."""
    from legtime.services.durations import parse_display_to_minutes
    from legtime.services.result import ServiceResult

    app.emit(
        ServiceResult.success("parse_duration", {"minutes": parse_display_to_minutes(text, app.t)})
    )


@click.command(
    cls=LegtimeCommand,
    examples="legtime diff 2024-01-15T10:00:00Z 2024-01-15T11:30:00Z",
)
@click.argument("start")
@click.argument("end")
@click.pass_obj
def diff(app: AppContext, start: str, end: str) -> None:
    """Elapsed time between two UTC instants."""
    from legtime.domain.types import NO_DURATION
    from legtime.services.durations import instant_diff_display
    from legtime.services.result import ServiceResult

    text = instant_diff_display(start, end, app.t)
    app.emit(
        ServiceResult.success(
            "diff",
            {"text": text},
            warning="Could not parse one of the instants" if text == NO_DURATION else None,
        )
    )


@click.command(
    cls=LegtimeCommand,
    examples="""\
    legtime span 2024-01-15 09:00 17:30
    legtime span 2024-01-15 22:00 01:30 --end-date 2024-01-16
    """,
)
@click.argument("civil_date")
@click.argument("start_time")
@click.argument("end_time")
@click.option("--end-date", default=None, help="Date of END_TIME if it differs (YYYY-MM-DD).")
@click.pass_obj
def span(
    app: AppContext,
    civil_date: str,
    start_time: str,
    end_time: str,
    end_date: str | None,
) -> None:
    """Duration between two wall-clock times in the configured zone."""
    from datetime import date

    from legtime.domain.timeofday import parse_time_of_day
    from legtime.domain.types import ZonedMoment
    from legtime.services.durations import zoned_diff
    from legtime.services.result import ServiceResult

    try:
        start_day = date.fromisoformat(civil_date)
        end_day = date.fromisoformat(end_date) if end_date else start_day
        start = ZonedMoment(start_day, parse_time_of_day(start_time), app.timezone)
        end = ZonedMoment(end_day, parse_time_of_day(end_time), app.timezone)
    except ValueError as exc:
        app.emit(ServiceResult.failure("span", "INVALID_INPUT", str(exc)))
        return
    app.emit(ServiceResult.success("span", zoned_diff(start, end, app.t).model_dump()))
