"""Commands: local <-> UTC conversion and instant arithmetic."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from legtime.commands._base import LegtimeCommand

if TYPE_CHECKING:
    from legtime.commands._context import AppContext


@click.command(
    "to-utc",
    cls=LegtimeCommand,
    examples="""\
    legtime to-utc 14:30 --date 2024-01-15
    legtime --tz America/New_York to-utc 09:00:30 --date 2024-07-01
    """,
)
@click.argument("local_time")
@click.option("--date", "civil_date", required=True, help="Calendar date (YYYY-MM-DD).")
@click.pass_obj
def to_utc(app: AppContext, local_time: str, civil_date: str) -> None:
    """Convert a local wall-clock time on a date to UTC."""
    from legtime.domain.types import NO_INSTANT
    from legtime.services.conversion import (
        local_time_to_utc_instant,
        local_time_to_utc_time_of_day,
    )
    from legtime.services.result import ServiceResult

    utc_instant = local_time_to_utc_instant(local_time, civil_date, app.timezone)
    app.emit(
        ServiceResult.success(
            "to_utc",
            {
                "utc_time": local_time_to_utc_time_of_day(local_time, civil_date, app.timezone),
                "utc_instant": utc_instant,
            },
            warning=(
                f"Could not interpret {local_time!r} on {civil_date!r} in {app.timezone}"
                if utc_instant == NO_INSTANT
                else None
            ),
        )
    )


@click.command(
    "to-local",
    cls=LegtimeCommand,
    examples="""\
    legtime to-local 2024-01-15T13:30:00Z
    legtime --lang DE to-local 2025-05-17T08:00:00Z
    """,
)
@click.argument("iso_instant")
@click.pass_obj
def to_local(app: AppContext, iso_instant: str) -> None:
    """Show a UTC instant as local time and short date."""
    from legtime.domain.types import NO_TIME
    from legtime.services.conversion import utc_instant_to_local_display
    from legtime.services.display import instant_to_localized_short_date
    from legtime.services.result import ServiceResult

    local_time = utc_instant_to_local_display(iso_instant, app.timezone)
    short_date = instant_to_localized_short_date(
        iso_instant,
        app.timezone,
        app.language,
        pattern=app.settings.display.short_date_pattern,
    )
    app.emit(
        ServiceResult.success(
            "to_local",
            {"local_time": local_time, "short_date": short_date},
            warning=f"Could not parse instant {iso_instant!r}" if local_time == NO_TIME else None,
        )
    )


@click.command(
    "add-minutes",
    cls=LegtimeCommand,
    examples="""\
    legtime add-minutes 2024-01-15T10:00:00Z 30
    legtime add-minutes 2024-01-15T10:00:00Z -- -45
    """,
)
@click.argument("iso_instant")
@click.argument("minutes", type=int)
@click.pass_obj
def add_minutes(app: AppContext, iso_instant: str, minutes: int) -> None:
    """Shift a UTC instant by a number of minutes."""
    from legtime.services.conversion import add_minutes_to_instant
    from legtime.services.result import ServiceResult

    try:
        shifted = add_minutes_to_instant(iso_instant, minutes)
    except ValueError as exc:
        app.emit(
            ServiceResult.failure(
                "add_minutes", "INVALID_INSTANT", str(exc), iso_instant=iso_instant
            )
        )
        return
    app.emit(ServiceResult.success("add_minutes", {"utc_instant": shifted}))
