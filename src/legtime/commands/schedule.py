"""Command: default activity date."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from legtime.commands._base import LegtimeCommand

if TYPE_CHECKING:
    from legtime.commands._context import AppContext


@click.command(
    "default-date",
    cls=LegtimeCommand,
    examples="""\
    legtime default-date 18:00 120
    legtime --tz UTC default-date 18:00:00 60
    legtime --json default-date 17:30 90 --buffer 30
    """,
)
@click.argument("latest_end")
@click.argument("duration_minutes")
@click.option(
    "--buffer",
    "buffer_minutes",
    type=click.IntRange(min=0),
    default=None,
    help="Travel buffer in minutes (default from [schedule] buffer_minutes).",
)
@click.pass_obj
def default_date(
    app: AppContext, latest_end: str, duration_minutes: str, buffer_minutes: int | None
) -> None:
    """Pick today or tomorrow as the default activity date."""
    from legtime.services.result import ServiceResult
    from legtime.services.scheduling import select_default_date

    buffer = app.settings.schedule.buffer_minutes if buffer_minutes is None else buffer_minutes
    day = select_default_date(app.timezone, latest_end, duration_minutes, buffer_minutes=buffer)
    app.emit(
        ServiceResult.success("default_date", {"date": day.isoformat(), "timezone": app.timezone})
    )
