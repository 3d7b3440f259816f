"""Command: date display."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from legtime.commands._base import LegtimeCommand

if TYPE_CHECKING:
    from datetime import datetime

    from legtime.commands._context import AppContext


@click.command(
    "format-date",
    cls=LegtimeCommand,
    examples="""\
    legtime format-date 2025-05-17
    legtime --lang DE --json format-date 2025-05-17
    """,
)
@click.argument("civil_date", type=click.DateTime(formats=["%Y-%m-%d"]))
@click.pass_obj
def format_date(app: AppContext, civil_date: datetime) -> None:
    """Show a calendar date as ISO text and as a localized full date."""
    from legtime.services.display import civil_date_to_iso_date, date_to_localized_full_date
    from legtime.services.result import ServiceResult

    day = civil_date.date()
    app.emit(
        ServiceResult.success(
            "format_date",
            {
                "iso_date": civil_date_to_iso_date(day),
                "full_date": date_to_localized_full_date(
                    day, app.language, pattern=app.settings.display.full_date_pattern
                ),
            },
        )
    )
