"""Commands: later/earlier of two times."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from legtime.commands._base import LegtimeCommand

if TYPE_CHECKING:
    from legtime.commands._context import AppContext


@click.command(cls=LegtimeCommand, examples="legtime later 10:00 14:30")
@click.argument("time_a")
@click.argument("time_b")
@click.pass_obj
def later(app: AppContext, time_a: str, time_b: str) -> None:
    """Print the later of two HH:mm times."""
    from legtime.services.compare import later_of
    from legtime.services.result import ServiceResult

    app.emit(ServiceResult.success("later", {"time": later_of(time_a, time_b, app.timezone)}))


@click.command(cls=LegtimeCommand, examples="legtime earlier 18:00 09:00")
@click.argument("time_a")
@click.argument("time_b")
@click.pass_obj
def earlier(app: AppContext, time_a: str, time_b: str) -> None:
    """Print the earlier of two HH:mm times."""
    from legtime.services.compare import earlier_of
    from legtime.services.result import ServiceResult

    app.emit(ServiceResult.success("earlier", {"time": earlier_of(time_a, time_b, app.timezone)}))
