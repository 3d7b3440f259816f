"""Subcommand modules for legtime.

Provides register_commands() which uses deferred imports to keep
``legtime --help`` fast.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    import click


def register_commands(cli: click.Group) -> None:
    """Register all commands on the root CLI group."""
    from legtime.commands.compare import earlier, later
    from legtime.commands.convert import add_minutes, to_local, to_utc
    from legtime.commands.dates import format_date
    from legtime.commands.duration import diff, duration, parse_duration, span
    from legtime.commands.schedule import default_date

    cli.add_command(default_date)
    cli.add_command(to_utc)
    cli.add_command(to_local)
    cli.add_command(add_minutes)
    cli.add_command(duration)
    cli.add_command(parse_duration)
    cli.add_command(diff)
    cli.add_command(span)
    cli.add_command(format_date)
    cli.add_command(later)
    cli.add_command(earlier)
