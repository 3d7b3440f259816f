"""legtime command line: global flags, settings assembly, command registration."""

from __future__ import annotations

import click

from legtime import __version__
from legtime.commands import register_commands
from legtime.commands._context import AppContext
from legtime.config.settings import LegtimeSettings


def _check_zone(_ctx: click.Context, _param: click.Parameter, value: str | None) -> str | None:
    """Reject unknown zones up front instead of printing sentinels."""
    if value is None:
        return None
    from legtime.infrastructure.calendar import resolve_zone

    try:
        resolve_zone(value)
    except ValueError as exc:
        raise click.BadParameter(str(exc)) from exc
    return value


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="legtime")
@click.option("--json", "json_output", is_flag=True, help="Print the result envelope as JSON.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging and result detail.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Use this legtime.toml.")
@click.option(
    "--tz",
    "timezone",
    default=None,
    callback=_check_zone,
    help="IANA zone, UTC, or +HH:MM (default: [widget] timezone).",
)
@click.option("--lang", "language", default=None, help="Widget language, e.g. EN or DE.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
    timezone: str | None,
    language: str | None,
) -> None:
    """legtime: timezone-aware activity scheduling and durations."""
    widget: dict[str, str] = {}
    if timezone:
        widget["timezone"] = timezone
    if language:
        widget["language"] = language
    ctx.obj = AppContext(
        LegtimeSettings.from_cli(
            config_path=config_path,
            json_output=json_output,
            verbose=verbose,
            log_json=log_json,
            widget=widget or None,
        )
    )
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)


def main() -> None:
    cli()
