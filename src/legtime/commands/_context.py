"""AppContext: shared Click context for all commands.

Created once by the root CLI group and handed to subcommands via
``@click.pass_obj``. Holds the resolved settings and the translator, and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING

import click

from legtime.domain.translations import translator_for
from legtime.output.formatters import format_result

if TYPE_CHECKING:
    from legtime.config.settings import LegtimeSettings
    from legtime.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: LegtimeSettings) -> None:
        self.settings = settings

        from legtime.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def timezone(self) -> str:
        return self.settings.widget.timezone

    @property
    def language(self) -> str:
        return self.settings.widget.language

    @property
    def t(self) -> Callable[[str], str]:
        """Translator for the configured widget language."""
        return translator_for(self.language)

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout. Warnings go to stderr in human mode.
        * Failure: writes to stderr, exits with code 1.
        """
        json_output = self.settings.json_output
        output = format_result(result, json_output=json_output, verbose=self.settings.verbose)
        if result.ok:
            click.echo(output)
            if not json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
