"""Click base command with an eager ``--examples`` flag.

Examples live next to each command definition instead of in ``--help``,
which stays short. ``legtime <command> --examples`` prints them and exits
before arguments are validated.
"""

from __future__ import annotations

import textwrap
from typing import Any

import click


class LegtimeCommand(click.Command):
    """Click Command that carries usage examples."""

    def __init__(self, *args: Any, examples: str | None = None, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.examples = textwrap.dedent(examples).strip("\n") if examples else None
        if self.examples:
            self.params.append(
                click.Option(
                    ["--examples"],
                    is_flag=True,
                    expose_value=False,
                    is_eager=True,
                    callback=self._show_examples,
                    help="Show usage examples and exit.",
                )
            )

    def _show_examples(self, ctx: click.Context, _param: click.Parameter, value: bool) -> None:
        if not value or ctx.resilient_parsing or not self.examples:
            return
        click.echo(f"Examples for '{ctx.command_path}':\n")
        for line in self.examples.splitlines():
            click.echo(f"  {line}")
        ctx.exit(0)
