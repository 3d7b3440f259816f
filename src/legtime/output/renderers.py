"""Rich renderers for ServiceResult.

Dispatched by ``result.op`` in :func:`render_result`; ops without a
dedicated renderer print every data field.
"""

from __future__ import annotations

import json as _json
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from rich.text import Text

from legtime.output.console import create_console, get_output, style_for_field

if TYPE_CHECKING:
    from rich.console import Console

    from legtime.services.result import ServiceResult

_Renderer = Callable[["ServiceResult", "Console", bool], None]


def render_result(result: ServiceResult, *, verbose: bool = False) -> str:
    """Render a ServiceResult to text via Rich."""
    console = create_console()
    if result.ok:
        renderer = _OP_RENDERERS.get(result.op, _render_generic)
        renderer(result, console, verbose)
    else:
        _render_error(result, console, verbose)
    return get_output(console).rstrip("\n")


# --- Helpers ---


def _status_line(console: Console, result: ServiceResult) -> None:
    console.print(Text.assemble(("OK", "legtime.ok"), (f"  {result.op}", "legtime.op")))


def _field(console: Console, key: str, value: Any) -> None:
    if isinstance(value, (dict, list)):
        value = _json.dumps(value, separators=(",", ":"))
    console.print(
        Text.assemble((f"  {key}: ", "legtime.key"), (str(value), style_for_field(key, value)))
    )


# --- Renderers ---


def _render_error(result: ServiceResult, console: Console, verbose: bool) -> None:
    err = result.error
    msg = err.message if err else "Unknown error"
    console.print(
        Text.assemble(("ERROR", "legtime.error"), (f"  {result.op}", "legtime.op"), f" - {msg}")
    )
    if verbose and err and err.detail:
        console.print(Text("  detail:", style="dim"))
        for k, v in err.detail.items():
            console.print(Text(f"    {k}: {v}"))


def _render_span(result: ServiceResult, console: Console, verbose: bool) -> None:
    """Duration text first; the split numbers only with --verbose."""
    _status_line(console, result)
    _field(console, "text", result.data.get("text", ""))
    if verbose:
        for key in ("hours", "minutes", "total_minutes"):
            if key in result.data:
                _field(console, key, result.data[key])


def _render_generic(result: ServiceResult, console: Console, verbose: bool) -> None:
    _status_line(console, result)
    for key, value in result.data.items():
        _field(console, key, value)


_OP_RENDERERS: dict[str, _Renderer] = {
    "span": _render_span,
}
