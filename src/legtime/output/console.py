"""Rich Console factory and theme for legtime output.

Consoles render into a StringIO buffer so ``format_result() -> str`` stays
a pure function. Rich drops color codes when the output is not a terminal
(CliRunner, pipes).
"""

from __future__ import annotations

from io import StringIO

from rich.console import Console
from rich.theme import Theme

LEGTIME_THEME = Theme(
    {
        "legtime.ok": "bold green",
        "legtime.error": "bold red",
        "legtime.op": "bold cyan",
        "legtime.key": "dim",
        "legtime.time": "bold",
        "legtime.date": "blue",
        "legtime.duration": "magenta",
        "legtime.sentinel": "yellow",
    }
)

_SENTINELS = frozenset({"--", "--:--", "00:00:00", "0000-00-00T00:00:00Z", ""})

_KEY_STYLES: dict[str, str] = {
    "time": "legtime.time",
    "local_time": "legtime.time",
    "utc_time": "legtime.time",
    "utc_instant": "legtime.time",
    "date": "legtime.date",
    "iso_date": "legtime.date",
    "short_date": "legtime.date",
    "full_date": "legtime.date",
    "text": "legtime.duration",
    "minutes": "legtime.duration",
    "total_minutes": "legtime.duration",
}


def create_console(*, no_color: bool = False, width: int | None = None) -> Console:
    """Create a Console that renders to a StringIO buffer."""
    return Console(
        file=StringIO(),
        theme=LEGTIME_THEME,
        no_color=no_color,
        highlight=False,
        width=width or 120,
    )


def get_output(console: Console) -> str:
    """Extract rendered text from a StringIO-backed Console."""
    assert isinstance(console.file, StringIO)
    return console.file.getvalue()


def style_for_field(key: str, value: object) -> str:
    """Rich style for a data field; sentinel values are highlighted."""
    if isinstance(value, str) and value in _SENTINELS:
        return "legtime.sentinel"
    return _KEY_STYLES.get(key, "")
