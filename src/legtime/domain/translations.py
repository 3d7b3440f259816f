"""Built-in catalog for the translation keys the time helpers consume.

Hosts normally pass their own ``t(key)``; this catalog covers the widget's
shipped languages so the helpers and the CLI work standalone.
"""

from __future__ import annotations

from collections.abc import Callable

from legtime.domain.types import KEY_END_BEFORE_START, KEY_HOURS_SHORT, KEY_MINUTES_SHORT

DEFAULT_LANGUAGE = "EN"

CATALOG: dict[str, dict[str, str]] = {
    "EN": {
        KEY_HOURS_SHORT: "h",
        KEY_MINUTES_SHORT: "min",
        KEY_END_BEFORE_START: "End date is before start date",
    },
    "DE": {
        KEY_HOURS_SHORT: "h",
        KEY_MINUTES_SHORT: "Min",
        KEY_END_BEFORE_START: "Enddatum liegt vor dem Startdatum",
    },
}


def translator_for(language: str | None) -> Callable[[str], str]:
    """Return a ``t(key)`` lookup for *language*.

    Unknown languages use the English catalog; unknown keys echo the key.
    """
    code = (language or DEFAULT_LANGUAGE).strip().upper()
    table = CATALOG.get(code, CATALOG[DEFAULT_LANGUAGE])

    def t(key: str) -> str:
        return table.get(key, key)

    return t
