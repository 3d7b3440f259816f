"""Two-letter widget language codes to locale identifiers.

A small fixed table plus a synthesized ``"{lang}-{LANG}"`` fallback.
Languages outside the table rely on the fallback being accepted (or
negotiated down) by the formatting layer.
"""

from __future__ import annotations

LOCALE_MAP: dict[str, str] = {
    "EN": "en-GB",
    "DE": "de-DE",
    "FR": "fr-FR",
    "IT": "it-IT",
    "TH": "th-TH",
    "ES": "es-ES",
}


def locale_for_language(language: str) -> str:
    """Map a language code to a region-qualified locale identifier.

    Examples:
        >>> locale_for_language("de")
        'de-DE'
        >>> locale_for_language("NL")
        'nl-NL'
    """
    if not isinstance(language, str):
        msg = f"Language code must be a string, got {type(language).__name__}"
        raise ValueError(msg)
    code = language.strip()
    if not code:
        msg = "Language code must not be empty"
        raise ValueError(msg)
    return LOCALE_MAP.get(code.upper()) or f"{code.lower()}-{code.upper()}"
