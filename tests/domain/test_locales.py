"""Tests for language code to locale mapping."""

import pytest

from legtime.domain.locales import LOCALE_MAP, locale_for_language


class TestLocaleForLanguage:
    @pytest.mark.parametrize(
        "language,expected",
        [
            ("EN", "en-GB"),
            ("DE", "de-DE"),
            ("FR", "fr-FR"),
            ("IT", "it-IT"),
            ("TH", "th-TH"),
            ("ES", "es-ES"),
        ],
    )
    def test_table(self, language: str, expected: str) -> None:
        assert locale_for_language(language) == expected

    def test_case_insensitive(self) -> None:
        assert locale_for_language("de") == "de-DE"

    def test_fallback_synthesizes_region(self) -> None:
        assert locale_for_language("NL") == "nl-NL"
        assert locale_for_language("pl") == "pl-PL"

    def test_empty_rejected(self) -> None:
        with pytest.raises(ValueError):
            locale_for_language("  ")

    def test_table_is_fixed(self) -> None:
        assert set(LOCALE_MAP) == {"EN", "DE", "FR", "IT", "TH", "ES"}


def test_non_string_language_rejected() -> None:
    with pytest.raises(ValueError):
        locale_for_language(5)  # type: ignore[arg-type]
