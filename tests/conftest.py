"""Shared pytest fixtures and test helpers for legtime tests."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest
from click.testing import CliRunner

UNITS = {
    "durationMinutesShort": "min",
    "durationHoursShort": "h",
    "errors.endDateBeforeStart": "End before start",
}


@pytest.fixture
def t() -> Callable[[str], str]:
    """Translation function with the English short units."""

    def _t(key: str) -> str:
        return UNITS.get(key, key)

    return _t


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run from an empty directory with no legtime env overrides.

    Keeps a developer's own legtime.toml or LEGTIME_* variables out of
    the CLI tests.
    """
    import os

    for key in list(os.environ):
        if key.startswith("LEGTIME_"):
            monkeypatch.delenv(key)
    monkeypatch.chdir(tmp_path)
    return tmp_path
