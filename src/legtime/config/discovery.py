"""Locate and load ``legtime.toml``.

Lookup order: the ``LEGTIME_CONFIG`` env var, then the current directory
and each of its parents (the way git finds ``.git/``). The ``--config``
flag bypasses both, see :meth:`LegtimeSettings.from_cli`.
"""

from __future__ import annotations

import os
import tomllib
from collections.abc import Iterator
from pathlib import Path

from legtime.config.models import LegtimeConfig

CONFIG_FILENAME = "legtime.toml"
CONFIG_ENV_VAR = "LEGTIME_CONFIG"


def _search_dirs(start: Path) -> Iterator[Path]:
    here = start.resolve()
    yield here
    yield from here.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies at *start* (default: cwd).

    A set ``LEGTIME_CONFIG`` is authoritative: if it names a missing file
    there is no config, and no walk-up happens.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        candidate = Path(env_path).expanduser()
        return candidate if candidate.is_file() else None

    for directory in _search_dirs(start or Path.cwd()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None


def load_config(path: Path | None = None, cwd: Path | None = None) -> LegtimeConfig:
    """Validate a config file into :class:`LegtimeConfig`.

    Discovers the file from *cwd* when *path* is None; with no file at
    all the code defaults apply.

    Raises:
        tomllib.TOMLDecodeError: The file is not valid TOML.
        pydantic.ValidationError: A value is out of range.
    """
    path = path or find_config(cwd)
    if path is None:
        return LegtimeConfig()
    with path.open("rb") as fh:
        return LegtimeConfig.model_validate(tomllib.load(fh))
