"""Locate ``cordova-android.toml``.

Lookup order: the ``CORDOVA_ANDROID_CONFIG`` env var, then the current
directory and each of its parents. ``--config`` bypasses both.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

CONFIG_FILENAME = "cordova-android.toml"
CONFIG_ENV_VAR = "CORDOVA_ANDROID_CONFIG"


def _search_dirs(start: Path) -> Iterator[Path]:
    here = start.resolve()
    yield here
    yield from here.parents


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect, or None when there is none.

    A set-but-dangling ``CORDOVA_ANDROID_CONFIG`` disables the walk-up
    rather than falling back to it.
    """
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    for directory in _search_dirs(start or Path.cwd()):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
