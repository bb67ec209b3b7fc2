"""Locate the numfield.toml that applies to the current directory.

Lookup order: the ``NUMFIELD_CONFIG`` env var (exact file, no fallback),
then the nearest ``numfield.toml`` in the start directory or any ancestor.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "numfield.toml"
CONFIG_ENV_VAR = "NUMFIELD_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start* (default: cwd), or None."""
    override = os.environ.get(CONFIG_ENV_VAR)
    if override:
        path = Path(override)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
