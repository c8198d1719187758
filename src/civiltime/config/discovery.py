"""Locate and load ``civiltime.toml``.

Lookup order: the file named by ``CIVILTIME_CONFIG``, otherwise the first
``civiltime.toml`` found walking up from the start directory.
"""

from __future__ import annotations

import os
import tomllib
from pathlib import Path

from civiltime.config.models import CivilConfig

CONFIG_FILENAME = "civiltime.toml"
CONFIG_ENV_VAR = "CIVILTIME_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file in effect for *start* (default: cwd), if any.

    A ``CIVILTIME_CONFIG`` that names a missing file disables discovery.
    """
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


def load_config(path: Path | None = None, cwd: Path | None = None) -> CivilConfig:
    """Validate the TOML at *path*, or the one discovered from *cwd*.

    Returns the code defaults when there is no file.
    """
    path = path or find_config(cwd)
    if path is None:
        return CivilConfig()
    with path.open("rb") as fh:
        return CivilConfig.model_validate(tomllib.load(fh))
