"""Locate ``utf8ctl.toml``.

``UTF8CTL_CONFIG`` names the file outright.  Otherwise the nearest
``utf8ctl.toml`` in the starting directory or any parent wins.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "utf8ctl.toml"
CONFIG_ENV_VAR = "UTF8CTL_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file that applies to *start* (default: cwd), if any."""
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
