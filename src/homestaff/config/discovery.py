"""Locate the ``homestaff.toml`` that configures a household.

The file holds server, auth, store and plugin settings; household data is
never read from or written to disk. ``HOMESTAFF_CONFIG`` pins an exact file
(a missing one means defaults, with no fallback search). Otherwise the
search walks up from the working directory, so a file at a project root
applies to every subdirectory. ``--config`` bypasses this module and is
handled by :meth:`HomestaffSettings.from_cli`.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "homestaff.toml"
CONFIG_ENV_VAR = "HOMESTAFF_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Return the config file governing *start* (default: cwd), or None."""
    pinned = os.environ.get(CONFIG_ENV_VAR)
    if pinned:
        path = Path(pinned)
        return path if path.is_file() else None

    here = (start or Path.cwd()).resolve()
    for directory in (here, *here.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
