"""Config file discovery.

Walk-up finder locates fieldrules.toml, similar to how git finds .git/.
Supports the FIELDRULES_CONFIG env var as an override.
"""

from __future__ import annotations

import os
from pathlib import Path

CONFIG_FILENAME = "fieldrules.toml"
CONFIG_ENV_VAR = "FIELDRULES_CONFIG"


def find_config(start: Path | None = None) -> Path | None:
    """Walk up from *start* (default: cwd) looking for fieldrules.toml.

    Returns the path to the config file, or None if not found.
    Checks FIELDRULES_CONFIG env var first.
    """
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        p = Path(env_path)
        if p.is_file():
            return p
        return None

    origin = (start or Path.cwd()).resolve()
    for directory in (origin, *origin.parents):
        candidate = directory / CONFIG_FILENAME
        if candidate.is_file():
            return candidate
    return None
