"""Utility to discover logkeep home directory."""

import os
from pathlib import Path


def get_logkeep_home() -> Path:
    """Get logkeep home directory based on LOGKEEP_HOME or default to ~/.logkeep."""
    home_env = os.environ.get("LOGKEEP_HOME")
    if home_env:
        return Path(home_env).expanduser().resolve()
    return Path.home() / ".logkeep"
