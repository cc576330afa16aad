"""Get linker home directory path or path under it."""

import os
from pathlib import Path

from ...constants import LINKER_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get linker home directory path or path under it.

    Checks the LINKER_HOME environment variable first, defaults to ~/.linker.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.linker")
        >>> get_home_dir("config.json")
        Path("/Users/user/.linker/config.json")
    """
    linker_home_env = os.environ.get("LINKER_HOME")
    if linker_home_env:
        linker_home = Path(linker_home_env).expanduser().resolve()
    else:
        # Check HOME environment variable (for test isolation)
        home_env = os.environ.get("HOME")
        linker_home = Path(home_env) / LINKER_HOME_EXT if home_env else Path.home() / LINKER_HOME_EXT

    return linker_home / Path(*parts) if parts else linker_home
