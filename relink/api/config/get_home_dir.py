"""Get relink home directory path or path under it."""

import os
from pathlib import Path

from ...constants import RELINK_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get relink home directory path or path under it.

    Checks RELINK_HOME environment variable first, defaults to ~/.relink if not set.

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.relink")
        >>> get_home_dir("relink.log")
        Path("/Users/user/.relink/relink.log")
    """
    home_env = os.environ.get("RELINK_HOME")
    if home_env:
        relink_home = Path(home_env).expanduser().resolve()
    else:
        relink_home = Path.home() / RELINK_HOME_EXT

    return relink_home / Path(*parts) if parts else relink_home
