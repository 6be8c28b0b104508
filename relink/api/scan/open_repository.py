"""Load configuration and scan a repository root (UNO: single function)."""

from pathlib import Path

from ...utils.logger import configure_logging
from ..config.RelinkConfig import RelinkConfig
from .scan_tree import scan_tree
from .Snapshot import Snapshot


def open_repository(root: str | Path) -> tuple[Path, RelinkConfig, Snapshot]:
    """Resolve ``root``, load its config, apply the log level and scan the tree.

    Raises:
        ValueError: If root is not a directory or its config is invalid
    """
    root_path = Path(root).expanduser().resolve()
    if not root_path.is_dir():
        raise ValueError(f"Repository root is not a directory: {root_path}")
    config = RelinkConfig.load(root_path)
    configure_logging(level=config.log.level)
    snapshot = scan_tree(root_path, config.scan)
    return root_path, config, snapshot
