import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

# Prevent multiple configurations
_CONFIGURED = False


def configure_logging(relink_home: Path | None = None, level: str = "INFO") -> None:
    """Configure unified relink logging.

    Args:
        relink_home: Directory holding the log file. If None, derived from environment.
        level: Level name for the ``relink`` logger.
    """
    global _CONFIGURED
    root_logger = logging.getLogger("relink")
    if _CONFIGURED:
        root_logger.setLevel(level)
        return

    if relink_home is None:
        from ..api.config.get_home_dir import get_home_dir

        relink_home = get_home_dir()

    from ..constants import LOG_FILENAME

    relink_home.mkdir(parents=True, exist_ok=True)
    log_file = relink_home / LOG_FILENAME

    root_logger.setLevel(level)

    formatter = logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s")

    file_handler = RotatingFileHandler(
        log_file,
        maxBytes=5 * 1024 * 1024,
        backupCount=3,  # 5MB * 3
        encoding="utf-8",
    )
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance for the given name.

    Ensures logging is configured (lazy init if needed, though explicit config preferred at app entry).
    """
    if not _CONFIGURED:
        configure_logging()

    return logging.getLogger(f"relink.{name}")
