"""Atomic text write with restore-on-failure (UNO: single function)."""

import shutil
from contextlib import suppress
from pathlib import Path

from .logger import get_logger

logger = get_logger("utils.write_text_atomic")


def _restore(path: Path, original: str) -> None:
    try:
        if not path.exists() or path.read_bytes().decode("utf-8") != original:
            with path.open("w", encoding="utf-8", newline="") as fh:
                fh.write(original)
    except (OSError, UnicodeDecodeError) as restore_error:
        logger.error(f"Cannot restore {path} from its pre-patch copy: {restore_error}")


def write_text_atomic(path: Path, text: str, original: str | None = None) -> None:
    """Write ``text`` to ``path`` via a temporary file and rename.

    Line endings are written exactly as given. On any failure the temporary file is
    removed and, if ``original`` is provided, the file is restored to it before the
    error propagates.
    """
    temp_path = path.with_name(f".{path.name}.relink.tmp")
    try:
        with temp_path.open("w", encoding="utf-8", newline="") as fh:
            fh.write(text)
        if path.exists():
            shutil.copymode(path, temp_path)
        temp_path.replace(path)
    except OSError:
        with suppress(OSError):
            temp_path.unlink(missing_ok=True)
        if original is not None:
            _restore(path, original)
        raise
