"""Rewriter, move half: relocate files on disk (UNO: single function)."""

import os
import shutil
from collections.abc import Sequence
from pathlib import Path

from ...utils.logger import get_logger
from .MoveOutcome import MoveOutcome

logger = get_logger("mv.apply_moves")

STAGING_PREFIX = ".relink-staged"


def _prune_empty_dirs(root: Path, sources: Sequence[str]) -> None:
    """Remove directories left empty by the moves, bottom-up, never the root."""
    for source in sources:
        parent = (root / source).parent
        while parent != root and parent.is_dir() and not any(parent.iterdir()):
            parent.rmdir()
            logger.debug(f"Removed empty directory {parent.relative_to(root).as_posix()}")
            parent = parent.parent


def apply_moves(root: Path, moves: Sequence[tuple[str, str]]) -> MoveOutcome:
    """Move files in two steps (source -> staging name -> destination).

    Staging first makes swaps and cycles safe. A failing file is recorded and
    put back where possible; the remaining moves still run.
    """
    outcome = MoveOutcome()
    staged: list[tuple[str, str, Path]] = []

    for index, (source, destination) in enumerate(moves):
        source_path = root / source
        staging_path = source_path.with_name(f"{STAGING_PREFIX}-{os.getpid()}-{index}-{source_path.name}")
        try:
            source_path.rename(staging_path)
        except OSError as e:
            error = f"Cannot move {source} to {destination}: {e}"
            logger.error(error)
            outcome.errors.append(error)
            outcome.locations[source] = source
            continue
        staged.append((source, destination, staging_path))

    for source, destination, staging_path in staged:
        destination_path = root / destination
        try:
            if destination_path.exists():
                raise FileExistsError(f"'{destination}' appeared during the run")
            destination_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.move(str(staging_path), str(destination_path))
        except OSError as e:
            error = f"Cannot move {source} to {destination}: {e}"
            try:
                staging_path.rename(root / source)
                outcome.locations[source] = source
            except OSError as restore_error:
                outcome.locations[source] = staging_path.relative_to(root).as_posix()
                error += f"; left at {outcome.locations[source]} ({restore_error})"
            logger.error(error)
            outcome.errors.append(error)
            continue
        outcome.locations[source] = destination
        outcome.moved.append((source, destination))
        logger.info(f"Moved {source} -> {destination}")

    _prune_empty_dirs(root, [source for source, _ in outcome.moved])
    return outcome
