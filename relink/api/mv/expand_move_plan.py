"""Move Planner, validation half: expand and check a plan skeleton (UNO: single function)."""

import posixpath
from collections import defaultdict
from collections.abc import Iterable
from types import MappingProxyType

from ...utils.logger import get_logger
from ..scan.Snapshot import Snapshot
from .MoveEntry import MoveEntry
from .MovePlan import MovePlan
from .normalize_plan_path import normalize_plan_path
from .PlanError import DanglingMove, InvalidMovePath, MissingSource, OverlappingMove, PlanCollision

logger = get_logger("mv.expand_move_plan")


def _ancestors(rel_path: str) -> Iterable[str]:
    parent = posixpath.dirname(rel_path)
    while parent:
        yield parent
        parent = posixpath.dirname(parent)


def _normalize_entries(entries: Iterable[MoveEntry]) -> list[tuple[str, str]]:
    invalid: list[str] = []
    overlapping: list[str] = []
    seen: dict[str, str] = {}
    for entry in entries:
        try:
            source = normalize_plan_path(entry.source)
            destination = normalize_plan_path(entry.destination)
        except InvalidMovePath as e:
            invalid.extend(e.errors)
            continue
        previous = seen.get(source)
        if previous is not None and previous != destination:
            overlapping.append(f"'{source}' is listed with two destinations: '{previous}' and '{destination}'")
            continue
        seen[source] = destination
    if invalid:
        raise InvalidMovePath(invalid)
    if overlapping:
        raise OverlappingMove(overlapping)
    return list(seen.items())


def expand_move_plan(entries: Iterable[MoveEntry], snapshot: Snapshot) -> MovePlan:
    """Expand directory moves into file moves and validate the result.

    Nothing is touched on disk. Checks run in this order and the first failing
    category is raised with all of its messages.

    Raises:
        InvalidMovePath: Empty, absolute or escaping paths; a directory moved into itself
        MissingSource: A source that is neither a tracked file nor a directory
        OverlappingMove: A file that two entries would send to different places
        PlanCollision: Two sources with one destination, or a destination used as both file and directory
        DanglingMove: A destination that already exists and is not itself moving away
    """
    pairs = _normalize_entries(entries)

    invalid: list[str] = []
    missing: list[str] = []
    overlapping: list[str] = []
    already_applied: list[str] = []
    dir_moves: list[tuple[str, str]] = []
    assigned: dict[str, str] = {}

    for source, destination in pairs:
        if source == destination:
            continue
        if source in snapshot.files:
            covered = [(source, destination)]
        elif source in snapshot.dirs:
            if destination.startswith(source + "/"):
                invalid.append(f"cannot move directory '{source}' into itself ('{destination}')")
                continue
            dir_moves.append((source, destination))
            covered = [(f, destination + f[len(source) :]) for f in snapshot.files_under(source)]
        elif snapshot.exists(destination):
            already_applied.append(f"'{source}' is gone and '{destination}' exists; treating the move as already applied")
            continue
        else:
            missing.append(f"'{source}' does not exist")
            continue

        for old, new in covered:
            previous = assigned.get(old)
            if previous is not None and previous != new:
                overlapping.append(f"'{old}' would move to both '{previous}' and '{new}'")
                continue
            assigned[old] = new

    if invalid:
        raise InvalidMovePath(invalid)
    if missing:
        raise MissingSource(missing)
    if overlapping:
        raise OverlappingMove(overlapping)

    by_destination: dict[str, list[str]] = defaultdict(list)
    for old, new in assigned.items():
        by_destination[new].append(old)

    collisions: list[str] = []
    for new in sorted(by_destination):
        olds = by_destination[new]
        if len(olds) > 1:
            collisions.append(f"{', '.join(repr(o) for o in sorted(olds))} all move to '{new}'")
        for parent in _ancestors(new):
            if parent in by_destination:
                collisions.append(f"'{parent}' would be both a file and a directory")
                break
    if collisions:
        raise PlanCollision(collisions)

    dangling: list[str] = []
    for old, new in sorted(assigned.items()):
        if new in snapshot.files and new not in assigned:
            dangling.append(f"'{old}' -> '{new}': destination exists and is not part of the plan")
        elif new in snapshot.dirs:
            dangling.append(f"'{old}' -> '{new}': destination is an existing directory")
        else:
            for parent in _ancestors(new):
                if parent in snapshot.files and parent not in assigned:
                    dangling.append(f"'{old}' -> '{new}': '{parent}' is an existing file")
                    break
    if dangling:
        raise DanglingMove(dangling)

    for message in already_applied:
        logger.warning(message)
    logger.info(f"Expanded move plan: {len(assigned)} file moves from {len(pairs)} entries")

    return MovePlan(
        file_moves=MappingProxyType(dict(sorted(assigned.items()))),
        dir_moves=tuple(sorted(dir_moves, key=lambda pair: len(pair[0]), reverse=True)),
        already_applied=tuple(already_applied),
    )
