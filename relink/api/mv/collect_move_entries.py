"""Combine plan-file and inline move entries (UNO: single function)."""

from pathlib import Path

from .load_move_plan import load_move_plan
from .MoveEntry import MoveEntry
from .parse_move_arg import parse_move_arg


def collect_move_entries(plan_file: str | Path | None = None, moves: list[str] | None = None) -> list[MoveEntry]:
    """Plan-file entries first, then each ``OLD=NEW`` argument in order."""
    entries: list[MoveEntry] = []
    if plan_file:
        entries.extend(load_move_plan(Path(plan_file).expanduser()))
    for value in moves or []:
        entries.append(parse_move_arg(value))
    return entries
