"""Load a move plan file (UNO: single function)."""

from pathlib import Path

import yaml
from pydantic import TypeAdapter, ValidationError

from .MoveEntry import MoveEntry
from .PlanError import InvalidMovePath

_ENTRIES = TypeAdapter(list[MoveEntry])


def load_move_plan(path: Path) -> list[MoveEntry]:
    """Read a YAML or JSON move plan.

    Two shapes are accepted::

        docs/old.md: guide/new.md        # mapping old -> new

        - {from: docs/old.md, to: guide/new.md}   # list of pairs (order kept)

    Raises:
        InvalidMovePath: If the file cannot be read or does not match either shape
    """
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidMovePath(f"Cannot read plan file {path}: {e}") from e

    try:
        raw = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise InvalidMovePath(f"Invalid YAML/JSON in plan file {path}: {e}") from e

    if raw is None:
        return []
    if isinstance(raw, dict):
        items = [{"from": str(source), "to": destination} for source, destination in raw.items()]
    elif isinstance(raw, list):
        items = raw
    else:
        raise InvalidMovePath(f"Plan file {path} must hold a mapping or a list of {{from, to}} pairs")

    try:
        return _ENTRIES.validate_python(items)
    except ValidationError as e:
        first = e.errors()[0]
        loc = ".".join(str(x) for x in first.get("loc", ()))
        raise InvalidMovePath(f"Plan file {path}: {loc}: {first.get('msg', str(e))}") from e
