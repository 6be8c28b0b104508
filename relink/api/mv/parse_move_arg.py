"""Parse an inline OLD=NEW move argument (UNO: single function)."""

from .MoveEntry import MoveEntry
from .PlanError import InvalidMovePath


def parse_move_arg(value: str) -> MoveEntry:
    """Parse ``old/path.md=new/path.md`` (split at the first "=").

    Raises:
        InvalidMovePath: If either side is missing
    """
    source, sep, destination = value.partition("=")
    if not sep or not source.strip() or not destination.strip():
        raise InvalidMovePath(f"'{value}' is not of the form OLD=NEW")
    return MoveEntry(source=source.strip(), destination=destination.strip())
