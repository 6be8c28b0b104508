"""Result of executing file moves (UNO: single model)."""

from dataclasses import dataclass, field


@dataclass
class MoveOutcome:
    """Where every planned file actually ended up.

    ``locations`` maps each planned source to its current path: the destination on
    success, the source (or a staging name) when the move failed.
    """

    moved: list[tuple[str, str]] = field(default_factory=list)
    locations: dict[str, str] = field(default_factory=dict)
    errors: list[str] = field(default_factory=list)
