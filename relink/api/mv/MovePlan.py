"""Expanded move plan model."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True)
class MovePlan:
    """Validated, file-level relocations.

    ``file_moves`` maps every moving file's old path to its new path. ``dir_moves``
    keeps directory-level entries (longest source first) so references to a moved
    directory can be re-targeted as well.
    """

    file_moves: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))
    dir_moves: tuple[tuple[str, str], ...] = ()
    already_applied: tuple[str, ...] = ()

    def __len__(self) -> int:
        return len(self.file_moves)

    @property
    def moves(self) -> list[tuple[str, str]]:
        return sorted(self.file_moves.items())

    def destination_of(self, rel_path: str) -> str:
        """Where ``rel_path`` (file or directory) lives once the plan is applied."""
        rel_path = rel_path.rstrip("/")
        moved = self.file_moves.get(rel_path)
        if moved is not None:
            return moved
        for source, destination in self.dir_moves:
            if rel_path == source:
                return destination
            if rel_path.startswith(source + "/"):
                return destination + rel_path[len(source) :]
        return rel_path
