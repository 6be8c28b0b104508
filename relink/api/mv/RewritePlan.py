"""Move Planner output model."""

from dataclasses import dataclass

from .DocumentRewrite import DocumentRewrite


@dataclass(frozen=True)
class RewritePlan:
    """File moves plus per-document patches, both in deterministic order."""

    moves: tuple[tuple[str, str], ...] = ()
    documents: tuple[DocumentRewrite, ...] = ()
    already_applied: tuple[str, ...] = ()

    @property
    def patch_count(self) -> int:
        return sum(len(doc.patches) for doc in self.documents)

    @property
    def is_empty(self) -> bool:
        return not self.moves and self.patch_count == 0
