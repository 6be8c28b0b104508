"""Per-document rewrite instructions (UNO: single model)."""

from dataclasses import dataclass

from .Patch import Patch


@dataclass(frozen=True)
class DocumentRewrite:
    """What happens to one document: where it ends up and which targets change.

    ``unresolved`` counts file references whose target did not exist before the run
    and is not produced by the plan; they are left untouched.
    """

    source: str
    destination: str
    patches: tuple[Patch, ...] = ()
    unresolved: int = 0

    def to_dict(self) -> dict[str, object]:
        return {
            "path": self.source,
            "destination": self.destination,
            "rewrites": len(self.patches),
            "unresolved": self.unresolved,
        }
