"""Per-document rewrite outcome (UNO: single model)."""

from dataclasses import dataclass


@dataclass
class RewriteResult:
    path: str
    source: str
    rewritten: int = 0
    unresolved: int = 0
    error: str | None = None

    def to_dict(self) -> dict[str, object]:
        return {
            "path": self.path,
            "source": self.source,
            "rewritten": self.rewritten,
            "unresolved": self.unresolved,
            "error": self.error or "",
        }
