"""Integrity report model."""

from dataclasses import dataclass, field

from ..scan.EncodingFailure import EncodingFailure
from .ResolvedReference import ResolvedReference


def _entry(rr: ResolvedReference) -> dict[str, object]:
    ref = rr.reference
    return {
        "path": ref.path,
        "line": ref.line_number,
        "column": ref.column_number,
        "target": ref.raw_target,
        "resolved": rr.target.path if rr.target.path is not None else "",
        "reason": rr.target.reason,
    }


@dataclass
class IntegrityReport:
    """Outcome of one integrity pass over a tree. ``broken`` is never truncated."""

    documents_checked: int = 0
    ok_count: int = 0
    external_count: int = 0
    broken: list[ResolvedReference] = field(default_factory=list)
    malformed: list[ResolvedReference] = field(default_factory=list)
    failures: list[EncodingFailure] = field(default_factory=list)

    @property
    def references_checked(self) -> int:
        return self.ok_count + self.external_count + len(self.broken) + len(self.malformed)

    @property
    def broken_count(self) -> int:
        return len(self.broken)

    @property
    def is_clean(self) -> bool:
        return not self.broken

    def warnings(self) -> list[str]:
        """Malformed references and undecodable files, one line each."""
        lines = [
            f"{rr.reference.location}: malformed reference '{rr.reference.raw_target}' ({rr.target.reason})"
            for rr in self.malformed
        ]
        lines.extend(str(failure) for failure in self.failures)
        return lines

    def to_dict(self) -> dict[str, object]:
        return {
            "documents_checked": self.documents_checked,
            "references_checked": self.references_checked,
            "ok_count": self.ok_count,
            "external_count": self.external_count,
            "broken_count": self.broken_count,
            "malformed_count": len(self.malformed),
            "broken": [_entry(rr) for rr in self.broken],
            "malformed": [_entry(rr) for rr in self.malformed],
            "is_clean": self.is_clean,
        }
