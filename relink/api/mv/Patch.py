"""A single link-target replacement (UNO: single model)."""

from dataclasses import dataclass

from ..link.Reference import Reference


@dataclass(frozen=True)
class Patch:
    """Replace ``reference.raw_target`` at ``reference.start:reference.end`` with ``new_target``."""

    reference: Reference
    new_target: str

    def to_dict(self) -> dict[str, object]:
        return {
            "path": self.reference.path,
            "line": self.reference.line_number,
            "column": self.reference.column_number,
            "old": self.reference.raw_target,
            "new": self.new_target,
        }
