"""Reference dataclass (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Reference:
    """An occurrence of a link inside a Document.

    ``start``/``end`` are character offsets of ``raw_target`` within the document text;
    ``column_number`` is the 1-based column of the first target character on its line.
    """

    path: str
    line_number: int
    column_number: int
    start: int
    end: int
    raw_target: str
    link_kind: str  # "inline", "reference", "file_url"
    label: str = ""
    is_embed: bool = False
    angle_brackets: bool = False

    @property
    def location(self) -> str:
        return f"{self.path}:{self.line_number}:{self.column_number}"
