"""Document model (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Document:
    """A text file under the repository root, identified by its repository-relative path."""

    path: str  # posix, relative to the root
    text: str
    encoding: str = "utf-8"
