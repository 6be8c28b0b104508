"""Encoding failure record (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EncodingFailure:
    """A document that could not be decoded; it stays tracked but is never scanned or patched."""

    path: str
    reason: str

    def __str__(self) -> str:
        return f"Cannot decode {self.path}: {self.reason}"
