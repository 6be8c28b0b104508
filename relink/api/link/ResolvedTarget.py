"""Resolved link target (UNO: single model)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ResolvedTarget:
    """What a raw target denotes.

    For ``kind == "file"`` the ``path`` is repository-relative posix without a trailing
    slash ("" is the root directory) and ``form`` records how the target was written.
    ``suffix`` holds any ``?query`` and ``#fragment`` verbatim.
    """

    kind: str  # "file", "external", "anchor", "malformed"
    path: str | None = None
    form: str | None = None
    suffix: str = ""
    reason: str = ""
    trailing_slash: bool = False
    encoded: bool = False

    @property
    def is_file(self) -> bool:
        return self.kind == "file"
