"""Splice patches into a document text (UNO: single function)."""

from collections.abc import Iterable

from .Patch import Patch


def patch_text(text: str, patches: Iterable[Patch]) -> str:
    """Replace each patch's exact span; text outside the spans is never touched.

    Raises:
        ValueError: If a span no longer holds the expected target or two spans overlap
    """
    ordered = sorted(patches, key=lambda p: p.reference.start)
    pieces: list[str] = []
    cursor = 0
    for patch in ordered:
        ref = patch.reference
        if ref.start < cursor:
            raise ValueError(f"Overlapping patches at {ref.location}")
        if text[ref.start : ref.end] != ref.raw_target:
            raise ValueError(f"Expected '{ref.raw_target}' at {ref.location}, found '{text[ref.start : ref.end]}'")
        pieces.append(text[cursor : ref.start])
        pieces.append(patch.new_target)
        cursor = ref.end
    pieces.append(text[cursor:])
    return "".join(pieces)
