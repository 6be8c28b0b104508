"""Link reference dataclass (UNO: single model)."""

from dataclasses import dataclass


@dataclass
class LinkRef:
    """A link found in text, before it is attached to a document path."""

    line_number: int
    column_number: int
    offset: int  # character offset of raw_target within the whole text
    raw_target: str
    link_type: str  # "inline", "reference", "file_url"
    alias: str = ""
    is_embed: bool = False
    angle_brackets: bool = False
