"""Scan domain: read a repository tree into an immutable snapshot."""

from .Document import Document
from .EncodingFailure import EncodingFailure
from .open_repository import open_repository
from .scan_tree import scan_tree
from .Snapshot import Snapshot

__all__ = ["Document", "EncodingFailure", "Snapshot", "open_repository", "scan_tree"]
