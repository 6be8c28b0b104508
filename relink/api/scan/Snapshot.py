"""Immutable snapshot of a repository tree."""

from __future__ import annotations

import posixpath
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from functools import cached_property
from pathlib import Path
from types import MappingProxyType

from .Document import Document
from .EncodingFailure import EncodingFailure


@dataclass(frozen=True)
class Snapshot:
    """Arena of Documents indexed by repository-relative path.

    ``files`` holds every tracked file (documents and assets alike), so link targets
    such as images count as existing. Each phase reads a snapshot and never mutates it.
    """

    root: Path
    files: frozenset[str]
    documents: Mapping[str, Document] = field(default_factory=lambda: MappingProxyType({}))
    failures: tuple[EncodingFailure, ...] = ()

    @cached_property
    def dirs(self) -> frozenset[str]:
        """Every directory that contains at least one tracked file ("" is the root)."""
        found: set[str] = {""}
        for rel in self.files:
            parent = posixpath.dirname(rel)
            while parent and parent not in found:
                found.add(parent)
                parent = posixpath.dirname(parent)
        return frozenset(found)

    def exists(self, rel_path: str) -> bool:
        """Check whether a repository-relative path names a tracked file or directory."""
        rel_path = rel_path.rstrip("/")
        return rel_path in self.files or rel_path in self.dirs

    def files_under(self, rel_dir: str) -> list[str]:
        """Sorted tracked files strictly inside a directory."""
        prefix = f"{rel_dir.rstrip('/')}/" if rel_dir else ""
        return sorted(p for p in self.files if p.startswith(prefix))

    def iter_documents(self) -> Iterator[Document]:
        """Yield documents in path order."""
        for path in sorted(self.documents):
            yield self.documents[path]
