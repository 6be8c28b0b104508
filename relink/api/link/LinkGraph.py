"""Link graph over a Snapshot."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from ..config.ScanConfig import ScanConfig
from ..scan.Snapshot import Snapshot
from ._constants import (
    STATUS_BROKEN,
    STATUS_EXTERNAL,
    STATUS_MALFORMED,
    STATUS_OK,
    TARGET_FILE,
    TARGET_MALFORMED,
)
from .extract_references import extract_references
from .resolve_target import resolve_target
from .ResolvedReference import ResolvedReference


class LinkGraph:
    """Every reference of a snapshot, resolved, grouped by owning document.

    Built once per phase from an immutable snapshot; never updated in place.
    """

    def __init__(self, snapshot: Snapshot, outgoing: Mapping[str, tuple[ResolvedReference, ...]]):
        self.snapshot = snapshot
        self._outgoing = MappingProxyType(dict(outgoing))

    @classmethod
    def build(cls, snapshot: Snapshot, scan_config: ScanConfig | None = None) -> LinkGraph:
        outgoing: dict[str, tuple[ResolvedReference, ...]] = {}
        for document in snapshot.iter_documents():
            outgoing[document.path] = tuple(
                ResolvedReference(reference=ref, target=resolve_target(ref.raw_target, document.path, snapshot.root))
                for ref in extract_references(document, scan_config)
            )
        return cls(snapshot, outgoing)

    def __iter__(self) -> Iterator[ResolvedReference]:
        """All references, documents in path order, references in document order."""
        for path in sorted(self._outgoing):
            yield from self._outgoing[path]

    def __len__(self) -> int:
        return sum(len(refs) for refs in self._outgoing.values())

    def references_from(self, path: str) -> tuple[ResolvedReference, ...]:
        return self._outgoing.get(path, ())

    def status_of(self, rr: ResolvedReference) -> str:
        """Classify a reference against the snapshot: ok, broken, external or malformed."""
        if rr.target.kind == TARGET_MALFORMED:
            return STATUS_MALFORMED
        if rr.target.kind != TARGET_FILE or rr.target.path is None:
            return STATUS_EXTERNAL
        return STATUS_OK if self.snapshot.exists(rr.target.path) else STATUS_BROKEN
