"""Scan a repository tree into a Snapshot (UNO: single function)."""

import os
from pathlib import Path
from types import MappingProxyType

from ...utils.logger import get_logger
from ..config.ScanConfig import ScanConfig
from .Document import Document
from .EncodingFailure import EncodingFailure
from .Snapshot import Snapshot

logger = get_logger("scan.scan_tree")


def scan_tree(root: Path, scan_config: ScanConfig | None = None) -> Snapshot:
    """Read every tracked file under ``root``; decode the link-bearing ones.

    Excluded directory names are pruned from the walk. Symlinked directories are
    not followed. Files that fail to decode as UTF-8 are recorded as failures.
    """
    scan_config = scan_config or ScanConfig()
    root = root.resolve()
    excluded = set(scan_config.exclude_dirnames)

    files: set[str] = set()
    documents: dict[str, Document] = {}
    failures: list[EncodingFailure] = []

    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in excluded)
        base = Path(dirpath)
        for name in sorted(filenames):
            full = base / name
            if not full.is_file():
                continue
            rel = full.relative_to(root).as_posix()
            files.add(rel)
            if not scan_config.is_document(rel):
                continue
            try:
                text = full.read_bytes().decode("utf-8")
            except UnicodeDecodeError as exc:
                failure = EncodingFailure(path=rel, reason=str(exc))
                logger.warning(str(failure))
                failures.append(failure)
                continue
            except OSError as exc:
                failure = EncodingFailure(path=rel, reason=f"read failed: {exc}")
                logger.warning(str(failure))
                failures.append(failure)
                continue
            documents[rel] = Document(path=rel, text=text)

    logger.info(f"Scanned {root}: {len(files)} files, {len(documents)} documents, {len(failures)} failures")
    return Snapshot(
        root=root,
        files=frozenset(files),
        documents=MappingProxyType(documents),
        failures=tuple(failures),
    )
