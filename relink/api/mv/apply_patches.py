"""Rewriter, text half: patch link targets in place (UNO: single function)."""

from collections.abc import Mapping
from pathlib import Path

from ...utils.logger import get_logger
from ...utils.write_text_atomic import write_text_atomic
from ..scan.Snapshot import Snapshot
from .DocumentRewrite import DocumentRewrite
from .patch_text import patch_text
from .RewritePlan import RewritePlan
from .RewriteResult import RewriteResult

logger = get_logger("mv.apply_patches")


def _patch_document(path: Path, original: str, doc: DocumentRewrite) -> None:
    current = path.read_bytes().decode("utf-8")
    if current != original:
        raise ValueError("file changed since it was scanned; not rewritten")
    write_text_atomic(path, patch_text(original, doc.patches), original)


def apply_patches(
    root: Path,
    rewrite_plan: RewritePlan,
    snapshot: Snapshot,
    locations: Mapping[str, str] | None = None,
) -> list[RewriteResult]:
    """Apply every document's patches; each file is all-or-nothing.

    Args:
        root: Repository root
        rewrite_plan: Output of the Move Planner
        snapshot: The pre-move snapshot the patches were computed from
        locations: Current path of each moved source (from apply_moves); a document
            missing from it is assumed to be at its planned destination

    Returns:
        One RewriteResult per planned document, failures included
    """
    locations = locations or {}
    results: list[RewriteResult] = []

    for doc in rewrite_plan.documents:
        location = locations.get(doc.source, doc.destination)
        result = RewriteResult(path=location, source=doc.source, unresolved=doc.unresolved)
        results.append(result)
        if not doc.patches:
            continue
        if location != doc.destination:
            # Targets were computed from the destination directory
            result.error = f"not moved to {doc.destination}; links not rewritten"
            logger.warning(f"Skipped rewriting {location}: {result.error}")
            continue

        original = snapshot.documents[doc.source].text
        try:
            _patch_document(root / location, original, doc)
        except (OSError, UnicodeDecodeError, ValueError) as e:
            result.error = str(e)
            logger.warning(f"Skipped rewriting {location}: {e}")
            continue
        result.rewritten = len(doc.patches)
        logger.info(f"Rewrote {result.rewritten} links in {location}")

    return results
