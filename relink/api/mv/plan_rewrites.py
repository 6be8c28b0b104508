"""Move Planner, rewrite half: patches for every affected reference (UNO: single function)."""

from ...utils.logger import get_logger
from ..link.LinkGraph import LinkGraph
from ._retarget import _retarget
from .DocumentRewrite import DocumentRewrite
from .MovePlan import MovePlan
from .Patch import Patch
from .RewritePlan import RewritePlan

logger = get_logger("mv.plan_rewrites")


def plan_rewrites(graph: LinkGraph, plan: MovePlan) -> RewritePlan:
    """Compute the rewrite for every reference in every document, moved or not.

    A reference is patched when its target or its owner moves and the relative
    expression changes. References to targets that did not exist before the run
    are counted as unresolved; they are only rewritten when their owner moves,
    so they keep naming the same missing path.
    """
    snapshot = graph.snapshot
    documents: list[DocumentRewrite] = []

    for document in snapshot.iter_documents():
        patches: list[Patch] = []
        unresolved = 0
        for rr in graph.references_from(document.path):
            if not rr.target.is_file or rr.target.path is None:
                continue
            if not snapshot.exists(rr.target.path):
                # Still re-expressed from a moved owner so it names the same missing path
                unresolved += 1
            new_target = _retarget(rr, plan, snapshot)
            if new_target is not None:
                patches.append(Patch(reference=rr.reference, new_target=new_target))

        destination = plan.destination_of(document.path)
        if patches or unresolved or destination != document.path:
            documents.append(
                DocumentRewrite(
                    source=document.path,
                    destination=destination,
                    patches=tuple(patches),
                    unresolved=unresolved,
                )
            )

    rewrite_plan = RewritePlan(
        moves=tuple(plan.moves),
        documents=tuple(documents),
        already_applied=plan.already_applied,
    )
    logger.info(f"Planned {len(rewrite_plan.moves)} moves and {rewrite_plan.patch_count} link rewrites")
    return rewrite_plan
