"""Shared front half of plan and apply (private)."""

from dataclasses import dataclass
from pathlib import Path

from ..config.RelinkConfig import RelinkConfig
from ..link.LinkGraph import LinkGraph
from ..scan.open_repository import open_repository
from ..scan.Snapshot import Snapshot
from .collect_move_entries import collect_move_entries
from .expand_move_plan import expand_move_plan
from .plan_rewrites import plan_rewrites
from .RewritePlan import RewritePlan


@dataclass(frozen=True)
class _PreparedPlan:
    root: Path
    config: RelinkConfig
    snapshot: Snapshot
    graph: LinkGraph
    rewrite_plan: RewritePlan


def _prepare_plan(root: str, plan_file: str | None, moves: list[str] | None) -> _PreparedPlan:
    """Scan, build the link graph, validate and expand the plan, compute patches.

    Raises:
        ValueError: If the repository cannot be opened
        PlanError: If the plan is invalid
    """
    entries = collect_move_entries(plan_file, moves)
    root_path, config, snapshot = open_repository(root)
    graph = LinkGraph.build(snapshot, config.scan)
    move_plan = expand_move_plan(entries, snapshot)
    rewrite_plan = plan_rewrites(graph, move_plan)
    return _PreparedPlan(root=root_path, config=config, snapshot=snapshot, graph=graph, rewrite_plan=rewrite_plan)
