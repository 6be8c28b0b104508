"""Mv domain: plan, validate and execute link-safe moves."""

from .apply_moves import apply_moves
from .apply_patches import apply_patches
from .expand_move_plan import expand_move_plan
from .load_move_plan import load_move_plan
from .MoveEntry import MoveEntry
from .MovePlan import MovePlan
from .parse_move_arg import parse_move_arg
from .plan_rewrites import plan_rewrites
from .PlanError import DanglingMove, InvalidMovePath, MissingSource, OverlappingMove, PlanCollision, PlanError
from .RewritePlan import RewritePlan
from .RewriteResult import RewriteResult

__all__ = [
    "DanglingMove",
    "InvalidMovePath",
    "MissingSource",
    "MoveEntry",
    "MovePlan",
    "OverlappingMove",
    "PlanCollision",
    "PlanError",
    "RewritePlan",
    "RewriteResult",
    "apply_moves",
    "apply_patches",
    "expand_move_plan",
    "load_move_plan",
    "parse_move_arg",
    "plan_rewrites",
]
