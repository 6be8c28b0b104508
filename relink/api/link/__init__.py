"""Link domain: resolving, extracting and checking references."""

from .check_integrity import check_integrity
from .extract_references import extract_references
from .IntegrityReport import IntegrityReport
from .LinkGraph import LinkGraph
from .Reference import Reference
from .resolve_target import resolve_target
from .ResolvedReference import ResolvedReference
from .ResolvedTarget import ResolvedTarget

__all__ = [
    "IntegrityReport",
    "LinkGraph",
    "Reference",
    "ResolvedReference",
    "ResolvedTarget",
    "check_integrity",
    "extract_references",
    "resolve_target",
]
