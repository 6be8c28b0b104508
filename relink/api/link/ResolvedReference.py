"""A Reference paired with its resolution (UNO: single model)."""

from dataclasses import dataclass

from .Reference import Reference
from .ResolvedTarget import ResolvedTarget


@dataclass(frozen=True)
class ResolvedReference:
    reference: Reference
    target: ResolvedTarget
