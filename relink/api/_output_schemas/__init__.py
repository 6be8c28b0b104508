"""Output schemas for relink commands."""

from ._base import BaseOutputSchema
from .config import ConfigVersionOutput
from .link import LinkCheckOutput
from .mv import MvApplyOutput, MvPlanOutput

__all__ = ["BaseOutputSchema", "ConfigVersionOutput", "LinkCheckOutput", "MvApplyOutput", "MvPlanOutput"]
