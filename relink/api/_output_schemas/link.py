"""Output schemas for link commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema


class LinkCheckOutput(BaseOutputSchema):
    """Output schema for the check command.

    Output structure:
    - root: str - absolute repository root that was scanned
    - documents_checked: int - documents scanned for references
    - references_checked: int - references classified
    - ok_count / external_count / broken_count / malformed_count: int - per-status totals
    - broken: list[dict] - every broken reference (path, line, column, target, resolved, reason)
    - malformed: list[dict] - every malformed reference, same shape as broken
    - is_clean: bool - True when no reference is broken
    """

    root: str = Field(..., description="Absolute repository root")
    documents_checked: int = Field(..., description="Documents scanned for references")
    references_checked: int = Field(..., description="References classified")
    ok_count: int = Field(..., description="References resolving to an existing file or directory")
    external_count: int = Field(..., description="External URLs and in-document anchors")
    broken_count: int = Field(..., description="References whose target does not exist")
    malformed_count: int = Field(..., description="References that could not be classified")
    broken: list[dict[str, Any]] = Field(..., description="Every broken reference")
    malformed: list[dict[str, Any]] = Field(..., description="Every malformed reference")
    is_clean: bool = Field(..., description="True when no reference is broken")
