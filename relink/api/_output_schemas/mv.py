"""Output schemas for plan and apply commands."""

from typing import Any

from pydantic import Field

from ._base import BaseOutputSchema


class MvPlanOutput(BaseOutputSchema):
    """Output schema for the plan command (nothing is written)."""

    root: str = Field(..., description="Absolute repository root")
    valid: bool = Field(..., description="False when the move plan was rejected")
    moves: list[dict[str, str]] = Field(..., description="Expanded file moves as {from, to}")
    move_count: int = Field(..., description="Number of file moves")
    patch_count: int = Field(..., description="Number of link targets that would be rewritten")
    documents: list[dict[str, Any]] = Field(
        ..., description="Per document: path, destination, rewrites, unresolved"
    )
    patches: list[dict[str, Any]] = Field(..., description="Every predicted rewrite: path, line, column, old, new")


class MvApplyOutput(BaseOutputSchema):
    """Output schema for the apply command."""

    root: str = Field(..., description="Absolute repository root")
    valid: bool = Field(..., description="False when the move plan was rejected before any mutation")
    moves: list[dict[str, str]] = Field(..., description="File moves performed as {from, to}")
    move_count: int = Field(..., description="Number of files moved")
    patch_count: int = Field(..., description="Number of link targets rewritten")
    documents: list[dict[str, Any]] = Field(
        ..., description="Per document: path, source, rewritten, unresolved, error"
    )
    broken_before: int = Field(..., description="Broken references before the run")
    integrity: dict[str, Any] = Field(..., description="Integrity report of the final tree")
