"""One old-path/new-path pair of a move plan skeleton."""

from pydantic import BaseModel, ConfigDict, Field


class MoveEntry(BaseModel):
    """A requested relocation, file- or directory-level, as the user wrote it."""

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

    source: str = Field(..., alias="from", min_length=1, description="Current repository-relative path")
    destination: str = Field(..., alias="to", min_length=1, description="New repository-relative path")
