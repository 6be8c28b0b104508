"""Output schemas for config commands."""

from pydantic import Field

from ._base import BaseOutputSchema


class ConfigVersionOutput(BaseOutputSchema):
    """Output schema for the version command."""

    version: str = Field(..., description="Package version string")
    git_sha: str = Field(..., description="Short git commit SHA, empty string if not available")
    full_version: str = Field(..., description="Version plus git SHA when available")
