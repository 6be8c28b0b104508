"""Scan section of relink configuration."""

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_EXCLUDE_DIRNAMES = [".git", ".hg", ".svn", "node_modules", ".venv", "venv", "__pycache__"]


class ScanConfig(BaseModel):
    """Which files are scanned for links and which regions are ignored."""

    model_config = ConfigDict(extra="forbid")

    include_suffixes: list[str] = Field(
        default_factory=lambda: [".md", ".markdown"],
        description="File suffixes treated as link-bearing documents",
    )
    exclude_dirnames: list[str] = Field(
        default_factory=lambda: list(DEFAULT_EXCLUDE_DIRNAMES),
        description="Directory names pruned from the walk entirely",
    )
    skip_front_matter: bool = Field(True, description="Ignore a leading YAML front matter block")
    skip_inline_code: bool = Field(True, description="Ignore links inside `inline code` spans")

    @field_validator("include_suffixes")
    @classmethod
    def _normalize_suffixes(cls, v: list[str]) -> list[str]:
        """Lower-case suffixes and ensure a leading dot."""
        normalized = []
        for suffix in v:
            suffix = suffix.strip().lower()
            if not suffix:
                raise ValueError("include_suffixes entries must be non-empty")
            normalized.append(suffix if suffix.startswith(".") else f".{suffix}")
        return normalized

    def is_document(self, rel_path: str) -> bool:
        """Check whether a repository-relative path should be scanned for links."""
        lowered = rel_path.lower()
        return any(lowered.endswith(suffix) for suffix in self.include_suffixes)
