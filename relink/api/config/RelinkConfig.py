"""Top-level relink configuration."""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from ...constants import CONFIG_FILENAME
from .LogConfig import LogConfig
from .ScanConfig import ScanConfig


class RelinkConfig(BaseModel):
    """Configuration for one repository, read from ``<root>/.relink.json``."""

    model_config = ConfigDict(extra="forbid")

    scan: ScanConfig = Field(default_factory=ScanConfig)
    log: LogConfig = Field(default_factory=LogConfig)

    @classmethod
    def get_config_path(cls, root: Path) -> Path:
        return root / CONFIG_FILENAME

    @classmethod
    def load(cls, root: Path) -> "RelinkConfig":
        """Load and validate the repository config, or return defaults if absent.

        Raises:
            ValueError: If the file cannot be read, holds invalid JSON or fails validation
        """
        path = cls.get_config_path(root)
        if not path.exists():
            return cls()

        try:
            with path.open(encoding="utf-8") as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e
        except (OSError, UnicodeDecodeError) as e:
            raise ValueError(f"Cannot read config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e
