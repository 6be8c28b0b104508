"""Configuration models for relink."""

from .LogConfig import LogConfig
from .RelinkConfig import RelinkConfig
from .ScanConfig import ScanConfig

__all__ = ["LogConfig", "RelinkConfig", "ScanConfig"]
