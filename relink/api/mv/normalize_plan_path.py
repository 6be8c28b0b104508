"""Normalize a path given in a move plan (UNO: single function)."""

import posixpath

from .PlanError import InvalidMovePath


def normalize_plan_path(raw: str) -> str:
    """Return a clean repository-relative posix path.

    Raises:
        InvalidMovePath: If the path is empty, absolute, the root itself, or climbs above the root
    """
    value = raw.strip()
    if not value:
        raise InvalidMovePath("empty path in move plan")
    if value.startswith("/"):
        raise InvalidMovePath(f"'{raw}' must be relative to the repository root")
    normalized = posixpath.normpath(value)
    if normalized == "." or normalized == ".." or normalized.startswith("../"):
        raise InvalidMovePath(f"'{raw}' names or escapes the repository root")
    return normalized
