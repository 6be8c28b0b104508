"""Path Resolver: turn a raw link target into a repository-relative path (UNO: single function)."""

import posixpath
import re
from pathlib import Path
from urllib.parse import unquote

from ._constants import (
    EXTERNAL_SCHEMES,
    FORM_FILE_URL,
    FORM_RELATIVE,
    FORM_ROOT,
    HIERARCHICAL_SCHEMES,
    TARGET_ANCHOR,
    TARGET_EXTERNAL,
    TARGET_FILE,
    TARGET_MALFORMED,
)
from .ResolvedTarget import ResolvedTarget

SCHEME_PATTERN = re.compile(r"^([A-Za-z][A-Za-z0-9+.\-]*):")


def _split_suffix(target: str) -> tuple[str, str]:
    """Split ``path?query#fragment`` into (path, "?query#fragment")."""
    cut = len(target)
    for marker in ("?", "#"):
        idx = target.find(marker)
        if idx != -1:
            cut = min(cut, idx)
    return target[:cut], target[cut:]


def _normalize(joined: str) -> str:
    """Normalize a joined posix path ("" is the root).

    A path climbing above the root keeps its leading ".." parts, so it never names
    a tracked file and is reported as broken.
    """
    normalized = posixpath.normpath(joined) if joined else "."
    return "" if normalized == "." else normalized


def _escapes(normalized: str) -> bool:
    return normalized == ".." or normalized.startswith("../")


def _relative_to_root(abs_path: str, root: Path) -> str | None:
    """Express an absolute filesystem path relative to root, following symlinked roots."""
    root_str = root.as_posix().rstrip("/")
    candidates = [posixpath.normpath(abs_path)]
    resolved = Path(abs_path).resolve().as_posix()
    if resolved not in candidates:
        candidates.append(resolved)
    for candidate in candidates:
        if candidate == root_str:
            return ""
        if candidate.startswith(root_str + "/"):
            return candidate[len(root_str) + 1 :]
    return None


def _resolve_file_url(target: str, root: Path) -> ResolvedTarget:
    rest = target[len("file:") :]
    if not rest.startswith("//"):
        return ResolvedTarget(kind=TARGET_MALFORMED, reason="file URL must start with file://")
    rest = rest[2:]
    # file:///path or file://host/path
    first_slash = rest.find("/")
    if first_slash == -1:
        return ResolvedTarget(kind=TARGET_MALFORMED, reason="file URL has no path")
    path_part, suffix = _split_suffix(rest[first_slash:])
    decoded = unquote(path_part)
    rel = _relative_to_root(decoded, root)
    if rel is None:
        return ResolvedTarget(kind=TARGET_EXTERNAL, reason="outside repository")
    normalized = _normalize(rel)
    return ResolvedTarget(
        kind=TARGET_FILE,
        path=normalized,
        form=FORM_FILE_URL,
        suffix=suffix,
        trailing_slash=decoded.endswith("/") and normalized != "",
        encoded="%" in path_part,
    )


def resolve_target(raw_target: str, owner_path: str, root: Path) -> ResolvedTarget:
    """Resolve a raw target written inside ``owner_path``.

    Rules:
        - ``file://`` URLs are re-expressed relative to ``root``.
        - ``/x`` is relative to the repository root.
        - Anything else without a scheme is relative to the owner's directory.
        - A path climbing above the root stays a file reference that names nothing.
        - External URLs and pure ``#anchor`` targets are not file references.

    Args:
        raw_target: Target text exactly as written in the document
        owner_path: Repository-relative posix path of the document holding the link
        root: Absolute repository root

    Returns:
        ResolvedTarget; kind "malformed" carries a reason instead of a path
    """
    target = raw_target.strip()
    if not target:
        return ResolvedTarget(kind=TARGET_MALFORMED, reason="empty target")

    if target.startswith("#"):
        return ResolvedTarget(kind=TARGET_ANCHOR, suffix=target)

    scheme_match = SCHEME_PATTERN.match(target)
    if scheme_match:
        scheme = scheme_match.group(1).lower()
        rest = target[scheme_match.end() :]
        if scheme == "file":
            return _resolve_file_url(target, root)
        if len(scheme) == 1:
            return ResolvedTarget(kind=TARGET_MALFORMED, reason=f"drive-letter path '{target}'")
        if scheme in EXTERNAL_SCHEMES:
            if not rest or (scheme in HIERARCHICAL_SCHEMES and not rest.startswith("//")):
                return ResolvedTarget(kind=TARGET_MALFORMED, reason=f"malformed {scheme} URL")
            return ResolvedTarget(kind=TARGET_EXTERNAL)
        if rest.startswith("//"):
            return ResolvedTarget(kind=TARGET_EXTERNAL)
        return ResolvedTarget(kind=TARGET_MALFORMED, reason=f"unknown scheme '{scheme}:'")

    path_part, suffix = _split_suffix(target)
    if not path_part:
        return ResolvedTarget(kind=TARGET_MALFORMED, reason="target has no path")

    decoded = unquote(path_part)
    if decoded.startswith("/"):
        form = FORM_ROOT
        joined = decoded.lstrip("/")
    else:
        form = FORM_RELATIVE
        joined = posixpath.join(posixpath.dirname(owner_path), decoded)

    normalized = _normalize(joined)
    return ResolvedTarget(
        kind=TARGET_FILE,
        path=normalized,
        form=form,
        reason="outside repository root" if _escapes(normalized) else "",
        suffix=suffix,
        trailing_slash=decoded.endswith("/"),
        encoded="%" in path_part,
    )
