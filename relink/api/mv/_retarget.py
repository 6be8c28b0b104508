"""Compute the post-move text of a link target (private)."""

import posixpath
from urllib.parse import quote

from ..link._constants import FORM_FILE_URL, FORM_RELATIVE, FORM_ROOT
from ..link.ResolvedReference import ResolvedReference
from ..scan.Snapshot import Snapshot
from .MovePlan import MovePlan


def _encode(path_text: str, rr: ResolvedReference) -> str:
    """Percent-encode when the original was encoded or the new path would break the link syntax."""
    needs_quoting = not rr.reference.angle_brackets and any(c.isspace() for c in path_text)
    if rr.target.encoded or needs_quoting:
        return quote(path_text, safe="/")
    return path_text


def _relative(path: str, start_dir: str) -> str:
    """relpath between repository-relative paths, including paths above the root."""
    depth = len(path.split("/")) if path.startswith("..") else 0
    anchor = "/" + "/".join(["_"] * depth)
    return posixpath.relpath(posixpath.join(anchor, path), posixpath.join(anchor, start_dir))


def _file_url_prefix(raw_target: str) -> str:
    """``file://`` plus the original host part (usually empty)."""
    rest = raw_target.strip()[len("file://") :]
    host = rest.split("/", 1)[0]
    return f"file://{host}"


def _retarget(rr: ResolvedReference, plan: MovePlan, snapshot: Snapshot) -> str | None:
    """New raw target for a file reference, or None if the text stays as is.

    The new target names the same logical file, re-expressed from the owner's
    post-move directory, in the same form the author used.
    """
    ref, target = rr.reference, rr.target
    if target.path is None:
        return None

    old_owner, new_owner = ref.path, plan.destination_of(ref.path)
    old_path = target.path
    # A missing target is not part of any move; it keeps naming the same path
    new_path = plan.destination_of(old_path) if snapshot.exists(old_path) else old_path

    if target.form == FORM_RELATIVE:
        if old_owner == new_owner and old_path == new_path:
            return None
        text = _relative(new_path, posixpath.dirname(new_owner))
        if target.trailing_slash:
            text = "./" if text == "." else f"{text}/"
        elif ref.raw_target.strip().startswith("./") and not text.startswith(("./", "../")):
            text = f"./{text}"
        text = _encode(text, rr)
    elif target.form == FORM_ROOT:
        if old_path == new_path:
            return None
        text = _encode(f"/{new_path}{'/' if target.trailing_slash else ''}", rr)
    elif target.form == FORM_FILE_URL:
        if old_path == new_path:
            return None
        absolute = (snapshot.root / new_path).as_posix() if new_path else snapshot.root.as_posix()
        if target.trailing_slash:
            absolute += "/"
        text = _file_url_prefix(ref.raw_target) + _encode(absolute, rr)
    else:
        return None

    new_raw = text + target.suffix
    if new_raw == ref.raw_target:
        return None
    return new_raw
