"""Shared pytest configuration and fixtures for all tests."""

import os
import tempfile
from pathlib import Path

import pytest

# Log files go to a throwaway home; set before any relink module configures logging
os.environ["RELINK_HOME"] = tempfile.mkdtemp(prefix="relink-test-home-")


def pytest_configure(config):
    for marker in ("unit", "cli", "scenario", "config", "scan", "link", "mv"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        if "/unit/" in str(item.fspath):
            item.add_marker(pytest.mark.unit)


@pytest.fixture(autouse=True)
def relink_home(tmp_path_factory, monkeypatch) -> Path:
    """Isolated RELINK_HOME for every test."""
    home = tmp_path_factory.mktemp("relink_home")
    monkeypatch.setenv("RELINK_HOME", str(home))
    return home


# =============================================================================
# Corpus Helpers
# =============================================================================


def write_tree(root: Path, files: dict[str, str | bytes]) -> Path:
    """Create files under root from {relative path: content}."""
    for rel, content in files.items():
        path = root / rel
        path.parent.mkdir(parents=True, exist_ok=True)
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_bytes(content.encode("utf-8"))
    return root


def read_tree(root: Path) -> dict[str, bytes]:
    """Every file under root as {relative path: bytes}."""
    return {p.relative_to(root).as_posix(): p.read_bytes() for p in sorted(root.rglob("*")) if p.is_file()}


@pytest.fixture
def repo(tmp_path) -> Path:
    """Empty repository root (resolved, so file:// URLs match)."""
    root = tmp_path.resolve() / "repo"
    root.mkdir()
    return root


@pytest.fixture
def corpus(repo) -> Path:
    """Small documentation tree with relative, root-absolute, file URL and asset links."""
    return write_tree(
        repo,
        {
            "README.md": (
                "# Project\n"
                "\n"
                "See the [guide](docs/guide.md) and the [API](docs/api/index.md#usage).\n"
                "Logo: ![logo](assets/logo.png)\n"
                "External: [site](https://example.com/docs)\n"
            ),
            "docs/guide.md": (
                "# Guide\n"
                "\n"
                "Back to [home](../README.md). Details in [api](./api/index.md).\n"
                "Root link: [readme](/README.md)\n"
                "[ref]: api/index.md\n"
            ),
            "docs/api/index.md": (
                "# API\n"
                "\n"
                "```python\n"
                "# [not a link](nowhere.md)\n"
                "```\n"
                "Up: [guide](../guide.md)\n"
            ),
            "assets/logo.png": b"\x89PNG\r\n\x1a\n",
        },
    )


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result
