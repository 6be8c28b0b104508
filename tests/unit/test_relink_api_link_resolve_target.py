"""Unit tests for relink.api.link.resolve_target module."""

from pathlib import Path

import pytest

from relink.api.link import resolve_target

pytestmark = pytest.mark.link

ROOT = Path("/repo")


@pytest.mark.parametrize(
    ("raw", "owner", "expected"),
    [
        ("guide.md", "docs/index.md", "docs/guide.md"),
        ("./guide.md", "docs/index.md", "docs/guide.md"),
        ("../README.md", "docs/index.md", "README.md"),
        ("api/", "docs/index.md", "docs/api"),
        ("..", "docs/index.md", ""),
        ("/docs/guide.md", "a/b/c.md", "docs/guide.md"),
        ("my%20notes.md", "index.md", "my notes.md"),
    ],
)
def test_relative_and_root_targets(raw, owner, expected):
    target = resolve_target(raw, owner, ROOT)
    assert target.kind == "file"
    assert target.path == expected


def test_forms_are_recorded():
    assert resolve_target("a.md", "x.md", ROOT).form == "relative"
    assert resolve_target("/a.md", "x.md", ROOT).form == "root"
    assert resolve_target("file:///repo/a.md", "x.md", ROOT).form == "file_url"


def test_query_and_fragment_are_kept_as_suffix():
    target = resolve_target("guide.md?raw=1#setup", "docs/index.md", ROOT)
    assert target.path == "docs/guide.md"
    assert target.suffix == "?raw=1#setup"


def test_trailing_slash_and_encoding_flags():
    assert resolve_target("api/", "index.md", ROOT).trailing_slash is True
    assert resolve_target("a%20b.md", "index.md", ROOT).encoded is True


def test_file_url_inside_root():
    target = resolve_target("file:///repo/skills/README.md", "skills/README.md", ROOT)
    assert target.kind == "file"
    assert target.path == "skills/README.md"


def test_file_url_with_localhost():
    assert resolve_target("file://localhost/repo/a.md", "x.md", ROOT).path == "a.md"


def test_file_url_outside_root_is_external():
    target = resolve_target("file:///etc/hosts", "x.md", ROOT)
    assert target.kind == "external"
    assert target.reason == "outside repository"


@pytest.mark.parametrize("raw", ["https://example.com/a.md", "mailto:someone@example.com", "ssh://host/repo"])
def test_external_urls(raw):
    assert resolve_target(raw, "x.md", ROOT).kind == "external"


def test_anchor_only():
    target = resolve_target("#install", "x.md", ROOT)
    assert target.kind == "anchor"
    assert target.is_file is False


@pytest.mark.parametrize(
    ("raw", "reason"),
    [
        ("", "empty target"),
        ("   ", "empty target"),
        ("C:\\docs\\a.md", "drive-letter path 'C:\\docs\\a.md'"),
        ("https:no-slashes", "malformed https URL"),
        ("foo:bar", "unknown scheme 'foo:'"),
        ("?only=query", "target has no path"),
    ],
)
def test_malformed_targets(raw, reason):
    target = resolve_target(raw, "docs/x.md", ROOT)
    assert target.kind == "malformed"
    assert target.reason == reason


@pytest.mark.parametrize(
    ("raw", "owner", "expected"),
    [
        ("../../outside.md", "docs/x.md", "../outside.md"),
        ("../", "x.md", ".."),
        ("/../up.md", "docs/x.md", "../up.md"),
    ],
)
def test_target_above_root_is_a_file_reference(raw, owner, expected):
    target = resolve_target(raw, owner, ROOT)
    assert target.kind == "file"
    assert target.path == expected
    assert target.reason == "outside repository root"
