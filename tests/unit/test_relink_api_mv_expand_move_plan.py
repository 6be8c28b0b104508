"""Unit tests for relink.api.mv.expand_move_plan module."""

import pytest

from relink.api.mv import (
    DanglingMove,
    InvalidMovePath,
    MissingSource,
    MoveEntry,
    OverlappingMove,
    PlanCollision,
    expand_move_plan,
)
from relink.api.scan import scan_tree
from tests.unit.conftest import write_tree

pytestmark = pytest.mark.mv


def entries(*pairs: tuple[str, str]) -> list[MoveEntry]:
    return [MoveEntry(source=old, destination=new) for old, new in pairs]


@pytest.fixture
def snapshot(repo):
    write_tree(
        repo,
        {
            "old/a.md": "a",
            "old/b.md": "b",
            "old/sub/c.md": "c",
            "old/img.png": b"\x00",
            "keep.md": "k",
            "taken/x.md": "x",
        },
    )
    return scan_tree(repo)


def test_file_move(snapshot):
    plan = expand_move_plan(entries(("keep.md", "kept/keep.md")), snapshot)
    assert plan.moves == [("keep.md", "kept/keep.md")]
    assert plan.destination_of("keep.md") == "kept/keep.md"
    assert plan.destination_of("old/a.md") == "old/a.md"


def test_directory_move_expands_every_file(snapshot):
    plan = expand_move_plan(entries(("old", "new")), snapshot)
    assert plan.moves == [
        ("old/a.md", "new/a.md"),
        ("old/b.md", "new/b.md"),
        ("old/img.png", "new/img.png"),
        ("old/sub/c.md", "new/sub/c.md"),
    ]
    assert plan.destination_of("old/sub") == "new/sub"
    assert plan.destination_of("old/sub/") == "new/sub"


def test_identity_move_is_dropped(snapshot):
    assert len(expand_move_plan(entries(("keep.md", "./keep.md")), snapshot)) == 0


def test_swap_is_valid(snapshot):
    plan = expand_move_plan(entries(("old/a.md", "old/b.md"), ("old/b.md", "old/a.md")), snapshot)
    assert dict(plan.moves) == {"old/a.md": "old/b.md", "old/b.md": "old/a.md"}


def test_consistent_nested_entry_is_allowed(snapshot):
    plan = expand_move_plan(entries(("old", "new"), ("old/a.md", "new/a.md")), snapshot)
    assert len(plan) == 4


def test_collision_two_sources_one_destination(snapshot):
    with pytest.raises(PlanCollision) as exc_info:
        expand_move_plan(entries(("old/a.md", "new/x.md"), ("old/b.md", "new/x.md")), snapshot)
    assert exc_info.value.errors == ["'old/a.md', 'old/b.md' all move to 'new/x.md'"]


def test_collision_file_and_directory(snapshot):
    with pytest.raises(PlanCollision, match="both a file and a directory"):
        expand_move_plan(entries(("old/a.md", "dest"), ("old/b.md", "dest/b.md")), snapshot)


def test_missing_source(snapshot):
    with pytest.raises(MissingSource, match="'nope.md' does not exist"):
        expand_move_plan(entries(("nope.md", "new.md")), snapshot)


def test_already_applied_entry_is_skipped(snapshot):
    plan = expand_move_plan(entries(("gone.md", "keep.md")), snapshot)
    assert len(plan) == 0
    assert "already applied" in plan.already_applied[0]


def test_overlapping_destinations_for_one_source(snapshot):
    with pytest.raises(OverlappingMove):
        expand_move_plan(entries(("keep.md", "a.md"), ("keep.md", "b.md")), snapshot)


def test_nested_entry_inconsistent_with_directory_move(snapshot):
    with pytest.raises(OverlappingMove, match="would move to both"):
        expand_move_plan(entries(("old", "new"), ("old/a.md", "elsewhere/a.md")), snapshot)


def test_directory_into_itself(snapshot):
    with pytest.raises(InvalidMovePath, match="into itself"):
        expand_move_plan(entries(("old", "old/deeper")), snapshot)


def test_invalid_paths_reported_together(snapshot):
    with pytest.raises(InvalidMovePath) as exc_info:
        expand_move_plan(entries(("/abs.md", "x.md"), ("keep.md", "../out.md")), snapshot)
    assert len(exc_info.value.errors) == 2


def test_destination_exists(snapshot):
    with pytest.raises(DanglingMove, match="destination exists"):
        expand_move_plan(entries(("keep.md", "taken/x.md")), snapshot)


def test_destination_is_existing_directory(snapshot):
    with pytest.raises(DanglingMove, match="existing directory"):
        expand_move_plan(entries(("keep.md", "taken")), snapshot)


def test_destination_under_existing_file(snapshot):
    with pytest.raises(DanglingMove, match="is an existing file"):
        expand_move_plan(entries(("old/a.md", "keep.md/a.md")), snapshot)


def test_destination_freed_by_plan_is_allowed(snapshot):
    plan = expand_move_plan(entries(("taken/x.md", "archive/x.md"), ("keep.md", "taken/x.md")), snapshot)
    assert dict(plan.moves)["keep.md"] == "taken/x.md"


def test_error_message_lists_every_problem(snapshot):
    with pytest.raises(MissingSource) as exc_info:
        expand_move_plan(entries(("a1.md", "b1.md"), ("a2.md", "b2.md")), snapshot)
    assert str(exc_info.value) == (
        "Move source does not exist:\n  - 'a1.md' does not exist\n  - 'a2.md' does not exist"
    )
