"""Unit tests for move plan input: load_move_plan, parse_move_arg, collect_move_entries."""

import pytest

from relink.api.mv import InvalidMovePath, MoveEntry, load_move_plan, parse_move_arg
from relink.api.mv.collect_move_entries import collect_move_entries
from relink.api.mv.normalize_plan_path import normalize_plan_path

pytestmark = pytest.mark.mv


def test_yaml_mapping(tmp_path):
    plan = tmp_path / "plan.yaml"
    plan.write_text("skills/README.md: architecture/README.md\nold: new\n", encoding="utf-8")
    entries = load_move_plan(plan)
    assert [(e.source, e.destination) for e in entries] == [
        ("skills/README.md", "architecture/README.md"),
        ("old", "new"),
    ]


def test_json_list(tmp_path):
    plan = tmp_path / "plan.json"
    plan.write_text('[{"from": "a.md", "to": "b/a.md"}]', encoding="utf-8")
    assert load_move_plan(plan) == [MoveEntry(source="a.md", destination="b/a.md")]


def test_empty_file_is_empty_plan(tmp_path):
    plan = tmp_path / "plan.yaml"
    plan.write_text("", encoding="utf-8")
    assert load_move_plan(plan) == []


@pytest.mark.parametrize(
    "content",
    [
        "just a string",
        "- {from: a.md}",
        "- {from: a.md, to: b.md, extra: 1}",
        "[unclosed",
    ],
)
def test_bad_plan_files(tmp_path, content):
    plan = tmp_path / "plan.yaml"
    plan.write_text(content, encoding="utf-8")
    with pytest.raises(InvalidMovePath):
        load_move_plan(plan)


def test_missing_plan_file(tmp_path):
    with pytest.raises(InvalidMovePath, match="Cannot read plan file"):
        load_move_plan(tmp_path / "absent.yaml")


def test_parse_move_arg_splits_on_first_equals():
    entry = parse_move_arg(" a=b.md = c/a=b.md ")
    assert entry.source == "a"
    assert entry.destination == "b.md = c/a=b.md"


@pytest.mark.parametrize("value", ["a.md", "=b.md", "a.md=", "  =  "])
def test_parse_move_arg_rejects(value):
    with pytest.raises(InvalidMovePath, match="OLD=NEW"):
        parse_move_arg(value)


def test_collect_file_entries_first(tmp_path):
    plan = tmp_path / "plan.yaml"
    plan.write_text("a.md: b.md\n", encoding="utf-8")
    entries = collect_move_entries(plan, ["c.md=d.md"])
    assert [e.source for e in entries] == ["a.md", "c.md"]


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("docs/./a.md", "docs/a.md"), ("docs/", "docs"), ("a/b/../c.md", "a/c.md")],
)
def test_normalize_plan_path(raw, expected):
    assert normalize_plan_path(raw) == expected


@pytest.mark.parametrize("raw", ["", "/abs/a.md", ".", "..", "../x.md", "a/../../x.md"])
def test_normalize_plan_path_rejects(raw):
    with pytest.raises(InvalidMovePath):
        normalize_plan_path(raw)
