"""Unit tests for relink.api.link.cmd_check module."""

import pytest

from relink.api.link.cmd_check import cmd_check
from tests.unit.conftest import read_tree, run_cmd, write_tree

pytestmark = pytest.mark.link


def test_cmd_check_clean(corpus):
    before = read_tree(corpus)
    result = run_cmd(cmd_check, str(corpus))
    assert result.success is True
    assert result.status_code == 0
    assert result.output["is_clean"] is True
    assert result.output["root"] == str(corpus)
    assert result.output["errors"] == []
    assert read_tree(corpus) == before


def test_cmd_check_broken_exit_one(repo):
    write_tree(repo, {"a.md": "[x](old/missing.md)\n"})
    result = run_cmd(cmd_check, str(repo))
    assert result.success is False
    assert result.status_code == 1
    assert result.output["broken_count"] == 1
    assert result.output["broken"][0]["target"] == "old/missing.md"
    assert result.result == "Found 1 broken references"


def test_cmd_check_invalid_config_exit_two(repo):
    write_tree(repo, {".relink.json": "{bad"})
    result = run_cmd(cmd_check, str(repo))
    assert result.status_code == 2
    assert "Invalid JSON" in result.output["errors"][0]


def test_cmd_check_config_directory_exit_two(repo):
    (repo / ".relink.json").mkdir(parents=True)
    result = run_cmd(cmd_check, str(repo))
    assert result.status_code == 2
    assert "Cannot read config file" in result.output["errors"][0]


def test_cmd_check_missing_root_exit_two(tmp_path):
    result = run_cmd(cmd_check, str(tmp_path / "absent"))
    assert result.status_code == 2
    assert result.output["documents_checked"] == 0
