"""Unit tests for relink.api.config (RelinkConfig, ScanConfig, get_home_dir)."""

import json

import pytest
from pydantic import ValidationError

from relink.api.config import LogConfig, RelinkConfig, ScanConfig
from relink.api.config.get_home_dir import get_home_dir

pytestmark = pytest.mark.config


def test_defaults_when_file_absent(tmp_path):
    config = RelinkConfig.load(tmp_path)
    assert config.scan.include_suffixes == [".md", ".markdown"]
    assert ".git" in config.scan.exclude_dirnames
    assert config.scan.skip_front_matter is True
    assert config.log.level == "INFO"


def test_load_valid_file(tmp_path):
    data = {"scan": {"exclude_dirnames": ["build"], "skip_inline_code": False}, "log": {"level": "DEBUG"}}
    RelinkConfig.get_config_path(tmp_path).write_text(json.dumps(data), encoding="utf-8")
    config = RelinkConfig.load(tmp_path)
    assert config.scan.exclude_dirnames == ["build"]
    assert config.scan.skip_inline_code is False
    assert config.log.level == "DEBUG"


def test_invalid_json(tmp_path):
    RelinkConfig.get_config_path(tmp_path).write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError, match="Invalid JSON"):
        RelinkConfig.load(tmp_path)


def test_unreadable_config_is_value_error(tmp_path):
    RelinkConfig.get_config_path(tmp_path).mkdir()
    with pytest.raises(ValueError, match="Cannot read config file"):
        RelinkConfig.load(tmp_path)


def test_non_object_json(tmp_path):
    RelinkConfig.get_config_path(tmp_path).write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(ValueError, match="must contain a JSON object"):
        RelinkConfig.load(tmp_path)


def test_unknown_field_is_located(tmp_path):
    RelinkConfig.get_config_path(tmp_path).write_text(json.dumps({"scan": {"colour": "red"}}), encoding="utf-8")
    with pytest.raises(ValueError, match=r"Configuration validation error: scan\.colour"):
        RelinkConfig.load(tmp_path)


def test_suffixes_are_normalized():
    assert ScanConfig(include_suffixes=["MD", ".Txt"]).include_suffixes == [".md", ".txt"]
    assert ScanConfig().is_document("docs/README.MD")
    assert not ScanConfig().is_document("img/logo.png")


def test_empty_suffix_rejected():
    with pytest.raises(ValidationError):
        ScanConfig(include_suffixes=[" "])


def test_log_level_is_restricted():
    with pytest.raises(ValidationError):
        LogConfig(level="TRACE")


def test_home_dir_from_environment(monkeypatch, tmp_path):
    monkeypatch.setenv("RELINK_HOME", str(tmp_path))
    assert get_home_dir() == tmp_path.resolve()
    assert get_home_dir("relink.log") == tmp_path.resolve() / "relink.log"


def test_home_dir_default(monkeypatch, tmp_path):
    monkeypatch.delenv("RELINK_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))
    assert get_home_dir() == tmp_path / ".relink"
