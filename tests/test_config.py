"""Tests for gotags.config."""

from __future__ import annotations

from pathlib import Path

import pytest

from gotags.config import ConfigError, TagsConfig, load_config
from gotags.writer import WriteMode


def test_load_config_returns_defaults_when_missing(tmp_path: Path) -> None:
    config = load_config(tmp_path)

    assert isinstance(config, TagsConfig)
    assert config.output_dir == tmp_path.resolve()
    assert config.output_name == "TAGS"
    assert config.destination == tmp_path.resolve() / "TAGS"
    assert config.append is False
    assert config.write_mode is WriteMode.CREATE
    assert config.record_style == "plain"
    assert config.on_parse_error == "abort"
    assert config.cache_lines is False
    assert config.recursive is False
    assert config.exclude_paths == []


def test_load_config_parses_expected_fields(tmp_path: Path) -> None:
    config_file = tmp_path / ".gotags.yml"
    config_file.write_text(
        """
output:
  dir: "build"
  name: "GOTAGS"
  append: true
  style: etags
sources:
  recursive: yes
  exclude_paths:
    - "vendor/"
    - "*_test.go"
on_parse_error: skip
cache_lines: true
""",
        encoding="utf-8",
    )

    config = load_config(config_file)

    assert config.output_dir == (tmp_path / "build").resolve()
    assert config.output_name == "GOTAGS"
    assert config.append is True
    assert config.write_mode is WriteMode.APPEND
    assert config.record_style == "etags"
    assert config.recursive is True
    assert config.exclude_paths == ["vendor/", "*_test.go"]
    assert config.on_parse_error == "skip"
    assert config.cache_lines is True


def test_load_config_treats_empty_file_as_defaults(tmp_path: Path) -> None:
    (tmp_path / ".gotags.yml").write_text("\n", encoding="utf-8")

    config = load_config(tmp_path)

    assert config.output_name == "TAGS"


def test_load_config_rejects_non_mapping(tmp_path: Path) -> None:
    (tmp_path / ".gotags.yml").write_text("- just\n- a list\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_load_config_rejects_invalid_yaml(tmp_path: Path) -> None:
    (tmp_path / ".gotags.yml").write_text("output: [unclosed\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)


def test_invalid_policy_values_are_rejected(tmp_path: Path) -> None:
    (tmp_path / ".gotags.yml").write_text("on_parse_error: retry\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_config(tmp_path)
    with pytest.raises(ConfigError):
        TagsConfig(output_dir=tmp_path, record_style="ctags")
