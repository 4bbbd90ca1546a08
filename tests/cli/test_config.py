# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Tests for the CLI configuration file."""

from pathlib import Path

import pytest

from dfalex.cli.config import CONFIG_FILE_NAME, ConfigError, LexConfig, find_config, load_config

# ###############
# Helpers
# ###############


def _write_config(tmp_path: Path, content: str) -> Path:
    """Write a config file and return its path."""
    config_file = tmp_path / CONFIG_FILE_NAME
    config_file.write_text(content, encoding="utf-8")
    return config_file


# ###############
# Normal Cases
# ###############


def test_empty_file_gives_defaults(tmp_path: Path) -> None:
    """An empty config file parses to the default settings."""
    config = load_config(_write_config(tmp_path, ""))
    assert config == LexConfig()
    assert config.output_format == "table"
    assert config.echo_source is False
    assert config.fail_on_error is False


def test_all_settings(tmp_path: Path) -> None:
    """Every documented key is read under its hyphenated name."""
    content = """\
output-format: json
echo-source: true
fail-on-error: true
"""
    config = load_config(_write_config(tmp_path, content))
    assert config.output_format == "json"
    assert config.echo_source is True
    assert config.fail_on_error is True


def test_find_config_without_file_returns_defaults(tmp_path: Path) -> None:
    """A directory without a config file yields defaults."""
    assert find_config(tmp_path) == LexConfig()


def test_find_config_reads_file(tmp_path: Path) -> None:
    """find_config loads the config file from the given directory."""
    _write_config(tmp_path, "output-format: json\n")
    assert find_config(tmp_path).output_format == "json"


# ###############
# Error Cases
# ###############


def test_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="not found"):
        load_config(tmp_path / "missing.yaml")


def test_invalid_yaml_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Invalid YAML"):
        load_config(_write_config(tmp_path, "output-format: [unclosed\n"))


def test_non_mapping_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="mapping"):
        load_config(_write_config(tmp_path, "- table\n- json\n"))


def test_unknown_format_raises(tmp_path: Path) -> None:
    with pytest.raises(ConfigError, match="Invalid config"):
        load_config(_write_config(tmp_path, "output-format: xml\n"))


def test_unknown_key_raises(tmp_path: Path) -> None:
    """Keys outside the schema are rejected."""
    with pytest.raises(ConfigError, match="Invalid config"):
        load_config(_write_config(tmp_path, "keywords: [foo]\n"))
