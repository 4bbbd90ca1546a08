# Copyright 2026 dfalex Contributors
# SPDX-License-Identifier: Apache-2.0

"""Output settings loaded from an optional ``.dfalex.yaml`` file."""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

# ###############
# Public Interface
# ###############

CONFIG_FILE_NAME = ".dfalex.yaml"


class ConfigError(Exception):
    """Raised when the configuration file cannot be read or is invalid."""


class LexConfig(BaseModel):
    """Settings controlling how the CLI presents tokenizer results."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    output_format: Literal["table", "json"] = Field(alias="output-format", default="table")
    echo_source: bool = Field(alias="echo-source", default=False)
    fail_on_error: bool = Field(alias="fail-on-error", default=False)


def load_config(path: Path) -> LexConfig:
    """Load and validate a configuration file.

    An empty file yields the default configuration.

    Args:
        path: Path to the ``.dfalex.yaml`` file.

    Returns:
        A validated LexConfig instance.

    Raises:
        ConfigError: If the file cannot be read, contains invalid YAML,
            is not a mapping, or does not conform to the expected schema.
    """
    try:
        raw = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        raise ConfigError(f"Config file not found: {path}") from None
    except OSError as exc:
        raise ConfigError(f"Cannot read config file '{path}': {exc}") from exc

    try:
        data = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Invalid YAML in config file '{path}': {exc}") from exc

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigError(f"{path}: config must be a YAML mapping")

    try:
        return LexConfig.model_validate(data)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file '{path}': {exc}") from exc


def find_config(directory: Path) -> LexConfig:
    """Load ``.dfalex.yaml`` from *directory*, or return defaults if it is absent."""
    path = directory / CONFIG_FILE_NAME
    if not path.exists():
        return LexConfig()
    return load_config(path)
