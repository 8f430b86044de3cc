"""Render settings loaded from an optional YAML file."""

from __future__ import annotations

import codecs
from pathlib import Path
from typing import Any

import click
import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

DEFAULT_CONFIG_NAME = ".te.yaml"


class RenderSettings(BaseModel):
    """Jinja2 environment and output options."""

    model_config = ConfigDict(extra="forbid")

    trim_blocks: bool = False
    lstrip_blocks: bool = False
    keep_trailing_newline: bool = True
    strict_undefined: bool = True
    encoding: str = "utf-8"
    file_mode: int = 0o644

    @field_validator("encoding")
    @classmethod
    def validate_encoding(cls, value: str) -> str:
        """Reject codec names Python does not know."""
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"unknown encoding: {value}") from e
        return value


def safe_load_yaml(file_path: Path) -> dict[str, Any]:
    """Load a YAML mapping, returning an empty dict if the file is missing.

    Raises:
        click.ClickException: If the file cannot be read or parsed.
    """
    if not file_path.exists():
        return {}

    try:
        with open(file_path, encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise click.ClickException(
            f"Failed to parse YAML file {file_path}: {e}"
        ) from e
    except OSError as e:
        raise click.ClickException(f"Failed to read file {file_path}: {e}") from e

    if not isinstance(data, dict):
        raise click.ClickException(
            f"Config file {file_path} must contain a mapping, "
            f"got {type(data).__name__}"
        )
    return data


def load_settings(config_path: Path | None = None) -> RenderSettings:
    """Load settings from ``config_path``, or ``.te.yaml`` in the working dir.

    An explicitly given path must exist; the default file is optional.
    """
    if config_path is not None and not config_path.exists():
        raise click.ClickException(f"Config file not found: {config_path}")

    path = config_path if config_path is not None else Path(DEFAULT_CONFIG_NAME)
    data = safe_load_yaml(path)

    try:
        return RenderSettings(**data)
    except ValidationError as e:
        raise click.ClickException(f"Invalid config file {path}: {e}") from e
