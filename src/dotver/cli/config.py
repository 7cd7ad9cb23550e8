"""Configuration for the dotver command line."""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from ..exceptions import ConfigError
from ..version import DEFAULT_DELIMITER, validate_delimiter

logger = logging.getLogger(__name__)

CONFIG_FILENAME = "dotver.toml"
PYPROJECT_FILENAME = "pyproject.toml"


class DotverConfig(BaseModel):
    """Settings read from ``[tool.dotver]`` or ``dotver.toml``.

    Attributes:
        delimiter: Separator used when parsing and printing versions.
        reverse: Sort versions from highest to lowest by default.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    delimiter: str = DEFAULT_DELIMITER
    reverse: bool = False

    @field_validator("delimiter")
    @classmethod
    def _check_delimiter(cls, value: str) -> str:
        validate_delimiter(value)
        return value


def _format_errors(error: ValidationError) -> str:
    return "; ".join(
        f"{'.'.join(str(loc) for loc in item['loc']) or 'dotver'}: {item['msg']}"
        for item in error.errors()
    )


def _read_toml(path: Path) -> dict[str, Any]:
    try:
        with path.open("rb") as handle:
            return tomllib.load(handle)
    except FileNotFoundError as e:
        raise ConfigError(f"Config file not found: {path}") from e
    except (tomllib.TOMLDecodeError, OSError) as e:
        raise ConfigError(f"Failed to parse {path}: {e}") from e


def _extract_section(path: Path, data: dict[str, Any]) -> dict[str, Any] | None:
    if path.name == PYPROJECT_FILENAME:
        section = data.get("tool", {}).get("dotver")
    else:
        section = data.get("dotver")

    if section is not None and not isinstance(section, dict):
        raise ConfigError(f"The dotver section in {path} must be a table")
    return section


def find_config_file(directory: Path | None = None) -> Path | None:
    """Find the config file to use in a directory.

    ``dotver.toml`` takes precedence over a ``pyproject.toml`` with a
    ``[tool.dotver]`` table.

    Args:
        directory: Directory to search, the current directory by default.

    Returns:
        Path to the config file, or None if there is none.
    """
    directory = directory or Path.cwd()

    candidate = directory / CONFIG_FILENAME
    if candidate.is_file():
        return candidate

    pyproject = directory / PYPROJECT_FILENAME
    if pyproject.is_file() and _extract_section(pyproject, _read_toml(pyproject)):
        return pyproject

    return None


def load_config(path: Path | None = None) -> DotverConfig:
    """Load the dotver configuration.

    Args:
        path: Explicit config file. A ``pyproject.toml`` is read from its
            ``[tool.dotver]`` table, any other file from ``[dotver]``. When
            omitted the current directory is searched.

    Returns:
        The loaded configuration, or the defaults if no file is found.

    Raises:
        ConfigError: If the file is missing, malformed, or holds invalid
            settings.
    """
    if path is None:
        path = find_config_file()
        if path is None:
            logger.debug("No dotver config found, using defaults")
            return DotverConfig()

    section = _extract_section(path, _read_toml(path)) or {}
    try:
        config = DotverConfig.model_validate(section)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {path}: {_format_errors(e)}") from e

    logger.debug("Loaded dotver config from %s", path)
    return config


def with_overrides(config: DotverConfig, **overrides: Any) -> DotverConfig:
    """Return a copy of config with the non-None overrides applied.

    Raises:
        ConfigError: If an override is not a valid setting.
    """
    updates = {key: value for key, value in overrides.items() if value is not None}
    if not updates:
        return config
    try:
        return DotverConfig.model_validate({**config.model_dump(), **updates})
    except ValidationError as e:
        raise ConfigError(_format_errors(e)) from e
