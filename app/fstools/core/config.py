"""fstools configuration and settings.

This module provides the configuration model and I/O functions for the
filesystem layer: the root path substituted for empty paths, the path
separator, translation overrides and default scan exclusions.

Configuration is stored in ~/.config/fstools/config.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated, Literal

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from fstools.core.paths import get_config_path
from fstools.filesystem.models import (
    DEFAULT_EXCLUDE,
    DEFAULT_FILE_EXCLUDE_PATTERNS,
    DEFAULT_FOLDER_EXCLUDE_PATTERNS,
)

logger = logging.getLogger(__name__)

Separator = Literal["/", "\\"]


class ScanDefaults(BaseModel):
    """Default exclusion and ordering settings for directory scans.

    Attributes:
        exclude: Entry names skipped during scans (exact match).
        file_exclude_patterns: Regular expressions skipping entries when listing files.
        folder_exclude_patterns: Regular expressions skipping entries when listing folders.
        natural_sort: Sort file listings naturally ("file2" before "file10").
    """

    model_config = ConfigDict(extra="forbid")

    exclude: list[str] = Field(default_factory=lambda: list(DEFAULT_EXCLUDE))
    file_exclude_patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FILE_EXCLUDE_PATTERNS)
    )
    folder_exclude_patterns: list[str] = Field(
        default_factory=lambda: list(DEFAULT_FOLDER_EXCLUDE_PATTERNS)
    )
    natural_sort: bool = True


class FsToolsConfig(BaseModel):
    """Configuration for the filesystem layer.

    Attributes:
        root_path: Path substituted when an empty path is cleaned.
        separator: Canonical directory separator for cleaned paths.
        default_message: Message for unknown translation keys (None = UNKNOWN_ERROR entry).
        translations: Translation entries merged over the built-in table.
        scan: Default scan settings.
    """

    model_config = ConfigDict(extra="forbid")

    root_path: Annotated[
        str,
        Field(description="Path substituted for empty input"),
    ] = ""
    separator: Annotated[
        Separator,
        Field(description="Canonical directory separator"),
    ] = os.sep  # type: ignore[assignment]
    default_message: Annotated[
        str | None,
        Field(description="Fallback message for unknown translation keys"),
    ] = None
    translations: dict[str, str] = Field(default_factory=dict)
    scan: ScanDefaults = Field(default_factory=ScanDefaults)


class ConfigError(Exception):
    """Base exception for configuration errors."""


class ConfigNotFoundError(ConfigError):
    """Raised when the config file is not found."""


class ConfigParseError(ConfigError):
    """Raised when the config file cannot be parsed."""


def load_config(path: Path | None = None) -> FsToolsConfig:
    """Load configuration from a TOML file.

    Args:
        path: Path to the config file. If None, uses the default config path.

    Returns:
        Validated FsToolsConfig object.

    Raises:
        ConfigNotFoundError: If the config file doesn't exist.
        ConfigParseError: If the TOML syntax is invalid.
        ConfigError: If the content doesn't match the schema.
    """
    config_path = path or get_config_path()

    if not config_path.exists():
        raise ConfigNotFoundError(f"Config not found: {config_path}")

    try:
        with open(config_path, "rb") as f:
            data = tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        raise ConfigParseError(f"Invalid TOML syntax: {e}") from e
    except OSError as e:
        raise ConfigError(f"Failed to read config: {e}") from e

    try:
        return FsToolsConfig.model_validate(data)
    except (ValueError, ValidationError) as e:
        raise ConfigError(f"Invalid config content: {e}") from e


def load_config_or_default(path: Path | None = None) -> FsToolsConfig:
    """Load configuration, falling back to defaults when no file exists.

    Parse and validation errors still propagate.
    """
    try:
        return load_config(path)
    except ConfigNotFoundError:
        logger.debug("No config file found, using defaults")
        return get_default_config()


def save_config(config: FsToolsConfig, path: Path | None = None) -> Path:
    """Save configuration to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        config: The FsToolsConfig object to save.
        path: Path to save the config. If None, uses the default config path.

    Returns:
        Path where the config was saved.

    Raises:
        ConfigError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    data = _config_to_dict(config)

    tmp_path: Path | None = None
    try:
        with NamedTemporaryFile(
            mode="wb",
            dir=config_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(config_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise ConfigError(f"Failed to write config: {e}") from e

    return config_path


def _config_to_dict(config: FsToolsConfig) -> dict[str, object]:
    """Convert FsToolsConfig to a dictionary for TOML serialization.

    TOML has no null, so unset optional values are omitted.
    """
    result: dict[str, object] = {
        "root_path": config.root_path,
        "separator": config.separator,
    }

    if config.default_message is not None:
        result["default_message"] = config.default_message

    if config.translations:
        result["translations"] = dict(config.translations)

    result["scan"] = config.scan.model_dump()
    return result


def get_default_config() -> FsToolsConfig:
    """Create a default FsToolsConfig.

    Returns:
        FsToolsConfig with default settings.
    """
    return FsToolsConfig()
