"""Shared types and utilities for CLI commands.

This module provides common enums and helper functions used across
multiple CLI command modules to avoid code duplication.
"""

from enum import Enum

import typer
from rich.markup import escape

from fstools.core.config import ConfigError, FsToolsConfig, load_config_or_default
from fstools.filesystem.context import FilesystemContext
from fstools.utils.formatting import print_error


class OutputFormat(str, Enum):
    """Output format options for listings."""

    TABLE = "table"
    JSON = "json"


def load_cli_config() -> FsToolsConfig:
    """Load the user configuration, exiting with an error if it is invalid.

    A missing configuration file yields the defaults.
    """
    try:
        return load_config_or_default()
    except ConfigError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e


def load_filesystem_context() -> FilesystemContext:
    """Build the filesystem context from the user configuration."""
    return FilesystemContext.from_config(load_cli_config())
