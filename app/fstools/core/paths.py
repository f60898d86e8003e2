"""Locations of fstools configuration files.

Everything lives in ``$XDG_CONFIG_HOME/fstools``, or ``~/.config/fstools``
when the variable is unset or empty.
"""

import os
from pathlib import Path

APP_NAME = "fstools"


def get_config_dir() -> Path:
    """Return the fstools configuration directory."""
    base = os.environ.get("XDG_CONFIG_HOME") or Path.home() / ".config"
    return Path(base) / APP_NAME


def get_config_path() -> Path:
    """Return the path of ``config.toml``."""
    return get_config_dir() / "config.toml"


def get_styles_path() -> Path:
    """Return the path of the user's console style overrides."""
    return get_config_dir() / "styles.toml"
