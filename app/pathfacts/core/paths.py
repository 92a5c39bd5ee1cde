"""Locations of the pathfacts configuration files.

Both files live in ``$XDG_CONFIG_HOME/pathfacts/``, falling back to
``~/.config/pathfacts/``:

- ``config.toml``: inspection settings (``[inspection]`` table)
- ``theme.toml``: color overrides (``[colors]`` table)
"""

import os
from pathlib import Path

APP_NAME = "pathfacts"

SETTINGS_FILENAME = "config.toml"
THEME_FILENAME = "theme.toml"


def get_config_dir() -> Path:
    """Get the pathfacts configuration directory.

    The XDG Base Directory Specification requires ``XDG_CONFIG_HOME`` to be
    absolute; an empty or relative value is treated as unset.

    Returns:
        ``$XDG_CONFIG_HOME/pathfacts`` or ``~/.config/pathfacts``.
    """
    xdg_home = os.environ.get("XDG_CONFIG_HOME", "")
    if os.path.isabs(xdg_home):
        return Path(xdg_home) / APP_NAME
    return Path.home() / ".config" / APP_NAME


def get_settings_path() -> Path:
    """Path of the inspection settings file."""
    return get_config_dir() / SETTINGS_FILENAME


def get_user_theme_path() -> Path:
    """Path of the user's color theme overrides."""
    return get_config_dir() / THEME_FILENAME
