"""Unit tests for XDG path management.

Tests for the paths module that provides XDG-compliant configuration paths.
"""

import os
from pathlib import Path
from unittest.mock import patch

from pathfacts.core.paths import (
    APP_NAME,
    get_config_dir,
    get_settings_path,
    get_user_theme_path,
)


class TestGetConfigDir:
    """Tests for get_config_dir function."""

    def test_default_config_dir(self) -> None:
        """get_config_dir returns default path when XDG_CONFIG_HOME not set."""
        with patch.dict(os.environ):
            os.environ.pop("XDG_CONFIG_HOME", None)

            result = get_config_dir()

        assert result == Path.home() / ".config" / APP_NAME

    def test_respects_xdg_config_home(self, tmp_path: Path) -> None:
        """get_config_dir respects XDG_CONFIG_HOME environment variable."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
            result = get_config_dir()

        assert result == tmp_path / APP_NAME

    def test_empty_xdg_config_home_ignored(self) -> None:
        """An empty XDG_CONFIG_HOME falls back to the default."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": ""}):
            result = get_config_dir()

        assert result == Path.home() / ".config" / APP_NAME

    def test_relative_xdg_config_home_ignored(self) -> None:
        """A relative XDG_CONFIG_HOME is not honoured."""
        with patch.dict(os.environ, {"XDG_CONFIG_HOME": "relative/config"}):
            result = get_config_dir()

        assert result == Path.home() / ".config" / APP_NAME


class TestFilePaths:
    """Tests for the settings and theme file paths."""

    def test_settings_path(self, config_home: Path) -> None:
        """The settings file lives in the config directory."""
        assert get_settings_path() == config_home / APP_NAME / "config.toml"

    def test_user_theme_path(self, config_home: Path) -> None:
        """The user theme lives next to the settings file."""
        assert get_user_theme_path() == config_home / APP_NAME / "theme.toml"
