"""Unit tests for theme module.

Tests for theme loading, validation, and Rich theme generation.
"""

# pyright: reportPrivateUsage=false

from pathlib import Path
from unittest.mock import patch

import pytest
from pathfacts.core.theme import (
    ThemeColors,
    _load_toml_colors,
    get_bundled_theme_path,
    get_rich_theme,
    get_theme,
    load_theme,
    reload_theme,
)
from rich.theme import Theme


class TestThemeColors:
    """Tests for ThemeColors Pydantic model."""

    def test_default_values(self) -> None:
        """ThemeColors has sensible defaults."""
        colors = ThemeColors()
        assert colors.granted == "#03b971"
        assert colors.denied == "#f53263"
        assert colors.unknown == "#faf870"

    def test_valid_hex_colors(self) -> None:
        """ThemeColors accepts #RGB and #RRGGBB codes."""
        colors = ThemeColors(text="#AABBCC", muted="#abc")
        assert colors.text == "#AABBCC"
        assert colors.muted == "#abc"

    def test_invalid_hex_no_hash(self) -> None:
        """ThemeColors rejects colors without # prefix."""
        with pytest.raises(ValueError, match="must start with '#'"):
            ThemeColors(granted="03b971")

    def test_invalid_hex_wrong_length(self) -> None:
        """ThemeColors rejects colors with wrong length."""
        with pytest.raises(ValueError, match="must be #RGB or #RRGGBB"):
            ThemeColors(denied="#ff")

    def test_invalid_hex_chars(self) -> None:
        """ThemeColors rejects invalid hex characters."""
        with pytest.raises(ValueError, match="invalid hex color"):
            ThemeColors(unknown="#gggggg")

    def test_extra_fields_forbidden(self) -> None:
        """ThemeColors rejects unknown fields."""
        with pytest.raises(ValueError):
            ThemeColors(package_manual="#ffffff")  # type: ignore[call-arg]


class TestLoadTomlColors:
    """Tests for _load_toml_colors internal function."""

    def test_loads_valid_toml(self, tmp_path: Path) -> None:
        """Loads colors from a valid TOML file, skipping non-strings."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('[colors]\ngranted = "#00ff00"\ndenied = 3\n')

        assert _load_toml_colors(theme_file) == {"granted": "#00ff00"}

    def test_returns_none_for_missing_file(self, tmp_path: Path) -> None:
        """Returns None when file doesn't exist."""
        assert _load_toml_colors(tmp_path / "nonexistent.toml") is None

    def test_returns_none_for_invalid_toml(self, tmp_path: Path) -> None:
        """Returns None for malformed TOML."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text("not valid [ toml syntax")
        assert _load_toml_colors(theme_file) is None

    def test_returns_none_for_non_table_colors(self, tmp_path: Path) -> None:
        """Returns None when colors is not a table."""
        theme_file = tmp_path / "theme.toml"
        theme_file.write_text('colors = "red"\n')
        assert _load_toml_colors(theme_file) is None


class TestLoadTheme:
    """Tests for load_theme function."""

    def test_bundled_theme_is_packaged(self) -> None:
        """The bundled theme file ships with the package."""
        assert Path(get_bundled_theme_path()).is_file()

    def test_loads_bundled_theme(self, tmp_path: Path) -> None:
        """Without a user theme the bundled colors are used."""
        with patch(
            "pathfacts.core.theme.get_user_theme_path",
            return_value=tmp_path / "absent.toml",
        ):
            colors = load_theme()

        assert colors == ThemeColors()

    def test_user_theme_overrides_bundled(self, tmp_path: Path) -> None:
        """User theme overrides bundled theme values."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\ndenied = "#ff0000"\n')

        with patch(
            "pathfacts.core.theme.get_user_theme_path",
            return_value=user_theme,
        ):
            colors = load_theme()

        assert colors.denied == "#ff0000"
        assert colors.granted == "#03b971"

    def test_invalid_user_color_falls_back(self, tmp_path: Path) -> None:
        """An invalid user color falls back to the default theme."""
        user_theme = tmp_path / "theme.toml"
        user_theme.write_text('[colors]\ngranted = "green"\n')

        with patch(
            "pathfacts.core.theme.get_user_theme_path",
            return_value=user_theme,
        ):
            colors = load_theme()

        assert colors == ThemeColors()


class TestGetRichTheme:
    """Tests for get_rich_theme function."""

    def test_includes_permission_styles(self) -> None:
        """Theme includes the permission state styles."""
        theme = get_rich_theme(ThemeColors())
        for style in ("granted", "denied", "unknown", "bold_header", "border", "muted"):
            assert style in theme.styles

    def test_includes_node_styles(self) -> None:
        """Theme includes a style per node type."""
        theme = get_rich_theme(ThemeColors())
        for kind in ("directory", "file", "symlink", "missing", "unknown"):
            assert f"node.{kind}" in theme.styles

    def test_denied_is_bold(self) -> None:
        """Denied permissions stand out in bold."""
        theme = get_rich_theme(ThemeColors())
        assert theme.styles["denied"].bold


class TestGetTheme:
    """Tests for get_theme caching function."""

    def test_caches_theme(self) -> None:
        """get_theme returns cached instance on subsequent calls."""
        get_theme.cache_clear()

        assert get_theme() is get_theme()
        assert isinstance(get_theme(), Theme)

    def test_reload_creates_new_theme(self) -> None:
        """reload_theme replaces the cached instance."""
        original = get_theme()
        reloaded = reload_theme()

        assert reloaded is not original
        assert get_theme() is reloaded
