"""Color theme for the pathfacts CLI.

Colors come from the bundled ``data/theme.toml``, optionally overridden
key by key from ``$XDG_CONFIG_HOME/pathfacts/theme.toml``. The merged
palette is validated by :class:`ThemeColors` and turned into a Rich
:class:`~rich.theme.Theme` whose style names the display code refers to
(``granted``, ``denied``, ``node.directory``, ...).
"""

import functools
import logging
import string
import tomllib
from importlib import resources
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator
from rich.theme import Theme

from pathfacts.core.paths import get_user_theme_path

logger = logging.getLogger(__name__)


def _check_hex(name: str, value: object) -> str:
    if not isinstance(value, str):
        raise ValueError(f"{name}: color must be a string")
    color = value.strip()
    if not color.startswith("#"):
        raise ValueError(f"{name}: color must start with '#'")
    digits = color[1:]
    if len(digits) not in (3, 6):
        raise ValueError(f"{name}: color must be #RGB or #RRGGBB format")
    if not set(digits) <= set(string.hexdigits):
        raise ValueError(f"{name}: invalid hex color '{color}'")
    return color


class ThemeColors(BaseModel):
    """Palette used by the CLI.

    Every field is a ``#RGB`` or ``#RRGGBB`` hex code. Unknown keys are
    rejected so that typos in a user theme surface instead of being ignored.

    Attributes:
        text: Default foreground.
        muted: Secondary text such as sources and descriptions.
        header: Table headers.
        border: Table borders.
        success: Positive summaries.
        warning: Missing-path summaries.
        error: Blocked paths and loops.
        info: Informational messages.
        granted: A permission the process holds.
        denied: A permission the process lacks.
        unknown: A permission or type that could not be determined.
        node_directory: Directory nodes.
        node_file: File nodes.
        node_symlink: Symlink nodes.
        node_missing: Components that do not exist.
    """

    model_config = ConfigDict(extra="forbid")

    text: str = "#ffffff"
    muted: str = "#b2bec3"
    header: str = "#69B9A1"
    border: str = "#29526d"

    success: str = "#03b971"
    warning: str = "#f5b332"
    error: str = "#f53263"
    info: str = "#0ec1c8"

    granted: str = "#03b971"
    denied: str = "#f53263"
    unknown: str = "#faf870"

    node_directory: str = "#0e8ac8"
    node_file: str = "#ffffff"
    node_symlink: str = "#d44ebc"
    node_missing: str = "#f53263"

    @field_validator("*", mode="before")
    @classmethod
    def validate_hex_color(cls, v: object, info: Any) -> str:
        """Reject anything that is not a hex color code."""
        return _check_hex(info.field_name, v)


# Rich style name -> (palette field, bold)
_STYLES: dict[str, tuple[str, bool]] = {
    "text": ("text", False),
    "muted": ("muted", False),
    "dim": ("muted", False),
    "header": ("header", False),
    "bold_header": ("header", True),
    "border": ("border", False),
    "success": ("success", False),
    "warning": ("warning", False),
    "error": ("error", True),
    "info": ("info", False),
    "granted": ("granted", False),
    "denied": ("denied", True),
    "unknown": ("unknown", False),
    "node.directory": ("node_directory", True),
    "node.file": ("node_file", False),
    "node.symlink": ("node_symlink", False),
    "node.missing": ("node_missing", False),
    "node.unknown": ("unknown", False),
}


def get_bundled_theme_path() -> Path:
    """Return the location of the theme shipped with the package."""
    return resources.files("pathfacts.data").joinpath("theme.toml")  # type: ignore[return-value]


def _load_toml_colors(path: Path) -> dict[str, str] | None:
    """Read the ``[colors]`` table of a theme file.

    Non-string values are skipped; they would fail validation anyway and
    should not discard the rest of the table.

    Args:
        path: Theme file to read.

    Returns:
        Color names mapped to their values, or None if the file is absent
        or unusable.
    """
    try:
        data = tomllib.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return None
    except (OSError, UnicodeDecodeError, tomllib.TOMLDecodeError) as e:
        logger.warning("Ignoring theme file %s: %s", path, e)
        return None

    table = data.get("colors", {})
    if not isinstance(table, dict):
        logger.warning("Ignoring theme file %s: 'colors' is not a table", path)
        return None
    return {key: value for key, value in table.items() if isinstance(value, str)}


def load_theme() -> ThemeColors:
    """Build the palette from the bundled theme and the user's overrides.

    Later sources win key by key. If the merged palette does not validate,
    the built-in defaults are used and a warning is logged.

    Returns:
        The validated palette.
    """
    merged: dict[str, str] = {}
    for source in (Path(get_bundled_theme_path()), get_user_theme_path()):
        colors = _load_toml_colors(source)
        if colors is not None:
            logger.debug("Theme colors from %s: %d", source, len(colors))
            merged.update(colors)

    try:
        return ThemeColors.model_validate(merged)
    except ValidationError as e:
        logger.warning("Invalid theme configuration, using defaults: %s", e)
        return ThemeColors()


def get_rich_theme(colors: ThemeColors | None = None) -> Theme:
    """Turn a palette into a Rich theme.

    Args:
        colors: Palette to convert. Loaded with :func:`load_theme` if omitted.

    Returns:
        Rich theme with one style per entry in the style table.
    """
    palette = colors if colors is not None else load_theme()
    styles = {}
    for style, (field, bold) in _STYLES.items():
        color = getattr(palette, field)
        styles[style] = f"bold {color}" if bold else color
    return Theme(styles)


@functools.cache
def get_theme() -> Theme:
    """Return the process-wide Rich theme, loading it on first use."""
    return get_rich_theme()


def reload_theme() -> Theme:
    """Discard the cached theme and load it again from disk."""
    get_theme.cache_clear()
    return get_theme()
