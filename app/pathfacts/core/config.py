"""Inspection settings.

This module provides the settings model consumed by the inspection
core and the TOML I/O used by the CLI to persist it. The core itself
never reads configuration files; it only uses the settings it is given.

Settings are stored in the ``[inspection]`` table of
~/.config/pathfacts/config.toml
"""

import logging
import os
import tomllib
from pathlib import Path
from tempfile import NamedTemporaryFile
from typing import Annotated

import tomli_w
from pydantic import BaseModel, ConfigDict, Field, ValidationError

from pathfacts.core.paths import get_settings_path
from pathfacts.core.renderer import GlyphStyle
from pathfacts.core.walker import DEFAULT_MAX_LISTED_ENTRIES, DEFAULT_MAX_SYMLINK_HOPS

logger = logging.getLogger(__name__)

SETTINGS_TABLE = "inspection"


class InspectionSettings(BaseModel):
    """Tunable bounds and presentation for path inspections.

    Attributes:
        max_symlink_hops: Links followed per component before a loop is suspected.
        max_listed_entries: Cap on entries shown from the parent directory.
        glyphs: Glyph set used for permission markers.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    max_symlink_hops: Annotated[
        int,
        Field(ge=1, le=4096, description="Symlink hops per component (1-4096)"),
    ] = DEFAULT_MAX_SYMLINK_HOPS
    max_listed_entries: Annotated[
        int,
        Field(ge=1, le=10000, description="Parent directory entries to list (1-10000)"),
    ] = DEFAULT_MAX_LISTED_ENTRIES
    glyphs: Annotated[
        GlyphStyle,
        Field(description="Permission glyphs (emoji or ascii)"),
    ] = GlyphStyle.EMOJI


class SettingsError(Exception):
    """Base exception for settings errors."""


class SettingsParseError(SettingsError):
    """Raised when the settings file cannot be parsed."""


def load_settings(path: Path | None = None) -> InspectionSettings:
    """Load inspection settings from a TOML file.

    A missing file is not an error: the defaults are returned.

    Args:
        path: Path to the settings file. If None, uses the default location.

    Returns:
        Validated InspectionSettings.

    Raises:
        SettingsParseError: If the TOML syntax is invalid.
        SettingsError: If the file cannot be read or its content is invalid.
    """
    settings_path = path or get_settings_path()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        logger.debug("No settings file at %s, using defaults", settings_path)
        return InspectionSettings()
    except tomllib.TOMLDecodeError as e:
        raise SettingsParseError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings: {e}") from e

    table = data.get(SETTINGS_TABLE, {})
    if not isinstance(table, dict):
        raise SettingsError(f"'{SETTINGS_TABLE}' in {settings_path} must be a table")

    try:
        return InspectionSettings.model_validate(table)
    except (ValueError, ValidationError) as e:
        raise SettingsError(f"Invalid settings content: {e}") from e


def save_settings(settings: InspectionSettings, path: Path | None = None) -> Path:
    """Save inspection settings to a TOML file.

    The file is written atomically by first writing to a temporary file
    and then using os.replace() for atomic rename.

    Args:
        settings: Settings to save.
        path: Path to save to. If None, uses the default location.

    Returns:
        Path where the settings were saved.

    Raises:
        SettingsError: If the file cannot be written.
    """
    settings_path = path or get_settings_path()
    data = {SETTINGS_TABLE: settings.model_dump(mode="json")}

    tmp_path: Path | None = None
    try:
        settings_path.parent.mkdir(parents=True, exist_ok=True)
        with NamedTemporaryFile(
            mode="wb",
            dir=settings_path.parent,
            delete=False,
            suffix=".tmp",
        ) as f:
            tmp_path = Path(f.name)
            tomli_w.dump(data, f)
        os.replace(str(tmp_path), str(settings_path))
    except OSError as e:
        if tmp_path is not None and tmp_path.exists():
            tmp_path.unlink()
        raise SettingsError(f"Failed to write settings: {e}") from e

    return settings_path
