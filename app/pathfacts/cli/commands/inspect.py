"""Path inspection command.

Reports how far a path exists, what blocks it, and the accessibility of
each ancestor, as text, a Rich table, or JSON.
"""

import json
import logging
from enum import Enum
from typing import Annotated

import typer
from pydantic import ValidationError
from rich.markup import escape

from pathfacts.cli.display import create_report_table, print_report_summary
from pathfacts.core.config import InspectionSettings, SettingsError, load_settings
from pathfacts.core.facts import PathFacts
from pathfacts.core.renderer import GlyphStyle
from pathfacts.utils.formatting import console, print_error

logger = logging.getLogger(__name__)


class OutputFormat(str, Enum):
    """Output format options for path inspection."""

    TEXT = "text"
    TABLE = "table"
    JSON = "json"


def inspect(
    path: Annotated[
        str,
        typer.Argument(help="Path to inspect (need not exist)."),
    ],
    output_format: Annotated[
        OutputFormat,
        typer.Option(
            "--format",
            "-f",
            help="Output format.",
            case_sensitive=False,
        ),
    ] = OutputFormat.TEXT,
    ascii_glyphs: Annotated[
        bool,
        typer.Option("--ascii", help="Use ASCII permission markers instead of emoji."),
    ] = False,
    max_symlink_hops: Annotated[
        int | None,
        typer.Option(
            "--max-symlink-hops",
            help="Symlink hops per component before a loop is suspected.",
            min=1,
            max=4096,
        ),
    ] = None,
) -> None:
    """Inspect PATH and report the facts about each component.

    Exits with status 1 when the path does not fully exist.
    """
    settings = _resolve_settings(max_symlink_hops)
    facts = PathFacts(path, settings=settings)
    logger.debug("Inspected %r: %s", path, facts.report.classification.value)

    if output_format == OutputFormat.JSON:
        console.print_json(json.dumps(facts.to_dict()))
    else:
        glyphs = GlyphStyle.ASCII if ascii_glyphs else settings.glyphs
        console.print(facts.render(glyphs=glyphs), markup=False, highlight=False, soft_wrap=True)
        if output_format == OutputFormat.TABLE:
            console.print()
            console.print(create_report_table(facts.report))
            print_report_summary(facts.report)

    if not facts.exists:
        raise typer.Exit(code=1)


def _resolve_settings(max_symlink_hops: int | None) -> InspectionSettings:
    """Load stored settings and apply command-line overrides."""
    try:
        settings = load_settings()
    except SettingsError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=2) from e

    if max_symlink_hops is None:
        return settings
    try:
        return InspectionSettings.model_validate(
            {**settings.model_dump(), "max_symlink_hops": max_symlink_hops}
        )
    except ValidationError as e:
        print_error(f"Invalid --max-symlink-hops: {e}")
        raise typer.Exit(code=2) from e
