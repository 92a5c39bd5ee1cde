"""Settings commands.

Provides commands to show the effective inspection settings and to
write a default settings file.
"""

from typing import Annotated

import typer
from rich.markup import escape
from rich.table import Table

from pathfacts.core.config import InspectionSettings, SettingsError, load_settings, save_settings
from pathfacts.core.paths import get_settings_path
from pathfacts.utils.formatting import console, print_error, print_info, print_success

app = typer.Typer(
    help="Show and initialize inspection settings.",
    no_args_is_help=True,
)


@app.command()
def show() -> None:
    """Show the effective inspection settings."""
    settings_path = get_settings_path()
    try:
        settings = load_settings()
    except SettingsError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    table = Table(
        title="Inspection Settings",
        show_header=True,
        header_style="bold_header",
        border_style="border",
    )
    table.add_column("Setting", style="info")
    table.add_column("Value")
    table.add_column("Description", style="muted")

    for name, info in InspectionSettings.model_fields.items():
        value = getattr(settings, name)
        table.add_row(name, str(getattr(value, "value", value)), info.description or "")

    console.print(table)
    source = escape(str(settings_path)) if settings_path.exists() else "defaults (no settings file)"
    console.print(f"\n[dim]Source: {source}[/dim]", highlight=False)


@app.command()
def init(
    force: Annotated[
        bool,
        typer.Option("--force", "-f", help="Overwrite an existing settings file."),
    ] = False,
) -> None:
    """Write a settings file with the default values."""
    settings_path = get_settings_path()
    if settings_path.exists() and not force:
        print_info(f"Settings file already exists: {escape(str(settings_path))}")
        print_info("Use --force to overwrite it.")
        raise typer.Exit(code=1)

    try:
        saved = save_settings(InspectionSettings(), settings_path)
    except SettingsError as e:
        print_error(escape(str(e)))
        raise typer.Exit(code=1) from e

    print_success(f"Settings written to {escape(str(saved))}")
