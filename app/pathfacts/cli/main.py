"""Main CLI application entry point.

Defines the Typer application and global options.
"""

import logging
from typing import Annotated

import typer

from pathfacts import __version__
from pathfacts.cli.commands import config, inspect

# Create main Typer app
app = typer.Typer(
    name="pathfacts",
    help="Explain why a path does not exist or cannot be accessed.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    context_settings={"help_option_names": ["-h", "--help"]},
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pathfacts version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool | None,
        typer.Option(
            "--version",
            "-V",
            callback=version_callback,
            is_eager=True,
            help="Show version and exit.",
        ),
    ] = None,
    verbose: Annotated[
        bool,
        typer.Option(
            "--verbose",
            "-v",
            help="Enable debug logging.",
        ),
    ] = False,
) -> None:
    """pathfacts - Helpful facts about paths.

    Walk a path from its root, report the first component that is
    missing or blocking, and show the permissions along the way.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(levelname)s %(name)s: %(message)s",
        )


# Register commands
app.command(name="inspect")(inspect.inspect)
app.add_typer(config.app, name="config")


if __name__ == "__main__":
    app()
