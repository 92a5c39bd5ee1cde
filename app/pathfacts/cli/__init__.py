"""CLI package for pathfacts.

This package contains the Typer application and all subcommands.
"""

from pathfacts.cli.main import app

__all__ = ["app"]
