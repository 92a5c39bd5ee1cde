"""CLI commands for pathfacts.

This package contains all subcommand implementations.
"""

from pathfacts.cli.commands import config, inspect

__all__ = ["config", "inspect"]
