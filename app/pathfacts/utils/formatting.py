"""Rich console formatting utilities.

Shared consoles, the chain table layout, and markup helpers for the
values that appear in it.
"""

import sys

from rich.console import Console
from rich.table import Table

from pathfacts.core.theme import get_theme
from pathfacts.models.node import Access, NodeType

_ACCESS_MARKUP: dict[Access, str] = {
    Access.GRANTED: "[granted]yes[/]",
    Access.DENIED: "[denied]no[/]",
    Access.UNKNOWN: "[unknown]?[/]",
}

# (header, justify) per column of the chain table
_CHAIN_COLUMNS: tuple[tuple[str, str], ...] = (
    ("#", "right"),
    ("Path", "left"),
    ("Type", "left"),
    ("R", "center"),
    ("W", "center"),
    ("X", "center"),
    ("Effective", "center"),
    ("Notes", "left"),
)


def _make_console(*, stderr: bool = False) -> Console:
    """Create a themed console.

    Interactive terminals get truecolor so the hex palette is shown as-is;
    otherwise Rich decides (and disables color when output is piped).
    """
    stream = sys.stderr if stderr else sys.stdout
    color_system = "truecolor" if stream.isatty() else None
    return Console(theme=get_theme(), stderr=stderr, color_system=color_system)


console = _make_console()
err_console = _make_console(stderr=True)


def create_chain_table(title: str = "Ancestor Chain") -> Table:
    """Create an empty table for displaying an ancestor chain.

    Args:
        title: Table title.

    Returns:
        Rich Table with index, path, type, permission, and notes columns.
    """
    table = Table(title=title, header_style="bold_header", border_style="border")
    for header, justify in _CHAIN_COLUMNS:
        table.add_column(
            header,
            justify=justify,  # type: ignore[arg-type]
            no_wrap=header == "Path",
            style="muted" if header in ("#", "Notes") else None,
        )
    return table


def format_access(access: Access) -> str:
    """Format a tri-state access value with color markup."""
    return _ACCESS_MARKUP[access]


def format_node_type(node_type: NodeType, resolved_type: NodeType | None = None) -> str:
    """Format a node type, showing the link destination type for symlinks."""
    label = node_type.value
    if node_type == NodeType.SYMLINK and resolved_type is not None:
        label = f"symlink → {resolved_type.value}"
    return f"[node.{node_type.value}]{label}[/]"


def print_info(message: str) -> None:
    """Print an info message."""
    console.print(f"[info]{message}[/]")


def print_error(message: str) -> None:
    """Print an error message to stderr."""
    err_console.print(f"[error]Error:[/] {message}")


def print_success(message: str) -> None:
    """Print a success message."""
    console.print(f"[success]{message}[/]")
