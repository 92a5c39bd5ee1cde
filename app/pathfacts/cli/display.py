"""Shared Rich display functions for inspection reports.

Provides the ancestor chain table and the one-line summary shown under it.
"""

from rich.markup import escape
from rich.table import Table

from pathfacts.models.node import Access, AncestorNode, Permissions
from pathfacts.models.report import Classification, InspectionReport
from pathfacts.utils.formatting import (
    console,
    create_chain_table,
    format_access,
    format_node_type,
)

_SUMMARY_STYLE: dict[Classification, str] = {
    Classification.FULLY_EXISTS: "success",
    Classification.MISSING_AT: "warning",
    Classification.BLOCKED_BY_NON_DIRECTORY_AT: "error",
    Classification.SYMLINK_LOOP_SUSPECTED: "error",
    Classification.INDETERMINATE_AT: "unknown",
    Classification.EMPTY_PATH: "muted",
}


def create_report_table(report: InspectionReport) -> Table:
    """Create a Rich table displaying the ancestor chain of a report.

    Each row shows one node with its raw read/write/execute bits and a
    compact rendering of its effective permissions.

    Args:
        report: Inspection report to display.

    Returns:
        Rich Table configured for chain display.
    """
    table = create_chain_table(title=f"Ancestor Chain: {escape(report.path) or '(empty)'}")
    for node in report.nodes:
        raw = node.raw_permissions
        table.add_row(
            str(node.index),
            escape(node.path),
            format_node_type(node.node_type, node.resolved_type),
            format_access(raw.read),
            format_access(raw.write),
            format_access(raw.execute),
            _format_effective(node.effective_permissions),
            _node_notes(node, report),
        )
    return table


def print_report_summary(report: InspectionReport) -> None:
    """Print the classification of a report below its table."""
    style = _SUMMARY_STYLE[report.classification]
    message = report.classification.value.replace("_", " ")
    blocking = report.blocking_node
    if blocking is not None:
        message = f"{message} `{escape(blocking.path)}`"
    console.print(f"\n[{style}]{message}[/]", highlight=False)


def _format_effective(permissions: Permissions) -> str:
    parts = []
    for label, access in permissions.items():
        letter = label[0]
        if access == Access.GRANTED:
            parts.append(f"[granted]{letter}[/]")
        elif access == Access.DENIED:
            parts.append("[denied]-[/]")
        else:
            parts.append("[unknown]?[/]")
    return "".join(parts)


def _node_notes(node: AncestorNode, report: InspectionReport) -> str:
    notes: list[str] = []
    target = node.canonical or node.symlink_target
    if target is not None:
        notes.append(f"→ {target}")
    if node.blocked_by is not None:
        notes.append(f"blocked by #{node.blocked_by}")
    if node.index == report.blocking_index:
        notes.append(report.classification.value)
    if node.error is not None:
        notes.append(node.error)
    return escape("; ".join(notes))
