"""Utility modules for pathfacts.

This module exports commonly used utility functions.
"""

from pathfacts.utils.formatting import (
    console,
    create_chain_table,
    err_console,
    format_access,
    format_node_type,
    print_error,
    print_info,
    print_success,
)

__all__ = [
    "console",
    "create_chain_table",
    "err_console",
    "format_access",
    "format_node_type",
    "print_error",
    "print_info",
    "print_success",
]
