"""Platform boundary for filesystem queries.

This module provides the FilesystemQuery interface, its POSIX, Windows,
and in-memory implementations, and selection of the host implementation.
"""

import os

from pathfacts.filesystem.base import FilesystemQuery
from pathfacts.filesystem.memory import MemoryEntry, MemoryFilesystem
from pathfacts.filesystem.posix import PosixFilesystem
from pathfacts.filesystem.windows import WindowsFilesystem


def get_filesystem() -> FilesystemQuery:
    """Return the query implementation for the host operating system.

    Returns:
        WindowsFilesystem on Windows, PosixFilesystem everywhere else.
    """
    if os.name == "nt":
        return WindowsFilesystem()
    return PosixFilesystem()


__all__ = [
    "FilesystemQuery",
    "MemoryEntry",
    "MemoryFilesystem",
    "PosixFilesystem",
    "WindowsFilesystem",
    "get_filesystem",
]
