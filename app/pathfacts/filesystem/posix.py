"""POSIX filesystem queries.

Uses lstat(2) for entry types and access(2) for accessibility. access(2)
asks the kernel, so ACLs, read-only mounts, and root privileges are
honoured, unlike a plain look at the mode bits.
"""

import os
import stat

from pathfacts.filesystem.base import FilesystemQuery
from pathfacts.models.node import NodeType
from pathfacts.models.path import PathFlavor


class PosixFilesystem(FilesystemQuery):
    """Filesystem queries for Linux, macOS, and other POSIX systems.

    Accessibility is checked against the effective uid/gid where the
    platform supports it, so setuid callers see what their operations see.
    """

    def __init__(self) -> None:
        self._effective_ids = os.access in os.supports_effective_ids

    @property
    def flavor(self) -> PathFlavor:
        """Return the POSIX path flavor."""
        return PathFlavor.POSIX

    def node_type(self, path: str) -> NodeType:
        """Return the lstat type of ``path``."""
        try:
            mode = os.lstat(path).st_mode
        except FileNotFoundError:
            return NodeType.MISSING

        if stat.S_ISLNK(mode):
            return NodeType.SYMLINK
        if stat.S_ISDIR(mode):
            return NodeType.DIRECTORY
        return NodeType.FILE

    def read_link(self, path: str) -> str:
        """Return the raw target of the link at ``path``."""
        return os.readlink(path)

    def list_dir(self, path: str) -> list[str]:
        """Return the entry names of ``path``."""
        return os.listdir(path)

    def can_read(self, path: str) -> bool:
        """Check read access."""
        return self._access(path, os.R_OK)

    def can_write(self, path: str) -> bool:
        """Check write access."""
        return self._access(path, os.W_OK)

    def can_execute(self, path: str) -> bool:
        """Check execute (search, for directories) access."""
        return self._access(path, os.X_OK)

    def _access(self, path: str, mode: int) -> bool:
        """Run access(2), raising if the entry itself cannot be found.

        access(2) answers False for both "denied" and "missing", so a
        follow-up stat distinguishes the two.
        """
        if os.access(path, mode, effective_ids=self._effective_ids):
            return True
        os.stat(path)
        return False
