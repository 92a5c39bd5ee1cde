"""Abstract base class for filesystem queries.

This module defines the FilesystemQuery interface that every platform
implementation must provide. The walker and prober only talk to the
filesystem through this interface.
"""

import os
from abc import ABC, abstractmethod

from pathfacts.models.node import NodeType
from pathfacts.models.path import PathFlavor


class FilesystemQuery(ABC):
    """Abstract base class for read-only filesystem metadata queries.

    Implementations never mutate the filesystem. Failures other than
    "does not exist" are raised as OSError and turned into data by the
    caller.

    Example:
        >>> fs = get_filesystem()
        >>> if fs.exists("/tmp"):
        ...     print(fs.node_type("/tmp"), fs.can_write("/tmp"))
    """

    @property
    @abstractmethod
    def flavor(self) -> PathFlavor:
        """Return the path conventions this filesystem uses."""

    @abstractmethod
    def node_type(self, path: str) -> NodeType:
        """Return the type of an entry without following a final symlink.

        Args:
            path: Path to examine.

        Returns:
            NodeType of the entry, MISSING if nothing exists there.

        Raises:
            OSError: If the entry cannot be examined (e.g. permission denied).
        """

    @abstractmethod
    def read_link(self, path: str) -> str:
        """Return the raw target text of a symbolic link.

        Raises:
            OSError: If the path is not a link or cannot be read.
        """

    @abstractmethod
    def list_dir(self, path: str) -> list[str]:
        """Return the entry names of a directory, in any order.

        Raises:
            OSError: If the directory cannot be listed.
        """

    @abstractmethod
    def can_read(self, path: str) -> bool:
        """Check read access for the current process (follows symlinks)."""

    @abstractmethod
    def can_write(self, path: str) -> bool:
        """Check write access for the current process (follows symlinks)."""

    @abstractmethod
    def can_execute(self, path: str) -> bool:
        """Check execute/traverse access for the current process (follows symlinks)."""

    def exists(self, path: str) -> bool:
        """Check whether anything exists at ``path`` (links are not followed).

        Returns False when the entry cannot be examined.
        """
        try:
            return self.node_type(path) != NodeType.MISSING
        except OSError:
            return False

    def canonical(self, path: str) -> str:
        """Return the absolute path of ``path`` with every symlink and ``..`` resolved.

        Raises:
            OSError: If any component is missing or cannot be resolved.
        """
        return os.path.realpath(path, strict=True)

    def current_dir(self) -> str:
        """Return the directory relative paths are anchored at.

        Raises:
            OSError: If the working directory cannot be determined (e.g. deleted).
        """
        return os.getcwd()
