"""Windows filesystem queries.

Windows has no execute bit and no traverse check by default, so
directories are always treated as traversable and files as executable
when their extension is listed in PATHEXT. Write access follows the
read-only attribute as reported by os.access. Full ACL evaluation is
out of scope.
"""

import ntpath
import os
import stat

from pathfacts.filesystem.base import FilesystemQuery
from pathfacts.models.node import NodeType
from pathfacts.models.path import PathFlavor

_DEFAULT_PATHEXT = ".COM;.EXE;.BAT;.CMD"

# stat.IO_REPARSE_TAG_MOUNT_POINT only exists on Windows builds
_IO_REPARSE_TAG_MOUNT_POINT = 0xA0000003


class WindowsFilesystem(FilesystemQuery):
    """Filesystem queries for Windows.

    Args:
        pathext: Override for the PATHEXT executable extension list.
    """

    def __init__(self, *, pathext: str | None = None) -> None:
        raw = pathext if pathext is not None else os.environ.get("PATHEXT", _DEFAULT_PATHEXT)
        self._executable_suffixes = frozenset(
            ext.strip().lower() for ext in raw.split(";") if ext.strip()
        )

    @property
    def flavor(self) -> PathFlavor:
        """Return the Windows path flavor."""
        return PathFlavor.WINDOWS

    def node_type(self, path: str) -> NodeType:
        """Return the lstat type of ``path`` (junctions count as links)."""
        try:
            st = os.lstat(path)
        except FileNotFoundError:
            return NodeType.MISSING

        if stat.S_ISLNK(st.st_mode) or _is_junction(st):
            return NodeType.SYMLINK
        if stat.S_ISDIR(st.st_mode):
            return NodeType.DIRECTORY
        return NodeType.FILE

    def read_link(self, path: str) -> str:
        """Return the raw target of the link or junction at ``path``."""
        return os.readlink(path)

    def list_dir(self, path: str) -> list[str]:
        """Return the entry names of ``path``."""
        return os.listdir(path)

    def can_read(self, path: str) -> bool:
        """Check read access."""
        return self._access(path, os.R_OK)

    def can_write(self, path: str) -> bool:
        """Check write access (False for read-only entries)."""
        return self._access(path, os.W_OK)

    def can_execute(self, path: str) -> bool:
        """Check whether ``path`` is a directory or an executable file."""
        st = os.stat(path)
        if stat.S_ISDIR(st.st_mode):
            return True
        _, ext = ntpath.splitext(path)
        return ext.lower() in self._executable_suffixes

    @staticmethod
    def _access(path: str, mode: int) -> bool:
        """Run os.access, raising if the entry cannot be found."""
        if os.access(path, mode):
            return True
        os.stat(path)
        return False


def _is_junction(st: os.stat_result) -> bool:
    """Check for an NTFS junction (a mount-point reparse point)."""
    return getattr(st, "st_reparse_tag", 0) == _IO_REPARSE_TAG_MOUNT_POINT
