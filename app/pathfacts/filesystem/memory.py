"""In-memory filesystem for deterministic inspections.

MemoryFilesystem implements FilesystemQuery over a dictionary of
entries with explicit permission bits, so walks can be exercised
without touching (or needing privileges on) a real disk. Paths use
POSIX conventions.
"""

import errno
import posixpath
from dataclasses import dataclass

from pathfacts.filesystem.base import FilesystemQuery
from pathfacts.models.node import NodeType
from pathfacts.models.path import PathFlavor

# Link depth at which lookups fail with ELOOP, mirroring Linux.
KERNEL_SYMLINK_LIMIT = 40


@dataclass(frozen=True, slots=True)
class MemoryEntry:
    """A single in-memory filesystem entry.

    Attributes:
        kind: FILE, DIRECTORY, or SYMLINK.
        read: Read permission for the current process.
        write: Write permission for the current process.
        execute: Execute/traverse permission for the current process.
        target: Raw link target (symlinks only).
    """

    kind: NodeType
    read: bool = True
    write: bool = True
    execute: bool = True
    target: str | None = None


class MemoryFilesystem(FilesystemQuery):
    """Dictionary-backed filesystem.

    Permissions are recorded but not enforced on lookups: a directory
    without execute still lets queries below it succeed. That is how the
    permission fold is exercised independently of the walk.

    Args:
        cwd: Directory relative paths are resolved against.

    Example:
        >>> fs = MemoryFilesystem()
        >>> fs.add_dir("/tmp/a", execute=False)
        >>> fs.add_file("/tmp/a/b.txt")
        >>> fs.node_type("/tmp/a/b.txt")
        <NodeType.FILE: 'file'>
    """

    def __init__(self, *, cwd: str = "/") -> None:
        self._cwd = cwd
        self._entries: dict[str, MemoryEntry] = {"/": MemoryEntry(NodeType.DIRECTORY)}
        self._failures: dict[str, OSError] = {}

    @property
    def flavor(self) -> PathFlavor:
        """Return the POSIX path flavor."""
        return PathFlavor.POSIX

    # -- Building -----------------------------------------------------------

    def add_dir(
        self, path: str, *, read: bool = True, write: bool = True, execute: bool = True
    ) -> None:
        """Add a directory (and any missing parent directories)."""
        self._add(path, MemoryEntry(NodeType.DIRECTORY, read, write, execute))

    def add_file(
        self, path: str, *, read: bool = True, write: bool = True, execute: bool = False
    ) -> None:
        """Add a regular file (and any missing parent directories)."""
        self._add(path, MemoryEntry(NodeType.FILE, read, write, execute))

    def add_symlink(self, path: str, target: str) -> None:
        """Add a symbolic link pointing at ``target`` (which may not exist)."""
        self._add(path, MemoryEntry(NodeType.SYMLINK, target=target))

    def fail(self, path: str, error: OSError) -> None:
        """Make every query on exactly ``path`` raise ``error``."""
        self._failures[self._absolute(path)] = error

    def _add(self, path: str, entry: MemoryEntry) -> None:
        absolute = self._absolute(path)
        parent = posixpath.dirname(absolute)
        if parent not in self._entries:
            self.add_dir(parent)
        self._entries[absolute] = entry

    def _absolute(self, path: str) -> str:
        return posixpath.normpath(posixpath.join(self._cwd, path))

    # -- FilesystemQuery ----------------------------------------------------

    def current_dir(self) -> str:
        """Return the configured working directory."""
        return self._cwd

    def node_type(self, path: str) -> NodeType:
        """Return the type of ``path`` without following a final link."""
        self._check_failure(path)
        try:
            _, entry = self._lookup(path, follow_last=False)
        except FileNotFoundError:
            return NodeType.MISSING
        return NodeType.MISSING if entry is None else entry.kind

    def read_link(self, path: str) -> str:
        """Return the raw target of the link at ``path``."""
        self._check_failure(path)
        _, entry = self._lookup(path, follow_last=False)
        if entry is None:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
        if entry.kind != NodeType.SYMLINK or entry.target is None:
            raise OSError(errno.EINVAL, "Invalid argument", path)
        return entry.target

    def list_dir(self, path: str) -> list[str]:
        """Return the entry names of the directory at ``path``."""
        self._check_failure(path)
        resolved, entry = self._require(path)
        if entry.kind != NodeType.DIRECTORY:
            raise NotADirectoryError(errno.ENOTDIR, "Not a directory", path)
        if not entry.read:
            raise PermissionError(errno.EACCES, "Permission denied", path)
        prefix = resolved.rstrip("/") + "/"
        return [
            candidate[len(prefix) :]
            for candidate in self._entries
            if candidate != resolved
            and candidate.startswith(prefix)
            and "/" not in candidate[len(prefix) :]
        ]

    def canonical(self, path: str) -> str:
        """Return the resolved location of ``path``, following every link."""
        return self._require(path)[0]

    def can_read(self, path: str) -> bool:
        """Return the recorded read bit of the resolved entry."""
        return self._require(path)[1].read

    def can_write(self, path: str) -> bool:
        """Return the recorded write bit of the resolved entry."""
        return self._require(path)[1].write

    def can_execute(self, path: str) -> bool:
        """Return the recorded execute bit of the resolved entry."""
        return self._require(path)[1].execute

    # -- Lookup -------------------------------------------------------------

    def _check_failure(self, path: str) -> None:
        error = self._failures.get(self._absolute(path))
        if error is not None:
            raise error

    def _require(self, path: str) -> tuple[str, MemoryEntry]:
        self._check_failure(path)
        resolved, entry = self._lookup(path, follow_last=True)
        if entry is None:
            raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
        return resolved, entry

    def _lookup(
        self, path: str, *, follow_last: bool, depth: int = 0
    ) -> tuple[str, MemoryEntry | None]:
        """Resolve ``path`` component by component like the kernel does.

        Intermediate links are always followed; the final one only when
        ``follow_last`` is set.

        Returns:
            Tuple of (resolved path, entry or None if the final component is absent).

        Raises:
            FileNotFoundError: If an intermediate component is absent.
            NotADirectoryError: If an intermediate component is not a directory.
            OSError: ELOOP when links nest deeper than the kernel limit.
        """
        parts = [p for p in posixpath.join(self._cwd, path).split("/") if p]
        current = "/"
        for position, part in enumerate(parts):
            last = position == len(parts) - 1
            if part == ".":
                continue
            if part == "..":
                current = posixpath.dirname(current)
                continue

            candidate = posixpath.join(current, part)
            entry = self._entries.get(candidate)

            if entry is not None and entry.kind == NodeType.SYMLINK and (follow_last or not last):
                if depth >= KERNEL_SYMLINK_LIMIT:
                    raise OSError(errno.ELOOP, "Too many levels of symbolic links", path)
                target = posixpath.join(current, entry.target or "")
                candidate, entry = self._lookup(target, follow_last=True, depth=depth + 1)

            if entry is None:
                if last:
                    return candidate, None
                raise FileNotFoundError(errno.ENOENT, "No such file or directory", path)
            if not last and entry.kind != NodeType.DIRECTORY:
                raise NotADirectoryError(errno.ENOTDIR, "Not a directory", path)
            current = candidate

        return current, self._entries.get(current)
