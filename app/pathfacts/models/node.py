"""Ancestor chain models.

This module defines the per-component data captured while walking a
path from its root outward: node types, tri-state access values,
permission triples, and the ancestor node itself.
"""

from dataclasses import dataclass, field
from enum import Enum


class NodeType(str, Enum):
    """Type of a filesystem entry as seen during the walk.

    Attributes:
        FILE: Regular file (or any non-directory, non-symlink entry).
        DIRECTORY: Directory.
        SYMLINK: Symbolic link (only used for the unresolved lstat type).
        MISSING: Nothing exists at this path.
        UNKNOWN: The query for this path failed.
    """

    FILE = "file"
    DIRECTORY = "directory"
    SYMLINK = "symlink"
    MISSING = "missing"
    UNKNOWN = "unknown"


class Access(str, Enum):
    """Tri-state answer to a single accessibility check."""

    GRANTED = "granted"
    DENIED = "denied"
    UNKNOWN = "unknown"

    @classmethod
    def from_bool(cls, value: bool) -> "Access":
        """Convert a boolean check result."""
        return cls.GRANTED if value else cls.DENIED


@dataclass(frozen=True, slots=True)
class Permissions:
    """Read/write/execute accessibility for the current process.

    Attributes:
        read: Whether the entry can be read.
        write: Whether the entry can be written.
        execute: Whether the entry can be executed (traversed for directories).
    """

    read: Access = Access.UNKNOWN
    write: Access = Access.UNKNOWN
    execute: Access = Access.UNKNOWN

    @classmethod
    def unknown(cls) -> "Permissions":
        """Return a triple with every bit unknown."""
        return cls(Access.UNKNOWN, Access.UNKNOWN, Access.UNKNOWN)

    @property
    def all_granted(self) -> bool:
        """True if read, write, and execute are all granted."""
        return all(a == Access.GRANTED for a in (self.read, self.write, self.execute))

    def items(self) -> tuple[tuple[str, Access], ...]:
        """Return (label, access) pairs in display order."""
        return (("read", self.read), ("write", self.write), ("execute", self.execute))

    def to_dict(self) -> dict[str, str]:
        """Serialize to a JSON-ready dictionary."""
        return {label: access.value for label, access in self.items()}


@dataclass(frozen=True, slots=True)
class AncestorNode:
    """One examined component of the ancestor chain.

    Attributes:
        index: Position in the chain (0 is the root).
        name: Component text (root marker for index 0).
        path: Path string from the root up to and including this component.
        exists: Whether the component resolves to an existing entry.
        node_type: Type without following a final symlink.
        resolved_type: Type after following symlinks (MISSING for dangling links).
        symlink_target: Last path reached while following links (the
            missing or looping one when resolution fails).
        link_text: Raw text of the link itself, as stored on disk.
        canonical: Fully resolved absolute path of an existing link target.
        symlink_hops: Number of links followed while resolving.
        raw_permissions: The entry's own accessibility bits.
        effective_permissions: Raw bits folded with ancestor traversability.
        blocked_by: Index of the first ancestor directory not granting execute.
        error: Text of a failed query, if any.
    """

    index: int
    name: str
    path: str
    exists: bool
    node_type: NodeType
    resolved_type: NodeType
    symlink_target: str | None = None
    link_text: str | None = None
    canonical: str | None = None
    symlink_hops: int = 0
    raw_permissions: Permissions = field(default_factory=Permissions.unknown)
    effective_permissions: Permissions = field(default_factory=Permissions.unknown)
    blocked_by: int | None = None
    error: str | None = None

    @property
    def is_symlink(self) -> bool:
        """True if the component itself is a symbolic link."""
        return self.node_type == NodeType.SYMLINK

    @property
    def is_traversable(self) -> bool:
        """True if the walk can descend into this component."""
        return self.exists and self.resolved_type == NodeType.DIRECTORY

    @property
    def reachable(self) -> bool:
        """True if every ancestor directory grants execute."""
        return self.blocked_by is None

    def to_dict(self) -> dict[str, object]:
        """Serialize to a JSON-ready dictionary."""
        return {
            "index": self.index,
            "name": self.name,
            "path": self.path,
            "exists": self.exists,
            "node_type": self.node_type.value,
            "resolved_type": self.resolved_type.value,
            "symlink_target": self.symlink_target,
            "link_text": self.link_text,
            "canonical": self.canonical,
            "symlink_hops": self.symlink_hops,
            "raw_permissions": self.raw_permissions.to_dict(),
            "effective_permissions": self.effective_permissions.to_dict(),
            "blocked_by": self.blocked_by,
            "error": self.error,
        }
