"""Inspection report models.

The report is the root aggregate of one inspection: the component
sequence, the ancestor chain, the terminal classification, and the
listing of the directory the walk ended in.
"""

from dataclasses import dataclass
from enum import Enum

from pathfacts.models.node import AncestorNode
from pathfacts.models.path import PathComponents


class Classification(str, Enum):
    """Terminal classification of a walk.

    Attributes:
        FULLY_EXISTS: Every component exists.
        MISSING_AT: The component at the blocking index does not exist.
        BLOCKED_BY_NON_DIRECTORY_AT: A non-terminal component is not a directory.
        SYMLINK_LOOP_SUSPECTED: A symlink did not resolve within the hop bound.
        INDETERMINATE_AT: A query failed, so existence could not be determined.
        EMPTY_PATH: The input path was the empty string.
    """

    FULLY_EXISTS = "fully_exists"
    MISSING_AT = "missing_at"
    BLOCKED_BY_NON_DIRECTORY_AT = "blocked_by_non_directory_at"
    SYMLINK_LOOP_SUSPECTED = "symlink_loop_suspected"
    INDETERMINATE_AT = "indeterminate_at"
    EMPTY_PATH = "empty_path"


@dataclass(frozen=True, slots=True)
class DirectoryListing:
    """Entries of the directory containing the walk's terminal node.

    Attributes:
        path: Directory that was listed.
        entries: Sorted entry names (possibly capped).
        truncated: Number of entries left out by the cap.
        error: Text of the listing failure, if any.
    """

    path: str
    entries: tuple[str, ...] = ()
    truncated: int = 0
    error: str | None = None

    def to_dict(self) -> dict[str, object]:
        """Serialize to a JSON-ready dictionary."""
        return {
            "path": self.path,
            "entries": list(self.entries),
            "truncated": self.truncated,
            "error": self.error,
        }


@dataclass(frozen=True, slots=True)
class InspectionReport:
    """Facts about a path, true at inspection time.

    Attributes:
        path: The path as given by the caller.
        components: Split components the walk was driven by.
        nodes: Ancestor chain from the root to the terminal node.
        classification: Terminal classification of the walk.
        blocking_index: Index of the missing/blocking node (None if none).
        listing: Listing of the terminal node's parent directory.
        max_symlink_hops: Hop bound the walk was run with.
        cwd_error: Why the current working directory could not be read.
    """

    path: str
    components: PathComponents
    nodes: tuple[AncestorNode, ...]
    classification: Classification
    blocking_index: int | None = None
    listing: DirectoryListing | None = None
    max_symlink_hops: int = 40
    cwd_error: str | None = None

    @property
    def target(self) -> AncestorNode | None:
        """The deepest node examined (the path itself when fully walked)."""
        return self.nodes[-1] if self.nodes else None

    @property
    def exists(self) -> bool:
        """True if every component of the path exists."""
        return self.classification == Classification.FULLY_EXISTS

    @property
    def last_existing_index(self) -> int | None:
        """Index of the deepest node that exists, or None."""
        for node in reversed(self.nodes):
            if node.exists:
                return node.index
        return None

    @property
    def last_existing(self) -> AncestorNode | None:
        """The deepest node that exists, or None."""
        index = self.last_existing_index
        return None if index is None else self.nodes[index]

    @property
    def blocking_node(self) -> AncestorNode | None:
        """The node the walk stopped at, or None."""
        if self.blocking_index is None:
            return None
        return self.nodes[self.blocking_index]

    def to_dict(self) -> dict[str, object]:
        """Serialize to a JSON-ready dictionary."""
        return {
            "path": self.path,
            "relative": self.components.relative,
            "classification": self.classification.value,
            "blocking_index": self.blocking_index,
            "last_existing_index": self.last_existing_index,
            "max_symlink_hops": self.max_symlink_hops,
            "cwd_error": self.cwd_error,
            "nodes": [node.to_dict() for node in self.nodes],
            "listing": self.listing.to_dict() if self.listing else None,
        }
