"""Lexical path models.

Defines the platform path flavor and the immutable component sequence
produced by the path splitter.
"""

import ntpath
import posixpath
from dataclasses import dataclass
from enum import Enum
from types import ModuleType


class PathFlavor(str, Enum):
    """Separator and root conventions of a platform.

    Attributes:
        POSIX: Single "/" root and "/" separator.
        WINDOWS: Drive or UNC roots, "\\" separator ("/" accepted on input).
    """

    POSIX = "posix"
    WINDOWS = "windows"

    @property
    def separator(self) -> str:
        """Preferred separator used when joining components."""
        return "\\" if self is PathFlavor.WINDOWS else "/"

    @property
    def module(self) -> ModuleType:
        """The os.path implementation matching this flavor."""
        return ntpath if self is PathFlavor.WINDOWS else posixpath


@dataclass(frozen=True, slots=True)
class PathComponents:
    """A path split into its root marker and ordered segments.

    Attributes:
        raw: The path string as given by the caller.
        root: Root marker ("/", "C:\\", UNC share) or "" when unknown.
        segments: Non-empty segment names; "." and ".." are kept verbatim.
        flavor: Platform conventions used for joining.
        relative: True if the raw input had no root of its own.
    """

    raw: str
    root: str
    segments: tuple[str, ...]
    flavor: PathFlavor = PathFlavor.POSIX
    relative: bool = False

    @property
    def is_empty(self) -> bool:
        """True if the raw input was the empty string."""
        return self.raw == ""

    @property
    def root_label(self) -> str:
        """Display name of the root component."""
        return self.root or "."

    def __len__(self) -> int:
        """Number of components, counting the root."""
        return len(self.segments) + 1

    def names(self) -> tuple[str, ...]:
        """Return the root label followed by every segment."""
        return (self.root_label, *self.segments)

    def prefix(self, count: int) -> str:
        """Build the path string of the root plus the first ``count`` segments.

        Args:
            count: Number of segments to include (0 means the root alone).

        Returns:
            Path string joined with the flavor's separator.
        """
        joined = self.flavor.separator.join(self.segments[:count])
        if not self.root:
            return joined or "."
        return self.root + joined
