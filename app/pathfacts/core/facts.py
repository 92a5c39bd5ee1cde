"""Construction API for path facts.

PathFacts performs every filesystem query eagerly when constructed and
renders the resulting report when converted to a string. Construct it
where an error is being formatted, not on a hot path.

Example:
    >>> try:
    ...     open("/etc/nope/settings.toml")
    ... except FileNotFoundError as e:
    ...     raise SystemExit(f"{e.strerror}: {PathFacts(e.filename)}")
"""

import logging
import os
from typing import Any

from pathfacts.core.config import InspectionSettings
from pathfacts.core.prober import probe
from pathfacts.core.renderer import GlyphStyle, render
from pathfacts.core.splitter import split_path
from pathfacts.core.walker import error_text, walk
from pathfacts.filesystem import FilesystemQuery, get_filesystem
from pathfacts.models.report import InspectionReport

logger = logging.getLogger(__name__)

PathInput = str | bytes | os.PathLike[str] | os.PathLike[bytes]


def inspect_path(
    path: PathInput,
    *,
    filesystem: FilesystemQuery | None = None,
    settings: InspectionSettings | None = None,
    cwd: str | None = None,
) -> InspectionReport:
    """Inspect ``path`` and return the structured report.

    Args:
        path: Path to inspect (need not exist).
        filesystem: Query implementation. Defaults to the host filesystem.
        settings: Inspection bounds. Defaults to InspectionSettings().
        cwd: Directory relative paths are anchored at. Defaults to the
            filesystem's current directory.

    Returns:
        InspectionReport, true at inspection time. Never raises for any
        path string.
    """
    settings = settings or InspectionSettings()
    query = filesystem or get_filesystem()
    raw = _to_str(path)

    components = split_path(raw, cwd, flavor=query.flavor)
    cwd_error: str | None = None
    if components.relative and not components.is_empty and cwd is None:
        try:
            components = split_path(raw, query.current_dir(), flavor=query.flavor)
        except OSError as e:
            logger.debug("Cannot read current working directory: %s", e)
            cwd_error = error_text(e)

    result = walk(
        components,
        query,
        max_symlink_hops=settings.max_symlink_hops,
        max_listed_entries=settings.max_listed_entries,
    )
    return InspectionReport(
        path=raw,
        components=components,
        nodes=probe(result.nodes, query),
        classification=result.classification,
        blocking_index=result.blocking_index,
        listing=result.listing,
        max_symlink_hops=settings.max_symlink_hops,
        cwd_error=cwd_error,
    )


class PathFacts:
    """Helpful facts about a path, shown when formatted as a string.

    Args:
        path: Path to inspect (need not exist).
        filesystem: Query implementation. Defaults to the host filesystem.
        settings: Inspection bounds and glyph style.
        cwd: Directory relative paths are anchored at.
    """

    def __init__(
        self,
        path: PathInput,
        *,
        filesystem: FilesystemQuery | None = None,
        settings: InspectionSettings | None = None,
        cwd: str | None = None,
    ) -> None:
        self._settings = settings or InspectionSettings()
        self.report = inspect_path(path, filesystem=filesystem, settings=self._settings, cwd=cwd)

    @property
    def path(self) -> str:
        """The inspected path as given."""
        return self.report.path

    @property
    def exists(self) -> bool:
        """True if every component of the path existed at inspection time."""
        return self.report.exists

    def render(self, *, glyphs: GlyphStyle | None = None) -> str:
        """Render the facts as text without a trailing newline.

        Args:
            glyphs: Glyph set override. Defaults to the settings' glyphs.
        """
        return render(self.report, glyphs=glyphs or self._settings.glyphs)

    def to_dict(self) -> dict[str, Any]:
        """Return the report as a JSON-ready dictionary."""
        return self.report.to_dict()

    def __str__(self) -> str:
        return self.render()

    def __repr__(self) -> str:
        return f"PathFacts({self.path!r}, classification={self.report.classification.value!r})"


def _to_str(path: PathInput) -> str:
    value = os.fspath(path)
    return os.fsdecode(value) if isinstance(value, bytes) else value
