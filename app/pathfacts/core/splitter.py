"""Lexical path splitting.

Splits a path string into a root marker and an ordered tuple of
segments. Splitting is purely lexical: repeated and trailing
separators are collapsed, but "." and ".." are kept, because whether
".." is valid depends on what actually exists on disk.
"""

import ntpath
import re

from pathfacts.models.path import PathComponents, PathFlavor

_WINDOWS_SEPARATORS = re.compile(r"[\\/]")


def split_path(
    raw: str,
    cwd: str | None = None,
    *,
    flavor: PathFlavor = PathFlavor.POSIX,
) -> PathComponents:
    """Split ``raw`` into its root and segments.

    Relative paths are anchored at ``cwd`` when one is given; the
    splitter never reads the process working directory itself.

    Args:
        raw: Path to split. The empty string is accepted.
        cwd: Absolute directory to anchor relative paths at.
        flavor: Separator and root conventions to apply.

    Returns:
        PathComponents for ``raw``. Never raises.
    """
    if raw == "":
        return PathComponents(raw=raw, root="", segments=(), flavor=flavor, relative=True)

    if flavor is PathFlavor.WINDOWS:
        root, segments = _split_windows(raw)
    else:
        root, segments = _split_posix(raw)

    relative = not _is_rooted(root, flavor)
    if relative and cwd:
        base = split_path(cwd, flavor=flavor)
        # A drive-relative "C:x" can only be anchored at a cwd on that drive
        same_drive = base.root.lower().startswith(root.lower())
        if not base.relative and same_drive:
            return PathComponents(
                raw=raw,
                root=base.root,
                segments=base.segments + segments,
                flavor=flavor,
                relative=True,
            )

    return PathComponents(
        raw=raw, root=root, segments=segments, flavor=flavor, relative=relative
    )


def _split_posix(raw: str) -> tuple[str, tuple[str, ...]]:
    root = "/" if raw.startswith("/") else ""
    return root, tuple(part for part in raw.split("/") if part)


def _split_windows(raw: str) -> tuple[str, tuple[str, ...]]:
    drive, rest = ntpath.splitdrive(raw)
    drive = drive.replace("/", "\\")
    rooted = drive.startswith("\\\\") or rest[:1] in ("\\", "/")
    root = drive + "\\" if rooted else drive
    return root, tuple(part for part in _WINDOWS_SEPARATORS.split(rest) if part)


def _is_rooted(root: str, flavor: PathFlavor) -> bool:
    """True if ``root`` anchors the path (a bare "C:" drive does not)."""
    if flavor is PathFlavor.WINDOWS:
        return root.endswith("\\")
    return root == "/"
