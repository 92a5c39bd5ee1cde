"""Ancestor walking.

Walks a path's components from the root outward, recording the type
and existence of every component until the first one that is missing,
cannot be examined, or cannot be descended into. Symlinks are followed
hop by hop up to a bound, so cyclic links are reported instead of
resolved.
"""

import errno
import logging
from dataclasses import dataclass, replace

from pathfacts.filesystem.base import FilesystemQuery
from pathfacts.models.node import AncestorNode, NodeType
from pathfacts.models.path import PathComponents, PathFlavor
from pathfacts.models.report import Classification, DirectoryListing

logger = logging.getLogger(__name__)

# Matches the Linux kernel's limit on nested symlink resolution
DEFAULT_MAX_SYMLINK_HOPS = 40
DEFAULT_MAX_LISTED_ENTRIES = 64


@dataclass(frozen=True, slots=True)
class WalkResult:
    """Outcome of walking an ancestor chain.

    Attributes:
        nodes: Examined nodes from the root to the terminal node.
        classification: Terminal classification.
        blocking_index: Index of the node the walk stopped at (None if none).
        listing: Listing of the terminal node's parent directory.
    """

    nodes: tuple[AncestorNode, ...]
    classification: Classification
    blocking_index: int | None
    listing: DirectoryListing | None


@dataclass(frozen=True, slots=True)
class _Resolution:
    """Where a chain of symlinks ended up."""

    kind: NodeType
    target: str | None
    hops: int
    link_text: str | None = None
    loop: bool = False
    error: str | None = None


def error_text(exc: Exception) -> str:
    """Return a short human-readable description of a query failure."""
    if isinstance(exc, OSError) and exc.strerror:
        return f"{exc.strerror} (os error {exc.errno})" if exc.errno else exc.strerror
    return str(exc) or type(exc).__name__


def _is_loop_error(exc: Exception) -> bool:
    return isinstance(exc, OSError) and exc.errno == errno.ELOOP


def walk(
    components: PathComponents,
    query: FilesystemQuery,
    *,
    max_symlink_hops: int = DEFAULT_MAX_SYMLINK_HOPS,
    max_listed_entries: int = DEFAULT_MAX_LISTED_ENTRIES,
) -> WalkResult:
    """Walk ``components`` from the root outward.

    The walk stops at the first component that is missing, that cannot
    be examined, whose symlinks do not resolve within
    ``max_symlink_hops``, or that is not a directory while further
    components remain. No node after the stopping point is recorded.

    Args:
        components: Split path to walk.
        query: Filesystem to query.
        max_symlink_hops: Links followed per component before giving up.
        max_listed_entries: Cap on the parent directory listing.

    Returns:
        WalkResult with the node chain and terminal classification.
    """
    if components.is_empty:
        return WalkResult((), Classification.EMPTY_PATH, None, None)

    names = components.names()
    last_index = len(names) - 1
    nodes: list[AncestorNode] = []
    classification = Classification.FULLY_EXISTS
    blocking_index: int | None = None

    for index, name in enumerate(names):
        path = components.prefix(index)
        node, outcome = _examine(index, name, path, query, components.flavor, max_symlink_hops)

        if outcome == Classification.BLOCKED_BY_NON_DIRECTORY_AT and not node.exists:
            # ENOTDIR: the component above turned out not to be a directory
            nodes[-1] = replace(nodes[-1], error=node.error)
        else:
            nodes.append(node)

        if outcome is None and index < last_index and not node.is_traversable:
            outcome = Classification.BLOCKED_BY_NON_DIRECTORY_AT
        if outcome is not None:
            logger.debug(
                "Walk of %s stopped at %s: %s", components.raw, nodes[-1].path, outcome.value
            )
            classification = outcome
            blocking_index = len(nodes) - 1
            break

    listing = _list_parent(nodes, query, max_listed_entries)
    return WalkResult(tuple(nodes), classification, blocking_index, listing)


def _examine(
    index: int,
    name: str,
    path: str,
    query: FilesystemQuery,
    flavor: PathFlavor,
    max_hops: int,
) -> tuple[AncestorNode, Classification | None]:
    """Examine one component.

    Returns:
        Tuple of (node, terminal classification or None to keep walking).
    """
    try:
        node_type = query.node_type(path)
    except (OSError, ValueError) as exc:
        logger.debug("Cannot examine %s: %s", path, exc)
        node = AncestorNode(
            index, name, path, False, NodeType.UNKNOWN, NodeType.UNKNOWN, error=error_text(exc)
        )
        if _is_loop_error(exc):
            return node, Classification.SYMLINK_LOOP_SUSPECTED
        if isinstance(exc, OSError) and exc.errno == errno.ENOTDIR and index > 0:
            return node, Classification.BLOCKED_BY_NON_DIRECTORY_AT
        return node, Classification.INDETERMINATE_AT

    if node_type == NodeType.MISSING:
        node = AncestorNode(index, name, path, False, NodeType.MISSING, NodeType.MISSING)
        return node, Classification.MISSING_AT

    if node_type != NodeType.SYMLINK:
        return AncestorNode(index, name, path, True, node_type, node_type), None

    resolution = _follow(path, query, flavor, max_hops)
    exists = resolution.kind in (NodeType.FILE, NodeType.DIRECTORY)
    node = AncestorNode(
        index,
        name,
        path,
        exists=exists,
        node_type=NodeType.SYMLINK,
        resolved_type=resolution.kind,
        symlink_target=resolution.target,
        link_text=resolution.link_text,
        canonical=_canonical(path, query) if exists else None,
        symlink_hops=resolution.hops,
        error=resolution.error,
    )
    if resolution.loop:
        return node, Classification.SYMLINK_LOOP_SUSPECTED
    if resolution.kind == NodeType.MISSING:
        return node, Classification.MISSING_AT
    if resolution.kind == NodeType.UNKNOWN:
        return node, Classification.INDETERMINATE_AT
    return node, None


def _follow(path: str, query: FilesystemQuery, flavor: PathFlavor, max_hops: int) -> _Resolution:
    """Follow the symlink at ``path`` until it reaches a non-link.

    Relative targets are joined to the directory holding the link. The
    walk gives up after ``max_hops`` links.
    """
    module = flavor.module
    current = path
    hops = 0
    first_link: str | None = None
    kind = NodeType.SYMLINK

    while kind == NodeType.SYMLINK:
        if hops >= max_hops:
            logger.debug("Symlink %s not resolved after %d hops", path, hops)
            return _Resolution(NodeType.UNKNOWN, current, hops, first_link, loop=True)
        try:
            link = query.read_link(current)
        except (OSError, ValueError) as exc:
            logger.debug("Cannot read link %s: %s", current, exc)
            return _Resolution(NodeType.UNKNOWN, current, hops, first_link, error=error_text(exc))

        if first_link is None:
            first_link = link
        hops += 1
        current = link if module.isabs(link) else module.join(module.dirname(current), link)
        try:
            kind = query.node_type(current)
        except (FileNotFoundError, NotADirectoryError):
            kind = NodeType.MISSING
        except (OSError, ValueError) as exc:
            logger.debug("Cannot examine link target %s: %s", current, exc)
            return _Resolution(
                NodeType.UNKNOWN,
                current,
                hops,
                first_link,
                loop=_is_loop_error(exc),
                error=error_text(exc),
            )

    return _Resolution(kind, current, hops, first_link)


def _canonical(path: str, query: FilesystemQuery) -> str | None:
    """Fully resolved location of an existing link, or None if it cannot be resolved."""
    try:
        return query.canonical(path)
    except (OSError, ValueError) as exc:
        logger.debug("Cannot canonicalize %s: %s", path, exc)
        return None


def _list_parent(
    nodes: list[AncestorNode], query: FilesystemQuery, max_entries: int
) -> DirectoryListing | None:
    """List the directory holding the terminal node, keeping the walked child visible."""
    if len(nodes) < 2:
        return None

    parent, child = nodes[-2], nodes[-1]
    try:
        names = sorted(query.list_dir(parent.path))
    except (OSError, ValueError) as exc:
        logger.debug("Cannot list %s: %s", parent.path, exc)
        return DirectoryListing(path=parent.path, error=error_text(exc))

    kept = names[:max_entries]
    if child.name in names and child.name not in kept:
        kept = sorted([*kept[:-1], child.name])
    return DirectoryListing(path=parent.path, entries=tuple(kept), truncated=len(names) - len(kept))
