"""Permission probing.

Queries each existing node's own accessibility and folds in the
traversability of every directory above it. A directory that does not
grant execute hides everything below it, so the effective permissions
of deeper nodes are reported as unknown rather than guessed.
"""

import logging
from collections.abc import Callable, Sequence
from dataclasses import replace

from pathfacts.filesystem.base import FilesystemQuery
from pathfacts.models.node import Access, AncestorNode, Permissions

logger = logging.getLogger(__name__)


def probe(nodes: Sequence[AncestorNode], query: FilesystemQuery) -> tuple[AncestorNode, ...]:
    """Attach raw and effective permissions to every node.

    Args:
        nodes: Ancestor chain as produced by the walker.
        query: Filesystem to query.

    Returns:
        New nodes with ``raw_permissions``, ``effective_permissions``,
        and ``blocked_by`` filled in. The input is not modified.
    """
    raw = [
        _raw_permissions(node, query) if node.exists else Permissions.unknown() for node in nodes
    ]

    probed: list[AncestorNode] = []
    blocker: int | None = None
    for node, permissions in zip(nodes, raw, strict=True):
        effective = permissions if blocker is None else Permissions.unknown()
        probed.append(
            replace(
                node,
                raw_permissions=permissions,
                effective_permissions=effective,
                blocked_by=blocker,
            )
        )
        # Only strictly deeper nodes are affected by this node's execute bit
        if blocker is None and node.is_traversable and permissions.execute != Access.GRANTED:
            blocker = node.index

    return tuple(probed)


def _raw_permissions(node: AncestorNode, query: FilesystemQuery) -> Permissions:
    """Query the node's own read/write/execute access."""
    return Permissions(
        read=_check(query.can_read, node.path),
        write=_check(query.can_write, node.path),
        execute=_check(query.can_execute, node.path),
    )


def _check(check: Callable[[str], bool], path: str) -> Access:
    try:
        return Access.from_bool(check(path))
    except (OSError, ValueError) as exc:
        name = getattr(check, "__name__", "access")
        logger.debug("Permission query %s failed for %s: %s", name, path, exc)
        return Access.UNKNOWN
