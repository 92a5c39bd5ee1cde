"""Text rendering of inspection reports.

Turns an InspectionReport into deterministic, bullet-indented text with
a one-level tree of the directory the walk ended in. Rendering never
fails: anything that could not be determined is printed as unknown.
"""

from collections.abc import Sequence
from enum import Enum

from pathfacts.models.node import Access, AncestorNode, NodeType, Permissions
from pathfacts.models.report import Classification, InspectionReport


class GlyphStyle(str, Enum):
    """Glyph set used to mark permission states.

    Attributes:
        EMOJI: Check mark, cross, and question mark emoji.
        ASCII: Bracketed +, -, and ? markers for plain terminals.
    """

    EMOJI = "emoji"
    ASCII = "ascii"


_GLYPHS: dict[GlyphStyle, dict[Access, str]] = {
    GlyphStyle.EMOJI: {Access.GRANTED: "✅", Access.DENIED: "❌", Access.UNKNOWN: "❔"},
    GlyphStyle.ASCII: {Access.GRANTED: "[+]", Access.DENIED: "[-]", Access.UNKNOWN: "[?]"},
}

_NO_WRITE_NOTE = (
    "Parent directory is missing write permissions (cannot create, delete, or modify files)"
)


def render(report: InspectionReport, *, glyphs: GlyphStyle = GlyphStyle.EMOJI) -> str:
    """Render ``report`` as text without leading or trailing whitespace.

    Args:
        report: Report to render.
        glyphs: Glyph set for permission markers.

    Returns:
        Multi-line description of the path.
    """
    return "\n".join(_Renderer(report, glyphs).lines()).strip()


def format_permissions(permissions: Permissions, glyphs: GlyphStyle = GlyphStyle.EMOJI) -> str:
    """Format a permission triple, e.g. ``✅ read, ❌ write, ❔ execute``."""
    marks = _GLYPHS[glyphs]
    return ", ".join(f"{marks[access]} {label}" for label, access in permissions.items())


def bullet(lines: str | Sequence[str]) -> list[str]:
    """Prefix the first line with " - " and indent the rest to match."""
    if isinstance(lines, str):
        lines = lines.split("\n")
    if not lines:
        return [" - "]
    return [f" - {lines[0]}", *(f"   {line}" for line in lines[1:])]


class _Renderer:
    """Builds the lines for one report."""

    def __init__(self, report: InspectionReport, glyphs: GlyphStyle) -> None:
        self._report = report
        self._nodes = report.nodes
        self._glyphs = glyphs

    def lines(self) -> list[str]:
        report = self._report
        if report.classification == Classification.EMPTY_PATH or not self._nodes:
            return [f"path `{report.path}` is empty"]

        target_index = len(report.components) - 1
        blocking = report.blocking_index

        if blocking is None or blocking == target_index:
            described = self._describe(target_index, report.path)
            out = [described[0], *self._context(), *described[1:]]
        else:
            out = [f"cannot access `{report.path}`", *self._context()]
            out.extend(self._ancestor_problem(blocking))

        out.extend(self._traversal_note())
        return out

    # -- Top level ------------------------------------------------------------

    def _context(self) -> list[str]:
        """Bullets about how a relative path was anchored."""
        report = self._report
        components = report.components
        out: list[str] = []
        if report.cwd_error:
            out += bullet(f"Cannot read current working directory: {report.cwd_error}")
        elif components.relative and components.root:
            absolute = components.prefix(len(components.segments))
            out += bullet(f"Absolute: `{absolute}`")
        return out

    def _ancestor_problem(self, index: int) -> list[str]:
        node = self._nodes[index]
        nested = self._describe(index, node.path)
        classification = self._report.classification

        if classification == Classification.MISSING_AT:
            return bullet([f"Prior directory {nested[0]}", *nested[1:]])
        if classification in (
            Classification.SYMLINK_LOOP_SUSPECTED,
            Classification.INDETERMINATE_AT,
        ):
            return bullet([f"Prior path `{node.path}`:", *nested[1:]])
        out: list[str] = []
        if classification == Classification.BLOCKED_BY_NON_DIRECTORY_AT:
            out += bullet("Prior path is not a directory")
        out += bullet([f"Prior path {nested[0]}", *nested[1:]])
        return out

    def _traversal_note(self) -> list[str]:
        """Bullet naming the first ancestor directory that blocks traversal."""
        blocked = next((n for n in self._nodes if n.blocked_by is not None), None)
        if blocked is None or blocked.blocked_by is None:
            return []
        blocker = self._nodes[blocked.blocked_by]
        if blocker.raw_permissions.execute == Access.DENIED:
            return bullet(
                f"Directory `{blocker.path}` is missing execute permission "
                "(cannot traverse into it; facts below it are unknown)"
            )
        return bullet(
            f"Execute permission on directory `{blocker.path}` is unknown "
            "(facts below it are unknown)"
        )

    # -- Per-node descriptions ----------------------------------------------

    def _describe(self, index: int, display: str) -> list[str]:
        node = self._nodes[index]
        if node.exists:
            return self._existing(node, display)
        if self._is_loop(node):
            return self._loop(node, display)
        if self._report.classification == Classification.INDETERMINATE_AT:
            return self._indeterminate(node, display)
        return self._missing(node, display)

    def _existing(self, node: AncestorNode, display: str) -> list[str]:
        if node.index == 0:
            out = [f"is root `{display}`"]
            suffix = self._permissions_suffix(node)
            if suffix:
                out += bullet(f"Permissions: {suffix}")
            return out

        out = [f"exists `{display}`"]
        if node.is_symlink:
            if node.canonical:
                out += bullet(f"Canonical: `{node.canonical}`")
            if node.link_text is not None:
                out += bullet(f"Symlink target: `{node.link_text}`")
        out += bullet(self._tree(node))
        return out

    def _missing(self, node: AncestorNode, display: str) -> list[str]:
        out = [f"does not exist `{display}`"]
        if node.is_symlink:
            out += bullet(f"Symlink target `{node.symlink_target}` does not exist")
        if node.index == 0:
            return out

        if node.is_symlink:
            heading = f"Dangling symlink `{node.name}` in parent directory:"
        else:
            heading = f"Missing `{node.name}` from parent directory:"
        out += bullet([heading, *self._tree(node)])
        parent = self._nodes[node.index - 1]
        if parent.raw_permissions.write == Access.DENIED:
            out += bullet(_NO_WRITE_NOTE)
        return out

    def _loop(self, node: AncestorNode, display: str) -> list[str]:
        detail = node.error or f"more than {self._report.max_symlink_hops} hops without resolving"
        out = [f"cannot access `{display}`"]
        out += bullet(f"Symlink loop suspected at `{node.path}` ({detail})")
        if node.index > 0:
            out += bullet(self._tree(node))
        return out

    def _indeterminate(self, node: AncestorNode, display: str) -> list[str]:
        out = [f"cannot access `{display}`"]
        out += bullet(
            f"Cannot determine whether `{node.path}` exists: {node.error or 'unknown error'}"
        )
        if node.index > 0:
            out += bullet(self._tree(node))
        return out

    # -- Trees and annotations -------------------------------------------------

    def _tree(self, child: AncestorNode) -> list[str]:
        """One-level tree of the child's parent directory."""
        parent = self._nodes[child.index - 1]
        suffix = self._permissions_suffix(parent)
        out = [f"`{parent.path}` {suffix}" if suffix else f"`{parent.path}`"]

        listing = self._report.listing
        if listing is not None and listing.path != parent.path:
            listing = None

        annotation = self._annotation(child)
        entries = listing.entries if listing is not None else ()
        items: list[str] = []
        for name in entries:
            entry = f"`{name}`"
            if name == child.name and annotation:
                entry = f"{entry} {annotation}"
            items.append(entry)
        if child.name not in entries and (child.exists or annotation):
            items.append(f"`{child.name}` {annotation}" if annotation else f"`{child.name}`")
        if listing is not None and listing.truncated:
            items.append(f"… and {listing.truncated} more")

        if listing is None:
            out.append("   (not listed)")
        elif listing.error:
            out.append(f"   (cannot list: {listing.error})")

        if not items:
            if listing is not None and not listing.error:
                out.append("   └── (empty)")
            return out

        for position, item in enumerate(items):
            branch = "└──" if position == len(items) - 1 else "├──"
            out.append(f"  {branch} {item}")
        return out

    def _annotation(self, node: AncestorNode) -> str | None:
        if node.exists:
            label = node.resolved_type.value
            if node.is_symlink:
                label = f"symlink to {label}"
            suffix = self._permissions_suffix(node)
            return f"({label}: {suffix})" if suffix else f"({label})"
        if self._is_loop(node):
            return "(symlink loop)"
        if node.is_symlink and node.resolved_type == NodeType.MISSING:
            return "(dangling symlink)"
        if node.node_type == NodeType.UNKNOWN:
            return "(unknown)"
        return None

    def _permissions_suffix(self, node: AncestorNode) -> str:
        """Permission text, or "" when everything is granted and reachable."""
        if node.reachable and node.raw_permissions.all_granted:
            return ""
        text = format_permissions(node.raw_permissions, self._glyphs)
        if node.blocked_by is not None:
            blocker = self._nodes[node.blocked_by]
            if blocker.raw_permissions.execute == Access.DENIED:
                text += f"; unreachable, `{blocker.path}` lacks execute"
            else:
                text += f"; unreachable, execute on `{blocker.path}` is unknown"
        return text

    def _is_loop(self, node: AncestorNode) -> bool:
        report = self._report
        return (
            report.classification == Classification.SYMLINK_LOOP_SUSPECTED
            and report.blocking_index == node.index
        )
