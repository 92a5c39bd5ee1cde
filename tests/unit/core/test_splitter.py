"""Unit tests for lexical path splitting."""

import pytest
from pathfacts.core.splitter import split_path
from pathfacts.models.path import PathFlavor


class TestSplitPosix:
    """Tests for POSIX path splitting."""

    def test_absolute(self) -> None:
        """An absolute path yields the root and its segments."""
        components = split_path("/srv/app/config.toml")
        assert components.root == "/"
        assert components.segments == ("srv", "app", "config.toml")
        assert not components.relative

    def test_root_only(self) -> None:
        """The root alone has no segments."""
        components = split_path("/")
        assert components.root == "/"
        assert components.segments == ()
        assert len(components) == 1

    def test_collapses_separators(self) -> None:
        """Repeated and trailing separators are collapsed."""
        assert split_path("//srv///app/").segments == ("srv", "app")

    def test_keeps_dot_and_dot_dot(self) -> None:
        """'.' and '..' are kept verbatim."""
        assert split_path("/srv/./app/../x").segments == ("srv", ".", "app", "..", "x")

    def test_empty_path(self) -> None:
        """The empty string splits into nothing."""
        components = split_path("")
        assert components.is_empty
        assert components.segments == ()
        assert components.relative

    def test_relative_without_cwd(self) -> None:
        """A relative path without a cwd stays rootless."""
        components = split_path("a/b")
        assert components.root == ""
        assert components.segments == ("a", "b")
        assert components.relative

    def test_relative_anchored_at_cwd(self) -> None:
        """A relative path is anchored at an absolute cwd."""
        components = split_path("app/config.toml", "/srv")
        assert components.root == "/"
        assert components.segments == ("srv", "app", "config.toml")
        assert components.relative
        assert components.raw == "app/config.toml"

    def test_relative_cwd_is_ignored(self) -> None:
        """A relative cwd cannot anchor anything."""
        components = split_path("a", "not/absolute")
        assert components.root == ""
        assert components.segments == ("a",)

    def test_absolute_ignores_cwd(self) -> None:
        """An absolute path is never re-anchored."""
        assert split_path("/etc", "/srv").segments == ("etc",)

    @pytest.mark.parametrize("raw", ["/a/b", "a//b/", "/", "..", "x/./y"])
    def test_idempotent(self, raw: str) -> None:
        """Splitting the same input twice gives equal results."""
        assert split_path(raw, "/cwd") == split_path(raw, "/cwd")


class TestSplitWindows:
    """Tests for Windows path splitting."""

    def test_drive_absolute(self) -> None:
        """A rooted drive path keeps the drive and backslash as its root."""
        components = split_path("C:\\Users\\me\\file.txt", flavor=PathFlavor.WINDOWS)
        assert components.root == "C:\\"
        assert components.segments == ("Users", "me", "file.txt")
        assert not components.relative
        assert components.prefix(3) == "C:\\Users\\me\\file.txt"

    def test_forward_slashes(self) -> None:
        """Forward slashes are accepted as separators."""
        components = split_path("C:/Users/me", flavor=PathFlavor.WINDOWS)
        assert components.root == "C:\\"
        assert components.segments == ("Users", "me")

    def test_unc(self) -> None:
        """UNC shares become the root."""
        components = split_path("\\\\server\\share\\dir\\f.txt", flavor=PathFlavor.WINDOWS)
        assert components.root == "\\\\server\\share\\"
        assert components.segments == ("dir", "f.txt")

    def test_drive_relative(self) -> None:
        """'C:x' is relative to the drive's current directory."""
        components = split_path("C:x", flavor=PathFlavor.WINDOWS)
        assert components.root == "C:"
        assert components.relative

    def test_drive_relative_anchored_on_same_drive(self) -> None:
        """A drive-relative path is anchored at a cwd on the same drive."""
        components = split_path("C:x", "C:\\work", flavor=PathFlavor.WINDOWS)
        assert components.root == "C:\\"
        assert components.segments == ("work", "x")

    def test_drive_relative_other_drive(self) -> None:
        """A cwd on another drive does not anchor the path."""
        components = split_path("D:x", "C:\\work", flavor=PathFlavor.WINDOWS)
        assert components.root == "D:"
        assert components.segments == ("x",)

    def test_plain_relative(self) -> None:
        """A plain relative path is anchored at the cwd."""
        components = split_path("x\\y", "C:\\work", flavor=PathFlavor.WINDOWS)
        assert components.prefix(3) == "C:\\work\\x\\y"
