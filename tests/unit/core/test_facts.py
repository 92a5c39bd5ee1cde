"""Unit tests for the PathFacts construction API and error augmentation."""

import errno
import os
from pathlib import Path

import pytest
from pathfacts import (
    PathFacts,
    PathOperationError,
    describe_os_error,
    explain_os_errors,
    inspect_path,
)
from pathfacts.core.config import InspectionSettings
from pathfacts.core.renderer import GlyphStyle
from pathfacts.filesystem import MemoryFilesystem
from pathfacts.models.report import Classification

posix_only = pytest.mark.skipif(os.name != "posix", reason="POSIX filesystem semantics")


class TestInspectPath:
    """Tests for inspect_path."""

    def test_accepts_path_like(self, memory_fs: MemoryFilesystem) -> None:
        """str, bytes, and PathLike inputs are accepted."""
        for value in ("/srv/app", b"/srv/app", Path("/srv/app")):
            report = inspect_path(value, filesystem=memory_fs)
            assert report.path == "/srv/app"
            assert report.exists

    def test_explicit_cwd(self, memory_fs: MemoryFilesystem) -> None:
        """An explicit cwd overrides the filesystem's working directory."""
        report = inspect_path("config.toml", filesystem=memory_fs, cwd="/srv/app")
        assert report.exists
        assert report.nodes[-1].path == "/srv/app/config.toml"

    def test_settings_bound_hops(self, memory_fs: MemoryFilesystem) -> None:
        """The hop bound comes from the settings."""
        memory_fs.add_symlink("/srv/l1", "l2")
        memory_fs.add_symlink("/srv/l2", "app")
        settings = InspectionSettings(max_symlink_hops=1)
        report = inspect_path("/srv/l1", filesystem=memory_fs, settings=settings)
        assert report.classification == Classification.SYMLINK_LOOP_SUSPECTED
        assert report.max_symlink_hops == 1

    def test_nodes_are_probed(self, memory_fs: MemoryFilesystem) -> None:
        """The report carries permissions for existing nodes."""
        report = inspect_path("/srv/app", filesystem=memory_fs)
        assert report.nodes[-1].raw_permissions.all_granted


class TestPathFacts:
    """Tests for the PathFacts wrapper."""

    def test_str_renders(self, memory_fs: MemoryFilesystem) -> None:
        """str() renders the report."""
        facts = PathFacts("/srv/app/missing", filesystem=memory_fs)
        assert str(facts).startswith("does not exist `/srv/app/missing`")
        assert not facts.exists
        assert facts.path == "/srv/app/missing"

    def test_repr(self, memory_fs: MemoryFilesystem) -> None:
        """repr() names the path and classification."""
        facts = PathFacts("/srv", filesystem=memory_fs)
        assert repr(facts) == "PathFacts('/srv', classification='fully_exists')"

    def test_settings_glyphs(self, empty_fs: MemoryFilesystem) -> None:
        """Rendering uses the glyphs from the settings unless overridden."""
        empty_fs.add_dir("/ro", write=False)
        settings = InspectionSettings(glyphs=GlyphStyle.ASCII)
        facts = PathFacts("/ro/x", filesystem=empty_fs, settings=settings)
        assert "[-] write" in str(facts)
        assert "❌ write" in facts.render(glyphs=GlyphStyle.EMOJI)

    def test_to_dict(self, memory_fs: MemoryFilesystem) -> None:
        """to_dict exposes the structured report."""
        data = PathFacts("/srv/app/config.toml", filesystem=memory_fs).to_dict()
        assert data["classification"] == "fully_exists"
        assert data["nodes"][-1]["raw_permissions"]["execute"] == "denied"  # type: ignore[index]

    def test_snapshot_is_not_refreshed(self, memory_fs: MemoryFilesystem) -> None:
        """Facts describe the filesystem at construction time."""
        facts = PathFacts("/srv/app/new.txt", filesystem=memory_fs)
        memory_fs.add_file("/srv/app/new.txt")
        assert not facts.exists
        assert PathFacts("/srv/app/new.txt", filesystem=memory_fs).exists

    @posix_only
    def test_real_filesystem(self, tmp_path: Path) -> None:
        """A real missing file renders like the original tool."""
        path = tmp_path / "does_not_exist.txt"
        expected = (
            f"does not exist `{path}`\n"
            " - Missing `does_not_exist.txt` from parent directory:\n"
            f"   `{tmp_path}`\n"
            "      └── (empty)"
        )
        assert str(PathFacts(path)) == expected

    @posix_only
    def test_real_prior_path_is_file(self, tmp_path: Path) -> None:
        """A file in place of a directory is reported as the prior path."""
        (tmp_path / "a").write_text("")
        (tmp_path / "a").chmod(0o644)
        path = tmp_path / "a" / "b" / "c" / "does_not_exist.txt"
        expected = (
            f"cannot access `{path}`\n"
            " - Prior path is not a directory\n"
            f" - Prior path exists `{tmp_path}/a`\n"
            f"    - `{tmp_path}`\n"
            "        └── `a` (file: ✅ read, ✅ write, ❌ execute)"
        )
        assert str(PathFacts(path)) == expected


class TestErrorAugmentation:
    """Tests for describe_os_error and explain_os_errors."""

    def test_describe(self, memory_fs: MemoryFilesystem) -> None:
        """The reason is followed by the facts about the error's filename."""
        error = FileNotFoundError(errno.ENOENT, "No such file or directory", "/srv/app/x")
        message = describe_os_error(error, filesystem=memory_fs)
        assert message.startswith("No such file or directory: does not exist `/srv/app/x`")

    def test_describe_without_path(self) -> None:
        """Errors without a filename are returned unchanged."""
        error = OSError(errno.EIO, "Input/output error")
        assert describe_os_error(error) == str(error)

    def test_explain_wraps(self, memory_fs: MemoryFilesystem) -> None:
        """OSErrors become PathOperationError carrying the facts."""
        original = FileNotFoundError(errno.ENOENT, "No such file or directory", "/srv/app/x")
        with pytest.raises(PathOperationError) as exc_info, explain_os_errors(filesystem=memory_fs):
            raise original

        error = exc_info.value
        assert error.errno == errno.ENOENT
        assert error.filename == "/srv/app/x"
        assert error.original is original
        assert error.__cause__ is original
        assert not error.facts.exists
        assert "Missing `x` from parent directory:" in str(error)

    def test_explain_explicit_path(self, memory_fs: MemoryFilesystem) -> None:
        """An explicit path is inspected instead of the error's filename."""
        with pytest.raises(PathOperationError) as exc_info, explain_os_errors(
            "/srv/app/config.toml", filesystem=memory_fs
        ):
            raise PermissionError(errno.EACCES, "Permission denied")
        assert exc_info.value.facts.path == "/srv/app/config.toml"
        assert exc_info.value.facts.exists

    def test_explain_passes_through_without_path(self) -> None:
        """OSErrors without any path are re-raised untouched."""
        original = OSError(errno.EIO, "Input/output error")
        with pytest.raises(OSError) as exc_info, explain_os_errors():
            raise original
        assert exc_info.value is original

    def test_explain_does_not_double_wrap(self, memory_fs: MemoryFilesystem) -> None:
        """An already explained error propagates unchanged."""
        with pytest.raises(PathOperationError) as outer, explain_os_errors(filesystem=memory_fs):
            with explain_os_errors(filesystem=memory_fs):
                raise FileNotFoundError(errno.ENOENT, "No such file or directory", "/srv/x")
        assert isinstance(outer.value.original, FileNotFoundError)

    def test_non_os_errors_untouched(self) -> None:
        """Exceptions other than OSError are not intercepted."""
        with pytest.raises(KeyError), explain_os_errors("/tmp"):
            raise KeyError("x")

    def test_errno_less_error(self, memory_fs: MemoryFilesystem) -> None:
        """Errors without an errno are still wrapped."""
        with pytest.raises(PathOperationError) as exc_info, explain_os_errors(
            "/srv", filesystem=memory_fs
        ):
            raise OSError("something odd")
        assert exc_info.value.errno is None
        assert str(exc_info.value).startswith("something odd: exists `/srv`")
