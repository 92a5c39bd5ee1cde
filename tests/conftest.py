"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from pathlib import Path
from unittest.mock import patch

import pytest
from pathfacts.filesystem import MemoryFilesystem


@pytest.fixture
def memory_fs() -> MemoryFilesystem:
    """In-memory filesystem with /srv/app/config.toml and an empty /srv/app/logs."""
    fs = MemoryFilesystem(cwd="/srv")
    fs.add_dir("/srv/app")
    fs.add_file("/srv/app/config.toml")
    fs.add_dir("/srv/app/logs")
    return fs


@pytest.fixture
def empty_fs() -> MemoryFilesystem:
    """In-memory filesystem holding only the root directory."""
    return MemoryFilesystem()


@pytest.fixture
def config_home(tmp_path: Path):
    """Point XDG_CONFIG_HOME at a temporary directory."""
    with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(tmp_path)}):
        yield tmp_path
