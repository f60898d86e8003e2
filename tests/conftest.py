"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest
from fstools.filesystem.context import FilesystemContext
from fstools.filesystem.normalizer import PathNormalizer


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path_factory: pytest.TempPathFactory) -> Iterator[Path]:
    """Point XDG_CONFIG_HOME at an empty directory for every test."""
    config_home = tmp_path_factory.mktemp("xdg-config")
    with patch.dict(os.environ, {"XDG_CONFIG_HOME": str(config_home)}):
        yield config_home


@pytest.fixture
def context() -> FilesystemContext:
    """Filesystem context over the local filesystem with "/" separators."""
    return FilesystemContext(normalizer=PathNormalizer(separator="/"))


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """Directory tree used by scanner and operator tests.

    Layout::

        root/
            a.txt
            b.txt
            .hidden
            notes.txt~
            sub/
                c.txt
                deep/
                    d.txt
            CVS/
                e.txt
    """
    root = tmp_path / "root"
    (root / "sub" / "deep").mkdir(parents=True)
    (root / "CVS").mkdir()
    (root / "a.txt").write_text("a")
    (root / "b.txt").write_text("b")
    (root / ".hidden").write_text("hidden")
    (root / "notes.txt~").write_text("backup")
    (root / "sub" / "c.txt").write_text("c")
    (root / "sub" / "deep" / "d.txt").write_text("d")
    (root / "CVS" / "e.txt").write_text("e")
    return root
