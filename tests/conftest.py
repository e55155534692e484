"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import os
from pathlib import Path

import pytest


@pytest.fixture
def search_tree(tmp_path: Path) -> Path:
    """Directory tree ``root/{a.txt, b.log, sub/c.txt}``."""
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_text("a")
    (root / "b.log").write_text("b")
    sub = root / "sub"
    sub.mkdir()
    (sub / "c.txt").write_text("c")
    return root


@pytest.fixture
def txt_matches(search_tree: Path) -> list[str]:
    """``.txt`` paths of search_tree in depth-first, listing order."""
    by_child = {
        "a.txt": str(search_tree / "a.txt"),
        "sub": str(search_tree / "sub" / "c.txt"),
    }
    return [by_child[name] for name in os.listdir(search_tree) if name in by_child]


@pytest.fixture
def mixed_tree(tmp_path: Path) -> Path:
    """Directory holding one file, one directory and one symlink."""
    root = tmp_path / "mixed"
    root.mkdir()
    (root / "file.txt").write_text("data")
    (root / "dir").mkdir()
    (root / "link").symlink_to(root / "file.txt")
    return root
