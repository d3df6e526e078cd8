from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures for directory trees used across unit and e2e tests.
"""

import os
import sys
from pathlib import Path

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    Create a nested directory structure with files of known sizes.

    Structure:
    /project
      README.md          (9 bytes)
      /src
        a.txt            (5 bytes)
        /pkg
          b.py           (12 bytes)
      /empty
      /docs
        guide.md         (0 bytes)
    """
    root = tmp_path / "project"
    (root / "src" / "pkg").mkdir(parents=True)
    (root / "empty").mkdir()
    (root / "docs").mkdir()

    (root / "README.md").write_bytes(b"# Project")
    (root / "src" / "a.txt").write_bytes(b"hello")
    (root / "src" / "pkg" / "b.py").write_bytes(b"print('hi')\n")
    (root / "docs" / "guide.md").write_bytes(b"")

    return root


@pytest.fixture
def sample_tree_files(sample_tree: Path) -> set:
    """Expected '/'-separated file paths of sample_tree."""
    base = sample_tree.as_posix()
    return {
        f"{base}/README.md",
        f"{base}/src/a.txt",
        f"{base}/src/pkg/b.py",
        f"{base}/docs/guide.md",
    }
