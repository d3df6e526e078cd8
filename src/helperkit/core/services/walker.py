from __future__ import annotations

"""
Directory Tree Traversal Service.

Provides the lazy depth-first walk over a directory tree and the operations
derived from it (deep listing and directory size). Directory handles are
scoped to the level being iterated, so abandoning a walk early releases
every handle that is still open.
"""

import logging
import os
from typing import Iterator, List, Optional

from helperkit.infra.fs import normalize_prefix, normalize_root

logger = logging.getLogger(__name__)


# ==============================================================================
# PUBLIC API (TRAVERSAL)
# ==============================================================================

def walk_tree(root: str) -> Iterator[str]:
    """
    Lazily yield every regular file below a root directory.

    Entries are visited in the order returned by the platform at each level.
    Subdirectories are fully drained before their next sibling is visited.
    Symlinks, sockets, FIFOs and devices are skipped.

    Args:
        root: Path of an existing directory.

    Yields:
        str: '/'-separated path of each file, prefixed by the normalized root.

    Raises:
        FileNotFoundError: If the root or a subdirectory does not exist.
        NotADirectoryError: If the root is not a directory.
        PermissionError: If a directory cannot be opened.
    """
    yield from _walk_level(normalize_root(root))


def list_all_files(root: str, cwd_prefix: Optional[str] = None) -> List[str]:
    """
    Materialize the walk of a tree into a list, preserving discovery order.

    Args:
        root: Path of an existing directory.
        cwd_prefix: Optional leading directory removed from every path.

    Returns:
        List[str]: File paths in depth-first discovery order.
    """
    prefix = normalize_prefix(cwd_prefix) if cwd_prefix else None
    entries: List[str] = []
    for path in walk_tree(root):
        entries.append(_strip_prefix(path, prefix) if prefix else path)

    logger.debug(f"Listed {len(entries)} files under '{root}'")
    return entries


def remove_leading_directory(path: str, directory: str) -> str:
    """
    Strip a leading directory from a '/'-separated path.

    Only a prefix made of whole path segments is removed; a path that
    contains the directory text elsewhere is returned unchanged.

    Args:
        path: File path to rewrite.
        directory: Directory prefix ('dir', './dir' or 'dir/').

    Returns:
        str: The path relative to the directory, or the original path.
    """
    return _strip_prefix(path, normalize_prefix(directory))


# ==============================================================================
# PUBLIC API (SIZES)
# ==============================================================================

def get_file_size(path: str) -> int:
    """Return the size of a single file in bytes."""
    return os.stat(path).st_size


def total_size(root: str) -> int:
    """
    Sum the size of every file below a root directory.

    Files are stat'ed one by one in discovery order. A file removed between
    discovery and stat aborts the whole computation.

    Args:
        root: Path of an existing directory.

    Returns:
        int: Total size in bytes.

    Raises:
        OSError: Any traversal or stat failure, unchanged.
    """
    size = 0
    for path in walk_tree(root):
        size += get_file_size(path)
    return size


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _walk_level(directory: str) -> Iterator[str]:
    """Yield the files of one directory level, recursing into subdirectories."""
    with os.scandir(directory) as entries:
        for entry in entries:
            path = _join(directory, entry.name)
            if entry.is_dir(follow_symlinks=False):
                yield from _walk_level(path)
            elif entry.is_file(follow_symlinks=False):
                yield path


def _join(directory: str, name: str) -> str:
    # "." and filesystem roots ("/", "C:/") must not produce "./name" or "//name"
    if directory == ".":
        return name
    if directory.endswith("/"):
        return directory + name
    return f"{directory}/{name}"


def _strip_prefix(path: str, prefix: str) -> str:
    if path.startswith(prefix):
        return path[len(prefix):]
    return path
