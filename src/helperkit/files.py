from __future__ import annotations

"""
Files namespace.

Filesystem helpers: tree traversal, deep listing, sizes, checksums, and
whole-file text/JSON/CSV reading and writing.
"""

from helperkit.core.components.reader import (
    read_csv,
    read_json,
    read_lines,
    read_matching_lines,
    read_non_empty_lines,
    read_utf8_file,
    stream_file_content,
)
from helperkit.core.components.writer import write_json, write_utf8_file
from helperkit.core.services.checksum import get_checksum, get_checksum_of_file
from helperkit.core.services.walker import (
    get_file_size,
    list_all_files,
    remove_leading_directory,
    total_size,
    walk_tree,
)
from helperkit.infra.fs import exists, mkdirp

# Aliases
readdir_deep = list_all_files
get_directory_size = total_size

__all__ = [
    "exists",
    "get_checksum",
    "get_checksum_of_file",
    "get_directory_size",
    "get_file_size",
    "list_all_files",
    "mkdirp",
    "read_csv",
    "read_json",
    "read_lines",
    "read_matching_lines",
    "read_non_empty_lines",
    "read_utf8_file",
    "readdir_deep",
    "remove_leading_directory",
    "stream_file_content",
    "total_size",
    "walk_tree",
    "write_json",
    "write_utf8_file",
]
