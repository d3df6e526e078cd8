from __future__ import annotations

"""
File Reading Component.

Whole-file and line-oriented readers for text, JSON and CSV content. Every
reader opens the file in a scoped block, so the handle is released on
success and on failure alike.
"""

import csv
import json
import re
from typing import Any, Callable, Iterator, List

_LINE_BREAK = re.compile(r"\r?\n")

# -----------------------------------------------------------------------------
# WHOLE-FILE READERS
# -----------------------------------------------------------------------------

def read_utf8_file(path: str) -> str:
    """Read a whole file as UTF-8 text."""
    with open(path, "r", encoding="utf-8", newline="") as f:
        return f.read()


def read_json(path: str) -> Any:
    """
    Parse a JSON document from disk.

    Raises:
        OSError: If the file cannot be read.
        json.JSONDecodeError: If the content is not valid JSON.
    """
    return json.loads(read_utf8_file(path))

# -----------------------------------------------------------------------------
# LINE READERS
# -----------------------------------------------------------------------------

def read_lines(path: str) -> List[str]:
    """
    Split a file into lines on LF or CRLF boundaries.

    A trailing line break produces a trailing empty string.
    """
    return _LINE_BREAK.split(read_utf8_file(path))


def read_matching_lines(path: str, predicate: Callable[[str], bool]) -> List[str]:
    return [line for line in read_lines(path) if predicate(line)]


def read_non_empty_lines(path: str) -> List[str]:
    return read_matching_lines(path, bool)


def read_csv(path: str, skip: int = 0, delimiter: str = ",", quote: str = '"') -> List[List[str]]:
    """
    Parse the non-empty lines of a file as CSV rows.

    Each line is parsed independently, so quoted fields cannot span lines.

    Args:
        path: CSV file.
        skip: Number of leading non-empty lines to drop (e.g. a header).
        delimiter: Field separator.
        quote: Quote character.

    Returns:
        List[List[str]]: One list of fields per row.
    """
    lines = read_non_empty_lines(path)
    if skip:
        lines = lines[skip:]
    return [next(csv.reader([line], delimiter=delimiter, quotechar=quote)) for line in lines]

# -----------------------------------------------------------------------------
# STREAM READING OPERATIONS
# -----------------------------------------------------------------------------

def stream_file_content(file_path: str) -> Iterator[str]:
    """
    Generate a line-by-line stream of file content.

    Invalid UTF-8 sequences are replaced with U+FFFD instead of raising
    UnicodeDecodeError.

    Args:
        file_path: Path to the target file.

    Yields:
        str: Lines from the file, line terminators included.
    """
    with open(file_path, "r", encoding="utf-8", errors="replace") as f:
        for line in f:
            yield line
