from __future__ import annotations

"""
File Writing Component.

Whole-file writers for text and JSON. Files are created or truncated; the
handle is always closed before returning, including when serialization or
the write itself fails.
"""

import json
from typing import Any


def write_utf8_file(path: str, content: str) -> None:
    """Create or overwrite a file with UTF-8 text."""
    with open(path, "w", encoding="utf-8", newline="") as f:
        f.write(content)


def write_json(path: str, obj: Any, prettify: bool = False) -> None:
    """
    Serialize an object as JSON into a file.

    The document is fully serialized before the file is opened, so an
    unserializable object leaves an existing file untouched.

    Args:
        path: Target file.
        obj: JSON-serializable value.
        prettify: Indent with 4 spaces instead of the compact form.

    Raises:
        TypeError: If the object is not JSON-serializable.
        OSError: If the file cannot be written.
    """
    write_utf8_file(path, dump_json(obj, prettify))


def dump_json(obj: Any, prettify: bool = False) -> str:
    """Serialize to a JSON string, 4-space indented or compact."""
    if prettify:
        return json.dumps(obj, ensure_ascii=False, indent=4)
    return json.dumps(obj, ensure_ascii=False, separators=(",", ":"))
