from __future__ import annotations

"""
Content Checksum Service.

Produces hexadecimal digests of in-memory data and of files. Files are
streamed in fixed-size chunks so large artifacts never load fully in memory.
"""

import hashlib
from typing import Union

DEFAULT_ALGORITHM = "sha1"
DEFAULT_CHUNK_SIZE = 65536


def get_checksum(data: Union[bytes, str], algorithm: str = DEFAULT_ALGORITHM) -> str:
    """
    Compute the hex digest of in-memory data.

    Args:
        data: Raw bytes, or text which is encoded as UTF-8.
        algorithm: Any name accepted by hashlib.new().

    Returns:
        str: Hexadecimal digest.
    """
    if isinstance(data, str):
        data = data.encode("utf-8")
    digest = hashlib.new(algorithm)
    digest.update(data)
    return digest.hexdigest()


def get_checksum_of_file(
        path: str,
        chunk_size: int = DEFAULT_CHUNK_SIZE,
        algorithm: str = DEFAULT_ALGORITHM,
) -> str:
    """
    Stream a file through a hash function.

    Args:
        path: File to digest.
        chunk_size: Number of bytes read per iteration.
        algorithm: Any name accepted by hashlib.new().

    Returns:
        str: Hexadecimal digest of the file content.

    Raises:
        OSError: If the file cannot be opened or read.
    """
    digest = hashlib.new(algorithm)
    with open(path, "rb") as f:
        for block in iter(lambda: f.read(chunk_size), b""):
            digest.update(block)
    return digest.hexdigest()


def is_supported_algorithm(name: str) -> bool:
    """
    Tell whether a hash algorithm can produce a fixed-length hex digest.

    Variable-length (SHAKE) algorithms are rejected because their
    hexdigest() requires an explicit length.
    """
    name = str(name).lower()
    return name in hashlib.algorithms_available and not name.startswith("shake_")
