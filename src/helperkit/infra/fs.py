from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides cross-platform path normalization, existence checks and directory
creation. Acts as an abstraction over the 'os' module so that the services
above it can rely on '/'-separated paths regardless of the host system.
"""

import os

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "helperkit"
UNIX_APP_DIR_NAME = ".helperkit"

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/helperkit
    - Linux/Mac: ~/.helperkit

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def to_posix(path: str) -> str:
    """Convert host separators to '/'."""
    if os.sep != "/":
        path = path.replace(os.sep, "/")
    return path


def normalize_root(path: str) -> str:
    """
    Normalize a traversal root into its '/'-separated canonical form.

    Removes './' segments and trailing separators so that joined child paths
    read 'root/name' rather than './root//name'.

    Args:
        path: Raw root path as given by the caller.

    Returns:
        str: Normalized root path.
    """
    return to_posix(os.path.normpath(path))


def normalize_prefix(prefix: str) -> str:
    """
    Normalize a leading-directory prefix for path stripping.

    Removes a leading './' and guarantees exactly one trailing '/'.

    Args:
        prefix: Directory prefix, e.g. 'project', './project' or 'project/'.

    Returns:
        str: The prefix in 'dir/' form.
    """
    prefix = to_posix(prefix)
    if prefix.startswith("./"):
        prefix = prefix[2:]
    return prefix.rstrip("/") + "/"


# -----------------------------------------------------------------------------
# FILESYSTEM PRIMITIVES
# -----------------------------------------------------------------------------

def exists(path: str) -> bool:
    """Return True when the path can be stat'ed; any stat failure is False."""
    try:
        os.stat(path)
        return True
    except (OSError, ValueError):
        return False


def mkdirp(path: str) -> None:
    """
    Create every missing segment of a '/'-separated directory path.

    A segment created concurrently by another actor is accepted; every other
    error propagates.

    Args:
        path: Target directory path.

    Raises:
        OSError: If a segment cannot be created for any reason other than
                 already existing.
    """
    buffer = ""
    for segment in to_posix(path).split("/"):
        buffer += segment + "/"
        if exists(buffer):
            continue
        try:
            os.mkdir(buffer)
        except FileExistsError:
            pass
