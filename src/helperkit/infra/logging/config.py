from __future__ import annotations

"""
Logging Configuration Models.

Defines the data structures and constants required to initialize the
logging subsystem. Includes the primary configuration dataclass, the custom
TRACE severity, and the label mapping used when rendering records.
"""

import logging
from dataclasses import dataclass
from typing import Dict, Optional, TextIO

# Finer than DEBUG; used by ModuleLogger.trace()
TRACE: int = 5
logging.addLevelName(TRACE, "TRACE")

# Mapping of string identifiers to native logging constants
_LEVEL_MAP: Dict[str, int] = {
    "TRACE": TRACE,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
}

# Labels printed in place of the stdlib level names
_LEVEL_LABELS: Dict[int, str] = {
    logging.WARNING: "WARN",
}


@dataclass(frozen=True)
class LoggingConfig:
    """
    Immutable specification for the logging subsystem initialization.

    Attributes:
        level: Minimum severity level to capture.
        console: Flag to enable console output.
        stream: Console stream; None means stdout with errors mirrored to
                stderr.
        log_file: Optional path of an append-only file sink.
        max_bytes: Size per log segment before rotation; 0 disables rotation.
        backup_count: Number of rotated segments to preserve.
        fmt: Record layout shared by every sink.
        datefmt: Timestamp layout.
        utc: Render timestamps in UTC instead of local time.
    """
    level: str = "INFO"
    console: bool = True
    stream: Optional[TextIO] = None
    log_file: Optional[str] = None

    max_bytes: int = 0
    backup_count: int = 3

    fmt: str = "%(asctime)s %(levelname)s %(name)s %(message)s"
    datefmt: str = "%Y-%m-%d %H:%M:%S"
    utc: bool = True
