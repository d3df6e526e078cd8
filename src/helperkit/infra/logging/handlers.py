from __future__ import annotations

"""
Logging Handlers and Low-Level Utilities.

Provides handler factories, the record formatter, and the tagging mechanism
that lets the subsystem tell its own handlers apart from handlers injected
by other libraries or by test harnesses.
"""

import logging
import os
import sys
import time
from logging.handlers import RotatingFileHandler
from typing import List, Optional, TextIO

from helperkit.infra.logging.config import _LEVEL_LABELS, LoggingConfig

# Internal attribute used to tag and identify our own handlers
_HANDLER_TAG_ATTR: str = "_helperkit_handler"


class LevelLabelFormatter(logging.Formatter):
    """Formatter printing short level labels (WARN instead of WARNING)."""

    def __init__(self, fmt: str, datefmt: str, utc: bool = True) -> None:
        super().__init__(fmt, datefmt=datefmt)
        if utc:
            self.converter = time.gmtime

    def format(self, record: logging.LogRecord) -> str:
        label = _LEVEL_LABELS.get(record.levelno)
        if label and record.levelname != label:
            # Records are shared between sinks; never mutate the original
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = label
        return super().format(record)


# ==============================================================================
# INTERNAL LOGGING UTILITIES
# ==============================================================================

def _tag_handler(handler: logging.Handler) -> None:
    """Mark a handler as managed by this package."""
    setattr(handler, _HANDLER_TAG_ATTR, True)


def _is_our_handler(handler: logging.Handler) -> bool:
    return bool(getattr(handler, _HANDLER_TAG_ATTR, False))


def _create_console_handlers(
        level_int: int,
        formatter: logging.Formatter,
        stream: Optional[TextIO] = None,
) -> List[logging.Handler]:
    """
    Build the console sinks.

    By default every record goes to stdout and errors are mirrored to stderr.
    An explicit stream receives every record and nothing is mirrored.

    Args:
        level_int: Numeric logging level.
        formatter: Pre-configured logging formatter.
        stream: Optional stream replacing stdout.

    Returns:
        List[logging.Handler]: The console handlers.
    """
    out = logging.StreamHandler(stream or sys.stdout)
    out.setLevel(level_int)
    out.setFormatter(formatter)
    _tag_handler(out)

    if stream is not None:
        return [out]

    err = logging.StreamHandler(sys.stderr)
    err.setLevel(max(level_int, logging.ERROR))
    err.setFormatter(formatter)
    _tag_handler(err)

    return [out, err]


def _create_file_handler(
        cfg: LoggingConfig,
        level_int: int,
        formatter: logging.Formatter,
) -> Optional[RotatingFileHandler]:
    """
    Initialize an append-mode file handler with robust error handling.

    Args:
        cfg: Logging configuration carrying the file path and rotation policy.
        level_int: Numeric logging level.
        formatter: Pre-configured logging formatter.

    Returns:
        Optional[RotatingFileHandler]: Configured handler or None if I/O fails.
    """
    if not cfg.log_file:
        return None
    try:
        _ensure_parent_dir(cfg.log_file)
        fh = RotatingFileHandler(
            cfg.log_file,
            mode="a",
            maxBytes=int(cfg.max_bytes),
            backupCount=int(cfg.backup_count),
            encoding="utf-8",
        )
        fh.setLevel(level_int)
        fh.setFormatter(formatter)
        _tag_handler(fh)
        return fh
    except OSError as e:
        sys.stderr.write(f"WARNING: Log file unavailable at '{cfg.log_file}': {e}\n")
        return None


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _ensure_parent_dir(path: str) -> None:
    parent = os.path.dirname(os.path.abspath(path))
    if parent and not os.path.exists(parent):
        os.makedirs(parent, exist_ok=True)
