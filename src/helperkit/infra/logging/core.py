from __future__ import annotations

"""
Logging Core Orchestrator.

Owns the explicit lifecycle of the logging subsystem: configure_logging()
opens the sinks described by a LoggingConfig, shutdown_logging() flushes and
closes them. Sinks are fed through a Queue so file I/O never runs on the
caller's thread.
"""

import atexit
import logging
import queue
import sys
from contextlib import contextmanager
from dataclasses import replace
from logging.handlers import QueueHandler, QueueListener
from typing import Iterator, List, Optional

from helperkit.infra.logging.config import _LEVEL_MAP, LoggingConfig
from helperkit.infra.logging.handlers import (
    LevelLabelFormatter,
    _create_console_handlers,
    _create_file_handler,
    _is_our_handler,
    _tag_handler,
)

# Internal state attributes stored on the root logger
_CONFIGURED_FLAG_ATTR: str = "_helperkit_configured"
_QUEUE_LISTENER_ATTR: str = "_helperkit_queue_listener"
_CONFIG_ATTR: str = "_helperkit_config"


# ==============================================================================
# PUBLIC API
# ==============================================================================

def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
    """
    Attach the sinks described by cfg to the root logger.

    Idempotent: a second call is a no-op unless force is True, in which case
    the previous sinks are flushed, closed and replaced.

    Args:
        cfg: Structural configuration for the logging system.
        force: Re-initialize even if already configured.

    Returns:
        logging.Logger: The configured root logger.
    """
    root = logging.getLogger()

    if getattr(root, _CONFIGURED_FLAG_ATTR, False) and not force:
        return root

    shutdown_logging()

    level_int = _parse_level(cfg.level)
    root.setLevel(level_int)

    formatter = LevelLabelFormatter(cfg.fmt, cfg.datefmt, utc=cfg.utc)
    handlers_list: List[logging.Handler] = []

    if cfg.console:
        handlers_list.extend(_create_console_handlers(level_int, formatter, cfg.stream))

    fh = _create_file_handler(cfg, level_int, formatter)
    if fh:
        handlers_list.append(fh)

    setattr(root, _CONFIG_ATTR, cfg)
    setattr(root, _CONFIGURED_FLAG_ATTR, True)

    if not handlers_list:
        return root

    log_queue: queue.Queue[logging.LogRecord] = queue.Queue(-1)

    queue_handler = QueueHandler(log_queue)
    _tag_handler(queue_handler)

    listener = QueueListener(log_queue, *handlers_list, respect_handler_level=True)
    listener.start()

    root.addHandler(queue_handler)
    setattr(root, _QUEUE_LISTENER_ATTR, listener)

    return root


def shutdown_logging() -> None:
    """
    Flush and close every sink opened by configure_logging().

    Safe to call repeatedly and before any configuration.
    """
    root = logging.getLogger()

    for h in list(root.handlers):
        if _is_our_handler(h):
            root.removeHandler(h)
            h.close()

    listener: Optional[QueueListener] = getattr(root, _QUEUE_LISTENER_ATTR, None)
    if listener:
        _safe_stop_listener(listener)
        for h in listener.handlers:
            h.close()
        setattr(root, _QUEUE_LISTENER_ATTR, None)

    setattr(root, _CONFIGURED_FLAG_ATTR, False)


def current_config() -> Optional[LoggingConfig]:
    """Return the configuration of the active sinks, if any."""
    root = logging.getLogger()
    if not getattr(root, _CONFIGURED_FLAG_ATTR, False):
        return None
    return getattr(root, _CONFIG_ATTR, None)


def enable_file_logging(path: str) -> logging.Logger:
    """
    Add an append-only file sink, keeping the other active settings.

    Args:
        path: Log file path; parent directories are created on demand.

    Returns:
        logging.Logger: The re-configured root logger.
    """
    cfg = replace(current_config() or LoggingConfig(), log_file=path)
    return configure_logging(cfg, force=True)


@contextmanager
def logging_session(cfg: LoggingConfig) -> Iterator[logging.Logger]:
    """Scope the logging sinks to a with-block."""
    root = configure_logging(cfg, force=True)
    try:
        yield root
    finally:
        shutdown_logging()


def get_logger(name: str) -> logging.Logger:
    """
    Acquire a named logger instance compliant with the global configuration.

    Args:
        name: Hierarchical name for the logger (usually __name__).

    Returns:
        logging.Logger: The requested logger instance.
    """
    return logging.getLogger(name)


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _parse_level(level: str) -> int:
    """Convert a string-based logging level to its numeric constant."""
    if not level:
        return logging.INFO
    return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


def _safe_stop_listener(listener: Optional[QueueListener]) -> None:
    """
    Stop a QueueListener, tolerating listeners that were already stopped.

    Draining the queue is what flushes pending records to the sinks.
    """
    if not listener:
        return
    if getattr(listener, "_thread", None) is not None:
        listener.stop()


def _stop_at_exit() -> None:
    try:
        shutdown_logging()
    except (OSError, ValueError) as e:
        sys.stderr.write(f"WARNING: Logging shutdown incomplete: {e}\n")


atexit.register(_stop_at_exit)
