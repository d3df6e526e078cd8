from __future__ import annotations

from .config import TRACE, LoggingConfig
from .core import (
    _CONFIGURED_FLAG_ATTR,
    _QUEUE_LISTENER_ATTR,
    configure_logging,
    current_config,
    enable_file_logging,
    get_logger,
    logging_session,
    shutdown_logging,
)
from .handlers import _HANDLER_TAG_ATTR
from .module_logger import ModuleLogger, represent

__all__ = [
    "TRACE",
    "LoggingConfig",
    "ModuleLogger",
    "configure_logging",
    "current_config",
    "enable_file_logging",
    "get_logger",
    "logging_session",
    "represent",
    "shutdown_logging",
]
