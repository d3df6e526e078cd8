from __future__ import annotations

"""
Logger namespace.

Module-tagged loggers and the lifecycle of the console and file sinks.
"""

from helperkit.infra.logging import (
    LoggingConfig,
    ModuleLogger,
    configure_logging,
    enable_file_logging,
    logging_session,
    shutdown_logging,
)


def create(module: str) -> ModuleLogger:
    """
    Create a logger tagged with the last path component of module.

    Args:
        module: A module path or file name, typically __file__.

    Returns:
        ModuleLogger: Logger exposing trace/info/warn/error/error_object.
    """
    return ModuleLogger(module)


configure = configure_logging
shutdown = shutdown_logging
session = logging_session

__all__ = [
    "LoggingConfig",
    "ModuleLogger",
    "configure",
    "create",
    "enable_file_logging",
    "session",
    "shutdown",
]
