from __future__ import annotations

"""
Module-Tagged Logger Facade.

Gives each source module a logger named after its file, with variadic
methods that join heterogeneous pieces into a single message. Containers
are rendered as indented JSON so structured values stay readable in the
console and in the file sink.
"""

import json
import logging
import re
import traceback
from typing import Any

from helperkit.infra.logging.config import TRACE

_PATH_SEPARATORS = re.compile(r"[\\/]")
_SOURCE_SUFFIX = re.compile(r"\.pyc?$")


def represent(value: Any) -> str:
    """
    Render a single message piece.

    Args:
        value: Any object passed to a logging method.

    Returns:
        str: JSON for dicts and lists, 'null' for None, str() otherwise.
    """
    if isinstance(value, (dict, list, tuple)):
        return json.dumps(value, indent=4, ensure_ascii=False, default=str)
    if value is None:
        return "null"
    return str(value)


def module_name(module: str) -> str:
    """
    Keep the last path component of a module path or file name.

    A trailing '.py'/'.pyc' is dropped so that a tag taken from __file__ does
    not create a dotted logger hierarchy ('walker.py' under 'walker').
    """
    return _SOURCE_SUFFIX.sub("", _PATH_SEPARATORS.split(module)[-1])


class ModuleLogger:
    """Logger bound to a module name, accepting any number of pieces."""

    def __init__(self, module: str) -> None:
        self.name = module_name(module)
        self._logger = logging.getLogger(self.name)

    def trace(self, *pieces: Any) -> None:
        self._log(TRACE, pieces)

    def info(self, *pieces: Any) -> None:
        self._log(logging.INFO, pieces)

    def warn(self, *pieces: Any) -> None:
        self._log(logging.WARNING, pieces)

    def error(self, *pieces: Any) -> None:
        self._log(logging.ERROR, pieces)

    def error_object(self, error: BaseException, stack_trace: bool = False) -> None:
        """
        Log an exception as a single ERROR record.

        Args:
            error: The exception to describe.
            stack_trace: Append the formatted traceback to the message.
        """
        if stack_trace:
            message = "".join(traceback.format_exception(type(error), error, error.__traceback__)).rstrip()
        else:
            message = f"{type(error).__name__}: {error}"
        self._logger.log(logging.ERROR, message)

    def _log(self, level: int, pieces: tuple) -> None:
        if self._logger.isEnabledFor(level):
            self._logger.log(level, " ".join(represent(p) for p in pieces))
