from __future__ import annotations

"""
Exec namespace.

External process helpers: shell commands with captured output, and direct
process invocations with streamed output.
"""

from helperkit.core.services.process import exec_command, run_process
from helperkit.domain.exec_models import ExecError, ExecResult, ProcessFailedError

__all__ = [
    "ExecError",
    "ExecResult",
    "ProcessFailedError",
    "exec_command",
    "run_process",
]
