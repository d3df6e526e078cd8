from __future__ import annotations

"""
Process Execution Domain Models.

Defines the result object returned by shell command execution and the
exceptions raised when a child process fails.
"""

from dataclasses import dataclass
from subprocess import CalledProcessError
from typing import Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ExecResult:
    """
    Captured outcome of a shell command.

    Attributes:
        stdout: Decoded standard output.
        stderr: Decoded standard error.
        error: The failure descriptor when the command exited non-zero.
    """
    stdout: str
    stderr: str
    error: Optional[CalledProcessError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

# -----------------------------------------------------------------------------
# EXCEPTIONS
# -----------------------------------------------------------------------------

class ExecError(RuntimeError):
    """Raised when a shell command exits with a non-zero status."""

    def __init__(self, result: ExecResult) -> None:
        self.result = result
        code = result.error.returncode if result.error else None
        super().__init__(f"Command failed with exit code {code}: {result.stderr.strip()}")


class ProcessFailedError(RuntimeError):
    """Raised when a spawned process exits non-zero or cannot be started."""

    def __init__(self, exit_code: int, command: str = "") -> None:
        self.exit_code = exit_code
        self.command = command
        super().__init__(f"Process '{command}' failed with exit code {exit_code}")
