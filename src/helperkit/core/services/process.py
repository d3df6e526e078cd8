from __future__ import annotations

"""
External Process Execution Service.

Wraps subprocess spawning for two use cases: shell commands whose output is
captured (optionally echoed live), and direct process invocations whose
output is streamed chunk by chunk to caller-supplied sinks. Each captured
pipe is drained by its own thread so a chatty child cannot block on a full
pipe buffer.
"""

import logging
import subprocess
import sys
import threading
from typing import IO, Any, Callable, Dict, List, Optional, Sequence, Tuple

from helperkit.domain.exec_models import ExecError, ExecResult, ProcessFailedError

logger = logging.getLogger(__name__)

OutputSink = Callable[[str], None]

_POLL_INTERVAL = 0.05


# ==============================================================================
# PUBLIC API
# ==============================================================================

def exec_command(
        command: str,
        resolve_with_errors: bool = False,
        inherit: bool = False,
        **options: Any,
) -> ExecResult:
    """
    Run a command through the system shell and capture its output.

    Args:
        command: Shell command line.
        resolve_with_errors: Return the failed result instead of raising.
        inherit: Echo output live to this process' stdout/stderr as well.
        **options: Extra keyword arguments for subprocess.Popen (cwd, env...).

    Returns:
        ExecResult: Captured stdout/stderr and, on failure, the error.

    Raises:
        ExecError: If the command exits non-zero and resolve_with_errors is False.
    """
    out_chunks: List[str] = []
    err_chunks: List[str] = []

    out_sink = _tee(out_chunks, _write_stdout if inherit else None)
    err_sink = _tee(err_chunks, _write_stderr if inherit else None)

    logger.debug(f"Executing shell command: {command}")
    with subprocess.Popen(
            command,
            shell=True,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            **options,
    ) as proc:
        pumps = _start_pumps(proc, out_sink, err_sink)
        returncode = proc.wait()
        _join(pumps)

    stdout = "".join(out_chunks)
    stderr = "".join(err_chunks)

    if returncode == 0:
        return ExecResult(stdout=stdout, stderr=stderr)

    error = subprocess.CalledProcessError(returncode, command, output=stdout, stderr=stderr)
    result = ExecResult(stdout=stdout, stderr=stderr, error=error)
    logger.debug(f"Shell command exited with {returncode}: {command}")

    if resolve_with_errors:
        return result
    raise ExecError(result)


def run_process(
        command: str,
        args: Optional[Sequence[str]] = None,
        options: Optional[Dict[str, Any]] = None,
        on_stdout: Optional[OutputSink] = None,
        on_stderr: Optional[OutputSink] = None,
        cancel_event: Optional[threading.Event] = None,
) -> int:
    """
    Spawn a process without a shell and stream its output.

    Both streams default to this process' stdout.

    Args:
        command: Executable name or path.
        args: Arguments passed to the executable.
        options: Extra keyword arguments for subprocess.Popen (cwd, env...).
        on_stdout: Receives each decoded chunk of standard output.
        on_stderr: Receives each decoded chunk of standard error.
        cancel_event: When set, the child is killed and the call returns 0.

    Returns:
        int: 0 when the process succeeded or was cancelled.

    Raises:
        ProcessFailedError: With the child's exit code when it exits non-zero,
                            or with exit code 1 when it cannot be spawned.
    """
    argv = [command, *(args or [])]

    logger.debug(f"Spawning process: {argv}")
    try:
        proc = subprocess.Popen(
            argv,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            **(options or {}),
        )
    except OSError as e:
        raise ProcessFailedError(1, command) from e

    with proc:
        pumps = _start_pumps(proc, on_stdout or _write_stdout, on_stderr or _write_stdout)
        returncode, cancelled = _wait(proc, cancel_event)
        _join(pumps)

    if cancelled:
        logger.debug(f"Process cancelled: {command}")
        return 0

    if returncode != 0:
        raise ProcessFailedError(returncode, command)
    return 0


# ==============================================================================
# PRIVATE HELPERS
# ==============================================================================

def _wait(proc: subprocess.Popen, cancel_event: Optional[threading.Event]) -> Tuple[int, bool]:
    """Wait for the child, killing it if the cancel event fires first."""
    if cancel_event is None:
        return proc.wait(), False

    while proc.poll() is None:
        if cancel_event.wait(_POLL_INTERVAL):
            proc.kill()
            return proc.wait(), True
    return proc.returncode, False


def _start_pumps(proc: subprocess.Popen, out_sink: OutputSink, err_sink: OutputSink) -> List[threading.Thread]:
    pumps = [
        threading.Thread(target=_pump, args=(proc.stdout, out_sink), daemon=True),
        threading.Thread(target=_pump, args=(proc.stderr, err_sink), daemon=True),
    ]
    for t in pumps:
        t.start()
    return pumps


def _join(pumps: List[threading.Thread]) -> None:
    for t in pumps:
        t.join()


def _pump(stream: Optional[IO[bytes]], sink: OutputSink) -> None:
    """Forward every line of a pipe to a sink until EOF."""
    if stream is None:
        return
    for raw in iter(stream.readline, b""):
        sink(raw.decode("utf-8", errors="replace"))


def _tee(buffer: List[str], echo: Optional[OutputSink]) -> OutputSink:
    def sink(chunk: str) -> None:
        buffer.append(chunk)
        if echo:
            echo(chunk)
    return sink


def _write_stdout(chunk: str) -> None:
    sys.stdout.write(chunk)
    sys.stdout.flush()


def _write_stderr(chunk: str) -> None:
    sys.stderr.write(chunk)
    sys.stderr.flush()
