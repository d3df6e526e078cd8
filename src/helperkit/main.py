from __future__ import annotations

"""
Main Entry Point and Global Supervisor.

Routes execution to the CLI and installs a global exception hook so that
fatal crashes are logged and reported on stderr with a non-zero exit code.
"""

import logging
import os
import sys
import traceback
from typing import Any

# -----------------------------------------------------------------------------
# ENVIRONMENT INITIALIZATION
# -----------------------------------------------------------------------------

# Allow 'python src/helperkit/main.py' without installation
BASE_DIR = os.path.dirname(os.path.abspath(__file__))
if not getattr(sys, "frozen", False):
    SRC_DIR = os.path.dirname(BASE_DIR)
    if SRC_DIR not in sys.path:
        sys.path.insert(0, SRC_DIR)


# -----------------------------------------------------------------------------
# GLOBAL SUPERVISOR (EXCEPTION HANDLING)
# -----------------------------------------------------------------------------

def global_exception_handler(exctype: type[BaseException], value: BaseException, tb: Any) -> None:
    """
    Trap unhandled exceptions, log them and report the trace on stderr.

    Args:
        exctype: Exception class.
        value: Exception instance.
        tb: Traceback object.
    """
    stack_trace = "".join(traceback.format_exception(exctype, value, tb))

    logger = logging.getLogger("helperkit.supervisor")
    logger.critical(f"FATAL EXCEPTION DETECTED: {value}\n{stack_trace}")

    print("\n" + "=" * 80, file=sys.stderr)
    print("CRITICAL ERROR (HELPERKIT CLI)", file=sys.stderr)
    print("=" * 80, file=sys.stderr)
    print(stack_trace, file=sys.stderr)
    sys.exit(1)


# -----------------------------------------------------------------------------
# EXECUTION ROUTING
# -----------------------------------------------------------------------------

def main() -> int:
    """
    Install the supervisor and delegate to the CLI controller.

    Returns:
        int: Standard process exit code.
    """
    sys.excepthook = global_exception_handler

    from helperkit.interface.cli.app import main as cli_main
    return cli_main()


if __name__ == "__main__":
    sys.exit(main())
