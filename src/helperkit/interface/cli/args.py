from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line interface schema (global flags plus one
sub-command per helper) and translates the parsed namespace into
configuration overrides.
"""

import argparse
from typing import Any, Dict

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the helperkit CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="helperkit",
        description="Filesystem, checksum and process helpers.",
    )

    # --- Configuration and Diagnostic Tools ---
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Append log records to this file.",
    )
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the persisted configuration file.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the effective configuration as JSON and exit.",
    )

    # --- Format Selection ---
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print results as JSON.",
    )

    sub = p.add_subparsers(dest="command", metavar="COMMAND")

    ls = sub.add_parser("ls", help="List every file below a directory, recursively.")
    ls.add_argument("root", help="Directory to walk.")
    ls.add_argument(
        "--cwd",
        dest="cwd_prefix",
        default=None,
        help="Leading directory stripped from every listed path.",
    )

    du = sub.add_parser("du", help="Print the total size in bytes of a directory.")
    du.add_argument("root", help="Directory to measure.")

    cs = sub.add_parser("checksum", help="Print the hex digest of a file.")
    cs.add_argument("path", help="File to digest.")
    cs.add_argument(
        "--algorithm",
        dest="hash_algorithm",
        default=None,
        help="Hash algorithm (default from configuration, 'sha1').",
    )

    ex = sub.add_parser("exec", help="Run a program, streaming its output.")
    ex.add_argument("program", help="Executable to run.")
    ex.add_argument("program_args", nargs=argparse.REMAINDER, help="Arguments for the program.")

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into configuration overrides.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset; None means 'not set'.
    """
    overrides: Dict[str, Any] = {}

    overrides["log_level"] = "DEBUG" if args.debug else None
    overrides["log_file"] = args.log_file
    overrides["hash_algorithm"] = getattr(args, "hash_algorithm", None)

    return overrides
