from __future__ import annotations

"""
Command Line Interface (CLI) Application Controller.

Orchestrates the CLI lifecycle: configuration resolution (defaults,
persisted file and command-line overrides), logging bootstrap, command
dispatch and result rendering. Logging sinks are always closed before the
process exit code is returned.
"""

import argparse
import sys
from typing import Any, Dict, List, Optional

from helperkit.core.components.writer import dump_json
from helperkit.core.services.checksum import get_checksum_of_file
from helperkit.core.services.process import run_process
from helperkit.core.services.validator import validate_config
from helperkit.core.services.walker import remove_leading_directory, total_size, walk_tree
from helperkit.domain.config import get_default_config, load_config
from helperkit.domain.exec_models import ProcessFailedError
from helperkit.infra.logging import LoggingConfig, configure_logging, get_logger, shutdown_logging
from helperkit.interface.cli import args as cli_args

logger = get_logger(__name__)

# -----------------------------------------------------------------------------
# ENTRYPOINT ORCHESTRATOR
# -----------------------------------------------------------------------------

def main(argv: Optional[List[str]] = None) -> int:
    """
    Execute the main CLI application workflow.

    Args:
        argv: Optional list of command line arguments. Defaults to sys.argv.

    Returns:
        int: Process exit code (0 success, 1 failure, 2 filesystem or usage
             error, 130 interrupted, child exit code for 'exec').
    """
    parser = cli_args.build_parser()
    args = parser.parse_args(argv)

    base_conf = get_default_config() if args.use_defaults else load_config()
    raw_conf = _merge_config(base_conf, cli_args.args_to_overrides(args))
    conf, warnings = validate_config(raw_conf, strict=False)

    configure_logging(
        LoggingConfig(
            level=conf["log_level"],
            console=conf["console_logging"],
            log_file=conf["log_file"] or None,
            # stdout carries command results only
            stream=sys.stderr,
        ),
        force=True,
    )
    try:
        for w in warnings:
            logger.warning(f"Configuration Constraint: {w}")

        if args.dump_config:
            _print_json(conf, conf)
            return 0

        if not args.command:
            parser.print_help(sys.stderr)
            return 2

        logger.debug(f"Dispatching command '{args.command}'")
        return _dispatch(args, conf)
    finally:
        shutdown_logging()

# -----------------------------------------------------------------------------
# COMMAND DISPATCH
# -----------------------------------------------------------------------------

def _dispatch(args: argparse.Namespace, conf: Dict[str, Any]) -> int:
    try:
        if args.command == "ls":
            return _cmd_ls(args, conf)
        if args.command == "du":
            return _cmd_du(args, conf)
        if args.command == "checksum":
            return _cmd_checksum(args, conf)
        if args.command == "exec":
            return _cmd_exec(args)
    except KeyboardInterrupt:
        logger.warning("Interrupted by user.")
        return 130
    except OSError as e:
        logger.error(str(e))
        return 2
    except Exception as e:
        logger.critical(f"Command '{args.command}' failed: {e}", exc_info=True)
        return 1

    logger.error(f"Unknown command '{args.command}'")
    return 2


def _cmd_ls(args: argparse.Namespace, conf: Dict[str, Any]) -> int:
    paths = (
        remove_leading_directory(p, args.cwd_prefix) if args.cwd_prefix else p
        for p in walk_tree(args.root)
    )
    if args.json_output:
        _print_json(list(paths), conf)
        return 0

    for path in paths:
        print(path)
    return 0


def _cmd_du(args: argparse.Namespace, conf: Dict[str, Any]) -> int:
    size = total_size(args.root)
    if args.json_output:
        _print_json({"path": args.root, "size": size}, conf)
    else:
        print(size)
    return 0


def _cmd_checksum(args: argparse.Namespace, conf: Dict[str, Any]) -> int:
    algorithm = conf["hash_algorithm"]
    digest = get_checksum_of_file(args.path, chunk_size=conf["chunk_size"], algorithm=algorithm)
    if args.json_output:
        _print_json({"path": args.path, "algorithm": algorithm, "checksum": digest}, conf)
    else:
        print(f"{digest}  {args.path}")
    return 0


def _print_json(obj: Any, conf: Dict[str, Any]) -> None:
    print(dump_json(obj, prettify=conf["prettify_json"]))


def _cmd_exec(args: argparse.Namespace) -> int:
    try:
        return run_process(args.program, args.program_args)
    except ProcessFailedError as e:
        if e.__cause__ is not None:
            logger.error(f"Cannot start '{args.program}': {e.__cause__}")
        return e.exit_code

# -----------------------------------------------------------------------------
# CONFIGURATION MERGING
# -----------------------------------------------------------------------------

def _merge_config(base: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """
    Shallow-merge the overrides that were actually set into the base.

    Args:
        base: The primary configuration dictionary.
        overrides: New values to inject; None values are ignored.

    Returns:
        Dict[str, Any]: The merged configuration state.
    """
    out = dict(base)
    for k, v in overrides.items():
        if v is not None:
            out[k] = v
    return out
