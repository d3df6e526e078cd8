from __future__ import annotations

"""
Unit tests for CLI Argument Parsing.

Verifies:
1. Sub-command routing and positional arguments.
2. Mapping of global flags to configuration overrides.
3. Forwarding of program arguments for 'exec'.
"""

import pytest

from helperkit.interface.cli.app import _merge_config
from helperkit.interface.cli.args import args_to_overrides, build_parser


def parse_args(arg_list):
    """Helper to simulate CLI argument parsing."""
    parser = build_parser()
    return parser.parse_args(arg_list)


def test_ls_with_prefix():
    args = parse_args(["--json", "ls", "project", "--cwd", "./project"])

    assert args.command == "ls"
    assert args.root == "project"
    assert args.cwd_prefix == "./project"
    assert args.json_output is True


def test_checksum_algorithm_maps_to_override():
    args = parse_args(["checksum", "file.bin", "--algorithm", "sha256"])

    overrides = args_to_overrides(args)

    assert args.path == "file.bin"
    assert overrides["hash_algorithm"] == "sha256"


def test_unset_flags_map_to_none():
    """Flags not given on the command line must not override the config."""
    overrides = args_to_overrides(parse_args(["du", "."]))

    assert overrides == {"log_level": None, "log_file": None, "hash_algorithm": None}


def test_debug_and_log_file_overrides():
    overrides = args_to_overrides(parse_args(["--debug", "--log-file", "run.log", "du", "."]))

    assert overrides["log_level"] == "DEBUG"
    assert overrides["log_file"] == "run.log"


def test_exec_forwards_program_arguments():
    args = parse_args(["exec", "git", "status", "--short"])

    assert args.program == "git"
    assert args.program_args == ["status", "--short"]


def test_no_command_is_allowed():
    args = parse_args(["--dump-config"])

    assert args.command is None
    assert args.dump_config is True


def test_missing_positional_exits():
    with pytest.raises(SystemExit):
        parse_args(["ls"])


def test_merge_skips_unset_overrides():
    base = {"log_level": "INFO", "log_file": "", "hash_algorithm": "sha1"}

    merged = _merge_config(base, {"log_level": "DEBUG", "log_file": None, "hash_algorithm": None})

    assert merged == {"log_level": "DEBUG", "log_file": "", "hash_algorithm": "sha1"}
    assert base["log_level"] == "INFO"
