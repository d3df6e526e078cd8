from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Verifies the application's external behavior by invoking the entry point
script via subprocess. These tests validate argument parsing, exit codes
and stream output (stdout/stderr).
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List, Optional

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "helperkit" / "main.py"

HELLO_SHA1 = "aaf4c61ddcc5e8a2dabede0f3b482cd9aea9434d"


def run_cli(
        args: List[str],
        cwd: Optional[Path] = None,
        home: Optional[Path] = None,
) -> subprocess.CompletedProcess[str]:
    """
    Helper to execute the CLI in a separate process.

    Injects the 'src' directory into PYTHONPATH so the package is resolvable
    without being installed. The persisted configuration is ignored unless
    a home directory holding one is given.

    Args:
        args: Command line arguments (excluding 'python' and script path).
        cwd: Optional working directory for the subprocess.
        home: Optional user home whose data directory holds a config.json.

    Returns:
        subprocess.CompletedProcess: returncode, stdout and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")

    cmd = [sys.executable, str(ENTRY_POINT)]
    if home is None:
        cmd.append("--use-defaults")
    else:
        env["HOME"] = str(home)
        env["LOCALAPPDATA"] = str(home)
    cmd += args

    return subprocess.run(
        cmd,
        cwd=cwd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_ls_lists_every_file(sample_tree: Path, sample_tree_files) -> None:
    result = run_cli(["ls", str(sample_tree)])

    assert result.returncode == 0, result.stderr
    assert set(result.stdout.splitlines()) == sample_tree_files


def test_ls_strips_prefix_as_json(sample_tree: Path) -> None:
    result = run_cli(["--json", "ls", "./project", "--cwd", "project"], cwd=sample_tree.parent)

    assert result.returncode == 0, result.stderr
    listed = json.loads(result.stdout)
    assert set(listed) == {"README.md", "src/a.txt", "src/pkg/b.py", "docs/guide.md"}


def test_ls_missing_root_reports_on_stderr(tmp_path: Path) -> None:
    result = run_cli(["ls", str(tmp_path / "missing")])

    assert result.returncode == 2
    assert "missing" in result.stderr


def test_du_prints_total(sample_tree: Path) -> None:
    result = run_cli(["du", str(sample_tree)])

    assert result.returncode == 0, result.stderr
    assert result.stdout.strip() == "26"


def test_du_json(sample_tree: Path) -> None:
    result = run_cli(["--json", "du", str(sample_tree)])

    assert json.loads(result.stdout)["size"] == 26


def test_checksum(tmp_path: Path) -> None:
    target = tmp_path / "hello.txt"
    target.write_bytes(b"hello")

    result = run_cli(["checksum", str(target)])

    assert result.returncode == 0, result.stderr
    assert result.stdout.split() == [HELLO_SHA1, str(target)]


def test_checksum_json_with_algorithm(tmp_path: Path) -> None:
    target = tmp_path / "hello.txt"
    target.write_bytes(b"hello")

    result = run_cli(["--json", "checksum", str(target), "--algorithm", "SHA256"])

    data = json.loads(result.stdout)
    assert data["algorithm"] == "sha256"
    assert len(data["checksum"]) == 64


def test_exec_streams_output_and_exit_code(tmp_path: Path) -> None:
    script = tmp_path / "child.py"
    script.write_text("print('from child')\nraise SystemExit(3)\n", encoding="utf-8")

    result = run_cli(["exec", sys.executable, str(script)])

    assert result.returncode == 3
    assert "from child" in result.stdout


def test_exec_unknown_program(tmp_path: Path) -> None:
    result = run_cli(["exec", str(tmp_path / "no-such-program")])

    assert result.returncode == 1
    assert "Cannot start" in result.stderr


def test_dump_config(tmp_path: Path) -> None:
    log_file = tmp_path / "cli.log"

    result = run_cli(["--log-file", str(log_file), "--dump-config"])

    assert result.returncode == 0, result.stderr
    data = json.loads(result.stdout)
    assert data["log_file"] == str(log_file)
    assert data["log_level"] == "INFO"
    assert data["hash_algorithm"] == "sha1"


def test_no_command_prints_usage() -> None:
    result = run_cli([])

    assert result.returncode == 2
    assert "usage:" in result.stderr


def test_log_file_receives_records(tmp_path: Path) -> None:
    log_file = tmp_path / "logs" / "cli.log"

    result = run_cli(["--debug", "--log-file", str(log_file), "du", str(tmp_path)])

    assert result.returncode == 0, result.stderr
    assert "Dispatching command 'du'" in log_file.read_text(encoding="utf-8")


def _write_user_config(home: Path, config: dict) -> None:
    data_dir = home / ("helperkit" if os.name == "nt" else ".helperkit")
    data_dir.mkdir(parents=True, exist_ok=True)
    (data_dir / "config.json").write_text(json.dumps(config), encoding="utf-8")


def test_debug_logs_stay_off_stdout(sample_tree: Path) -> None:
    """Log records go to stderr so JSON results remain parseable."""
    result = run_cli(["--debug", "--json", "ls", str(sample_tree)])

    assert result.returncode == 0, result.stderr
    assert len(json.loads(result.stdout)) == 4
    assert "Dispatching command 'ls'" in result.stderr


def test_config_warnings_stay_off_stdout(tmp_path: Path, sample_tree: Path) -> None:
    home = tmp_path / "home"
    _write_user_config(home, {"chunk_size": "abc"})

    result = run_cli(["--json", "du", str(sample_tree)], home=home)

    assert result.returncode == 0, result.stderr
    assert json.loads(result.stdout)["size"] == 26
    assert "Configuration Constraint" in result.stderr


def test_prettify_json_setting_controls_output(tmp_path: Path, sample_tree: Path) -> None:
    home = tmp_path / "home"

    _write_user_config(home, {"prettify_json": False})
    compact = run_cli(["--json", "du", str(sample_tree)], home=home)
    assert compact.stdout.strip() == json.dumps({"path": str(sample_tree), "size": 26}, separators=(",", ":"))

    _write_user_config(home, {"prettify_json": True})
    pretty = run_cli(["--json", "du", str(sample_tree)], home=home)
    assert pretty.stdout.strip() == json.dumps({"path": str(sample_tree), "size": 26}, indent=4)
