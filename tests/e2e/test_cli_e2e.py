from __future__ import annotations

"""
End-to-End (E2E) CLI Tests.

Invokes the entry point script via subprocess and checks exit codes, stdout
answers and stderr diagnostics. HOME is redirected to a temporary directory
so no persisted configuration leaks into the runs.
"""

import json
import os
import subprocess
import sys
from pathlib import Path
from typing import List

PROJECT_ROOT = Path(__file__).resolve().parent.parent.parent
SRC_DIR = PROJECT_ROOT / "src"
ENTRY_POINT = SRC_DIR / "tracetree" / "main.py"


def run_cli(args: List[str], home: Path) -> subprocess.CompletedProcess[str]:
    """
    Execute the CLI in a separate process.

    Args:
        args: Command line arguments (excluding interpreter and script path).
        home: Directory used as the user's home for config resolution.

    Returns:
        subprocess.CompletedProcess: returncode, stdout and stderr.
    """
    env = os.environ.copy()
    env["PYTHONPATH"] = str(SRC_DIR) + os.pathsep + env.get("PYTHONPATH", "")
    env["HOME"] = str(home)
    env["USERPROFILE"] = str(home)
    env["LOCALAPPDATA"] = str(home)
    env["PYTHONIOENCODING"] = "utf-8"

    cmd = [sys.executable, str(ENTRY_POINT)] + args

    return subprocess.run(
        cmd,
        env=env,
        capture_output=True,
        text=True,
        encoding="utf-8",
    )


def test_cli_part1(tmp_path: Path, example_trace_file: str) -> None:
    result = run_cli(["-i", example_trace_file, "--part", "1"], tmp_path)

    assert result.returncode == 0, f"CLI failed with stderr: {result.stderr}"
    assert result.stdout.strip() == "95437"


def test_cli_part2(tmp_path: Path, example_trace_file: str) -> None:
    result = run_cli(["-i", example_trace_file, "--query", "smallest-dir"], tmp_path)

    assert result.returncode == 0, f"CLI failed with stderr: {result.stderr}"
    assert result.stdout.strip() == "24933642"


def test_cli_print_tree(tmp_path: Path, example_trace_file: str) -> None:
    result = run_cli(["-i", example_trace_file, "--print-tree"], tmp_path)
    lines = result.stdout.strip().splitlines()

    assert result.returncode == 0
    assert lines[0] == "/ (dir, size=48381165)"
    assert lines[-1] == "95437"


def test_cli_json_output(tmp_path: Path, example_trace_file: str) -> None:
    result = run_cli(["-i", example_trace_file, "--part", "2", "--json"], tmp_path)
    data = json.loads(result.stdout)

    assert data["ok"] is True
    assert data["answer"] == 24933642
    assert data["total_size"] == 48381165


def test_cli_handles_missing_input(tmp_path: Path) -> None:
    result = run_cli(["-i", str(tmp_path / "missing.txt")], tmp_path)

    assert result.returncode == 2
    assert "does not exist" in result.stderr


def test_cli_infeasible_query_fails(tmp_path: Path, example_trace_file: str) -> None:
    result = run_cli(
        ["-i", example_trace_file, "--part", "2", "--capacity", "0", "--required-free", "1"],
        tmp_path,
    )

    assert result.returncode == 1
    assert "No directory" in result.stderr


def test_cli_strict_mode(tmp_path: Path) -> None:
    trace = tmp_path / "bad.txt"
    trace.write_text("$ cd /\nnot a valid line\n", encoding="utf-8")

    lenient = run_cli(["-i", str(trace)], tmp_path)
    strict = run_cli(["-i", str(trace), "--strict"], tmp_path)

    assert lenient.returncode == 0
    assert lenient.stdout.strip() == "0"
    assert strict.returncode == 1
    assert "line 2" in strict.stderr


def test_cli_save_and_dump_config(tmp_path: Path, example_trace_file: str) -> None:
    saved = run_cli(["-i", example_trace_file, "--size-limit", "600", "--save-config", "--dump-config"], tmp_path)
    assert saved.returncode == 0
    assert json.loads(saved.stdout)["size_limit"] == 600

    # Persisted settings are picked up on the next run
    reused = run_cli(["-i", example_trace_file], tmp_path)
    assert reused.stdout.strip() == "584"

    # ...unless defaults are forced
    fresh = run_cli(["-i", example_trace_file, "--use-defaults"], tmp_path)
    assert fresh.stdout.strip() == "95437"
