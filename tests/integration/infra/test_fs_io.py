from __future__ import annotations

"""
Integration tests for FileSystem Infrastructure.

Validates data directory resolution, path normalization and trace reading.
"""

import logging
import os
from pathlib import Path
from unittest.mock import patch

import pytest

from tracetree.infra.fs import get_user_data_dir, normalize_path, read_trace_lines


def test_get_user_data_dir_windows() -> None:
    mock_appdata = "C:/Users/Test/AppData/Local"
    with patch("os.name", "nt"):
        with patch.dict(os.environ, {"LOCALAPPDATA": mock_appdata}):
            with patch("os.makedirs"):
                path = get_user_data_dir()
                assert "TraceTree" in path


def test_get_user_data_dir_unix() -> None:
    with patch("os.name", "posix"):
        with patch("os.path.expanduser", return_value="/home/testuser"):
            with patch("os.makedirs"):
                path = get_user_data_dir()
                assert path.replace("\\", "/").endswith("/home/testuser/.tracetree")


def test_normalize_path_expansion() -> None:
    with patch.dict(os.environ, {"TEST_VAR": "my_folder"}):
        result = normalize_path("$TEST_VAR/trace.txt", fallback=".")
        assert result == os.path.abspath("my_folder/trace.txt")


def test_normalize_path_fallback() -> None:
    assert normalize_path("   ", fallback="input.txt") == os.path.abspath("input.txt")
    assert normalize_path(None, fallback="input.txt") == os.path.abspath("input.txt")


def test_read_trace_lines_strips_whitespace(tmp_path: Path) -> None:
    trace = tmp_path / "trace.txt"
    trace.write_text("$ cd /\r\n  dir a  \n10 b\n", encoding="utf-8")

    assert read_trace_lines(str(trace)) == ["$ cd /", "dir a", "10 b"]


def test_read_trace_lines_missing_file(tmp_path: Path) -> None:
    with pytest.raises(OSError):
        read_trace_lines(str(tmp_path / "missing.txt"))


def test_read_trace_lines_replaces_invalid_utf8(tmp_path: Path, caplog) -> None:
    trace = tmp_path / "trace.txt"
    trace.write_bytes(b"$ ls\n12 bad\xffname\n")

    with caplog.at_level(logging.DEBUG, logger="tracetree.infra.fs"):
        lines = read_trace_lines(str(trace))

    assert lines == ["$ ls", "12 bad\ufffdname"]
    assert "Invalid UTF-8 replaced on 1 line(s)" in caplog.text
