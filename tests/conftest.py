from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

Makes the 'src' directory importable and provides the shared trace and
configuration fixtures used across unit and integration tests.
"""

import os
import sys
from typing import Any, Dict, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)


EXAMPLE_TRACE: List[str] = [
    "$ cd /",
    "$ ls",
    "dir a",
    "14848514 b.txt",
    "8504156 c.dat",
    "dir d",
    "$ cd a",
    "$ ls",
    "dir e",
    "29116 f",
    "2557 g",
    "62596 h.lst",
    "$ cd e",
    "$ ls",
    "584 i",
    "$ cd ..",
    "$ cd ..",
    "$ cd d",
    "$ ls",
    "4060174 j",
    "8033020 d.log",
    "5626152 d.ext",
    "7214296 k",
]


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def example_trace() -> List[str]:
    """Return the canonical 23-line command trace."""
    return list(EXAMPLE_TRACE)


@pytest.fixture
def example_trace_file(tmp_path) -> str:
    """Write the canonical trace to disk and return its path."""
    path = tmp_path / "input.txt"
    path.write_text("\n".join(EXAMPLE_TRACE) + "\n", encoding="utf-8")
    return str(path)


@pytest.fixture
def mock_config_dict(example_trace_file) -> Dict[str, Any]:
    """
    Return a valid, complete configuration dictionary pointing at the
    canonical trace file.
    """
    return {
        "input_path": example_trace_file,
        "strict_parsing": False,
        "query": "small-sum",
        "size_limit": 100000,
        "disk_capacity": 70000000,
        "required_free": 30000000,
        "print_tree": False,
    }


DEEP_LEVELS: int = 2000


@pytest.fixture
def deep_trace() -> List[str]:
    """
    Return a trace that nests DEEP_LEVELS directories named 'a' below the
    root, well past the default recursion limit, with one 1-byte file 'f'
    at the bottom.
    """
    return ["$ cd /"] + ["$ ls", "dir a", "$ cd a"] * DEEP_LEVELS + ["$ ls", "1 f"]


@pytest.fixture
def deep_tree():
    """Build the tree described by deep_trace directly, innermost first."""
    from tracetree.domain.tree_models import DirectoryNode, FileNode

    node = DirectoryNode("a", (FileNode("f", 1),))
    for _ in range(DEEP_LEVELS - 1):
        node = DirectoryNode("a", (node,))
    return DirectoryNode("/", (node,))
