from __future__ import annotations

"""
Domain Constants.

Centralizes the fixed values of the trace grammar and the default
thresholds used by the directory size queries.
"""

from typing import Dict

CURRENT_CONFIG_VERSION = "1.0.0"

# -----------------------------------------------------------------------------
# TREE STRUCTURE
# -----------------------------------------------------------------------------
ROOT_NAME = "/"

# -----------------------------------------------------------------------------
# TRACE GRAMMAR
# -----------------------------------------------------------------------------
PROMPT_TOKEN = "$"
CD_COMMAND = "cd"
LS_COMMAND = "ls"
DIR_TOKEN = "dir"
PARENT_DIR = ".."

# -----------------------------------------------------------------------------
# QUERY THRESHOLDS
# -----------------------------------------------------------------------------
DEFAULT_SIZE_LIMIT = 100_000
DEFAULT_DISK_CAPACITY = 70_000_000
DEFAULT_REQUIRED_FREE = 30_000_000

QUERY_SMALL_SUM = "small-sum"
QUERY_SMALLEST_DIR = "smallest-dir"

# Puzzle part numbers accepted by the CLI as query aliases
PART_QUERIES: Dict[int, str] = {
    1: QUERY_SMALL_SUM,
    2: QUERY_SMALLEST_DIR,
}
