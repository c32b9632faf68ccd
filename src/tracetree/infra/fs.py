from __future__ import annotations

"""
FileSystem Infrastructure Layer.

Provides user data directory resolution, path normalization and trace file
reading. Keeps all disk access out of the tree core.
"""

import logging
import os
from typing import List, Optional

# -----------------------------------------------------------------------------
# GLOBAL CONSTANTS
# -----------------------------------------------------------------------------

APP_DIR_NAME = "TraceTree"
UNIX_APP_DIR_NAME = ".tracetree"
REPLACEMENT_CHAR = "\ufffd"

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PATH RESOLUTION API
# -----------------------------------------------------------------------------

def get_user_data_dir() -> str:
    """
    Resolve the standard OS-specific directory for persistent application data.

    Automatically creates the hierarchy if it does not exist.
    Standards:
    - Windows: %LOCALAPPDATA%/TraceTree
    - Linux/Mac: ~/.tracetree

    Returns:
        str: Absolute path to the application data directory.
    """
    path: str = ""

    if os.name == "nt":
        base = os.environ.get("LOCALAPPDATA") or os.environ.get("APPDATA")
        if base:
            path = os.path.join(base, APP_DIR_NAME)

    if not path:
        path = os.path.join(os.path.expanduser("~"), UNIX_APP_DIR_NAME)

    try:
        os.makedirs(path, exist_ok=True)
    except OSError:
        pass

    return os.path.abspath(path)


def normalize_path(path: Optional[str], fallback: str) -> str:
    """
    Normalize a path string into an absolute filesystem path.

    Handles environment variable expansion ($VAR/%VAR%) and user home
    shortcuts (~/). Reverts to fallback if the input is empty.

    Args:
        path: Raw input path string.
        fallback: Default path to use if the input is empty.

    Returns:
        str: Normalized absolute path.
    """
    p = (path or "").strip()
    if not p:
        p = fallback
    return os.path.abspath(os.path.expandvars(os.path.expanduser(p)))

# -----------------------------------------------------------------------------
# TRACE INPUT API
# -----------------------------------------------------------------------------

def read_trace_lines(path: str) -> List[str]:
    """
    Read a trace file and return its lines trimmed of surrounding whitespace.

    The file is decoded as UTF-8. Undecodable bytes are replaced with U+FFFD
    rather than failing the read, so a stray byte in a file name still yields
    a usable entry. Replacements are reported at DEBUG level.

    Args:
        path: Trace file location.

    Returns:
        List[str]: One entry per line, in file order.

    Raises:
        OSError: If the file cannot be read.
    """
    with open(path, "r", encoding="utf-8", errors="replace") as f:
        lines = [line.strip() for line in f]

    replaced = [i for i, line in enumerate(lines, start=1) if REPLACEMENT_CHAR in line]
    if replaced:
        logger.debug(f"Invalid UTF-8 replaced on {len(replaced)} line(s) of {path}: {replaced[:10]}")
    return lines
