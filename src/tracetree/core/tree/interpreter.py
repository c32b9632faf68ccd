from __future__ import annotations

"""
Command Trace Interpreter.

Folds a trace of shell-like commands ('$ cd', '$ ls') and listing lines
('dir <name>', '<size> <name>') into the immutable tree model. The fold
carries an explicit TraceState (root + cursor) from one line to the next;
there is no hidden global state.
"""

import logging
import re
from dataclasses import dataclass, field
from typing import Iterable, Optional, Tuple, Union

from tracetree.core.tree.insertion import insert_node
from tracetree.domain.constants import (
    CD_COMMAND,
    DIR_TOKEN,
    PARENT_DIR,
    PROMPT_TOKEN,
    ROOT_NAME,
)
from tracetree.domain.errors import TraceParseError
from tracetree.domain.tree_models import DirectoryNode, FileNode, make_root

logger = logging.getLogger(__name__)

_SIZE_RX = re.compile(r"[0-9]+")

# -----------------------------------------------------------------------------
# COMMAND RECORDS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class ChangeDirectory:
    """'$ cd <target>' where target may be '/', '..' or a child name."""
    target: str


@dataclass(frozen=True)
class ListDirectory:
    """'$ ls' or any other prompt line. Carries no state change."""
    raw: str


@dataclass(frozen=True)
class AddDirectory:
    name: str


@dataclass(frozen=True)
class AddFile:
    name: str
    size: int


Command = Union[ChangeDirectory, ListDirectory, AddDirectory, AddFile]

# -----------------------------------------------------------------------------
# FOLD STATE
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class TraceState:
    """
    State threaded through the trace fold.

    Attributes:
        root: Current version of the tree.
        cursor: Directory names from the root to the working directory.
    """
    root: DirectoryNode = field(default_factory=make_root)
    cursor: Tuple[str, ...] = ()

    @classmethod
    def initial(cls) -> TraceState:
        return cls()

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def parse_line(line: str) -> Optional[Command]:
    """
    Classify a single trace line.

    Args:
        line: Raw trace line. Surrounding whitespace is ignored.

    Returns:
        Optional[Command]: The recognized command, or None for lines that
        match no known form.
    """
    tokens = line.split()
    if not tokens:
        return None

    if tokens[0] == PROMPT_TOKEN:
        if len(tokens) == 3 and tokens[1] == CD_COMMAND:
            return ChangeDirectory(target=tokens[2])
        return ListDirectory(raw=line.strip())

    if len(tokens) != 2:
        return None

    first, name = tokens
    if first == DIR_TOKEN:
        return AddDirectory(name=name)
    if _SIZE_RX.fullmatch(first):
        return AddFile(name=name, size=int(first))
    return None


def apply_line(state: TraceState, line: str, *, strict: bool = False, line_number: int = 0) -> TraceState:
    """
    Process one trace line and return the next fold state.

    Args:
        state: State before the line.
        line: Raw trace line.
        strict: If True, unrecognized non-blank lines raise TraceParseError.
        line_number: 1-based position, used for diagnostics only.

    Returns:
        TraceState: State after the line.
    """
    command = parse_line(line)

    if command is None:
        if strict and line.strip():
            raise TraceParseError(line_number, line)
        if line.strip():
            logger.debug(f"Skipping unrecognized trace line {line_number}: {line!r}")
        return state

    if isinstance(command, ChangeDirectory):
        return TraceState(root=state.root, cursor=_move_cursor(state.cursor, command.target))

    if isinstance(command, AddDirectory):
        new_child = DirectoryNode(name=command.name)
    elif isinstance(command, AddFile):
        new_child = FileNode(name=command.name, size_bytes=command.size)
    else:
        return state

    new_root = insert_node(state.root, state.cursor, new_child)
    return TraceState(root=new_root, cursor=state.cursor)


def build_tree(trace: Iterable[str], *, strict: bool = False) -> DirectoryNode:
    """
    Build the directory tree described by a command trace.

    Args:
        trace: Trace lines in order.
        strict: If True, reject lines that match no known form.

    Returns:
        DirectoryNode: The root of the finished tree.

    Raises:
        TraceParseError: In strict mode, on the first unrecognized line.
    """
    state = TraceState.initial()
    count = 0
    for count, line in enumerate(trace, start=1):
        state = apply_line(state, line, strict=strict, line_number=count)

    logger.debug(f"Trace folded: {count} lines processed.")
    return state.root


def build_tree_from_text(text: str, *, strict: bool = False) -> DirectoryNode:
    """Split a newline-delimited trace blob and build its tree."""
    return build_tree(text.splitlines(), strict=strict)

# -----------------------------------------------------------------------------
# INTERNAL HELPERS
# -----------------------------------------------------------------------------

def _move_cursor(cursor: Tuple[str, ...], target: str) -> Tuple[str, ...]:
    """Resolve a 'cd' target against the current cursor."""
    if target == ROOT_NAME:
        return ()
    if target == PARENT_DIR:
        return cursor[:-1]
    return cursor + (target,)
