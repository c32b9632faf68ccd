from __future__ import annotations

"""
Directory Size Queries.

Aggregate queries over a finished tree: the sum of all small directories and
the smallest directory whose removal frees enough disk space.
"""

import logging
from typing import Any, Callable, Dict

from tracetree.core.tree.traversal import directory_sizes
from tracetree.domain.constants import (
    DEFAULT_DISK_CAPACITY,
    DEFAULT_REQUIRED_FREE,
    DEFAULT_SIZE_LIMIT,
    PART_QUERIES,
    QUERY_SMALL_SUM,
    QUERY_SMALLEST_DIR,
)
from tracetree.domain.errors import NoSufficientDirectoryError, UnknownQueryError
from tracetree.domain.tree_models import Node

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def sum_small_directories(root: Node, limit: int = DEFAULT_SIZE_LIMIT) -> int:
    """
    Sum the sizes of every directory whose size is at most limit.

    Nested directories are counted independently, so a file may contribute
    to the sum more than once.

    Args:
        root: Finished tree.
        limit: Inclusive size threshold.

    Returns:
        int: Sum of qualifying directory sizes.
    """
    return sum(size for _, size in directory_sizes(root) if size <= limit)


def required_space(
        root: Node,
        capacity: int = DEFAULT_DISK_CAPACITY,
        free_target: int = DEFAULT_REQUIRED_FREE,
) -> int:
    """Bytes that must be deleted to reach free_target on a disk of capacity."""
    return free_target - (capacity - root.size())


def smallest_sufficient_directory(
        root: Node,
        capacity: int = DEFAULT_DISK_CAPACITY,
        free_target: int = DEFAULT_REQUIRED_FREE,
) -> int:
    """
    Find the size of the smallest directory that frees enough space.

    Args:
        root: Finished tree.
        capacity: Total disk capacity.
        free_target: Free space needed after deletion.

    Returns:
        int: Size of the smallest directory with size >= required space.

    Raises:
        NoSufficientDirectoryError: If no directory is large enough.
    """
    required = required_space(root, capacity, free_target)
    logger.debug(f"Required space to free: {required}")

    candidates = [size for _, size in directory_sizes(root) if size >= required]
    if not candidates:
        raise NoSufficientDirectoryError(required)
    return min(candidates)


def run_named_query(name: str, root: Node, cfg: Dict[str, Any]) -> int:
    """
    Dispatch a query by name, pulling its thresholds from cfg.

    Args:
        name: Registered query name, or a part number ('1', '2').
        root: Finished tree.
        cfg: Configuration holding size_limit, disk_capacity, required_free.

    Returns:
        int: The query answer.

    Raises:
        UnknownQueryError: If the name is not registered.
    """
    key = resolve_query_name(name)
    return QUERIES[key](root, cfg)


def resolve_query_name(name: str) -> str:
    """Normalize a query name or part number to its registered name."""
    value = str(name).strip().lower()
    if value.isdigit() and int(value) in PART_QUERIES:
        return PART_QUERIES[int(value)]
    if value not in QUERIES:
        raise UnknownQueryError(name)
    return value

# -----------------------------------------------------------------------------
# QUERY REGISTRY
# -----------------------------------------------------------------------------

QUERIES: Dict[str, Callable[[Node, Dict[str, Any]], int]] = {
    QUERY_SMALL_SUM: lambda root, cfg: sum_small_directories(
        root, cfg.get("size_limit", DEFAULT_SIZE_LIMIT)
    ),
    QUERY_SMALLEST_DIR: lambda root, cfg: smallest_sufficient_directory(
        root,
        cfg.get("disk_capacity", DEFAULT_DISK_CAPACITY),
        cfg.get("required_free", DEFAULT_REQUIRED_FREE),
    ),
}
