from __future__ import annotations

"""
Query Domain Data Models.

Defines the result structure and factory functions used to communicate
query outcomes between the pipeline engine and the interface layer.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

# -----------------------------------------------------------------------------
# CORE DATA MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class QueryResult:
    """
    Unified result object of a complete query execution.

    Attributes:
        ok: Flag indicating success or failure.
        error: Descriptive message in case of failure.
        input_path: Trace file that was processed.
        query: Name of the query that was executed.
        answer: Integer produced by the query (None on failure).
        total_size: Size of the root directory.
        directory_count: Number of directories in the tree, root included.
        file_count: Number of files in the tree.
        tree_lines: Rendered tree, when requested.
        summary: Technical execution summary (thresholds, warnings).
    """
    ok: bool
    error: str

    input_path: str
    query: str

    answer: Optional[int] = None
    total_size: int = 0
    directory_count: int = 0
    file_count: int = 0

    tree_lines: List[str] = field(default_factory=list)
    summary: Dict[str, Any] = field(default_factory=dict)

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_error_result(
        error: str,
        cfg: Dict[str, Any],
        summary_extra: Optional[Dict[str, Any]] = None,
) -> QueryResult:
    """
    Create a failed query result instance.

    Args:
        error: Detailed error description.
        cfg: The configuration used during the failed run.
        summary_extra: Additional metadata for the summary payload.

    Returns:
        QueryResult: An immutable error result object.
    """
    return QueryResult(
        ok=False,
        error=error,
        input_path=cfg.get("input_path", ""),
        query=cfg.get("query", ""),
        summary=summary_extra or {},
    )


def create_success_result(
        cfg: Dict[str, Any],
        answer: int,
        total_size: int,
        directory_count: int,
        file_count: int,
        tree_lines: Optional[List[str]] = None,
        summary_extra: Optional[Dict[str, Any]] = None,
) -> QueryResult:
    """
    Create a successful query result instance.

    Args:
        cfg: Final configuration used during execution.
        answer: Query output.
        total_size: Size of the root directory.
        directory_count: Directories found in the tree.
        file_count: Files found in the tree.
        tree_lines: Rendered tree lines.
        summary_extra: Final execution metrics.

    Returns:
        QueryResult: An immutable success result object.
    """
    return QueryResult(
        ok=True,
        error="",
        input_path=cfg.get("input_path", ""),
        query=cfg.get("query", ""),
        answer=answer,
        total_size=total_size,
        directory_count=directory_count,
        file_count=file_count,
        tree_lines=tree_lines or [],
        summary=summary_extra or {},
    )
