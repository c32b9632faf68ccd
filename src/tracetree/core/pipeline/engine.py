from __future__ import annotations

"""
Query Pipeline Engine.

Orchestrates a complete run: configuration validation, trace loading, tree
construction, query execution and result packaging. Library failures
(TraceTreeError), unreadable trace files (OSError) and RecursionError are
converted into error results instead of propagating to the interface layer.
Other exceptions are programming errors and reach the global exception hook.
"""

import logging
import os
from typing import Any, Dict, List, Optional

from tracetree.core.pipeline.validator import validate_config
from tracetree.core.queries import run_named_query
from tracetree.core.tree.interpreter import build_tree
from tracetree.core.tree.renderer import render_tree
from tracetree.core.tree.traversal import count_nodes
from tracetree.domain.errors import TraceTreeError
from tracetree.domain.query_models import (
    QueryResult,
    create_error_result,
    create_success_result,
)
from tracetree.infra.fs import read_trace_lines

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def run_query(config: Dict[str, Any]) -> QueryResult:
    """
    Execute the full query pipeline for one trace file.

    Args:
        config: Raw configuration dictionary.

    Returns:
        QueryResult: Outcome of the run, successful or not.
    """
    cfg, warnings = validate_config(config, strict=False)
    for w in warnings:
        logger.warning(f"Configuration Constraint: {w}")

    input_path = cfg["input_path"]
    if not os.path.isfile(input_path):
        msg = f"Trace file does not exist: {input_path}"
        logger.error(msg)
        return create_error_result(msg, cfg, {"warnings": warnings})

    try:
        lines = read_trace_lines(input_path)
    except OSError as e:
        msg = f"Failed to read trace file '{input_path}': {e}"
        logger.error(msg)
        return create_error_result(msg, cfg, {"warnings": warnings})

    logger.info(f"Building tree from {len(lines)} trace lines: {input_path}")
    return run_query_on_lines(lines, cfg, warnings)


def run_query_on_lines(
        lines: List[str],
        cfg: Dict[str, Any],
        warnings: Optional[List[str]] = None,
) -> QueryResult:
    """
    Build the tree from in-memory trace lines and run the configured query.

    Args:
        lines: Trace lines in order.
        cfg: Validated configuration.
        warnings: Validation warnings to carry into the summary.

    Returns:
        QueryResult: Outcome of the run.
    """
    summary: Dict[str, Any] = {
        "warnings": list(warnings or []),
        "size_limit": cfg["size_limit"],
        "disk_capacity": cfg["disk_capacity"],
        "required_free": cfg["required_free"],
        "strict_parsing": cfg["strict_parsing"],
        "lines": len(lines),
    }

    try:
        root = build_tree(lines, strict=cfg["strict_parsing"])
        answer = run_named_query(cfg["query"], root, cfg)
        directory_count, file_count = count_nodes(root)
        tree_lines = render_tree(root) if cfg["print_tree"] else []
        root_size = root.size()
    except TraceTreeError as e:
        logger.error(f"Query '{cfg['query']}' failed: {e}")
        return create_error_result(str(e), cfg, summary)
    except RecursionError as e:
        logger.error(f"Query '{cfg['query']}' exceeded the recursion limit: {e}")
        return create_error_result(f"Recursion limit exceeded: {e}", cfg, summary)

    logger.info(f"Query '{cfg['query']}' answered: {answer}")
    return create_success_result(
        cfg,
        answer=answer,
        total_size=root_size,
        directory_count=directory_count,
        file_count=file_count,
        tree_lines=tree_lines,
        summary_extra=summary,
    )
