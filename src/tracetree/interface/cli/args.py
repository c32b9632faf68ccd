from __future__ import annotations

"""
CLI Argument Definition and Mapping.

Defines the command-line schema and translates the parsed argparse namespace
into configuration overrides understood by the query pipeline.
"""

import argparse
from typing import Any, Dict

from tracetree.domain.constants import PART_QUERIES, QUERY_SMALL_SUM, QUERY_SMALLEST_DIR

# -----------------------------------------------------------------------------
# ARGUMENT DEFINITION
# -----------------------------------------------------------------------------

def build_parser() -> argparse.ArgumentParser:
    """
    Construct the argument parser for the tracetree CLI.

    Returns:
        argparse.ArgumentParser: Configured parser instance.
    """
    p = argparse.ArgumentParser(
        prog="tracetree",
        description="Rebuild a directory tree from a shell command trace and query directory sizes.",
    )

    # --- Input ---
    p.add_argument(
        "-i", "--input",
        dest="input_path",
        default=None,
        help="Trace file to read (one command or listing entry per line).",
    )
    p.add_argument(
        "--strict",
        action="store_true",
        help="Fail on trace lines that match no known form instead of skipping them.",
    )

    # --- Query Selection ---
    query_group = p.add_mutually_exclusive_group()
    query_group.add_argument(
        "-q", "--query",
        choices=[QUERY_SMALL_SUM, QUERY_SMALLEST_DIR],
        default=None,
        help="Query to run against the finished tree.",
    )
    query_group.add_argument(
        "--part",
        type=int,
        choices=sorted(PART_QUERIES),
        default=None,
        help="Shortcut: 1 = small-sum, 2 = smallest-dir.",
    )

    # --- Thresholds ---
    p.add_argument("--size-limit", dest="size_limit", type=int, default=None,
                   help="Inclusive directory size limit for small-sum.")
    p.add_argument("--capacity", dest="disk_capacity", type=int, default=None,
                   help="Total disk capacity for smallest-dir.")
    p.add_argument("--required-free", dest="required_free", type=int, default=None,
                   help="Free space needed for smallest-dir.")

    # --- Output ---
    p.add_argument(
        "--print-tree",
        action="store_true",
        help="Print the reconstructed tree before the answer.",
    )
    p.add_argument(
        "--json",
        dest="json_output",
        action="store_true",
        help="Print the full result as JSON.",
    )

    # --- Configuration and Diagnostics ---
    p.add_argument(
        "--use-defaults",
        action="store_true",
        help="Ignore the saved configuration file.",
    )
    p.add_argument(
        "--save-config",
        action="store_true",
        help="Persist the resolved configuration for future runs.",
    )
    p.add_argument(
        "--dump-config",
        action="store_true",
        help="Print the resolved configuration and exit.",
    )
    p.add_argument(
        "--log-file",
        dest="log_file",
        default=None,
        help="Also write logs to this file.",
    )
    p.add_argument(
        "--debug",
        action="store_true",
        help="Elevate logging verbosity to DEBUG.",
    )

    return p

# -----------------------------------------------------------------------------
# ARGUMENT MAPPING
# -----------------------------------------------------------------------------

def args_to_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """
    Translate the argparse Namespace into a configuration overrides dict.

    Values left at None are expected to be ignored by the merge step.

    Args:
        args: Parsed command-line arguments.

    Returns:
        Dict[str, Any]: Configuration overrides subset.
    """
    overrides: Dict[str, Any] = {
        "input_path": args.input_path,
        "size_limit": args.size_limit,
        "disk_capacity": args.disk_capacity,
        "required_free": args.required_free,
        "query": args.query,
    }

    if args.part is not None:
        overrides["query"] = PART_QUERIES[args.part]
    if args.strict:
        overrides["strict_parsing"] = True
    if args.print_tree:
        overrides["print_tree"] = True

    return overrides
