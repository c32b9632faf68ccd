from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper for the query pipeline. Converts untrusted configuration input
(CLI overrides, persisted JSON) into strictly typed parameters, fills in
missing keys with domain defaults and collects warnings for everything it
had to repair.
"""

import logging
from typing import Any, Dict, List, Tuple

from tracetree.core.queries import resolve_query_name
from tracetree.domain.config import get_default_config
from tracetree.domain.errors import UnknownQueryError
from tracetree.infra.fs import normalize_path

logger = logging.getLogger(__name__)

_STRING_FIELDS = ["input_path", "query"]
_BOOL_FIELDS = ["strict_parsing", "print_tree"]
_INT_FIELDS = ["size_limit", "disk_capacity", "required_free"]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def validate_config(
        config: Any,
        *,
        strict: bool = False,
) -> Tuple[Dict[str, Any], List[str]]:
    """
    Validate and normalize the provided configuration dictionary.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raise on invalid values instead of falling back.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.

    Raises:
        TypeError: In strict mode, on a value of the wrong type.
        ValueError: In strict mode, on an out-of-range value or unknown query.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for field in _STRING_FIELDS:
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    for field in _BOOL_FIELDS:
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    for field in _INT_FIELDS:
        merged[field] = _as_non_negative_int(merged.get(field), defaults[field], field, warnings, strict)

    merged["input_path"] = normalize_path(merged["input_path"], defaults["input_path"])
    merged["query"] = _normalize_query(merged["query"], defaults["query"], warnings, strict)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    msg = f"Invalid field '{field}': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_bool(value: Any, fallback: bool, field: str, warnings: List[str], strict: bool) -> bool:
    """Coerce various input types into native booleans."""
    if isinstance(value, bool):
        return value
    if value is None:
        return fallback

    if not strict:
        if isinstance(value, (int, float)) and value in (0, 1):
            warnings.append(f"Field '{field}' converted from number {value} to bool.")
            return bool(value)
        if isinstance(value, str):
            s = value.strip().lower()
            if s in ("true", "1", "yes", "y", "on"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n", "off"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    msg = f"Invalid field '{field}': expected bool, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback


def _as_non_negative_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Coerce numeric strings to int and reject negatives."""
    if value is None:
        return fallback

    result = None
    if isinstance(value, int) and not isinstance(value, bool):
        result = value
    elif isinstance(value, str) and not strict and value.strip().isdigit():
        result = int(value.strip())
        warnings.append(f"Field '{field}' converted from '{value}' to {result}.")

    if result is None:
        msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    if result < 0:
        msg = f"Invalid field '{field}': {result} is negative."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    return result


def _normalize_query(value: str, fallback: str, warnings: List[str], strict: bool) -> str:
    """Map part numbers to query names and reject unknown queries."""
    try:
        return resolve_query_name(value)
    except UnknownQueryError as e:
        if strict:
            raise ValueError(str(e)) from e
        warnings.append(f"{e} Using fallback '{fallback}'.")
        return fallback
