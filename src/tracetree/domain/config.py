from __future__ import annotations

"""
Configuration Domain Management.

Handles the runtime configuration dictionary that drives the query pipeline
and its persistent storage as JSON in the user data directory. Missing or
corrupted files always fall back to defaults.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from tracetree.domain.constants import (
    CURRENT_CONFIG_VERSION,
    DEFAULT_DISK_CAPACITY,
    DEFAULT_REQUIRED_FREE,
    DEFAULT_SIZE_LIMIT,
    QUERY_SMALL_SUM,
)
from tracetree.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

CONFIG_FILE_NAME = "config.json"
DEFAULT_INPUT_NAME = "input.txt"


# -----------------------------------------------------------------------------
# Configuration Models (Dict-based)
# -----------------------------------------------------------------------------
def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Input
        "input_path": os.path.join(os.getcwd(), DEFAULT_INPUT_NAME),
        "strict_parsing": False,

        # Query Selection
        "query": QUERY_SMALL_SUM,
        "size_limit": DEFAULT_SIZE_LIMIT,
        "disk_capacity": DEFAULT_DISK_CAPACITY,
        "required_free": DEFAULT_REQUIRED_FREE,

        # Diagnostics
        "print_tree": False,
    }


def get_config_path() -> str:
    """Resolve the absolute path of the persisted configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the persisted configuration merged over the defaults.

    Args:
        path: Optional explicit file location. Defaults to the user data dir.

    Returns:
        Dict[str, Any]: The merged configuration, or defaults on failure.
    """
    config_path = path or get_config_path()
    defaults = get_default_config()

    if not os.path.exists(config_path):
        logger.debug("Config file not found. Returning defaults.")
        return defaults

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to load config: {e}. Using defaults.")
        return defaults

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Resetting to defaults.")
        return defaults

    data.pop("version", None)
    defaults.update(data)
    return defaults


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> bool:
    """
    Persist the configuration to disk with a version stamp.

    Args:
        config: Configuration dictionary to save.
        path: Optional explicit file location. Defaults to the user data dir.

    Returns:
        bool: True if the file was written.
    """
    config_path = path or get_config_path()
    payload = dict(config)
    payload["version"] = CURRENT_CONFIG_VERSION
    try:
        os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)
        with open(config_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=4)
        logger.debug(f"Configuration saved to {config_path}")
        return True
    except OSError as e:
        logger.error(f"Failed to save configuration: {e}")
        return False
