from __future__ import annotations

"""
Configuration Domain Management.

Defines the runtime configuration dictionary that drives a flatten run and
loads optional JSON configuration files, falling back to defaults when the
file is missing or malformed.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from singleinclude.domain.constants import DEFAULT_HEADER, DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)

# Keys accepted from configuration files and CLI overrides
CONFIG_KEYS = (
    "input_path",
    "include_paths",
    "output_path",
    "expand_all",
    "dry_run",
    "print_tree",
    "verbose",
    "max_depth",
    "header",
)


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
        # IO Paths
        "input_path": "",
        "include_paths": [],
        "output_path": "",

        # Expansion Policy
        "expand_all": False,
        "max_depth": DEFAULT_MAX_DEPTH,
        "header": DEFAULT_HEADER,

        # Reporting
        "dry_run": False,
        "print_tree": False,
        "verbose": False,
    }


# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load a configuration file and merge its known keys over the defaults.

    Unknown keys are ignored. A missing, unreadable or malformed file is
    logged and the defaults are returned unchanged.

    Args:
        path: Path to a JSON file holding a single object.

    Returns:
        Dict[str, Any]: The merged configuration.
    """
    config = get_default_config()
    if not path:
        return config

    if not os.path.exists(path):
        logger.warning(f"Configuration file not found: {path}. Using defaults.")
        return config

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        logger.warning(f"Failed to load configuration from {path}: {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning(f"Configuration file {path} must contain a JSON object. Using defaults.")
        return config

    for key in CONFIG_KEYS:
        if key in data:
            config[key] = data[key]

    logger.debug(f"Configuration loaded from {path}")
    return config
