from __future__ import annotations

"""
Configuration Validation Service.

Gatekeeper for the flatten pipeline: converts an untrusted configuration
dictionary (from the CLI, a JSON file or a library caller) into strictly
typed values, filling missing keys with domain defaults.
"""

import logging
import os
from typing import Any, Dict, List, Tuple

from singleinclude.domain.config import get_default_config
from singleinclude.domain.constants import MAX_DEPTH_LIMIT

logger = logging.getLogger(__name__)


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
        strict: If True, raise on type mismatch instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.

    Raises:
        TypeError: In strict mode, when a field has the wrong type.
        ValueError: In strict mode, when a field is out of range.
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

    string_fields = ["input_path", "output_path"]
    bool_fields = ["expand_all", "dry_run", "print_tree", "verbose"]

    for field in string_fields:
        merged[field] = _as_str(
            merged.get(field), defaults.get(field, ""), field, warnings, strict
        )

    for field in bool_fields:
        merged[field] = _as_bool(
            merged.get(field), defaults.get(field, False), field, warnings, strict
        )

    merged["include_paths"] = _as_list_str(
        merged.get("include_paths"), [], "include_paths", warnings, strict
    )
    merged["max_depth"] = _as_positive_int(
        merged.get("max_depth"), defaults["max_depth"], "max_depth", warnings, strict
    )
    merged["header"] = _as_header(merged.get("header"), defaults["header"], warnings, strict)

    # Tree dump is part of the verbose report
    if merged["verbose"]:
        merged["print_tree"] = True

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
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


def _as_list_str(value: Any, fallback: List[str], field: str, warnings: List[str], strict: bool) -> List[str]:
    """Ensure input is an ordered list of non-empty strings."""
    if value is None:
        return list(fallback)

    # os.pathsep separated string, as in an INCLUDE-style environment variable
    if isinstance(value, str) and not strict:
        items = [x.strip() for x in value.split(os.pathsep) if x.strip()]
        warnings.append(f"Field '{field}' converted from string to list.")
        return items

    if isinstance(value, (list, tuple)):
        out: List[str] = []
        for i, item in enumerate(value):
            if isinstance(item, str):
                s = item.strip()
                if s:
                    out.append(s)
            else:
                msg = f"Invalid item in '{field}[{i}]': expected str."
                if strict:
                    raise TypeError(msg)
                warnings.append(f"{msg} Item discarded.")
        return out

    msg = f"Invalid field '{field}': expected list[str], received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return list(fallback)


def _as_positive_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    if value is None:
        return fallback

    if isinstance(value, bool) or not isinstance(value, (int, str)):
        msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback

    if isinstance(value, str):
        if strict:
            raise TypeError(f"Invalid field '{field}': expected int, received str.")
        try:
            value = int(value.strip())
        except ValueError:
            warnings.append(f"Field '{field}' is not a number. Using fallback.")
            return fallback
        warnings.append(f"Field '{field}' converted from string to int.")

    if value < 1:
        msg = f"Invalid field '{field}': must be at least 1, received {value}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        return fallback
    if value > MAX_DEPTH_LIMIT:
        msg = f"Invalid field '{field}': must be at most {MAX_DEPTH_LIMIT}, received {value}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Clamped to {MAX_DEPTH_LIMIT}.")
        return MAX_DEPTH_LIMIT
    return value


def _as_header(value: Any, fallback: str, warnings: List[str], strict: bool) -> str:
    """Header text is kept verbatim; an empty string disables it."""
    if value is None:
        return fallback
    if isinstance(value, str):
        if value and not value.endswith("\n"):
            return value + "\n"
        return value

    msg = f"Invalid field 'header': expected str, received {type(value).__name__}."
    if strict:
        raise TypeError(msg)
    warnings.append(f"{msg} Using fallback.")
    return fallback
