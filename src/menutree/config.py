from __future__ import annotations

"""
Configuration Management.

Dict-based settings for the menu facade, with defaults and a validator
that normalizes untrusted input (e.g. values read from a settings file or
environment) into strictly typed parameters.
"""

import logging
from typing import Any, Dict, List, Tuple

from menutree.domain.constants import ALWAYS_VISIBLE, DEFAULT_MAX_DEPTH

logger = logging.getLogger(__name__)


# -----------------------------------------------------------------------------
# DEFAULTS
# -----------------------------------------------------------------------------

def get_default_config() -> Dict[str, Any]:
    """
    Generate the default configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Filtering
        "query_mask": ALWAYS_VISIBLE,

        # Output
        "json_indent": 2,

        # Shape guard
        "enable_depth_guard": False,
        "max_depth": DEFAULT_MAX_DEPTH,
    }


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

    Missing keys are filled with defaults. In lenient mode bad values are
    replaced by their default and reported in the warnings list.

    Args:
        config: Raw configuration data (usually a dictionary).
        strict: If True, raises exceptions instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: Normalized configuration and warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if config is None:
        return defaults, warnings

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        logger.warning(msg)
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    merged["query_mask"] = _as_int(merged.get("query_mask"), defaults["query_mask"], "query_mask", warnings, strict)
    merged["json_indent"] = _as_int(merged.get("json_indent"), defaults["json_indent"], "json_indent", warnings, strict)
    merged["max_depth"] = _as_int(merged.get("max_depth"), defaults["max_depth"], "max_depth", warnings, strict)
    merged["enable_depth_guard"] = _as_bool(
        merged.get("enable_depth_guard"), defaults["enable_depth_guard"], "enable_depth_guard", warnings, strict
    )

    # Domain ranges
    if merged["max_depth"] < 0:
        msg = f"Invalid field 'max_depth': must be >= 0, received {merged['max_depth']}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        merged["max_depth"] = defaults["max_depth"]

    if merged["json_indent"] < 0:
        msg = f"Invalid field 'json_indent': must be >= 0, received {merged['json_indent']}."
        if strict:
            raise ValueError(msg)
        warnings.append(f"{msg} Using fallback.")
        merged["json_indent"] = defaults["json_indent"]

    for w in warnings:
        logger.debug(w)

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _as_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    """Accept ints, and int literals such as '0x80' in lenient mode."""
    if value is None:
        return fallback
    if isinstance(value, int) and not isinstance(value, bool):
        return value

    if isinstance(value, str) and not strict:
        try:
            parsed = int(value.strip(), 0)
        except ValueError:
            pass
        else:
            warnings.append(f"Field '{field}' converted from '{value}' to {parsed}.")
            return parsed

    msg = f"Invalid field '{field}': expected int, received {type(value).__name__}."
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
