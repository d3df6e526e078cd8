from __future__ import annotations

"""
Configuration Validation Service.

Ensures the configuration dictionary conforms to the expected schema.
Handles type coercion and default value injection for values coming from
the JSON file or the command line.
"""

import logging
from typing import Any, Dict, List, Tuple

from helperkit.core.services.checksum import is_supported_algorithm
from helperkit.domain.config import get_default_config
from helperkit.infra.logging.config import _LEVEL_MAP

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
        strict: If True, raises exceptions on invalid values instead of coercing.

    Returns:
        Tuple[Dict[str, Any], List[str]]: The normalized configuration and
                                          a list of warnings.
    """
    warnings: List[str] = []
    defaults = get_default_config()

    if not isinstance(config, dict):
        msg = f"Invalid config type: expected dict, received {type(config).__name__}."
        if strict:
            raise TypeError(msg)
        warnings.append(f"{msg} Using defaults.")
        return defaults, warnings

    merged: Dict[str, Any] = dict(defaults)
    merged.update(config)

    for field in ("log_level", "hash_algorithm"):
        merged[field] = _as_str(merged.get(field), defaults[field], field, warnings, strict)

    # An empty log_file is meaningful (no file sink)
    log_file = merged.get("log_file")
    merged["log_file"] = log_file.strip() if isinstance(log_file, str) else ""

    for field in ("console_logging", "prettify_json"):
        merged[field] = _as_bool(merged.get(field), defaults[field], field, warnings, strict)

    merged["chunk_size"] = _as_positive_int(
        merged.get("chunk_size"), defaults["chunk_size"], "chunk_size", warnings, strict
    )

    # Domain-specific normalization
    level = merged["log_level"].upper()
    if level not in _LEVEL_MAP:
        _reject(f"Unknown log level '{merged['log_level']}'.", warnings, strict, ValueError)
        level = defaults["log_level"]
    merged["log_level"] = level

    algorithm = merged["hash_algorithm"].lower()
    if not is_supported_algorithm(algorithm):
        _reject(f"Unsupported hash algorithm '{merged['hash_algorithm']}'.", warnings, strict, ValueError)
        algorithm = defaults["hash_algorithm"]
    merged["hash_algorithm"] = algorithm

    return merged, warnings


# -----------------------------------------------------------------------------
# PRIVATE HELPERS: TYPE COERCION
# -----------------------------------------------------------------------------

def _reject(msg: str, warnings: List[str], strict: bool, exc_type: type = TypeError) -> None:
    if strict:
        raise exc_type(msg)
    warnings.append(f"{msg} Using fallback.")


def _as_str(value: Any, fallback: str, field: str, warnings: List[str], strict: bool) -> str:
    """Validate and sanitize string inputs."""
    if value is None:
        return fallback
    if isinstance(value, str):
        v = value.strip()
        return v if v else fallback

    _reject(f"Invalid field '{field}': expected str, received {type(value).__name__}.", warnings, strict)
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
            if s in ("true", "1", "yes", "y"):
                warnings.append(f"Field '{field}' converted from '{value}' to True.")
                return True
            if s in ("false", "0", "no", "n"):
                warnings.append(f"Field '{field}' converted from '{value}' to False.")
                return False

    _reject(f"Invalid field '{field}': expected bool, received {type(value).__name__}.", warnings, strict)
    return fallback


def _as_positive_int(value: Any, fallback: int, field: str, warnings: List[str], strict: bool) -> int:
    if value is None:
        return fallback
    if isinstance(value, int) and not isinstance(value, bool) and value > 0:
        return value
    if not strict and isinstance(value, str) and value.strip().isdigit() and int(value) > 0:
        warnings.append(f"Field '{field}' converted from '{value}' to int.")
        return int(value)

    _reject(f"Invalid field '{field}': expected positive int, received {value!r}.", warnings, strict)
    return fallback
