from __future__ import annotations

"""
Configuration Domain Management.

Handles persistent storage of user preferences as JSON in the user data
directory. Values found on disk are merged over the defaults so that keys
added in newer releases are always present.
"""

import json
import logging
import os
from typing import Any, Dict, Optional

from helperkit.infra.fs import get_user_data_dir

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# Constants & Defaults
# -----------------------------------------------------------------------------
CONFIG_FILE_NAME = "config.json"
CURRENT_CONFIG_VERSION = "1.0.0"


def get_config_path() -> str:
    """Absolute path of the persisted configuration file."""
    return os.path.join(get_user_data_dir(), CONFIG_FILE_NAME)


def get_default_config() -> Dict[str, Any]:
    """
    Generate the default runtime configuration.

    Returns:
        Dict[str, Any]: Default configuration values.
    """
    return {
        # Diagnostics
        "log_level": "INFO",
        "log_file": "",
        "console_logging": True,

        # Checksums
        "hash_algorithm": "sha1",
        "chunk_size": 65536,

        # Output
        "prettify_json": True,
    }

# -----------------------------------------------------------------------------
# Persistence Logic
# -----------------------------------------------------------------------------
def load_config(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load the configuration from disk, merged over the defaults.

    Missing, unreadable or malformed files yield the defaults.

    Args:
        path: Alternative configuration file. Defaults to get_config_path().

    Returns:
        Dict[str, Any]: The effective configuration.
    """
    config_path = path or get_config_path()
    config = get_default_config()

    if not os.path.exists(config_path):
        logger.debug("Config file not found. Returning defaults.")
        return config

    try:
        with open(config_path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError) as e:
        logger.warning(f"Failed to load config '{config_path}': {e}. Using defaults.")
        return config

    if not isinstance(data, dict):
        logger.warning("Corrupted config file. Using defaults.")
        return config

    data.pop("version", None)
    config.update(data)
    return config


def save_config(config: Dict[str, Any], path: Optional[str] = None) -> None:
    """
    Persist the configuration to disk as indented JSON.

    Args:
        config: The configuration dictionary to save.
        path: Alternative configuration file. Defaults to get_config_path().

    Raises:
        OSError: If the file cannot be written.
    """
    config_path = path or get_config_path()
    os.makedirs(os.path.dirname(os.path.abspath(config_path)), exist_ok=True)

    state = dict(config)
    state["version"] = CURRENT_CONFIG_VERSION
    with open(config_path, "w", encoding="utf-8") as f:
        json.dump(state, f, ensure_ascii=False, indent=4)
    logger.debug(f"Configuration saved to {config_path}")
