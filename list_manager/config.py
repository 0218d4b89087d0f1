"""
Configuration settings for the List Manager
"""

import copy
import os
import json
from typing import Dict, Any

from list_manager.errors import ConfigurationError
from simple_logger import Slogger


DEFAULT_PER_PAGE = 10
DEFAULT_ORDERBY = "id"
DEFAULT_ORDER = "asc"

DEFAULT_CONFIG = {
    "table": {
        "per_page": DEFAULT_PER_PAGE,
        "orderby": DEFAULT_ORDERBY,
        "order": DEFAULT_ORDER,
    },
    "ui": {
        "date_format": "%Y-%m-%d",
    }
}

CONFIG_FILE = os.path.expanduser("~/.list_manager_config.json")


def resolve_page_size(value: Any, default: int = DEFAULT_PER_PAGE) -> int:
    """
    Resolve a configured page size, falling back to `default`

    Unset (None) and non-positive values fall back to the default.

    Args:
        value: Raw page size from config or caller
        default: Page size to use when `value` is unset or non-positive

    Returns:
        A positive page size

    Raises:
        ConfigurationError: if the value is not an integer, or the page size
            is still non-positive after defaulting
    """
    if value is None:
        size = default
    elif isinstance(value, bool):
        raise ConfigurationError(f"Page size must be an integer, got {value!r}")
    elif isinstance(value, int):
        size = value
    elif isinstance(value, str) and value.strip().lstrip("+-").isdigit():
        size = int(value.strip())
    else:
        raise ConfigurationError(f"Page size must be an integer, got {value!r}")

    if size <= 0:
        size = default
    if size <= 0:
        raise ConfigurationError(f"Page size must be positive, got {size!r}")
    return size


def normalize_order(value: Any) -> str:
    """Lower-cased sort direction; blank or unset gives the default."""
    text = str(value or "").strip().lower()
    return text or DEFAULT_ORDER


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    for key, value in override.items():
        if value is None:
            continue
        if isinstance(value, dict) != isinstance(base.get(key, value), dict):
            Slogger.warning(f"Ignoring config section '{key}' of the wrong type", {"value": repr(value)})
            continue
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _merge(base[key], value)
        else:
            base[key] = value
    return base


def load_config() -> Dict[str, Any]:
    """
    Load configuration from file or environment variables
    """
    config = copy.deepcopy(DEFAULT_CONFIG)

    # Check for config file
    if os.path.exists(CONFIG_FILE):
        try:
            with open(CONFIG_FILE, 'r') as f:
                file_config = json.load(f)
            if isinstance(file_config, dict):
                _merge(config, file_config)
            else:
                Slogger.warning("Ignoring config file without a top-level object",
                                {"path": CONFIG_FILE})
        except (json.JSONDecodeError, OSError) as e:
            Slogger.error(f"Error loading config file: {e}", {"path": CONFIG_FILE})

    # Override with environment variables
    if os.environ.get("LIST_MANAGER_PER_PAGE"):
        config["table"]["per_page"] = os.environ.get("LIST_MANAGER_PER_PAGE")

    if os.environ.get("LIST_MANAGER_ORDERBY"):
        config["table"]["orderby"] = os.environ.get("LIST_MANAGER_ORDERBY")

    if os.environ.get("LIST_MANAGER_ORDER"):
        config["table"]["order"] = os.environ.get("LIST_MANAGER_ORDER")

    config["table"]["order"] = normalize_order(config["table"].get("order"))

    return config


def save_config(config: Dict[str, Any]) -> bool:
    """
    Save configuration to file
    """
    try:
        with open(CONFIG_FILE, 'w') as f:
            json.dump(config, f, indent=2)
        return True
    except OSError as e:
        Slogger.error(f"Error saving config file: {e}", {"path": CONFIG_FILE})
        return False
