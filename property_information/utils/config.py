"""
Configuration utility for property-information.
"""

import copy
import json
import logging
import os
from typing import Any, Dict, Optional

logger = logging.getLogger(__name__)

# Environment variable naming a JSON config file
CONFIG_ENV = "PROPERTY_INFORMATION_CONFIG"

DEFAULTS: Dict[str, Any] = {
    "schema": {
        # None means the tables bundled with the package
        "data_dir": None,
        "tables": ["xml", "xlink", "xmlns", "aria", "html", "svg"]
    },
    "registries": {
        # Base element table last, so it wins over the namespaced tables
        "html": ["xml", "xlink", "xmlns", "aria", "html"],
        "svg": ["xml", "xlink", "xmlns", "aria", "svg"]
    },
    "logging": {
        "console_level": "WARNING",
        "file": None
    }
}


def _merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Recursively layer ``override`` over ``base``."""
    result = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(result.get(key), dict):
            result[key] = _merge(result[key], value)
        else:
            result[key] = value
    return result


class Config:
    """Configuration for schema loading and logging."""

    def __init__(self, config_path: Optional[str] = None, overrides: Optional[Dict[str, Any]] = None,
                 use_environment: bool = True):
        """
        Initialize the configuration.

        Args:
            config_path: Path to a JSON config file (falls back to the
                PROPERTY_INFORMATION_CONFIG environment variable)
            overrides: Values layered over the file and the defaults
            use_environment: Whether to read the config file path from the
                environment when none is given
        """
        self.config_path = config_path
        if not self.config_path and use_environment:
            self.config_path = os.environ.get(CONFIG_ENV)
        self.config: Dict[str, Any] = {}
        self.load_error: Optional[str] = None

        self.load()
        if overrides:
            self.config = _merge(self.config, overrides)

        logger.debug(f"Configuration initialized (config_path: {self.config_path})")

    def load(self) -> None:
        """Load configuration from file, layered over the defaults."""
        self.config = copy.deepcopy(DEFAULTS)
        self.load_error = None
        if not self.config_path:
            return

        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                data = json.load(f)
            if not isinstance(data, dict):
                raise ValueError("top-level value must be an object")
            self.config = _merge(DEFAULTS, data)
            logger.debug(f"Configuration loaded from {self.config_path}")
        except (OSError, ValueError) as e:
            self.load_error = str(e)
            logger.error(f"Error loading configuration from {self.config_path}: {e}")

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value.

        Args:
            key: Configuration key (can be nested using dots, e.g. 'registries.html')
            default: Default value if key doesn't exist

        Returns:
            Any: Configuration value or default
        """
        config = self.config
        parts = key.split('.')
        for part in parts[:-1]:
            if part not in config or not isinstance(config[part], dict):
                return default
            config = config[part]

        return config.get(parts[-1], default)

    def get_all(self) -> Dict[str, Any]:
        """
        Get all configuration values.

        Returns:
            Dict[str, Any]: Copy of all configuration values
        """
        return copy.deepcopy(self.config)
