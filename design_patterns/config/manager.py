"""Unified configuration management for the catalog."""
from __future__ import annotations

import json
import logging
import os
import threading
from typing import Any, Dict, Optional

from pydantic import ValidationError

from design_patterns.config.schemas import AppConfig
from design_patterns.config.utils import expand_env_vars
from design_patterns.domain.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

# Environment variable -> (section, key)
ENV_OVERRIDES = {
    "DP_LOG_LEVEL": ("logging", "level"),
    "DP_LOG_DESTINATION": ("logging", "destination"),
    "DP_LOG_FILE": ("logging", "file_path"),
    "DP_OUTPUT_FORMAT": (None, "output_format"),
}


class ConfigurationManager:
    """
    Single source of truth for catalog configuration.

    Configuration is assembled from, in increasing priority:
    - Schema defaults
    - An optional JSON configuration file
    - ``DP_*`` environment variable overrides

    Loading is lazy and happens once per manager.
    """

    def __init__(self, config_file: Optional[str] = None):
        """Initialize configuration manager with lazy loading."""
        self._config_file = config_file
        self._lock = threading.RLock()
        self._app_config: Optional[AppConfig] = None

    @property
    def app_config(self) -> AppConfig:
        """Lazy load application configuration."""
        if self._app_config is None:
            with self._lock:
                if self._app_config is None:
                    self._app_config = self._load_app_config()
        return self._app_config

    def _load_app_config(self) -> AppConfig:
        """Load application configuration from sources."""
        config_data: Dict[str, Any] = {}
        if self._config_file:
            config_data = self.load_from_file(self._config_file)

        config_data = self.apply_environment_overrides(expand_env_vars(config_data))

        try:
            return AppConfig.model_validate(config_data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Invalid configuration: {e.error_count()} validation error(s)",
                details=e.errors(),
            ) from e

    @staticmethod
    def load_from_file(path: str) -> Dict[str, Any]:
        """Read a JSON configuration file."""
        if not os.path.exists(path):
            raise ConfigurationError(f"Configuration file not found: {path}")

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise ConfigurationError(f"Invalid JSON in configuration file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(f"Configuration file {path} must contain a JSON object")

        logger.debug("Loaded configuration from %s", path)
        return data

    @staticmethod
    def apply_environment_overrides(config_data: Dict[str, Any]) -> Dict[str, Any]:
        """Apply ``DP_*`` environment variables on top of file configuration."""
        result = dict(config_data)
        for env_var, (section, key) in ENV_OVERRIDES.items():
            value = os.environ.get(env_var)
            if value is None:
                continue
            if section is None:
                result[key] = value
            else:
                section_data = dict(result.get(section) or {})
                section_data[key] = value
                result[section] = section_data
            logger.debug("Applied environment override %s", env_var)
        return result

    def get(self, key: str, default: Any = None) -> Any:
        """Get a top-level configuration value by name."""
        return getattr(self.app_config, key, default)
