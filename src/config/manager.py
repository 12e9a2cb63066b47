"""Configuration management for the pattern catalog."""
from __future__ import annotations

import copy
import json
import logging
import os
from typing import Any, Dict, Optional

from pydantic import ValidationError as PydanticValidationError

from src.config.defaults import CONFIG_FILE_ENV_VAR, DEFAULT_CONFIG
from src.config.schemas import AppConfig, CatalogConfig, LoggingConfig
from src.config.utils.env_expansion import expand_config_env_vars
from src.domain.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)


def _deep_update(target: Dict[str, Any], source: Dict[str, Any]) -> None:
    for key, value in source.items():
        if key in target and isinstance(target[key], dict) and isinstance(value, dict):
            _deep_update(target[key], value)
        else:
            target[key] = value


class ConfigurationManager:
    """
    Manages application configuration with defaults and overrides.

    This class handles:
    - Loading default configuration
    - Merging a user JSON configuration file over the defaults
    - Environment variable interpolation
    - Validation through the pydantic schema
    """

    def __init__(self, config_file: Optional[str] = None):
        """
        Initialize configuration manager with defaults.

        Args:
            config_file: Optional path to a JSON configuration file. If not provided,
                        the PATTERN_CATALOG_CONFIG environment variable is consulted.
        """
        self._config_file = config_file or os.environ.get(CONFIG_FILE_ENV_VAR)
        self._raw_config: Dict[str, Any] = copy.deepcopy(DEFAULT_CONFIG)
        self._app_config: Optional[AppConfig] = None

        if self._config_file:
            self._load_config_file(self._config_file)

    def _load_config_file(self, config_path: str) -> None:
        """Load configuration from file."""
        try:
            with open(config_path, "r") as f:
                user_config = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigurationError(f"Failed to load configuration from {config_path}: {e}")

        if not isinstance(user_config, dict):
            raise ConfigurationError(
                f"Configuration file {config_path} must contain a JSON object"
            )
        _deep_update(self._raw_config, user_config)
        logger.debug("Loaded configuration file %s", config_path)

    def update_config(self, user_config: Dict[str, Any]) -> None:
        """
        Update configuration with user-provided values.

        Args:
            user_config: Configuration dictionary merged over the current values
        """
        _deep_update(self._raw_config, user_config)
        self._app_config = None

    def get_config(self) -> Dict[str, Any]:
        """
        Get the complete configuration with all interpolations applied.

        Returns:
            Dict containing the complete configuration
        """
        return expand_config_env_vars(self._raw_config)

    @property
    def app_config(self) -> AppConfig:
        """Validated application configuration, built on first access."""
        if self._app_config is None:
            try:
                self._app_config = AppConfig.model_validate(self.get_config())
            except PydanticValidationError as e:
                missing = [
                    ".".join(str(p) for p in err["loc"])
                    for err in e.errors()
                    if err["type"] == "missing"
                ]
                raise ConfigurationError(f"Invalid configuration: {e}", missing_fields=missing)
        return self._app_config

    def get_logging_config(self) -> LoggingConfig:
        """Get logging configuration."""
        return self.app_config.logging

    def get_catalog_config(self) -> CatalogConfig:
        """Get catalog configuration."""
        return self.app_config.catalog
