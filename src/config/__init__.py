"""Configuration package with clean public API."""

from .schemas import AppConfig, CatalogConfig, LogFileConfig, LoggingConfig, validate_config
from .manager import ConfigurationManager

__all__ = [
    "AppConfig",
    "validate_config",
    "CatalogConfig",
    "LoggingConfig",
    "LogFileConfig",
    "ConfigurationManager",
]
