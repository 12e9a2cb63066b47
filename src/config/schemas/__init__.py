"""Configuration schemas package."""

from .app_schema import AppConfig, validate_config
from .catalog_schema import CatalogConfig
from .logging_schema import LogFileConfig, LoggingConfig

__all__ = [
    "AppConfig",
    "validate_config",
    "CatalogConfig",
    "LoggingConfig",
    "LogFileConfig",
]
