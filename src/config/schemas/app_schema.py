"""Main application configuration schema."""

from typing import Any, Dict

from pydantic import BaseModel, Field

from .catalog_schema import CatalogConfig
from .logging_schema import LoggingConfig


class AppConfig(BaseModel):
    """Application configuration."""

    version: str = Field("1.0.0", description="Configuration version")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig())
    catalog: CatalogConfig = Field(default_factory=lambda: CatalogConfig())


def validate_config(data: Dict[str, Any]) -> AppConfig:
    """Validate a raw configuration dictionary and return the typed config."""
    return AppConfig.model_validate(data)
