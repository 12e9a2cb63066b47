"""Logging configuration schemas."""
from pydantic import BaseModel, Field, field_validator

from src.config.defaults import LogDestination, LogLevel


class LogFileConfig(BaseModel):
    """Rotating log file settings."""

    path: str = Field("logs/pattern_catalog.log", description="Log file path")
    max_size_mb: int = Field(10, description="Maximum size of a log file before rotation")
    backup_count: int = Field(5, description="Number of rotated files to keep")

    @field_validator("max_size_mb", "backup_count")
    @classmethod
    def validate_positive(cls, v: int) -> int:
        """Validate rotation limits."""
        if v < 1:
            raise ValueError("Value must be at least 1")
        return v


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(LogLevel.WARNING.value, description="Root log level")
    destination: str = Field(LogDestination.STDERR.value, description="Where log records go")
    file: LogFileConfig = Field(default_factory=LogFileConfig)
    format: str = Field(
        "%(asctime)s - %(levelname)s - %(name)s [%(caller_info)s] - %(message)s",
        description="stdlib logging format string",
    )

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate log level."""
        level = v.upper()
        if level not in LogLevel.__members__:
            raise ValueError(
                f"Invalid log level: {v}. Must be one of: {', '.join(LogLevel.__members__)}"
            )
        return level

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        """Validate log destination."""
        destination = v.lower()
        valid = [d.value for d in LogDestination]
        if destination not in valid:
            raise ValueError(
                f"Invalid log destination: {v}. Must be one of: {', '.join(valid)}"
            )
        return destination
