"""Catalog configuration schema."""
from typing import List

from pydantic import BaseModel, Field, field_validator

from src.config.defaults import OutputFormat, PatternCategory


class CatalogConfig(BaseModel):
    """Settings for listing and running pattern demos."""

    output_format: str = Field(OutputFormat.TABLE.value, description="Default output format")
    enabled_categories: List[str] = Field(
        default_factory=lambda: [c.value for c in PatternCategory],
        description="Categories whose demos are registered",
    )
    show_headers: bool = Field(True, description="Print a header line before each demo")

    @field_validator("output_format")
    @classmethod
    def validate_output_format(cls, v: str) -> str:
        """Validate output format."""
        valid = [f.value for f in OutputFormat]
        if v not in valid:
            raise ValueError(f"Invalid output format: {v}. Must be one of: {', '.join(valid)}")
        return v

    @field_validator("enabled_categories")
    @classmethod
    def validate_categories(cls, v: List[str]) -> List[str]:
        """Validate that every enabled category exists."""
        valid = [c.value for c in PatternCategory]
        unknown = [c for c in v if c not in valid]
        if unknown:
            raise ValueError(f"Unknown categories: {unknown}. Must be among: {valid}")
        return v
