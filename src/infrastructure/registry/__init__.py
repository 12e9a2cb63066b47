"""Registry infrastructure package."""

from src.infrastructure.registry.demo_registry import (
    DemoRegistration,
    DemoRegistry,
    create_demo_registry,
)

__all__ = ["DemoRegistration", "DemoRegistry", "create_demo_registry"]
