"""Application bootstrap - registers every pattern demo."""

from typing import List, Optional, Tuple

from src.behavioral import (
    chain_of_responsibility,
    command,
    iterator,
    mediator,
    observer,
    snapshot,
    state,
    strategy,
    template_method,
    visitor,
)
from src.config.defaults import PatternCategory
from src.config.schemas.catalog_schema import CatalogConfig
from src.creational import abstract_factory, builder, factory, prototype, singleton
from src.infrastructure.logging.logger import get_logger
from src.infrastructure.registry.demo_registry import DemoRegistry, DemoRunner
from src.structural import adapter, bridge, composite, decorator, flyweight, proxy

logger = get_logger(__name__)

# (name, category, summary, runner)
DEMOS: List[Tuple[str, PatternCategory, str, DemoRunner]] = [
    ("chain-of-responsibility", PatternCategory.BEHAVIORAL,
     "Pass a help request along a chain of UI components", chain_of_responsibility.run_demo),
    ("command", PatternCategory.BEHAVIORAL,
     "Turn editor operations into undoable command objects", command.run_demo),
    ("iterator", PatternCategory.BEHAVIORAL,
     "Traverse friends and coworkers of a profile lazily", iterator.run_demo),
    ("mediator", PatternCategory.BEHAVIORAL,
     "Coordinate dialog components through a single mediator", mediator.run_demo),
    ("observer", PatternCategory.BEHAVIORAL,
     "Notify subscribed listeners about editor events", observer.run_demo),
    ("snapshot", PatternCategory.BEHAVIORAL,
     "Save and restore editor state without exposing it", snapshot.run_demo),
    ("state", PatternCategory.BEHAVIORAL,
     "Change audio player behaviour with its state", state.run_demo),
    ("strategy", PatternCategory.BEHAVIORAL,
     "Swap arithmetic algorithms at runtime", strategy.run_demo),
    ("template-method", PatternCategory.BEHAVIORAL,
     "Share a game AI turn skeleton between races", template_method.run_demo),
    ("visitor", PatternCategory.BEHAVIORAL,
     "Add export and area operations to shapes", visitor.run_demo),
    ("abstract-factory", PatternCategory.CREATIONAL,
     "Create families of matching GUI widgets", abstract_factory.run_demo),
    ("builder", PatternCategory.CREATIONAL,
     "Construct cars and their manuals step by step", builder.run_demo),
    ("factory-method", PatternCategory.CREATIONAL,
     "Let dialogs decide which button to create", factory.run_demo),
    ("prototype", PatternCategory.CREATIONAL,
     "Copy shapes without depending on their classes", prototype.run_demo),
    ("singleton", PatternCategory.CREATIONAL,
     "Share one instance per class within a registry", singleton.run_demo),
    ("adapter", PatternCategory.STRUCTURAL,
     "Fit square pegs into round holes", adapter.run_demo),
    ("bridge", PatternCategory.STRUCTURAL,
     "Separate remote controls from the devices they drive", bridge.run_demo),
    ("composite", PatternCategory.STRUCTURAL,
     "Treat single graphics and groups uniformly", composite.run_demo),
    ("decorator", PatternCategory.STRUCTURAL,
     "Stack encryption and compression around a data source", decorator.run_demo),
    ("flyweight", PatternCategory.STRUCTURAL,
     "Share tree types between thousands of trees", flyweight.run_demo),
    ("proxy", PatternCategory.STRUCTURAL,
     "Cache a slow video service behind the same interface", proxy.run_demo),
]


def create_registry(catalog_config: Optional[CatalogConfig] = None) -> DemoRegistry:
    """
    Create a demo registry holding every demo of the enabled categories.

    Args:
        catalog_config: Catalog settings; all categories are enabled when omitted

    Returns:
        Populated demo registry
    """
    enabled = None
    if catalog_config is not None:
        enabled = {PatternCategory(c) for c in catalog_config.enabled_categories}

    registry = DemoRegistry()
    for name, category, summary, runner in DEMOS:
        if enabled is not None and category not in enabled:
            continue
        registry.register_demo(name, category, summary, runner)

    logger.debug("Demo registry created", demos=len(registry))
    return registry
