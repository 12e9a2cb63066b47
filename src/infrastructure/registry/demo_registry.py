"""Demo Registry - Registry pattern for pattern demonstrations.

This module maps demo names to their category, summary and runner so the
command line can list, describe and run demos without knowing any pattern
module by name. The registry is a plain object handed to whoever needs it;
there is no process-wide instance.
"""

import inspect
from typing import Callable, Dict, List, Optional

from src.config.defaults import PatternCategory
from src.domain.core.exceptions import DemoNotFoundError
from src.infrastructure.logging.logger import get_logger

OutputSink = Callable[[str], None]
DemoRunner = Callable[[OutputSink], None]


class DemoRegistration:
    """Container for demo registration information."""

    def __init__(self,
                 name: str,
                 category: PatternCategory,
                 summary: str,
                 runner: DemoRunner,
                 description: Optional[str] = None):
        """
        Initialize demo registration.

        Args:
            name: Unique demo name (e.g., 'iterator', 'abstract-factory')
            category: Pattern category the demo belongs to
            summary: One-line description shown in listings
            runner: Callable taking an output sink and writing the demo lines
            description: Long explanation; defaults to the runner's module docstring
        """
        self.name = name
        self.category = PatternCategory(category)
        self.summary = summary
        self.runner = runner
        if description is None:
            module = inspect.getmodule(runner)
            description = inspect.getdoc(module) if module is not None else ""
        self.description = description or ""

    def to_dict(self, include_description: bool = False) -> Dict[str, str]:
        data = {
            "name": self.name,
            "category": self.category.value,
            "summary": self.summary,
        }
        if include_description:
            data["description"] = self.description
        return data


class DemoRegistry:
    """
    Registry of pattern demos.

    New demos are added by registering their runner; the command line never
    changes when a pattern is added.
    """

    def __init__(self):
        """Initialize demo registry."""
        self._registrations: Dict[str, DemoRegistration] = {}
        self._logger = get_logger(__name__)

    def register_demo(self,
                      name: str,
                      category: PatternCategory,
                      summary: str,
                      runner: DemoRunner,
                      description: Optional[str] = None) -> DemoRegistration:
        """
        Register a demo.

        Raises:
            ValueError: If a demo with the same name is already registered
        """
        if self.is_demo_registered(name):
            raise ValueError(f"Demo '{name}' is already registered")

        registration = DemoRegistration(name, category, summary, runner, description)
        self._registrations[name] = registration
        self._logger.debug("Registered demo", demo=name, category=registration.category.value)
        return registration

    def unregister_demo(self, name: str) -> bool:
        """
        Unregister a demo.

        Returns:
            True if the demo was unregistered, False if it was not registered
        """
        if name in self._registrations:
            del self._registrations[name]
            self._logger.debug("Unregistered demo", demo=name)
            return True
        return False

    def is_demo_registered(self, name: str) -> bool:
        return name in self._registrations

    def get_registered_demos(self, category: Optional[str] = None) -> List[str]:
        """Get registered demo names, ordered by category then name."""
        registrations = self.list_registrations(category)
        return [r.name for r in registrations]

    def list_registrations(self, category: Optional[str] = None) -> List[DemoRegistration]:
        registrations = list(self._registrations.values())
        if category is not None:
            wanted = PatternCategory(category)
            registrations = [r for r in registrations if r.category == wanted]
        return sorted(registrations, key=lambda r: (r.category.value, r.name))

    def get_registration(self, name: str) -> DemoRegistration:
        """
        Get a demo registration by name.

        Raises:
            DemoNotFoundError: If no demo with that name is registered
        """
        registration = self._registrations.get(name)
        if registration is None:
            raise DemoNotFoundError(name, self.get_registered_demos())
        return registration

    def run_demo(self, name: str, output: OutputSink = print) -> None:
        """Run a registered demo, writing its lines through ``output``."""
        registration = self.get_registration(name)
        self._logger.info("Running demo", demo=name)
        registration.runner(output)

    def clear_registrations(self) -> None:
        """Clear all registrations (mainly for tests)."""
        self._registrations.clear()

    def __len__(self) -> int:
        return len(self._registrations)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and self.is_demo_registered(name)


def create_demo_registry() -> DemoRegistry:
    """Create an empty demo registry."""
    return DemoRegistry()
