"""Singleton - one shared instance, scoped to an explicit registry.

Problem:
    Some objects, like a database connection, should exist once and be shared
    by everyone who needs them. A class-level global does that but hides the
    dependency, leaks state between tests and cannot be scoped.

Solution:
    Keep the "only one" guarantee but move it into an ``InstanceRegistry``
    that is created and passed around explicitly. Within a registry, asking
    for a class always returns the same instance; two registries never share.
    Dropping a registry (or calling ``reset``) ends the instances' lifetime.

Structure:
    - ``InstanceRegistry`` creates instances lazily and caches them by class.
    - ``get_singleton`` is the standard access function.
    - ``Database`` is an example of a service that should be shared.

Usage:
    - A class must have a single instance available to all of its clients.
    - Stricter control over shared state is needed than a global variable gives.

Advantages:
    - The instance is created only when first requested.
    - Every client of one registry sees the same instance.
    - Tests get a fresh registry instead of resetting hidden globals.

Disadvantages:
    - Shared instances still couple their clients to the same state.
    - The registry has to be threaded through to whoever needs it.
"""
import threading
from typing import Any, Callable, Dict, Type, TypeVar

from src.infrastructure.logging.logger import get_logger

T = TypeVar("T")
logger = get_logger(__name__)


class InstanceRegistry:
    """Lifetime-scoped store of shared instances, keyed by class."""

    def __init__(self):
        self._instances: Dict[Type, Any] = {}
        self._lock = threading.RLock()

    def get(self, cls: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the shared instance of ``cls``, creating it on first request.

        Constructor arguments are used only for that first creation.
        """
        if cls not in self._instances:
            with self._lock:
                if cls not in self._instances:
                    self._instances[cls] = cls(*args, **kwargs)
                    logger.debug("Created shared instance", cls=cls.__name__)
        return self._instances[cls]

    def register(self, cls: Type[T], instance: T) -> None:
        """Register a pre-created instance.

        Raises:
            ValueError: If an instance of ``cls`` is already held
        """
        with self._lock:
            if cls in self._instances:
                raise ValueError(f"An instance of {cls.__name__} is already registered")
            self._instances[cls] = instance

    def has(self, cls: Type) -> bool:
        return cls in self._instances

    def reset(self) -> None:
        with self._lock:
            self._instances.clear()


def get_singleton(registry: InstanceRegistry, singleton_class: Type[T], *args: Any, **kwargs: Any) -> T:
    """
    Standard way to get singleton instances.

    Args:
        registry: The registry that scopes the instance's lifetime
        singleton_class: The class to get an instance of
        *args: Arguments to pass to the constructor if creating a new instance
        **kwargs: Keyword arguments to pass to the constructor if creating a new instance

    Returns:
        The singleton instance
    """
    return registry.get(singleton_class, *args, **kwargs)


class Database:
    """Example shared service."""

    def __init__(self, url: str = "sqlite:///:memory:"):
        self.url = url
        self.queries: list = []

    def query(self, sql: str) -> str:
        self.queries.append(sql)
        return f"Executed on {self.url}: {sql}"


def run_demo(output: Callable[[str], None] = print) -> None:
    registry = InstanceRegistry()
    foo = get_singleton(registry, Database, "postgresql://catalog")
    output(foo.query("SELECT 1"))

    bar = get_singleton(registry, Database)
    output(bar.query("SELECT 2"))
    output(f"Same instance within a registry: {foo is bar}")
    output(f"Queries seen by the shared instance: {len(foo.queries)}")

    other = get_singleton(InstanceRegistry(), Database)
    output(f"Another registry gets its own instance: {other is not foo} ({other.url})")
