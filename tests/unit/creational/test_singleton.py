"""Tests for the lifetime-scoped instance registry."""

import threading

import pytest

from src.creational.singleton import Database, InstanceRegistry, get_singleton, run_demo


class TestInstanceRegistry:
    """Test one shared instance per class within a registry."""

    def setup_method(self):
        """Set up test fixtures."""
        self.registry = InstanceRegistry()

    def test_same_instance_within_registry(self):
        first = get_singleton(self.registry, Database, "postgresql://a")
        second = get_singleton(self.registry, Database, "postgresql://b")
        assert first is second
        assert second.url == "postgresql://a"

    def test_registries_are_isolated(self):
        other = InstanceRegistry()
        assert get_singleton(self.registry, Database) is not get_singleton(other, Database)

    def test_register_preexisting_instance(self):
        database = Database("sqlite:///file.db")
        self.registry.register(Database, database)
        assert self.registry.has(Database)
        assert get_singleton(self.registry, Database) is database

    def test_register_twice_rejected(self):
        self.registry.get(Database)
        with pytest.raises(ValueError):
            self.registry.register(Database, Database())

    def test_reset(self):
        first = self.registry.get(Database)
        self.registry.reset()
        assert self.registry.has(Database) is False
        assert self.registry.get(Database) is not first

    def test_concurrent_first_access_creates_one_instance(self):
        results = []
        barrier = threading.Barrier(8)

        def worker():
            barrier.wait()
            results.append(self.registry.get(Database))

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len({id(instance) for instance in results}) == 1


def test_demo_output():
    lines = []
    run_demo(lines.append)
    assert lines == [
        "Executed on postgresql://catalog: SELECT 1",
        "Executed on postgresql://catalog: SELECT 2",
        "Same instance within a registry: True",
        "Queries seen by the shared instance: 2",
        "Another registry gets its own instance: True (sqlite:///:memory:)",
    ]
