"""Shared pytest fixtures."""

import logging

import pytest

CATALOG_ENV_VARS = (
    "PATTERN_CATALOG_CONFIG",
    "LOG_LEVEL",
    "LOG_DESTINATION",
    "PATTERN_CATALOG_LOGDIR",
)


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Remove environment variables that change configuration defaults."""
    for name in CATALOG_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo handler changes made by setup_logging."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    for handler in root.handlers[:]:
        root.removeHandler(handler)
        if handler not in handlers:
            handler.close()
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)

