"""Root conftest - shared test configuration."""

import logging

import pytest

from passguard.config import get_settings


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch):
    """Tests never read the developer's PASSGUARD_* env or cached settings."""
    monkeypatch.delenv("PASSGUARD_LOG_LEVEL", raising=False)
    monkeypatch.delenv("PASSGUARD_LOG_FORMAT", raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """Undo any handler/level changes made by setup_logging."""
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)
