"""Fixtures for infrastructure.logging tests."""

import pytest
import structlog
from unittest.mock import Mock

from infrastructure.configuration import Settings
from infrastructure.logging import setup


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.GIT_SHA = "abc1234"
    settings.is_production = False
    return settings


@pytest.fixture
def outside_tests(monkeypatch):
    """Run configure_logging as it would outside pytest, then quiet it again."""
    monkeypatch.setattr(setup, "_is_test_environment", lambda: False)
    yield
    monkeypatch.undo()
    setup.configure_logging()


@pytest.fixture
def clean_contextvars():
    structlog.contextvars.clear_contextvars()
    yield
    structlog.contextvars.clear_contextvars()
