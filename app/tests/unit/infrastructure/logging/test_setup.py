"""Unit tests for infrastructure.logging.setup module.

Tests cover:
- configure_logging in and outside the test environment
- get_module_logger context binding
"""

import logging

import pytest
import structlog
from structlog.testing import capture_logs

from infrastructure.logging.setup import (
    APP_NAME,
    _is_test_environment,
    build_processors,
    configure_logging,
    get_module_logger,
)


def _renderer():
    return structlog.get_config()["processors"][-1]


@pytest.mark.unit
class TestIsTestEnvironment:
    def test_detects_pytest_in_sys_modules(self):
        """pytest is running these tests, so it's in sys.modules."""
        assert _is_test_environment() is True


@pytest.mark.unit
class TestConfigureLoggingUnderPytest:
    """Under pytest every log is swallowed."""

    def test_returns_logger(self, mock_settings):
        result = configure_logging(settings=mock_settings)

        assert hasattr(result, "info")
        assert hasattr(result, "error")

    def test_suppresses_output(self, mock_settings):
        configure_logging(settings=mock_settings, log_level="DEBUG")

        assert logging.root.level == logging.CRITICAL + 1

    def test_settings_not_required(self):
        assert configure_logging() is not None

    def test_does_not_cache_loggers(self):
        configure_logging()

        assert structlog.get_config()["cache_logger_on_first_use"] is False

    def test_module_logger_captured_after_reconfigure(self):
        module_logger = structlog.get_logger()
        configure_logging()
        module_logger.bind(component="first")

        configure_logging()
        with capture_logs() as logs:
            module_logger.bind(component="second").info("cache_hit")

        assert [entry["event"] for entry in logs] == ["cache_hit"]


@pytest.mark.unit
class TestConfigureLoggingOutsideTests:
    def test_console_renderer_in_development(self, mock_settings, outside_tests):
        configure_logging(settings=mock_settings)

        assert isinstance(_renderer(), structlog.dev.ConsoleRenderer)
        assert logging.root.level == logging.INFO

    def test_json_renderer_in_production(self, mock_settings, outside_tests):
        mock_settings.is_production = True

        configure_logging(settings=mock_settings)

        assert isinstance(_renderer(), structlog.processors.JSONRenderer)

    def test_overrides_win_over_settings(self, mock_settings, outside_tests):
        configure_logging(settings=mock_settings, log_level="debug", is_production=True)

        assert logging.root.level == logging.DEBUG
        assert isinstance(_renderer(), structlog.processors.JSONRenderer)

    def test_unknown_level_falls_back_to_info(self, mock_settings, outside_tests):
        configure_logging(settings=mock_settings, log_level="LOUD")

        assert logging.root.level == logging.INFO

    def test_adds_app_info(self, mock_settings, outside_tests):
        configure_logging(settings=mock_settings)

        processors = structlog.get_config()["processors"]
        event = {"event": "x"}
        for processor in processors:
            if getattr(processor, "__qualname__", "").startswith("add_app_info"):
                event = processor(None, "info", event)

        assert event["app_name"] == APP_NAME
        assert event["app_version"] == "abc1234"


@pytest.mark.unit
class TestGetModuleLogger:
    def test_binds_calling_module(self):
        logger = get_module_logger()

        context = structlog.get_context(logger)
        assert context["module_path"] == __name__
        assert context["component"] == __name__.split(".")[-1]


@pytest.mark.unit
class TestBuildProcessors:
    def test_json_output(self):
        processors = build_processors("abc1234", json_output=True)

        assert processors[0] is structlog.contextvars.merge_contextvars
        assert isinstance(processors[-1], structlog.processors.JSONRenderer)

    def test_console_output(self):
        processors = build_processors("abc1234", json_output=False)

        assert isinstance(processors[-1], structlog.dev.ConsoleRenderer)
