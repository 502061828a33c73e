"""Structlog configuration and logger setup.

The scheduled handler calls `configure_logging` once per cold start. Output
goes to stdout, where Lambda ships it to CloudWatch: JSON in production,
coloured console lines everywhere else. Under pytest all output is dropped.

Usage:
    from infrastructure.logging import configure_logging, get_module_logger

    configure_logging()

    logger = get_module_logger()
    logger.info("cache_hit", cache_age_ms=1200)
"""

import inspect
import logging
import sys
from typing import TYPE_CHECKING, Any, Optional

import structlog
from structlog.stdlib import BoundLogger

from infrastructure.logging.formatters import (
    add_app_info,
    mask_sensitive_data,
    truncate_large_values,
)

if TYPE_CHECKING:
    from infrastructure.configuration import Settings

APP_NAME = "scryscraper"
SILENT_LEVEL = logging.CRITICAL + 1


def _is_test_environment() -> bool:
    """True when running under pytest."""
    return "pytest" in sys.modules


def _apply(
    processors: list[Any], level: int, stream=None, cache: bool = True
) -> BoundLogger:
    structlog.configure(
        processors=processors,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=cache,
    )
    # Lambda installs its own root handler; force replaces it
    logging.basicConfig(format="%(message)s", stream=stream, level=level, force=True)
    return structlog.stdlib.get_logger()


def build_processors(app_version: str, json_output: bool) -> list[Any]:
    """Processor chain for real (non-test) runs.

    Context variables (correlation id, trigger) are merged first so the
    masking and truncation processors see them too.
    """
    return [
        structlog.contextvars.merge_contextvars,
        structlog.stdlib.add_log_level,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.processors.CallsiteParameterAdder(
            parameters=[
                structlog.processors.CallsiteParameter.FILENAME,
                structlog.processors.CallsiteParameter.LINENO,
                structlog.processors.CallsiteParameter.FUNC_NAME,
            ]
        ),
        add_app_info(APP_NAME, app_version),
        mask_sensitive_data(),
        truncate_large_values(),
        structlog.processors.StackInfoRenderer(),
        structlog.processors.format_exc_info,
        (
            structlog.processors.JSONRenderer()
            if json_output
            else structlog.dev.ConsoleRenderer()
        ),
    ]


def configure_logging(
    settings: Optional["Settings"] = None,
    log_level: Optional[str] = None,
    is_production: Optional[bool] = None,
) -> BoundLogger:
    """Configure structlog and the stdlib root logger.

    Args:
        settings: Settings instance; loaded through get_settings() when
            omitted and an override below is missing.
        log_level: Override for settings.LOG_LEVEL (DEBUG, INFO, ...).
            Unknown names fall back to INFO.
        is_production: Override for settings.is_production; selects JSON
            output.

    Returns:
        Configured logger instance
    """
    if _is_test_environment():
        return _apply(
            [
                structlog.stdlib.add_log_level,
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            SILENT_LEVEL,
            # module-level loggers must pick up capture_logs after reconfiguration
            cache=False,
        )

    if settings is None and (log_level is None or is_production is None):
        from infrastructure.services.providers import get_settings

        settings = get_settings()

    json_output = is_production if is_production is not None else settings.is_production
    level_name = (log_level or settings.LOG_LEVEL).upper()
    app_version = settings.GIT_SHA if settings is not None else "unknown"

    return _apply(
        build_processors(app_version, json_output),
        getattr(logging, level_name, logging.INFO),
        stream=sys.stdout,
    )


def get_module_logger() -> BoundLogger:
    """Get a logger bound to the calling module.

    Example:
        # In jobs/scryscraper.py
        logger = get_module_logger()
        # context: {"component": "scryscraper", "module_path": "jobs.scryscraper"}
    """
    base = structlog.stdlib.get_logger()

    current_frame = inspect.currentframe()
    frame = current_frame.f_back if current_frame else None
    module = inspect.getmodule(frame) if frame else None
    if module is None:
        return base.bind(component="unknown")

    module_name = module.__name__
    return base.bind(component=module_name.split(".")[-1], module_path=module_name)
