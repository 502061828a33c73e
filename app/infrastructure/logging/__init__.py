"""Structured logging infrastructure.

This package provides centralized logging configuration and utilities
for Scryscraper using structlog.

Public API:
    - configure_logging(): Initialize logging for the process
    - get_module_logger(): Get a logger for the calling module
    - bind_invocation_context(): Context manager for invocation-scoped logging
    - get_correlation_id(): Get current correlation ID from context
    - clear_invocation_context(): Clear all invocation context

Processors:
    - add_app_info(): Add app name/version
    - mask_sensitive_data(): Redact sensitive fields
    - truncate_large_values(): Limit string lengths

Example:
    from infrastructure.logging import (
        configure_logging,
        get_module_logger,
        bind_invocation_context,
    )

    configure_logging()
    logger = get_module_logger()

    with bind_invocation_context(trigger="aws.events"):
        logger.info("scrape_started")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_module_logger,
)

from infrastructure.logging.context import (
    bind_invocation_context,
    get_correlation_id,
    clear_invocation_context,
)

from infrastructure.logging.formatters import (
    add_app_info,
    mask_sensitive_data,
    truncate_large_values,
    SENSITIVE_PATTERNS,
)

__all__ = [
    # Setup
    "configure_logging",
    "get_module_logger",
    # Context
    "bind_invocation_context",
    "get_correlation_id",
    "clear_invocation_context",
    # Processors
    "add_app_info",
    "mask_sensitive_data",
    "truncate_large_values",
    "SENSITIVE_PATTERNS",
]
