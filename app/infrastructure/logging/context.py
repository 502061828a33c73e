"""Invocation context binding for structured logging.

Binds invocation-scoped metadata (correlation ID, trigger details) to
structlog's context variables so that every log entry emitted while a
scheduled run is in progress carries it.

Usage:
    from infrastructure.logging import bind_invocation_context

    with bind_invocation_context(correlation_id=event.get("id"), set_code="tla"):
        logger.info("scrape_started")
"""

import uuid
from contextlib import contextmanager
from typing import Any, Generator, Optional

import structlog


@contextmanager
def bind_invocation_context(
    correlation_id: Optional[str] = None,
    trigger: Optional[str] = None,
    **extra_context: Any,
) -> Generator[str, None, None]:
    """Bind invocation-scoped context to all logs within the block.

    Args:
        correlation_id: Unique invocation identifier (e.g. the scheduler's
            event id). Generated when not provided.
        trigger: What started the invocation (e.g. "aws.events").
        **extra_context: Additional key-value pairs to include in logs.

    Yields:
        The correlation ID bound for the block.
    """
    context: dict[str, Any] = {"correlation_id": correlation_id or str(uuid.uuid4())}

    if trigger is not None:
        context["trigger"] = trigger

    context.update(extra_context)

    structlog.contextvars.bind_contextvars(**context)
    try:
        yield context["correlation_id"]
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context."""
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("correlation_id")


def clear_invocation_context() -> None:
    """Clear all invocation-scoped context.

    Lambda reuses warm processes between invocations, so the handler calls
    this before binding new context.
    """
    structlog.contextvars.clear_contextvars()
