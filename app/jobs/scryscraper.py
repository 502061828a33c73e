"""Scheduled entry point for the Scryfall set scraper.

Invoked by an EventBridge schedule (one event per tick). Each invocation
acquires the configured set through the 24-hour cache and logs the cache
status, so the schedule can run more often than the cache window without
hitting Scryfall more than once a day.
"""

from typing import Any, Optional

from infrastructure.configuration import Settings
from infrastructure.logging import (
    bind_invocation_context,
    clear_invocation_context,
    configure_logging,
    get_module_logger,
)
from infrastructure.services import get_scryscraper_service, get_settings
from modules.scryscraper.errors import (
    AcquisitionError,
    ConfigurationError,
    ScryscraperError,
)
from modules.scryscraper.models import FetchOutcome

logger = get_module_logger()

_logging_configured = False


def _ensure_logging(settings: Settings) -> None:
    global _logging_configured
    if not _logging_configured:
        configure_logging(settings=settings)
        _logging_configured = True


def validate_environment(settings: Settings) -> None:
    """Check the settings a scrape cannot run without.

    Raises:
        ConfigurationError: If the cache bucket or set code is missing
    """
    if not settings.scryscraper.CACHE_BUCKET:
        raise ConfigurationError(
            "Missing required environment variable: SCRYSCRAPER_CACHE_BUCKET"
        )
    if not settings.scryscraper.SET_CODE:
        raise ConfigurationError(
            "Missing required environment variable: SCRYFALL_SET_CODE"
        )


def _summarize(outcome: FetchOutcome) -> dict[str, Any]:
    record = outcome.record
    return {
        "set_code": record.code,
        "set_name": record.name,
        "card_count": record.card_count,
        "released_at": record.released_at,
        "set_type": record.set_type,
        "from_cache": outcome.from_cache,
        "cache_age_ms": outcome.cache_age_ms,
    }


def handler(event: Optional[dict] = None, context: Any = None) -> dict[str, Any]:
    """Scrape the configured set once.

    Args:
        event: EventBridge scheduled event
        context: Lambda context (only the request id is used)

    Returns:
        Summary of the acquired set and its cache status

    Raises:
        ConfigurationError: If required settings are missing
        ScryscraperError: If the acquisition failed; carries the
            AcquisitionError so the invocation is recorded as failed
    """
    event = event or {}
    settings = get_settings()
    _ensure_logging(settings)
    clear_invocation_context()

    with bind_invocation_context(
        correlation_id=event.get("id"),
        trigger=event.get("source"),
        aws_request_id=getattr(context, "aws_request_id", None),
    ):
        log = logger.bind(detail_type=event.get("detail-type"))
        log.info("scheduled_invocation", scheduled_time=event.get("time"))

        try:
            validate_environment(settings)
            log = log.bind(
                cache_bucket=settings.scryscraper.CACHE_BUCKET,
                set_code=settings.scryscraper.SET_CODE,
            )

            service = get_scryscraper_service()
            result = service.get_set(settings.scryscraper.SET_CODE)

            if not result.is_success:
                error = result.data if isinstance(result.data, AcquisitionError) else None
                log.error(
                    "scrape_failed",
                    status=result.status.value,
                    error_code=result.error_code,
                    retry_after=result.retry_after,
                    error=result.message,
                )
                raise ScryscraperError(result.message, error=error)

            outcome: FetchOutcome = result.data
            summary = _summarize(outcome)
            log.info(
                "scrape_succeeded",
                cache_status=outcome.cache_status,
                cache_age_minutes=outcome.cache_age_minutes,
                **summary,
            )
            return summary

        except ScryscraperError:
            raise
        except Exception as e:
            log.exception("handler_failed", error=str(e), error_type=type(e).__name__)
            raise
