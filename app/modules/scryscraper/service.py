"""
Business logic for acquiring Scryfall sets through the S3 cache.

Scryfall asks consumers to reuse fetched data for 24 hours. Each call checks
the cache entry's store timestamp, serves it while fresh, and otherwise
fetches, validates and writes the set back. The cache is only an
optimization: any problem reading it falls through to a fetch, and a failed
write never fails the call.
"""

from datetime import datetime, timezone
from typing import Callable, Optional, Tuple

import structlog

from infrastructure.clients.aws import S3Client, SessionProvider
from infrastructure.clients.scryfall import ScryfallClient
from infrastructure.configuration import Settings
from infrastructure.operations import OperationResult, OperationStatus
from modules.scryscraper.cache_keys import CacheKeyBuilder
from modules.scryscraper.errors import (
    AcquisitionError,
    InvalidResponse,
    NotFound,
    RateLimited,
    UpstreamFailure,
)
from modules.scryscraper.models import FetchOutcome
from modules.scryscraper.protocols import ObjectStore, UpstreamClient
from modules.scryscraper.schemas import ScryfallSet, validate_set_json

logger = structlog.get_logger()

TWENTY_FOUR_HOURS_MS = 24 * 60 * 60 * 1000
CACHE_CONTENT_TYPE = "application/json"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ScryscraperService:
    """Fetches sets from Scryfall with write-through S3 caching.

    Args:
        store: Object store holding cache entries
        upstream: Scryfall API client
        key_builder: Derives cache keys from request targets
        cache_ttl_ms: Freshness window; entries this old or older are stale
        clock: Returns the current time (timezone-aware)
    """

    def __init__(
        self,
        store: ObjectStore,
        upstream: UpstreamClient,
        key_builder: Optional[CacheKeyBuilder] = None,
        cache_ttl_ms: int = TWENTY_FOUR_HOURS_MS,
        clock: Callable[[], datetime] = _utcnow,
    ) -> None:
        self._store = store
        self._upstream = upstream
        self._key_builder = key_builder or CacheKeyBuilder()
        self._cache_ttl_ms = cache_ttl_ms
        self._clock = clock
        self._logger = logger.bind(component="scryscraper_service")

    def set_url(self, set_code: str) -> str:
        """Canonical request target for a set code."""
        return f"{self._upstream.base_url.rstrip('/')}/sets/{set_code.strip()}"

    def get_set(self, set_code: str) -> OperationResult:
        """Get a set by code with 24-hour caching.

        Args:
            set_code: Scryfall set code (e.g., "tla")

        Returns:
            See get_record
        """
        return self.get_record(self.set_url(set_code))

    def get_record(self, request_target: str) -> OperationResult:
        """Get the set at a request target, from cache when fresh.

        1. Derives the cache key from the target
        2. Serves the cached set if its store timestamp is within the TTL and
           it still validates
        3. Otherwise fetches from Scryfall and validates the response
        4. Writes the validated set back to the cache

        Args:
            request_target: URL (or API path) of the resource

        Returns:
            OperationResult with a FetchOutcome on success. On failure the
            data is the AcquisitionError (NotFound, RateLimited,
            UpstreamFailure or InvalidResponse) and error_code names it.
        """
        target = request_target.strip()
        key = self._key_builder.build(target)
        log = self._logger.bind(request_target=target, cache_key=key)

        cached, miss_reason = self._read_cache(key, log)
        if cached is not None:
            log.info("cache_hit", cache_age_ms=cached.cache_age_ms)
            return OperationResult.success(data=cached, message="served from cache")
        log.info("cache_miss", reason=miss_reason)

        fetched = self._fetch(target, log)
        if not fetched.is_success:
            return fetched

        record: ScryfallSet = fetched.data
        self._write_cache(key, target, record, log)

        log.info("set_fetched", code=record.code, card_count=record.card_count)
        return OperationResult.success(
            data=FetchOutcome(record=record, from_cache=False),
            message="fetched from upstream",
        )

    def _read_cache(
        self, key: str, log
    ) -> Tuple[Optional[FetchOutcome], Optional[str]]:
        """Return the cached set if present, fresh and valid.

        Otherwise the outcome is None and the second item names why the
        entry could not be served.
        """
        head = self._store.get_object_metadata(key)
        if head.is_not_found:
            return None, "absent"
        if not head.is_success:
            log.warning(
                "cache_read_failed",
                stage="metadata",
                error=head.message,
                error_code=head.error_code,
            )
            return None, "metadata_error"

        last_modified = head.data.last_modified
        if last_modified is None:
            log.warning("cache_read_failed", stage="metadata", error="no timestamp")
            return None, "no_timestamp"
        if last_modified.tzinfo is None:
            last_modified = last_modified.replace(tzinfo=timezone.utc)

        age_ms = max(int((self._clock() - last_modified).total_seconds() * 1000), 0)
        if age_ms >= self._cache_ttl_ms:
            log.info("cache_stale", cache_age_ms=age_ms)
            return None, "stale"

        body = self._store.get_object(key)
        if not body.is_success:
            log.warning(
                "cache_read_failed",
                stage="body",
                error=body.message,
                error_code=body.error_code,
            )
            return None, "body_error"

        validation = validate_set_json(body.data.body)
        if not validation.is_success:
            log.warning(
                "cached_data_failed_validation",
                errors=validation.data.to_dict(),
            )
            return None, "invalid_entry"

        outcome = FetchOutcome(
            record=validation.data, from_cache=True, cache_age_ms=age_ms
        )
        return outcome, None

    def _fetch(self, target: str, log) -> OperationResult:
        """Fetch and validate the set; errors carry an AcquisitionError."""
        log.info("fetching_from_upstream")
        response = self._upstream.get(target)

        if not response.is_success:
            error = self._classify_upstream_failure(target, response)
            log.error(
                "upstream_fetch_failed",
                error_code=error.error_code,
                upstream_error_code=response.error_code,
                retry_after=response.retry_after,
                error=response.message,
            )
            status = (
                OperationStatus.NOT_FOUND
                if isinstance(error, NotFound)
                else OperationStatus.TRANSIENT_ERROR
            )
            return self._failure(error, status, retry_after=response.retry_after)

        validation = validate_set_json(response.data.body)
        if not validation.is_success:
            error = InvalidResponse(target=target, error=validation.data)
            log.error(
                "upstream_response_failed_validation",
                errors=validation.data.to_dict(),
            )
            return self._failure(error, OperationStatus.PERMANENT_ERROR)

        return validation

    @staticmethod
    def _classify_upstream_failure(
        target: str, response: OperationResult
    ) -> AcquisitionError:
        if response.is_not_found:
            return NotFound(target=target)
        if response.error_code == "RATE_LIMITED":
            return RateLimited(target=target, retry_after=response.retry_after)
        return UpstreamFailure(
            target=target,
            detail=response.message,
            upstream_error_code=response.error_code,
        )

    @staticmethod
    def _failure(
        error: AcquisitionError,
        status: OperationStatus,
        retry_after: Optional[int] = None,
    ) -> OperationResult:
        return OperationResult.error(
            status,
            error.describe(),
            error_code=error.error_code,
            retry_after=retry_after,
            data=error,
        )

    def _write_cache(self, key: str, target: str, record: ScryfallSet, log) -> bool:
        """Write the set to the cache; failures are logged, never raised."""
        result = self._store.put_object(
            key,
            record.to_cache_json(),
            CACHE_CONTENT_TYPE,
            {
                "source-url": target,
                "cached-at": self._clock().isoformat(),
            },
        )
        if not result.is_success:
            log.warning(
                "cache_write_failed",
                error=result.message,
                error_code=result.error_code,
            )
            return False
        log.debug("cache_written")
        return True


def create_scryscraper_service(settings: Settings) -> ScryscraperService:
    """Build a ScryscraperService wired to S3 and the Scryfall API.

    Args:
        settings: Settings with aws, scryfall and scryscraper sections

    Returns:
        ScryscraperService using the configured bucket, prefix and TTL
    """
    session_provider = SessionProvider(
        region=settings.aws.AWS_REGION,
        service_role_map=settings.aws.SERVICE_ROLE_MAP,
        endpoint_url=settings.aws.ENDPOINT_URL,
    )
    store = S3Client(
        session_provider=session_provider,
        bucket_name=settings.scryscraper.CACHE_BUCKET,
        max_retries=settings.aws.MAX_RETRIES,
    )
    upstream = ScryfallClient(
        base_url=settings.scryfall.BASE_URL,
        user_agent=settings.scryfall.USER_AGENT,
        timeout=settings.scryfall.TIMEOUT_SECONDS,
    )
    return ScryscraperService(
        store=store,
        upstream=upstream,
        key_builder=CacheKeyBuilder(prefix=settings.scryscraper.CACHE_PREFIX),
        cache_ttl_ms=settings.scryscraper.cache_ttl_ms,
    )
