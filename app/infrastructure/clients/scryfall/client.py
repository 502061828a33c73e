"""Scryfall API client.

Performs read-only GET requests against the Scryfall API and normalizes every
outcome into an OperationResult. Scryfall requires an identifying
User-Agent and an explicit Accept header on every request, and asks clients
to space their requests; spacing is left to the scheduler that invokes the
scraper, so this client never retries or sleeps.

Usage:
    from infrastructure.clients.scryfall import ScryfallClient

    client = ScryfallClient(user_agent="scryscraper/1.0")
    result = client.get("/sets/tla")

    if result.is_success:
        body = result.data.body
    elif result.error_code == "RATE_LIMITED":
        ...
"""

from dataclasses import dataclass, field
from typing import Dict, Optional
from urllib.parse import urljoin

import requests
import structlog

from infrastructure.operations import (
    OperationResult,
    classify_http_response,
    classify_request_exception,
)

logger = structlog.get_logger()

DEFAULT_BASE_URL = "https://api.scryfall.com"
DEFAULT_USER_AGENT = "scryscraper/1.0"
DEFAULT_TIMEOUT_SECONDS = 10.0


@dataclass(frozen=True)
class RawResponse:
    """Undecoded successful response from the upstream API."""

    status_code: int
    body: str
    url: str
    headers: Dict[str, str] = field(default_factory=dict)


class ScryfallClient:
    """HTTP client for the Scryfall API.

    Attributes:
        base_url: Base address relative paths are resolved against
        timeout: Request timeout in seconds
        user_agent: Client label sent on every request
    """

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        user_agent: str = DEFAULT_USER_AGENT,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialize the Scryfall client.

        Args:
            base_url: Base address for relative request paths
            user_agent: Value of the User-Agent header
            timeout: Request timeout in seconds
            session: Optional preconfigured requests session
        """
        self.base_url = base_url.rstrip("/") + "/"
        self.user_agent = user_agent
        self.timeout = timeout
        self._session = session or requests.Session()
        self._session.headers.update(
            {
                "User-Agent": user_agent,
                "Accept": "application/json",
            }
        )
        self._logger = logger.bind(component="scryfall_client")

    def resolve_url(self, path_or_url: str) -> str:
        """Resolve a path against the base URL; absolute URLs pass through."""
        return urljoin(self.base_url, path_or_url.strip().lstrip("/"))

    def get(self, path_or_url: str) -> OperationResult:
        """Send a GET request to the Scryfall API.

        Args:
            path_or_url: API path (e.g., "/sets/tla") or absolute URL

        Returns:
            OperationResult with RawResponse on 2xx, or a classified error:
            NOT_FOUND for 404, TRANSIENT_ERROR/RATE_LIMITED for 429, and
            TRANSIENT/PERMANENT errors for everything else
        """
        url = self.resolve_url(path_or_url)
        log = self._logger.bind(method="GET", url=url)
        log.debug("scryfall_request")

        try:
            response = self._session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            result = classify_request_exception(e)
            log.error(
                "scryfall_transport_error",
                error=str(e),
                error_code=result.error_code,
                timeout=self.timeout,
            )
            return result

        log = log.bind(status_code=response.status_code)

        if 200 <= response.status_code < 300:
            log.debug("scryfall_success")
            return OperationResult.success(
                data=RawResponse(
                    status_code=response.status_code,
                    body=response.text,
                    url=url,
                    headers=dict(response.headers),
                ),
                message=f"GET {url} succeeded",
            )

        result = classify_http_response(response)
        if result.is_not_found:
            log.info("scryfall_not_found")
        elif result.error_code == "RATE_LIMITED":
            log.error(
                "scryfall_rate_limited",
                retry_after=result.retry_after,
                headers=dict(response.headers),
            )
        else:
            log.error(
                "scryfall_request_failed",
                error=result.message,
                error_code=result.error_code,
            )
        return result

    def close(self) -> None:
        """Close HTTP session and release connections."""
        self._session.close()
        self._logger.debug("scryfall_client_closed")


__all__ = ["RawResponse", "ScryfallClient"]
