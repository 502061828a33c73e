"""Errors for the scryscraper module.

Acquisition failures are values, not exceptions: the service returns them
as the `data` of an error OperationResult. `ScryscraperError` wraps one
when the scheduled handler needs to fail the invocation.
"""

from dataclasses import dataclass
from typing import ClassVar, Optional

from modules.scryscraper.schemas import SchemaValidationError


@dataclass(frozen=True)
class AcquisitionError:
    """Base for terminal acquisition failures of one request target."""

    target: str

    error_code: ClassVar[str] = "ACQUISITION_ERROR"

    def describe(self) -> str:
        return f"Acquisition failed for {self.target}"


@dataclass(frozen=True)
class NotFound(AcquisitionError):
    """Upstream reports that the resource does not exist."""

    error_code: ClassVar[str] = "NOT_FOUND"

    def describe(self) -> str:
        return f"Resource not found: {self.target}"


@dataclass(frozen=True)
class RateLimited(AcquisitionError):
    """Upstream rejected the request for exceeding its rate limit."""

    retry_after: Optional[int] = None

    error_code: ClassVar[str] = "RATE_LIMITED"

    def describe(self) -> str:
        return f"Upstream rate limit exceeded for {self.target}"


@dataclass(frozen=True)
class UpstreamFailure(AcquisitionError):
    """Transport failure or unexpected upstream status."""

    detail: str = ""
    upstream_error_code: Optional[str] = None

    error_code: ClassVar[str] = "UPSTREAM_FAILURE"

    def describe(self) -> str:
        return f"Upstream request failed for {self.target}: {self.detail}"


@dataclass(frozen=True)
class InvalidResponse(AcquisitionError):
    """Upstream answered successfully with a payload that fails the schema."""

    error: Optional[SchemaValidationError] = None

    error_code: ClassVar[str] = "INVALID_RESPONSE"

    def describe(self) -> str:
        summary = self.error.summary() if self.error else "no details"
        return f"Invalid upstream response for {self.target}: {summary}"


class ScryscraperError(Exception):
    """Raised by the scheduled handler when an acquisition fails.

    Attributes:
        message: human-friendly message
        error: the AcquisitionError returned by the service, if any
    """

    def __init__(self, message: str, error: Optional[AcquisitionError] = None):
        super().__init__(message)
        self.error = error


class ConfigurationError(Exception):
    """Raised when a required setting is missing at invocation time."""
