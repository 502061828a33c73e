"""Operation result dataclass.

Every client call, schema validation and acquisition in the scraper returns
an OperationResult instead of raising, so callers branch on `status` and the
typed detail in `data`.
"""

from typing import Optional, Any
from dataclasses import dataclass

from infrastructure.operations.status import OperationStatus


@dataclass
class OperationResult:
    """Outcome of one operation.

    Attributes:
        status: OperationStatus -- high-level outcome
        message: str -- human-friendly message for logs
        data: Optional[Any] -- payload on success, typed error detail on failure
        error_code: Optional[str] -- machine error code (e.g. RATE_LIMITED)
        retry_after: Optional[int] -- seconds the upstream asked us to wait
    """

    status: OperationStatus
    message: str
    data: Optional[Any] = None
    error_code: Optional[str] = None
    retry_after: Optional[int] = None

    @property
    def is_success(self) -> bool:
        return self.status == OperationStatus.SUCCESS

    @property
    def is_not_found(self) -> bool:
        return self.status == OperationStatus.NOT_FOUND

    @classmethod
    def success(
        cls, data: Optional[Any] = None, message: str = "ok"
    ) -> "OperationResult":
        return cls(status=OperationStatus.SUCCESS, message=message, data=data)

    @classmethod
    def error(
        cls,
        status: OperationStatus,
        message: str,
        error_code: Optional[str] = None,
        retry_after: Optional[int] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """Create a failed result with an explicit status."""
        return cls(
            status=status,
            message=message,
            error_code=error_code,
            retry_after=retry_after,
            data=data,
        )

    @classmethod
    def transient_error(
        cls,
        message: str,
        error_code: Optional[str] = None,
        retry_after: Optional[int] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """A failure the next scheduled run may not hit.

        Timeouts, connection errors, rate limiting and upstream 5xx land here.
        Nothing retries them within the same invocation.
        """
        return cls.error(
            OperationStatus.TRANSIENT_ERROR, message, error_code, retry_after, data
        )

    @classmethod
    def permanent_error(
        cls,
        message: str,
        error_code: Optional[str] = None,
        data: Optional[Any] = None,
    ) -> "OperationResult":
        """A failure that recurs until the input or upstream changes.

        Schema validation failures and rejected requests land here.
        """
        return cls.error(
            OperationStatus.PERMANENT_ERROR, message, error_code, data=data
        )

    @classmethod
    def not_found(
        cls,
        message: str,
        error_code: str = "NOT_FOUND",
        data: Optional[Any] = None,
    ) -> "OperationResult":
        return cls.error(OperationStatus.NOT_FOUND, message, error_code, data=data)
