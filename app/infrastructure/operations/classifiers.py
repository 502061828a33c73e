"""Error classifiers for provider exceptions and responses.

Converts provider-specific failures (HTTP responses from the Scryfall API,
requests exceptions, AWS SDK errors) into standardized OperationResult
objects. Centralizes error classification so the clients themselves only
decide *when* to classify, never *how*.

Key Functions:
- classify_http_response(): non-2xx requests.Response → OperationResult
- classify_request_exception(): requests exceptions → OperationResult
- classify_aws_error(): AWS SDK errors → OperationResult

Usage:
    from infrastructure.operations.classifiers import (
        classify_http_response,
        classify_request_exception,
        classify_aws_error,
    )

    try:
        response = session.get(url, timeout=10)
    except requests.RequestException as exc:
        return classify_request_exception(exc)
    if not response.ok:
        return classify_http_response(response)
"""

from typing import Optional

import requests
from botocore.exceptions import ClientError

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

DEFAULT_RETRY_AFTER_SECONDS = 60

AWS_THROTTLING_CODES = frozenset(
    {
        "Throttling",
        "ThrottlingException",
        "RequestLimitExceeded",
        "SlowDown",
        "TooManyRequestsException",
    }
)
AWS_NOT_FOUND_CODES = frozenset(
    {
        "404",
        "NoSuchKey",
        "NotFound",
        "NoSuchBucket",
        "ResourceNotFoundException",
    }
)
AWS_ACCESS_DENIED_CODES = frozenset(
    {"403", "AccessDenied", "AccessDeniedException", "UnauthorizedOperation"}
)
AWS_VALIDATION_CODES = frozenset(
    {
        "ValidationException",
        "InvalidParameterException",
        "InvalidArgument",
        "InvalidBucketName",
        "BadRequestException",
    }
)


def _parse_retry_after(value: Optional[str]) -> int:
    """Parse a Retry-After header value given in seconds.

    HTTP-date values and malformed headers fall back to the default.
    """
    if not value:
        return DEFAULT_RETRY_AFTER_SECONDS
    try:
        return max(int(value), 0)
    except (ValueError, TypeError):
        return DEFAULT_RETRY_AFTER_SECONDS


def _describe_response(response: requests.Response) -> str:
    """Build a short diagnostic from an error response body.

    Scryfall error objects carry a `details` field; anything else is
    truncated raw text.
    """
    try:
        payload = response.json()
    except ValueError:
        payload = None

    if isinstance(payload, dict):
        for key in ("details", "detail", "error", "message"):
            if payload.get(key):
                return str(payload[key])

    text = response.text or ""
    return text[:200] if text else (response.reason or "no response body")


def classify_http_response(response: requests.Response) -> OperationResult:
    """Classify a non-success HTTP response into OperationResult.

    Status Code Mapping:
    - 404: Not found → NOT_FOUND
    - 429: Rate limiting → TRANSIENT_ERROR with retry_after
    - 401/403: Credentials or access rejected → UNAUTHORIZED
    - 5xx: Server error → TRANSIENT_ERROR
    - Other 4xx: Rejected request → PERMANENT_ERROR
    - Anything else (1xx/3xx left unresolved) → TRANSIENT_ERROR

    Args:
        response: requests.Response whose status is not 2xx

    Returns:
        OperationResult with status, message, error_code and retry_after
        (rate limiting only)
    """
    status_code = response.status_code
    detail = _describe_response(response)

    if status_code == 404:
        return OperationResult.not_found(
            f"Upstream resource not found: {detail}",
            error_code="NOT_FOUND",
        )

    if status_code == 429:
        return OperationResult.transient_error(
            "Upstream API rate limited",
            error_code="RATE_LIMITED",
            retry_after=_parse_retry_after(response.headers.get("Retry-After")),
        )

    if status_code in (401, 403):
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            f"Upstream API rejected credentials ({status_code}): {detail}",
            error_code=f"HTTP_{status_code}",
        )

    if 500 <= status_code < 600:
        return OperationResult.transient_error(
            f"Upstream API server error ({status_code}): {detail}",
            error_code=f"HTTP_{status_code}",
        )

    if 400 <= status_code < 500:
        return OperationResult.permanent_error(
            f"Upstream API client error ({status_code}): {detail}",
            error_code=f"HTTP_{status_code}",
        )

    return OperationResult.transient_error(
        f"Unexpected status code: {status_code}",
        error_code=f"HTTP_{status_code}",
    )


def classify_request_exception(exc: Exception) -> OperationResult:
    """Classify a transport-level exception raised by requests.

    Exception Mapping:
    - requests.Timeout → TRANSIENT_ERROR (TIMEOUT)
    - requests.ConnectionError → TRANSIENT_ERROR (CONNECTION_ERROR)
    - Other exceptions → TRANSIENT_ERROR (REQUEST_ERROR)

    Args:
        exc: Exception raised while sending the request

    Returns:
        OperationResult with TRANSIENT_ERROR status
    """
    if isinstance(exc, requests.Timeout):
        return OperationResult.transient_error(
            f"Request timed out: {exc}",
            error_code="TIMEOUT",
        )

    if isinstance(exc, requests.ConnectionError):
        return OperationResult.transient_error(
            f"Connection error: {exc}",
            error_code="CONNECTION_ERROR",
        )

    return OperationResult.transient_error(
        f"Request failed: {type(exc).__name__}: {exc}",
        error_code="REQUEST_ERROR",
    )


def classify_aws_error(exc: Exception) -> OperationResult:
    """Classify AWS SDK errors into OperationResult.

    Handles botocore.exceptions.ClientError exceptions by mapping AWS error
    codes to OperationStatus values. S3 reports a missing object as "404"
    from head_object and "NoSuchKey" from get_object; both map to NOT_FOUND.
    Follows AWS SDK convention of treating unknown errors as transient.

    Error Code Mapping:
    - Throttling codes (SlowDown, ThrottlingException, ...) → TRANSIENT_ERROR
      with retry_after
    - Missing object/bucket codes → NOT_FOUND
    - Access denied codes → UNAUTHORIZED
    - Validation codes → PERMANENT_ERROR
    - Other: Unknown error → TRANSIENT_ERROR

    Args:
        exc: Exception raised by AWS SDK (boto3/botocore)

    Returns:
        OperationResult with appropriate status, message, error_code, and
        retry_after (if applicable)
    """
    if not isinstance(exc, ClientError):
        # BotoCoreError (endpoint, credentials, read timeout) and the like
        return OperationResult.transient_error(
            f"AWS connection error: {type(exc).__name__}: {str(exc)}",
            error_code="CONNECTION_ERROR",
        )

    error_info = exc.response.get("Error", {}) if exc.response else {}
    error_code = str(error_info.get("Code", "Unknown"))
    error_message = error_info.get("Message") or str(exc)

    if error_code in AWS_THROTTLING_CODES:
        return OperationResult.transient_error(
            f"AWS API throttled: {error_message}",
            error_code="RATE_LIMITED",
            retry_after=DEFAULT_RETRY_AFTER_SECONDS,
        )

    if error_code in AWS_NOT_FOUND_CODES:
        return OperationResult.not_found(
            f"AWS resource not found: {error_code}",
            error_code="NOT_FOUND",
        )

    if error_code in AWS_ACCESS_DENIED_CODES:
        return OperationResult.error(
            OperationStatus.UNAUTHORIZED,
            f"AWS API access denied: {error_message}",
            error_code="FORBIDDEN",
        )

    if error_code in AWS_VALIDATION_CODES:
        return OperationResult.permanent_error(
            f"AWS validation error: {error_code}: {error_message}",
            error_code="INVALID_REQUEST",
        )

    return OperationResult.transient_error(
        f"AWS client error: {error_code}: {error_message}",
        error_code="AWS_CLIENT_ERROR",
    )
