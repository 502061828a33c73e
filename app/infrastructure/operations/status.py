"""Operation status enumeration.

Status codes attached to every OperationResult so that callers can decide
between serving data, surfacing a terminal error, or letting the next
scheduled run try again.
"""

from enum import Enum


class OperationStatus(Enum):
    """Status codes for operation results.

    Attributes:
        SUCCESS: Operation completed successfully
        TRANSIENT_ERROR: Error that may clear on a later run (network, timeout,
            rate limit, 5xx)
        PERMANENT_ERROR: Error that will not clear on its own (bad payload,
            rejected request)
        UNAUTHORIZED: Credentials were rejected
        NOT_FOUND: The requested resource or object does not exist
    """

    SUCCESS = "success"
    TRANSIENT_ERROR = "transient_error"
    PERMANENT_ERROR = "permanent_error"
    UNAUTHORIZED = "unauthorized"
    NOT_FOUND = "not_found"
