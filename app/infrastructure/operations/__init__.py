"""Operation result types and status enums.

This module contains the standardized result type shared by the clients and
services, the status enum, and the error classifiers that turn provider
failures into results.
"""

from infrastructure.operations.classifiers import (
    classify_aws_error,
    classify_http_response,
    classify_request_exception,
)
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
    "classify_aws_error",
    "classify_http_response",
    "classify_request_exception",
]
