"""Infrastructure modules for Scryscraper.

Centralized infrastructure components:
- clients: AWS (S3) and Scryfall API clients
- configuration: Settings management
- logging: Structured logging setup and invocation context
- operations: Operation results and error classification
- services: Dependency injection providers (get_settings, get_cache_store, ...)
"""

from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

__all__ = [
    "OperationResult",
    "OperationStatus",
]
