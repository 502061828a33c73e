"""Collaborator protocols for the acquisition service.

`S3Client` and `ScryfallClient` satisfy these structurally; tests substitute
in-memory fakes.
"""

from typing import Dict, Optional, Protocol, runtime_checkable

from infrastructure.operations.result import OperationResult


@runtime_checkable
class ObjectStore(Protocol):
    """Key/value object store with last-modified metadata.

    Missing keys are reported as NOT_FOUND results.
    """

    def get_object_metadata(self, key: str) -> OperationResult:  # pragma: no cover
        ...

    def get_object(self, key: str) -> OperationResult:  # pragma: no cover
        ...

    def put_object(
        self,
        key: str,
        body: str,
        content_type: str = "application/json",
        metadata: Optional[Dict[str, str]] = None,
    ) -> OperationResult:  # pragma: no cover
        ...


@runtime_checkable
class UpstreamClient(Protocol):
    """Read-only upstream API returning RawResponse data on success."""

    base_url: str

    def get(self, path_or_url: str) -> OperationResult:  # pragma: no cover
        ...
