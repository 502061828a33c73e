"""S3 client for AWS operations.

Provides the object store operations the scraper cache needs (head, get and
put of string bodies within a single bucket) with consistent error handling
and OperationResult return types. Missing objects are reported as
NOT_FOUND results rather than errors.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import structlog
from botocore.exceptions import BotoCoreError  # type: ignore

from infrastructure.clients.aws import executor
from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.operations.classifiers import classify_aws_error
from infrastructure.operations.result import OperationResult

logger = structlog.get_logger()


@dataclass(frozen=True)
class S3ObjectMetadata:
    """Store-level attributes of an S3 object."""

    key: str
    last_modified: Optional[datetime] = None
    content_length: Optional[int] = None
    content_type: Optional[str] = None
    metadata: Dict[str, str] = field(default_factory=dict)
    etag: Optional[str] = None

    @classmethod
    def from_response(cls, key: str, response: Dict[str, Any]) -> "S3ObjectMetadata":
        """Build metadata from a head_object or get_object response."""
        return cls(
            key=key,
            last_modified=response.get("LastModified"),
            content_length=response.get("ContentLength"),
            content_type=response.get("ContentType"),
            metadata=dict(response.get("Metadata") or {}),
            etag=response.get("ETag"),
        )


@dataclass(frozen=True)
class S3Object:
    """Body and metadata of an S3 object."""

    body: str
    metadata: S3ObjectMetadata


class S3Client:
    """Client for S3 object operations within one bucket.

    All methods return OperationResult for consistent error handling and
    downstream processing.

    Args:
        session_provider: SessionProvider instance for credential/config management
        bucket_name: Bucket every operation targets
        default_role_arn: Optional role assumed for every call
        max_retries: Executor retries for transient errors (default: none)
    """

    def __init__(
        self,
        session_provider: SessionProvider,
        bucket_name: str,
        default_role_arn: Optional[str] = None,
        max_retries: int = 0,
    ) -> None:
        self._session_provider = session_provider
        self._bucket_name = bucket_name
        self._default_role_arn = default_role_arn
        self._max_retries = max_retries
        self._service_name = "s3"
        self._logger = logger.bind(component="s3_client", bucket=bucket_name)

    @property
    def bucket_name(self) -> str:
        return self._bucket_name

    def _call(self, method: str, **kwargs) -> OperationResult:
        client_kwargs = self._session_provider.build_client_kwargs(
            service_name=self._service_name, role_arn=self._default_role_arn
        )
        return executor.execute_aws_api_call(
            self._service_name,
            method,
            Bucket=self._bucket_name,
            max_retries=self._max_retries,
            **client_kwargs,
            **kwargs,
        )

    def get_object_metadata(self, key: str) -> OperationResult:
        """Get metadata about an object without downloading the body.

        Args:
            key: Object key

        Returns:
            OperationResult with S3ObjectMetadata, NOT_FOUND if the object does
            not exist, or an error
        """
        result = self._call("head_object", Key=key)
        if not result.is_success:
            return result
        return OperationResult.success(
            data=S3ObjectMetadata.from_response(key, result.data or {}),
            message="s3.head_object succeeded",
        )

    def get_object(self, key: str) -> OperationResult:
        """Get an object's body (decoded as UTF-8) and its metadata.

        Args:
            key: Object key

        Returns:
            OperationResult with S3Object, NOT_FOUND if the object does not
            exist, or an error
        """
        result = self._call("get_object", Key=key)
        if not result.is_success:
            return result

        response = result.data or {}
        stream = response.get("Body")
        if stream is None:
            return OperationResult.not_found(
                f"Object has no body: {key}", error_code="EMPTY_BODY"
            )

        try:
            body = stream.read().decode("utf-8")
        except (BotoCoreError, OSError) as e:
            self._logger.warning("s3_body_read_failed", key=key, error=str(e))
            return classify_aws_error(e)
        except UnicodeDecodeError as e:
            return OperationResult.permanent_error(
                f"Object body is not UTF-8: {e}", error_code="INVALID_ENCODING"
            )
        finally:
            close = getattr(stream, "close", None)
            if close:
                close()

        return OperationResult.success(
            data=S3Object(
                body=body, metadata=S3ObjectMetadata.from_response(key, response)
            ),
            message="s3.get_object succeeded",
        )

    def put_object(
        self,
        key: str,
        body: str,
        content_type: str = "application/json",
        metadata: Optional[Dict[str, str]] = None,
    ) -> OperationResult:
        """Write (or overwrite) an object.

        Args:
            key: Object key
            body: Object body, encoded as UTF-8
            content_type: Content-Type stored with the object
            metadata: Optional user metadata (S3 lower-cases the keys)

        Returns:
            OperationResult with the raw put_object response or error
        """
        return self._call(
            "put_object",
            Key=key,
            Body=body.encode("utf-8"),
            ContentType=content_type,
            Metadata=metadata or {},
        )

    def get_object_age_ms(
        self, key: str, now: Optional[datetime] = None
    ) -> OperationResult:
        """Get the age of an object in milliseconds from its LastModified.

        The caller decides what age is acceptable.

        Args:
            key: Object key
            now: Reference time (defaults to the current UTC time)

        Returns:
            OperationResult with the age as int, NOT_FOUND if the object does
            not exist or has no timestamp, or an error
        """
        result = self.get_object_metadata(key)
        if not result.is_success:
            return result

        last_modified = result.data.last_modified
        if last_modified is None:
            return OperationResult.not_found(
                f"Object has no last-modified timestamp: {key}",
                error_code="NO_TIMESTAMP",
            )

        reference = now or datetime.now(timezone.utc)
        age_ms = int((reference - last_modified).total_seconds() * 1000)
        return OperationResult.success(data=age_ms)

    def object_exists(self, key: str) -> OperationResult:
        """Check whether an object exists.

        Returns:
            OperationResult with a bool, or an error other than NOT_FOUND
        """
        result = self.get_object_metadata(key)
        if result.is_success:
            return OperationResult.success(data=True)
        if result.is_not_found:
            return OperationResult.success(data=False)
        return result

    def healthcheck(self) -> OperationResult:
        """Lightweight health check for the cache bucket.

        Performs a `head_bucket` call to verify the bucket is reachable.
        """
        result = self._call("head_bucket")
        if result.is_success:
            self._logger.info("healthcheck_success")
        else:
            self._logger.warning("healthcheck_failed", error=result.message)
        return result
