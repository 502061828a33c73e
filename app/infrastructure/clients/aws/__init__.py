"""Infrastructure AWS clients public API.

This package provides DI-friendly AWS clients built on a shared
SessionProvider and the `execute_aws_api_call` executor:

    from infrastructure.clients.aws import S3Client, SessionProvider

    store = S3Client(
        session_provider=SessionProvider(region="ca-central-1"),
        bucket_name="scryscraper-cache",
    )
    result = store.get_object_metadata("scryfall-cache/abc.json")
    if result.is_success:
        print(result.data.last_modified)
"""

from infrastructure.clients.aws.session_provider import SessionProvider
from infrastructure.clients.aws.s3 import S3Client, S3Object, S3ObjectMetadata

__all__ = [
    "SessionProvider",
    "S3Client",
    "S3Object",
    "S3ObjectMetadata",
]
