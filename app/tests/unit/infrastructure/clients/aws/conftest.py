"""Fixtures for AWS client tests.

Provides factory-as-fixture helpers that swap `executor.get_boto3_client` for
a configurable fake, so S3Client and the executor run without boto3 network
access.
"""

from datetime import datetime, timezone

import pytest

from infrastructure.clients.aws import S3Client
from infrastructure.clients.aws.session_provider import SessionProvider
from tests.fixtures.aws_clients import FakeClient

LAST_MODIFIED = datetime(2025, 11, 22, 10, 0, tzinfo=timezone.utc)


@pytest.fixture
def make_fake_client(monkeypatch):
    """Patch the executor to hand out a FakeClient.

    Returns a factory taking an `api_responses` mapping. Each boto3 client
    request is recorded in `client.requests` as (service, kwargs).
    """

    def _factory(api_responses=None):
        client = FakeClient(api_responses=api_responses)
        client.requests = []

        def _get_client(
            service_name,
            session_config=None,
            client_config=None,
            role_arn=None,
            **_kwargs,
        ):
            client.requests.append(
                (
                    service_name,
                    {
                        "session_config": session_config,
                        "client_config": client_config,
                        "role_arn": role_arn,
                    },
                )
            )
            return client

        monkeypatch.setattr(
            "infrastructure.clients.aws.executor.get_boto3_client", _get_client
        )
        return client

    return _factory


@pytest.fixture
def session_provider():
    return SessionProvider(region="ca-central-1")


@pytest.fixture
def s3_client(session_provider):
    return S3Client(session_provider=session_provider, bucket_name="cache-bucket")


@pytest.fixture
def head_response():
    return {
        "LastModified": LAST_MODIFIED,
        "ContentLength": 512,
        "ContentType": "application/json",
        "Metadata": {"source-url": "https://api.scryfall.com/sets/tla"},
        "ETag": '"abc123"',
    }


@pytest.fixture
def last_modified():
    return LAST_MODIFIED
