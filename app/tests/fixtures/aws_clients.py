import io
from typing import Any

from botocore.exceptions import ClientError
from botocore.response import StreamingBody


class FakeClient:
    """Stand-in for a boto3 client.

    `api_responses` maps method names to a constant response or a callable
    receiving the call's keyword arguments. Every call is recorded.
    """

    def __init__(self, api_responses: dict | None = None):
        self._api_responses = api_responses or {}
        self.calls: list[tuple[str, dict]] = []

    def __getattr__(self, name: str):
        if name.startswith("_") or name not in self._api_responses:
            raise AttributeError(name)

        resp = self._api_responses[name]

        def _call(*_args: Any, **kwargs: Any):
            self.calls.append((name, kwargs))
            if callable(resp):
                return resp(**kwargs)
            return resp

        return _call


def client_error(code: str, operation: str = "HeadObject", message: str = ""):
    return ClientError(
        {"Error": {"Code": code, "Message": message or code}}, operation
    )


def raising(exc: Exception):
    def _raise(**_kwargs):
        raise exc

    return _raise


def streaming_body(text: str) -> StreamingBody:
    data = text.encode("utf-8")
    return StreamingBody(io.BytesIO(data), len(data))
