"""Low-level boto3 access for the AWS clients.

`get_boto3_client` builds a client (assuming a role when asked) and
`execute_aws_api_call` runs one API method, classifying failures into
OperationResult. Configuration comes in through parameters; nothing here
reads settings.
"""

import time
from typing import Any, Dict, Optional

import boto3  # type: ignore
from botocore.client import BaseClient  # type: ignore
from botocore.exceptions import BotoCoreError, ClientError  # type: ignore
import structlog

from infrastructure.operations.classifiers import classify_aws_error
from infrastructure.operations.result import OperationResult
from infrastructure.operations.status import OperationStatus

logger = structlog.get_logger()

ASSUMED_ROLE_SESSION_NAME = "ScryscraperSession"


def _assume_role_credentials(role_arn: str, session_name: str) -> Dict[str, str]:
    credentials = boto3.client("sts").assume_role(
        RoleArn=role_arn, RoleSessionName=session_name
    )["Credentials"]
    return {
        "aws_access_key_id": credentials["AccessKeyId"],
        "aws_secret_access_key": credentials["SecretAccessKey"],
        "aws_session_token": credentials["SessionToken"],
    }


def get_boto3_client(
    service_name: str,
    session_config: Optional[Dict[str, Any]] = None,
    client_config: Optional[Dict[str, Any]] = None,
    role_arn: Optional[str] = None,
    session_name: str = ASSUMED_ROLE_SESSION_NAME,
) -> BaseClient:
    """Create a boto3 client for the given service.

    Args:
        service_name: AWS service name (e.g., 's3')
        session_config: Optional boto3 session kwargs (e.g., region_name)
        client_config: Optional client kwargs (e.g., endpoint_url)
        role_arn: Optional role to assume; its temporary credentials back
            the session
        session_name: Name for the assumed role session

    Returns:
        botocore client instance
    """
    session_kwargs = dict(session_config or {})
    if role_arn:
        session_kwargs.update(_assume_role_credentials(role_arn, session_name))

    return boto3.Session(**session_kwargs).client(
        service_name, **(client_config or {})
    )


def _calculate_retry_delay(attempt: int, backoff_factor: float = 0.5) -> float:
    return backoff_factor * (2**attempt)


def execute_aws_api_call(
    service_name: str,
    method: str,
    role_arn: Optional[str] = None,
    session_config: Optional[Dict[str, Any]] = None,
    client_config: Optional[Dict[str, Any]] = None,
    max_retries: int = 0,
    backoff_factor: float = 0.5,
    **kwargs,
) -> OperationResult:
    """Call `method` on a fresh `service_name` client.

    Failures are classified with `classify_aws_error`. With `max_retries`
    above zero, transient failures are retried with exponential backoff;
    the default is a single attempt.

    Args:
        service_name: AWS service name (e.g., 's3')
        method: Client method name (e.g., 'head_object')
        role_arn, session_config, client_config: See get_boto3_client
        max_retries: Extra attempts for transient failures
        backoff_factor: Base delay in seconds, doubled on each retry
        **kwargs: Parameters for the API method

    Returns:
        OperationResult whose data is the raw boto3 response on success
    """
    log = logger.bind(service=service_name, method=method)
    attempt = 0

    while True:
        try:
            client = get_boto3_client(
                service_name,
                session_config=session_config,
                client_config=client_config,
                role_arn=role_arn,
            )
            response = getattr(client, method)(**kwargs)
        except (ClientError, BotoCoreError) as e:
            result = classify_aws_error(e)
            if (
                result.status == OperationStatus.TRANSIENT_ERROR
                and attempt < max_retries
            ):
                delay = _calculate_retry_delay(attempt, backoff_factor)
                log.warning(
                    "aws_call_retrying",
                    attempt=attempt + 1,
                    delay=delay,
                    error_code=result.error_code,
                )
                time.sleep(delay)
                attempt += 1
                continue

            if result.is_not_found:
                log.debug("aws_call_not_found")
            else:
                log.error(
                    "aws_call_failed",
                    error=str(e),
                    error_code=result.error_code,
                    attempts=attempt + 1,
                )
            return result
        except Exception as e:  # pylint: disable=broad-except
            log.error(
                "aws_call_unexpected_error", error=str(e), error_type=type(e).__name__
            )
            return OperationResult.permanent_error(
                message=str(e), error_code="UNEXPECTED_ERROR"
            )

        return OperationResult.success(
            data=response, message=f"{service_name}.{method} succeeded"
        )
