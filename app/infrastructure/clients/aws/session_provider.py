"""Session configuration for AWS client operations.

Holds the region, endpoint override and per-service roles the S3 cache
client needs, and turns them into the kwargs `execute_aws_api_call` takes.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Optional

import structlog

logger = structlog.get_logger()


@dataclass(frozen=True)
class SessionProvider:
    """Region, endpoint and role settings shared by AWS service clients.

    Args:
        region: AWS region (e.g., 'ca-central-1'); boto3's default when None
        service_role_map: Role ARN to assume per service name (e.g., {'s3': ...})
        endpoint_url: Custom endpoint (LocalStack, MinIO)
    """

    region: Optional[str] = None
    service_role_map: Dict[str, str] = field(default_factory=dict)
    endpoint_url: Optional[str] = None

    def get_role_arn_for_service(self, service_name: str) -> Optional[str]:
        """Role ARN configured for a service, or None to use ambient credentials."""
        return (self.service_role_map or {}).get(service_name) or None

    def build_client_kwargs(
        self,
        service_name: Optional[str] = None,
        role_arn: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Build the session, client and role kwargs for one AWS call.

        An explicit role_arn wins over the service_role_map entry.

        Returns:
            Dict with session_config, client_config and role_arn
        """
        if role_arn is None and service_name:
            role_arn = self.get_role_arn_for_service(service_name)

        region = {"region_name": self.region} if self.region else {}
        client_config = dict(region)
        if self.endpoint_url:
            client_config["endpoint_url"] = self.endpoint_url

        logger.debug(
            "built_client_kwargs",
            service_name=service_name,
            client_config=client_config,
            role_arn=role_arn,
        )
        return {
            "session_config": region or None,
            "client_config": client_config or None,
            "role_arn": role_arn,
        }
