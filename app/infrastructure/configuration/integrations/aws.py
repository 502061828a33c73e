"""AWS integration settings."""

from typing import Optional

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class AwsSettings(IntegrationSettings):
    """AWS configuration settings.

    Environment Variables:
        AWS_REGION: AWS region for services (default: ca-central-1)
        AWS_ENDPOINT_URL: Custom endpoint for S3 (LocalStack, MinIO)
        AWS_MAX_RETRIES: Executor retries for throttled S3 calls (default: 0)
        AWS_CACHE_ROLE_ARN: Optional role to assume for cache bucket access

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()

        region = settings.aws.AWS_REGION
        ```
    """

    AWS_REGION: str = Field(default="ca-central-1", alias="AWS_REGION")
    ENDPOINT_URL: Optional[str] = Field(default=None, alias="AWS_ENDPOINT_URL")
    MAX_RETRIES: int = Field(default=0, ge=0, alias="AWS_MAX_RETRIES")
    CACHE_ROLE_ARN: str = Field(default="", alias="AWS_CACHE_ROLE_ARN")

    @property
    def SERVICE_ROLE_MAP(self) -> dict[str, str]:
        """Mapping of service names to their associated role ARNs.

        Returns:
            Dict mapping service identifiers to role ARNs (empty entries omitted)
        """
        if not self.CACHE_ROLE_ARN:
            return {}
        return {"s3": self.CACHE_ROLE_ARN}
