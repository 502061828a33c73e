"""Infrastructure configuration module - public API.

This module provides centralized configuration management for Scryscraper
using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    AwsSettings, ScryfallSettings, ScryscraperSettings: Section classes

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    aws_region = settings.aws.AWS_REGION
    ttl_hours = settings.scryscraper.CACHE_TTL_HOURS
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.integrations import AwsSettings, ScryfallSettings
from infrastructure.configuration.features import ScryscraperSettings

__all__ = ["Settings", "AwsSettings", "ScryfallSettings", "ScryscraperSettings"]
