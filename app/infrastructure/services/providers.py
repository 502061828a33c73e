"""
Factory functions for dependency injection.

Provides process-scoped singleton providers. Lambda keeps a warm process
alive between scheduled invocations, so these are built once per container
and reused by every invocation it serves.
"""

from functools import lru_cache

from infrastructure.configuration import Settings
from modules.scryscraper.service import (
    ScryscraperService,
    create_scryscraper_service,
)


@lru_cache
def get_settings() -> Settings:
    """
    Get process-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.
    Tests that change the environment call `get_settings.cache_clear()`.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


@lru_cache
def get_scryscraper_service() -> ScryscraperService:
    """Provider for the acquisition service wired to S3 and Scryfall.

    Credentials (temporary creds from assume_role or default providers) are
    created per S3 call and the Scryfall client keeps one HTTP session, so
    caching the service is safe across invocations.

    Returns:
        ScryscraperService: Cached service built from get_settings()
    """
    return create_scryscraper_service(get_settings())
