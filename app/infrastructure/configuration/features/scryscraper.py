"""Scryscraper feature settings."""

from pydantic import Field

from infrastructure.configuration.base import FeatureSettings


class ScryscraperSettings(FeatureSettings):
    """Configuration for the scheduled set scraper.

    The cache bucket and set code have no sensible defaults; they are left
    empty here and checked when the scheduled handler runs so that importing
    the settings never fails.

    Environment Variables:
        SCRYSCRAPER_CACHE_BUCKET: S3 bucket holding cached API responses
        SCRYFALL_SET_CODE: Set code scraped on each tick (e.g., "tla")
        SCRYSCRAPER_CACHE_PREFIX: Key prefix for cached objects
        SCRYSCRAPER_CACHE_TTL_HOURS: Freshness window (default: 24)

    Example:
        ```python
        from infrastructure.services import get_settings

        settings = get_settings()
        bucket = settings.scryscraper.CACHE_BUCKET
        ```
    """

    CACHE_BUCKET: str = Field(default="", alias="SCRYSCRAPER_CACHE_BUCKET")
    SET_CODE: str = Field(default="", alias="SCRYFALL_SET_CODE")
    CACHE_PREFIX: str = Field(
        default="scryfall-cache", min_length=1, alias="SCRYSCRAPER_CACHE_PREFIX"
    )
    CACHE_TTL_HOURS: float = Field(
        default=24, gt=0, alias="SCRYSCRAPER_CACHE_TTL_HOURS"
    )

    @property
    def cache_ttl_ms(self) -> int:
        """Freshness window in milliseconds."""
        return int(self.CACHE_TTL_HOURS * 60 * 60 * 1000)
