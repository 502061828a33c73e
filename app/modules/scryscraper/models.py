"""Models for the scryscraper module."""

from dataclasses import dataclass
from typing import Optional

from modules.scryscraper.schemas import ScryfallSet


@dataclass(frozen=True)
class FetchOutcome:
    """A validated set and how it was obtained.

    Attributes:
        record: The validated set
        from_cache: True when served from the object store
        cache_age_ms: Age of the cache entry; only set when from_cache
    """

    record: ScryfallSet
    from_cache: bool
    cache_age_ms: Optional[int] = None

    @property
    def cache_status(self) -> str:
        return "HIT" if self.from_cache else "MISS"

    @property
    def cache_age_minutes(self) -> Optional[int]:
        if self.cache_age_ms is None:
            return None
        return round(self.cache_age_ms / 1000 / 60)
