"""Scryscraper module.

Acquires Scryfall set data through a 24-hour S3 cache:

    from modules.scryscraper import create_scryscraper_service

    service = create_scryscraper_service(settings)
    result = service.get_set("tla")
    if result.is_success:
        outcome = result.data  # FetchOutcome
"""

from modules.scryscraper.cache_keys import CacheKeyBuilder, derive_cache_key
from modules.scryscraper.errors import (
    AcquisitionError,
    ConfigurationError,
    InvalidResponse,
    NotFound,
    RateLimited,
    ScryscraperError,
    UpstreamFailure,
)
from modules.scryscraper.models import FetchOutcome
from modules.scryscraper.schemas import (
    FieldIssue,
    SchemaValidationError,
    ScryfallSet,
    validate_set,
    validate_set_json,
)
from modules.scryscraper.service import (
    ScryscraperService,
    create_scryscraper_service,
)

__all__ = [
    "AcquisitionError",
    "CacheKeyBuilder",
    "ConfigurationError",
    "FetchOutcome",
    "FieldIssue",
    "InvalidResponse",
    "NotFound",
    "RateLimited",
    "SchemaValidationError",
    "ScryfallSet",
    "ScryscraperError",
    "ScryscraperService",
    "UpstreamFailure",
    "create_scryscraper_service",
    "derive_cache_key",
    "validate_set",
    "validate_set_json",
]
