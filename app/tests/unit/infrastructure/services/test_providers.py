"""
Unit tests for dependency injection providers.

Tests cover:
- get_settings() caching behavior
- get_scryscraper_service() wiring and caching
"""

import pytest

from infrastructure.clients.aws import S3Client
from infrastructure.clients.scryfall import ScryfallClient
from infrastructure.configuration import Settings
from infrastructure.services.providers import get_scryscraper_service, get_settings
from modules.scryscraper import ScryscraperService


@pytest.fixture
def scryscraper_env(monkeypatch):
    monkeypatch.setenv("SCRYSCRAPER_CACHE_BUCKET", "cache-bucket")
    monkeypatch.setenv("SCRYSCRAPER_CACHE_PREFIX", "custom-prefix")
    monkeypatch.setenv("SCRYSCRAPER_CACHE_TTL_HOURS", "12")
    monkeypatch.setenv("SCRYFALL_BASE_URL", "http://localhost:8080")
    monkeypatch.setenv("SCRYFALL_USER_AGENT", "scryscraper-test/1.0")
    monkeypatch.setenv("AWS_MAX_RETRIES", "1")


@pytest.mark.unit
class TestGetSettings:
    def test_returns_settings_instance(self):
        assert isinstance(get_settings(), Settings)

    def test_returns_cached_instance(self):
        assert get_settings() is get_settings()


@pytest.mark.unit
@pytest.mark.usefixtures("scryscraper_env")
class TestGetScryscraperService:
    def test_returns_cached_service(self):
        service = get_scryscraper_service()

        assert isinstance(service, ScryscraperService)
        assert get_scryscraper_service() is service

    def test_wired_from_settings(self):
        service = get_scryscraper_service()

        assert isinstance(service._store, S3Client)
        assert service._store.bucket_name == "cache-bucket"
        assert service._store._max_retries == 1
        assert isinstance(service._upstream, ScryfallClient)
        assert service._upstream.base_url == "http://localhost:8080/"
        assert service._upstream.user_agent == "scryscraper-test/1.0"
        assert service._key_builder.prefix == "custom-prefix"
        assert service._cache_ttl_ms == 12 * 60 * 60 * 1000

    def test_set_url_uses_configured_base(self):
        assert get_scryscraper_service().set_url("tla") == (
            "http://localhost:8080/sets/tla"
        )
