import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `infrastructure.operations`) works during pytest collection.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest
import structlog
from infrastructure.services import get_scryscraper_service, get_settings
from modules.scryscraper import CacheKeyBuilder, ScryscraperService
from tests.factories.scryfall import make_set_payload
from tests.fixtures.object_store import FakeClock, InMemoryObjectStore
from tests.fixtures.upstream import FakeScryfallClient, ok_response


@pytest.fixture(autouse=True)
def clear_provider_caches():
    """Reset cached settings and service instances between tests."""
    get_settings.cache_clear()
    get_scryscraper_service.cache_clear()
    yield
    get_settings.cache_clear()
    get_scryscraper_service.cache_clear()


@pytest.fixture(autouse=True)
def reset_structlog():
    """Drop structlog configuration made by a test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def set_payload():
    return make_set_payload()


@pytest.fixture
def set_payload_factory():
    return make_set_payload


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def object_store(clock):
    return InMemoryObjectStore(clock)


@pytest.fixture
def upstream(set_payload):
    return FakeScryfallClient(ok_response(set_payload))


@pytest.fixture
def key_builder():
    return CacheKeyBuilder("scryfall-cache")


@pytest.fixture
def service_factory(object_store, key_builder, clock):
    """Build a ScryscraperService over the in-memory store and a given upstream."""

    def _factory(upstream_client, **kwargs):
        kwargs.setdefault("key_builder", key_builder)
        kwargs.setdefault("clock", clock)
        return ScryscraperService(object_store, upstream_client, **kwargs)

    return _factory


@pytest.fixture
def service(service_factory, upstream):
    return service_factory(upstream)
