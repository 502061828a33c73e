"""
Dependency injection services.

Provides process-scoped provider functions for settings and services.
"""

from infrastructure.services.providers import (
    get_settings,
    get_scryscraper_service,
)

__all__ = [
    "get_settings",
    "get_scryscraper_service",
]
