"""Feature settings __init__ - exports all feature settings."""

from infrastructure.configuration.features.scryscraper import ScryscraperSettings

__all__ = [
    "ScryscraperSettings",
]
