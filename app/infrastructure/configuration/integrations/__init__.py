"""Integration settings __init__ - exports all integration settings."""

from infrastructure.configuration.integrations.aws import AwsSettings
from infrastructure.configuration.integrations.scryfall import ScryfallSettings

__all__ = [
    "AwsSettings",
    "ScryfallSettings",
]
