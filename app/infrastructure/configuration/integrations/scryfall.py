"""Scryfall API integration settings."""

from pydantic import Field

from infrastructure.configuration.base import IntegrationSettings


class ScryfallSettings(IntegrationSettings):
    """Scryfall API client configuration.

    Scryfall asks every client to identify itself and to request JSON
    explicitly, so the user agent is part of the configuration rather than a
    per-request choice.

    Environment Variables:
        SCRYFALL_BASE_URL: API base address (default: https://api.scryfall.com)
        SCRYFALL_USER_AGENT: Client label sent on every request
        SCRYFALL_TIMEOUT_SECONDS: Request timeout (default: 10)
    """

    BASE_URL: str = Field(
        default="https://api.scryfall.com", alias="SCRYFALL_BASE_URL"
    )
    USER_AGENT: str = Field(default="scryscraper/1.0", alias="SCRYFALL_USER_AGENT")
    TIMEOUT_SECONDS: float = Field(
        default=10, gt=0, alias="SCRYFALL_TIMEOUT_SECONDS"
    )
