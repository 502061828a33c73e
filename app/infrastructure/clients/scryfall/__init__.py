"""Scryfall API client public API."""

from infrastructure.clients.scryfall.client import RawResponse, ScryfallClient

__all__ = ["RawResponse", "ScryfallClient"]
