"""Test data factories for deterministic test data generation."""

from tests.factories.scryfall import make_set_json, make_set_payload

__all__ = [
    "make_set_json",
    "make_set_payload",
]
