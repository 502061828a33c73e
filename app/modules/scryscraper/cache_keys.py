"""Cache key derivation for upstream API responses."""

import hashlib

DEFAULT_CACHE_PREFIX = "scryfall-cache"


def normalize_request_target(request_target: str) -> str:
    """Lower-case and trim a request target."""
    return request_target.strip().lower()


def derive_cache_key(
    request_target: str, prefix: str = DEFAULT_CACHE_PREFIX
) -> str:
    """Derive the object store key for a request target.

    The key is the SHA-256 hex digest of the normalized target under
    `prefix`, so it is path-safe, bounded in length, and identical for every
    process that asks for the same target.

    Example:
        >>> derive_cache_key("https://api.scryfall.com/sets/tla")
        'scryfall-cache/<64 hex chars>.json'
    """
    normalized = normalize_request_target(request_target)
    digest = hashlib.sha256(normalized.encode("utf-8")).hexdigest()
    return f"{prefix.strip('/')}/{digest}.json"


class CacheKeyBuilder:
    """Build cache keys under a fixed namespace prefix.

    Holds nothing but the prefix; two builders with the same prefix always
    produce the same key for the same target.
    """

    def __init__(self, prefix: str = DEFAULT_CACHE_PREFIX):
        if not prefix.strip("/"):
            raise ValueError("Cache key prefix must not be empty")
        self.prefix = prefix

    def build(self, request_target: str) -> str:
        return derive_cache_key(request_target, prefix=self.prefix)
