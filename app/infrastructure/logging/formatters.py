"""Custom log processors for structured logging.

Usage:
    from infrastructure.logging.formatters import add_app_info, mask_sensitive_data
"""

from typing import Any

REDACTED = "***REDACTED***"

# Key fragments whose values are never logged. The scraper only holds AWS
# credentials (assumed-role sessions, LocalStack keys), so these cover the
# names boto3 and STS use for them.
SENSITIVE_PATTERNS = frozenset(
    {
        "password",
        "secret",
        "token",
        "credential",
        "access_key",
        "authorization",
        "api_key",
    }
)


def add_app_info(app_name: str, app_version: str = "unknown"):
    """Create a processor that stamps every entry with the app name and version.

    Args:
        app_name: Name of the application.
        app_version: Deployed version (git SHA).

    Returns:
        A structlog processor function.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.setdefault("app_name", app_name)
        event_dict.setdefault("app_version", app_version)
        return event_dict

    return processor


def _is_sensitive(key: Any, patterns: frozenset[str]) -> bool:
    key_lower = str(key).lower()
    return any(pattern in key_lower for pattern in patterns)


def _mask(value: Any, patterns: frozenset[str], mask_value: str) -> Any:
    if isinstance(value, dict):
        return {
            k: mask_value if _is_sensitive(k, patterns) and v is not None
            else _mask(v, patterns, mask_value)
            for k, v in value.items()
        }
    return value


def mask_sensitive_data(
    mask_value: str = REDACTED,
    additional_patterns: frozenset[str] | None = None,
):
    """Create a processor that masks credential values in log entries.

    Keys are matched case-insensitively against SENSITIVE_PATTERNS. Nested
    dicts are walked too, since boto3 session and client kwargs get logged
    as whole mappings.

    Args:
        mask_value: Replacement for sensitive values.
        additional_patterns: Extra key fragments to treat as sensitive.

    Returns:
        A structlog processor function.
    """
    patterns = SENSITIVE_PATTERNS | (additional_patterns or frozenset())

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        return _mask(event_dict, patterns, mask_value)

    return processor


def truncate_large_values(max_length: int = 500):
    """Create a processor that keeps payloads out of the logs.

    Strings longer than `max_length` are cut, and bytes (S3 bodies) are
    replaced by their size.

    Args:
        max_length: Maximum string length before truncation.

    Returns:
        A structlog processor function.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if isinstance(value, (bytes, bytearray)):
                event_dict[key] = f"<{len(value)} bytes>"
            elif isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    value[:max_length] + f"...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor
