"""Structlog processors used by the logging pipeline.

Usage:
    from infrastructure.logging.formatters import add_app_context, mask_sensitive_data
"""

from typing import Any, Callable

Processor = Callable[[Any, str, dict[str, Any]], dict[str, Any]]


def add_app_context(app_name: str, environment: str, version: str = "unknown") -> Processor:
    """Create a processor that stamps every entry with app name, env and version.

    Example:
        structlog.configure(
            processors=[add_app_context("portfolio-cms", "production", "abc123"), ...]
        )
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        event_dict.setdefault("app_name", app_name)
        event_dict.setdefault("environment", environment)
        event_dict.setdefault("app_version", version)
        return event_dict

    return processor


# Keys whose values never reach log output (matched as substrings, case-insensitive)
SENSITIVE_PATTERNS = frozenset(
    {
        "password",
        "secret",
        "token",
        "api_key",
        "authorization",
        "cookie",
        "jwt",
        "otp",
        "verification_code",
    }
)


def mask_sensitive_data(
    mask_value: str = "***REDACTED***",
    additional_patterns: frozenset[str] | None = None,
) -> Processor:
    """Create a processor that masks values of sensitive-looking keys.

    Args:
        mask_value: The string to replace sensitive values with.
        additional_patterns: Extra patterns to consider sensitive.
    """
    patterns = SENSITIVE_PATTERNS
    if additional_patterns:
        patterns = patterns | additional_patterns

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        return {
            key: (
                mask_value
                if value is not None
                and any(pattern in key.lower() for pattern in patterns)
                else value
            )
            for key, value in event_dict.items()
        }

    return processor


def truncate_large_values(max_length: int = 2000) -> Processor:
    """Create a processor that truncates overly large string values.

    Stack traces are exempt; they are rendered by ``format_exc_info``.
    """

    def processor(
        logger: Any, method_name: str, event_dict: dict[str, Any]
    ) -> dict[str, Any]:
        for key, value in event_dict.items():
            if key in ("exception", "stack"):
                continue
            if isinstance(value, str) and len(value) > max_length:
                event_dict[key] = (
                    value[:max_length] + f"...[truncated, {len(value)} chars total]"
                )
        return event_dict

    return processor
