"""Translation models for the i18n system.

A catalog is the flat ``dotted.key -> message`` dictionary of one locale.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

import structlog

logger = structlog.get_logger().bind(component="i18n.models")


def flatten_messages(data: Dict[str, Any], prefix: str = "") -> Dict[str, str]:
    """Flatten a (possibly nested) translation mapping into dotted keys.

    ``{"auth": {"login": {"success": "Hi"}}}`` and
    ``{"auth.login.success": "Hi"}`` both yield ``{"auth.login.success": "Hi"}``.
    Non-string leaves are skipped.

    Args:
        data: Parsed translation document.
        prefix: Key prefix accumulated while recursing.

    Returns:
        Flat mapping of dotted keys to message strings.
    """
    flat: Dict[str, str] = {}
    for key, value in data.items():
        full_key = f"{prefix}.{key}" if prefix else str(key)
        if isinstance(value, dict):
            flat.update(flatten_messages(value, full_key))
        elif isinstance(value, str):
            flat[full_key] = value
        else:
            logger.warning(
                "invalid_translation_value",
                key=full_key,
                value_type=type(value).__name__,
                expected="str",
            )
    return flat


@dataclass(frozen=True)
class TranslationCatalog:
    """Messages of a single locale.

    Attributes:
        locale: Lower-cased locale code (e.g. "en", "ar").
        messages: Flat mapping of dotted keys to message strings.
        source: File the catalog was read from, if any.
        loaded_at: Timestamp (ISO 8601) when the catalog was built.
    """

    locale: str
    messages: Dict[str, str] = field(default_factory=dict)
    source: Optional[str] = None
    loaded_at: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    def get_message(self, key: str) -> Optional[str]:
        """Return the message for ``key`` or None if it is absent or empty."""
        return self.messages.get(key) or None

    def has_message(self, key: str) -> bool:
        """Check whether ``key`` has a non-empty message."""
        return bool(self.messages.get(key))

    @property
    def is_empty(self) -> bool:
        return not self.messages
