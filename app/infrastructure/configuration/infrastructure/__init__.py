"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.server import (
    I18nSettings,
    ServerSettings,
)

__all__ = [
    "I18nSettings",
    "ServerSettings",
]
