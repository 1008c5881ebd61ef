"""Infrastructure configuration module - public API.

This module provides centralized configuration management for the portfolio
CMS backend using Pydantic BaseSettings with domain-based organization.

Exports:
    Settings: Main settings class (for testing/overrides)
    ServerSettings: HTTP runtime settings class
    I18nSettings: Translation settings class

Example:
    ```python
    from infrastructure.services import get_settings

    settings = get_settings()

    # Access settings
    origins = settings.server.CORS_ALLOWED_ORIGINS
    locales = settings.i18n.SUPPORTED_LOCALES

    # Check environment
    if settings.is_production:
        # Production-specific logic...
    ```
"""

from infrastructure.configuration.settings import Settings
from infrastructure.configuration.infrastructure import I18nSettings, ServerSettings

__all__ = ["Settings", "ServerSettings", "I18nSettings"]
