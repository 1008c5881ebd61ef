"""
Dependency injection services.

Provides type aliases and provider functions for FastAPI dependency injection.
"""

from infrastructure.services.dependencies import (
    LangDep,
    ResponsesDep,
    SettingsDep,
    TranslationsDep,
)
from infrastructure.services.providers import (
    get_language_resolver,
    get_request_language,
    get_response_builder,
    get_settings,
)

__all__ = [
    "LangDep",
    "ResponsesDep",
    "SettingsDep",
    "TranslationsDep",
    "get_language_resolver",
    "get_request_language",
    "get_response_builder",
    "get_settings",
]
