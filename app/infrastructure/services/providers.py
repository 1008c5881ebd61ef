"""
Factory functions for dependency injection.

Provides application-scoped singleton providers for core infrastructure
services, and request-scoped accessors for the instances owned by the
running application.
"""

from functools import lru_cache

from fastapi import Request

from infrastructure.configuration import Settings
from infrastructure.i18n import LanguageResolver, TranslationRegistry
from infrastructure.responses import ResponseBuilder


@lru_cache
def get_settings() -> Settings:
    """
    Get application-scoped settings singleton.

    The @lru_cache decorator ensures only ONE instance is created per process.

    Returns:
        Settings: Cached settings instance loaded from environment.
    """
    return Settings()


def get_request_settings(request: Request) -> Settings:
    """Settings of the application serving ``request``."""
    return request.app.state.settings


def get_response_builder(request: Request) -> ResponseBuilder:
    """Response builder of the application serving ``request``."""
    return request.app.state.response_builder


def get_language_resolver(request: Request) -> LanguageResolver:
    """Language resolver of the application serving ``request``."""
    return request.app.state.language_resolver


def get_request_registry(request: Request) -> TranslationRegistry:
    """Translation registry of the application serving ``request``."""
    return request.app.state.translations


def get_request_language(request: Request) -> str:
    """
    Resolve the request's locale.

    Usage:
        @router.get("/items")
        def list_items(lang: LangDep, responses: ResponsesDep):
            return responses.success(items, "items.findAll.success", lang)
    """
    return get_language_resolver(request).resolve(request)

