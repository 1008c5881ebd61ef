"""Application assembly.

``create_app`` is the composition root: it builds the translation registry,
response builder and language resolver once, hangs them on ``app.state`` and
wires the global exception filter, middleware and routers around them.
"""

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api.dependencies.rate_limits import setup_rate_limiter
from api.router import api_router
from infrastructure.configuration import Settings
from infrastructure.i18n import (
    TranslationRegistry,
    create_language_resolver,
    create_translation_registry,
)
from infrastructure.responses import ResponseBuilder
from infrastructure.services.providers import get_settings
from server.exception_handlers import ExceptionFilter, register_exception_handlers
from server.lifespan import lifespan
from server.middleware import RequestContextMiddleware


def create_app(
    settings: Optional[Settings] = None,
    registry: Optional[TranslationRegistry] = None,
) -> FastAPI:
    """Build the FastAPI application.

    Args:
        settings: Application settings (process-wide settings if omitted).
        registry: Translation registry (built from ``settings.i18n`` if omitted).

    Returns:
        FastAPI: The configured application.
    """
    settings = settings or get_settings()
    registry = registry or create_translation_registry(settings.i18n)
    builder = ResponseBuilder(registry)
    resolver = create_language_resolver(settings.i18n)

    app = FastAPI(title=settings.APP_NAME, version=settings.GIT_SHA, lifespan=lifespan)
    app.state.settings = settings
    app.state.translations = registry
    app.state.response_builder = builder
    app.state.language_resolver = resolver

    setup_rate_limiter(app, settings)
    exception_filter = ExceptionFilter(builder, resolver, settings)
    register_exception_handlers(app, exception_filter)

    allow_origins = (
        settings.server.CORS_ALLOWED_ORIGINS
        if settings.is_production
        else [
            "http://localhost:3000",
            "http://127.0.0.1:3000",
            "http://localhost:8000",
            "http://127.0.0.1:8000",
        ]
    )
    # Last added runs outermost: CORS headers also reach error envelopes
    app.add_middleware(RequestContextMiddleware, exception_filter=exception_filter)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=allow_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router)
    return app


handler = create_app()
