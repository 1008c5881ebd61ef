"""Global exception filter.

The single place that decides what a client sees when a request fails.
Every exception reaching the HTTP boundary is classified, its message
translated, logged, redacted in production when it is a 500, and written
out as an error envelope.
"""

from typing import Mapping, Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException
from structlog.stdlib import BoundLogger

from infrastructure.configuration import Settings
from infrastructure.i18n import LanguageResolver
from infrastructure.logging import get_module_logger
from infrastructure.operations import (
    INTERNAL_ERROR_KEY,
    AppError,
    ClassifiedError,
    UnclassifiedError,
    classify_exception,
)
from infrastructure.responses import ResponseBuilder

logger = get_module_logger()

# Validator phrases with a known translation. Matched verbatim; anything
# else is shown as the validator wrote it.
VALIDATION_MESSAGE_KEYS: dict[str, str] = {
    "phone must be a valid phone number": "validation.isPhoneNumber",
    "email must be an email": "validation.isEmail",
    "name must be longer than or equal to 2 characters": "validation.minLength",
    "password must be longer than or equal to 6 characters": "validation.minLength",
    "name must be shorter than or equal to 50 characters": "validation.maxLength",
    "password must be shorter than or equal to 50 characters": "validation.maxLength",
}

VALIDATION_MESSAGE_SEPARATOR = ", "


def translate_validation_error(error: str, translations: Mapping[str, str]) -> str:
    """Translate one validator phrase, falling back to the phrase itself."""
    key = VALIDATION_MESSAGE_KEYS.get(error)
    if key:
        translated = translations.get(key)
        if translated and translated != key:
            return translated
    return error


class ExceptionFilter:
    """Turns any exception into an error envelope response.

    Attributes:
        builder: ResponseBuilder producing the envelope
        resolver: LanguageResolver for the response locale
        settings: Application settings (production mode drives redaction)
    """

    def __init__(
        self,
        builder: ResponseBuilder,
        resolver: LanguageResolver,
        settings: Settings,
        log: Optional[BoundLogger] = None,
    ):
        self.builder = builder
        self.resolver = resolver
        self.settings = settings
        self.log = log or logger

    def translate_validation_errors(self, errors: list[str], lang: str) -> list[str]:
        """Translate each phrase independently, preserving order."""
        translations = self.builder.registry.get_translations(lang)
        return [translate_validation_error(error, translations) for error in errors]

    async def __call__(self, request: Request, exc: Exception) -> JSONResponse:
        lang = self.resolver.resolve(request)
        outcome = classify_exception(exc)

        status_code = outcome.status_code
        message = outcome.message
        if isinstance(outcome, ClassifiedError):
            detail = outcome.detail
            headers = outcome.headers
        else:
            detail = None
            headers = None

        if isinstance(message, list):
            message = VALIDATION_MESSAGE_SEPARATOR.join(
                self.translate_validation_errors(message, lang)
            )
        if not message:
            message = INTERNAL_ERROR_KEY

        log_context = {
            "method": request.method,
            "path": request.url.path,
            "status": status_code,
            "message": message,
            "lang": lang,
        }
        if isinstance(outcome, UnclassifiedError):
            self.log.error(
                "request_failed",
                error_type=outcome.error_type,
                stack=outcome.stack,
                **log_context,
            )
        elif status_code >= 500:
            self.log.error("request_failed", detail=detail, **log_context)
        else:
            self.log.warning("request_failed", detail=detail, **log_context)

        if status_code == 500 and self.settings.is_production:
            message = self.builder.registry.translate(INTERNAL_ERROR_KEY, lang)

        envelope = self.builder.error(message, lang)
        return JSONResponse(
            status_code=status_code,
            content=envelope.to_wire(),
            headers=headers,
        )


def register_exception_handlers(app: FastAPI, exception_filter: ExceptionFilter) -> None:
    """Install ``exception_filter`` for every exception family.

    Unclassified failures are normally rendered by ``RequestContextMiddleware``.
    The ``Exception`` registration covers anything raised outside it, which
    Starlette's outermost error middleware serves.
    """
    for exc_class in (
        AppError,
        RateLimitExceeded,
        RequestValidationError,
        StarletteHTTPException,
        Exception,
    ):
        app.add_exception_handler(exc_class, exception_filter)
