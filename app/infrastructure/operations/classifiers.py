"""Error classifiers for exceptions reaching the HTTP boundary.

Converts framework and application exceptions into the closed
``ClassifiedError`` / ``UnclassifiedError`` variants, so the exception filter
dispatches with a simple match instead of inspecting exception capabilities.

Key Functions:
- classify_exception(): any exception -> ErrorOutcome
- format_validation_errors(): pydantic errors -> validator-style phrases

Usage:
    from infrastructure.operations.classifiers import classify_exception

    outcome = classify_exception(exc)
    if isinstance(outcome, ClassifiedError):
        ...
"""

import traceback
from collections.abc import Mapping
from typing import Any, Iterable, Optional

from fastapi.exceptions import RequestValidationError
from slowapi.errors import RateLimitExceeded
from starlette.exceptions import HTTPException as StarletteHTTPException

from infrastructure.operations.exceptions import AppError
from infrastructure.operations.result import (
    ClassifiedError,
    ErrorOutcome,
    UnclassifiedError,
)

INTERNAL_ERROR_KEY = "errors.internal"
RATE_LIMITED_KEY = "errors.rateLimited"

# Request locations that prefix pydantic error locs
_LOCATION_PREFIXES = {"body", "query", "path", "header", "cookie"}


def classify_exception(exc: BaseException) -> ErrorOutcome:
    """Classify an exception into a ClassifiedError or UnclassifiedError.

    Mapping:
    - AppError: status and reason from the exception
    - slowapi RateLimitExceeded: 429 with the rate-limit message key
    - FastAPI RequestValidationError: 400 with validator-style phrases
    - Starlette/FastAPI HTTPException: status and ``detail`` as reason
    - Anything else: unclassified, message is ``str(exc)``, stack attached

    Args:
        exc: Exception caught at the HTTP boundary

    Returns:
        The matching ErrorOutcome variant
    """
    if isinstance(exc, AppError):
        return _classify_reason(
            exc.status_code, exc.message, detail=exc.error, headers=exc.headers
        )

    if isinstance(exc, RateLimitExceeded):
        return ClassifiedError(
            status_code=exc.status_code,
            message=RATE_LIMITED_KEY,
            detail=str(exc.detail),
            headers=dict(exc.headers) if exc.headers else None,
        )

    if isinstance(exc, RequestValidationError):
        return ClassifiedError(
            status_code=400,
            message=format_validation_errors(exc.errors()),
            detail=str(exc.errors()),
        )

    if isinstance(exc, StarletteHTTPException):
        return _classify_reason(
            exc.status_code,
            exc.detail,
            headers=dict(exc.headers) if exc.headers else None,
        )

    return UnclassifiedError(
        message=str(exc),
        stack="".join(traceback.format_exception(type(exc), exc, exc.__traceback__)),
        error_type=type(exc).__name__,
    )


def _classify_reason(
    status_code: int,
    reason: Any,
    detail: Optional[str] = None,
    headers: Optional[dict[str, str]] = None,
) -> ClassifiedError:
    """Extract message and detail from a structured or string reason.

    A string is the message. A mapping contributes its ``message`` (falling
    back to the internal-error key) and its ``error`` detail. A list is kept
    as a list of validation phrases.
    """
    if isinstance(reason, str):
        message: Any = reason
    elif isinstance(reason, Mapping):
        message = reason.get("message") or INTERNAL_ERROR_KEY
        if reason.get("error") is not None:
            detail = str(reason["error"])
    elif isinstance(reason, (list, tuple)):
        message = [str(item) for item in reason]
    elif reason is None:
        message = INTERNAL_ERROR_KEY
    else:
        message = str(reason)

    if isinstance(message, (list, tuple)):
        message = [str(item) for item in message]
    elif not isinstance(message, str):
        message = str(message)

    return ClassifiedError(
        status_code=status_code, message=message, detail=detail, headers=headers
    )


def _field_name(loc: Iterable[Any]) -> str:
    parts = [str(part) for part in loc]
    if len(parts) > 1 and parts[0] in _LOCATION_PREFIXES:
        parts = parts[1:]
    return ".".join(parts) or "value"


def format_validation_error(error: Mapping[str, Any]) -> str:
    """Render one pydantic error as a validator-style phrase.

    Examples:
        string_too_short on "name" (min 2) -> "name must be longer than or equal to 2 characters"
        invalid email on "email"           -> "email must be an email"
        ValueError("must be a valid phone number") on "phone"
                                           -> "phone must be a valid phone number"
    """
    field = _field_name(error.get("loc", ()))
    error_type = error.get("type", "")
    ctx = error.get("ctx") or {}
    msg = str(error.get("msg", "is invalid"))

    if error_type == "string_too_short":
        return f"{field} must be longer than or equal to {ctx.get('min_length')} characters"
    if error_type == "string_too_long":
        return f"{field} must be shorter than or equal to {ctx.get('max_length')} characters"
    if error_type == "missing":
        return f"{field} should not be empty"
    if error_type in ("int_parsing", "int_type"):
        return f"{field} must be an integer number"
    if error_type == "greater_than_equal":
        return f"{field} must not be less than {ctx.get('ge')}"
    if error_type == "less_than_equal":
        return f"{field} must not be greater than {ctx.get('le')}"
    if error_type == "enum":
        return f"{field} must be one of the following values: {ctx.get('expected')}"
    if error_type == "value_error":
        if "email address" in msg:
            return f"{field} must be an email"
        # pydantic prefixes custom validator messages with "Value error, "
        return f"{field} {msg.removeprefix('Value error, ')}"
    return f"{field} {msg}"


def format_validation_errors(errors: Iterable[Mapping[str, Any]]) -> list[str]:
    """Render pydantic errors as an ordered list of validator-style phrases."""
    return [format_validation_error(error) for error in errors]
