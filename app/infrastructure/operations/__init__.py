"""Error taxonomy for the HTTP boundary.

This module contains the exceptions raised by handlers and collaborators,
the two classified failure variants, and the classifier that maps any
exception onto one of them.
"""

from infrastructure.operations.classifiers import (
    INTERNAL_ERROR_KEY,
    RATE_LIMITED_KEY,
    classify_exception,
    format_validation_error,
    format_validation_errors,
)
from infrastructure.operations.exceptions import (
    AppError,
    BadRequestError,
    ConflictError,
    ForbiddenError,
    InternalServerError,
    NotFoundError,
    TooManyRequestsError,
    UnauthorizedError,
)
from infrastructure.operations.result import (
    ClassifiedError,
    ErrorOutcome,
    UnclassifiedError,
)

__all__ = [
    "INTERNAL_ERROR_KEY",
    "RATE_LIMITED_KEY",
    "classify_exception",
    "format_validation_error",
    "format_validation_errors",
    "AppError",
    "BadRequestError",
    "ConflictError",
    "ForbiddenError",
    "InternalServerError",
    "NotFoundError",
    "TooManyRequestsError",
    "UnauthorizedError",
    "ClassifiedError",
    "ErrorOutcome",
    "UnclassifiedError",
]
