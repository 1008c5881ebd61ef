"""HTTP-level exceptions raised by handlers and collaborators.

Each carries an explicit status code and a reason. The reason may be a
translation key ("projects.notFound"), literal text, a list of validation
phrases, or a mapping with ``message`` and ``error`` entries.

Example:
    >>> raise NotFoundError("projects.notFound")
    >>> raise ConflictError({"message": "services.create.slugExists", "error": "slug=web"})
"""

from typing import Any, Mapping, Optional, Sequence, Union

Reason = Union[str, Sequence[str], Mapping[str, Any]]


class AppError(Exception):
    """Base exception for classified, client-facing failures.

    Attributes:
        status_code: HTTP status of the response.
        message: Reason, see module docstring.
        error: Optional internal detail; it is logged, never sent to clients.
        headers: Optional response headers (e.g. WWW-Authenticate).
    """

    status_code: int = 500
    default_message: str = "errors.internal"

    def __init__(
        self,
        message: Optional[Reason] = None,
        error: Optional[str] = None,
        headers: Optional[Mapping[str, str]] = None,
    ):
        self.message = message if message is not None else self.default_message
        self.error = error
        self.headers = dict(headers) if headers else None
        super().__init__(self.message if isinstance(self.message, str) else repr(self.message))


class BadRequestError(AppError):
    status_code = 400
    default_message = "errors.badRequest"


class UnauthorizedError(AppError):
    status_code = 401
    default_message = "errors.unauthorized"


class ForbiddenError(AppError):
    status_code = 403
    default_message = "errors.forbidden"


class NotFoundError(AppError):
    status_code = 404
    default_message = "errors.notFound"


class ConflictError(AppError):
    status_code = 409
    default_message = "errors.conflict"


class TooManyRequestsError(AppError):
    status_code = 429
    default_message = "errors.rateLimited"


class InternalServerError(AppError):
    """Deliberate 500. Still redacted in production like any other 500."""

    status_code = 500
    default_message = "errors.internal"
