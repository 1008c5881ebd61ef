"""Classified failure variants.

Every exception reaching the HTTP boundary is turned into exactly one of
these two variants; the exception filter matches on them.
"""

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class ClassifiedError:
    """Failure with an explicit status code.

    Attributes:
        status_code: HTTP status of the response
        message: Key or literal text, a list of validation phrases, or None
        detail: Optional internal detail for logs
        headers: Optional response headers carried by the exception
    """

    status_code: int
    message: Union[str, list[str], None]
    detail: Optional[str] = None
    headers: Optional[dict[str, str]] = None


@dataclass(frozen=True)
class UnclassifiedError:
    """Anything thrown without an explicit status; always a 500.

    Attributes:
        message: The exception's own message text
        stack: Formatted traceback, for logs only
        error_type: Exception class name
    """

    message: str
    stack: str
    error_type: str = "Exception"

    status_code: int = 500


ErrorOutcome = Union[ClassifiedError, UnclassifiedError]
