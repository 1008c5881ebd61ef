from fastapi import FastAPI, Request
from limits import parse
from slowapi import Limiter
from slowapi.util import get_remote_address

from infrastructure.configuration import Settings
from infrastructure.operations import TooManyRequestsError

limiter = Limiter(
    key_func=get_remote_address,
)


def setup_rate_limiter(app: FastAPI, settings: Settings):
    """
    Attach the limiter and the default rate limit to the application.

    Exceeded limits raise slowapi's RateLimitExceeded (decorated routes) or
    TooManyRequestsError (``enforce_default_rate_limit``), which the global
    exception filter turns into a 429 error envelope.
    """
    app.state.limiter = limiter
    app.state.default_rate_limit = parse(settings.server.RATE_LIMIT_DEFAULT)


def enforce_default_rate_limit(request: Request) -> None:
    """Count the request against the application's ``RATE_LIMIT_DEFAULT``.

    Hits are kept per client address and path in the limiter's storage, so
    ``limiter.reset()`` clears them along with decorated limits.
    """
    item = request.app.state.default_rate_limit
    key = get_remote_address(request)
    if not request.app.state.limiter.limiter.hit(item, key, request.url.path):
        raise TooManyRequestsError(error=f"{item} exceeded for {key} on {request.url.path}")


def get_limiter():
    """
    Returns the limiter instance.
    """
    return limiter
