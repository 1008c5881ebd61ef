from typing import Optional

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.types import ASGIApp

from infrastructure.logging import bind_request_context
from server.exception_handlers import ExceptionFilter

CORRELATION_ID_HEADER = "X-Correlation-ID"


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Binds a correlation id and the request line to every log entry.

    An incoming ``X-Correlation-ID`` is reused; otherwise one is generated.
    The id is echoed on the response and kept on ``request.state``.

    Exceptions no registered handler took are rendered by ``exception_filter``
    while the request context is still bound, so the error envelope carries
    the correlation id and passes back through the outer middleware.
    """

    def __init__(self, app: ASGIApp, exception_filter: Optional[ExceptionFilter] = None):
        super().__init__(app)
        self.exception_filter = exception_filter

    async def dispatch(self, request, call_next):
        with bind_request_context(
            correlation_id=request.headers.get(CORRELATION_ID_HEADER),
            request_path=request.url.path,
            request_method=request.method,
        ) as correlation_id:
            request.state.correlation_id = correlation_id
            try:
                response = await call_next(request)
            except Exception as exc:
                if self.exception_filter is None:
                    raise
                response = await self.exception_filter(request, exc)
            response.headers[CORRELATION_ID_HEADER] = correlation_id
            return response
