"""Response interceptor.

Routers built with ``route_class=EnvelopeRoute`` guarantee that every JSON
success body on the wire is a standard envelope. Handlers that already
return an envelope are passed through; anything else is wrapped.
"""

import json
from typing import Any, Callable, Coroutine

from fastapi import Request, Response
from fastapi.responses import JSONResponse
from fastapi.routing import APIRoute

from infrastructure.services.providers import (
    get_language_resolver,
    get_response_builder,
)

# Keys that mark a body as already enveloped
ENVELOPE_MARKERS = frozenset({"status", "success"})

# Statuses that never carry a body
_BODYLESS_STATUSES = frozenset({204, 304})

_REGENERATED_HEADERS = frozenset({"content-length", "content-type"})


def is_envelope(body: Any) -> bool:
    """Whether ``body`` is a mapping carrying an envelope marker key."""
    return isinstance(body, dict) and not ENVELOPE_MARKERS.isdisjoint(body)


def _rerender(response: Response, content: Any) -> JSONResponse:
    rendered = JSONResponse(
        content=content,
        status_code=response.status_code,
        background=response.background,
    )
    for name, value in response.headers.items():
        if name.lower() not in _REGENERATED_HEADERS:
            rendered.headers.append(name, value)
    return rendered


def ensure_envelope(request: Request, response: Response) -> Response:
    """Return ``response`` with an enveloped JSON body.

    Non-JSON and bodyless responses are returned untouched. An existing
    envelope only gains ``lang`` when it has none.
    """
    if not isinstance(response, JSONResponse):
        return response
    if response.status_code in _BODYLESS_STATUSES or not response.body:
        return response

    body = json.loads(response.body)
    lang = get_language_resolver(request).resolve(request)

    if is_envelope(body):
        if body.get("lang") is not None:
            return response
        body["lang"] = lang
        return _rerender(response, body)

    envelope = get_response_builder(request).success(body, None, lang)
    return _rerender(response, envelope.to_wire())


class EnvelopeRoute(APIRoute):
    """APIRoute whose handler output is normalized by ``ensure_envelope``."""

    def get_route_handler(self) -> Callable[[Request], Coroutine[Any, Any, Response]]:
        original_route_handler = super().get_route_handler()

        async def envelope_route_handler(request: Request) -> Response:
            response = await original_route_handler(request)
            return ensure_envelope(request, response)

        return envelope_route_handler
