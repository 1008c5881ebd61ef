"""Fixtures for server module unit tests.

``fixture_router`` exposes handlers that return or raise each shape the
interceptor and the exception filter must handle.
"""

from typing import Optional

import pytest
from fastapi import APIRouter, HTTPException, Response
from fastapi.responses import JSONResponse, PlainTextResponse
from fastapi.testclient import TestClient
from pydantic import BaseModel, Field, field_validator
from starlette.requests import Request

from infrastructure.operations import (
    ConflictError,
    InternalServerError,
    NotFoundError,
    UnauthorizedError,
)
from api.dependencies.rate_limits import get_limiter
from server.routing import EnvelopeRoute

limiter = get_limiter()


class ContactBody(BaseModel):
    name: str = Field(min_length=2, max_length=50)
    email: str
    phone: Optional[str] = None

    @field_validator("email")
    @classmethod
    def check_email(cls, v: str) -> str:
        if "@" not in v:
            raise ValueError("must be an email")
        return v

    @field_validator("phone")
    @classmethod
    def check_phone(cls, v: Optional[str]) -> Optional[str]:
        if v is not None and not v.lstrip("+").isdigit():
            raise ValueError("must be a valid phone number")
        return v


# Decorated once: slowapi registers a limit per decoration.
@limiter.limit("2/minute")
def limited(request: Request):  # pylint: disable=unused-argument
    return {"id": 1}


def build_fixture_router() -> APIRouter:
    router = APIRouter(prefix="/fixtures", route_class=EnvelopeRoute)

    @router.get("/not-found")
    def not_found():
        raise NotFoundError("projects.notFound", error="project id=42 missing")

    @router.get("/forbidden")
    def forbidden():
        raise HTTPException(status_code=403, detail="projects.forbidden")

    @router.get("/unauthorized")
    def unauthorized():
        raise UnauthorizedError(headers={"WWW-Authenticate": "Bearer"})

    @router.get("/conflict")
    def conflict():
        raise ConflictError({"message": "Slug already taken", "error": "slug=web"})

    @router.get("/crash")
    def crash():
        raise RuntimeError("database connection refused")

    @router.get("/crash-empty")
    def crash_empty():
        raise RuntimeError()

    @router.get("/internal")
    def internal():
        raise InternalServerError("Deliberate failure")

    @router.post("/contacts")
    def create_contact(body: ContactBody):
        return body.model_dump()

    @router.get("/raw")
    def raw():
        return {"id": 1}

    @router.get("/list")
    def raw_list():
        return [1, 2, 3]

    @router.get("/none")
    def none():
        return None

    @router.get("/envelope")
    def envelope():
        return {"status": "success", "message": "Done", "timestamp": "t", "data": None}

    @router.get("/envelope-with-lang")
    def envelope_with_lang():
        return {"status": "success", "message": "Done", "lang": "fr", "data": None}

    @router.get("/legacy")
    def legacy():
        return {"success": True, "data": 1}

    @router.get("/created", status_code=201)
    def created():
        return {"id": 7}

    @router.get("/with-headers")
    def with_headers():
        response = JSONResponse({"id": 1}, status_code=202, headers={"X-Custom": "yes"})
        response.set_cookie("session", "abc")
        return response

    @router.get("/text")
    def text():
        return PlainTextResponse("pong")

    @router.delete("/item", status_code=204)
    def delete_item():
        return Response(status_code=204)

    router.add_api_route("/limited", limited)

    @router.get("/built")
    def built(request: Request):
        builder = request.app.state.response_builder
        return builder.success_single({"id": "42"}, "user.found", "ar")

    return router


@pytest.fixture
def make_fixture_client(make_app):
    """TestClient over an assembled application with the fixture routes."""

    def _make(app_env: str = "development", **i18n_overrides) -> TestClient:
        app = make_app(app_env, **i18n_overrides)
        app.include_router(build_fixture_router())
        return TestClient(app, raise_server_exceptions=False)

    return _make


@pytest.fixture
def client(make_fixture_client):
    return make_fixture_client()


@pytest.fixture
def production_client(make_fixture_client):
    return make_fixture_client("production")
