"""Shared fixtures: translation directories, registries and applications."""

import json

import pytest
from fastapi import FastAPI

from api.dependencies.rate_limits import get_limiter
from infrastructure.configuration import I18nSettings, ServerSettings, Settings
from infrastructure.i18n import JSONTranslationLoader, TranslationRegistry
from infrastructure.responses import ResponseBuilder
from server.server import create_app

EN_MESSAGES = {
    "common": {"success": "Operation completed successfully"},
    "errors": {
        "internal": "Internal server error",
        "notFound": "Resource not found",
        "rateLimited": "Too many requests",
    },
    "validation": {
        "isPhoneNumber": "Phone must be a valid phone number",
        "isEmail": "Email must be valid",
        "minLength": "Value is too short",
        "maxLength": "Value is too long",
    },
    "system": {"health": {"ok": "Service is healthy"}},
    "user": {"found": "User found"},
    "list": {"ok": "List OK"},
    "projects": {"notFound": "Project not found"},
}

AR_MESSAGES = {
    "common": {"success": "تمت العملية بنجاح"},
    "errors": {
        "internal": "خطأ داخلي في الخادم",
        "notFound": "المورد غير موجود",
    },
    "validation": {
        "isEmail": "البريد الإلكتروني غير صالح",
        "minLength": "القيمة قصيرة جداً",
    },
    "user": {"found": "تم العثور على المستخدم"},
    "projects": {"notFound": "المشروع غير موجود"},
}


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Start every test with empty rate-limit counters."""
    get_limiter().reset()
    yield
    get_limiter().reset()


@pytest.fixture
def translations_dir(tmp_path):
    """Directory holding en.json and ar.json test dictionaries."""
    locales = tmp_path / "locales"
    locales.mkdir()
    (locales / "en.json").write_text(json.dumps(EN_MESSAGES), encoding="utf-8")
    (locales / "ar.json").write_text(
        json.dumps(AR_MESSAGES, ensure_ascii=False), encoding="utf-8"
    )
    return locales


@pytest.fixture
def registry(translations_dir):
    return TranslationRegistry(JSONTranslationLoader([translations_dir]))


@pytest.fixture
def empty_registry(tmp_path):
    """Registry whose search path holds no dictionaries."""
    return TranslationRegistry(JSONTranslationLoader([tmp_path / "missing"]))


@pytest.fixture
def builder(registry):
    return ResponseBuilder(registry)


@pytest.fixture
def make_settings():
    """Factory for Settings with explicit overrides."""

    def _make(app_env: str = "development", **i18n_overrides) -> Settings:
        return Settings(
            APP_ENV=app_env,
            server=ServerSettings(),
            i18n=I18nSettings(**i18n_overrides),
        )

    return _make


@pytest.fixture
def make_app(make_settings, registry):
    """Factory for a fully assembled application using the test dictionaries."""

    def _make(app_env: str = "development", **i18n_overrides) -> FastAPI:
        return create_app(settings=make_settings(app_env, **i18n_overrides), registry=registry)

    return _make
