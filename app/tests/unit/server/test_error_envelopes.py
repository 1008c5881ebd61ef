"""End-to-end tests of error envelopes through an assembled application."""

import pytest

ENVELOPE_KEYS = {"status", "message", "lang", "timestamp", "data"}


def assert_error_envelope(body, lang="en"):
    assert set(body) == ENVELOPE_KEYS
    assert body["status"] == "error"
    assert body["lang"] == lang
    assert body["data"] is None


@pytest.mark.integration
class TestClassifiedErrors:
    """Errors with an explicit status code."""

    def test_not_found_in_arabic(self, client):
        response = client.get("/fixtures/not-found", headers={"Accept-Language": "ar"})

        assert response.status_code == 404
        body = response.json()
        assert_error_envelope(body, "ar")
        assert body["message"] == "المشروع غير موجود"

    def test_detail_never_reaches_the_wire(self, client):
        response = client.get("/fixtures/not-found")
        assert "project id=42 missing" not in response.text

    def test_structured_reason(self, client):
        response = client.get("/fixtures/conflict")

        assert response.status_code == 409
        assert response.json()["message"] == "Slug already taken"
        assert "slug=web" not in response.text

    def test_framework_http_exception(self, client):
        response = client.get("/fixtures/forbidden")

        assert response.status_code == 403
        assert response.json()["message"] == "projects.forbidden"

    def test_exception_headers_are_sent(self, client):
        response = client.get("/fixtures/unauthorized")

        assert response.status_code == 401
        assert response.headers["WWW-Authenticate"] == "Bearer"

    def test_unknown_route(self, client):
        response = client.get("/no/such/route")

        assert response.status_code == 404
        assert_error_envelope(response.json())
        assert response.json()["message"] == "Not Found"

    def test_unsupported_language_falls_back(self, client):
        response = client.get("/fixtures/not-found", headers={"Accept-Language": "fr"})

        body = response.json()
        assert body["lang"] == "fr"
        assert body["message"] == "Project not found"

    def test_rate_limit_exceeded(self, client):
        assert client.get("/fixtures/limited").status_code == 200
        assert client.get("/fixtures/limited").status_code == 200

        response = client.get("/fixtures/limited")

        assert response.status_code == 429
        assert_error_envelope(response.json())
        assert response.json()["message"] == "Too many requests"


@pytest.mark.integration
class TestValidationErrors:
    """Request validation failures."""

    def test_known_phrases_are_translated(self, client):
        response = client.post(
            "/fixtures/contacts",
            json={"name": "A", "email": "bad"},
            headers={"Accept-Language": "ar"},
        )

        assert response.status_code == 400
        body = response.json()
        assert_error_envelope(body, "ar")
        assert body["message"] == "القيمة قصيرة جداً, البريد الإلكتروني غير صالح"

    def test_english_phrases(self, client):
        response = client.post(
            "/fixtures/contacts", json={"name": "Al", "email": "a@b.c", "phone": "abc"}
        )

        assert response.status_code == 400
        assert response.json()["message"] == "Phone must be a valid phone number"

    def test_missing_translation_keeps_phrase(self, client):
        response = client.post(
            "/fixtures/contacts",
            json={"name": "Al", "email": "a@b.c", "phone": "abc"},
            headers={"Accept-Language": "ar"},
        )

        assert response.json()["message"] == "phone must be a valid phone number"

    def test_unknown_phrases_are_kept(self, client):
        response = client.post("/fixtures/contacts", json={"email": "a@b.c"})

        assert response.status_code == 400
        assert response.json()["message"] == "name should not be empty"


@pytest.mark.integration
class TestUnclassifiedErrors:
    """Errors without an explicit status code."""

    def test_development_shows_message(self, client):
        response = client.get("/fixtures/crash")

        assert response.status_code == 500
        body = response.json()
        assert_error_envelope(body)
        assert body["message"] == "database connection refused"
        assert "Traceback" not in response.text

    def test_empty_message_uses_internal_error(self, client):
        response = client.get("/fixtures/crash-empty")

        assert response.status_code == 500
        assert response.json()["message"] == "Internal server error"

    def test_production_redacts_message(self, production_client):
        response = production_client.get("/fixtures/crash", headers={"Accept-Language": "ar"})

        assert response.status_code == 500
        body = response.json()
        assert_error_envelope(body, "ar")
        assert body["message"] == "خطأ داخلي في الخادم"
        assert "database" not in response.text

    def test_production_redacts_classified_500(self, production_client):
        response = production_client.get("/fixtures/internal")

        assert response.status_code == 500
        assert response.json()["message"] == "Internal server error"

    def test_development_keeps_classified_500(self, client):
        response = client.get("/fixtures/internal")
        assert response.json()["message"] == "Deliberate failure"

    def test_production_keeps_client_errors(self, production_client):
        response = production_client.get("/fixtures/not-found")

        assert response.status_code == 404
        assert response.json()["message"] == "Project not found"
