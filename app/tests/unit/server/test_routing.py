"""Tests for server.routing module (the response interceptor)."""

import pytest

from server.routing import is_envelope

ENVELOPE_KEYS = {"status", "message", "lang", "timestamp", "data"}


@pytest.mark.unit
class TestIsEnvelope:
    @pytest.mark.parametrize(
        "body,expected",
        [
            ({"status": "success"}, True),
            ({"success": True}, True),
            ({"id": 1}, False),
            ([{"status": "success"}], False),
            (None, False),
            ("status", False),
        ],
    )
    def test_detection(self, body, expected):
        assert is_envelope(body) is expected


@pytest.mark.integration
class TestEnvelopeRoute:
    """Tests for EnvelopeRoute through an assembled application."""

    def test_raw_object_is_wrapped(self, client):
        response = client.get("/fixtures/raw", headers={"Accept-Language": "ar"})

        assert response.status_code == 200
        body = response.json()
        assert set(body) == ENVELOPE_KEYS
        assert body["status"] == "success"
        assert body["lang"] == "ar"
        assert body["message"] == "تمت العملية بنجاح"
        assert body["data"] == {"data": {"id": 1}}

    def test_raw_list_is_wrapped_with_meta(self, client):
        body = client.get("/fixtures/list").json()

        assert body["data"]["data"] == [1, 2, 3]
        assert body["data"]["meta"]["total"] == 3
        assert body["data"]["meta"]["totalPages"] == 1

    def test_null_is_wrapped(self, client):
        body = client.get("/fixtures/none").json()

        assert body["status"] == "success"
        assert body["data"] is None

    def test_envelope_gains_missing_lang(self, client):
        body = client.get("/fixtures/envelope", headers={"Accept-Language": "ar"}).json()

        assert body == {
            "status": "success",
            "message": "Done",
            "timestamp": "t",
            "data": None,
            "lang": "ar",
        }

    def test_envelope_with_lang_is_untouched(self, client):
        body = client.get("/fixtures/envelope-with-lang", headers={"Accept-Language": "ar"}).json()
        assert body["lang"] == "fr"

    def test_legacy_success_flag_passes_through(self, client):
        body = client.get("/fixtures/legacy").json()
        assert body == {"success": True, "data": 1, "lang": "en"}

    def test_builder_output_is_not_wrapped_twice(self, client):
        body = client.get("/fixtures/built").json()

        assert set(body) == ENVELOPE_KEYS
        assert body["message"] == "تم العثور على المستخدم"
        assert body["data"] == {"data": {"id": "42"}}

    def test_status_code_is_preserved(self, client):
        response = client.get("/fixtures/created")

        assert response.status_code == 201
        assert response.json()["data"] == {"data": {"id": 7}}

    def test_custom_headers_and_cookies_are_preserved(self, client):
        response = client.get("/fixtures/with-headers")

        assert response.status_code == 202
        assert response.headers["X-Custom"] == "yes"
        assert response.cookies.get("session") == "abc"
        assert response.json()["data"] == {"data": {"id": 1}}
        assert int(response.headers["content-length"]) == len(response.content)

    def test_non_json_response_is_untouched(self, client):
        response = client.get("/fixtures/text")

        assert response.status_code == 200
        assert response.text == "pong"

    def test_no_content_is_untouched(self, client):
        response = client.delete("/fixtures/item")

        assert response.status_code == 204
        assert response.content == b""
