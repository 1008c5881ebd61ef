"""Tests for infrastructure.logging.formatters module."""

import pytest

from infrastructure.logging.formatters import (
    add_app_context,
    mask_sensitive_data,
    truncate_large_values,
)


@pytest.mark.unit
class TestAddAppContext:
    def test_adds_context(self):
        processor = add_app_context("portfolio-cms", "production", "abc123")
        event = processor(None, "info", {"event": "x"})
        assert event["app_name"] == "portfolio-cms"
        assert event["environment"] == "production"
        assert event["app_version"] == "abc123"

    def test_existing_keys_win(self):
        processor = add_app_context("portfolio-cms", "production")
        event = processor(None, "info", {"event": "x", "environment": "test"})
        assert event["environment"] == "test"


@pytest.mark.unit
class TestMaskSensitiveData:
    def test_sensitive_keys_are_masked(self):
        processor = mask_sensitive_data()
        event = processor(
            None,
            "info",
            {"event": "login", "password": "hunter2", "refresh_token": "t", "email": "a@b.c"},
        )
        assert event["password"] == "***REDACTED***"
        assert event["refresh_token"] == "***REDACTED***"
        assert event["email"] == "a@b.c"

    def test_none_values_are_left_alone(self):
        processor = mask_sensitive_data()
        assert processor(None, "info", {"password": None})["password"] is None

    def test_additional_patterns(self):
        processor = mask_sensitive_data(mask_value="x", additional_patterns=frozenset({"email"}))
        assert processor(None, "info", {"email": "a@b.c"})["email"] == "x"


@pytest.mark.unit
class TestTruncateLargeValues:
    def test_long_strings_are_truncated(self):
        processor = truncate_large_values(max_length=10)
        event = processor(None, "info", {"message": "a" * 50})
        assert event["message"].startswith("a" * 10)
        assert "truncated, 50 chars total" in event["message"]

    def test_stacks_are_exempt(self):
        processor = truncate_large_values(max_length=10)
        event = processor(None, "error", {"stack": "s" * 50, "exception": "e" * 50})
        assert event["stack"] == "s" * 50
        assert event["exception"] == "e" * 50
