"""Feature-level fixtures for i18n tests."""

import json

import pytest


@pytest.fixture
def write_dictionary():
    """Write a JSON (or raw text) dictionary for a locale into a directory."""

    def _write(directory, locale, content):
        directory.mkdir(parents=True, exist_ok=True)
        path = directory / f"{locale}.json"
        if isinstance(content, str):
            path.write_text(content, encoding="utf-8")
        else:
            path.write_text(json.dumps(content, ensure_ascii=False), encoding="utf-8")
        return path

    return _write


class FakeRequest:
    """Minimal object exposing request headers."""

    def __init__(self, headers=None):
        self.headers = headers or {}


@pytest.fixture
def fake_request():
    return FakeRequest
