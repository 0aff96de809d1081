from __future__ import annotations

import json

import pytest

from tarjm.config import Settings

TEST_ENDPOINT = "http://tarjm.test/translate"


class FakeResponse:
    def __init__(self, status_code: int = 200, payload=None, text: str | None = None):
        self.status_code = status_code
        self._payload = payload
        if text is None:
            text = json.dumps(payload) if payload is not None else ""
        self.text = text

    def json(self):
        if self._payload is None:
            return json.loads(self.text)
        return self._payload


class FakeServer:
    """Stands in for ``requests.post`` and records every request body."""

    def __init__(self):
        self.calls: list[dict] = []
        self.response = FakeResponse(200, {"translatedText": "Hola Mundo"})
        self.error: Exception | None = None

    def respond(self, status_code: int, payload=None, text: str | None = None) -> None:
        self.response = FakeResponse(status_code, payload, text)

    def post(self, url, data=None, headers=None, **kwargs):
        self.calls.append({"url": url, "body": json.loads(data), "headers": headers, **kwargs})
        if self.error is not None:
            raise self.error
        return self.response


@pytest.fixture
def fake_server(monkeypatch):
    server = FakeServer()
    monkeypatch.setattr("tarjm.translation.client.requests.post", server.post)
    return server


@pytest.fixture
def config_path(tmp_path):
    return tmp_path / "config" / "tarjm" / "config.json"


@pytest.fixture
def settings(config_path):
    return Settings(endpoint=TEST_ENDPOINT, config_path=config_path)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ("TARJM_ENDPOINT", "TARJM_API_KEY", "TARJM_CONFIG"):
        monkeypatch.delenv(name, raising=False)
