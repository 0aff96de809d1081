"""Tests for the embedding surface: nothing here may exit the process."""

from __future__ import annotations

import json

import pytest

from tarjm import TarjmError, tarjm, translate_text
from tarjm.cli.usage import USAGE
from tarjm.config import ConfigStore, UserConfig
from tarjm.exceptions import (
    InvalidArgumentsError,
    NoInputTextError,
    ServerError,
    SourceFileNotFoundError,
    TransportError,
)


def test_returns_translated_text(settings, fake_server):
    assert tarjm(["Hello World"], settings=settings) == "Hola Mundo"
    assert fake_server.calls[0]["body"]["target"] == "en"


def test_language_flag(settings, fake_server):
    tarjm(["-l", "es", "Hello World"], settings=settings)

    assert fake_server.calls[0]["body"]["target"] == "es"
    assert not settings.config_path.exists()


def test_set_default_only_returns_none(settings, fake_server):
    assert tarjm(["-d", "fr"], settings=settings) is None
    assert json.loads(settings.config_path.read_text(encoding="utf-8")) == {"defaultLanguage": "fr"}
    assert fake_server.calls == []


def test_persisted_default_is_used(settings, fake_server):
    ConfigStore(settings.config_path).save(UserConfig(default_language="it"))

    tarjm(["Hello"], settings=settings)

    assert fake_server.calls[0]["body"]["target"] == "it"


def test_help_returns_usage(settings, fake_server):
    assert tarjm(["--help"], settings=settings) == USAGE
    assert fake_server.calls == []


def test_server_error_is_raised(settings, fake_server):
    fake_server.respond(500, text="Internal Server Error")

    with pytest.raises(ServerError) as exc_info:
        tarjm(["Hello World"], settings=settings)

    assert exc_info.value.status == 500
    assert str(exc_info.value) == "Server responded with status 500"


def test_no_input_is_raised_not_exited(settings, fake_server):
    with pytest.raises(NoInputTextError):
        tarjm([], settings=settings)


def test_missing_file_is_raised(settings, fake_server, tmp_path):
    with pytest.raises(SourceFileNotFoundError):
        tarjm(["-f", str(tmp_path / "missing.txt")], settings=settings)

    assert fake_server.calls == []


def test_transport_error_is_raised(settings, fake_server):
    import requests

    fake_server.error = requests.exceptions.ConnectionError("refused")

    with pytest.raises(TransportError):
        tarjm(["Hello"], settings=settings)


def test_bad_tokens_raise_invalid_arguments(settings, fake_server):
    with pytest.raises(InvalidArgumentsError) as exc_info:
        tarjm(["--bogus"], settings=settings)

    assert "--bogus" in str(exc_info.value)
    assert isinstance(exc_info.value, TarjmError)


def test_missing_option_value_raises_invalid_arguments(settings, fake_server):
    with pytest.raises(InvalidArgumentsError):
        tarjm(["-l"], settings=settings)


def test_string_args_are_refused(settings):
    with pytest.raises(TypeError):
        tarjm("Hello World", settings=settings)


def test_uses_environment_settings_by_default(monkeypatch, settings, fake_server):
    monkeypatch.setenv("TARJM_ENDPOINT", "http://env.test/translate")
    monkeypatch.setenv("TARJM_CONFIG", str(settings.config_path))

    tarjm(["Hello"])

    assert fake_server.calls[0]["url"] == "http://env.test/translate"


class TestTranslateText:
    def test_returns_full_translation(self, settings, fake_server):
        fake_server.respond(200, {"translatedText": "Bonjour", "alternatives": ["Salut"]})

        result = translate_text("Hello", "fr", settings=settings)

        assert result.translated_text == "Bonjour"
        assert result.alternatives == ["Salut"]
        assert result.target_language == "fr"

    def test_uses_persisted_default(self, settings, fake_server):
        ConfigStore(settings.config_path).save(UserConfig(default_language="pt"))

        result = translate_text("Hello", settings=settings)

        assert result.target_language == "pt"

    def test_blank_text_raises(self, settings, fake_server):
        with pytest.raises(NoInputTextError):
            translate_text("  ", "fr", settings=settings)
        assert fake_server.calls == []
