from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

import requests

from tarjm.config import Settings
from tarjm.exceptions import ServerError, TransportError, TranslationRejectedError
from tarjm.logging_utils import get_logger

logger = get_logger(__name__)


@dataclass(frozen=True)
class Translation:
    translated_text: str
    target_language: str
    alternatives: list[str] = field(default_factory=list)
    detected_language: str | None = None


class TranslationClient:
    """Single-shot client for a LibreTranslate-compatible ``/translate`` endpoint."""

    def __init__(
        self,
        endpoint: str,
        *,
        api_key: str = "",
        source_language: str = "auto",
        alternatives: int = 3,
    ):
        self.endpoint = endpoint
        self.api_key = api_key
        self.source_language = source_language
        self.alternatives = alternatives

    @classmethod
    def from_settings(cls, settings: Settings) -> TranslationClient:
        return cls(
            settings.endpoint,
            api_key=settings.api_key,
            source_language=settings.source_language,
            alternatives=settings.alternatives,
        )

    def build_payload(self, text: str, target_language: str) -> dict[str, Any]:
        return {
            "q": text,
            "source": self.source_language,
            "target": target_language,
            "format": "text",
            "alternatives": self.alternatives,
            "api_key": self.api_key,
        }

    def translate(self, text: str, target_language: str) -> Translation:
        payload = self.build_payload(text, target_language)
        logger.debug("POST %s (target=%s)", self.endpoint, target_language)
        try:
            response = requests.post(
                self.endpoint,
                data=json.dumps(payload),
                headers={"Content-Type": "application/json"},
            )
        except requests.exceptions.RequestException as exc:
            raise TransportError(self.endpoint, str(exc)) from exc

        if not 200 <= response.status_code < 300:
            raise ServerError(response.status_code, response.text)

        try:
            body: Any = response.json()
        except ValueError as exc:
            raise TranslationRejectedError(response.text) from exc

        translated = body.get("translatedText") if isinstance(body, dict) else None
        if not translated or not isinstance(translated, str):
            raise TranslationRejectedError(response.text)

        alternatives = body.get("alternatives")
        if not isinstance(alternatives, list):
            alternatives = []
        detected = body.get("detectedLanguage")
        detected_code = detected.get("language") if isinstance(detected, dict) else None
        if detected_code:
            logger.debug("Detected source language: %s", detected_code)
        if alternatives:
            logger.debug("Alternatives: %s", alternatives)

        return Translation(
            translated_text=translated,
            target_language=target_language,
            alternatives=[item for item in alternatives if isinstance(item, str)],
            detected_language=detected_code,
        )
