from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_ENDPOINT = "http://tarjm:5000/translate"
DEFAULT_CONFIG_PATH = Path.home() / ".config" / "tarjm" / "config.json"


class Settings(BaseModel):
    """Process-level settings for one tarjm invocation."""

    endpoint: str = Field(default=DEFAULT_ENDPOINT, description="LibreTranslate /translate URL")
    api_key: str = Field(default="", description="Passed through verbatim in the request body")
    config_path: Path = Field(default_factory=lambda: DEFAULT_CONFIG_PATH)
    source_language: str = Field(default="auto")
    alternatives: int = Field(default=3, ge=0)

    @field_validator("endpoint")
    @classmethod
    def _strip_endpoint(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("endpoint must not be empty")
        return value

    def model_post_init(self, __context: Any) -> None:  # type: ignore[override]
        object.__setattr__(self, "config_path", self.config_path.expanduser())


class UserConfig(BaseModel):
    """Persisted per-user document, ``{"defaultLanguage": "<code>"}``.

    Unknown keys are kept so that a load/save cycle only ever touches
    ``defaultLanguage``.
    """

    default_language: str | None = Field(default=None, alias="defaultLanguage")

    model_config = ConfigDict(extra="allow", populate_by_name=True)

    def to_document(self) -> dict[str, Any]:
        document = self.model_dump(by_alias=True)
        if document.get("defaultLanguage") is None:
            document.pop("defaultLanguage", None)
        return document
