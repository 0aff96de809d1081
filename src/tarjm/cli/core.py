"""Mode dispatch shared by the console script and the embedding call.

Nothing in here prints or exits. ``execute`` turns an ``Invocation`` into an
``Outcome``; an execution context decides how that outcome is signalled.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from tarjm.config import ConfigStore
from tarjm.exceptions import TarjmError
from tarjm.logging_utils import get_logger
from tarjm.translation import Translation, TranslationClient, resolve_target_language, resolve_text

logger = get_logger(__name__)


class Mode(str, Enum):
    HELP = "help"
    SET_DEFAULT_ONLY = "set_default_only"
    SET_DEFAULT_AND_TRANSLATE = "set_default_and_translate"
    TRANSLATE_ONLY = "translate_only"
    ERROR = "error"


@dataclass(frozen=True)
class Invocation:
    set_default_language: str | None = None
    specified_language: str | None = None
    file_path: Path | None = None
    show_help: bool = False
    positional_text: tuple[str, ...] = ()

    @property
    def text(self) -> str:
        return " ".join(self.positional_text)

    @property
    def has_text_source(self) -> bool:
        return bool(self.text) or self.file_path is not None


@dataclass(frozen=True)
class Outcome:
    mode: Mode
    default_language: str | None = None
    translation: Translation | None = None
    error: TarjmError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def determine_mode(invocation: Invocation) -> Mode:
    """Initial mode from the flags alone; failures later move it to ``Mode.ERROR``."""
    if invocation.show_help:
        return Mode.HELP
    if invocation.set_default_language:
        if invocation.has_text_source:
            return Mode.SET_DEFAULT_AND_TRANSLATE
        return Mode.SET_DEFAULT_ONLY
    return Mode.TRANSLATE_ONLY


def execute(invocation: Invocation, store: ConfigStore, client: TranslationClient) -> Outcome:
    """Run one invocation to completion without signalling anything.

    The config document is read at most once and written at most once. The
    network is only touched once a non-blank text has been resolved.
    """
    mode = determine_mode(invocation)
    if mode is Mode.HELP:
        return Outcome(mode=mode)

    config = None
    default_language = invocation.set_default_language
    if default_language:
        config = store.load()
        config.default_language = default_language
        store.save(config)
        if mode is Mode.SET_DEFAULT_ONLY:
            return Outcome(mode=mode, default_language=default_language)

    try:
        if invocation.specified_language:
            persisted = None
        else:
            if config is None:
                config = store.load()
            persisted = config.default_language
        target_language = resolve_target_language(invocation.specified_language, persisted)
        text = resolve_text(invocation.text, invocation.file_path)
        translation = client.translate(text, target_language)
    except TarjmError as exc:
        logger.debug("Invocation failed in mode %s: %s", mode.value, exc)
        return Outcome(mode=Mode.ERROR, default_language=default_language, error=exc)

    return Outcome(mode=mode, default_language=default_language, translation=translation)
