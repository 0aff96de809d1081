"""Embedding surface: run tarjm from other Python code without exiting."""

from __future__ import annotations

from collections.abc import Sequence

import click

from tarjm.cli.context import EmbeddedContext
from tarjm.cli.main import app
from tarjm.config import ConfigStore, Settings, load_settings
from tarjm.exceptions import InvalidArgumentsError
from tarjm.translation import Translation, TranslationClient, resolve_target_language, resolve_text


def tarjm(args: Sequence[str] = (), *, settings: Settings | None = None) -> str | None:
    """Run one invocation with CLI-style tokens.

    Example:
        >>> tarjm(["-l", "es", "Hello World"])
        'Hola Mundo'

    Returns:
        The translated text, the usage text for ``-h``, or ``None`` when only
        a default language was set.

    Raises:
        TarjmError: any failure, with the same message the CLI would print
    """
    if isinstance(args, str):
        raise TypeError("args must be a sequence of tokens, not a string")
    obj = {"context": EmbeddedContext(), "settings": settings or load_settings()}
    try:
        return app.main(
            args=list(args),
            prog_name="tarjm",
            standalone_mode=False,
            obj=obj,
        )
    except click.ClickException as exc:
        raise InvalidArgumentsError(exc.format_message()) from exc


def translate_text(
    text: str,
    target_language: str | None = None,
    *,
    settings: Settings | None = None,
) -> Translation:
    """Translate ``text`` directly, using the persisted default when no language is given."""
    settings = settings or load_settings()
    persisted = None
    if not target_language:
        persisted = ConfigStore(settings.config_path).load().default_language
    target = resolve_target_language(target_language, persisted)
    return TranslationClient.from_settings(settings).translate(resolve_text(text), target)
