"""tarjm CLI main entry point."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from tarjm.cli.context import ExecutionContext, TerminatingContext
from tarjm.cli.core import Invocation, execute
from tarjm.config import ConfigStore, Settings, load_settings
from tarjm.console_singleton import configure_console
from tarjm.logging_utils import configure_logging
from tarjm.translation import TranslationClient


@click.command(
    name="tarjm",
    # -h/--help is handled as a dispatch mode, not by click
    context_settings={"help_option_names": []},
)
@click.option(
    "-d",
    "--default",
    "set_default_language",
    metavar="LANGUAGE",
    help="Set the default target language.",
)
@click.option(
    "-l",
    "--language",
    "specified_language",
    metavar="LANGUAGE",
    help="Target language for this translation.",
)
@click.option(
    "-f",
    "--file",
    "file_path",
    type=click.Path(path_type=Path),
    help="Read the text to translate from a file.",
)
@click.option("-h", "--help", "show_help", is_flag=True, help="Display the help message.")
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose logging for debugging.")
@click.option("-q", "--quiet", is_flag=True, help="Suppress normal console output.")
@click.argument("text", nargs=-1)
@click.pass_context
def app(
    ctx: click.Context,
    set_default_language: str | None,
    specified_language: str | None,
    file_path: Path | None,
    show_help: bool,
    verbose: bool,
    quiet: bool,
    text: tuple[str, ...],
) -> str | None:
    """Translate text with a LibreTranslate-compatible server."""
    obj = ctx.ensure_object(dict)
    context: ExecutionContext | None = obj.get("context")
    if context is None:
        context = TerminatingContext()
        configure_console(quiet=quiet)
        configure_logging(level=logging.DEBUG if verbose else logging.INFO)

    settings: Settings = obj.get("settings") or load_settings()
    invocation = Invocation(
        set_default_language=set_default_language,
        specified_language=specified_language,
        file_path=file_path,
        show_help=show_help,
        positional_text=text,
    )
    outcome = execute(
        invocation,
        store=ConfigStore(settings.config_path),
        client=TranslationClient.from_settings(settings),
    )
    return context.signal(outcome)


def main() -> None:
    app(prog_name="tarjm")


if __name__ == "__main__":
    main()
