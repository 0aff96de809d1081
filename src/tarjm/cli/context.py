"""Execution contexts: the single point where an outcome is signalled.

``TerminatingContext`` ends the process (console script); ``EmbeddedContext``
returns or raises (library call). Both receive the same ``Outcome``.
"""

from __future__ import annotations

import abc

import click
from rich.console import Console
from rich.markup import escape

from tarjm.cli.core import Mode, Outcome
from tarjm.cli.usage import USAGE
from tarjm.console_singleton import get_console, get_error_console
from tarjm.logging_utils import get_logger
from tarjm.translation import describe_language

logger = get_logger(__name__)


class ExecutionContext(abc.ABC):
    @abc.abstractmethod
    def signal(self, outcome: Outcome) -> str | None:
        raise NotImplementedError


class TerminatingContext(ExecutionContext):
    """Print the outcome and exit with status 0 or 1."""

    def signal(self, outcome: Outcome) -> str | None:
        console = get_console()

        if outcome.mode is Mode.HELP:
            # Help is shown even with --quiet
            Console().print(f"[green]{escape(USAGE)}[/green]", soft_wrap=True)
            raise click.exceptions.Exit(0)

        if outcome.default_language:
            display = describe_language(outcome.default_language)
            suffix = f" ({display})" if display != outcome.default_language else ""
            console.print(
                f"[green]Default language set to: {escape(outcome.default_language)}"
                f"{escape(suffix)}[/green]"
            )

        if outcome.error is not None:
            get_error_console().print(
                f"[red]Error:[/red] {escape(str(outcome.error))}", soft_wrap=True
            )
            raise click.exceptions.Exit(1)

        if outcome.translation is not None:
            console.print("[cyan]Translated Text:[/cyan]\n")
            console.print(
                f"[bold]{escape(outcome.translation.translated_text)}[/bold]", soft_wrap=True
            )
        raise click.exceptions.Exit(0)


class EmbeddedContext(ExecutionContext):
    """Return the translated text, or raise the outcome's error."""

    def signal(self, outcome: Outcome) -> str | None:
        if outcome.error is not None:
            raise outcome.error
        if outcome.mode is Mode.HELP:
            return USAGE
        if outcome.default_language:
            logger.info("Default language set to: %s", outcome.default_language)
        if outcome.translation is None:
            return None
        return outcome.translation.translated_text
