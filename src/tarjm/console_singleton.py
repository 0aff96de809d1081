"""Centralized console singletons for global quiet control."""

from __future__ import annotations

from rich.console import Console

_console: Console | None = None
_error_console: Console | None = None


def get_console() -> Console:
    """Get the shared Console instance.

    Returns:
        The global Console instance configured by configure_console().
        If not configured, returns a default Console instance.
    """
    global _console
    if _console is None:
        _console = Console()
    return _console


def get_error_console() -> Console:
    """Get the shared stderr Console used for error lines."""
    global _error_console
    if _error_console is None:
        _error_console = Console(stderr=True)
    return _error_console


def configure_console(*, quiet: bool = False) -> None:
    """Configure the global Console instance.

    Args:
        quiet: Suppress normal console output. Error lines still go to stderr.

    Note:
        This should be called once from the CLI entry after parsing flags.
        Calling it multiple times will replace the existing console instance.
    """
    global _console
    _console = Console(quiet=quiet)
