"""Custom exceptions for tarjm."""

from __future__ import annotations

from pathlib import Path


class TarjmError(Exception):
    """Base exception for all tarjm errors."""

    pass


class InvalidArgumentsError(TarjmError):
    """Raised when an embedded call receives tokens that cannot be parsed."""


class InputError(TarjmError):
    """Base class for failures resolving the text to translate."""


class NoInputTextError(InputError):
    """Raised when there is nothing to translate."""

    def __init__(self) -> None:
        super().__init__("Please provide text to translate.")


class SourceFileNotFoundError(InputError):
    """Raised when the file given with ``--file`` does not exist."""

    def __init__(self, file_path: Path):
        self.file_path = file_path
        super().__init__(f"Error reading file: no such file '{file_path}'")


class SourceReadError(InputError):
    """Raised when the file given with ``--file`` exists but cannot be read."""

    def __init__(self, file_path: Path, reason: str):
        """Initialize error with context.

        Args:
            file_path: Path of the unreadable file
            reason: Low-level reason reported by the OS or decoder
        """
        self.file_path = file_path
        self.reason = reason
        super().__init__(f"Error reading file '{file_path}': {reason}")


class ConfigWriteError(TarjmError):
    """Raised internally when the config document cannot be written.

    The config store logs and absorbs this; it never reaches the caller.
    """

    def __init__(self, config_path: Path, reason: str):
        self.config_path = config_path
        self.reason = reason
        super().__init__(f"Error writing config file '{config_path}': {reason}")


class TranslationError(TarjmError):
    """Base class for failures talking to the translation server."""


class TransportError(TranslationError):
    """Raised when the translation server cannot be reached at all."""

    def __init__(self, endpoint: str, reason: str):
        self.endpoint = endpoint
        self.reason = reason
        super().__init__(f"Could not reach translation server at {endpoint}: {reason}")


class ServerError(TranslationError):
    """Raised when the translation server answers with a non-2xx status."""

    def __init__(self, status: int, body: str = ""):
        self.status = status
        self.body = body
        super().__init__(f"Server responded with status {status}")


class TranslationRejectedError(TranslationError):
    """Raised when a 2xx response carries no usable ``translatedText``."""

    def __init__(self, body: str):
        self.body = body
        super().__init__(f"Translation failed: {body}")
