from __future__ import annotations

from pathlib import Path

from tarjm.exceptions import NoInputTextError, SourceFileNotFoundError, SourceReadError


def read_source_file(file_path: Path) -> str:
    if not file_path.exists():
        raise SourceFileNotFoundError(file_path)
    try:
        return file_path.read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise SourceReadError(file_path, f"not valid UTF-8 ({exc.reason})") from exc
    except OSError as exc:
        raise SourceReadError(file_path, exc.strerror or str(exc)) from exc


def resolve_text(positional_text: str, file_path: Path | None = None) -> str:
    """Return the text to translate.

    File contents win over positional text when both are given. The result is
    returned as-is; it only has to be non-blank.

    Raises:
        SourceFileNotFoundError: ``file_path`` does not exist
        SourceReadError: ``file_path`` exists but cannot be read
        NoInputTextError: the resolved text is empty after trimming
    """
    text = read_source_file(file_path) if file_path is not None else positional_text
    if not text.strip():
        raise NoInputTextError()
    return text
