"""Persistence of the per-user config document.

The store never raises on I/O problems: a missing, blank or unparseable file
reads as an empty config, and a failed write is logged and skipped so that a
translation can still go ahead with the in-memory choice.
"""

from __future__ import annotations

import json
from pathlib import Path

from pydantic import ValidationError

from tarjm.config.models import UserConfig
from tarjm.exceptions import ConfigWriteError
from tarjm.logging_utils import get_logger

logger = get_logger(__name__)


def atomic_write(path: Path, payload: dict) -> None:
    """
    Atomically write a dictionary to a JSON file.

    The temporary file with .tmp suffix is written first, then renamed over
    the target path, so readers see either the old or the new document.

    Args:
        path: Target file path
        payload: Dictionary to serialize as JSON
    """
    tmp_path = path.with_suffix(path.suffix + ".tmp")
    content = json.dumps(payload, indent=2, ensure_ascii=False)
    try:
        tmp_path.write_text(content, encoding="utf-8")
        tmp_path.replace(path)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise


class ConfigStore:
    def __init__(self, path: Path):
        self.path = path

    def load(self) -> UserConfig:
        if not self.path.exists():
            return UserConfig()
        try:
            text = self.path.read_text(encoding="utf-8")
            if not text.strip():
                return UserConfig()
            data = json.loads(text)
            return UserConfig.model_validate(data)
        except json.JSONDecodeError as exc:
            logger.error(
                "Error reading config file %s: invalid JSON (line %s, column %s)",
                self.path,
                exc.lineno,
                exc.colno,
            )
        except ValidationError as exc:
            first_error = exc.errors()[0]
            field = ".".join(str(loc) for loc in first_error["loc"]) or "document"
            logger.error(
                "Error reading config file %s: %s - %s", self.path, field, first_error["msg"]
            )
            if isinstance(data, dict):
                # Keep unknown keys; only the invalid defaultLanguage is dropped
                rest = {
                    key: value
                    for key, value in data.items()
                    if key not in ("defaultLanguage", "default_language")
                }
                return UserConfig.model_validate(rest)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Error reading config file %s: %s", self.path, exc)
        return UserConfig()

    def save(self, config: UserConfig) -> bool:
        """Overwrite the config document. Returns False if the write failed."""
        try:
            self._write(config)
        except ConfigWriteError as exc:
            logger.warning("%s", exc)
            return False
        logger.debug("Saved config to %s", self.path)
        return True

    def _write(self, config: UserConfig) -> None:
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            atomic_write(self.path, config.to_document())
        except OSError as exc:
            reason = exc.strerror or str(exc)
            raise ConfigWriteError(self.path, reason) from exc
