from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from tarjm.config.models import Settings

_ENV_KEYS = {
    "TARJM_ENDPOINT": "endpoint",
    "TARJM_API_KEY": "api_key",
    "TARJM_CONFIG": "config_path",
}


def load_settings(**overrides: Any) -> Settings:
    """Load settings with proper precedence.

    Loading order (later overrides earlier):
    1. Model defaults
    2. Environment variables: TARJM_ENDPOINT, TARJM_API_KEY, TARJM_CONFIG
    3. Explicit keyword overrides (``None`` values are ignored)

    Returns:
        Settings instance with merged configuration
    """
    payload: dict[str, Any] = {}

    for env_name, field in _ENV_KEYS.items():
        value = os.getenv(env_name)
        if value is None:
            continue
        value = value.strip()
        if field != "api_key" and not value:
            continue
        payload[field] = value

    payload.update({key: value for key, value in overrides.items() if value is not None})

    if "config_path" in payload:
        payload["config_path"] = Path(payload["config_path"]).expanduser()

    return Settings(**payload)
