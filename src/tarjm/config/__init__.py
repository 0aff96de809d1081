"""Configuration module for tarjm.

This module provides process settings, the persisted per-user config
document and the store that reads and writes it.
"""

from __future__ import annotations

from tarjm.config.loader import load_settings
from tarjm.config.models import DEFAULT_CONFIG_PATH, DEFAULT_ENDPOINT, Settings, UserConfig
from tarjm.config.store import ConfigStore

__all__ = [
    # Models
    "Settings",
    "UserConfig",
    "DEFAULT_CONFIG_PATH",
    "DEFAULT_ENDPOINT",
    # Loaders
    "load_settings",
    # Store
    "ConfigStore",
]
