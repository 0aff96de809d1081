from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

_RICH_HANDLER: RichHandler | None = None


def configure_logging(level: int = logging.INFO) -> None:
    global _RICH_HANDLER
    if _RICH_HANDLER is None:
        console = Console(stderr=True)
        handler = RichHandler(
            console=console, show_time=False, show_path=False, rich_tracebacks=True
        )
        logging.basicConfig(level=level, handlers=[handler], format="%(message)s")
        _RICH_HANDLER = handler
        # Silence urllib3 connection logs (used by requests)
        logging.getLogger("urllib3").setLevel(logging.WARNING)
        # basicConfig is a no-op when the root logger already has handlers
        logging.getLogger().setLevel(level)
    else:
        logging.getLogger().setLevel(level)
        _RICH_HANDLER.setLevel(level)


def get_logger(name: str) -> logging.Logger:
    # Embedding hosts own their logging setup; only the CLI calls configure_logging.
    return logging.getLogger(name)
