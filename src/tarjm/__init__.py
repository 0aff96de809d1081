"""tarjm: command-line client for LibreTranslate-compatible servers."""

from tarjm.api import tarjm, translate_text
from tarjm.exceptions import TarjmError

__version__ = "1.0.0"

__all__ = ["TarjmError", "__version__", "tarjm", "translate_text"]
