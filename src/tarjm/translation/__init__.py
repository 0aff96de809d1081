from tarjm.translation.client import Translation, TranslationClient
from tarjm.translation.languages import FALLBACK_LANGUAGE, describe_language, resolve_target_language
from tarjm.translation.sources import resolve_text

__all__ = [
    "FALLBACK_LANGUAGE",
    "Translation",
    "TranslationClient",
    "describe_language",
    "resolve_target_language",
    "resolve_text",
]
