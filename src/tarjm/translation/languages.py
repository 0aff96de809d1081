from __future__ import annotations

FALLBACK_LANGUAGE = "en"

_LANGUAGE_NAMES = {
    "auto": "Auto",
    "ar": "Arabic",
    "de": "German",
    "en": "English",
    "es": "Spanish",
    "fa": "Persian",
    "fr": "French",
    "hi": "Hindi",
    "it": "Italian",
    "ja": "Japanese",
    "ko": "Korean",
    "nl": "Dutch",
    "pl": "Polish",
    "pt": "Portuguese",
    "ru": "Russian",
    "tr": "Turkish",
    "uk": "Ukrainian",
    "zh": "Chinese",
    "zh-Hans": "Simplified Chinese",
    "zh-Hant": "Traditional Chinese",
}


def resolve_target_language(specified: str | None, persisted: str | None) -> str:
    """Pick the language code sent to the server.

    An explicit per-call code wins, then the persisted default, then
    ``FALLBACK_LANGUAGE``. Codes are passed through unvalidated.
    """
    if specified:
        return specified
    if persisted:
        return persisted
    return FALLBACK_LANGUAGE


def describe_language(code: str) -> str:
    return _LANGUAGE_NAMES.get(code, code)
