"""Message lookup for the status line, panel titles and error messages."""

import os
from typing import Optional

from config import get_user_lang
from core.desktop.devtools.interface.constants import LANG_PACK

FALLBACK_LANG = "en"


def _backfill(base_lang: str = FALLBACK_LANG) -> None:
    """Copy base-language texts into packs that lack a key."""
    base = LANG_PACK[base_lang]
    for pack in LANG_PACK.values():
        for key, text in base.items():
            pack.setdefault(key, text)


_backfill()


def lang_from_locale(value: str) -> Optional[str]:
    """``ru_RU.UTF-8`` -> ``ru`` when a pack exists for it."""
    code = value.split(".", 1)[0].split("_", 1)[0].lower()
    return code if code in LANG_PACK else None


def effective_lang(preferred: Optional[str] = None) -> str:
    """Resolve the interface language.

    ``TODO_LANG`` wins, tests always get English, then ``preferred``, the
    ``lang`` config key and finally the ``LANG`` locale.
    """
    env_lang = os.getenv("TODO_LANG")
    if env_lang in LANG_PACK:
        return env_lang
    if os.getenv("PYTEST_CURRENT_TEST"):
        return FALLBACK_LANG
    for candidate in (preferred, get_user_lang()):
        if candidate in LANG_PACK:
            return candidate
    return lang_from_locale(os.getenv("LANG", "")) or FALLBACK_LANG


def translate(key: str, lang: Optional[str] = None, **kwargs) -> str:
    """Look ``key`` up and fill its placeholders; unknown keys come back as-is."""
    template = LANG_PACK[effective_lang(lang)].get(key, key)
    try:
        return template.format(**kwargs)
    except (KeyError, IndexError, ValueError):
        return template


__all__ = ["effective_lang", "lang_from_locale", "translate"]
