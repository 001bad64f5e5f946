"""
src/i18n/preferences.py
───────────────────────
Active-language state: cached in memory, persisted through a storage
object, seeded from the runtime locale on first use.

Usage:
    store = LanguageStore(PreferenceStorage(), locale=lambda: "en-US")
    store.get_lang()        # → "en" (nothing persisted yet)
    store.set_lang("zh")    # persists, updates <html lang>, emits lang_change
    store.set_lang("fr")    # ignored → False
"""
from __future__ import annotations

import locale as _locale
import logging
import os
from collections.abc import Callable
from typing import Protocol

from bs4 import BeautifulSoup

from config.site import HTML_LANG, LANG_STORAGE_KEY, LANGUAGES, PRIMARY_LANG, SECONDARY_LANG
from src.i18n.events import LANG_CHANGE, EventBus

logger = logging.getLogger(__name__)


class Storage(Protocol):
    def get_item(self, key: str) -> str | None: ...

    def set_item(self, key: str, value: str) -> None: ...


def system_locale() -> str | None:
    """Locale of the running process (LANG / LC_ALL, then the C library)."""
    for var in ("LC_ALL", "LC_MESSAGES", "LANG"):
        value = os.environ.get(var)
        if value:
            return value
    return _locale.getlocale()[0]


def classify_locale(tag: str | None) -> str:
    """Primary language when the locale starts with its code, else secondary."""
    tag = (tag or PRIMARY_LANG).lower()
    return PRIMARY_LANG if tag.startswith(PRIMARY_LANG) else SECONDARY_LANG


class LanguageStore:
    def __init__(
        self,
        storage: Storage,
        locale: Callable[[], str | None] = system_locale,
        bus: EventBus | None = None,
        document: BeautifulSoup | None = None,
    ) -> None:
        self.storage = storage
        self.locale = locale
        self.bus = bus or EventBus()
        # Document whose <html lang> mirrors the active language
        self.document = document
        self._current: str | None = None

    def get_lang(self) -> str:
        if self._current:
            return self._current

        stored = self.storage.get_item(LANG_STORAGE_KEY)
        if stored in LANGUAGES:
            self._current = stored
            return self._current

        self._current = classify_locale(self.locale())
        logger.debug("No stored language; detected %s from locale", self._current)
        return self._current

    def set_lang(self, lang: str) -> bool:
        """Switch the active language. Unrecognised codes are ignored."""
        if lang not in LANGUAGES:
            logger.debug("Ignoring unsupported language %r", lang)
            return False

        lang = LANGUAGES[LANGUAGES.index(lang)]  # plain str, also for Language members
        self._current = lang
        self.storage.set_item(LANG_STORAGE_KEY, lang)
        self._update_document_lang(lang)
        self.bus.emit(LANG_CHANGE, lang=lang)
        return True

    def _update_document_lang(self, lang: str) -> None:
        if self.document is None:
            return
        html_tag = self.document.find("html")
        if html_tag is not None:
            html_tag["lang"] = HTML_LANG[lang]
