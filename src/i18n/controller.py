"""
src/i18n/controller.py
──────────────────────
Drives translation of one page document.

Entry points:
  - translate_page()   : resolve page → load header/footer/page → apply to
                         the whole document → update <title> / description
  - switch_lang(lang)  : set language, full translate, then re-apply over
                         header, footer and sticky header
  - header/footer loaded events (after start()) : re-apply to that fragment
                         only, without reloading payloads

Passes are not serialised: a switch started while another pass is in flight
runs alongside it and the last write to each element wins.
"""
from __future__ import annotations

import logging
from collections.abc import Callable

from bs4 import BeautifulSoup, Tag
from pydantic import ValidationError

from config.site import (
    FOOTER_NS,
    FOOTER_SELECTOR,
    HEADER_NS,
    HEADER_SELECTOR,
    META_KEY,
    STICKY_HEADER_SELECTOR,
)
from src.data.models import PageMeta
from src.i18n.applicator import apply_translations
from src.i18n.events import FOOTER_LOADED, HEADER_LOADED, EventBus
from src.i18n.loader import TranslationLoader
from src.i18n.paths import resolve_page_name
from src.i18n.preferences import LanguageStore
from src.i18n.translator import TranslationRegistry

logger = logging.getLogger(__name__)


class PageController:
    def __init__(
        self,
        document: BeautifulSoup,
        path: str,
        store: LanguageStore,
        loader: TranslationLoader,
        bus: EventBus | None = None,
        registry: TranslationRegistry | None = None,
    ) -> None:
        self.document = document
        self.path = path
        self.store = store
        self.loader = loader
        self.bus = bus or store.bus
        self.registry = registry or TranslationRegistry()
        self._subscriptions: list[Callable[[], None]] = []

        # <html lang> follows the active language of this document
        self.store.document = document

    # ── Lifecycle ─────────────────────────────────────────────────────────────

    def start(self) -> None:
        """Listen for fragment-loaded events. Idempotent."""
        if self._subscriptions:
            return
        self._subscriptions = [
            self.bus.subscribe(HEADER_LOADED, self.on_header_loaded),
            self.bus.subscribe(FOOTER_LOADED, self.on_footer_loaded),
        ]

    def stop(self) -> None:
        for unsubscribe in self._subscriptions:
            unsubscribe()
        self._subscriptions = []

    # ── Full pass ─────────────────────────────────────────────────────────────

    async def translate_page(self) -> str:
        """Translate the whole document; returns the page namespace used."""
        page = resolve_page_name(self.path)
        self.registry.current_page = page
        logger.info("Translating page %s (path=%s, lang=%s)", page, self.path, self.store.get_lang())

        loaded = await self.loader.load_translations([HEADER_NS, FOOTER_NS, page])
        self.registry.replace(loaded)

        self.apply(self.document)
        self.update_meta_tags(page)
        return page

    def apply(self, root: Tag | None) -> int:
        if root is None:
            return 0
        return apply_translations(self.registry, root, self.store.get_lang())

    def update_meta_tags(self, page: str) -> None:
        payload = self.registry.get(page) or {}
        raw = payload.get(META_KEY)
        if not isinstance(raw, dict):
            return
        try:
            meta = PageMeta.model_validate(raw)
        except ValidationError as exc:
            logger.warning("Ignoring malformed meta in %s: %s", page, exc)
            return

        if meta.title:
            self._title().string = meta.title
        if meta.description:
            self._meta_description()["content"] = meta.description

    def _head(self) -> Tag:
        head = self.document.find("head")
        if head is None:
            head = self.document.new_tag("head")
            html_tag = self.document.find("html")
            if html_tag is not None:
                html_tag.insert(0, head)
            else:
                self.document.insert(0, head)
        return head

    def _title(self) -> Tag:
        title = self.document.find("title")
        if title is None:
            title = self.document.new_tag("title")
            self._head().append(title)
        return title

    def _meta_description(self) -> Tag:
        meta = self.document.find("meta", attrs={"name": "description"})
        if meta is None:
            meta = self.document.new_tag("meta", attrs={"name": "description"})
            self._head().append(meta)
        return meta

    # ── Fragment events ───────────────────────────────────────────────────────

    def on_header_loaded(self, **_: object) -> None:
        self.apply(self.document.select_one(HEADER_SELECTOR))
        self.apply(self.document.select_one(STICKY_HEADER_SELECTOR))

    def on_footer_loaded(self, **_: object) -> None:
        self.apply(self.document.select_one(FOOTER_SELECTOR))

    # ── Language switch ───────────────────────────────────────────────────────

    async def switch_lang(self, lang: str) -> bool:
        """Global switch entry point. Never raises; False when the switch failed."""
        try:
            logger.info("Switching language to %s", lang)
            self.store.set_lang(lang)
            await self.translate_page()

            # Fragments may have been injected after the document pass ran
            for selector in (HEADER_SELECTOR, FOOTER_SELECTOR, STICKY_HEADER_SELECTOR):
                self.apply(self.document.select_one(selector))
        except Exception:
            logger.exception("Language switch to %r failed", lang)
            return False
        return True
