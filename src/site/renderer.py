"""
src/site/renderer.py
────────────────────
Renders one page of the static site the way a visitor's browser would see
it after the i18n engine has run.

Sequence for render(path, lang):
  1. Fetch the page's HTML file and parse it
  2. Start the page controller (listens for header/footer loaded events)
  3. Concurrently: full translate (or switch_lang when lang is given)
     and header/footer fragment injection
  4. Serialise the document
"""
from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

import httpx
from bs4 import BeautifulSoup

from config.settings import settings
from config.site import PAGE_SUFFIX
from src.data.models import RenderedPage
from src.data.store import PreferenceStorage
from src.i18n.applicator import HTML_PARSER
from src.i18n.controller import PageController
from src.i18n.events import EventBus
from src.i18n.loader import NO_STORE_HEADERS, TranslationLoader
from src.i18n.paths import resolve_page_name
from src.i18n.preferences import LanguageStore, Storage, system_locale
from src.site.includes import FragmentIncluder
from src.site.transport import SiteDirectoryTransport

logger = logging.getLogger(__name__)

LOCAL_BASE_URL = "http://site.local/"


class PageNotFoundError(Exception):
    """The HTML file for a page could not be fetched."""


def make_client() -> httpx.AsyncClient:
    """Client rooted at SITE_URL, or at the local SITE_DIR when unset."""
    if settings.SITE_URL:
        return httpx.AsyncClient(base_url=settings.SITE_URL, timeout=settings.HTTP_TIMEOUT_S)
    return httpx.AsyncClient(
        base_url=LOCAL_BASE_URL,
        transport=SiteDirectoryTransport(settings.SITE_DIR),
        timeout=settings.HTTP_TIMEOUT_S,
    )


class SiteRenderer:
    def __init__(
        self,
        storage: Storage,
        client_factory: Callable[[], httpx.AsyncClient] = make_client,
        locale: Callable[[], str | None] = system_locale,
        content_root: str | None = None,
    ) -> None:
        self.storage = storage
        self.client_factory = client_factory
        self.locale = locale
        self.content_root = settings.CONTENT_DIR if content_root is None else content_root

    async def _fetch_page(self, client: httpx.AsyncClient, page: str) -> BeautifulSoup:
        url = f"{page}{PAGE_SUFFIX}"
        try:
            response = await client.get(url, headers=NO_STORE_HEADERS)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            raise PageNotFoundError(f"Page {url} could not be loaded: {exc}") from exc
        return BeautifulSoup(response.text, HTML_PARSER)

    async def render(self, path: str, lang: str | None = None) -> RenderedPage:
        """
        Args:
            path: Navigation path, e.g. "/services.html" or "/solutions/"
            lang: Language the visitor just switched to; None for a plain load

        Returns:
            The translated HTML with the language and page it was rendered for.
        """
        page = resolve_page_name(path)
        async with self.client_factory() as client:
            document = await self._fetch_page(client, page)

            bus = EventBus()
            store = LanguageStore(self.storage, locale=self.locale, bus=bus)
            loader = TranslationLoader(client, store.get_lang, self.content_root)
            controller = PageController(document, path, store, loader, bus)
            includer = FragmentIncluder(client, document, bus)

            controller.start()
            try:
                translate = controller.switch_lang(lang) if lang else controller.translate_page()
                await asyncio.gather(translate, includer.include_all())
            finally:
                controller.stop()

            active = store.get_lang()
            logger.info("Rendered %s in %s", path or "/", active)
            return RenderedPage(html=str(document), lang=active, page=page)


def render_page(path: str, lang: str | None = None, **kwargs) -> RenderedPage:
    """Blocking wrapper around SiteRenderer.render for sync callers (Dash)."""
    renderer = SiteRenderer(kwargs.pop("storage", None) or PreferenceStorage(), **kwargs)
    return asyncio.run(renderer.render(path, lang))
