"""
src/site/includes.py
────────────────────
Injects the shared header/footer fragments into a page and announces each
one on the event bus (``header_loaded`` / ``footer_loaded``), so the page
controller can translate the freshly inserted markup.
"""
from __future__ import annotations

import asyncio
import logging

import httpx
from bs4 import BeautifulSoup

from config.site import (
    FOOTER_FRAGMENT,
    FOOTER_SELECTOR,
    HEADER_FRAGMENT,
    HEADER_SELECTOR,
    STICKY_HEADER_SELECTOR,
)
from src.i18n.applicator import replace_children
from src.i18n.events import FOOTER_LOADED, HEADER_LOADED, EventBus
from src.i18n.loader import NO_STORE_HEADERS

logger = logging.getLogger(__name__)


class FragmentIncluder:
    def __init__(self, client: httpx.AsyncClient, document: BeautifulSoup, bus: EventBus) -> None:
        self.client = client
        self.document = document
        self.bus = bus

    async def _fetch(self, name: str) -> str | None:
        try:
            response = await self.client.get(name, headers=NO_STORE_HEADERS)
            response.raise_for_status()
        except httpx.HTTPError as exc:
            logger.warning("Fragment %s could not be loaded: %s", name, exc)
            return None
        return response.text

    async def include_header(self) -> bool:
        target = self.document.select_one(HEADER_SELECTOR)
        if target is None:
            return False
        markup = await self._fetch(HEADER_FRAGMENT)
        if markup is None:
            return False

        replace_children(target, markup)
        sticky = self.document.select_one(STICKY_HEADER_SELECTOR)
        if sticky is not None:
            replace_children(sticky, markup)

        self.bus.emit(HEADER_LOADED)
        return True

    async def include_footer(self) -> bool:
        target = self.document.select_one(FOOTER_SELECTOR)
        if target is None:
            return False
        markup = await self._fetch(FOOTER_FRAGMENT)
        if markup is None:
            return False

        replace_children(target, markup)
        self.bus.emit(FOOTER_LOADED)
        return True

    async def include_all(self) -> tuple[bool, bool]:
        header, footer = await asyncio.gather(self.include_header(), self.include_footer())
        return header, footer
