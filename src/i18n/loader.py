"""
src/i18n/loader.py
──────────────────
Fetches translation payloads ``<content_root>/<namespace>.<lang>.json``.

Every request carries a random ``_`` query parameter and no-store headers so
no browser, proxy or CDN cache can serve a payload from the other language.
A namespace that fails to load (HTTP error status, transport error, bad
JSON, non-object body) degrades to ``{}``; nothing is raised to the caller.
"""
from __future__ import annotations

import asyncio
import logging
import uuid
from collections.abc import Callable, Iterable

import httpx

logger = logging.getLogger(__name__)

NO_STORE_HEADERS = {
    "Cache-Control": "no-store",
    "Pragma": "no-cache",
}


def _cache_buster() -> str:
    return uuid.uuid4().hex[:8]


class TranslationLoader:
    def __init__(
        self,
        client: httpx.AsyncClient,
        lang: Callable[[], str],
        content_root: str = "content",
    ) -> None:
        """
        Args:
            client: Shared async client; its base_url anchors content_root
            lang: Returns the active language code at request time
            content_root: Directory (relative to the site root) of the payloads
        """
        self.client = client
        self.lang = lang
        self.content_root = content_root.strip("/")

    def url_for(self, namespace: str, lang: str) -> str:
        filename = f"{namespace}.{lang}.json"
        return f"{self.content_root}/{filename}" if self.content_root else filename

    async def load_translation(self, namespace: str) -> dict:
        lang = self.lang()
        url = self.url_for(namespace, lang)
        logger.debug("Loading translation %s (lang=%s)", url, lang)

        try:
            response = await self.client.get(
                url,
                params={"_": _cache_buster()},
                headers=NO_STORE_HEADERS,
            )
            response.raise_for_status()
            payload = response.json()
        except httpx.HTTPStatusError as exc:
            logger.warning(
                "Translation load failed: %s (HTTP %s)", url, exc.response.status_code
            )
            return {}
        except httpx.HTTPError as exc:
            logger.error("Translation load failed: %s (%s)", url, exc)
            return {}
        except ValueError as exc:
            logger.error("Translation file is not valid JSON: %s (%s)", url, exc)
            return {}

        if not isinstance(payload, dict):
            logger.error(
                "Translation file must hold a JSON object: %s (got %s)",
                url,
                type(payload).__name__,
            )
            return {}
        return payload

    async def load_translations(self, namespaces: Iterable[str]) -> dict[str, dict]:
        """Fetch all namespaces concurrently; waits for every one to settle."""
        names = list(namespaces)
        results = await asyncio.gather(*(self.load_translation(name) for name in names))
        loaded = {name: payload or {} for name, payload in zip(names, results)}
        for name, payload in loaded.items():
            logger.info("Loaded translation %s: %d top-level keys", name, len(payload))
        return loaded
