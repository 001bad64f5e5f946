"""
src/i18n/translator.py
───────────────────────
Dotted-key lookup over JSON payloads, and the namespace registry that
resolves a key across page, header and footer payloads.

Usage:
    from src.i18n.translator import MISSING, TranslationRegistry, lookup

    lookup({"nav": {"items": ["Home"]}}, "nav.items.0")   # → "Home"
    lookup({"nav": {}}, "nav.title") is MISSING           # → True

    registry = TranslationRegistry({"services": {...}, "footer": {...}})
    registry.current_page = "services"
    registry.t("hero.title")              # page namespace first
    registry.t("copyright", "footer")     # explicit namespace first
    registry.t("no.such.key")             # → "no.such.key"
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from config.site import (
    EXPLICIT_FALLBACK_NAMESPACES,
    FOOTER_NS,
    HEADER_NS,
    PAGE_NAMESPACES,
)

logger = logging.getLogger(__name__)

KEY_SEPARATOR = "."


class _Missing:
    """Sentinel for a failed lookup; distinct from any JSON value."""

    _instance: _Missing | None = None

    def __new__(cls) -> _Missing:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISSING"


MISSING: Any = _Missing()


def _as_index(segment: str) -> int | None:
    # Non-negative decimal integers only: no sign, no whitespace
    if segment.isascii() and segment.isdigit():
        return int(segment)
    return None


def lookup(payload: Any, path: str) -> Any:
    """
    Walk a dot-separated path through nested dicts and lists.

    Args:
        payload: Parsed JSON (dict, list or scalar)
        path: e.g. "hero.title" or "features.items.2.name"

    Returns:
        The value found, the payload itself for an empty path, or MISSING.
    """
    if not path:
        return payload

    node = payload
    for segment in path.split(KEY_SEPARATOR):
        if isinstance(node, list):
            index = _as_index(segment)
            if index is None or index >= len(node):
                return MISSING
            node = node[index]
        elif isinstance(node, dict):
            if segment not in node:
                return MISSING
            node = node[segment]
        else:
            return MISSING
    return node


def _found(value: Any) -> bool:
    # Stored "" / False / 0 are real translations; JSON null is not
    return value is not MISSING and value is not None


class TranslationRegistry:
    """
    Namespace → payload for the active language, plus the current page.

    A full translation pass swaps the whole mapping with ``replace``;
    ``update`` adds namespaces without dropping the others.
    """

    def __init__(self, translations: Mapping[str, dict] | None = None) -> None:
        self._translations: dict[str, dict] = dict(translations or {})
        self.current_page: str | None = None

    # ── Contents ──────────────────────────────────────────────────────────────

    def replace(self, translations: Mapping[str, dict]) -> None:
        self._translations = dict(translations)

    def update(self, translations: Mapping[str, dict]) -> None:
        self._translations.update(translations)

    def get(self, namespace: str) -> dict | None:
        return self._translations.get(namespace)

    def namespaces(self) -> list[str]:
        return list(self._translations)

    def __contains__(self, namespace: object) -> bool:
        return namespace in self._translations

    # ── Resolution ────────────────────────────────────────────────────────────

    def _find(self, key: str, candidates: Iterable[str]) -> Any:
        for namespace in candidates:
            payload = self._translations.get(namespace)
            if payload is None:
                continue
            value = lookup(payload, key)
            logger.debug("Checked %s for %r: %r", namespace, key, value)
            if _found(value):
                return value
        return MISSING

    def fallback_chain(self, namespace: str | None = None) -> list[str]:
        """Ordered, de-duplicated namespaces consulted for a key."""
        if namespace:
            head = [namespace, self.current_page]
            pages = EXPLICIT_FALLBACK_NAMESPACES
        else:
            head = [self.current_page]
            pages = PAGE_NAMESPACES

        chain: list[str] = []
        for ns in (*head, *pages, HEADER_NS, FOOTER_NS):
            if ns and ns not in chain:
                chain.append(ns)
        return chain

    def t(self, key: str, namespace: str | None = None) -> Any:
        """
        Translate a dot-separated key.

        Args:
            key: Dot-separated path, e.g. "nav.contact" or "hero.items.0"
            namespace: Namespace to try before the current page

        Returns:
            The translated value, or the key itself if no namespace has it.
        """
        value = self._find(key, self.fallback_chain(namespace))
        if value is MISSING:
            logger.warning(
                "Key not found in any namespace: %r (namespace=%s, loaded=%s)",
                key,
                namespace,
                self.namespaces(),
            )
            return key
        return value
