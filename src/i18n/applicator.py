"""
src/i18n/applicator.py
──────────────────────
Writes resolved translations into a BeautifulSoup document.

Markers:
  data-i18n="key"                 → element text
  data-i18n-html="key"            → element inner markup
  data-i18n-placeholder="key"     → placeholder attribute
  data-i18n-title="key"           → title attribute
  data-i18n-alt="key"             → alt attribute
  data-i18n-attr="name:key"       → attribute *name* (bare "key" → "attr")
  data-i18n-ns="namespace"        → optional namespace override for any of the above

A value is written only when the registry found a real translation
(resolved value != key), so untranslated elements keep their markup.
"""
from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import Any

from bs4 import BeautifulSoup, Tag

from config.site import (
    ACTIVE_CLASS,
    ATTRIBUTE_MARKERS,
    GENERIC_ATTR_MARKER,
    HTML_MARKER,
    LANG_SWITCHER_SELECTOR,
    NAMESPACE_MARKER,
    TEXT_MARKER,
)
from src.data.models import MarkerMode, TranslationMarker
from src.i18n.translator import TranslationRegistry

logger = logging.getLogger(__name__)

HTML_PARSER = "html.parser"


# ── Marker extraction ─────────────────────────────────────────────────────────

def _attribute_target(marker_attr: str, raw: str) -> tuple[str, str]:
    """(attribute to write, key) for an attribute marker value."""
    if marker_attr == GENERIC_ATTR_MARKER:
        name, sep, key = raw.partition(":")
        if sep and name.strip() and key.strip():
            return name.strip(), key.strip()
    return ATTRIBUTE_MARKERS[marker_attr], raw


def iter_markers(root: Tag) -> Iterator[tuple[Tag, TranslationMarker]]:
    """Every (element, marker) under *root*, text → html → attribute markers."""

    def select(attr: str) -> list[Tag]:
        # Descendants only, like querySelectorAll
        return root.select(f"[{attr}]")

    for el in select(TEXT_MARKER):
        yield el, TranslationMarker(
            key=el[TEXT_MARKER], namespace=el.get(NAMESPACE_MARKER) or None
        )

    for el in select(HTML_MARKER):
        yield el, TranslationMarker(
            key=el[HTML_MARKER],
            mode=MarkerMode.HTML,
            namespace=el.get(NAMESPACE_MARKER) or None,
        )

    for marker_attr in ATTRIBUTE_MARKERS:
        for el in select(marker_attr):
            attribute, key = _attribute_target(marker_attr, el[marker_attr])
            yield el, TranslationMarker(
                key=key,
                mode=MarkerMode.ATTRIBUTE,
                attribute=attribute,
                namespace=el.get(NAMESPACE_MARKER) or None,
            )


# ── Writing ───────────────────────────────────────────────────────────────────

def _as_text(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    return None


def replace_children(el: Tag, markup: str) -> None:
    fragment = BeautifulSoup(markup, HTML_PARSER)
    el.clear()
    for node in list(fragment.contents):
        el.append(node.extract())


def write_marker(el: Tag, marker: TranslationMarker, value: Any) -> bool:
    """Write *value* into *el* as *marker* says. Returns True when written."""
    text = _as_text(value)
    if text is None:
        logger.warning(
            "Key %r resolves to a %s, not a string; leaving element as is",
            marker.key,
            type(value).__name__,
        )
        return False

    if marker.mode is MarkerMode.TEXT:
        el.string = text
    elif marker.mode is MarkerMode.HTML:
        replace_children(el, text)
    else:
        el[marker.attribute] = text
    return True


def update_lang_switcher(root: Tag, lang: str) -> None:
    for btn in root.select(LANG_SWITCHER_SELECTOR):
        classes = [c for c in btn.get("class", []) if c != ACTIVE_CLASS]
        if btn.get("data-lang") == lang:
            classes.append(ACTIVE_CLASS)
        if classes:
            btn["class"] = classes
        elif "class" in btn.attrs:
            del btn["class"]


def apply_translations(registry: TranslationRegistry, root: Tag, lang: str) -> int:
    """
    Translate every marked element under *root*.

    Args:
        registry: Loaded namespaces for the active language
        root: Whole document or one region of it
        lang: Active language, for the switcher's active state

    Returns:
        Number of writes performed.
    """
    count = 0
    for el, marker in iter_markers(root):
        if not marker.key:
            continue
        value = registry.t(marker.key, marker.namespace)
        if value == marker.key:
            continue
        if write_marker(el, marker, value):
            count += 1

    update_lang_switcher(root, lang)

    scope = "document" if isinstance(root, BeautifulSoup) else _describe(root)
    logger.info("Applied %d translations to %s (lang=%s)", count, scope, lang)
    return count


def _describe(el: Tag) -> str:
    if el.get("id"):
        return f"#{el['id']}"
    if el.get("class"):
        return "." + ".".join(el["class"])
    return el.name
