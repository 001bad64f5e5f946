"""
src/i18n/paths.py
─────────────────
Page identity from a navigation path.

    resolve_page_name("/services.html")   # → "services"
    resolve_page_name("/solutions/")      # → "solutions"
    resolve_page_name("/")                # → "index"
"""
from __future__ import annotations

import logging
import re

from config.site import DEFAULT_PAGE, KNOWN_PAGES, PAGE_SUFFIX

logger = logging.getLogger(__name__)

# Base name of a path segment carrying the page-file suffix. Segments are
# delimited by "/", "\" or ":" so file:// paths on Windows resolve too.
_PAGE_FILE_RE = re.compile(r"([^:\\/]+)" + re.escape(PAGE_SUFFIX), re.IGNORECASE)


def _known_or_default(name: str) -> str:
    return name if name in KNOWN_PAGES else DEFAULT_PAGE


def resolve_page_name(path: str | None) -> str:
    """Map a URL path onto one of the known page namespaces."""
    path = path or ""

    match = _PAGE_FILE_RE.search(path)
    if match:
        page = match.group(1).lower()
        result = _known_or_default(page)
        logger.debug("Page from file path %r: %s -> %s", path, page, result)
        return result

    # Clean URL: drop one trailing separator, keep the last segment.
    # Unlike file names, segments are matched case-sensitively.
    clean_path = path[:-1] if path.endswith("/") else path
    if not clean_path:
        return DEFAULT_PAGE

    page = clean_path.split("/")[-1]
    result = _known_or_default(page)
    logger.debug("Page from clean URL %r: %s -> %s", path, page, result)
    return result
