"""
src/i18n/events.py
──────────────────
Minimal observer channel between the language store, the page controller
and the fragment includer.

Delivery: synchronous, in subscription order, at most once per emit, no
replay for handlers subscribed after the fact. A failing handler is logged
and does not stop the others.
"""
from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Callable
from typing import Any

logger = logging.getLogger(__name__)

LANG_CHANGE = "lang_change"
HEADER_LOADED = "header_loaded"
FOOTER_LOADED = "footer_loaded"

Handler = Callable[..., Any]


class EventBus:
    def __init__(self) -> None:
        self._handlers: dict[str, list[Handler]] = defaultdict(list)

    def subscribe(self, event: str, handler: Handler) -> Callable[[], None]:
        """Register *handler* for *event*; returns a callable that undoes it."""
        self._handlers[event].append(handler)

        def unsubscribe() -> None:
            handlers = self._handlers.get(event, [])
            if handler in handlers:
                handlers.remove(handler)

        return unsubscribe

    def emit(self, event: str, **payload: Any) -> int:
        """Call every handler of *event*; returns how many completed."""
        delivered = 0
        # Copy so handlers may unsubscribe while being called
        for handler in list(self._handlers.get(event, [])):
            try:
                handler(**payload)
            except Exception:
                logger.exception("Handler %r failed for event %s", handler, event)
                continue
            delivered += 1
        return delivered

    def handler_count(self, event: str) -> int:
        return len(self._handlers.get(event, []))
