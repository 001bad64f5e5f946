"""
src/callbacks/navigation.py: Page routing and language toggle callbacks.

Each browser gets a visitor id kept in its local storage (``store-visitor``);
the language preference is persisted under that id, so one visitor's switch
never changes what another visitor sees. The navbar highlight follows the
language a page was actually rendered in (``store-active-lang``).
"""
from __future__ import annotations

import logging

from dash import Input, Output, State, ctx
from flask import request

from config.site import PRIMARY_LANG, SECONDARY_LANG
from src.data import store
from src.data.models import Language
from src.layout.navbar import lang_btn_style
from src.pages import preview
from src.site.renderer import PageNotFoundError, render_page

logger = logging.getLogger(__name__)


def parse_accept_language(header: str | None) -> str | None:
    """First language range of an Accept-Language header, e.g. "zh-CN"."""
    first = (header or "").split(",")[0].split(";")[0].strip()
    return first or None


def render_preview(
    pathname: str | None,
    switched: str | None,
    visitor_id: str | None,
    accept_language: str | None,
    **render_kwargs,
):
    """
    Render one page for one visitor.

    Returns:
        (page content, visitor id, language rendered in or None on failure)
    """
    visitor_id = visitor_id or store.new_visitor_id()
    try:
        rendered = render_page(
            pathname or "/",
            switched,
            storage=store.PreferenceStorage(visitor_id),
            locale=lambda: parse_accept_language(accept_language),
            **render_kwargs,
        )
    except PageNotFoundError as exc:
        logger.warning("Preview failed for %s: %s", pathname, exc)
        return preview.not_found(str(exc)), visitor_id, None
    return preview.layout(rendered.html), visitor_id, rendered.lang.value


def lang_button_styles(lang: str | None) -> tuple[dict, dict]:
    return lang_btn_style(lang == PRIMARY_LANG), lang_btn_style(lang == SECONDARY_LANG)


def register(app) -> None:
    """Register routing + language callbacks."""

    # ── Page routing ──────────────────────────────────────────────────────────
    @app.callback(
        Output("page-content", "children"),
        Output("store-visitor", "data"),
        Output("store-active-lang", "data"),
        Input("url", "pathname"),
        Input("store-lang", "data"),
        State("store-visitor", "data"),
    )
    def display_page(pathname: str, lang: str | None, visitor_id: str | None):
        # A click on the language toggle is a switch; anything else a plain load
        switched = lang if ctx.triggered_id == "store-lang" else None
        return render_preview(
            pathname, switched, visitor_id, request.headers.get("Accept-Language")
        )

    # ── Navbar collapse ───────────────────────────────────────────────────────
    @app.callback(
        Output("navbar-collapse", "is_open"),
        Input("navbar-toggler", "n_clicks"),
        State("navbar-collapse", "is_open"),
        prevent_initial_call=True,
    )
    def toggle_navbar(n_clicks: int, is_open: bool) -> bool:
        return not is_open

    # ── Language toggle ───────────────────────────────────────────────────────
    @app.callback(
        Output("store-lang", "data"),
        Input(f"lang-{PRIMARY_LANG}-btn", "n_clicks"),
        Input(f"lang-{SECONDARY_LANG}-btn", "n_clicks"),
        prevent_initial_call=True,
    )
    def update_lang(n_primary: int, n_secondary: int) -> str:
        language = Language.EN if ctx.triggered_id == f"lang-{SECONDARY_LANG}-btn" else Language.ZH
        return language.value

    @app.callback(
        Output(f"lang-{PRIMARY_LANG}-btn", "style"),
        Output(f"lang-{SECONDARY_LANG}-btn", "style"),
        Input("store-active-lang", "data"),
    )
    def highlight_lang(active: str | None):
        return lang_button_styles(active)
