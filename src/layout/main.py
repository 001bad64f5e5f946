"""
src/layout/main.py
───────────────────
Main application layout composition.

Contains:
  - dcc.Location for routing
  - dcc.Store entries: switched language, rendered language, visitor id
  - Navbar + translated page container
"""
from dash import html, dcc

from src.layout.navbar import create_navbar


def create_layout() -> html.Div:
    """Assemble the root application layout."""
    return html.Div(
        [
            # ── Client-side state stores ──────────────────────────────────────
            dcc.Store(id="store-lang", data=None),  # language the visitor switched to
            dcc.Store(id="store-active-lang", data=None),  # language last rendered
            dcc.Store(id="store-visitor", storage_type="local"),  # per-browser visitor id

            # ── Routing ───────────────────────────────────────────────────────
            dcc.Location(id="url", refresh=False),

            # ── Navigation bar ────────────────────────────────────────────────
            create_navbar(),

            # ── Page content ──────────────────────────────────────────────────
            dcc.Loading(
                html.Div(
                    id="page-content",
                    style={"minHeight": "calc(100vh - 60px)"},
                ),
                type="dot",
                color="#58a6ff",
            ),

            # ── Footer ────────────────────────────────────────────────────────
            html.Footer(
                [
                    html.Span("Site i18n Preview"),
                    html.Span(" · "),
                    html.Span("content/<namespace>.<lang>.json"),
                ],
                style={
                    "textAlign": "center",
                    "padding": ".7rem",
                    "fontSize": ".72rem",
                    "color": "#8b949e",
                    "borderTop": "1px solid #30363d",
                    "marginTop": "1rem",
                },
            ),
        ],
        style={"backgroundColor": "#0d1117", "minHeight": "100vh", "color": "#c9d1d9"},
    )
