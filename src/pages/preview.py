"""
src/pages/preview.py
─────────────────────
Frame showing one translated page of the static site.
"""

from dash import html

BORDER = "#30363d"
MUTED = "#8b949e"


def layout(document_html: str) -> html.Div:
    return html.Div(
        html.Iframe(
            srcDoc=document_html,
            style={
                "width": "100%",
                "height": "calc(100vh - 130px)",
                "border": f"1px solid {BORDER}",
                "borderRadius": "8px",
                "backgroundColor": "#ffffff",
            },
        ),
        style={"padding": "1rem 1.5rem"},
    )


def not_found(message: str) -> html.Div:
    return html.Div(
        [
            html.H2("Page unavailable", className="page-title"),
            html.P(message, style={"color": MUTED}),
        ],
        style={"padding": "1.5rem"},
    )
