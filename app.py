"""
app.py
──────
Site i18n Preview: Application Entry Point.

Startup sequence:
  1. Configure logging and the preferences database
  2. Create Dash app with DARKLY bootstrap theme
  3. Register callbacks
  4. Run dev server (or expose `server` for gunicorn in production)
"""
import logging

import dash
import dash_bootstrap_components as dbc

from config.logging_config import configure_logging
from config.settings import settings
from src.data.store import initialize_db
from src.layout.main import create_layout

# ── 1. Logging + preferences DB ───────────────────────────────────────────────
configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger("app")

initialize_db()
logger.info("Preferences database ready (%s); serving site from %s",
            settings.DATABASE_URL, settings.SITE_URL or settings.SITE_DIR)

# ── 2. Dash app ───────────────────────────────────────────────────────────────
app = dash.Dash(
    __name__,
    external_stylesheets=[dbc.themes.DARKLY],
    suppress_callback_exceptions=True,
    meta_tags=[{"name": "viewport", "content": "width=device-width, initial-scale=1"}],
    title="Site i18n Preview",
)

server = app.server  # gunicorn entry point
app.layout = create_layout()

# ── 3. Register callbacks ─────────────────────────────────────────────────────
from src.callbacks import navigation

navigation.register(app)

# ── 4. Run ────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    app.run(
        debug=settings.DEBUG,
        host=settings.HOST,
        port=settings.PORT,
    )
