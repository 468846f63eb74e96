"""
app.py
──────
Mines Predictor — Application Entry Point.

Startup sequence:
  1. Configure logging
  2. Load the translation table
  3. Create Dash app with DARKLY bootstrap theme and register callbacks
  4. Run dev server (or expose `server` for gunicorn in production)

Language and mute preferences are kept per browser in localStorage
(see src/session.py); the server holds only the static tables.
"""
import logging

import dash
import dash_bootstrap_components as dbc

from config.log import configure_logging
from config.settings import settings
from src.i18n.translator import load_translations
from src.layout.main import create_layout
from src.session import open_session

# ── 1. Logging ────────────────────────────────────────────────────────────────
configure_logging(settings.LOG_LEVEL)
logger = logging.getLogger("app")

# ── 2. Translations ───────────────────────────────────────────────────────────
table = load_translations(settings.TRANSLATIONS_PATH or None)


def serve_layout():
    # Fresh default-language session per page load; the browser's stored
    # preferences are applied by the sync_preferences callback.
    return create_layout(open_session(table, None).provider)


# ── 3. Dash app ───────────────────────────────────────────────────────────────
app = dash.Dash(
    __name__,
    external_stylesheets=[dbc.themes.DARKLY],
    suppress_callback_exceptions=True,
    meta_tags=[{"name": "viewport", "content": "width=device-width, initial-scale=1"}],
    title=open_session(table, None).provider.t("app.title"),
)

server = app.server  # gunicorn entry point
app.layout = serve_layout

from src.callbacks import navigation, predictor

navigation.register(app, table)
predictor.register(app, table)
logger.info("Mines Predictor ready (default lang=%s)", settings.DEFAULT_LANG)

# ── 4. Run ────────────────────────────────────────────────────────────────────
if __name__ == "__main__":
    app.run(
        debug=settings.DEBUG,
        host=settings.HOST,
        port=settings.PORT,
    )
