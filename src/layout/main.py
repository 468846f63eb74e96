"""
src/layout/main.py
───────────────────
Main application layout composition.

Contains:
  - dcc.Store for client-side state:
      store-prefs       : durable preferences, persisted in the browser's localStorage
      store-lang/-muted : the values read from store-prefs, driving re-renders
      store-cue         : last sound cue to play; store-cue-played is its sink
  - Navbar + page content container

The layout is served in the default language; the stored preferences are
applied by callbacks once the browser has loaded store-prefs.
"""
from dash import html, dcc

from src.i18n.provider import LocalizationProvider
from src.layout.navbar import create_navbar


def create_layout(provider: LocalizationProvider) -> html.Div:
    """Assemble the root application layout."""
    preference = provider.preferences.current
    return html.Div(
        [
            # ── Client-side state stores ──────────────────────────────────────
            dcc.Store(id="store-prefs", storage_type="local"),
            dcc.Store(id="store-lang", data=preference.language_code),
            dcc.Store(id="store-muted", data=preference.is_muted),
            dcc.Store(id="store-cue", data=None),
            dcc.Store(id="store-cue-played", data=None),

            # ── Navigation bar ────────────────────────────────────────────────
            create_navbar(provider, preference.is_muted),

            # ── Page content (single page) ────────────────────────────────────
            html.Div(
                id="page-content",
                style={"minHeight": "calc(100vh - 60px)"},
            ),

            # ── Footer ────────────────────────────────────────────────────────
            html.Footer(
                html.Span(provider.t("app.footer"), id="footer-text"),
                style={
                    "textAlign": "center",
                    "padding": ".7rem",
                    "fontSize": ".72rem",
                    "color": "#8b949e",
                    "borderTop": "1px solid #30363d",
                    "marginTop": "2rem",
                },
            ),
        ],
        style={"backgroundColor": "#0d1117", "minHeight": "100vh", "color": "#c9d1d9"},
    )
