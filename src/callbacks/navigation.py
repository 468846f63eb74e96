"""
src/callbacks/navigation.py — Page rendering, language selection and mute toggle.

Preferences are per browser: every callback rebuilds them from that
browser's `store-prefs` payload and writes the updated payload back.
"""
from __future__ import annotations

import logging

from dash import Input, Output, State, ctx, no_update

from src.data.models import Preference
from src.i18n.nodes import Branch
from src.i18n.provider import LocalizationProvider
from src.layout.navbar import mute_label, toggle_btn_style
from src.session import open_session

logger = logging.getLogger(__name__)


def chrome_labels(provider: LocalizationProvider, language: str, muted: bool) -> tuple[str, ...]:
    """Navbar/footer texts for `language`, in callback output order."""
    return (
        provider.t("app.title", language=language),
        provider.t("nav.home", language=language),
        provider.t("nav.language", language=language),
        provider.t("app.footer", language=language),
        mute_label(provider, muted, language=language),
    )


def apply_preference_event(
    table: Branch,
    trigger_id: str | None,
    payload,
    language_code: str | None = None,
) -> tuple[dict[str, str] | None, Preference]:
    """
    Apply a language or mute event to one browser's stored preferences.

    Returns the payload to store back (None when nothing changed) and the
    resulting Preference.
    """
    session = open_session(table, payload)
    current = session.preferences.current

    if trigger_id == "lang-select" and language_code and language_code != current.language_code:
        logger.info("Language changed to %s", language_code)
        session.preferences.set_language(language_code)
    elif trigger_id == "mute-btn":
        session.preferences.toggle_mute()
    else:
        return None, current
    return session.storage.snapshot(), session.preferences.current


def register(app, table: Branch) -> None:
    """Register page rendering + preference callbacks."""

    from src.pages import home

    # ── Preferences: load from / write to the browser ─────────────────────────
    @app.callback(
        Output("store-prefs", "data"),
        Output("lang-select", "value"),
        Output("store-lang", "data"),
        Output("store-muted", "data"),
        Input("store-prefs", "modified_timestamp"),
        Input("lang-select", "value"),
        Input("mute-btn", "n_clicks"),
        State("store-prefs", "data"),
    )
    def sync_preferences(modified, language_code, n_clicks, payload):
        updated, preference = apply_preference_event(table, ctx.triggered_id, payload, language_code)
        return (
            updated if updated is not None else no_update,
            preference.language_code,
            preference.language_code,
            preference.is_muted,
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

    # ── Page + translated chrome ──────────────────────────────────────────────
    @app.callback(
        [
            Output("page-content", "children"),
            Output("nav-title", "children"),
            Output("nav-home", "children"),
            Output("lang-label", "children"),
            Output("footer-text", "children"),
            Output("mute-btn", "children"),
            Output("mute-btn", "style"),
        ],
        Input("store-lang", "data"),
        Input("store-muted", "data"),
    )
    def render(language: str, muted: bool):
        provider = open_session(table, None).provider
        language = language or provider.language
        muted = bool(muted)
        return (
            home.layout(provider, language),
            *chrome_labels(provider, language, muted),
            toggle_btn_style(not muted),
        )
