"""
src/layout/navbar.py
─────────────────────
Navigation bar with language selector and mute toggle.
"""

import dash_bootstrap_components as dbc
from dash import dcc, html

from src.i18n.provider import LocalizationProvider

NAV_BG = "#0d1117"
BORDER = "#30363d"
ACCENT = "#58a6ff"


def mute_label(provider: LocalizationProvider, muted: bool, language: str | None = None) -> str:
    icon = "🔇" if muted else "🔊"
    text = provider.t("sound.unmute" if muted else "sound.mute", language=language)
    return f"{icon} {text}"


def create_navbar(provider: LocalizationProvider, muted: bool) -> dbc.Navbar:
    language_options = [
        {"label": name, "value": code} for code, name in provider.languages().items()
    ]
    return dbc.Navbar(
        dbc.Container(
            [
                # Brand
                dbc.NavbarBrand(
                    [
                        html.Span("💣", style={"marginRight": "8px", "fontSize": "1.1rem"}),
                        html.Span(
                            provider.t("app.title"),
                            id="nav-title",
                            style={"fontWeight": "700", "letterSpacing": ".04em"},
                        ),
                    ],
                    href="/",
                    style={"color": ACCENT, "textDecoration": "none"},
                ),
                dbc.NavbarToggler(id="navbar-toggler", n_clicks=0),
                dbc.Collapse(
                    dbc.Nav(
                        [
                            dbc.NavItem(
                                dbc.NavLink(provider.t("nav.home"), href="/", id="nav-home", active="exact")
                            ),
                            # Language selector
                            dbc.NavItem(
                                html.Div(
                                    [
                                        html.Span(
                                            provider.t("nav.language"),
                                            id="lang-label",
                                            style={"fontSize": ".72rem", "color": "#8b949e"},
                                        ),
                                        dcc.Dropdown(
                                            id="lang-select",
                                            options=language_options,
                                            value=provider.language,
                                            clearable=False,
                                            style={"minWidth": "150px", "color": "#0d1117"},
                                        ),
                                    ],
                                    style={
                                        "display": "flex",
                                        "gap": "6px",
                                        "alignItems": "center",
                                        "marginLeft": "12px",
                                    },
                                )
                            ),
                            # Mute toggle
                            dbc.NavItem(
                                html.Button(
                                    mute_label(provider, muted),
                                    id="mute-btn",
                                    n_clicks=0,
                                    style=toggle_btn_style(not muted),
                                ),
                                style={"marginLeft": "12px", "alignSelf": "center"},
                            ),
                        ],
                        className="ms-auto",
                        navbar=True,
                    ),
                    id="navbar-collapse",
                    navbar=True,
                    is_open=False,
                ),
            ],
            fluid=True,
        ),
        color=NAV_BG,
        dark=True,
        sticky="top",
        style={"borderBottom": f"1px solid {BORDER}", "padding": ".5rem 1rem"},
    )


def toggle_btn_style(active: bool) -> dict:
    return {
        "background": "rgba(88,166,255,0.15)" if active else "transparent",
        "border": "1px solid #30363d",
        "color": "#58a6ff" if active else "#8b949e",
        "borderRadius": "4px",
        "fontSize": ".72rem",
        "fontWeight": "700",
        "padding": "2px 8px",
        "cursor": "pointer",
    }
