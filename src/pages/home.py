"""
src/pages/home.py
──────────────────
Landing page: predictor controls and the two pricing plans.

Rendered server-side for a given language; re-rendered when the language
store changes.
"""

import dash_bootstrap_components as dbc
from dash import html

from src.i18n.provider import LocalizationProvider
from src.layout.components.price_card import price_card

ACCENT = "#58a6ff"
MUTED = "#8b949e"

PREMIUM_PRICE = 500
STANDARD_PRICE = 400
PREMIUM_DAYS = 30
STANDARD_SIGNALS_PER_DAY = 20


def layout(provider: LocalizationProvider, language: str) -> html.Div:
    def t(key: str, replacements: dict | None = None) -> str:
        return provider.t(key, replacements, language=language)

    premium_price = provider.format_currency(PREMIUM_PRICE, language)
    standard_price = provider.format_currency(STANDARD_PRICE, language)

    return html.Div(
        [
            # ── Page header ───────────────────────────────────────────────────
            html.Div(
                [
                    html.H2(t("app.title"), className="page-title"),
                    html.P(t("app.tagline"), className="page-subtitle"),
                ],
                className="page-header",
            ),
            # ── Predictor controls ────────────────────────────────────────────
            html.Div(
                [
                    html.Div(t("predictor.round", {"round": 1, "total": 5}), id="predictor-round",
                             style={"fontSize": ".8rem", "color": MUTED, "marginBottom": "8px"}),
                    html.Div(
                        [
                            dbc.Button(t("predictor.get_signal"), id="get-signal-btn", n_clicks=0,
                                       color="primary", className="me-2"),
                            dbc.Button(t("predictor.next_round"), id="next-round-btn", n_clicks=0,
                                       color="secondary", outline=True),
                        ]
                    ),
                ],
                className="chart-card mb-4",
            ),
            # ── Pricing ───────────────────────────────────────────────────────
            html.Div(t("pricing.title"), className="chart-title"),
            dbc.Row(
                [
                    dbc.Col(
                        price_card(
                            t("pricing.premium.name"),
                            premium_price,
                            t("pricing.premium.description", {"days": PREMIUM_DAYS}),
                            t("pricing.buy", {"price": premium_price}),
                            button_id="buy-premium-btn",
                            color=ACCENT,
                            border_color=ACCENT,
                        ),
                        md=6,
                    ),
                    dbc.Col(
                        price_card(
                            t("pricing.standard.name"),
                            standard_price,
                            t("pricing.standard.description", {"count": STANDARD_SIGNALS_PER_DAY}),
                            t("pricing.buy", {"price": standard_price}),
                            button_id="buy-standard-btn",
                        ),
                        md=6,
                    ),
                ],
                className="g-3",
            ),
        ],
        style={"padding": "1.5rem"},
    )
