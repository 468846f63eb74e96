"""
src/layout/components/price_card.py
────────────────────────────────────
Reusable pricing plan card component.
"""
from dash import html

CARD_BG = "#161b22"
MUTED = "#8b949e"


def price_card(
    name: str,
    price: str,
    description: str,
    button_label: str,
    button_id: str,
    color: str = "#c9d1d9",
    border_color: str = "#30363d",
) -> html.Div:
    """
    Plan card with name, formatted price and a buy button.

    Args:
        name: Plan name (shown above the price)
        price: Already formatted price, e.g. "৳689"
        description: One-line plan summary
        button_label: Text of the buy button
        button_id: Dash component id for the button
        color: Price text color
        border_color: Card border color (highlights the featured plan)
    """
    return html.Div(
        [
            html.Div(name, style={"fontSize": ".68rem", "color": MUTED, "textTransform": "uppercase", "letterSpacing": ".06em"}),
            html.Div(price, className="plan-price",
                     style={"fontSize": "1.8rem", "fontWeight": "700", "color": color, "lineHeight": "1.2", "marginTop": "2px"}),
            html.Div(description, style={"fontSize": ".78rem", "color": MUTED, "margin": "6px 0 12px"}),
            html.Button(
                button_label,
                id=button_id,
                n_clicks=0,
                style={
                    "background": "rgba(88,166,255,0.15)",
                    "border": f"1px solid {border_color}",
                    "color": "#58a6ff",
                    "borderRadius": "4px",
                    "fontSize": ".78rem",
                    "fontWeight": "700",
                    "padding": "4px 12px",
                    "cursor": "pointer",
                },
            ),
        ],
        style={
            "backgroundColor": CARD_BG,
            "border": f"1px solid {border_color}",
            "borderRadius": "8px",
            "padding": "14px 16px",
            "minWidth": "160px",
        },
    )
