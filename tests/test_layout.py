"""
tests/test_layout.py
─────────────────────
Tests for the Dash layout, callback helpers and callback wiring.
"""
import dash
import pytest
from dash import dcc, html

from src.callbacks import navigation, predictor
from src.callbacks.navigation import chrome_labels
from src.callbacks.predictor import cue_for_trigger, cue_message
from src.layout.components.price_card import price_card
from src.layout.main import create_layout
from src.pages import home
from src.sound.cues import SoundCue


def _find(component, component_id):
    if getattr(component, "id", None) == component_id:
        return component
    children = getattr(component, "children", None)
    if children is None:
        return None
    if not isinstance(children, (list, tuple)):
        children = [children]
    for child in children:
        found = _find(child, component_id)
        if found is not None:
            return found
    return None


@pytest.fixture
def dash_app(table):
    app = dash.Dash(__name__, suppress_callback_exceptions=True)
    navigation.register(app, table)
    predictor.register(app, table)
    return app


def _deps(entries) -> list[tuple[str, str]]:
    return [(d["id"], d["property"]) for d in entries]


def _callback_for(app, output: str) -> dict:
    for entry in app._callback_list:
        if output in entry["output"]:
            return entry
    raise AssertionError(f"no callback writes {output}")


class TestCreateLayout:
    def test_stores(self, provider):
        layout = create_layout(provider)
        assert isinstance(layout, html.Div)
        prefs = _find(layout, "store-prefs")
        assert isinstance(prefs, dcc.Store)
        assert prefs.storage_type == "local"
        assert _find(layout, "store-lang").data == "en"
        assert _find(layout, "store-muted").data is False
        assert _find(layout, "store-cue") is not None

    def test_reflects_provider_preferences(self, provider, preferences):
        provider.set_language("es")
        preferences.toggle_mute()
        layout = create_layout(provider)
        assert _find(layout, "store-lang").data == "es"
        assert _find(layout, "store-muted").data is True
        assert _find(layout, "lang-select").value == "es"


class TestHomePage:
    def test_prices_formatted_for_language(self, provider):
        page = home.layout(provider, "bn")
        premium = _find(page, "buy-premium-btn")
        assert premium is not None
        assert premium.children == "Buy for ৳689"

    def test_spanish_page(self, provider):
        page = home.layout(provider, "es")
        assert _find(page, "buy-standard-btn").children == "Comprar por €5"


class TestPriceCard:
    def test_contains_price(self):
        card = price_card("Premium", "₹500", "desc", "Buy", button_id="b")
        assert card.children[1].children == "₹500"


class TestCallbackHelpers:
    def test_chrome_labels(self, provider):
        labels = chrome_labels(provider, "es", muted=False)
        assert labels[1] == "Inicio"
        assert labels[2] == "Idioma"
        assert labels[4].startswith("🔊")

    def test_cue_for_trigger(self):
        assert cue_for_trigger("get-signal-btn") is SoundCue.GET_SIGNAL
        assert cue_for_trigger("buy-premium-btn") is SoundCue.MODAL_OPEN
        assert cue_for_trigger(None) is SoundCue.BUTTON_CLICK

    def test_cue_message_when_unmuted(self, table):
        message = cue_message(table, "next-round-btn", None)
        assert message["cue"] == "nextRound"

    def test_cue_message_when_muted(self, table):
        assert cue_message(table, "next-round-btn", {"mines-predictor-sound-muted": "true"}) is None


class TestCallbackWiring:
    def test_cue_store_feeds_clientside_player(self, dash_app):
        entry = _callback_for(dash_app, "store-cue-played.data")
        assert _deps(entry["inputs"]) == [("store-cue", "data")]
        assert entry["clientside_function"] == {"namespace": "sound", "function_name": "play"}

    def test_cue_callback_reads_browser_preferences(self, dash_app):
        entry = _callback_for(dash_app, "store-cue.data")
        assert ("store-prefs", "data") in _deps(entry["state"])

    def test_preferences_sync_reads_browser_store(self, dash_app):
        entry = _callback_for(dash_app, "store-prefs.data")
        assert ("store-prefs", "data") in _deps(entry["state"])
        input_ids = {i["id"] for i in entry["inputs"]}
        assert input_ids == {"store-prefs", "lang-select", "mute-btn"}

    def test_page_depends_only_on_preferences(self, dash_app):
        entry = _callback_for(dash_app, "page-content.children")
        assert {i["id"] for i in entry["inputs"]} == {"store-lang", "store-muted"}
