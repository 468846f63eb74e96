"""
tests/test_provider.py
───────────────────────
Tests for LocalizationProvider composition over the preference store.
"""
from src.data.preferences import PreferenceStore
from src.data.storage import MemoryStorage
from src.i18n.provider import LocalizationProvider


class TestLocalizationProvider:
    def test_defaults_to_english(self, provider):
        assert provider.language == "en"
        assert provider.t("nav.home") == "Home"
        assert provider.format_currency(500) == "₹500"

    def test_language_change_applies_everywhere(self, provider):
        provider.set_language("es")
        assert provider.t("nav.home") == "Inicio"
        assert provider.format_currency(500) == "€6"
        assert provider.t("pricing.buy", {"price": provider.format_currency(400)}) == "Comprar por €5"

    def test_language_override(self, provider):
        assert provider.t("nav.home", language="hi") == "होम"
        assert provider.format_currency(500, "pl") == "48zł"
        assert provider.language == "en"

    def test_reads_persisted_language(self, table):
        store = PreferenceStore(MemoryStorage({"l": "hi"}), lang_key="l", mute_key="m")
        provider = LocalizationProvider(table, store)
        assert provider.t("nav.home") == "होम"
        assert provider.format_currency(400) == "₹400"

    def test_missing_key(self, provider):
        assert provider.t("nav.missing") == "nav.missing"

    def test_language_catalogue(self, provider):
        languages = provider.languages()
        assert languages["en"] == "English"
        assert "fil" in languages
        languages["en"] = "changed"
        assert provider.languages()["en"] == "English"
