"""
src/i18n/provider.py
─────────────────────
LocalizationProvider: the object UI code receives to translate and format.

It holds no language of its own; every call reads the current Preference
snapshot from the PreferenceStore it was given.

Usage:
    provider = LocalizationProvider(load_translations(), PreferenceStore(storage))
    provider.set_language("bn")
    provider.t("pricing.buy", {"price": provider.format_currency(500)})
    # → "৳689-এ কিনুন"
"""
from __future__ import annotations

from config.languages import DEFAULT_LANGUAGE, LANGUAGES
from src.data.preferences import PreferenceStore
from src.i18n.currency import format_currency
from src.i18n.nodes import Branch
from src.i18n.translator import Replacements, resolve


class LocalizationProvider:
    def __init__(
        self,
        table: Branch,
        preferences: PreferenceStore,
        default_language: str = DEFAULT_LANGUAGE,
    ) -> None:
        self.table = table
        self.preferences = preferences
        self.default_language = default_language

    @property
    def language(self) -> str:
        return self.preferences.current.language_code

    def set_language(self, code: str) -> str:
        return self.preferences.set_language(code).language_code

    def t(self, key: str, replacements: Replacements | None = None, language: str | None = None) -> str:
        """Translate `key` in the current language (or `language` if given)."""
        return resolve(
            self.table,
            key,
            language or self.language,
            replacements,
            default_language=self.default_language,
        )

    def format_currency(self, amount: int, language: str | None = None) -> str:
        return format_currency(amount, language or self.language)

    @staticmethod
    def languages() -> dict[str, str]:
        """Selectable languages, code → native name."""
        return dict(LANGUAGES)
