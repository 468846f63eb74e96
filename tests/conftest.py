"""
tests/conftest.py
─────────────────
Shared pytest fixtures for the Mines Predictor test suite.
"""
import os
import pytest

# Default language for every session built in tests
os.environ.setdefault("DEFAULT_LANG", "en")


@pytest.fixture
def raw_table() -> dict:
    return {
        "nav": {
            "home": {"en": "Home", "hi": "होम", "es": "Inicio"},
            "language": {"en": "Language", "es": "Idioma"},
        },
        "pricing": {
            "buy": {"en": "Buy for {price}", "es": "Comprar por {price}"},
            "premium": {
                "description": {"en": "Unlimited signals for {days} days"},
            },
        },
        "predictor": {
            "round": {"en": "Round {round} of {total}", "hi": "राउंड {round} / {total}"},
        },
        "only_hindi": {"hi": "केवल हिंदी"},
        "empty_en": {"en": "", "es": "vacío"},
    }


@pytest.fixture
def table(raw_table):
    from src.i18n.nodes import build_table
    return build_table(raw_table)


@pytest.fixture
def storage():
    from src.data.storage import MemoryStorage
    return MemoryStorage()


@pytest.fixture
def unavailable_storage():
    from src.data.storage import MemoryStorage
    return MemoryStorage(available=False)


@pytest.fixture
def preferences(storage):
    from src.data.preferences import PreferenceStore
    return PreferenceStore(storage, lang_key="test-lang", mute_key="test-muted")


@pytest.fixture
def provider(table, preferences):
    from src.i18n.provider import LocalizationProvider
    return LocalizationProvider(table, preferences)
