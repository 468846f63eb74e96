"""
src/session.py
──────────────
Per-client preference session.

Language and mute flag live in the browser (a localStorage-backed dcc.Store).
Each callback opens a session over that payload, reads or mutates it, and
sends `storage.snapshot()` back to the browser when something changed. No
preference state is shared between clients or kept on the server.
"""
from __future__ import annotations

from dataclasses import dataclass

from config.settings import settings
from src.data.preferences import PreferenceStore
from src.data.storage import MemoryStorage
from src.i18n.nodes import Branch
from src.i18n.provider import LocalizationProvider
from src.sound.cues import Player, SoundController, log_player


@dataclass
class ClientSession:
    storage: MemoryStorage
    preferences: PreferenceStore
    provider: LocalizationProvider
    sound: SoundController


def open_session(
    table: Branch,
    payload,
    default_language: str = settings.DEFAULT_LANG,
    player: Player = log_player,
) -> ClientSession:
    """Build the preference objects for one browser from its stored payload."""
    storage = MemoryStorage.from_client(payload)
    preferences = PreferenceStore(storage, default_language=default_language)
    return ClientSession(
        storage=storage,
        preferences=preferences,
        provider=LocalizationProvider(table, preferences, default_language=default_language),
        sound=SoundController(preferences, player),
    )
