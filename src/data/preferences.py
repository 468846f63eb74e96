"""
src/data/preferences.py
────────────────────────
Preference store adapter: owns the current Preference snapshot and keeps it
in step with durable storage. In the web app the storage is the browser's own
localStorage payload, so one adapter serves one client for one request.

Storage layout:
  <lang key>  → raw language code, e.g. "hi"
  <mute key>  → JSON boolean literal, "true" / "false"

Each field is read independently; a failed or unparseable read falls back to
that field's default only. Writes are best-effort and never raise.
"""
from __future__ import annotations

import json
import logging
import threading

from config.languages import DEFAULT_LANGUAGE
from config.settings import settings
from src.data.models import Preference
from src.data.storage import KeyValueStorage

logger = logging.getLogger(__name__)


class PreferenceStore:
    def __init__(
        self,
        storage: KeyValueStorage,
        lang_key: str = settings.LANG_STORAGE_KEY,
        mute_key: str = settings.MUTE_STORAGE_KEY,
        default_language: str = DEFAULT_LANGUAGE,
    ) -> None:
        self._storage = storage
        self.lang_key = lang_key
        self.mute_key = mute_key
        self.default_language = default_language
        self._lock = threading.Lock()
        self._current = self.load()

    # ── Reads ─────────────────────────────────────────────────────────────────

    @property
    def current(self) -> Preference:
        """The live snapshot. Replaced, never mutated, on every change."""
        return self._current

    def load(self) -> Preference:
        return Preference(
            language_code=self._load_language(),
            is_muted=self._load_muted(),
        )

    def _load_language(self) -> str:
        result = self._storage.get(self.lang_key)
        if not result.ok:
            logger.warning("Could not read language preference: %s", result.error)
            return self.default_language
        return result.value or self.default_language

    def _load_muted(self) -> bool:
        result = self._storage.get(self.mute_key)
        if not result.ok:
            logger.warning("Could not read sound preference: %s", result.error)
            return False
        if result.value is None:
            return False
        try:
            parsed = json.loads(result.value)
        except ValueError:
            logger.warning("Ignoring unparseable mute flag %r", result.value)
            return False
        if not isinstance(parsed, bool):
            logger.warning("Ignoring non-boolean mute flag %r", result.value)
            return False
        return parsed

    # ── Writes ────────────────────────────────────────────────────────────────

    def save_language(self, code: str) -> bool:
        result = self._storage.set(self.lang_key, code)
        if not result.ok:
            logger.warning("Could not persist language preference: %s", result.error)
        return result.ok

    def save_muted(self, flag: bool) -> bool:
        result = self._storage.set(self.mute_key, json.dumps(bool(flag)))
        if not result.ok:
            logger.warning("Could not persist sound preference: %s", result.error)
        return result.ok

    # ── Mutations ─────────────────────────────────────────────────────────────

    def set_language(self, code: str) -> Preference:
        """Switch language for this session and write it through."""
        if not code:
            code = self.default_language
        with self._lock:
            self._current = self._current.model_copy(update={"language_code": code})
            self.save_language(code)
            return self._current

    def toggle_mute(self) -> Preference:
        """Flip the mute flag of the snapshot this store was loaded with."""
        with self._lock:
            self._current = self._current.model_copy(update={"is_muted": not self._current.is_muted})
            self.save_muted(self._current.is_muted)
            return self._current
