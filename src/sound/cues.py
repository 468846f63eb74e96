"""
src/sound/cues.py
──────────────────
UI feedback sounds.

Synthesis happens in the browser; the server side only decides whether a cue
should play (mute flag) and hands its name to a player callable.
"""
from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum

from src.data.preferences import PreferenceStore

logger = logging.getLogger(__name__)


class SoundCue(str, Enum):
    GET_SIGNAL = "getSignal"
    NEXT_ROUND = "nextRound"
    CHICKEN_RUN = "chickenRun"
    BUTTON_CLICK = "buttonClick"
    MODAL_OPEN = "modalOpen"
    MODAL_CLOSE = "modalClose"
    SUCCESS = "success"
    ERROR = "error"
    COPY = "copy"
    PREDICTION_REVEAL = "predictionReveal"


Player = Callable[[SoundCue], None]


def log_player(cue: SoundCue) -> None:
    logger.debug("Sound cue: %s", cue.value)


class SoundController:
    """Mute-aware, fire-and-forget front for a cue player."""

    def __init__(self, preferences: PreferenceStore, player: Player = log_player) -> None:
        self._preferences = preferences
        self._player = player

    @property
    def is_muted(self) -> bool:
        return self._preferences.current.is_muted

    def toggle_mute(self) -> bool:
        """Flip and persist the mute flag. Returns the new value."""
        return self._preferences.toggle_mute().is_muted

    def play(self, cue: SoundCue | str) -> bool:
        """
        Play `cue` unless muted.

        Returns True if the cue was handed to the player. Unknown cue names
        and player errors are logged, never raised.
        """
        if self.is_muted:
            return False
        try:
            self._player(SoundCue(cue))
        except Exception:
            logger.exception("Failed to play sound %r", cue)
            return False
        return True
