"""
tests/test_sound.py
────────────────────
Tests for mute-aware sound cue playback.
"""
from src.sound.cues import SoundController, SoundCue


class RecordingPlayer:
    def __init__(self):
        self.played: list[SoundCue] = []

    def __call__(self, cue: SoundCue) -> None:
        self.played.append(cue)


def _failing_player(cue: SoundCue) -> None:
    raise RuntimeError("audio context unavailable")


class TestSoundController:
    def test_plays_when_unmuted(self, preferences):
        player = RecordingPlayer()
        sound = SoundController(preferences, player)
        assert sound.play(SoundCue.GET_SIGNAL)
        assert player.played == [SoundCue.GET_SIGNAL]

    def test_accepts_cue_name(self, preferences):
        player = RecordingPlayer()
        SoundController(preferences, player).play("predictionReveal")
        assert player.played == [SoundCue.PREDICTION_REVEAL]

    def test_silent_when_muted(self, preferences):
        player = RecordingPlayer()
        sound = SoundController(preferences, player)
        assert sound.toggle_mute() is True
        assert sound.play(SoundCue.SUCCESS) is False
        assert player.played == []

    def test_toggle_persists(self, preferences, storage):
        sound = SoundController(preferences, RecordingPlayer())
        sound.toggle_mute()
        assert storage.get("test-muted").value == "true"
        sound.toggle_mute()
        assert storage.get("test-muted").value == "false"
        assert sound.is_muted is False

    def test_player_failure_not_propagated(self, preferences):
        sound = SoundController(preferences, _failing_player)
        assert sound.play(SoundCue.ERROR) is False

    def test_unknown_cue_not_propagated(self, preferences):
        player = RecordingPlayer()
        assert SoundController(preferences, player).play("explosion") is False
        assert player.played == []

    def test_closed_cue_set(self):
        assert {c.value for c in SoundCue} == {
            "getSignal", "nextRound", "chickenRun", "buttonClick", "modalOpen",
            "modalClose", "success", "error", "copy", "predictionReveal",
        }
