"""
src/callbacks/predictor.py — Sound cues for predictor and pricing buttons.

A server callback checks the browser's mute flag and writes the cue to
`store-cue`; the clientside `sound.play` function (assets/sound.js) reacts
to that store and synthesizes the cue with the Web Audio API. Nothing is
written while muted.
"""
from __future__ import annotations

import time

from dash import ClientsideFunction, Input, Output, State, ctx, no_update

from src.i18n.nodes import Branch
from src.session import open_session
from src.sound.cues import SoundCue

BUTTON_CUES: dict[str, SoundCue] = {
    "get-signal-btn": SoundCue.GET_SIGNAL,
    "next-round-btn": SoundCue.NEXT_ROUND,
    "buy-premium-btn": SoundCue.MODAL_OPEN,
    "buy-standard-btn": SoundCue.MODAL_OPEN,
}


def cue_for_trigger(trigger_id: str | None) -> SoundCue:
    return BUTTON_CUES.get(trigger_id or "", SoundCue.BUTTON_CLICK)


def cue_message(table: Branch, trigger_id: str | None, payload) -> dict | None:
    """Payload for `store-cue`, or None when the browser is muted."""
    cue = cue_for_trigger(trigger_id)
    if not open_session(table, payload).sound.play(cue):
        return None
    # Timestamp makes repeated clicks on the same button distinct updates
    return {"cue": cue.value, "at": time.time()}


def register(app, table: Branch) -> None:
    @app.callback(
        Output("store-cue", "data"),
        [Input(button_id, "n_clicks") for button_id in BUTTON_CUES],
        State("store-prefs", "data"),
        prevent_initial_call=True,
    )
    def play_cue(*args):
        payload = args[-1]
        message = cue_message(table, ctx.triggered_id, payload)
        return message if message is not None else no_update

    app.clientside_callback(
        ClientsideFunction(namespace="sound", function_name="play"),
        Output("store-cue-played", "data"),
        Input("store-cue", "data"),
        prevent_initial_call=True,
    )
