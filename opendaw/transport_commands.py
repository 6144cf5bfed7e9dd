"""Application commands controlling playback and tempo."""

from __future__ import annotations

import logging

from opendaw.app_state import AppState

logger = logging.getLogger(__name__)


def play(state: AppState) -> None:
    """Start playback."""
    logger.info("Transport: Play")
    engine = state.engine
    with engine.lock:
        engine.project_state.is_playing = True
        engine.play()


def pause(state: AppState) -> None:
    """Pause playback."""
    logger.info("Transport: Pause")
    engine = state.engine
    with engine.lock:
        engine.project_state.is_playing = False
        engine.pause()


def stop(state: AppState) -> None:
    """Stop playback."""
    logger.info("Transport: Stop")
    engine = state.engine
    with engine.lock:
        engine.project_state.is_playing = False
        engine.stop()


def set_bpm(state: AppState, bpm: float) -> None:
    """Set the tempo in the project and the engine."""
    logger.info("Transport: Set BPM to %s", bpm)
    engine = state.engine
    with engine.lock:
        engine.project_state.bpm = bpm
        engine.set_bpm(bpm)