"""Application commands for tracks, mixer values and MIDI routing."""

from __future__ import annotations

import copy
import logging
from collections.abc import Iterator
from contextlib import contextmanager

from opendaw.app_state import AppState
from opendaw.engine import EngineHandle
from opendaw.project import ProjectState, Track

logger = logging.getLogger(__name__)

MIDI_DEVICES = ("Launchkey Mini", "Scarlett 2i2 USB", "Virtual MIDI Bus")


@contextmanager
def _recorded_edit(engine: EngineHandle) -> Iterator[ProjectState]:
    with engine.lock:
        snapshot = copy.deepcopy(engine.project_state)
        yield engine.project_state
        engine.history.save_snapshot(snapshot)


def _find_track(project: ProjectState, track_id: int) -> Track | None:
    return next((t for t in project.tracks if t.id == track_id), None)


def set_master_volume(state: AppState, volume: float) -> None:
    """Set the master volume in the project and the engine."""
    logger.info("Mixer: Set Master Volume to %s", volume)
    engine = state.engine
    with engine.lock:
        engine.project_state.master_volume = volume
        engine.set_master_volume(volume)


def get_midi_devices() -> list[str]:
    """Return the names of the available MIDI devices."""
    logger.info("MIDI: Get MIDI devices")
    return list(MIDI_DEVICES)


def set_track_midi_routing(state: AppState, track_id: int, device: str, channel: int) -> None:
    """Route a MIDI device and channel to a track."""
    logger.info(
        "MIDI Route: Set track %s to device '%s' channel %s", track_id, device, channel
    )
    state.engine.set_track_midi_route(track_id, device, channel)


def set_track_volume(state: AppState, track_id: int, volume: float) -> None:
    """Set a track's volume; an unknown track is ignored."""
    logger.info("Mixer: Set track %s volume to %s", track_id, volume)
    with state.engine.lock:
        track = _find_track(state.engine.project_state, track_id)
        if track is not None:
            track.volume = float(volume)


def set_track_pan(state: AppState, track_id: int, pan: float) -> None:
    """Set a track's pan; an unknown track is ignored."""
    logger.info("Mixer: Set track %s pan to %s", track_id, pan)
    with state.engine.lock:
        track = _find_track(state.engine.project_state, track_id)
        if track is not None:
            track.pan = float(pan)


def add_track(state: AppState, name: str) -> int:
    """Add a track and return its id, one past the largest existing id."""
    logger.info("Project: Add track '%s'", name)
    with _recorded_edit(state.engine) as project:
        track_id = max((t.id for t in project.tracks), default=0) + 1
        project.tracks.append(Track(track_id, name))
    return track_id


def remove_track(state: AppState, track_id: int) -> None:
    """Remove a track."""
    logger.info("Project: Remove track %s", track_id)
    with _recorded_edit(state.engine) as project:
        project.tracks = [t for t in project.tracks if t.id != track_id]