"""Application commands that add, remove, move and edit clips and plugins."""

from __future__ import annotations

import copy
import dataclasses
import logging
from collections.abc import Iterable, Iterator, Mapping
from contextlib import contextmanager
from typing import Any

from opendaw.app_state import AppState, CommandError
from opendaw.engine import EngineHandle
from opendaw.project import AudioClip, MidiClip, ProjectState, Track
from opendaw.sequence import NoteEvent, Sequence

logger = logging.getLogger(__name__)


@contextmanager
def _recorded_edit(engine: EngineHandle) -> Iterator[ProjectState]:
    """Yield the project for editing and record its prior state if the edit succeeds."""
    with engine.lock:
        snapshot = copy.deepcopy(engine.project_state)
        yield engine.project_state
        engine.history.save_snapshot(snapshot)


def _find_track(project: ProjectState, track_id: int) -> Track:
    track = next((t for t in project.tracks if t.id == track_id), None)
    if track is None:
        raise CommandError(f"Track {track_id} not found")
    return track


def _next_id(clips: Iterable[AudioClip | MidiClip]) -> int:
    return max((c.id for c in clips), default=0) + 1


def add_audio_clip(
    state: AppState, track_id: int, name: str, start_pos: float, length: float
) -> int:
    """Add an empty audio clip to a track and return its id."""
    logger.info("Project: Add audio clip '%s' to track %s", name, track_id)
    with _recorded_edit(state.engine) as project:
        track = _find_track(project, track_id)
        clip_id = _next_id(track.clips)
        track.clips.append(AudioClip(clip_id, name, start_pos, length))
    return clip_id


def remove_audio_clip(state: AppState, track_id: int, clip_id: int) -> None:
    """Remove an audio clip from a track."""
    logger.info("Project: Remove audio clip %s from track %s", clip_id, track_id)
    with _recorded_edit(state.engine) as project:
        track = _find_track(project, track_id)
        track.clips = [c for c in track.clips if c.id != clip_id]


def move_audio_clip(
    state: AppState, track_id: int, clip_id: int, new_start_pos: float
) -> None:
    """Move an audio clip to a new start position."""
    logger.info(
        "Project: Move audio clip %s in track %s to %s", clip_id, track_id, new_start_pos
    )
    with _recorded_edit(state.engine) as project:
        track = _find_track(project, track_id)
        clip = next((c for c in track.clips if c.id == clip_id), None)
        if clip is None:
            raise CommandError(f"Clip {clip_id} not found in track {track_id}")
        clip.start_pos = new_start_pos


def add_midi_clip(
    state: AppState, track_id: int, name: str, start_beat: float, length_beats: float
) -> int:
    """Add an empty MIDI clip to a track and return its id."""
    logger.info("Project: Add midi clip '%s' to track %s", name, track_id)
    with _recorded_edit(state.engine) as project:
        track = _find_track(project, track_id)
        clip_id = _next_id(track.midi_clips)
        track.midi_clips.append(MidiClip(clip_id, name, start_beat, length_beats))
    return clip_id


def remove_midi_clip(state: AppState, track_id: int, clip_id: int) -> None:
    """Remove a MIDI clip from a track."""
    logger.info("Project: Remove midi clip %s from track %s", clip_id, track_id)
    with _recorded_edit(state.engine) as project:
        track = _find_track(project, track_id)
        track.midi_clips = [c for c in track.midi_clips if c.id != clip_id]


def _find_midi_clip(track: Track, clip_id: int) -> MidiClip:
    clip = next((c for c in track.midi_clips if c.id == clip_id), None)
    if clip is None:
        raise CommandError(f"Clip {clip_id} not found in track {track.id}")
    return clip


def move_midi_clip(
    state: AppState, track_id: int, clip_id: int, new_start_beat: float
) -> None:
    """Move a MIDI clip to a new start beat."""
    logger.info(
        "Project: Move midi clip %s in track %s to %s", clip_id, track_id, new_start_beat
    )
    with _recorded_edit(state.engine) as project:
        clip = _find_midi_clip(_find_track(project, track_id), clip_id)
        clip.start_beat = new_start_beat


def update_midi_clip_notes(
    state: AppState,
    track_id: int,
    clip_id: int,
    notes: Iterable[NoteEvent | Mapping[str, Any]],
) -> None:
    """Replace the notes of a MIDI clip; later added notes get ids past the largest one."""
    logger.info("Project: Update midi clip notes for clip %s in track %s", clip_id, track_id)
    with _recorded_edit(state.engine) as project:
        clip = _find_midi_clip(_find_track(project, track_id), clip_id)
        sequence = Sequence()
        for note in notes:
            if isinstance(note, NoteEvent):
                sequence.add_note_event(dataclasses.replace(note))
            else:
                sequence.add_note_event(NoteEvent.from_dict(dict(note)))
        clip.sequence = sequence


def load_plugin_to_track(state: AppState, track_id: int, plugin_id: str) -> None:
    """Append a plugin to a track; an unknown track is ignored."""
    engine = state.engine
    with engine.lock:
        track = next((t for t in engine.project_state.tracks if t.id == track_id), None)
        if track is not None:
            track.plugins.append(plugin_id)