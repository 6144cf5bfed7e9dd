import pytest

from opendaw.app_state import AppState, CommandError
from opendaw.clip_commands import (
    add_audio_clip,
    add_midi_clip,
    load_plugin_to_track,
    move_audio_clip,
    move_midi_clip,
    remove_audio_clip,
    remove_midi_clip,
    update_midi_clip_notes,
)
from opendaw.project import Track
from opendaw.sequence import NoteEvent


@pytest.fixture
def state():
    app = AppState()
    app.engine.project_state.tracks.append(Track(1, "Drums"))
    return app


def _track(app):
    return app.engine.project_state.tracks[0]


def test_add_audio_clip_stores_clip(state):
    clip_id = add_audio_clip(state, 1, "Kick", 2.0, 4.0)
    clip = _track(state).clips[0]
    assert clip.id == clip_id
    assert (clip.name, clip.start_pos, clip.length) == ("Kick", 2.0, 4.0)
    assert clip.waveform_summary == []


def test_audio_clip_ids_exceed_existing(state):
    first = add_audio_clip(state, 1, "A", 0.0, 1.0)
    second = add_audio_clip(state, 1, "B", 1.0, 1.0)
    assert first == 1
    assert second > first
    remove_audio_clip(state, 1, first)
    third = add_audio_clip(state, 1, "C", 2.0, 1.0)
    assert third > second


def test_add_audio_clip_unknown_track(state):
    with pytest.raises(CommandError, match="Track 7 not found"):
        add_audio_clip(state, 7, "Kick", 0.0, 1.0)


def test_failed_command_records_no_history(state):
    with pytest.raises(CommandError):
        add_audio_clip(state, 7, "Kick", 0.0, 1.0)
    engine = state.engine
    assert engine.history.undo(engine.project_state) is None


def test_remove_audio_clip_is_undoable(state):
    clip_id = add_audio_clip(state, 1, "Kick", 0.0, 1.0)
    remove_audio_clip(state, 1, clip_id)
    assert _track(state).clips == []
    engine = state.engine
    previous = engine.history.undo(engine.project_state)
    assert [c.id for c in previous.tracks[0].clips] == [clip_id]


def test_move_audio_clip(state):
    clip_id = add_audio_clip(state, 1, "Kick", 0.0, 1.0)
    move_audio_clip(state, 1, clip_id, 8.5)
    assert _track(state).clips[0].start_pos == 8.5


def test_move_audio_clip_missing_clip(state):
    with pytest.raises(CommandError, match="Clip 99 not found in track 1"):
        move_audio_clip(state, 1, 99, 1.0)


def test_add_and_move_midi_clip(state):
    clip_id = add_midi_clip(state, 1, "Bass", 4.0, 8.0)
    clip = _track(state).midi_clips[0]
    assert (clip.id, clip.name, clip.start_beat, clip.length_beats) == (clip_id, "Bass", 4.0, 8.0)
    assert clip.sequence.notes == []
    move_midi_clip(state, 1, clip_id, 12.0)
    assert _track(state).midi_clips[0].start_beat == 12.0


def test_remove_midi_clip(state):
    keep = add_midi_clip(state, 1, "Keep", 0.0, 4.0)
    drop = add_midi_clip(state, 1, "Drop", 4.0, 4.0)
    remove_midi_clip(state, 1, drop)
    assert [c.id for c in _track(state).midi_clips] == [keep]


def test_midi_clip_errors(state):
    with pytest.raises(CommandError, match="Track 3 not found"):
        add_midi_clip(state, 3, "x", 0.0, 1.0)
    with pytest.raises(CommandError, match="Clip 5 not found in track 1"):
        move_midi_clip(state, 1, 5, 0.0)
    with pytest.raises(CommandError, match="Clip 5 not found in track 1"):
        update_midi_clip_notes(state, 1, 5, [])


def test_update_midi_clip_notes_advances_ids(state):
    clip_id = add_midi_clip(state, 1, "Lead", 0.0, 4.0)
    notes = [NoteEvent(3, 60, 100, 0.0, 1.0), NoteEvent(5, 64, 90, 1.0, 0.5)]
    update_midi_clip_notes(state, 1, clip_id, notes)
    sequence = _track(state).midi_clips[0].sequence
    assert sequence.notes == notes
    new_id = sequence.add_note(67, 80, 2.0, 1.0)
    assert new_id > max(n.id for n in notes)


def test_update_midi_clip_notes_accepts_dicts(state):
    clip_id = add_midi_clip(state, 1, "Lead", 0.0, 4.0)
    note = NoteEvent(2, 62, 70, 0.5, 0.25)
    update_midi_clip_notes(state, 1, clip_id, [note.to_dict()])
    assert _track(state).midi_clips[0].sequence.notes == [note]


def test_load_plugin_to_track(state):
    load_plugin_to_track(state, 1, "reverb")
    load_plugin_to_track(state, 1, "delay")
    assert _track(state).plugins == ["reverb", "delay"]


def test_load_plugin_unknown_track_is_ignored(state):
    load_plugin_to_track(state, 42, "reverb")
    assert _track(state).plugins == []