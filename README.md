# opendaw

The model and editing layer of a small digital audio workstation: a project
state made of tracks, audio clips and MIDI clips, snapshot-based undo/redo,
an engine handle holding transport and mixer values, MIDI routing rules, and
a set of timing and modulation building blocks.

The package uses only the standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `opendaw.project` | `ProjectState`, `Track`, `AudioClip`, `MidiClip`, `GridSettings`; `to_dict`/`from_dict` on each, `ProjectState.to_json`/`from_json` |
| `opendaw.sequence` | `Sequence` and `NoteEvent`: the notes of a MIDI clip, with ids that are never reused |
| `opendaw.project_history` | `ProjectHistory`: snapshot undo/redo, capped at 50 entries by default |
| `opendaw.engine` | `EngineHandle`: play/pause/stop, BPM and master volume, an event queue and a MIDI route queue |
| `opendaw.midi_route` | `MidiRouter`, `TrackMidiRoute`, `MidiEvent` |
| `opendaw.app_state` | `AppState`, which the commands act on, and `CommandError` |
| `opendaw.transport_commands`, `opendaw.track_commands`, `opendaw.clip_commands`, `opendaw.project_commands` | the editing commands |
| `opendaw.registry` | `create_app_state()`, `command_names()` and `invoke()` to run a command by name |
| `opendaw.automation` | `AutomationEnvelope` with constant, linear, exponential and Bezier segments |
| `opendaw.tempo_map` | `TempoMap`: tempo and time-signature changes by tick |
| `opendaw.modulation` | `ModMatrix`: sources routed to parameter targets through curves |
| `opendaw.routing` | `RoutingGraph`: an acyclic graph of tracks, buses and master |
| `opendaw.session` | `Session`, `Scene` and `ClipSlot` for clip launching |
| `opendaw.groove` | `GrooveEngine`: shuffle, humanize and quantize strength settings |
| `opendaw.command_history` | `HistoryManager` for `Command` objects that can execute and undo |

## Example

```python
from opendaw.registry import create_app_state, invoke

state = create_app_state()

track_id = invoke(state, "add_track", name="Drums")
clip_id = invoke(state, "add_midi_clip", track_id=track_id, name="Beat",
                 start_beat=0.0, length_beats=4.0)
invoke(state, "set_bpm", bpm=128.0)
invoke(state, "play")

invoke(state, "save_project", path="song.json")

# Restores the snapshot taken before the clip was added, including its
# BPM and playing flag, which are passed on to the engine.
invoke(state, "undo")
print(invoke(state, "get_project_state"))
```

Track and clip edits (`add_track`, `remove_track`, the clip commands other
than `load_plugin_to_track`) record a snapshot for undo; transport, mixer and
grid commands do not.

Commands that refer to a track or clip that does not exist raise
`opendaw.app_state.CommandError`, except `set_track_volume`, `set_track_pan`
and `load_plugin_to_track`, which ignore an unknown track. `save_project` and
`load_project` raise `CommandError` when the file cannot be written, read or
parsed. `invoke` raises `CommandError` for an unknown command name, and
`command_names()` lists every command it accepts.

Each command can also be called directly from its module, with the
application state as the first argument:

```python
from opendaw import track_commands, transport_commands

track_commands.add_track(state, "Bass")
transport_commands.stop(state)
```

## Timing helpers

```python
from opendaw.tempo_map import TempoMap

tempo = TempoMap()
tempo.add_tempo_event(960, 140.0)
tempo.tempo_at(1000)             # 140.0
tempo.time_signature_at(0)       # (4, 4)
```

## What the package does not do

- It makes no sound. `EngineHandle` stores transport and mixer values and puts
  `EngineEvent`s and `TrackMidiRoute`s on queues, but nothing in the package
  reads those queues or renders audio.
- It does not talk to MIDI hardware. `get_midi_devices()` returns a fixed list
  of three device names, and `MidiRouter.process_event` only logs and returns
  the ids of the matching tracks.
- `GrooveEngine` applies no swing or humanize offset yet: `apply_timing_offset`
  returns the position unchanged and `apply_velocity_humanize` only clamps to
  1..127 when velocity humanizing is on.
- There is no user interface and no command-line program; the package is used
  as a library.