"""Command registry: dispatches named application commands to their handlers."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from opendaw import clip_commands, project_commands, track_commands, transport_commands
from opendaw.app_state import AppState, CommandError
from opendaw.engine import EngineHandle

_HANDLERS: dict[str, Callable[..., Any]] = {
    "save_project": project_commands.save_project,
    "load_project": project_commands.load_project,
    "play": transport_commands.play,
    "pause": transport_commands.pause,
    "stop": transport_commands.stop,
    "set_bpm": transport_commands.set_bpm,
    "set_master_volume": track_commands.set_master_volume,
    "set_grid_settings": project_commands.set_grid_settings,
    "get_midi_devices": track_commands.get_midi_devices,
    "set_track_midi_routing": track_commands.set_track_midi_routing,
    "get_project_state": project_commands.get_project_state,
    "add_track": track_commands.add_track,
    "remove_track": track_commands.remove_track,
    "add_audio_clip": clip_commands.add_audio_clip,
    "remove_audio_clip": clip_commands.remove_audio_clip,
    "move_audio_clip": clip_commands.move_audio_clip,
    "add_midi_clip": clip_commands.add_midi_clip,
    "remove_midi_clip": clip_commands.remove_midi_clip,
    "move_midi_clip": clip_commands.move_midi_clip,
    "update_midi_clip_notes": clip_commands.update_midi_clip_notes,
    "undo": project_commands.undo,
    "redo": project_commands.redo,
    "load_plugin_to_track": clip_commands.load_plugin_to_track,
}

_STATELESS = frozenset({"get_midi_devices"})


def command_names() -> tuple[str, ...]:
    """Return the names of all registered commands in registration order."""
    return tuple(_HANDLERS)


def create_app_state() -> AppState:
    """Create the shared application state with a fresh engine."""
    return AppState(engine=EngineHandle())


def invoke(state: AppState, command: str, **kwargs: Any) -> Any:
    """Run the named command with keyword arguments and return its result."""
    handler = _HANDLERS.get(command)
    if handler is None:
        raise CommandError(f"Unknown command: {command}")
    if command in _STATELESS:
        return handler(**kwargs)
    return handler(state, **kwargs)