"""Session view: scenes of clip slots, one slot per track."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Union


@dataclass(frozen=True)
class SessionAudioClip:
    """An audio clip placed in a session slot."""

    file_path: str
    length_beats: float


@dataclass(frozen=True)
class SessionMidiClip:
    """A MIDI clip placed in a session slot."""

    notes_count: int
    length_beats: float


SessionClip = Union[SessionAudioClip, SessionMidiClip]


class ClipSlotState(Enum):
    EMPTY = "empty"
    STOPPED = "stopped"
    PLAYING = "playing"
    QUEUED = "queued"


@dataclass
class ClipSlot:
    """A cell of the session grid that may hold a clip."""

    clip: SessionClip | None = None
    state: ClipSlotState = ClipSlotState.EMPTY


@dataclass
class Scene:
    """A row of clip slots launched together."""

    name: str
    slots: list[ClipSlot] = field(default_factory=list)


@dataclass
class Session:
    """The set of scenes for a fixed number of tracks."""

    track_count: int
    scenes: list[Scene] = field(default_factory=list)

    def add_scene(self, name: str) -> None:
        """Append a scene with one empty slot per track."""
        self.scenes.append(Scene(name, [ClipSlot() for _ in range(self.track_count)]))

    def play_scene(self, scene_index: int) -> None:
        """Queue every slot holding a clip in the given scene; unknown indices are ignored."""
        if not 0 <= scene_index < len(self.scenes):
            return
        for slot in self.scenes[scene_index].slots:
            if slot.clip is not None:
                slot.state = ClipSlotState.QUEUED