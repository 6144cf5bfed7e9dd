"""Project state: tracks, clips, grid settings and transport values."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from typing import Any

from opendaw.sequence import Sequence


@dataclass
class GridSettings:
    """Grid snap settings; resolution 4 means quarter notes."""

    is_enabled: bool = True
    resolution: int = 4

    def to_dict(self) -> dict[str, Any]:
        return {"is_enabled": self.is_enabled, "resolution": self.resolution}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GridSettings:
        return cls(is_enabled=bool(data["is_enabled"]), resolution=int(data["resolution"]))


@dataclass
class AudioClip:
    """A recorded audio clip placed on a track."""

    id: int
    name: str
    start_pos: float
    length: float
    waveform_summary: list[float] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "start_pos": self.start_pos,
            "length": self.length,
            "waveform_summary": list(self.waveform_summary),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> AudioClip:
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            start_pos=float(data["start_pos"]),
            length=float(data["length"]),
            waveform_summary=[float(v) for v in data["waveform_summary"]],
        )


@dataclass
class MidiClip:
    """A MIDI clip placed on a track, positioned in beats."""

    id: int
    name: str
    start_beat: float
    length_beats: float
    sequence: Sequence = field(default_factory=Sequence)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "start_beat": self.start_beat,
            "length_beats": self.length_beats,
            "sequence": self.sequence.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MidiClip:
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            start_beat=float(data["start_beat"]),
            length_beats=float(data["length_beats"]),
            sequence=Sequence.from_dict(data["sequence"]),
        )


@dataclass
class Track:
    """A track with mixer settings, clips and plugins."""

    id: int
    name: str
    volume: float = 1.0
    pan: float = 0.0
    is_muted: bool = False
    is_solo: bool = False
    is_record_armed: bool = False
    clips: list[AudioClip] = field(default_factory=list)
    midi_clips: list[MidiClip] = field(default_factory=list)
    plugins: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "volume": self.volume,
            "pan": self.pan,
            "is_muted": self.is_muted,
            "is_solo": self.is_solo,
            "is_record_armed": self.is_record_armed,
            "clips": [c.to_dict() for c in self.clips],
            "midi_clips": [c.to_dict() for c in self.midi_clips],
            "plugins": list(self.plugins),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Track:
        return cls(
            id=int(data["id"]),
            name=str(data["name"]),
            volume=float(data["volume"]),
            pan=float(data["pan"]),
            is_muted=bool(data["is_muted"]),
            is_solo=bool(data["is_solo"]),
            is_record_armed=bool(data["is_record_armed"]),
            clips=[AudioClip.from_dict(c) for c in data["clips"]],
            midi_clips=[MidiClip.from_dict(c) for c in data["midi_clips"]],
            plugins=[str(p) for p in data["plugins"]],
        )


@dataclass
class ProjectState:
    """The whole project: transport, master volume, grid and tracks."""

    is_playing: bool = False
    bpm: float = 120.0
    master_volume: float = 0.8
    grid_settings: GridSettings = field(default_factory=GridSettings)
    tracks: list[Track] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "is_playing": self.is_playing,
            "bpm": self.bpm,
            "master_volume": self.master_volume,
            "grid_settings": self.grid_settings.to_dict(),
            "tracks": [t.to_dict() for t in self.tracks],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> ProjectState:
        return cls(
            is_playing=bool(data["is_playing"]),
            bpm=float(data["bpm"]),
            master_volume=float(data["master_volume"]),
            grid_settings=GridSettings.from_dict(data["grid_settings"]),
            tracks=[Track.from_dict(t) for t in data["tracks"]],
        )

    def to_json(self, indent: int | None = None) -> str:
        """Serialize the project to JSON text."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_json(cls, text: str) -> ProjectState:
        """Parse a project from JSON text; raise ValueError if it is malformed."""
        data = json.loads(text)
        try:
            return cls.from_dict(data)
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"invalid project data: {exc}") from exc