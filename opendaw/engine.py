"""Engine handle: transport and mixer values shared with the audio thread."""

from __future__ import annotations

import queue
import threading
from dataclasses import dataclass
from enum import Enum

from opendaw.midi_route import TrackMidiRoute
from opendaw.project import ProjectState
from opendaw.project_history import ProjectHistory

QUEUE_CAPACITY = 1024
_U32_MAX = 2**32 - 1


class EngineEventKind(Enum):
    PLAY = "play"
    PAUSE = "pause"
    STOP = "stop"
    SET_BPM = "set_bpm"
    SET_MASTER_VOLUME = "set_master_volume"


@dataclass(frozen=True)
class EngineEvent:
    """A message sent from the main thread to the audio thread."""

    kind: EngineEventKind
    value: float | None = None


def _to_fixed(value: float, scale: float) -> int:
    return max(0, min(_U32_MAX, int(value * scale)))


def _try_put(target: queue.Queue, item: object) -> None:
    try:
        target.put_nowait(item)
    except queue.Full:
        pass


class EngineHandle:
    """Controls playback, tempo and volume, and owns the project state and history.

    BPM is stored in hundredths and master volume in thousandths. Hold ``lock``
    while reading or changing ``project_state`` or ``history``.
    """

    def __init__(self) -> None:
        self._is_playing = False
        self._bpm_fixed = 12000
        self._volume_fixed = 800
        self._state_lock = threading.Lock()
        self._events: queue.Queue[EngineEvent] = queue.Queue(maxsize=QUEUE_CAPACITY)
        self._routes: queue.Queue[TrackMidiRoute] = queue.Queue(maxsize=QUEUE_CAPACITY)
        self.lock = threading.RLock()
        self.project_state = ProjectState()
        self.history = ProjectHistory()

    @classmethod
    def create_channel(cls) -> tuple[EngineHandle, queue.Queue, queue.Queue]:
        """Create a handle with its event queue and MIDI route queue."""
        handle = cls()
        return handle, handle._events, handle._routes

    def play(self) -> None:
        with self._state_lock:
            self._is_playing = True
        _try_put(self._events, EngineEvent(EngineEventKind.PLAY))

    def pause(self) -> None:
        with self._state_lock:
            self._is_playing = False
        _try_put(self._events, EngineEvent(EngineEventKind.PAUSE))

    def stop(self) -> None:
        with self._state_lock:
            self._is_playing = False
        _try_put(self._events, EngineEvent(EngineEventKind.STOP))

    def set_bpm(self, bpm: float) -> None:
        with self._state_lock:
            self._bpm_fixed = _to_fixed(bpm, 100.0)
        _try_put(self._events, EngineEvent(EngineEventKind.SET_BPM, bpm))

    def set_master_volume(self, volume: float) -> None:
        """Set the master volume (0.0 to 1.0)."""
        with self._state_lock:
            self._volume_fixed = _to_fixed(volume, 1000.0)
        _try_put(self._events, EngineEvent(EngineEventKind.SET_MASTER_VOLUME, volume))

    @property
    def is_playing(self) -> bool:
        with self._state_lock:
            return self._is_playing

    @property
    def bpm(self) -> float:
        with self._state_lock:
            return self._bpm_fixed / 100.0

    @property
    def master_volume(self) -> float:
        with self._state_lock:
            return self._volume_fixed / 1000.0

    def set_track_midi_route(self, track_id: int, device: str, channel: int) -> None:
        """Send a MIDI routing update for a track to the audio thread."""
        _try_put(self._routes, TrackMidiRoute(track_id, device, channel))