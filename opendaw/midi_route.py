"""Routing of incoming MIDI events to tracks by device and channel."""

from __future__ import annotations

import logging
import queue
from dataclasses import dataclass, field

logger = logging.getLogger(__name__)

EVENT_QUEUE_CAPACITY = 1024


@dataclass(frozen=True)
class MidiEvent:
    """A note event received from a MIDI device."""

    device: str
    channel: int
    note: int
    velocity: int


@dataclass
class TrackMidiRoute:
    """Which device and channel feed a track; channel 0 accepts every channel."""

    track_id: int
    device: str
    channel: int

    def matches(self, event: MidiEvent) -> bool:
        """Return whether ``event`` should be delivered to this route's track."""
        return self.device == event.device and (
            self.channel == 0 or self.channel == event.channel
        )


@dataclass
class MidiRouter:
    """Holds per-track routes and dispatches events to matching tracks."""

    routes: list[TrackMidiRoute] = field(default_factory=list)
    _events: queue.Queue = field(
        default_factory=lambda: queue.Queue(maxsize=EVENT_QUEUE_CAPACITY), repr=False
    )

    @classmethod
    def create_channel(cls) -> tuple[MidiRouter, queue.Queue]:
        """Create a router together with the queue its events are delivered on."""
        router = cls()
        return router, router._events

    def set_route(self, track_id: int, device: str, channel: int) -> None:
        """Add a route for a track, or update the track's existing route."""
        for route in self.routes:
            if route.track_id == track_id:
                route.device = device
                route.channel = channel
                return
        self.routes.append(TrackMidiRoute(track_id, device, channel))

    def process_event(self, event: MidiEvent) -> list[int]:
        """Route ``event`` and return the ids of the tracks it was routed to."""
        targets = []
        for route in self.routes:
            if route.matches(event):
                logger.info("Routing MIDI event %r to track %d", event, route.track_id)
                targets.append(route.track_id)
        return targets