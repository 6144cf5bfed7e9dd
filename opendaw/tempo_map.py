"""Tempo and time-signature changes along the timeline, indexed by tick."""

from __future__ import annotations

import bisect
from dataclasses import dataclass

DEFAULT_BPM = 120.0
DEFAULT_TIME_SIGNATURE = (4, 4)


@dataclass(frozen=True)
class TempoEvent:
    """A BPM change at a tick."""

    tick: int
    bpm: float


@dataclass(frozen=True)
class TimeSignatureEvent:
    """A time-signature change at a tick."""

    tick: int
    numerator: int
    denominator: int


class TempoMap:
    """Tempo and meter events, starting at 120 BPM in 4/4 at tick 0."""

    def __init__(self) -> None:
        self._tempo_events = [TempoEvent(0, DEFAULT_BPM)]
        self._time_signature_events = [TimeSignatureEvent(0, *DEFAULT_TIME_SIGNATURE)]

    def __repr__(self) -> str:
        return (
            f"TempoMap(tempo_events={self._tempo_events!r}, "
            f"time_signature_events={self._time_signature_events!r})"
        )

    def add_tempo_event(self, tick: int, bpm: float) -> None:
        """Add a tempo change; a later event at the same tick takes precedence."""
        bisect.insort_right(self._tempo_events, TempoEvent(tick, bpm), key=lambda e: e.tick)

    def add_time_signature_event(self, tick: int, numerator: int, denominator: int) -> None:
        """Add a time-signature change; a later event at the same tick takes precedence."""
        bisect.insort_right(
            self._time_signature_events,
            TimeSignatureEvent(tick, numerator, denominator),
            key=lambda e: e.tick,
        )

    def tempo_at(self, tick: int) -> float:
        """Return the BPM in effect at ``tick``."""
        pos = bisect.bisect_right(self._tempo_events, tick, key=lambda e: e.tick)
        return self._tempo_events[pos - 1].bpm if pos else DEFAULT_BPM

    def time_signature_at(self, tick: int) -> tuple[int, int]:
        """Return the (numerator, denominator) in effect at ``tick``."""
        pos = bisect.bisect_right(self._time_signature_events, tick, key=lambda e: e.tick)
        if not pos:
            return DEFAULT_TIME_SIGNATURE
        event = self._time_signature_events[pos - 1]
        return (event.numerator, event.denominator)