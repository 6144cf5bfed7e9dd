"""Automation envelopes: time-sorted breakpoints with per-segment curve shapes."""

from __future__ import annotations

import bisect
from dataclasses import dataclass, field
from itertools import pairwise
from typing import ClassVar

_KINDS = frozenset({"constant", "linear", "exponential", "bezier"})


@dataclass(frozen=True)
class CurveShape:
    """Shape of the segment that starts at a point.

    ``kind`` is one of ``"constant"``, ``"linear"``, ``"exponential"`` or
    ``"bezier"``; ``tension`` is only used by exponential curves.
    """

    kind: str
    tension: float = 0.0

    CONSTANT: ClassVar[CurveShape]
    LINEAR: ClassVar[CurveShape]
    BEZIER: ClassVar[CurveShape]

    def __post_init__(self) -> None:
        if self.kind not in _KINDS:
            raise ValueError(f"unknown curve kind: {self.kind!r}")


CurveShape.CONSTANT = CurveShape("constant")
CurveShape.LINEAR = CurveShape("linear")
CurveShape.BEZIER = CurveShape("bezier")


@dataclass(frozen=True)
class AutomationPoint:
    """A breakpoint on an automation envelope."""

    time: float
    value: float
    shape: CurveShape


@dataclass
class AutomationEnvelope:
    """A list of automation points kept sorted by time."""

    points: list[AutomationPoint] = field(default_factory=list)

    def add_point(self, point: AutomationPoint) -> None:
        """Insert a point in time order, replacing any point at the same time."""
        pos = bisect.bisect_left(self.points, point.time, key=lambda p: p.time)
        if pos < len(self.points) and self.points[pos].time == point.time:
            self.points[pos] = point
        else:
            self.points.insert(pos, point)

    def interpolate(self, t: float) -> float:
        """Return the envelope value at time ``t``."""
        if not self.points:
            return 0.0

        first, last = self.points[0], self.points[-1]
        if t <= first.time:
            return first.value
        if t >= last.time:
            return last.value

        for p0, p1 in pairwise(self.points):
            if p0.time <= t < p1.time:
                time_range = p1.time - p0.time
                if time_range == 0.0:
                    return p0.value
                t_norm = (t - p0.time) / time_range
                return _shape_value(p0.shape, p0.value, p1.value, t_norm)

        return 0.0


def _shape_value(shape: CurveShape, start: float, end: float, t_norm: float) -> float:
    if shape.kind == "constant":
        return start
    if shape.kind == "exponential":
        tension = shape.tension
        if tension == 0.0:
            exp_t = t_norm
        elif tension > 0.0:
            exp_t = t_norm ** (1.0 + tension)
        else:
            exp_t = t_norm ** (1.0 / (1.0 - tension))
        return start + (end - start) * exp_t
    # Linear and Bezier segments both interpolate in a straight line.
    return start + (end - start) * t_norm