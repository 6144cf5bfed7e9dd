"""Modulation matrix routing sources such as LFOs and macros to parameters."""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum


class ModSourceKind(Enum):
    MACRO = "macro"
    LFO = "lfo"
    ENVELOPE = "envelope"
    VELOCITY = "velocity"
    MOD_WHEEL = "mod_wheel"
    PITCH_BEND = "pitch_bend"
    AFTERTOUCH = "aftertouch"


@dataclass(frozen=True)
class ModSource:
    """A modulation source; ``index`` selects among macros, LFOs and envelopes."""

    kind: ModSourceKind
    index: int = 0


@dataclass(frozen=True)
class ModTarget:
    """A parameter of a node that can be modulated."""

    node_id: int
    param_id: int


class ModCurve(Enum):
    LINEAR = "linear"
    EXPONENTIAL = "exponential"
    LOGARITHMIC = "logarithmic"
    S_CURVE = "s_curve"

    def apply(self, value: float) -> float:
        """Shape the magnitude of ``value`` while keeping its sign."""
        sign = math.copysign(1.0, value)
        magnitude = abs(value)
        if self is ModCurve.LINEAR:
            shaped = magnitude
        elif self is ModCurve.EXPONENTIAL:
            shaped = magnitude * magnitude
        elif self is ModCurve.LOGARITHMIC:
            shaped = math.sqrt(magnitude)
        else:
            shaped = magnitude * magnitude * (3.0 - 2.0 * magnitude)
        return shaped * sign


@dataclass
class ModRouting:
    """One source-to-target entry in the matrix."""

    id: int
    source: ModSource
    target: ModTarget
    amount: float
    curve: ModCurve
    enabled: bool = True

    def apply(self, source_value: float) -> float:
        """Return the modulation contributed for a given source value."""
        if not self.enabled:
            return 0.0
        return self.curve.apply(source_value) * self.amount


@dataclass
class ModMatrix:
    """Routes modulation sources to targets and sums their contributions."""

    routings: list[ModRouting] = field(default_factory=list)
    _next_routing_id: int = field(default=1, repr=False)

    def add_routing(
        self, source: ModSource, target: ModTarget, amount: float, curve: ModCurve
    ) -> int:
        """Add an enabled routing and return its id."""
        routing_id = self._next_routing_id
        self._next_routing_id += 1
        self.routings.append(ModRouting(routing_id, source, target, amount, curve))
        return routing_id

    def remove_routing(self, routing_id: int) -> None:
        self.routings = [r for r in self.routings if r.id != routing_id]

    def _find(self, routing_id: int) -> ModRouting | None:
        return next((r for r in self.routings if r.id == routing_id), None)

    def set_routing_enabled(self, routing_id: int, enabled: bool) -> None:
        routing = self._find(routing_id)
        if routing is not None:
            routing.enabled = enabled

    def set_routing_amount(self, routing_id: int, amount: float) -> None:
        routing = self._find(routing_id)
        if routing is not None:
            routing.amount = amount

    def calculate_modulations(
        self, source_values: Mapping[ModSource, float]
    ) -> dict[ModTarget, float]:
        """Sum the modulation applied to each target for the given source values."""
        totals: dict[ModTarget, float] = {}
        for routing in self.routings:
            if not routing.enabled or routing.source not in source_values:
                continue
            value = routing.apply(source_values[routing.source])
            totals[routing.target] = totals.get(routing.target, 0.0) + value
        return totals