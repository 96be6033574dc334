"""First-order low-pass filter: y[n] = gain * y[n-1] + (1 - gain) * x[n]."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class LowpassFilter1d:
    """First-order IIR low-pass filter.

    ``gain`` controls smoothing: 0.0 passes input through, 1.0 never moves.
    """

    value: float = 0.0
    gain: float = 0.0

    def filter(self, value: float) -> float:
        """Feed a new sample and return the filtered value."""
        self.value = self.gain * self.value + (1.0 - self.gain) * value
        return self.value

    def reset(self, value: float) -> None:
        """Set the filter state to ``value``."""
        self.value = value