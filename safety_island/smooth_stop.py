"""Smooth stop: gentle deceleration when approaching a stop point.

Velocity history is used to estimate the time until the vehicle stops.
"""

from __future__ import annotations

from collections import deque
from dataclasses import dataclass
from typing import NamedTuple

MAX_VEL_HISTORY = 64
"""Number of velocity samples kept for the time-to-stop regression."""

_HOLD_BRAKE_DURATION = 0.5


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if value > high:
        return high
    return value


@dataclass(frozen=True)
class SmoothStopParams:
    """Accelerations, thresholds and distances used by the smooth stop."""

    max_strong_acc: float = -0.5
    min_strong_acc: float = -0.8
    weak_acc: float = -0.3
    weak_stop_acc: float = -0.8
    strong_stop_acc: float = -3.4
    min_fast_vel: float = 0.5
    min_running_vel: float = 0.01
    min_running_acc: float = 0.01
    weak_stop_time: float = 0.8
    weak_stop_dist: float = -0.3
    strong_stop_dist: float = -0.5


class _VelSample(NamedTuple):
    time: float
    vel: float


class SmoothStop:
    """Computes deceleration commands that bring the vehicle to a smooth stop."""

    def __init__(self, params: SmoothStopParams | None = None) -> None:
        self.params = params if params is not None else SmoothStopParams()
        self.strong_acc = self.params.min_strong_acc
        self._history: deque[_VelSample] = deque(maxlen=MAX_VEL_HISTORY)
        self._stopped_time: float | None = None

    def start(self, pred_vel: float, pred_stop_dist: float) -> None:
        """Prepare for a new stop with the predicted velocity and stop distance.

        The strong deceleration is the kinematic -v^2 / (2 d), clamped to the
        configured strong-acceleration range.
        """
        p = self.params
        if abs(pred_stop_dist) > 1e-6:
            kinematic = -(pred_vel * pred_vel) / (2.0 * pred_stop_dist)
            self.strong_acc = _clamp(kinematic, p.min_strong_acc, p.max_strong_acc)
        else:
            self.strong_acc = p.min_strong_acc
        self._history.clear()
        self._stopped_time = None

    def add_vel_sample(self, time: float, vel: float) -> None:
        """Record a velocity sample; the oldest is dropped when the history is full."""
        self._history.append(_VelSample(time, vel))

    def time_to_stop(self) -> float | None:
        """Estimate the remaining time until standstill by linear regression.

        Returns ``None`` when there is too little data, the velocity is not
        decreasing, or the estimated stop lies in the past.
        """
        if len(self._history) < 2:
            return None

        n = float(len(self._history))
        sum_t = sum(s.time for s in self._history)
        sum_v = sum(s.vel for s in self._history)
        sum_tv = sum(s.time * s.vel for s in self._history)
        sum_tt = sum(s.time * s.time for s in self._history)

        denom = n * sum_tt - sum_t * sum_t
        if abs(denom) < 1e-10:
            return None

        slope = (n * sum_tv - sum_t * sum_v) / denom
        intercept = (sum_v - slope * sum_t) / n
        if slope >= 0.0 or intercept <= 0.0:
            return None

        stop_time = -intercept / slope
        remaining = stop_time - self._history[-1].time
        return remaining if remaining > 0.0 else None

    def calculate(
        self,
        stop_dist: float,
        current_vel: float,
        current_acc: float,
        current_time: float,
    ) -> float:
        """Return the acceleration command for the current approach to the stop point."""
        p = self.params

        if stop_dist < p.strong_stop_dist:
            return p.strong_stop_acc
        if stop_dist < p.weak_stop_dist:
            return p.weak_stop_acc

        is_running = (
            abs(current_vel) > p.min_running_vel or abs(current_acc) > p.min_running_acc
        )
        if is_running:
            self._stopped_time = None
            remaining = self.time_to_stop()
            if remaining is not None and remaining > p.weak_stop_time:
                return self.strong_acc
            return p.weak_acc

        if self._stopped_time is None:
            self._stopped_time = current_time
        if current_time - self._stopped_time < _HOLD_BRAKE_DURATION:
            return p.weak_acc
        return p.strong_stop_acc