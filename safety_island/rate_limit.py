"""Rate limiting of a signal between control cycles (e.g. jerk limiting)."""

from __future__ import annotations

__all__ = ["apply_diff_limit", "apply_diff_limit_symmetric"]


def _clamp(value: float, low: float, high: float) -> float:
    if value < low:
        return low
    if value > high:
        return high
    return value


def apply_diff_limit(
    value: float, prev: float, dt: float, max_rate: float, min_rate: float
) -> float:
    """Limit the change from ``prev`` to ``value`` to ``[min_rate*dt, max_rate*dt]``."""
    diff = value - prev
    return prev + _clamp(diff, min_rate * dt, max_rate * dt)


def apply_diff_limit_symmetric(value: float, prev: float, dt: float, limit: float) -> float:
    """Limit the change from ``prev`` to ``value`` to ``[-limit*dt, limit*dt]``."""
    return apply_diff_limit(value, prev, dt, limit, -limit)