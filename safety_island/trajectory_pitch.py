"""Road pitch estimated from trajectory geometry."""

from __future__ import annotations

import math
from collections.abc import Sequence
from itertools import islice, pairwise

from safety_island.messages import Point

__all__ = ["get_pitch_by_traj"]


def get_pitch_by_traj(points: Sequence[Point], start_idx: int, wheel_base: float) -> float:
    """Return the elevation angle from ``points[start_idx]`` to a point about
    ``wheel_base`` metres ahead along the trajectory (2D arc length).

    Returns 0.0 for trajectories that are too short, a start index at or past
    the last point, or a degenerate horizontal displacement.
    """
    if len(points) < 2 or start_idx >= len(points) - 1:
        return 0.0

    accumulated = 0.0
    end_idx = start_idx
    segments = pairwise(islice(points, start_idx, None))
    for end_idx, (a, b) in enumerate(segments, start=start_idx + 1):
        accumulated += math.hypot(b.x - a.x, b.y - a.y)
        if accumulated >= wheel_base:
            break

    if end_idx == start_idx:
        return 0.0

    p0 = points[start_idx]
    p1 = points[end_idx]
    horiz = math.hypot(p1.x - p0.x, p1.y - p0.y)
    if horiz < 1e-6:
        return 0.0
    return math.atan2(p1.z - p0.z, horiz)