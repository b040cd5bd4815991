"""Greedy distance-based thinning of recorded track points."""

from __future__ import annotations

import math
from typing import Sequence

from .models import GeoPoint, Track


def simplify(
    points: Sequence[GeoPoint],
    threshold: float,
    *,
    keep_last: bool = True,
) -> Track:
    """Drop points lying within ``threshold`` of the previously kept point.

    Distances are plain Euclidean distances in the input units (degrees), not
    metres. The first point is always kept. A single forward pass is made, so
    the result is not the minimal point set and gives no bound on
    perpendicular error; it only guarantees that consecutive kept points are
    more than ``threshold`` apart. When ``keep_last`` is set the final input
    point is appended if the scan dropped it, which is the one pair allowed
    to be closer than ``threshold``.
    """

    if threshold < 0:
        raise ValueError("threshold must not be negative")
    if not points:
        return []

    kept: Track = [points[0]]
    last_index = 0
    for index in range(1, len(points)):
        point = points[index]
        last = kept[-1]
        if math.hypot(point.lon - last.lon, point.lat - last.lat) > threshold:
            kept.append(point)
            last_index = index

    if keep_last and last_index != len(points) - 1:
        kept.append(points[-1])
    return kept


__all__ = ["simplify"]
