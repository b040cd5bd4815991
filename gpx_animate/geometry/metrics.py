"""Length and distance measurements over projected and recorded tracks."""

from __future__ import annotations

import math
from typing import Sequence

import numpy as np
from numpy.typing import NDArray

from ..config import (
    EARTH_RADIUS_KM,
    STROKE_WIDTH_AREA_FACTOR,
    STROKE_WIDTH_MAX,
    STROKE_WIDTH_MIN,
)
from .models import BoundingRegion, GeoPoint, PlanarPoint
from .projection import real_world_size_km


def planar_path_length(points: Sequence[PlanarPoint]) -> float:
    """Return the summed Euclidean length of a projected polyline.

    The value is in drawing units and only drives animation timing; it is not
    a real-world measure.
    """

    if len(points) < 2:
        return 0.0
    array = np.asarray(points, dtype=float)
    deltas = np.diff(array, axis=0)
    return float(np.hypot(deltas[:, 0], deltas[:, 1]).sum())


def _haversine_segments_km(points: Sequence[GeoPoint]) -> NDArray[np.float64]:
    """Return great-circle lengths (km) between consecutive points."""

    if len(points) < 2:
        return np.zeros(0, dtype=float)
    lons = np.radians(np.asarray([pt.lon for pt in points], dtype=float))
    lats = np.radians(np.asarray([pt.lat for pt in points], dtype=float))
    delta_lat = np.diff(lats)
    delta_lon = np.diff(lons)
    a = (
        np.sin(delta_lat / 2.0) ** 2
        + np.cos(lats[:-1]) * np.cos(lats[1:]) * np.sin(delta_lon / 2.0) ** 2
    )
    # Rounding can push a fractionally above 1 for antipodal pairs.
    a = np.clip(a, 0.0, 1.0)
    c = 2.0 * np.arctan2(np.sqrt(a), np.sqrt(1.0 - a))
    return EARTH_RADIUS_KM * c


def total_distance_km(points: Sequence[GeoPoint]) -> float:
    """Return the haversine length of the recorded track in kilometres.

    Always measured on the geographic points; projected coordinates distort
    distance.
    """

    return float(_haversine_segments_km(points).sum())


def cumulative_distance_km(points: Sequence[GeoPoint]) -> list[float]:
    """Return the running haversine distance at every point, starting at 0."""

    if not points:
        return []
    running = np.concatenate(([0.0], np.cumsum(_haversine_segments_km(points))))
    return [float(value) for value in running]


def stroke_width_for(region: BoundingRegion) -> float:
    """Return a stroke width that shrinks as the covered area grows.

    Computed as ``STROKE_WIDTH_AREA_FACTOR / sqrt(area_km2)`` clamped to
    ``[STROKE_WIDTH_MIN, STROKE_WIDTH_MAX]``. Regions without area get the
    maximum width.
    """

    width_km, height_km = real_world_size_km(region)
    area_km2 = width_km * height_km
    if area_km2 <= 0:
        return STROKE_WIDTH_MAX
    width = STROKE_WIDTH_AREA_FACTOR / math.sqrt(area_km2)
    return max(STROKE_WIDTH_MIN, min(STROKE_WIDTH_MAX, width))


__all__ = [
    "cumulative_distance_km",
    "planar_path_length",
    "stroke_width_for",
    "total_distance_km",
]
