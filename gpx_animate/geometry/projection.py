"""Project geographic track points onto a planar drawing surface.

The projection is global: canvas size and scale depend on the bounding region
of the whole track, so it runs as two passes (bounds, then points) over the
complete point set.
"""

from __future__ import annotations

import logging
import math
from typing import Sequence, Tuple

import numpy as np
from numpy.typing import ArrayLike, NDArray

from ..config import (
    CANVAS_BASE_WIDTH,
    CANVAS_PORTRAIT_HEIGHT,
    KM_PER_DEGREE_LAT,
    MERCATOR_MAX_LAT,
    MIN_EXTENT_DEG,
)
from ..errors import DegenerateGeometryError
from .models import BoundingRegion, CanvasSpec, GeoPoint, PlanarPoint, Projection

LOGGER = logging.getLogger(__name__)


def mercator_y(lat: ArrayLike) -> NDArray[np.float64]:
    """Return the Mercator ordinate ``ln(tan(pi/4 + lat*pi/360))``.

    ``lat`` is in degrees; the ``/360`` folds in both the half angle and the
    degree-to-radian conversion. Latitudes are clamped to the Web Mercator
    limit so the poles stay finite.
    """

    clamped = np.clip(np.asarray(lat, dtype=float), -MERCATOR_MAX_LAT, MERCATOR_MAX_LAT)
    return np.log(np.tan(np.pi / 4 + clamped * np.pi / 360))


def _widen(low: float, high: float, minimum: float) -> Tuple[float, float]:
    """Return ``(low, high)`` grown symmetrically when it has no extent."""
    if high - low > 0:
        return low, high
    half = minimum / 2
    return low - half, high + half


def real_world_size_km(region: BoundingRegion) -> Tuple[float, float]:
    """Return the region's ``(width_km, height_km)``.

    Uses the equirectangular approximation: 111 km per degree of latitude and
    ``111 * cos(avg_lat)`` km per degree of longitude.
    """

    avg_lat = (region.min_lat + region.max_lat) / 2
    lon_km_per_degree = KM_PER_DEGREE_LAT * math.cos(math.radians(avg_lat))
    width_km = region.lon_extent * lon_km_per_degree
    height_km = region.lat_extent * KM_PER_DEGREE_LAT
    return width_km, height_km


def canvas_for(width_km: float, height_km: float) -> CanvasSpec:
    """Return a canvas with the same proportions as the real-world extent.

    Landscape routes keep the base width and derive the height; portrait (and
    square) routes keep the portrait height and derive the width.
    """

    if width_km <= 0 or height_km <= 0:
        raise ValueError("Real-world extent must be positive on both axes")
    aspect_ratio = width_km / height_km
    width = CANVAS_BASE_WIDTH
    if aspect_ratio > 1:
        height = max(1, math.floor(width / aspect_ratio))
    else:
        height = CANVAS_PORTRAIT_HEIGHT
        width = max(1, math.floor(height * aspect_ratio))
    return CanvasSpec(width=width, height=height)


def _scaling_region(region: BoundingRegion) -> BoundingRegion:
    """Return ``region`` with zero-extent axes widened to ``MIN_EXTENT_DEG``."""
    min_lat, max_lat = _widen(region.min_lat, region.max_lat, MIN_EXTENT_DEG)
    min_lon, max_lon = _widen(region.min_lon, region.max_lon, MIN_EXTENT_DEG)
    if (min_lat, max_lat, min_lon, max_lon) != (
        region.min_lat,
        region.max_lat,
        region.min_lon,
        region.max_lon,
    ):
        LOGGER.debug("Substituting minimal extent for degenerate region %s", region)
    return BoundingRegion(
        min_lat=min_lat, max_lat=max_lat, min_lon=min_lon, max_lon=max_lon
    )


def project(track: Sequence[GeoPoint]) -> Projection:
    """Map every track point onto a canvas sized to the track's true proportions.

    Raises:
        DegenerateGeometryError: If ``track`` is empty.
    """

    if not track:
        raise DegenerateGeometryError("Cannot project an empty track")

    # Pass 1: bounds and canvas.
    region = BoundingRegion.from_points(track)
    scaling = _scaling_region(region)
    width_km, height_km = real_world_size_km(scaling)
    canvas = canvas_for(width_km, height_km)

    merc_bounds = mercator_y([scaling.min_lat, scaling.max_lat])
    # Both latitudes may clamp to the same value beyond the Mercator limit.
    merc_low, merc_high = _widen(
        float(merc_bounds[0]), float(merc_bounds[1]), math.radians(MIN_EXTENT_DEG)
    )
    lon_scale = canvas.width / scaling.lon_extent
    lat_scale = canvas.height / (merc_high - merc_low)

    # Pass 2: place each point.
    lons = np.asarray([pt.lon for pt in track], dtype=float)
    lats = np.asarray([pt.lat for pt in track], dtype=float)
    xs = (lons - scaling.min_lon) * lon_scale
    ys = canvas.height - (mercator_y(lats) - merc_low) * lat_scale

    points = [PlanarPoint(float(x), float(y)) for x, y in zip(xs, ys)]
    LOGGER.debug(
        "Projected %d points onto %dx%d canvas (%.3f x %.3f km)",
        len(points),
        canvas.width,
        canvas.height,
        width_km,
        height_km,
    )
    return Projection(
        canvas=canvas,
        points=points,
        region=region,
        width_km=width_km,
        height_km=height_km,
    )


__all__ = ["canvas_for", "mercator_y", "project", "real_world_size_km"]
