"""Track geometry processing: loading, thinning, projection and metrics.

This module turns a GPX file into planar drawing coordinates with a
real-world-correct aspect ratio, and measures both the drawn and the
travelled length of the route.
"""

from .models import (
    BoundingRegion,
    CanvasSpec,
    Centroid,
    GeoPoint,
    PlanarPoint,
    Projection,
    Track,
)
from .loader import load_track
from .simplify import simplify
from .projection import canvas_for, mercator_y, project, real_world_size_km
from .metrics import (
    cumulative_distance_km,
    planar_path_length,
    stroke_width_for,
    total_distance_km,
)

__all__ = [
    "BoundingRegion",
    "CanvasSpec",
    "Centroid",
    "GeoPoint",
    "PlanarPoint",
    "Projection",
    "Track",
    "load_track",
    "simplify",
    "canvas_for",
    "mercator_y",
    "project",
    "real_world_size_km",
    "cumulative_distance_km",
    "planar_path_length",
    "stroke_width_for",
    "total_distance_km",
]
