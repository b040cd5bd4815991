"""Dataclasses describing track geometry inputs and projection results."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, NamedTuple, Sequence


class GeoPoint(NamedTuple):
    """A recorded position in degrees. Longitude comes first, like ``(x, y)``."""

    lon: float
    lat: float


class PlanarPoint(NamedTuple):
    """A position on the drawing surface; y grows southwards."""

    x: float
    y: float


Track = List[GeoPoint]


@dataclass(frozen=True, slots=True)
class Centroid:
    """Midpoint of a bounding region (not the track's centre of mass)."""

    lat: float
    lon: float


@dataclass(frozen=True, slots=True)
class BoundingRegion:
    """Min/max latitude and longitude covering every point of a track."""

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float

    def __post_init__(self) -> None:
        if self.min_lat > self.max_lat or self.min_lon > self.max_lon:
            raise ValueError("Bounding region minimum exceeds maximum")

    @classmethod
    def from_points(cls, points: Sequence[GeoPoint]) -> "BoundingRegion":
        if not points:
            raise ValueError("Cannot bound an empty point collection")
        lons = [pt.lon for pt in points]
        lats = [pt.lat for pt in points]
        return cls(
            min_lat=min(lats),
            max_lat=max(lats),
            min_lon=min(lons),
            max_lon=max(lons),
        )

    @property
    def lat_extent(self) -> float:
        return self.max_lat - self.min_lat

    @property
    def lon_extent(self) -> float:
        return self.max_lon - self.min_lon

    @property
    def center(self) -> Centroid:
        return Centroid(
            lat=(self.min_lat + self.max_lat) / 2,
            lon=(self.min_lon + self.max_lon) / 2,
        )


@dataclass(frozen=True, slots=True)
class CanvasSpec:
    """Drawing surface size in pixels."""

    width: int
    height: int


@dataclass(frozen=True, slots=True)
class Projection:
    """Outcome of projecting a full track onto a canvas."""

    canvas: CanvasSpec
    points: List[PlanarPoint]
    region: BoundingRegion
    width_km: float
    height_km: float
