"""Build the drawable path artifact and the route metadata record.

The animation is kept as a declarative :class:`AnimationSpec` (start value,
end value, duration, easing). :func:`render_svg` turns it into a SMIL
``<animate>`` element and :meth:`AnimationSpec.value_at` is a reference
interpreter for renderers that sample frames themselves.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Sequence, Tuple

from .config import ANIMATION_DURATION_S, STROKE_COLOR, SVG_VIEWBOX_PADDING
from .errors import DegenerateGeometryError
from .geometry.metrics import stroke_width_for
from .geometry.models import BoundingRegion, CanvasSpec, Centroid, PlanarPoint

LOGGER = logging.getLogger(__name__)

SVG_NS = "http://www.w3.org/2000/svg"

# Cubic bezier control points (x1, y1, x2, y2), as used by SVG keySplines.
EASING_CURVES: Dict[str, Tuple[float, float, float, float]] = {
    "ease-in-out": (0.42, 0.0, 0.58, 1.0),
    "ease-in": (0.42, 0.0, 1.0, 1.0),
    "ease-out": (0.0, 0.0, 0.58, 1.0),
}


def _bezier(p1: float, p2: float, u: float) -> float:
    """One axis of a cubic bezier anchored at 0 and 1."""
    inv = 1.0 - u
    return 3 * inv * inv * u * p1 + 3 * inv * u * u * p2 + u**3


def _ease(curve: Tuple[float, float, float, float], fraction: float) -> float:
    """Return the eased progress for a time ``fraction`` in ``[0, 1]``."""
    x1, y1, x2, y2 = curve
    low, high = 0.0, 1.0
    # x(u) is monotonic for control points inside [0, 1]; bisect for u.
    for _ in range(50):
        mid = (low + high) / 2
        if _bezier(x1, x2, mid) < fraction:
            low = mid
        else:
            high = mid
    return _bezier(y1, y2, (low + high) / 2)


@dataclass(frozen=True, slots=True)
class AnimationSpec:
    """Declarative animation of one attribute from ``start`` to ``end``."""

    start: float
    end: float
    duration_s: float
    easing: Optional[str] = None
    attribute: str = "stroke-dasharray"
    repeat_indefinitely: bool = True

    def __post_init__(self) -> None:
        if self.duration_s <= 0:
            raise ValueError("duration_s must be greater than zero")
        if self.easing is not None and self.easing not in EASING_CURVES:
            raise ValueError(
                f"Unknown easing '{self.easing}'; expected one of "
                f"{sorted(EASING_CURVES)}"
            )

    def value_at(self, time_s: float) -> float:
        """Return the animated value ``time_s`` seconds into the first cycle."""

        fraction = min(max(time_s / self.duration_s, 0.0), 1.0)
        if self.easing is not None:
            fraction = _ease(EASING_CURVES[self.easing], fraction)
        return self.start + (self.end - self.start) * fraction


@dataclass(frozen=True, slots=True)
class PathArtifact:
    """Projected polyline plus everything needed to draw and animate it."""

    canvas: CanvasSpec
    points: Tuple[PlanarPoint, ...]
    path_length: float
    animation: AnimationSpec
    stroke_width: float
    stroke_color: str = STROKE_COLOR

    @property
    def path_data(self) -> str:
        """Return absolute ``M``/``L`` path commands for the polyline."""
        first, rest = self.points[0], self.points[1:]
        commands = [f"M {_fmt(first.x)} {_fmt(first.y)}"]
        commands.extend(f"L {_fmt(pt.x)} {_fmt(pt.y)}" for pt in rest)
        return " ".join(commands)


@dataclass(frozen=True, slots=True)
class RouteMetadata:
    """Geographic facts a viewer needs to place and annotate the route."""

    min_lat: float
    max_lat: float
    min_lon: float
    max_lon: float
    center: Centroid
    total_distance: float
    real_path_length: float

    def distance_at(self, drawn_length: float) -> float:
        """Map a drawn path length to the travelled distance in kilometres."""

        if self.real_path_length <= 0:
            return 0.0
        progress = min(max(drawn_length / self.real_path_length, 0.0), 1.0)
        return progress * self.total_distance

    def to_dict(self) -> Dict[str, Any]:
        return {
            "minLat": self.min_lat,
            "maxLat": self.max_lat,
            "minLon": self.min_lon,
            "maxLon": self.max_lon,
            "center": {"lat": self.center.lat, "lon": self.center.lon},
            "totalDistance": self.total_distance,
            "realPathLength": self.real_path_length,
        }

    @classmethod
    def from_dict(cls, payload: Mapping[str, Any]) -> "RouteMetadata":
        center = payload["center"]
        return cls(
            min_lat=float(payload["minLat"]),
            max_lat=float(payload["maxLat"]),
            min_lon=float(payload["minLon"]),
            max_lon=float(payload["maxLon"]),
            center=Centroid(lat=float(center["lat"]), lon=float(center["lon"])),
            total_distance=float(payload["totalDistance"]),
            real_path_length=float(payload["realPathLength"]),
        )


def emit(
    canvas: CanvasSpec,
    points: Sequence[PlanarPoint],
    path_length: float,
    region: BoundingRegion,
    total_distance: float,
    *,
    duration_s: float = ANIMATION_DURATION_S,
    easing: Optional[str] = None,
    stroke_width: Optional[float] = None,
    stroke_color: str = STROKE_COLOR,
) -> Tuple[PathArtifact, RouteMetadata]:
    """Assemble the drawable artifact and its metadata side channel.

    Args:
        canvas: Canvas produced by the projector.
        points: Projected points, in track order.
        path_length: Planar length of ``points`` in drawing units.
        region: Bounding region of the geographic track.
        total_distance: Haversine length of the track in kilometres.
        duration_s: Seconds taken to draw the whole path.
        easing: Optional key of :data:`EASING_CURVES`; ``None`` is linear.
        stroke_width: Explicit stroke width; derived from ``region`` when
            omitted.
        stroke_color: Any SVG colour value.

    Returns:
        The :class:`PathArtifact` and the matching :class:`RouteMetadata`.

    Raises:
        DegenerateGeometryError: If ``points`` is empty.
        ValueError: If ``duration_s`` or ``easing`` is invalid.
    """

    if not points:
        raise DegenerateGeometryError("Cannot emit a path without points")
    if stroke_width is None:
        stroke_width = stroke_width_for(region)
    animation = AnimationSpec(
        start=0.0,
        end=path_length,
        duration_s=duration_s,
        easing=easing,
    )
    artifact = PathArtifact(
        canvas=canvas,
        points=tuple(points),
        path_length=path_length,
        animation=animation,
        stroke_width=stroke_width,
        stroke_color=stroke_color,
    )
    metadata = RouteMetadata(
        min_lat=region.min_lat,
        max_lat=region.max_lat,
        min_lon=region.min_lon,
        max_lon=region.max_lon,
        center=region.center,
        total_distance=total_distance,
        real_path_length=path_length,
    )
    return artifact, metadata


def _fmt(value: float) -> str:
    """Format a coordinate compactly with millipixel precision."""
    text = f"{value:.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text


def _escape_xml(text: str) -> str:
    """Escape special XML characters."""
    return (
        text.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
        .replace("'", "&apos;")
    )


def _animate_element(artifact: PathArtifact) -> str:
    animation = artifact.animation
    length = _fmt(animation.end)
    attrs = [
        f'attributeName="{animation.attribute}"',
        f'from="{_fmt(animation.start)} {length}"',
        f'to="{length} {length}"',
        f'dur="{_fmt(animation.duration_s)}s"',
    ]
    if animation.repeat_indefinitely:
        attrs.append('repeatCount="indefinite"')
    else:
        attrs.append('fill="freeze"')
    if animation.easing is not None:
        x1, y1, x2, y2 = EASING_CURVES[animation.easing]
        attrs.extend(
            [
                'calcMode="spline"',
                'keyTimes="0;1"',
                f'keySplines="{x1:g} {y1:g} {x2:g} {y2:g}"',
            ]
        )
    return "    <animate " + " ".join(attrs) + " />"


def render_svg(artifact: PathArtifact, *, padding: float = SVG_VIEWBOX_PADDING) -> str:
    """Return a standalone SVG document for ``artifact``.

    The viewBox matches the canvas, grown by ``padding`` drawing units on
    every side when requested so round line caps are not clipped.
    """

    canvas = artifact.canvas
    view_box = " ".join(
        _fmt(value)
        for value in (
            -padding,
            -padding,
            canvas.width + 2 * padding,
            canvas.height + 2 * padding,
        )
    )
    length = _fmt(artifact.path_length)
    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<svg xmlns="{SVG_NS}" width="{canvas.width}" height="{canvas.height}" '
        f'viewBox="{view_box}">',
        f'  <path d="{artifact.path_data}" fill="none" '
        f'stroke="{_escape_xml(artifact.stroke_color)}" '
        f'stroke-width="{_fmt(artifact.stroke_width)}" '
        f'stroke-linecap="round" stroke-linejoin="round" '
        f'stroke-dasharray="0 {length}">',
        _animate_element(artifact),
        "  </path>",
        "</svg>",
    ]
    return "\n".join(lines) + "\n"


__all__ = [
    "EASING_CURVES",
    "AnimationSpec",
    "PathArtifact",
    "RouteMetadata",
    "emit",
    "render_svg",
]
