"""Run the full GPX to animated SVG conversion for a single track."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Sequence, Tuple, Union

from .artifacts import write_artifacts
from .config import (
    ANIMATION_DURATION_S,
    ANIMATION_EASING,
    SIMPLIFY_KEEP_ENDPOINT,
    SIMPLIFY_THRESHOLD_DEG,
    STROKE_COLOR,
    SVG_VIEWBOX_PADDING,
)
from .emitter import PathArtifact, RouteMetadata, emit
from .geometry import (
    GeoPoint,
    load_track,
    planar_path_length,
    project,
    simplify,
    total_distance_km,
)

PathLike = Union[str, Path]

_LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class ConversionResult:
    """Artifacts produced for one track and where they were written."""

    source: Path
    svg_path: Path
    metadata_path: Path
    artifact: PathArtifact
    metadata: RouteMetadata
    raw_point_count: int


def build_artifacts(
    track: Sequence[GeoPoint],
    *,
    duration_s: float = ANIMATION_DURATION_S,
    easing: Optional[str] = ANIMATION_EASING,
    threshold: float = SIMPLIFY_THRESHOLD_DEG,
    keep_last: bool = SIMPLIFY_KEEP_ENDPOINT,
    stroke_width: Optional[float] = None,
    stroke_color: str = STROKE_COLOR,
) -> Tuple[PathArtifact, RouteMetadata]:
    """Simplify, project and measure ``track`` without touching the filesystem."""

    simplified = simplify(track, threshold, keep_last=keep_last)
    _LOGGER.debug("Simplified %d points to %d", len(track), len(simplified))
    projection = project(simplified)
    path_length = planar_path_length(projection.points)
    # Distance uses the same points that are drawn so progress maps linearly.
    distance_km = total_distance_km(simplified)
    return emit(
        projection.canvas,
        projection.points,
        path_length,
        projection.region,
        distance_km,
        duration_s=duration_s,
        easing=easing,
        stroke_width=stroke_width,
        stroke_color=stroke_color,
    )


def convert_track(
    gpx_path: PathLike,
    svg_path: PathLike,
    *,
    duration_s: float = ANIMATION_DURATION_S,
    easing: Optional[str] = ANIMATION_EASING,
    threshold: float = SIMPLIFY_THRESHOLD_DEG,
    keep_last: bool = SIMPLIFY_KEEP_ENDPOINT,
    stroke_width: Optional[float] = None,
    stroke_color: str = STROKE_COLOR,
    padding: float = SVG_VIEWBOX_PADDING,
) -> ConversionResult:
    """Convert ``gpx_path`` into an animated SVG plus a metadata JSON file.

    The metadata file sits next to ``svg_path`` with a ``.json`` suffix.
    Nothing is written when parsing or projection fails.

    Raises:
        ParseError: If the GPX file is unreadable or invalid.
        ArtifactWriteError: If either output cannot be written.
        ValueError: For an invalid duration, easing or threshold.
    """

    source = Path(gpx_path)
    track = load_track(source)
    artifact, metadata = build_artifacts(
        track,
        duration_s=duration_s,
        easing=easing,
        threshold=threshold,
        keep_last=keep_last,
        stroke_width=stroke_width,
        stroke_color=stroke_color,
    )
    svg_written, json_written = write_artifacts(
        artifact, metadata, svg_path, padding=padding
    )
    _LOGGER.info(
        "Converted %s: %d/%d points, %.3f km, canvas %dx%d",
        source,
        len(artifact.points),
        len(track),
        metadata.total_distance,
        artifact.canvas.width,
        artifact.canvas.height,
    )
    return ConversionResult(
        source=source,
        svg_path=svg_written,
        metadata_path=json_written,
        artifact=artifact,
        metadata=metadata,
        raw_point_count=len(track),
    )


__all__ = ["ConversionResult", "build_artifacts", "convert_track"]
