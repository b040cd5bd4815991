"""Read GPX track points into an ordered :data:`Track`."""

from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Union

from defusedxml import DefusedXmlException
from defusedxml import ElementTree as ET

from ..errors import ParseError
from .models import GeoPoint, Track

PathLike = Union[str, Path]

LOGGER = logging.getLogger(__name__)


def _local_name(tag: str) -> str:
    """Strip any ``{namespace}`` prefix so GPX 1.0 and 1.1 parse alike."""
    return tag.rsplit("}", 1)[-1]


def _children(element: ET.Element, name: str) -> list[ET.Element]:
    return [child for child in element if _local_name(child.tag) == name]


def _parse_coordinate(trkpt: ET.Element, attr: str, index: int) -> float:
    raw = trkpt.get(attr)
    if raw is None:
        raise ParseError(f"Track point {index} is missing the '{attr}' attribute")
    try:
        value = float(raw)
    except ValueError as exc:
        raise ParseError(
            f"Track point {index} has an invalid {attr} value: {raw!r}"
        ) from exc
    if not math.isfinite(value):
        raise ParseError(f"Track point {index} has a non-finite {attr} value")
    limit = 90.0 if attr == "lat" else 180.0
    if abs(value) > limit:
        raise ParseError(f"Track point {index} {attr}={value} is out of range")
    return value


def load_track(path: PathLike) -> Track:
    """Parse ``path`` and return its track points in recording order.

    Points come from the first ``<trk>`` element; all of its ``<trkseg>``
    blocks are concatenated in document order. Elevation, time and extension
    elements are ignored.

    Raises:
        ParseError: If the file cannot be read or parsed, holds no track
            points, or any point has a missing or invalid coordinate.
    """

    source = Path(path)
    try:
        with source.open("rb") as handle:
            tree = ET.parse(handle)
    except OSError as exc:
        raise ParseError(f"Unable to read GPX file {source}: {exc}") from exc
    except (ET.ParseError, DefusedXmlException) as exc:
        raise ParseError(f"Malformed GPX file {source}: {exc}") from exc

    root = tree.getroot()
    if _local_name(root.tag) != "gpx":
        raise ParseError(f"{source} is not a GPX document (root <{root.tag}>)")

    tracks = _children(root, "trk")
    if not tracks:
        raise ParseError(f"GPX file {source} contains no track")
    if len(tracks) > 1:
        LOGGER.warning(
            "GPX file %s has %d tracks; only the first is used",
            source,
            len(tracks),
        )

    points: Track = []
    for segment in _children(tracks[0], "trkseg"):
        for trkpt in _children(segment, "trkpt"):
            index = len(points)
            lat = _parse_coordinate(trkpt, "lat", index)
            lon = _parse_coordinate(trkpt, "lon", index)
            points.append(GeoPoint(lon=lon, lat=lat))

    if not points:
        raise ParseError(f"GPX file {source} contains no track points")
    LOGGER.debug("Loaded %d track points from %s", len(points), source)
    return points


__all__ = ["load_track"]
