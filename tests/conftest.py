"""Global pytest fixtures & helpers.

Adds project root to path and provides GPX writers so each test can build
the small track files it needs without duplicating XML boilerplate.
"""
from __future__ import annotations

import os
import sys
from pathlib import Path
from typing import Callable, Iterable, Sequence, Tuple

import pytest

ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if ROOT not in sys.path:
    sys.path.insert(0, ROOT)

from gpx_animate.geometry.models import GeoPoint

GPX_11_NS = "http://www.topografix.com/GPX/1/1"

LonLat = Tuple[float, float]


# --- Factory helpers -------------------------------------------------
def gpx_document(
    segments: Iterable[Sequence[LonLat]],
    *,
    namespace: str | None = GPX_11_NS,
    extra_tracks: Iterable[Sequence[LonLat]] = (),
) -> str:
    """Return GPX text with one track holding ``segments`` of (lon, lat) pairs."""

    ns_attr = f' xmlns="{namespace}"' if namespace else ""

    def _track(name: str, segs: Iterable[Sequence[LonLat]]) -> list[str]:
        lines = ["  <trk>", f"    <name>{name}</name>"]
        for seg in segs:
            lines.append("    <trkseg>")
            for lon, lat in seg:
                lines.append(f'      <trkpt lat="{lat}" lon="{lon}">')
                lines.append("        <ele>12.5</ele>")
                lines.append("        <time>2024-05-01T08:00:00Z</time>")
                lines.append("      </trkpt>")
            lines.append("    </trkseg>")
        lines.append("  </trk>")
        return lines

    lines = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        f'<gpx version="1.1" creator="tests"{ns_attr}>',
        "  <metadata><name>Test route</name></metadata>",
    ]
    lines.extend(_track("Main", segments))
    for index, extra in enumerate(extra_tracks):
        lines.extend(_track(f"Extra {index}", [extra]))
    lines.append("</gpx>")
    return "\n".join(lines)


def to_geo(points: Iterable[LonLat]) -> list[GeoPoint]:
    return [GeoPoint(lon=lon, lat=lat) for lon, lat in points]


# --- Fixtures --------------------------------------------------------
@pytest.fixture
def write_gpx(tmp_path: Path) -> Callable[..., Path]:
    """Return a helper writing a single-segment GPX file under ``tmp_path``."""

    def _write(
        points: Sequence[LonLat],
        name: str = "route.gpx",
        **kwargs,
    ) -> Path:
        path = tmp_path / name
        path.write_text(gpx_document([points], **kwargs), encoding="utf-8")
        return path

    return _write


@pytest.fixture
def north_track() -> list[LonLat]:
    """Three points heading due north, 0.001 degrees apart."""

    return [(10.0, 59.0), (10.0, 59.001), (10.0, 59.002)]


@pytest.fixture
def loop_track() -> list[LonLat]:
    """A wider-than-tall loop around a Swedish trail head."""

    return [
        (12.0000, 57.6000),
        (12.0100, 57.6020),
        (12.0250, 57.6050),
        (12.0400, 57.6030),
        (12.0450, 57.5980),
        (12.0300, 57.5950),
        (12.0150, 57.5960),
        (12.0010, 57.5990),
    ]
