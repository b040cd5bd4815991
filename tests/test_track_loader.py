"""Tests for GPX track loading."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from gpx_animate.errors import ParseError
from gpx_animate.geometry.loader import load_track
from gpx_animate.geometry.models import GeoPoint

from conftest import gpx_document


def test_load_track_reads_lon_lat_in_order(write_gpx, loop_track) -> None:
    path = write_gpx(loop_track)

    track = load_track(path)

    assert track == [GeoPoint(lon=lon, lat=lat) for lon, lat in loop_track]
    assert track[0].lon == pytest.approx(12.0)
    assert track[0].lat == pytest.approx(57.6)


@pytest.mark.parametrize(
    "namespace",
    [None, "http://www.topografix.com/GPX/1/0", "http://www.topografix.com/GPX/1/1"],
)
def test_load_track_accepts_any_gpx_namespace(write_gpx, north_track, namespace) -> None:
    path = write_gpx(north_track, namespace=namespace)

    assert len(load_track(path)) == 3


def test_load_track_concatenates_segments(tmp_path: Path) -> None:
    path = tmp_path / "segments.gpx"
    path.write_text(
        gpx_document([[(1.0, 50.0), (1.1, 50.1)], [(1.2, 50.2)]]), encoding="utf-8"
    )

    track = load_track(path)

    assert [pt.lon for pt in track] == [1.0, 1.1, 1.2]


def test_load_track_uses_first_track_only(tmp_path: Path, caplog) -> None:
    path = tmp_path / "two_tracks.gpx"
    path.write_text(
        gpx_document([[(1.0, 50.0), (1.1, 50.1)]], extra_tracks=[[(9.0, 40.0)]]),
        encoding="utf-8",
    )

    with caplog.at_level(logging.WARNING):
        track = load_track(path)

    assert len(track) == 2
    assert "only the first is used" in caplog.text


def test_load_track_missing_file_raises(tmp_path: Path) -> None:
    with pytest.raises(ParseError, match="Unable to read"):
        load_track(tmp_path / "missing.gpx")


def test_load_track_malformed_xml_raises(tmp_path: Path) -> None:
    path = tmp_path / "broken.gpx"
    path.write_text("<gpx><trk><trkseg><trkpt lat='1'", encoding="utf-8")

    with pytest.raises(ParseError, match="Malformed"):
        load_track(path)


def test_load_track_rejects_entity_expansion(tmp_path: Path) -> None:
    path = tmp_path / "entities.gpx"
    path.write_text(
        '<?xml version="1.0"?>\n'
        '<!DOCTYPE gpx [<!ENTITY lol "lol">]>\n'
        "<gpx><trk><trkseg><trkpt lat=\"1\" lon=\"2\"><name>&lol;</name>"
        "</trkpt></trkseg></trk></gpx>",
        encoding="utf-8",
    )

    with pytest.raises(ParseError):
        load_track(path)


def test_load_track_rejects_non_gpx_root(tmp_path: Path) -> None:
    path = tmp_path / "kml.gpx"
    path.write_text("<kml><Document/></kml>", encoding="utf-8")

    with pytest.raises(ParseError, match="not a GPX document"):
        load_track(path)


def test_load_track_without_points_raises(write_gpx) -> None:
    path = write_gpx([])

    with pytest.raises(ParseError, match="no track points"):
        load_track(path)


def test_load_track_without_track_raises(tmp_path: Path) -> None:
    path = tmp_path / "waypoints.gpx"
    path.write_text('<gpx><wpt lat="1" lon="2"/></gpx>', encoding="utf-8")

    with pytest.raises(ParseError, match="no track"):
        load_track(path)


@pytest.mark.parametrize(
    "trkpt, message",
    [
        ('<trkpt lat="abc" lon="10"/>', "invalid lat"),
        ('<trkpt lat="59"/>', "missing the 'lon'"),
        ('<trkpt lat="nan" lon="10"/>', "non-finite lat"),
        ('<trkpt lat="91" lon="10"/>', "out of range"),
        ('<trkpt lat="59" lon="-181"/>', "out of range"),
    ],
)
def test_load_track_rejects_bad_coordinates(tmp_path: Path, trkpt, message) -> None:
    path = tmp_path / "bad.gpx"
    path.write_text(
        "<gpx><trk><trkseg>"
        '<trkpt lat="59" lon="10"/>'
        f"{trkpt}"
        "</trkseg></trk></gpx>",
        encoding="utf-8",
    )

    with pytest.raises(ParseError, match=message):
        load_track(path)
