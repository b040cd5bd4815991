"""Tests for the batch conversion CLI."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from gpx_animate.main import convert_many, main


def test_main_converts_every_input(tmp_path: Path, write_gpx, loop_track, north_track) -> None:
    first = write_gpx(loop_track, name="loop.gpx")
    second = write_gpx(north_track, name="north.gpx")
    out_dir = tmp_path / "out"

    exit_code = main(
        [
            str(first),
            str(second),
            "--output-dir",
            str(out_dir),
            "--duration",
            "5",
            "--easing",
            "ease-in-out",
            "--workers",
            "2",
        ]
    )

    assert exit_code == 0
    for stem in ("loop", "north"):
        svg_text = (out_dir / f"{stem}.svg").read_text(encoding="utf-8")
        assert 'calcMode="spline"' in svg_text
        assert 'dur="5s"' in svg_text
        meta = json.loads((out_dir / f"{stem}.json").read_text(encoding="utf-8"))
        assert "totalDistance" in meta


def test_main_reports_failures_and_continues(tmp_path: Path, write_gpx, loop_track) -> None:
    good = write_gpx(loop_track, name="good.gpx")
    missing = tmp_path / "missing.gpx"
    out_dir = tmp_path / "out"

    exit_code = main([str(missing), str(good), "--output-dir", str(out_dir)])

    assert exit_code == 1
    assert (out_dir / "good.svg").exists()
    assert not (out_dir / "missing.svg").exists()


def test_convert_many_preserves_input_order(tmp_path: Path, write_gpx, loop_track, north_track) -> None:
    paths = [
        write_gpx(north_track, name="a.gpx"),
        write_gpx(loop_track, name="b.gpx"),
        tmp_path / "c.gpx",
    ]

    results = convert_many(paths, tmp_path / "out", workers=3)

    assert [r.source.name if r else None for r in results] == ["a.gpx", "b.gpx", None]


def test_main_rejects_unknown_easing(write_gpx, loop_track) -> None:
    with pytest.raises(SystemExit):
        main([str(write_gpx(loop_track)), "--easing", "wobble"])
