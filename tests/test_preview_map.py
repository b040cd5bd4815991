"""Tests for the folium preview built from emitted artifacts."""

from __future__ import annotations

from pathlib import Path

import folium
import pytest

from gpx_animate.errors import ParseError
from gpx_animate.pipeline import convert_track
from gpx_animate.tools.preview_map import create_preview_map, main
from gpx_animate.tools.tile_layers import TILE_LAYERS, get_tile_layer


@pytest.fixture
def route_svg(tmp_path: Path, write_gpx, loop_track) -> Path:
    return convert_track(write_gpx(loop_track), tmp_path / "route.svg").svg_path


def test_create_preview_map_overlays_svg(route_svg: Path, tmp_path: Path) -> None:
    output_path = tmp_path / "maps" / "route.html"

    map_object = create_preview_map(
        route_svg, tile_layer="cartoPositron", output_html_path=output_path
    )

    assert isinstance(map_object, folium.Map)
    assert output_path.exists(), "Expected HTML output to be written"
    html = output_path.read_text(encoding="utf-8")
    assert "data:image/svg+xml;base64," in html
    assert "basemaps.cartocdn.com" in html
    assert "Total distance" in html


def test_create_preview_map_requires_metadata(route_svg: Path) -> None:
    route_svg.with_suffix(".json").unlink()

    with pytest.raises(ParseError):
        create_preview_map(route_svg)


def test_unknown_tile_layer_is_rejected(route_svg: Path) -> None:
    with pytest.raises(ValueError, match="Unknown tile layer"):
        create_preview_map(route_svg, tile_layer="nope")


def test_tile_layer_registry_is_complete() -> None:
    for key, descriptor in TILE_LAYERS.items():
        assert get_tile_layer(key) is descriptor
        assert descriptor.url.startswith("https://")
        assert descriptor.max_zoom > 0


def test_preview_cli_writes_html_next_to_svg(route_svg: Path) -> None:
    assert main([str(route_svg)]) == 0
    assert route_svg.with_suffix(".html").exists()
