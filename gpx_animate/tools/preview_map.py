"""Preview an emitted route on an interactive base map.

The preview only consumes the two emitted artifacts: the SVG supplies the
shape and the metadata JSON supplies bounds, centre and distance. Tiles are
fetched and drawn by the browser.

Usage:

    python -m gpx_animate.tools.preview_map data/route.svg \
        --tile-layer cartoPositron --output maps/route.html
"""

from __future__ import annotations

import argparse
import base64
import logging
from pathlib import Path
from typing import Optional, Sequence, Union

import folium  # Using folium to build an interactive Leaflet map.
from folium.raster_layers import ImageOverlay

from ..artifacts import metadata_path_for, read_metadata
from ..config import PREVIEW_TILE_LAYER
from ..errors import GpxAnimateError
from .tile_layers import TILE_LAYERS, get_tile_layer

PathLike = Union[str, Path]

LOGGER = logging.getLogger(__name__)


def _svg_data_url(svg_path: Path) -> str:
    with svg_path.open("rb") as handle:
        encoded = base64.b64encode(handle.read()).decode("ascii")
    return f"data:image/svg+xml;base64,{encoded}"


def create_preview_map(
    svg_path: PathLike,
    *,
    tile_layer: str = PREVIEW_TILE_LAYER,
    output_html_path: Optional[PathLike] = None,
) -> folium.Map:
    """Create a map with the animated SVG stretched over the route bounds.

    Args:
        svg_path: Drawable artifact written by the pipeline; the metadata
            file is located by swapping its suffix for ``.json``.
        tile_layer: Key of :data:`TILE_LAYERS` used as the base map.
        output_html_path: Optional path to persist the map as an HTML file.

    Returns:
        A :class:`folium.Map` instance containing the overlay.

    Raises:
        ParseError: If the metadata artifact is missing or invalid.
        ValueError: If ``tile_layer`` is not registered.
    """

    svg_file = Path(svg_path)
    metadata = read_metadata(metadata_path_for(svg_file))
    descriptor = get_tile_layer(tile_layer)
    bounds = [
        [metadata.min_lat, metadata.min_lon],
        [metadata.max_lat, metadata.max_lon],
    ]

    folium_map = folium.Map(
        location=[metadata.center.lat, metadata.center.lon],
        tiles=None,
        control_scale=True,
    )
    folium.TileLayer(
        tiles=descriptor.url,
        attr=descriptor.attribution,
        name=descriptor.label,
        max_zoom=descriptor.max_zoom,
    ).add_to(folium_map)
    ImageOverlay(
        image=_svg_data_url(svg_file),
        bounds=bounds,
        name="Route",
    ).add_to(folium_map)
    folium.Marker(
        location=[metadata.center.lat, metadata.center.lon],
        tooltip=f"Total distance: {metadata.total_distance:.2f} km",
    ).add_to(folium_map)
    folium_map.fit_bounds(bounds)

    if output_html_path is not None:
        output_path = Path(output_html_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        folium_map.save(str(output_path))
        LOGGER.info("Preview map written to %s", output_path)

    return folium_map


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render an emitted route SVG on an interactive base map."
    )
    parser.add_argument("svg", type=Path, help="Route SVG written by gpx_animate")
    parser.add_argument(
        "--tile-layer",
        default=PREVIEW_TILE_LAYER,
        choices=sorted(TILE_LAYERS),
        help="Base map tile layer (default: %(default)s)",
    )
    parser.add_argument(
        "--output",
        type=Path,
        help="Output HTML path; defaults to <svg name>.html beside the SVG",
    )
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point used via ``python -m gpx_animate.tools.preview_map``."""

    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
    )

    output_path = args.output or args.svg.with_suffix(".html")
    try:
        create_preview_map(
            args.svg,
            tile_layer=args.tile_layer,
            output_html_path=output_path,
        )
    except (GpxAnimateError, OSError) as exc:
        logging.error("Failed to build preview map: %s", exc)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
