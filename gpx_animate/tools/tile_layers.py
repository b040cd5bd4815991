"""Static registry of base map tile layers offered by the preview tool."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True, slots=True)
class TileLayerDescriptor:
    label: str
    url: str
    attribution: str
    max_zoom: int


_OSM_ATTRIBUTION = (
    '&copy; <a href="https://www.openstreetmap.org/copyright">OpenStreetMap</a>'
    " contributors"
)
_CARTO_ATTRIBUTION = '&copy; <a href="https://carto.com/attributions">CARTO</a>'

TILE_LAYERS: Dict[str, TileLayerDescriptor] = {
    "openTopo": TileLayerDescriptor(
        label="OpenTopoMap",
        url="https://{s}.tile.opentopomap.org/{z}/{x}/{y}.png",
        attribution='&copy; <a href="https://opentopomap.org">OpenTopoMap</a>',
        max_zoom=17,
    ),
    "thunderforestOutdoors": TileLayerDescriptor(
        label="Thunderforest Outdoors",
        url=(
            "https://tile.thunderforest.com/outdoors/{z}/{x}/{y}@2x.png"
            f"?apikey={os.getenv('THUNDERFOREST_API_KEY', '')}"
        ),
        attribution='&copy; <a href="https://thunderforest.com">Thunderforest</a>',
        max_zoom=22,
    ),
    "cycleMap": TileLayerDescriptor(
        label="OpenCycleMap",
        url="https://{s}.tile-cyclosm.openstreetmap.fr/cyclosm/{z}/{x}/{y}.png",
        attribution=_OSM_ATTRIBUTION,
        max_zoom=20,
    ),
    "hikingTrails": TileLayerDescriptor(
        label="Waymarked Trails Hiking",
        url="https://tile.waymarkedtrails.org/hiking/{z}/{x}/{y}.png",
        attribution=(
            '&copy; <a href="https://hiking.waymarkedtrails.org">Waymarked Trails</a>'
        ),
        max_zoom=18,
    ),
    "tracesTrack": TileLayerDescriptor(
        label="TracesTrack",
        url=(
            "https://tile.tracestrack.com/topo__/{z}/{x}/{y}.png"
            f"?key={os.getenv('TRACESTRACK_API_KEY', '')}"
        ),
        attribution=(
            '&copy; <a href="https://tracestrack.com">TracesTrack</a> contributors, '
            + _OSM_ATTRIBUTION
        ),
        max_zoom=18,
    ),
    "osmStandard": TileLayerDescriptor(
        label="OpenStreetMap Standard",
        url="https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png",
        attribution=_OSM_ATTRIBUTION,
        max_zoom=19,
    ),
    "esriWorldImagery": TileLayerDescriptor(
        label="Esri World Imagery",
        url=(
            "https://server.arcgisonline.com/ArcGIS/rest/services/World_Imagery/"
            "MapServer/tile/{z}/{y}/{x}"
        ),
        attribution="Tiles &copy; Esri",
        max_zoom=19,
    ),
    "cartoPositron": TileLayerDescriptor(
        label="CartoDB Positron",
        url="https://{s}.basemaps.cartocdn.com/light_all/{z}/{x}/{y}{r}.png",
        attribution=_CARTO_ATTRIBUTION,
        max_zoom=20,
    ),
    "cartoDarkMatter": TileLayerDescriptor(
        label="CartoDB Dark Matter",
        url="https://{s}.basemaps.cartocdn.com/dark_all/{z}/{x}/{y}{r}.png",
        attribution=_CARTO_ATTRIBUTION,
        max_zoom=20,
    ),
}


def get_tile_layer(key: str) -> TileLayerDescriptor:
    """Return the registered descriptor for ``key``."""

    try:
        return TILE_LAYERS[key]
    except KeyError as exc:
        raise ValueError(
            f"Unknown tile layer '{key}'; expected one of {sorted(TILE_LAYERS)}"
        ) from exc


__all__ = ["TILE_LAYERS", "TileLayerDescriptor", "get_tile_layer"]
