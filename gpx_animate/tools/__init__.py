"""Supplementary tooling built on the emitted route artifacts."""

from .preview_map import create_preview_map
from .tile_layers import TILE_LAYERS, TileLayerDescriptor, get_tile_layer

__all__ = [
    "create_preview_map",
    "TILE_LAYERS",
    "TileLayerDescriptor",
    "get_tile_layer",
]
