"""GPX route animation package."""

from .main import main
from .pipeline import ConversionResult, build_artifacts, convert_track
from .emitter import AnimationSpec, PathArtifact, RouteMetadata
from .errors import ArtifactWriteError, DegenerateGeometryError, ParseError

__all__ = [
    "main",
    "ConversionResult",
    "build_artifacts",
    "convert_track",
    "AnimationSpec",
    "PathArtifact",
    "RouteMetadata",
    "ArtifactWriteError",
    "DegenerateGeometryError",
    "ParseError",
]
