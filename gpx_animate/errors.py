"""Central error types used across the application."""

from __future__ import annotations


class GpxAnimateError(RuntimeError):
    """Base error for track conversion failures."""


class ParseError(GpxAnimateError):
    """Raised when a GPX file is unreadable, malformed, or has no usable points."""


class DegenerateGeometryError(GpxAnimateError):
    """Raised when a track has no points to project."""


class ArtifactWriteError(GpxAnimateError):
    """Raised when the SVG or metadata artifact cannot be written."""


__all__ = [
    "GpxAnimateError",
    "ParseError",
    "DegenerateGeometryError",
    "ArtifactWriteError",
]
