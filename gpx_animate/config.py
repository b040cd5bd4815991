"""Central configuration for the GPX route animation tool.

All values are constants imported by the rest of the package. Adjust as needed
for your environment. Every tunable can be overridden through an environment
variable (optionally via a local `.env`).
"""

from __future__ import annotations

import importlib
import os


def _env_float(key: str, default: float) -> float:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return float(value)
    except ValueError:
        return default


def _env_int(key: str, default: int) -> int:
    value = os.getenv(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def _env_bool(key: str, default: bool) -> bool:
    value = os.getenv(key)
    if value is None:
        return default
    normalized = value.strip().lower()
    if normalized in {"1", "true", "yes", "on"}:
        return True
    if normalized in {"0", "false", "no", "off"}:
        return False
    return default


# Load .env variables when python-dotenv is available.
_load_dotenv = None
try:
    _dotenv_mod = importlib.import_module("dotenv")
    _load_dotenv = getattr(_dotenv_mod, "load_dotenv", None)
except ImportError:
    _load_dotenv = None

if callable(_load_dotenv):
    # Load .env from the current directory or any parent folder.
    _load_dotenv()


# ---------------------------------------------------------------------------
# Input/Output
# ---------------------------------------------------------------------------
# Directory (absolute or relative) receiving the .svg/.json artifacts.
OUTPUT_DIR = os.getenv("GPX_ANIMATE_OUTPUT_DIR", "data")


# ---------------------------------------------------------------------------
# Simplification
# ---------------------------------------------------------------------------
# Minimum distance (degrees, measured in raw lon/lat space) between two kept
# track points. Points closer than this to the previously kept point are
# dropped.
SIMPLIFY_THRESHOLD_DEG = _env_float("SIMPLIFY_THRESHOLD_DEG", 0.0001)

# Always keep the final recorded point so the drawn route ends where the
# recording ends.
SIMPLIFY_KEEP_ENDPOINT = _env_bool("SIMPLIFY_KEEP_ENDPOINT", True)


# ---------------------------------------------------------------------------
# Projection / canvas
# ---------------------------------------------------------------------------
# Canvas width used for landscape routes (pixels / drawing units).
CANVAS_BASE_WIDTH = _env_int("CANVAS_BASE_WIDTH", 3840)

# Canvas height used for portrait (or square) routes.
CANVAS_PORTRAIT_HEIGHT = _env_int("CANVAS_PORTRAIT_HEIGHT", 800)

# Equirectangular approximation used for the real-world aspect ratio.
KM_PER_DEGREE_LAT = _env_float("KM_PER_DEGREE_LAT", 111.0)

# Extent (degrees) substituted for an axis with no spread, e.g. a track that
# runs due north or a single repeated point.
MIN_EXTENT_DEG = _env_float("MIN_EXTENT_DEG", 1e-6)

# Latitudes are clamped to the Web Mercator limit before projecting.
MERCATOR_MAX_LAT = 85.05112878


# ---------------------------------------------------------------------------
# Distance
# ---------------------------------------------------------------------------
EARTH_RADIUS_KM = 6371.0


# ---------------------------------------------------------------------------
# Animation / styling
# ---------------------------------------------------------------------------
# Seconds taken to draw the full route.
ANIMATION_DURATION_S = _env_float("ANIMATION_DURATION_S", 60.0)

# Optional easing curve name ("ease-in-out"); empty means linear.
ANIMATION_EASING = os.getenv("ANIMATION_EASING", "") or None

STROKE_COLOR = os.getenv("STROKE_COLOR", "red")

# Stroke width is derived from the route's bounding area and clamped to this
# range: width = AREA_FACTOR / sqrt(area_km2).
STROKE_WIDTH_MIN = _env_float("STROKE_WIDTH_MIN", 0.1)
STROKE_WIDTH_MAX = _env_float("STROKE_WIDTH_MAX", 5.0)
STROKE_WIDTH_AREA_FACTOR = _env_float("STROKE_WIDTH_AREA_FACTOR", 100.0)

# Extra drawing units added around the canvas in the SVG viewBox. Zero keeps
# the viewBox identical to the canvas.
SVG_VIEWBOX_PADDING = _env_float("SVG_VIEWBOX_PADDING", 0.0)


# ---------------------------------------------------------------------------
# Performance tuning
# ---------------------------------------------------------------------------
# Tracks converted in parallel by the batch CLI.
MAX_WORKERS = _env_int("GPX_ANIMATE_MAX_WORKERS", 4)


# ---------------------------------------------------------------------------
# Preview map
# ---------------------------------------------------------------------------
# Key into gpx_animate.tools.tile_layers.TILE_LAYERS.
PREVIEW_TILE_LAYER = os.getenv("PREVIEW_TILE_LAYER", "openTopo")
