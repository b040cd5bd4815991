"""Command line entry point converting GPX tracks into animated SVG routes."""

from __future__ import annotations

import argparse
import logging
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import List, Optional, Sequence

from .config import (
    ANIMATION_DURATION_S,
    ANIMATION_EASING,
    MAX_WORKERS,
    OUTPUT_DIR,
    SIMPLIFY_THRESHOLD_DEG,
    SVG_VIEWBOX_PADDING,
)
from .emitter import EASING_CURVES
from .errors import GpxAnimateError
from .pipeline import ConversionResult, convert_track


def _setup_logging(level: str) -> None:
    if not logging.getLogger().hasHandlers():
        logging.basicConfig(
            level=getattr(logging, level),
            format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        )


def _output_path_for(gpx_path: Path, output_dir: Path) -> Path:
    return output_dir / f"{gpx_path.stem}.svg"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description=(
            "Convert GPX tracks into animated SVG routes with a JSON metadata"
            " file describing bounds, centre and distance."
        )
    )
    parser.add_argument("inputs", nargs="+", type=Path, help="GPX files to convert")
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path(OUTPUT_DIR),
        help=f"Directory for <name>.svg and <name>.json (default: {OUTPUT_DIR})",
    )
    parser.add_argument(
        "--duration",
        type=float,
        default=ANIMATION_DURATION_S,
        help="Seconds taken to draw the route (default: %(default)s)",
    )
    parser.add_argument(
        "--easing",
        choices=sorted(EASING_CURVES),
        default=ANIMATION_EASING,
        help="Optional easing curve for the drawing animation (default: linear)",
    )
    parser.add_argument(
        "--threshold",
        type=float,
        default=SIMPLIFY_THRESHOLD_DEG,
        help="Minimum spacing in degrees between kept points (default: %(default)s)",
    )
    parser.add_argument(
        "--stroke-width",
        type=float,
        help="Fixed stroke width; derived from the route area when omitted",
    )
    parser.add_argument(
        "--padding",
        type=float,
        default=SVG_VIEWBOX_PADDING,
        help="Extra viewBox units around the canvas (default: %(default)s)",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=MAX_WORKERS,
        help="Tracks converted in parallel (default: %(default)s)",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Python logging level",
    )
    return parser


def convert_many(
    inputs: Sequence[Path],
    output_dir: Path,
    *,
    workers: int = MAX_WORKERS,
    **options: object,
) -> List[Optional[ConversionResult]]:
    """Convert each GPX file independently, preserving input order.

    A failing track is logged and reported as ``None``; the remaining tracks
    are still converted.
    """

    def _convert(gpx_path: Path) -> Optional[ConversionResult]:
        try:
            return convert_track(
                gpx_path, _output_path_for(gpx_path, output_dir), **options
            )
        except (GpxAnimateError, ValueError) as exc:
            logging.error("Failed to convert '%s': %s", gpx_path, exc)
            return None

    if workers <= 1 or len(inputs) <= 1:
        return [_convert(path) for path in inputs]
    with ThreadPoolExecutor(max_workers=workers) as pool:
        return list(pool.map(_convert, inputs))


def main(argv: Optional[Sequence[str]] = None) -> int:
    """CLI entry point used via ``python -m gpx_animate``."""

    parser = _build_parser()
    args = parser.parse_args(argv)
    _setup_logging(args.log_level)

    logging.info("Converting %d GPX file(s) into %s", len(args.inputs), args.output_dir)
    results = convert_many(
        args.inputs,
        args.output_dir,
        workers=args.workers,
        duration_s=args.duration,
        easing=args.easing,
        threshold=args.threshold,
        stroke_width=args.stroke_width,
        padding=args.padding,
    )
    failures = sum(1 for result in results if result is None)
    if failures:
        logging.error("%d of %d track(s) failed", failures, len(results))
        return 1
    logging.info("All %d track(s) converted", len(results))
    return 0
