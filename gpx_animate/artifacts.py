"""Persist and reload the SVG and metadata artifacts."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import List, Tuple, Union

from .config import SVG_VIEWBOX_PADDING
from .emitter import PathArtifact, RouteMetadata, render_svg
from .errors import ArtifactWriteError, ParseError

PathLike = Union[str, Path]

_LOGGER = logging.getLogger(__name__)

METADATA_SUFFIX = ".json"


def metadata_path_for(svg_path: PathLike) -> Path:
    """Return the metadata path paired with a drawable artifact path."""

    path = Path(svg_path)
    if path.suffix.lower() == METADATA_SUFFIX:
        raise ValueError(f"Drawable artifact path must not end in {METADATA_SUFFIX}")
    return path.with_suffix(METADATA_SUFFIX)


def metadata_json(metadata: RouteMetadata) -> str:
    """Return the canonical JSON text for ``metadata``."""

    return json.dumps(metadata.to_dict(), indent=2) + "\n"


def write_artifacts(
    artifact: PathArtifact,
    metadata: RouteMetadata,
    svg_path: PathLike,
    *,
    padding: float = SVG_VIEWBOX_PADDING,
) -> Tuple[Path, Path]:
    """Write the SVG and its metadata next to each other.

    Both documents are first written to temporary files and only moved into
    place once both writes succeeded.

    Returns:
        ``(svg_path, metadata_path)``.

    Raises:
        ArtifactWriteError: If either file cannot be written.
    """

    svg_target = Path(svg_path)
    json_target = metadata_path_for(svg_target)
    documents = [
        (svg_target, render_svg(artifact, padding=padding)),
        (json_target, metadata_json(metadata)),
    ]

    staged: List[Tuple[Path, Path]] = []
    moved: List[Path] = []
    try:
        svg_target.parent.mkdir(parents=True, exist_ok=True)
        for target, text in documents:
            temp_path = target.with_name(target.name + ".tmp")
            staged.append((temp_path, target))
            with temp_path.open("w", encoding="utf-8", newline="\n") as handle:
                handle.write(text)
        for temp_path, target in staged:
            temp_path.replace(target)
            moved.append(target)
    except OSError as exc:
        # The pair is only valid together; drop whichever half made it.
        for temp_path, _ in staged:
            if temp_path.is_file():
                temp_path.unlink()
        for target in moved:
            target.unlink()
        raise ArtifactWriteError(
            f"Failed writing artifacts for {svg_target}: {exc}"
        ) from exc

    _LOGGER.info("SVG animation saved to %s", svg_target)
    _LOGGER.info("Route metadata saved to %s", json_target)
    return svg_target, json_target


def read_metadata(path: PathLike) -> RouteMetadata:
    """Load a metadata artifact written by :func:`write_artifacts`.

    Raises:
        ParseError: If the file is missing, not JSON, or lacks a field.
    """

    source = Path(path)
    try:
        with source.open("r", encoding="utf-8") as handle:
            payload = json.load(handle)
    except OSError as exc:
        raise ParseError(f"Unable to read metadata file {source}: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ParseError(f"Metadata file {source} is not valid JSON: {exc}") from exc
    try:
        return RouteMetadata.from_dict(payload)
    except (KeyError, TypeError, ValueError) as exc:
        raise ParseError(f"Metadata file {source} is incomplete: {exc}") from exc


__all__ = ["metadata_json", "metadata_path_for", "read_metadata", "write_artifacts"]
