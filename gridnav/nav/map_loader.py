"""Load occupancy fields from a JSON descriptor + ASCII map."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from pydantic import ValidationError

from gridnav.nav.contracts import MapDescriptor
from gridnav.nav.errors import FieldError, MapLoadError
from gridnav.nav.field import OccupancyField

logger = logging.getLogger(__name__)


def load_map_descriptor(path: Path) -> MapDescriptor:
    try:
        return MapDescriptor.model_validate(_load_json(path))
    except ValidationError as exc:
        raise MapLoadError(f"Invalid map descriptor {path}: {exc}") from exc


def load_field(path: Path) -> OccupancyField:
    """Read `path` and the ASCII map it names (relative to the descriptor)."""
    descriptor = load_map_descriptor(path)
    map_path = path.parent / descriptor.map_file
    lines = _read_lines(map_path)
    try:
        field = OccupancyField.from_lines(
            lines,
            blocked_tiles=descriptor.blocked_tiles,
            origin=descriptor.origin,
            resolution=descriptor.resolution,
        )
    except FieldError as exc:
        raise MapLoadError(f"Invalid map {map_path}: {exc}") from exc
    logger.info(
        "Loaded %dx%d field from %s (%d blocked cells)",
        field.width,
        field.height,
        map_path,
        len(field.blocked_coordinates()),
    )
    return field


def _load_json(path: Path) -> dict:
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise MapLoadError(f"Unreadable map descriptor {path}: {exc}") from exc
    try:
        return json.loads(text)
    except json.JSONDecodeError as exc:
        raise MapLoadError(f"Malformed map descriptor {path}: {exc}") from exc


def _read_lines(path: Path) -> list[str]:
    try:
        return path.read_text(encoding="utf-8").splitlines()
    except (OSError, UnicodeDecodeError) as exc:
        raise MapLoadError(f"Unreadable map file {path}: {exc}") from exc
