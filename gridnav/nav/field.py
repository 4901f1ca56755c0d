"""Occupancy field: blocked/free cells plus the cell <-> world mapping."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterable

from gridnav.nav.errors import FieldError

Coordinate = tuple[int, int]
WorldPosition = tuple[float, float]

DEFAULT_BLOCKED_TILES = "#"


@dataclass(frozen=True)
class OccupancyField:
    """Immutable grid of cells where `cells[i]` is True when cell i is blocked.

    Cells are stored row-major starting from the bottom row, so index
    `y * width + x` addresses cell (x, y). World positions grow with x and y
    from `origin`, the bottom-left corner of the grid.
    """

    width: int
    height: int
    cells: tuple[bool, ...]
    origin: WorldPosition = (0.0, 0.0)
    resolution: float = 1.0

    def __post_init__(self) -> None:
        if self.width < 0 or self.height < 0:
            raise FieldError(
                f"field size must be non-negative, got {self.width}x{self.height}"
            )
        if not self.resolution > 0:
            raise FieldError(f"resolution must be positive, got {self.resolution}")
        if len(self.cells) != self.width * self.height:
            raise FieldError(
                f"expected {self.width * self.height} cells, got {len(self.cells)}"
            )

    @classmethod
    def from_blocked(
        cls,
        width: int,
        height: int,
        blocked: Iterable[Coordinate] = (),
        *,
        origin: WorldPosition = (0.0, 0.0),
        resolution: float = 1.0,
    ) -> "OccupancyField":
        cells = [False] * (max(width, 0) * max(height, 0))
        for x, y in blocked:
            if not (0 <= x < width and 0 <= y < height):
                raise FieldError(f"blocked cell {(x, y)} is outside the field")
            cells[y * width + x] = True
        return cls(
            width=width,
            height=height,
            cells=tuple(cells),
            origin=origin,
            resolution=resolution,
        )

    @classmethod
    def from_lines(
        cls,
        lines: list[str],
        *,
        blocked_tiles: str = DEFAULT_BLOCKED_TILES,
        origin: WorldPosition = (0.0, 0.0),
        resolution: float = 1.0,
    ) -> "OccupancyField":
        """Parse an ASCII map. The first line is the top row (y = height - 1)."""
        rows = [line.rstrip("\r\n") for line in lines]
        while rows and not rows[-1]:
            rows.pop()
        height = len(rows)
        width = len(rows[0]) if rows else 0
        blocked: list[Coordinate] = []
        for row_index, row in enumerate(rows):
            if len(row) != width:
                raise FieldError(
                    f"map row {row_index} has width {len(row)}, expected {width}"
                )
            y = height - 1 - row_index
            for x, tile in enumerate(row):
                if tile in blocked_tiles:
                    blocked.append((x, y))
        return cls.from_blocked(
            width, height, blocked, origin=origin, resolution=resolution
        )

    @staticmethod
    def dimensions_for_extents(
        extents: tuple[float, float], resolution: float
    ) -> tuple[int, int]:
        """Cell counts that fit inside an area with the given half-sizes."""
        if not resolution > 0:
            raise FieldError(f"resolution must be positive, got {resolution}")
        return (
            math.floor(extents[0] * 2 / resolution),
            math.floor(extents[1] * 2 / resolution),
        )

    @property
    def grid_origin(self) -> WorldPosition:
        return self.origin

    def contains(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def is_blocked(self, x: int, y: int) -> bool:
        return self.cells[self.coordinate_to_index(x, y)]

    def is_free(self, x: int, y: int) -> bool:
        return not self.cells[self.coordinate_to_index(x, y)]

    def coordinate_to_index(self, x: int, y: int) -> int:
        return y * self.width + x

    def index_to_coordinate(self, index: int) -> Coordinate:
        return index % self.width, index // self.width

    def cell_center(self, x: int, y: int) -> WorldPosition:
        half = self.resolution / 2
        return (
            self.origin[0] + self.resolution * x + half,
            self.origin[1] + self.resolution * y + half,
        )

    def cell_to_world(self, coordinate: Coordinate) -> WorldPosition:
        """World center of a cell, whether or not the cell lies inside the field."""
        return self.cell_center(*coordinate)

    def world_to_cell(self, position: WorldPosition) -> Coordinate:
        if not all(math.isfinite(value) for value in position):
            raise FieldError(f"world position {position} is not finite")
        return (
            math.floor((position[0] - self.origin[0]) / self.resolution),
            math.floor((position[1] - self.origin[1]) / self.resolution),
        )

    def free_coordinates(self) -> list[Coordinate]:
        return self._coordinates(blocked=False)

    def blocked_coordinates(self) -> list[Coordinate]:
        return self._coordinates(blocked=True)

    def _coordinates(self, *, blocked: bool) -> list[Coordinate]:
        return [
            (x, y)
            for y in range(self.height)
            for x in range(self.width)
            if self.cells[y * self.width + x] == blocked
        ]
