"""Search configuration and result contracts."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, Iterator

from pydantic import BaseModel, ConfigDict, Field, field_validator

from gridnav.nav.field import Coordinate, WorldPosition


class EdgeCost(str, Enum):
    EUCLIDEAN = "euclidean"
    UNIFORM = "uniform"


class Heuristic(str, Enum):
    OCTILE = "octile"
    EUCLIDEAN = "euclidean"
    CHEBYSHEV = "chebyshev"
    SQUARED_EUCLIDEAN = "squared_euclidean"


class PathStatus(str, Enum):
    FOUND = "found"
    NO_PATH = "no_path"
    EMPTY_GRAPH = "empty_graph"
    BUDGET_EXHAUSTED = "budget_exhausted"


class SearchConfig(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    heuristic: Heuristic = Heuristic.OCTILE
    edge_cost: EdgeCost = EdgeCost.EUCLIDEAN
    max_expansions: int | None = Field(default=None, ge=1)


DEFAULT_SEARCH_CONFIG = SearchConfig()


class MapDescriptor(BaseModel):
    """JSON descriptor pointing at an ASCII occupancy map."""

    model_config = ConfigDict(extra="forbid")

    map_file: str
    origin: tuple[float, float] = (0.0, 0.0)
    resolution: float = Field(default=1.0, gt=0)
    blocked_tiles: str = "#"

    @field_validator("blocked_tiles")
    @classmethod
    def validate_blocked_tiles(cls, value: str) -> str:
        if not value:
            raise ValueError("blocked_tiles must name at least one tile")
        return value


@dataclass(frozen=True)
class PathResult:
    found: bool
    waypoints: tuple[WorldPosition, ...]
    cells: tuple[Coordinate, ...]
    status: PathStatus
    cost: float = 0.0
    expansions: int = 0

    @classmethod
    def not_found(cls, status: PathStatus, *, expansions: int = 0) -> "PathResult":
        return cls(
            found=False,
            waypoints=(),
            cells=(),
            status=status,
            cost=float("inf"),
            expansions=expansions,
        )

    def __iter__(self) -> Iterator[Any]:
        """Allow `found, waypoints = finder.find_path(start)`."""
        return iter((self.found, self.waypoints))

    def __len__(self) -> int:
        return len(self.waypoints)
