"""Occupancy-grid graph construction and A* search."""

from gridnav.nav.contracts import (
    DEFAULT_SEARCH_CONFIG,
    EdgeCost,
    Heuristic,
    MapDescriptor,
    PathResult,
    PathStatus,
    SearchConfig,
)
from gridnav.nav.errors import (
    EmptyFrontierError,
    FieldError,
    GridNavError,
    InvalidGoalError,
    InvalidStartError,
    MapLoadError,
    StaleGraphError,
)
from gridnav.nav.field import Coordinate, OccupancyField, WorldPosition
from gridnav.nav.frontier import PriorityFrontier
from gridnav.nav.graph import Node, NodeGraph
from gridnav.nav.heuristics import is_admissible
from gridnav.nav.map_loader import load_field
from gridnav.nav.pathfinding import PathFinder

__all__ = [
    "Coordinate",
    "DEFAULT_SEARCH_CONFIG",
    "EdgeCost",
    "EmptyFrontierError",
    "FieldError",
    "GridNavError",
    "Heuristic",
    "InvalidGoalError",
    "InvalidStartError",
    "MapDescriptor",
    "MapLoadError",
    "Node",
    "NodeGraph",
    "OccupancyField",
    "PathFinder",
    "PathResult",
    "PathStatus",
    "PriorityFrontier",
    "SearchConfig",
    "StaleGraphError",
    "WorldPosition",
    "is_admissible",
    "load_field",
]
