"""Application entry for planning a route across an occupancy field."""

from __future__ import annotations

import logging

from gridnav.nav.contracts import PathResult, SearchConfig
from gridnav.nav.field import Coordinate, OccupancyField, WorldPosition
from gridnav.nav.graph import NodeGraph

logger = logging.getLogger(__name__)


def plan_route(
    field: OccupancyField,
    start: Coordinate,
    goal: Coordinate,
    *,
    config: SearchConfig | None = None,
) -> PathResult:
    graph = NodeGraph(field).ensure_built()
    finder = graph.create_path_finder(goal, config=config)
    result = finder.find_path(start)
    logger.info(
        "Route %s -> %s: %s (%d expansions)",
        start,
        goal,
        result.status.value,
        result.expansions,
    )
    return result


def plan_route_between_positions(
    field: OccupancyField,
    start: WorldPosition,
    goal: WorldPosition,
    *,
    config: SearchConfig | None = None,
) -> PathResult:
    return plan_route(
        field,
        field.world_to_cell(start),
        field.world_to_cell(goal),
        config=config,
    )
