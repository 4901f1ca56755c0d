"""A* search over a node graph toward a fixed goal."""

from __future__ import annotations

import logging
import math
from types import MappingProxyType
from typing import Mapping

from gridnav.nav.contracts import (
    DEFAULT_SEARCH_CONFIG,
    PathResult,
    PathStatus,
    SearchConfig,
)
from gridnav.nav.errors import (
    GridNavError,
    InvalidGoalError,
    InvalidStartError,
    StaleGraphError,
)
from gridnav.nav.field import Coordinate
from gridnav.nav.frontier import PriorityFrontier
from gridnav.nav.graph import Node, NodeGraph
from gridnav.nav.heuristics import build_heuristic_table, edge_cost, is_admissible

logger = logging.getLogger(__name__)


class PathFinder:
    """Finds paths from any start node to one goal node.

    The heuristic table is computed once, at construction, for every node in
    the graph. A PathFinder is tied to the graph generation it was created
    against; searching after the graph is rebuilt raises `StaleGraphError`.
    Searches keep all scratch state local, so one instance can serve
    concurrent callers.
    """

    def __init__(
        self,
        graph: NodeGraph,
        goal: Node | Coordinate,
        *,
        config: SearchConfig | None = None,
    ) -> None:
        if not graph.is_built:
            raise GridNavError("node graph has not been built; call build() first")
        self._graph = graph
        self._config = config or DEFAULT_SEARCH_CONFIG
        self._generation = graph.generation
        self._goal = self._resolve_goal(goal)
        self._h_scores = build_heuristic_table(
            graph.nodes, self._goal, self._config.heuristic
        )
        if not is_admissible(self._config.heuristic, self._config.edge_cost):
            logger.warning(
                "Heuristic %s is not admissible with %s edge costs; "
                "paths are best-first approximations and may not be shortest",
                self._config.heuristic.value,
                self._config.edge_cost.value,
            )

    @property
    def graph(self) -> NodeGraph:
        return self._graph

    @property
    def goal(self) -> Coordinate:
        return self._goal

    @property
    def goal_node(self) -> Node | None:
        return self._graph.node_at(self._goal)

    @property
    def config(self) -> SearchConfig:
        return self._config

    @property
    def heuristic_table(self) -> Mapping[Coordinate, float]:
        return MappingProxyType(self._h_scores)

    def find_path(self, start: Node | Coordinate) -> PathResult:
        self._check_generation()
        if len(self._graph) == 0:
            logger.debug("Search on an empty graph")
            return PathResult.not_found(PathStatus.EMPTY_GRAPH)
        start_coordinate = self._resolve_start(start)

        nodes = self._graph.nodes
        h_scores = self._h_scores
        cost_model = self._config.edge_cost
        max_expansions = self._config.max_expansions

        frontier: PriorityFrontier[Coordinate] = PriorityFrontier()
        g_scores: dict[Coordinate, float] = {start_coordinate: 0.0}
        f_scores: dict[Coordinate, float] = {start_coordinate: h_scores[start_coordinate]}
        came_from: dict[Coordinate, Coordinate] = {}
        frontier.push(start_coordinate, f_scores[start_coordinate])
        expansions = 0

        while frontier:
            current, score = frontier.pop_min()
            if score > f_scores[current]:
                # Superseded by a cheaper entry pushed later.
                continue
            if current == self._goal:
                result = self._reconstruct_path(
                    came_from, g_scores, start_coordinate, expansions
                )
                logger.debug(
                    "Path %s -> %s found: %d waypoints, cost %.3f, %d expansions",
                    start_coordinate,
                    self._goal,
                    len(result.waypoints),
                    result.cost,
                    expansions,
                )
                return result
            if max_expansions is not None and expansions >= max_expansions:
                logger.debug(
                    "Search %s -> %s stopped after %d expansions",
                    start_coordinate,
                    self._goal,
                    expansions,
                )
                return PathResult.not_found(
                    PathStatus.BUDGET_EXHAUSTED, expansions=expansions
                )
            expansions += 1

            current_g = g_scores[current]
            for neighbor in nodes[current].neighbors:
                tentative = current_g + edge_cost(current, neighbor, cost_model)
                if tentative < g_scores.get(neighbor, math.inf):
                    came_from[neighbor] = current
                    g_scores[neighbor] = tentative
                    f_scores[neighbor] = tentative + h_scores[neighbor]
                    frontier.push(neighbor, f_scores[neighbor])

        logger.debug(
            "No path %s -> %s after %d expansions",
            start_coordinate,
            self._goal,
            expansions,
        )
        return PathResult.not_found(PathStatus.NO_PATH, expansions=expansions)

    def _resolve_goal(self, goal: Node | Coordinate) -> Coordinate:
        coordinate = self._coordinate_of(goal)
        if coordinate not in self._graph and len(self._graph) > 0:
            raise InvalidGoalError(coordinate)
        return coordinate

    def _resolve_start(self, start: Node | Coordinate) -> Coordinate:
        coordinate = self._coordinate_of(start)
        if coordinate not in self._graph:
            raise InvalidStartError(coordinate)
        return coordinate

    def _coordinate_of(self, node: Node | Coordinate) -> Coordinate:
        if isinstance(node, Node):
            if node.generation != self._graph.generation:
                raise StaleGraphError(
                    f"node {node.coordinate} belongs to graph generation "
                    f"{node.generation}, current is {self._graph.generation}"
                )
            return node.coordinate
        return (node[0], node[1])

    def _check_generation(self) -> None:
        if self._graph.generation != self._generation:
            raise StaleGraphError(
                f"graph was rebuilt (generation {self._generation} -> "
                f"{self._graph.generation}); create a new PathFinder"
            )

    def _reconstruct_path(
        self,
        came_from: dict[Coordinate, Coordinate],
        g_scores: dict[Coordinate, float],
        start: Coordinate,
        expansions: int,
    ) -> PathResult:
        nodes = self._graph.nodes
        cells = [self._goal]
        current = self._goal
        while current != start:
            current = came_from[current]
            cells.append(current)
        cells.reverse()
        return PathResult(
            found=True,
            waypoints=tuple(nodes[cell].world_position for cell in cells),
            cells=tuple(cells),
            status=PathStatus.FOUND,
            cost=g_scores[self._goal],
            expansions=expansions,
        )
