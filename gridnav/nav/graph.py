"""Node graph over the free cells of an occupancy field."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from types import MappingProxyType
from typing import TYPE_CHECKING, Mapping

from gridnav.nav.errors import GridNavError
from gridnav.nav.field import Coordinate, OccupancyField, WorldPosition

if TYPE_CHECKING:
    from gridnav.nav.contracts import SearchConfig
    from gridnav.nav.pathfinding import PathFinder

logger = logging.getLogger(__name__)

NEIGHBOR_OFFSETS: tuple[Coordinate, ...] = tuple(
    (dx, dy) for dx in (-1, 0, 1) for dy in (-1, 0, 1) if (dx, dy) != (0, 0)
)


@dataclass(frozen=True)
class Node:
    coordinate: Coordinate
    world_position: WorldPosition
    neighbors: tuple[Coordinate, ...]
    generation: int


class NodeGraph:
    """Arena of nodes keyed by cell coordinate.

    Nodes reference their neighbors by coordinate, so the graph holds no
    object cycles. Construction is explicit: call `build()` or
    `ensure_built()` before searching. Each build bumps `generation`, and
    nodes from an older generation must not be used with the new graph.
    """

    def __init__(self, field: OccupancyField | None = None) -> None:
        self._field = field
        self._nodes: dict[Coordinate, Node] = {}
        self._generation = 0

    @property
    def field(self) -> OccupancyField | None:
        return self._field

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_built(self) -> bool:
        return self._generation > 0

    @property
    def nodes(self) -> Mapping[Coordinate, Node]:
        return MappingProxyType(self._nodes)

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, coordinate: object) -> bool:
        return coordinate in self._nodes

    def build(self, field: OccupancyField | None = None) -> "NodeGraph":
        if field is not None:
            self._field = field
        if self._field is None:
            raise GridNavError("no occupancy field to build the node graph from")

        started = time.perf_counter()
        source = self._field
        generation = self._generation + 1
        nodes: dict[Coordinate, Node] = {}
        for x, y in source.free_coordinates():
            neighbors = tuple(
                (x + dx, y + dy)
                for dx, dy in NEIGHBOR_OFFSETS
                if source.contains(x + dx, y + dy) and source.is_free(x + dx, y + dy)
            )
            nodes[(x, y)] = Node(
                coordinate=(x, y),
                world_position=source.cell_center(x, y),
                neighbors=neighbors,
                generation=generation,
            )

        # Readers only ever observe a complete node map.
        self._nodes = nodes
        self._generation = generation
        logger.info(
            "Built node graph with %d nodes from %dx%d field in %.1f ms",
            len(nodes),
            source.width,
            source.height,
            (time.perf_counter() - started) * 1000,
        )
        return self

    def ensure_built(self) -> "NodeGraph":
        if not self.is_built:
            self.build()
        return self

    def rebuild(self, field: OccupancyField | None = None) -> "NodeGraph":
        logger.debug("Rebuilding node graph (generation %d)", self._generation)
        return self.build(field)

    def node_at(self, coordinate: Coordinate) -> Node | None:
        return self._nodes.get(coordinate)

    def all_free_coordinates(self) -> list[Coordinate]:
        # Nodes are inserted row-major, bottom row first.
        return list(self._nodes)

    def neighbors_of(self, coordinate: Coordinate) -> list[Node]:
        node = self._nodes.get(coordinate)
        if node is None:
            return []
        return [self._nodes[neighbor] for neighbor in node.neighbors]

    def edge_count(self) -> int:
        return sum(len(node.neighbors) for node in self._nodes.values()) // 2

    def create_path_finder(
        self, goal: Node | Coordinate, config: SearchConfig | None = None
    ) -> PathFinder:
        from gridnav.nav.pathfinding import PathFinder

        self.ensure_built()
        return PathFinder(self, goal, config=config)
