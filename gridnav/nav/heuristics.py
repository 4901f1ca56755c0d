"""Distance estimates and edge costs in cell-coordinate space."""

from __future__ import annotations

import math
from typing import Callable, Iterable

from gridnav.nav.contracts import EdgeCost, Heuristic
from gridnav.nav.field import Coordinate

DIAGONAL_COST = math.sqrt(2)

HeuristicFn = Callable[[Coordinate, Coordinate], float]


def octile(a: Coordinate, b: Coordinate) -> float:
    dx = abs(a[0] - b[0])
    dy = abs(a[1] - b[1])
    return max(dx, dy) + (DIAGONAL_COST - 1) * min(dx, dy)


def euclidean(a: Coordinate, b: Coordinate) -> float:
    return math.hypot(a[0] - b[0], a[1] - b[1])


def chebyshev(a: Coordinate, b: Coordinate) -> float:
    return float(max(abs(a[0] - b[0]), abs(a[1] - b[1])))


def squared_euclidean(a: Coordinate, b: Coordinate) -> float:
    dx = a[0] - b[0]
    dy = a[1] - b[1]
    return float(dx * dx + dy * dy)


HEURISTICS: dict[Heuristic, HeuristicFn] = {
    Heuristic.OCTILE: octile,
    Heuristic.EUCLIDEAN: euclidean,
    Heuristic.CHEBYSHEV: chebyshev,
    Heuristic.SQUARED_EUCLIDEAN: squared_euclidean,
}

# Heuristics that never overestimate the cheapest path under each cost model.
ADMISSIBLE: dict[EdgeCost, frozenset[Heuristic]] = {
    EdgeCost.EUCLIDEAN: frozenset(
        {Heuristic.OCTILE, Heuristic.EUCLIDEAN, Heuristic.CHEBYSHEV}
    ),
    EdgeCost.UNIFORM: frozenset({Heuristic.CHEBYSHEV}),
}


def is_admissible(heuristic: Heuristic, edge_cost: EdgeCost) -> bool:
    return heuristic in ADMISSIBLE[edge_cost]


def edge_cost(a: Coordinate, b: Coordinate, model: EdgeCost) -> float:
    if model == EdgeCost.UNIFORM:
        return 1.0
    if a[0] != b[0] and a[1] != b[1]:
        return DIAGONAL_COST
    return 1.0


def build_heuristic_table(
    coordinates: Iterable[Coordinate], goal: Coordinate, heuristic: Heuristic
) -> dict[Coordinate, float]:
    estimate = HEURISTICS[heuristic]
    return {coordinate: estimate(coordinate, goal) for coordinate in coordinates}
