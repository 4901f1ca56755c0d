"""Module entry point for `python -m gridnav`."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from gridnav.app import plan_route, plan_route_between_positions
from gridnav.nav.contracts import EdgeCost, Heuristic, PathResult, SearchConfig
from gridnav.nav.errors import GridNavError
from gridnav.nav.map_loader import load_field


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(
        description="Find a path across an occupancy map with A*."
    )
    parser.add_argument("map", type=Path, help="Map descriptor JSON file.")
    parser.add_argument(
        "--start",
        nargs=2,
        type=float,
        required=True,
        metavar=("X", "Y"),
        help="Start cell (or world position with --world).",
    )
    parser.add_argument(
        "--goal",
        nargs=2,
        type=float,
        required=True,
        metavar=("X", "Y"),
        help="Goal cell (or world position with --world).",
    )
    parser.add_argument(
        "--world",
        action="store_true",
        help="Interpret --start and --goal as world positions.",
    )
    parser.add_argument(
        "--heuristic",
        choices=[item.value for item in Heuristic],
        default=Heuristic.OCTILE.value,
        help="Distance estimate used to guide the search.",
    )
    parser.add_argument(
        "--edge-cost",
        choices=[item.value for item in EdgeCost],
        default=EdgeCost.EUCLIDEAN.value,
        help="Cost of moving between neighboring cells.",
    )
    parser.add_argument(
        "--max-expansions",
        type=int,
        default=None,
        help="Give up after expanding this many nodes.",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity.",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)
    console = Console()

    try:
        config = SearchConfig(
            heuristic=Heuristic(args.heuristic),
            edge_cost=EdgeCost(args.edge_cost),
            max_expansions=args.max_expansions,
        )
        field = load_field(args.map)
        if args.world:
            result = plan_route_between_positions(
                field, tuple(args.start), tuple(args.goal), config=config
            )
        else:
            result = plan_route(
                field, _as_cell(args.start), _as_cell(args.goal), config=config
            )
    except (GridNavError, ValueError) as exc:
        raise SystemExit(f"error: {exc}") from exc

    if not result.found:
        raise SystemExit(f"No path found ({result.status.value}).")
    console.print(render_path(result))


def render_path(result: PathResult) -> Table:
    table = Table(
        title=f"{len(result)} waypoints, cost {result.cost:.3f}",
        caption=f"{result.expansions} nodes expanded",
    )
    table.add_column("#", justify="right")
    table.add_column("Cell")
    table.add_column("World X", justify="right")
    table.add_column("World Y", justify="right")
    for index, (cell, position) in enumerate(zip(result.cells, result.waypoints)):
        table.add_row(
            str(index),
            f"{cell[0]}, {cell[1]}",
            f"{position[0]:.3f}",
            f"{position[1]:.3f}",
        )
    return table


def _as_cell(values: list[float]) -> tuple[int, int]:
    x, y = values
    if not (x.is_integer() and y.is_integer()):
        raise SystemExit("error: cell coordinates must be integers (use --world)")
    return int(x), int(y)


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True)],
        force=True,
    )


if __name__ == "__main__":
    main()
