#!/usr/bin/env python3
from typing import Dict, Type

from gridpath.core.astar import AStarAlgo
from gridpath.core.bfs import BFSAlgo
from gridpath.core.dijkstra import DijkstraAlgo
from gridpath.core.errors import UnknownAlgorithm
from gridpath.core.search import SearchAlgo
from gridpath.core.types import Grid, Position, SearchResult

ALGORITHMS: Dict[str, Type[SearchAlgo]] = {
    "bfs": BFSAlgo,
    "dijkstra": DijkstraAlgo,
    "astar": AStarAlgo,
}

DEFAULT_ALGORITHM = "astar"


def make_algo(tag: str) -> SearchAlgo:
    try:
        return ALGORITHMS[tag]()
    except (KeyError, TypeError):
        raise UnknownAlgorithm(f"Unknown algorithm {tag!r}; expected one of {', '.join(ALGORITHMS)}") from None


def run_search(tag: str, grid: Grid, start: Position, goal: Position) -> SearchResult:
    algo = make_algo(tag)
    algo.init(grid, start, goal)
    return algo.run()
