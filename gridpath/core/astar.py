#!/usr/bin/env python3
"""
A*: Dijkstra's relaxation with the queue keyed by (f, h), f = g + h.

Heuristic:
- Manhattan distance to the goal for 4-connected grids.
- The cheapest enterable cell costs 1 (empty/start/goal), so h never
  overestimates the remaining cost: admissible and consistent. Results
  therefore match Dijkstra's total cost while expanding no more nodes.
"""

from dataclasses import dataclass
from typing import Tuple

from gridpath.core.dijkstra import DijkstraAlgo
from gridpath.core.types import CELL_COSTS, Position, manhattan, is_passable


# Smallest per-step cost; scales h so it stays admissible if the cost table changes.
MIN_STEP_COST = min(cost for t, cost in CELL_COSTS.items() if is_passable(t))


@dataclass
class AStarAlgo(DijkstraAlgo):
    name: str = "A*"

    def _h(self, c: Position) -> float:
        return manhattan(c, self.goal) * MIN_STEP_COST

    def _priority(self, c: Position) -> Tuple[float, float]:
        # equal f: prefer the cell nearer the goal
        h = self._h(c)
        return self.g[c] + h, h
