#!/usr/bin/env python3
"""
Shared lifecycle for the grid search algorithms.

Every algorithm exposes the same API:
- init(grid, start, goal) - reset() - step() -> StepResult - run() -> SearchResult

step() performs ONE expansion so a front-end can animate it; run() steps to
completion. All bookkeeping (parents, costs, open/closed sets) is local to
the algorithm instance and cleared by reset(), never stored on the Grid.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from gridpath.core.types import Grid, Position, SearchResult, StepResult


@dataclass
class SearchAlgo:
    name: str = "search"

    grid: Optional[Grid] = None
    start: Optional[Position] = None
    goal: Optional[Position] = None
    open_set: set = field(default_factory=set)
    closed_set: set = field(default_factory=set)
    parent: Dict[Position, Position] = field(default_factory=dict)
    popped_count: int = 0
    done: bool = False
    no_path: bool = False
    total_cost: float = 0

    # -------------------- lifecycle --------------------

    def init(self, grid: Grid, start: Position, goal: Position) -> None:
        self.grid = grid
        self.start = Position(*start)
        self.goal = Position(*goal)
        self.reset()

    def reset(self) -> None:
        """Clear all state and seed the frontier with the start node."""
        if self.grid is None:
            return
        self.open_set.clear()
        self.closed_set.clear()
        self.parent.clear()
        self.popped_count = 0
        self.done = False
        self.no_path = False
        self.total_cost = 0
        self._seed()
        self.open_set.add(self.start)

    def _seed(self) -> None:
        raise NotImplementedError

    def _expand(self) -> StepResult:
        raise NotImplementedError

    def _frontier_empty(self) -> bool:
        raise NotImplementedError

    # -------------------- stepping --------------------

    def step(self) -> StepResult:
        if self.grid is None:
            return StepResult(status="idle", metrics={"algo": self.name})

        if self.done:
            path = self._reconstruct_path(self.goal)
            return StepResult(status="done", path=path,
                              metrics=self._metrics(path_len=len(path)))

        if self.no_path:
            return StepResult(status="no_path", metrics=self._metrics())

        if self._frontier_empty():
            self.no_path = True
            return StepResult(status="no_path", metrics=self._metrics())

        return self._expand()

    def run(self) -> SearchResult:
        if self.grid is None:
            return SearchResult()
        while True:
            res = self.step()
            if res.status == "done":
                return SearchResult(tuple(res.path), self.popped_count, self.total_cost)
            if res.status == "no_path":
                return SearchResult((), self.popped_count, 0)

    # -------------------- helpers --------------------

    def _close(self, u: Position) -> None:
        self.popped_count += 1
        self.open_set.discard(u)
        self.closed_set.add(u)

    def _finish(self, u: Position) -> StepResult:
        self.done = True
        path = self._reconstruct_path(u)
        return StepResult(status="done", closed=[u], current=u, path=path,
                          metrics=self._metrics(path_len=len(path)))

    def _reconstruct_path(self, end: Position) -> List[Position]:
        path: List[Position] = []
        cur = end
        while True:
            path.append(cur)
            if cur == self.start:
                break
            cur = self.parent[cur]
        path.reverse()
        return path

    def _metrics(self, path_len: int = 0) -> dict:
        return {
            "algo": self.name,
            "popped": self.popped_count,
            "open_size": len(self.open_set),
            "closed_count": len(self.closed_set),
            "path_len": path_len,
            "total_cost": self.total_cost if self.done else None,
        }
