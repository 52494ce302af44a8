#!/usr/bin/env python3
"""
Breadth-first search: FIFO frontier, one ring at a time.

Counts hops only. Mud and water are entered like empty cells, so the path is
the fewest-hops route, which is not necessarily the cheapest one when
weighted terrain is present. total_cost still reports what that route costs.
"""

from collections import deque
from dataclasses import dataclass, field
from typing import Deque, List

from gridpath.core.search import SearchAlgo
from gridpath.core.types import Position, StepResult


@dataclass
class BFSAlgo(SearchAlgo):
    name: str = "BFS"

    queue: Deque[Position] = field(default_factory=deque)
    seen: set = field(default_factory=set)

    def _seed(self) -> None:
        self.queue.clear()
        self.seen.clear()
        self.queue.append(self.start)
        self.seen.add(self.start)

    def _frontier_empty(self) -> bool:
        return not self.queue

    def _expand(self) -> StepResult:
        u = self.queue.popleft()
        self._close(u)

        if u == self.goal:
            self.total_cost = sum(self.grid.cost_at(p) for p in self._reconstruct_path(u)[1:])
            return self._finish(u)

        opened_now: List[Position] = []
        for v in self.grid.neighbors4(u):
            if v in self.seen:
                continue
            self.seen.add(v)
            self.parent[v] = u
            self.queue.append(v)
            self.open_set.add(v)
            opened_now.append(v)

        return StepResult(status="running", opened=opened_now, closed=[u], current=u,
                          metrics=self._metrics())
