#!/usr/bin/env python3

from dataclasses import dataclass, field
from math import inf
from typing import Dict, List

from gridpath.core.pqueue import PriorityQueue
from gridpath.core.search import SearchAlgo
from gridpath.core.types import Position, StepResult


@dataclass
class DijkstraAlgo(SearchAlgo):
    name: str = "Dijkstra"

    open_pq: PriorityQueue = field(default_factory=PriorityQueue)   # item: (cell, g at push)
    g: Dict[Position, float] = field(default_factory=dict)

    def _seed(self) -> None:
        self.open_pq.clear()
        self.g.clear()
        self.g[self.start] = 0
        self.open_pq.enqueue((self.start, 0), self._priority(self.start))

    def _priority(self, c: Position) -> float:
        return self.g[c]

    def _frontier_empty(self) -> bool:
        return self.open_pq.is_empty()

    def _expand(self) -> StepResult:
        u, g_u = self.open_pq.dequeue()

        # stale entry: u was re-queued with a lower cost, or already finalized
        if u in self.closed_set or g_u != self.g.get(u, inf):
            return StepResult(status="running", current=u, metrics=self._metrics())

        self._close(u)

        if u == self.goal:
            self.total_cost = self.g[u]
            return self._finish(u)

        opened_now: List[Position] = []
        for v in self.grid.neighbors4(u):
            alt = self.g[u] + self.grid.cost_at(v)
            if alt < self.g.get(v, inf):
                self.g[v] = alt
                self.parent[v] = u
                self.open_pq.enqueue((v, alt), self._priority(v))
                if v not in self.closed_set and v not in self.open_set:
                    self.open_set.add(v)
                    opened_now.append(v)

        return StepResult(status="running", opened=opened_now, closed=[u], current=u,
                          metrics=self._metrics())
