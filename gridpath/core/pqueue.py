#!/usr/bin/env python3
"""
Binary-heap min-priority queue shared by Dijkstra and A*.

Entries are (priority, seq, item); seq is a monotonic counter so equal
priorities pop FIFO and items themselves are never compared. A priority
may be a tuple (A* pushes (f, h)) as long as one queue sticks to one shape.
"""

from dataclasses import dataclass, field
from typing import Generic, List, Optional, Tuple, TypeVar, Union
import heapq

T = TypeVar("T")
Priority = Union[float, Tuple[float, ...]]


@dataclass
class PriorityQueue(Generic[T]):
    _heap: List[Tuple[Priority, int, T]] = field(default_factory=list)
    seq: int = 0

    def _bump(self) -> int:
        self.seq += 1
        return self.seq

    def enqueue(self, item: T, priority: Priority) -> None:
        heapq.heappush(self._heap, (priority, self._bump(), item))

    def dequeue(self) -> Optional[T]:
        if not self._heap:
            return None
        return heapq.heappop(self._heap)[2]

    def is_empty(self) -> bool:
        return not self._heap

    def clear(self) -> None:
        self._heap.clear()
        self.seq = 0
