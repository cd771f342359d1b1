"""Cost-ordered frontier for Dijkstra-style search.

Entries are ordered by ``(cost, seq)`` where ``seq`` is a monotonic insertion
counter, so equal-cost entries pop FIFO and are never coalesced. The same
state may be queued many times; stale copies are dropped by the caller at
extraction time.
"""

import heapq
import itertools
from dataclasses import dataclass, field
from typing import Any, Hashable, List, Optional


@dataclass(order=True)
class FrontierEntry:
    """Pending state with its accumulated cost."""
    cost: int
    seq: int
    state: Hashable = field(compare=False)
    parent: Optional[Hashable] = field(compare=False, default=None)
    payload: Any = field(compare=False, default=None)


class Frontier:
    def __init__(self):
        self._heap: List[FrontierEntry] = []
        self._counter = itertools.count()
        self.max_size = 0

    def insert(self, state: Hashable, cost: int, parent: Optional[Hashable] = None,
               payload: Any = None) -> FrontierEntry:
        entry = FrontierEntry(cost, next(self._counter), state, parent, payload)
        heapq.heappush(self._heap, entry)
        if len(self._heap) > self.max_size:
            self.max_size = len(self._heap)
        return entry

    def extract_min(self) -> Optional[FrontierEntry]:
        if not self._heap:
            return None
        return heapq.heappop(self._heap)

    def peek_cost(self) -> Optional[int]:
        return self._heap[0].cost if self._heap else None

    def __len__(self):
        return len(self._heap)

    def __bool__(self):
        return bool(self._heap)
