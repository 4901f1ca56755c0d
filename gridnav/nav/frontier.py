"""Min-priority frontier for graph search."""

from __future__ import annotations

import heapq
from itertools import count
from typing import Generic, TypeVar

from gridnav.nav.errors import EmptyFrontierError

T = TypeVar("T")


class PriorityFrontier(Generic[T]):
    """Binary heap of (item, score) pairs, lowest score first.

    Equal scores pop in insertion order. There is no decrease-key: pushing an
    item again leaves the older entry in the heap, and consumers drop stale
    entries when they pop them.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[float, int, T]] = []
        self._sequence = count()

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def push(self, item: T, score: float) -> None:
        heapq.heappush(self._heap, (score, next(self._sequence), item))

    def pop_min(self) -> tuple[T, float]:
        if not self._heap:
            raise EmptyFrontierError("pop from an empty frontier")
        score, _, item = heapq.heappop(self._heap)
        return item, score

    def peek(self) -> tuple[T, float]:
        if not self._heap:
            raise EmptyFrontierError("peek at an empty frontier")
        score, _, item = self._heap[0]
        return item, score

    def clear(self) -> None:
        self._heap.clear()
