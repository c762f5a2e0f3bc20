"""Min-priority queue used as the search frontier."""

from __future__ import annotations

import heapq
import itertools
from typing import Any, Generic, TypeVar

from slider.errors import EmptyQueueError

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """Binary-heap priority queue; the lowest priority leaves first.

    Elements with equal priority leave in insertion order, so a search
    driven by this queue is deterministic.
    """

    def __init__(self) -> None:
        self._heap: list[tuple[Any, int, T]] = []
        self._counter = itertools.count()

    def enqueue(self, element: T, priority: Any) -> None:
        heapq.heappush(self._heap, (priority, next(self._counter), element))

    def dequeue(self) -> T:
        if not self._heap:
            raise EmptyQueueError("Cannot dequeue from an empty priority queue.")
        _, _, element = heapq.heappop(self._heap)
        return element

    def peek(self) -> T:
        if not self._heap:
            raise EmptyQueueError("Cannot peek into an empty priority queue.")
        return self._heap[0][2]

    @property
    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)
