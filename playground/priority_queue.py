"""A min-heap priority queue of comparable values."""

from __future__ import annotations

import heapq
from typing import Any, Iterable


class MinPriorityQueue:
    """A priority queue that always yields its smallest value first."""

    def __init__(self, values: Iterable[Any] = ()) -> None:
        self._items = list(values)
        heapq.heapify(self._items)

    def push(self, value: Any) -> None:
        """Add a value to the queue."""
        heapq.heappush(self._items, value)

    def pop(self) -> Any:
        """Remove and return the smallest value; raise IndexError if empty."""
        if not self._items:
            raise IndexError("pop from empty priority queue")
        return heapq.heappop(self._items)

    def peek(self) -> Any:
        """Return the smallest value without removing it."""
        if not self._items:
            raise IndexError("peek into empty priority queue")
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)