"""First-in, first-out queues: plain, lock-protected and generic."""

from __future__ import annotations

import threading
from collections import deque
from typing import Deque, Generic, TypeVar

T = TypeVar("T")


class QueueEmptyError(IndexError):
    """Raised when taking an item from an empty queue."""

    def __init__(self, message: str = "queue is empty") -> None:
        super().__init__(message)


class BasicQueue:
    """A simple FIFO queue."""

    def __init__(self) -> None:
        self._items: Deque = deque()

    def enqueue(self, item) -> None:
        self._items.append(item)

    def dequeue(self):
        """Remove and return the oldest item."""
        if not self._items:
            raise QueueEmptyError()
        return self._items.popleft()

    def front(self):
        """Return the oldest item without removing it."""
        if not self._items:
            raise QueueEmptyError()
        return self._items[0]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)


class ConcurrentQueue:
    """A FIFO queue safe to share between threads."""

    def __init__(self) -> None:
        self._items: Deque = deque()
        self._lock = threading.Lock()

    def enqueue(self, item) -> None:
        with self._lock:
            self._items.append(item)

    def dequeue(self):
        with self._lock:
            if not self._items:
                raise QueueEmptyError()
            return self._items.popleft()


class GenericQueue(Generic[T]):
    """A thread-safe FIFO queue of items of one type."""

    def __init__(self) -> None:
        self._items: Deque[T] = deque()
        self._lock = threading.Lock()

    def enqueue(self, item: T) -> None:
        with self._lock:
            self._items.append(item)

    def dequeue(self) -> T:
        with self._lock:
            if not self._items:
                raise QueueEmptyError()
            return self._items.popleft()