"""A counter of keys that is safe to share between threads."""

from __future__ import annotations

import threading
from collections import defaultdict
from typing import DefaultDict


class SafeCounter:
    """Counts occurrences of keys under a lock."""

    def __init__(self) -> None:
        self._counts: DefaultDict[str, int] = defaultdict(int)
        self._lock = threading.Lock()

    def inc(self, key: str) -> None:
        """Increment the counter for key."""
        with self._lock:
            self._counts[key] += 1

    def value(self, key: str) -> int:
        """The current count for key, zero if it was never incremented."""
        with self._lock:
            return self._counts.get(key, 0)