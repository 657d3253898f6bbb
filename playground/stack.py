"""A last-in, first-out stack."""

from __future__ import annotations

from typing import Any, Optional


class Stack:
    """A LIFO stack; popping or peeking an empty stack gives None."""

    def __init__(self) -> None:
        self._items: list = []

    def push(self, item: Any) -> None:
        self._items.append(item)

    def pop(self) -> Optional[Any]:
        """Remove and return the top item, or None if the stack is empty."""
        if not self._items:
            return None
        return self._items.pop()

    def peek(self) -> Optional[Any]:
        """Return the top item without removing it, or None if empty."""
        if not self._items:
            return None
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def __len__(self) -> int:
        return len(self._items)