"""A doubly linked list holding arbitrary values."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class _Node:
    value: Any
    prev: Optional["_Node"] = field(default=None, repr=False)
    next: Optional["_Node"] = field(default=None, repr=False)


class DoublyLinkedList:
    """A list with constant-time insertion and removal at both ends."""

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0

    def insert_front(self, value: Any) -> None:
        """Add a value at the beginning of the list."""
        node = _Node(value)
        if self._head is None:
            self._head = self._tail = node
        else:
            node.next = self._head
            self._head.prev = node
            self._head = node
        self._size += 1

    def insert_back(self, value: Any) -> None:
        """Add a value at the end of the list."""
        node = _Node(value)
        if self._tail is None:
            self._head = self._tail = node
        else:
            node.prev = self._tail
            self._tail.next = node
            self._tail = node
        self._size += 1

    def remove_front(self) -> Any:
        """Remove and return the first value; raise IndexError if empty."""
        if self._head is None:
            raise IndexError("remove from empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        self._size -= 1
        return node.value

    def remove_back(self) -> Any:
        """Remove and return the last value; raise IndexError if empty."""
        if self._tail is None:
            raise IndexError("remove from empty list")
        node = self._tail
        self._tail = node.prev
        if self._tail is None:
            self._head = None
        else:
            self._tail.next = None
        self._size -= 1
        return node.value

    def is_empty(self) -> bool:
        return self._size == 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.value
            node = node.next

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"