"""Items that notify registered customers when they come back in stock."""

from __future__ import annotations

from typing import List, Protocol, Tuple


class Observer(Protocol):
    id: str

    def update(self, item_name: str) -> None: ...


class Customer:
    """A customer who is e-mailed when an item they watch is available."""

    def __init__(self, id: str) -> None:
        self.id = id
        self.notifications: List[str] = []

    def update(self, item_name: str) -> None:
        message = f"sending email to customer {self.id} for item {item_name}"
        self.notifications.append(message)
        print(message)

    def __repr__(self) -> str:
        return f"Customer({self.id!r})"


class Item:
    """A product that observers can watch for availability."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.in_stock = False
        self._observers: List[Observer] = []

    @property
    def observers(self) -> Tuple[Observer, ...]:
        return tuple(self._observers)

    def register(self, observer: Observer) -> None:
        self._observers.append(observer)

    def deregister(self, observer: Observer) -> None:
        """Drop the first observer with the same id, moving the last one into its place."""
        for index, current in enumerate(self._observers):
            if current.id == observer.id:
                self._observers[index] = self._observers[-1]
                self._observers.pop()
                return

    def notify_all(self) -> None:
        for observer in self._observers:
            observer.update(self.name)

    def update_availability(self) -> None:
        """Mark the item in stock and tell every observer."""
        print(f"item {self.name} is now in stock")
        self.in_stock = True
        self.notify_all()