"""FIFO queues: an unbounded linked one and a fixed-capacity circular one."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterator
from typing import Any

from .dynamic_array import _check_capacity

_EMPTY = "Queue is empty"


class QueueEmpty(Exception):
    """Raised when taking from an empty queue."""


class QueueFull(Exception):
    """Raised when adding to a full bounded queue."""


class LinkedQueue:
    """Unbounded first-in first-out queue."""

    def __init__(self) -> None:
        self._items: deque[Any] = deque()

    def enqueue(self, data: Any) -> None:
        """Add ``data`` at the rear."""
        self._items.append(data)

    def dequeue(self) -> Any:
        """Remove and return the item at the front."""
        if self.is_empty():
            raise QueueEmpty(_EMPTY)
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        """Remove every item."""
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"LinkedQueue({list(self._items)!r})"


class CircularQueue:
    """Bounded queue stored in a ring of ``capacity`` slots."""

    def __init__(self, capacity: int) -> None:
        self._slots: list[Any] = [None] * _check_capacity(capacity)
        self._front = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def _slot(self, offset: int) -> int:
        """Index of the slot ``offset`` places behind the front."""
        return (self._front + offset) % self.capacity

    def _require_items(self) -> None:
        if self.is_empty():
            raise QueueEmpty(_EMPTY)

    def enqueue(self, data: Any) -> None:
        """Add ``data`` at the rear."""
        if self.is_full():
            raise QueueFull("Queue is full")
        self._slots[self._slot(self._size)] = data
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the item at the front."""
        data = self.front()
        self._slots[self._front] = None
        self._front = self._slot(1)
        self._size -= 1
        return data

    def front(self) -> Any:
        """Return the item at the front without removing it."""
        self._require_items()
        return self._slots[self._front]

    def rear(self) -> Any:
        """Return the item at the rear without removing it."""
        self._require_items()
        return self._slots[self._slot(self._size - 1)]

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self.capacity

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (self._slots[self._slot(offset)] for offset in range(self._size))

    def __repr__(self) -> str:
        return f"CircularQueue({list(self)!r}, capacity={self.capacity})"