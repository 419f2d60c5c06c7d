"""A growable array that tracks an explicit capacity."""

from __future__ import annotations

import sys
from collections.abc import Iterator, Sequence
from typing import Any

DEFAULT_CAPACITY = 5


def _check_capacity(capacity: int) -> int:
    """Return ``capacity`` if it is usable, else raise ValueError."""
    if capacity < 1:
        raise ValueError("capacity must be at least 1")
    return capacity


class _CapacityList:
    """Items kept in a list, alongside a capacity tracked on its own."""

    def __init__(self, capacity: int) -> None:
        self._capacity = _check_capacity(capacity)
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, capacity={self._capacity})"


class DynamicArray:
    """Array that doubles its capacity when full and halves it on request."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._capacity = _check_capacity(capacity)
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def append(self, value: Any) -> None:
        """Add ``value`` at the end, doubling the capacity first if full."""
        if len(self._items) >= self._capacity:
            self._capacity *= 2
        self._items.append(value)

    def delete(self, index: int) -> Any:
        """Remove and return the item at ``index``, shifting later items left."""
        if not 0 <= index < len(self._items):
            raise IndexError(f"index {index} out of range for {len(self._items)} items")
        return self._items.pop(index)

    def shrink(self) -> None:
        """Halve the capacity when fewer than half of the slots are in use."""
        if len(self._items) < self._capacity // 2:
            self._capacity //= 2

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> Any:
        return self._items[index]

    def __iter__(self) -> Iterator[Any]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, capacity={self._capacity})"


def main(argv: Sequence[str] | None = None) -> int:
    """Demonstrate growth over twenty appends and one deletion."""
    del argv
    array = DynamicArray()
    print(f"Original capacity: {array.capacity}")
    for value in range(1, 21):
        before = array.capacity
        array.append(value)
        if array.capacity != before:
            print(f"New capacity: {array.capacity}")
        print(" ".join(map(str, array)))
    array.delete(10)
    print(" ".join(map(str, array)))
    return 0


if __name__ == "__main__":
    sys.exit(main())