"""LIFO stacks: linked, growable-array and fixed-capacity variants."""

from __future__ import annotations

from typing import Any, Optional

from .dynamic_array import DEFAULT_CAPACITY, _check_capacity
from .linked_list import _Node


class StackOverflow(Exception):
    """Raised when pushing onto a full fixed-size stack."""


class StackUnderflow(Exception):
    """Raised when popping or peeking an empty stack."""


class LinkedStack:
    """Unbounded stack whose top is the head of a linked list."""

    def __init__(self) -> None:
        self._top: Optional[_Node] = None
        self._size = 0

    def push(self, data: Any) -> None:
        self._top = _Node(data, self._top)
        self._size += 1

    def pop(self) -> Any:
        if self._top is None:
            raise StackUnderflow("Stack underflows")
        node = self._top
        self._top = node.next
        self._size -= 1
        return node.data

    def peek(self) -> Any:
        if self._top is None:
            raise StackUnderflow("Stack is empty")
        return self._top.data

    def is_empty(self) -> bool:
        return self._top is None

    def __len__(self) -> int:
        return self._size


class DynamicArrayStack:
    """Array-backed stack that doubles when full and halves when sparse."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._capacity = _check_capacity(capacity)
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, data: Any) -> None:
        """Push ``data``, doubling the capacity first if the stack is full."""
        if self.is_full():
            self._capacity *= 2
        self._items.append(data)

    def pop(self) -> Any:
        """Pop the top item, halving the capacity if under a quarter is used."""
        if not self._items:
            raise StackUnderflow("Stack underflow")
        if len(self._items) - 1 < self._capacity // 4:
            self._capacity //= 2
        return self._items.pop()

    def peek(self) -> Any:
        if not self._items:
            raise StackUnderflow("Stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, capacity={self._capacity})"


class FixedStack:
    """Stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._capacity = _check_capacity(capacity)
        self._items: list[Any] = []

    @property
    def capacity(self) -> int:
        return self._capacity

    def push(self, data: Any) -> None:
        if self.is_full():
            raise StackOverflow("Stack overflow")
        self._items.append(data)

    def pop(self) -> Any:
        if not self._items:
            raise StackUnderflow("Stack underflow")
        return self._items.pop()

    def peek(self) -> Any:
        if not self._items:
            raise StackUnderflow("Stack is empty")
        return self._items[-1]

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self._capacity

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._items!r}, capacity={self._capacity})"