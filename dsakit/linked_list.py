"""Singly and doubly linked lists of arbitrary values."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Optional

_EMPTY = "List is empty"


@dataclass
class _Node:
    data: Any
    next: Optional[_Node] = None


@dataclass
class _DoubleNode:
    data: Any
    prev: Optional[_DoubleNode] = None
    next: Optional[_DoubleNode] = None


def _walk(node: Any, link: str) -> Iterator[Any]:
    """Yield the data of ``node`` and of every node reached through ``link``."""
    while node is not None:
        yield node.data
        node = getattr(node, link)


def _render(values: Iterable[Any], prefix: str, arrow: str, suffix: str) -> str:
    """Join ``values`` with ``arrow`` between ``prefix`` and ``suffix``."""
    items = list(values)
    if not items:
        return _EMPTY
    return prefix + "".join(f"{value} {arrow} " for value in items) + suffix


class SinglyLinkedList:
    """A list of nodes, each linked to the one after it.

    Positions used by the positional methods start at 1.
    """

    def __init__(self) -> None:
        self._head: Optional[_Node] = None
        self._size = 0

    def insert_head(self, data: Any) -> None:
        """Insert ``data`` before the current first node."""
        self._head = _Node(data, self._head)
        self._size += 1

    def insert_last(self, data: Any) -> None:
        """Append ``data`` after the current last node."""
        node = _Node(data)
        if self._head is None:
            self._head = node
        else:
            curr = self._head
            while curr.next is not None:
                curr = curr.next
            curr.next = node
        self._size += 1

    def _link_after(self, node: _Node, data: Any) -> None:
        node.next = _Node(data, node.next)
        self._size += 1

    def insert_after(self, prev_data: Any, data: Any) -> None:
        """Insert ``data`` after the first node holding ``prev_data``."""
        if self._head is None:
            raise IndexError(_EMPTY)
        curr: Optional[_Node] = self._head
        while curr is not None:
            if curr.data == prev_data:
                self._link_after(curr, data)
                return
            curr = curr.next
        raise ValueError(f"Node with value {prev_data} not found")

    def insert_before(self, next_data: Any, data: Any) -> None:
        """Insert ``data`` before the first node holding ``next_data``."""
        if self._head is None:
            raise IndexError(_EMPTY)
        if self._head.data == next_data:
            self.insert_head(data)
            return
        curr = self._head
        while curr.next is not None:
            if curr.next.data == next_data:
                self._link_after(curr, data)
                return
            curr = curr.next
        raise ValueError(f"Node with value {next_data} not found")

    def insert_at_position(self, pos: int, data: Any) -> None:
        """Insert ``data`` so that it ends up at position ``pos``."""
        if pos < 1:
            raise IndexError("Invalid position")
        if pos == 1:
            self.insert_head(data)
            return
        if self._head is None:
            raise IndexError(_EMPTY)
        curr: Optional[_Node] = self._head
        count = 1
        while curr is not None and count < pos - 1:
            curr = curr.next
            count += 1
        if curr is None:
            raise IndexError("Position out of bounds")
        self._link_after(curr, data)

    def delete_head(self) -> Any:
        """Remove the first node and return its data."""
        if self._head is None:
            raise IndexError(_EMPTY)
        node = self._head
        self._head = node.next
        self._size -= 1
        return node.data

    def _unlink_after(self, node: _Node) -> Any:
        target = node.next
        if target is None:
            raise IndexError("Position out of bounds")
        node.next = target.next
        self._size -= 1
        return target.data

    def delete_last(self) -> Any:
        """Remove the last node and return its data."""
        if self._head is None:
            raise IndexError(_EMPTY)
        if self._head.next is None:
            return self.delete_head()
        curr = self._head
        while curr.next is not None and curr.next.next is not None:
            curr = curr.next
        return self._unlink_after(curr)

    def delete_at_position(self, pos: int) -> Any:
        """Remove the node at position ``pos`` and return its data."""
        if pos < 1:
            raise IndexError("Invalid position")
        if self._head is None:
            raise IndexError(_EMPTY)
        if pos == 1:
            return self.delete_head()
        curr = self._head
        count = 1
        while curr.next is not None and count < pos - 1:
            curr = curr.next
            count += 1
        return self._unlink_after(curr)

    def search(self, value: Any) -> Optional[int]:
        """Return the position of the first node holding ``value``, or ``None``."""
        for pos, data in enumerate(self, start=1):
            if data == value:
                return pos
        return None

    def clear(self) -> None:
        """Remove every node."""
        self._head = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return _walk(self._head, "next")

    def __str__(self) -> str:
        return _render(self, "", "->", "NULL")

    def __repr__(self) -> str:
        return f"SinglyLinkedList({list(self)!r})"


class DoublyLinkedList:
    """A list of nodes linked in both directions, with head and tail access."""

    def __init__(self) -> None:
        self._head: Optional[_DoubleNode] = None
        self._tail: Optional[_DoubleNode] = None
        self._size = 0

    def insert_head(self, data: Any) -> None:
        """Insert ``data`` at the front."""
        node = _DoubleNode(data, next=self._head)
        if self._head is not None:
            self._head.prev = node
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def insert_tail(self, data: Any) -> None:
        """Insert ``data`` at the back."""
        node = _DoubleNode(data, prev=self._tail)
        if self._tail is not None:
            self._tail.next = node
        self._tail = node
        if self._head is None:
            self._head = node
        self._size += 1

    def clear(self) -> None:
        """Remove every node."""
        self._head = None
        self._tail = None
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return _walk(self._head, "next")

    def __reversed__(self) -> Iterator[Any]:
        return _walk(self._tail, "prev")

    def format_forward(self) -> str:
        """Render the list from head to tail."""
        return _render(self, "HEAD -> ", "<->", "TAIL")

    def format_backward(self) -> str:
        """Render the list from tail to head."""
        return _render(reversed(self), "TAIL -> ", "<->", "HEAD")

    def __repr__(self) -> str:
        return f"DoublyLinkedList({list(self)!r})"