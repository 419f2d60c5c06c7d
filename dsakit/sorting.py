"""Comparison sorts and partition schemes that work in place on mutable sequences."""

from __future__ import annotations

import heapq
import random
from collections.abc import MutableSequence
from typing import Any


def _swap(items: MutableSequence[Any], i: int, j: int) -> None:
    items[i], items[j] = items[j], items[i]


def _check_range(items: MutableSequence[Any], start: int, end: int) -> None:
    if not 0 <= start <= end < len(items):
        raise IndexError(f"invalid range [{start}, {end}] for {len(items)} items")


def bubble_sort(items: MutableSequence[Any]) -> None:
    """Sort in place, stopping as soon as a pass makes no swap."""
    for boundary in range(len(items) - 1, 0, -1):
        swapped = False
        for i in range(boundary):
            if items[i] > items[i + 1]:
                _swap(items, i, i + 1)
                swapped = True
        if not swapped:
            return


def heapify(items: MutableSequence[Any], size: int, index: int) -> None:
    """Sift ``items[index]`` down so the subtree rooted there is a max heap.

    Only the first ``size`` items are treated as part of the heap.
    """
    while True:
        largest = index
        left, right = 2 * index + 1, 2 * index + 2
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == index:
            return
        _swap(items, index, largest)
        index = largest


def heap_sort(items: MutableSequence[Any]) -> None:
    """Sort in place by building a max heap and repeatedly extracting the root."""
    size = len(items)
    for index in range(size // 2 - 1, -1, -1):
        heapify(items, size, index)
    for end in range(size - 1, 0, -1):
        _swap(items, 0, end)
        heapify(items, end, 0)


def insertion_sort(items: MutableSequence[Any]) -> None:
    """Sort in place by inserting each item into the sorted prefix."""
    for i in range(1, len(items)):
        key = items[i]
        j = i - 1
        while j >= 0 and items[j] > key:
            items[j + 1] = items[j]
            j -= 1
        items[j + 1] = key


def selection_sort(items: MutableSequence[Any]) -> None:
    """Sort in place by moving the smallest remaining item to the front."""
    for i in range(len(items) - 1):
        smallest = min(range(i, len(items)), key=items.__getitem__)
        _swap(items, i, smallest)


def merge(items: MutableSequence[Any], start: int, mid: int, end: int) -> None:
    """Merge the sorted runs ``items[start..mid]`` and ``items[mid+1..end]`` in place.

    Ties keep the item from the left run first.
    """
    left = list(items[start:mid + 1])
    right = list(items[mid + 1:end + 1])
    items[start:end + 1] = list(heapq.merge(left, right))


def _merge_sort(items: MutableSequence[Any], start: int, end: int) -> None:
    if start < end:
        mid = (start + end) // 2
        _merge_sort(items, start, mid)
        _merge_sort(items, mid + 1, end)
        merge(items, start, mid, end)


def merge_sort(items: MutableSequence[Any]) -> None:
    """Stable sort in place by recursive halving and merging."""
    _merge_sort(items, 0, len(items) - 1)


def partition_naive(items: MutableSequence[Any], start: int, end: int) -> int:
    """Partition around ``items[end]`` using a scratch copy; return the pivot's index."""
    _check_range(items, start, end)
    pivot = items[end]
    segment = list(items[start:end + 1])
    low = [value for value in segment if value <= pivot]
    high = [value for value in segment if value > pivot]
    items[start:end + 1] = low + high
    return start + len(low) - 1


def partition_lomuto(items: MutableSequence[Any], start: int, end: int) -> int:
    """Lomuto partition around ``items[end]``; return the pivot's final index."""
    _check_range(items, start, end)
    pivot = items[end]
    boundary = start
    for i in range(start, end + 1):
        if items[i] <= pivot:
            _swap(items, i, boundary)
            boundary += 1
    return boundary - 1


def partition_hoare(items: MutableSequence[Any], start: int, end: int) -> int:
    """Hoare partition around ``items[start]``.

    Returns ``j`` such that every item in ``items[start..j]`` is no greater
    than any item in ``items[j+1..end]``.
    """
    _check_range(items, start, end)
    pivot = items[start]
    i, j = start - 1, end + 1
    while True:
        i += 1
        while items[i] < pivot:
            i += 1
        j -= 1
        while items[j] > pivot:
            j -= 1
        if i >= j:
            return j
        _swap(items, i, j)


def quick_sort(items: MutableSequence[Any], rng: random.Random | None = None) -> None:
    """Sort in place with randomised-pivot quicksort using Lomuto partitioning."""
    source = rng if rng is not None else random.Random()

    def sort_range(low: int, high: int) -> None:
        while low < high:
            _swap(items, high, source.randint(low, high))
            pivot = partition_lomuto(items, low, high)
            if pivot - low < high - pivot:
                sort_range(low, pivot - 1)
                low = pivot + 1
            else:
                sort_range(pivot + 1, high)
                high = pivot - 1

    sort_range(0, len(items) - 1)