# dsakit

Plain-Python versions of the classic data structures and algorithms: sorting,
pattern search, linked lists, stacks, queues and a growable array, plus a small
simulation of randomly created workers. There are no dependencies outside the
standard library.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Sorting

`dsakit.sorting` holds comparison sorts that work in place on any mutable
sequence of comparable items and return `None`:

```python
import random
from dsakit.sorting import (
    bubble_sort, heap_sort, insertion_sort, merge_sort, quick_sort, selection_sort,
)

data = [11, 12, 32, 4, 5, 6, 7, 33, 2, 1]
merge_sort(data)                      # stable
quick_sort(data, random.Random(0))    # random pivot; rng is optional
```

`bubble_sort` stops early once a pass makes no swap. `quick_sort` picks a
random pivot and uses Lomuto partitioning.

The building blocks are exposed as well:

- `heapify(items, size, index)` sifts one item down within the first `size`
  items so its subtree is a max heap.
- `merge(items, start, mid, end)` merges the sorted runs `items[start..mid]`
  and `items[mid+1..end]` (inclusive bounds), left run first on ties.
- `partition_naive`, `partition_lomuto` and `partition_hoare` take
  `(items, start, end)` with inclusive bounds. The first two partition around
  `items[end]` and return the pivot's final index; Hoare partitions around
  `items[start]` and returns a split point `j`. An invalid range raises
  `IndexError`.

## Strings

`dsakit.strings` has Knuth–Morris–Pratt search and descending range sorting:

```python
from dsakit.strings import (
    build_lps, kmp_search, count_occurrences, sort_range_descending, solve_cases,
)

build_lps("abab")                          # [0, 0, 1, 2]
kmp_search("aa", "aaaa")                   # [0, 1, 2] - overlapping matches
count_occurrences("aa", "aaaa")            # 3
sort_range_descending("ooneefspd", 0, 8)   # "spoonfeed"
solve_cases(["2", "hlleo 1 3", "effort 1 4"])  # ["hlleo", "erofft"]
```

An empty pattern matches nothing. `sort_range_descending` leaves the string
unchanged when `start >= end` and raises `IndexError` when the range falls
outside the string. `solve_cases` reads a case count (1 to 1000) followed by
`text start end` triples and raises `ValueError` for a bad count, an
incomplete case or a string of 10000 characters or more.

## Containers

- `dsakit.dynamic_array.DynamicArray(capacity=5)` keeps an explicit
  `capacity` that doubles when `append` finds it full. `delete(index)` removes
  and returns an item (`IndexError` when out of range); `shrink()` halves the
  capacity when fewer than half of the slots are in use. Supports `len()`,
  indexing and iteration.
- `dsakit.linked_list.SinglyLinkedList` offers `insert_head`, `insert_last`,
  `insert_after`, `insert_before`, `insert_at_position`, `delete_head`,
  `delete_last`, `delete_at_position`, `search` and `clear`. Positions start
  at 1; delete methods return the removed value; `search` returns the
  position of the first match or `None`. Errors on an empty list or a bad
  position raise `IndexError`; a missing neighbour value raises `ValueError`.
  `str()` renders `5 -> 10 -> NULL`.
- `dsakit.linked_list.DoublyLinkedList` offers `insert_head`, `insert_tail`,
  `clear`, forward iteration and `reversed()`, plus `format_forward()`
  (`HEAD -> 10 <-> 20 <-> TAIL`) and `format_backward()`.
  Both lists render an empty list as `List is empty`.
- `dsakit.queues.LinkedQueue` is an unbounded FIFO queue;
  `dsakit.queues.CircularQueue(capacity)` is a bounded ring with `front()`,
  `rear()`, `is_full()` and `capacity`. Taking from an empty queue raises
  `QueueEmpty`; adding to a full circular queue raises `QueueFull`.
- `dsakit.stacks.LinkedStack`, `dsakit.stacks.DynamicArrayStack(capacity=5)`
  and `dsakit.stacks.FixedStack(capacity=5)` provide `push`, `pop`, `peek`,
  `is_empty` and `len()`. Popping or peeking an empty stack raises
  `StackUnderflow`; pushing onto a full `FixedStack` raises `StackOverflow`.
  `DynamicArrayStack` doubles its capacity when full and halves it when a pop
  leaves fewer than a quarter of the slots in use.

A capacity below 1 raises `ValueError` everywhere.

```python
from dsakit.stacks import FixedStack, StackOverflow

stack = FixedStack(5)
for value in range(1, 6):
    stack.push(value)
try:
    stack.push(6)
except StackOverflow:
    print("full")
```

## Workers

`dsakit.workers` models three kinds of people, `PersonType.ANXIN`,
`PersonType.ANTROM` and `PersonType.CONGNHAN`, with incomes `"tuytam"`,
`"henxui"` and `500000`. `Person.act()` returns `"lam on lam phuoc"`, `"!!!"`
or the income as text. `create_person(rng=None)` picks a type at random, and
`run(count, output_path="build/output.txt", rng=None)` creates `count` people
(0 to 100, otherwise `ValueError`), writes one message per line to the output
file, creating its directory, and returns `(person, message)` pairs.

## Commands

```
dsakit-strings count         # stdin: a pattern and a text; prints the match count
dsakit-strings sort-range    # stdin: a count and "text start end" cases; prints "Output:" and the results
dsakit-dynamic-array         # shows the capacity doubling over twenty appends, then one deletion
dsakit-workers [COUNT] [--output PATH] [--seed N]
```

`dsakit-workers` asks for the number of people when `COUNT` is not given,
prints each person's type and message, and writes the messages to the output
file (`build/output.txt` by default).

## Limits

There are no commands for the sorts or the linked, queue and stack
containers; they are used as a library only. Containers live in memory and
are not saved anywhere.