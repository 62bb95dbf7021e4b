"""Priority queue and keyed priority map; higher priorities come out first."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Hashable, Iterator, TypeVar

T = TypeVar("T")
K = TypeVar("K", bound=Hashable)


@dataclass(eq=False)
class Item(Generic[T]):
    """A value held in a PriorityQueue together with its priority."""

    value: T
    priority: int
    index: int = field(default=-1, repr=False)


class PriorityQueue(Generic[T]):
    """Binary max-heap of Items that supports updating and removing items."""

    def __init__(self) -> None:
        self._heap: list[Item[T]] = []

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def _less(self, i: int, j: int) -> bool:
        return self._heap[i].priority > self._heap[j].priority

    def _swap(self, i: int, j: int) -> None:
        heap = self._heap
        heap[i], heap[j] = heap[j], heap[i]
        heap[i].index = i
        heap[j].index = j

    def _up(self, j: int) -> None:
        while j > 0:
            parent = (j - 1) // 2
            if not self._less(j, parent):
                break
            self._swap(parent, j)
            j = parent

    def _down(self, start: int, n: int) -> bool:
        i = start
        while True:
            left = 2 * i + 1
            if left >= n:
                break
            child = left
            right = left + 1
            if right < n and self._less(right, left):
                child = right
            if not self._less(child, i):
                break
            self._swap(i, child)
            i = child
        return i > start

    def _check(self, item: Item[T]) -> None:
        index = item.index
        if index < 0 or index >= len(self._heap) or self._heap[index] is not item:
            raise ValueError("item is not in this queue")

    def _pop_last(self) -> Item[T]:
        item = self._heap.pop()
        item.index = -1
        return item

    def push(self, item: Item[T]) -> None:
        """Add an item to the queue."""
        item.index = len(self._heap)
        self._heap.append(item)
        self._up(item.index)

    def pop(self) -> Item[T]:
        """Remove and return the highest-priority item. Raises IndexError when empty."""
        if not self._heap:
            raise IndexError("pop from empty priority queue")
        last = len(self._heap) - 1
        self._swap(0, last)
        self._down(0, last)
        return self._pop_last()

    def update(self, item: Item[T]) -> None:
        """Restore heap order after the item's priority changed."""
        self._check(item)
        if not self._down(item.index, len(self._heap)):
            self._up(item.index)

    def remove(self, item: Item[T]) -> None:
        """Remove the item from the queue."""
        self._check(item)
        index = item.index
        last = len(self._heap) - 1
        if index != last:
            self._swap(index, last)
            if not self._down(index, last):
                self._up(index)
        self._pop_last()

    def clear(self) -> None:
        """Remove every item."""
        for item in self._heap:
            item.index = -1
        self._heap.clear()


@dataclass(eq=False)
class _Entry(Generic[K, T]):
    key: K
    value: T


class PriorityMap(Generic[K, T]):
    """Mapping whose entries carry priorities and pop out highest first."""

    def __init__(self) -> None:
        self._lookup: dict[K, Item[_Entry[K, T]]] = {}
        self._queue: PriorityQueue[_Entry[K, T]] = PriorityQueue()

    def put(self, key: K, value: T, priority: int) -> None:
        """Insert the entry, replacing value and priority if the key exists."""
        item = self._lookup.get(key)
        if item is not None:
            item.priority = priority
            item.value.value = value
            self._queue.update(item)
        else:
            item = Item(_Entry(key, value), priority)
            self._lookup[key] = item
            self._queue.push(item)

    def get(self, key: K) -> tuple[T, int]:
        """Return (value, priority) for the key without removing it."""
        item = self._lookup[key]
        return item.value.value, item.priority

    def remove(self, key: K) -> T:
        """Remove the key and return its value. Raises KeyError if absent."""
        item = self._lookup.pop(key)
        self._queue.remove(item)
        return item.value.value

    def pop(self) -> tuple[K, T, int]:
        """Remove and return (key, value, priority) of the highest entry."""
        if not self._queue:
            raise KeyError("pop from empty priority map")
        item = self._queue.pop()
        del self._lookup[item.value.key]
        return item.value.key, item.value.value, item.priority

    def clear(self) -> None:
        """Remove every entry."""
        self._lookup.clear()
        self._queue.clear()

    def __len__(self) -> int:
        return len(self._queue)

    def __contains__(self, key: object) -> bool:
        return key in self._lookup

    def __iter__(self) -> Iterator[K]:
        return iter(list(self._lookup))

    def __repr__(self) -> str:
        body = ", ".join(
            f"{key!r}: ({item.value.value!r}, {item.priority})" for key, item in self._lookup.items()
        )
        return f"PriorityMap({{{body}}})"