"""A first-in, first-out queue backed by a circular list."""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")


class QueueFullError(Exception):
    """Raised when an item is added to a full fixed-size queue."""


class Queue(Generic[T]):
    """Circular FIFO queue.

    One slot of the backing list is always left empty, so a queue of length
    ``n`` holds at most ``n - 1`` items before it has to grow. A growable
    queue doubles its storage when full; a fixed queue raises
    :class:`QueueFullError` instead.
    """

    def __init__(self, length: int = 1, *, fixed: bool = False) -> None:
        if length <= 0:
            length = 1
        self._buffer: list[Any] = [None] * length
        self._read = 0
        self._write = 0
        self.fixed = fixed

    @property
    def capacity(self) -> int:
        """Size of the backing storage."""
        return len(self._buffer)

    def grow_double(self) -> None:
        """Double the backing storage, keeping the items in order."""
        items = list(self)
        self._buffer = [None] * (2 * len(self._buffer))
        self._buffer[: len(items)] = items
        self._read = 0
        self._write = len(items)

    def add(self, item: T) -> None:
        """Append an item at the back of the queue."""
        if (self._write + 1) % len(self._buffer) == self._read:
            if self.fixed:
                raise QueueFullError("queue is full")
            self.grow_double()
        self._buffer[self._write] = item
        self._write = (self._write + 1) % len(self._buffer)

    def peek(self) -> T:
        """Return the front item without removing it. Raises IndexError when empty."""
        if self._read == self._write:
            raise IndexError("peek on empty queue")
        return self._buffer[self._read]

    def peek_last(self) -> T:
        """Return the most recently added item. Raises IndexError when empty."""
        if self._read == self._write:
            raise IndexError("peek_last on empty queue")
        return self._buffer[(self._write - 1) % len(self._buffer)]

    def remove(self) -> T:
        """Remove and return the front item. Raises IndexError when empty."""
        if self._read == self._write:
            raise IndexError("remove from empty queue")
        value = self._buffer[self._read]
        self._buffer[self._read] = None
        self._read = (self._read + 1) % len(self._buffer)
        return value

    def __len__(self) -> int:
        return (self._write - self._read) % len(self._buffer)

    def __bool__(self) -> bool:
        return self._read != self._write

    def __iter__(self) -> Iterator[T]:
        size = len(self._buffer)
        return iter([self._buffer[(self._read + offset) % size] for offset in range(len(self))])

    def __repr__(self) -> str:
        return f"Queue({list(self)!r})"


def fixed_queue(length: int) -> Queue[Any]:
    """Create a queue that raises QueueFullError instead of growing."""
    return Queue(length, fixed=True)