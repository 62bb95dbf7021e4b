"""A fixed-size ring buffer that overwrites its oldest entries."""

from __future__ import annotations

from typing import Any, Generic, TypeVar

T = TypeVar("T")


class RingBuffer(Generic[T]):
    """Fixed-size circular buffer.

    Adding to a full buffer overwrites the oldest unread entry. Slots that
    were never written hold None.
    """

    def __init__(self, length: int) -> None:
        if length <= 0:
            raise ValueError("ring buffer length must be positive")
        self._buffer: list[Any] = [None] * length
        self._write = 0
        self._read = 0

    def cap(self) -> int:
        """Return the size of the buffer."""
        return len(self._buffer)

    def __len__(self) -> int:
        return (self._write - self._read) % len(self._buffer)

    def add(self, item: T) -> None:
        """Write an item, advancing the read position if it was overrun."""
        size = len(self._buffer)
        self._buffer[self._write] = item
        self._write = (self._write + 1) % size
        if self._write == self._read:
            self._read = (self._read + 1) % size

    def remove(self) -> tuple[T, bool]:
        """Return the entry at the read position and whether reading advanced.

        When the entry is the last unread one, the read position stays put and
        the flag is False, so the same entry is returned again next time.
        """
        value = self._buffer[self._read]
        following = (self._read + 1) % len(self._buffer)
        if following == self._write:
            return value, False
        self._read = following
        return value, True

    def buffer(self) -> list[T]:
        """Return a copy of every slot, starting from the write position."""
        return self._buffer[self._write:] + self._buffer[: self._write]

    def __repr__(self) -> str:
        return f"RingBuffer({self.buffer()!r})"