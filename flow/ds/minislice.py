"""A sequence that keeps its first few elements in a fixed-size block."""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

T = TypeVar("T")

MAX_CAPACITY = 16


class MiniSlice(Generic[T]):
    """Sequence whose first ``capacity`` elements live in a fixed block.

    Elements beyond the fixed block go into an overflow list. Deleting an
    element swaps the last element into its place.
    """

    def __init__(self, capacity: int = 8) -> None:
        if not 1 <= capacity <= MAX_CAPACITY:
            raise ValueError(f"capacity must be between 1 and {MAX_CAPACITY}")
        self._array: list[Any] = [None] * capacity
        self._array_len = 0
        self._overflow: list[T] = []

    def _locate(self, index: int) -> tuple[bool, int]:
        if index < 0:
            raise IndexError(f"index {index} out of range")
        capacity = len(self._array)
        if index >= capacity:
            return False, index - capacity
        return True, index

    def get(self, index: int) -> T:
        """Return the element at the index."""
        in_array, inner = self._locate(index)
        if in_array:
            return self._array[inner]
        return self._overflow[inner]

    def set(self, index: int, value: T) -> None:
        """Replace the element at the index."""
        in_array, inner = self._locate(index)
        if in_array:
            self._array[inner] = value
        else:
            self._overflow[inner] = value

    def append(self, value: T) -> None:
        """Add an element at the end."""
        if self._array_len >= len(self._array):
            self._overflow.append(value)
            return
        self._array[self._array_len] = value
        self._array_len += 1

    def find(self, value: T) -> int:
        """Return the index of the first equal element, or -1."""
        for index, item in self.all():
            if item == value:
                return index
        return -1

    def delete(self, index: int) -> None:
        """Remove the element at the index by moving the last element into it.

        Indices outside the sequence are ignored.
        """
        if index < 0 or index >= len(self):
            return
        self.set(index, self.get(len(self) - 1))
        self.slice_last()

    def slice_last(self) -> None:
        """Drop the last element."""
        if len(self) == 0:
            raise IndexError("slice_last on empty MiniSlice")
        if self._overflow:
            self._overflow.pop()
        else:
            self._array_len -= 1

    def clear(self) -> None:
        """Remove every element; the next append starts at index 0."""
        self._array_len = 0
        self._overflow.clear()

    def all(self) -> Iterator[tuple[int, T]]:
        """Yield (index, element) pairs from the first to the last element."""
        for index in range(self._array_len):
            yield index, self._array[index]
        offset = self._array_len
        for position, value in enumerate(self._overflow):
            yield position + offset, value

    def __len__(self) -> int:
        return self._array_len + len(self._overflow)

    def __iter__(self) -> Iterator[T]:
        return (value for _, value in self.all())

    def __repr__(self) -> str:
        return f"MiniSlice({list(self)!r})"