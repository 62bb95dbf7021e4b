"""A mapping from small non-negative integers, backed by a list."""

from __future__ import annotations

from typing import Any, Generic, Iterator, TypeVar

V = TypeVar("V")

_EMPTY = object()


class IndexMap(Generic[V]):
    """Map whose keys are non-negative integers used as list positions.

    The backing list grows to fit the largest key, so huge keys allocate a
    lot of space. Iteration yields entries in ascending key order.
    """

    def __init__(self) -> None:
        self._slots: list[Any] = []

    def _grow(self, index: int) -> None:
        missing = index + 1 - len(self._slots)
        if missing > 0:
            self._slots.extend([_EMPTY] * missing)

    def put(self, index: int, value: V) -> None:
        """Store the value at the index; negative indices are ignored."""
        if index < 0:
            return
        self._grow(index)
        self._slots[index] = value

    def get(self, index: int, default: Any = None) -> V | Any:
        """Return the value at the index, or the default if it is unset."""
        if index < 0 or index >= len(self._slots):
            return default
        value = self._slots[index]
        return default if value is _EMPTY else value

    def delete(self, index: int) -> None:
        """Unset the index. Raises IndexError if it lies outside the storage."""
        if index < 0 or index >= len(self._slots):
            raise IndexError(f"index {index} out of range")
        self._slots[index] = _EMPTY

    def clear(self) -> None:
        """Remove every entry."""
        self._slots.clear()

    def items(self) -> Iterator[tuple[int, V]]:
        """Yield (index, value) pairs for every set index, in order."""
        for index, value in enumerate(list(self._slots)):
            if value is not _EMPTY:
                yield index, value

    def __contains__(self, index: object) -> bool:
        if not isinstance(index, int) or index < 0 or index >= len(self._slots):
            return False
        return self._slots[index] is not _EMPTY

    def __len__(self) -> int:
        return sum(1 for value in self._slots if value is not _EMPTY)

    def __repr__(self) -> str:
        body = ", ".join(f"{index}: {value!r}" for index, value in self.items())
        return f"IndexMap({{{body}}})"