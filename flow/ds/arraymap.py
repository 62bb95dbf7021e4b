"""A small mapping kept in a list, for fast iteration over few keys."""

from __future__ import annotations

from typing import Any, Generic, Hashable, Iterator, TypeVar

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class ArrayMap(Generic[K, V]):
    """Map backed by a list of key/value pairs.

    Iteration is fast and follows insertion order, but lookups are linear.
    Deleting a key moves the last entry into the freed position.
    """

    def __init__(self) -> None:
        self._entries: list[tuple[K, V]] = []

    def _find(self, key: K) -> int:
        for position, (entry_key, _) in enumerate(self._entries):
            if entry_key == key:
                return position
        return -1

    def put(self, key: K, value: V) -> None:
        """Insert the value, replacing the current one if the key exists."""
        position = self._find(key)
        if position < 0:
            self._entries.append((key, value))
        else:
            self._entries[position] = (key, value)

    def get(self, key: K, default: Any = None) -> V | Any:
        """Return the value stored for the key, or the default."""
        position = self._find(key)
        if position < 0:
            return default
        return self._entries[position][1]

    def delete(self, key: K) -> None:
        """Remove the key if present, filling its slot with the last entry."""
        position = self._find(key)
        if position < 0:
            return
        last = self._entries.pop()
        if position < len(self._entries):
            self._entries[position] = last

    def clear(self) -> None:
        """Remove every entry."""
        self._entries.clear()

    def items(self) -> Iterator[tuple[K, V]]:
        """Yield (key, value) pairs in storage order."""
        yield from list(self._entries)

    def __contains__(self, key: object) -> bool:
        return self._find(key) >= 0  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[K]:
        return (key for key, _ in list(self._entries))

    def __repr__(self) -> str:
        body = ", ".join(f"{key!r}: {value!r}" for key, value in self._entries)
        return f"ArrayMap({{{body}}})"