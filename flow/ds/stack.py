"""A last-in, first-out stack."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")


@dataclass
class Stack(Generic[T]):
    """Stack backed by a list; the end of ``buffer`` is the top."""

    buffer: list[T] = field(default_factory=list)

    def add(self, item: T) -> None:
        """Push an item on top."""
        self.buffer.append(item)

    def remove(self) -> T:
        """Pop and return the top item. Raises IndexError when empty."""
        if not self.buffer:
            raise IndexError("remove from empty stack")
        return self.buffer.pop()

    def __len__(self) -> int:
        return len(self.buffer)

    def __iter__(self) -> Iterator[T]:
        return iter(list(self.buffer))