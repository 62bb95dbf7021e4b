"""Helpers for growing and reading lists without bounds errors."""

from __future__ import annotations

from typing import Any, MutableSequence, Sequence, TypeVar

T = TypeVar("T")


def grow_add(seq: MutableSequence[Any], index: int, value: Any) -> MutableSequence[Any]:
    """Store the value at the index, padding the list with None if needed.

    The list is changed in place and also returned.
    """
    if index < 0:
        raise IndexError(f"index {index} out of range")
    missing = index + 1 - len(seq)
    if missing > 0:
        seq.extend([None] * missing)
    seq[index] = value
    return seq


def safe_get(seq: Sequence[T], index: int, default: Any = None) -> T | Any:
    """Return the item at the index, or the default when out of bounds."""
    if index < 0 or index >= len(seq):
        return default
    return seq[index]