"""Containers for game loops: maps, sequences, queues, buffers and priority structures."""

__all__ = [
    "arraymap",
    "indexmap",
    "minislice",
    "priority",
    "queue",
    "ringbuffer",
    "slices",
    "stack",
]