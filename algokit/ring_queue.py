"""Fixed-capacity FIFO queue on a ring buffer."""

from __future__ import annotations

from typing import Any, List

__all__ = ["Queue"]


class Queue:
    """A first-in first-out queue holding at most ``capacity`` values."""

    def __init__(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._storage: List[Any] = [None] * capacity
        self._position = 0
        self._size = 0

    def __len__(self) -> int:
        return self._size

    @property
    def capacity(self) -> int:
        return len(self._storage)

    def _head(self) -> int:
        if self._size == 0:
            raise IndexError("queue is empty")
        return (self._position + self._size) % len(self._storage)

    def front(self) -> Any:
        """Return the value at the front of the queue."""
        return self._storage[self._head()]

    def enqueue(self, value: Any) -> None:
        """Add ``value`` to the back of the queue."""
        if self._size >= len(self._storage):
            raise IndexError("enqueue onto full queue")
        self._storage[self._position] = value
        self._size += 1
        self._position = (self._position - 1) % len(self._storage)

    def dequeue(self) -> Any:
        """Remove and return the value at the front of the queue."""
        index = self._head()
        value = self._storage[index]
        self._storage[index] = None
        self._size -= 1
        return value

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == len(self._storage)