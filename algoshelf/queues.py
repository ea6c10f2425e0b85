"""A bounded, array-backed linear queue."""

from __future__ import annotations

from typing import Any, Iterator, List

__all__ = ["QueueFullError", "QueueEmptyError", "ArrayQueue"]


class QueueFullError(Exception):
    """Raised when enqueuing onto a full queue."""


class QueueEmptyError(Exception):
    """Raised when dequeuing from an empty queue."""


class ArrayQueue:
    """A linear queue over a fixed number of slots.

    Slots are used once: after ``size`` enqueues the queue reports full,
    even if elements have since been dequeued.
    """

    def __init__(self, size: int = 100) -> None:
        if size < 1:
            raise ValueError("size must be positive")
        self.size = size
        self._slots: List[Any] = []
        self._front = 0

    def is_full(self) -> bool:
        return len(self._slots) == self.size

    def is_empty(self) -> bool:
        return self._front == len(self._slots)

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the rear."""
        if self.is_full():
            raise QueueFullError("queue is full")
        self._slots.append(value)

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._front]
        self._front += 1
        return value

    def __iter__(self) -> Iterator[Any]:
        """Yield the queued values from rear to front."""
        return reversed(self._slots[self._front:])

    def __len__(self) -> int:
        return len(self._slots) - self._front