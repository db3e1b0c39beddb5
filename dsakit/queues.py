"""Fixed-size FIFO queues.

``LinearQueue`` never reuses a slot once it has been dequeued, so it accepts
at most ``capacity`` elements over its whole life. ``CircularQueue`` is a ring
of ``size`` slots, one of which is always left free, so it holds at most
``size - 1`` elements at a time and reuses freed slots.
"""

from __future__ import annotations

from collections import deque
from typing import Generic, TypeVar

T = TypeVar("T")


class QueueFullError(Exception):
    """Raised when enqueuing into a queue that has no free slot."""


class QueueEmptyError(Exception):
    """Raised when dequeuing from a queue that holds nothing."""


class LinearQueue(Generic[T]):
    """A queue whose slots are used once, front to back."""

    def __init__(self, capacity: int) -> None:
        if capacity < 0:
            raise ValueError(f"capacity must not be negative, got {capacity}")
        self.capacity = capacity
        self._slots: list[T] = []
        self._front = 0

    def enqueue(self, value: T) -> None:
        """Append ``value``; raises QueueFullError once every slot has been used."""
        if self.is_full():
            raise QueueFullError(f"linear queue used all {self.capacity} slots")
        self._slots.append(value)

    def dequeue(self) -> T:
        """Remove and return the oldest element; raises QueueEmptyError if there is none."""
        if self.is_empty():
            raise QueueEmptyError("linear queue is empty")
        value = self._slots[self._front]
        self._front += 1
        return value

    def is_empty(self) -> bool:
        return self._front == len(self._slots)

    def is_full(self) -> bool:
        return len(self._slots) >= self.capacity

    def __len__(self) -> int:
        return len(self._slots) - self._front


class CircularQueue(Generic[T]):
    """A ring-buffer queue of ``size`` slots holding up to ``size - 1`` elements."""

    def __init__(self, size: int) -> None:
        if size < 1:
            raise ValueError(f"size must be at least 1, got {size}")
        self.size = size
        self._items: deque[T] = deque()

    @property
    def capacity(self) -> int:
        return self.size - 1

    def enqueue(self, value: T) -> None:
        """Append ``value``; raises QueueFullError when all usable slots are taken."""
        if self.is_full():
            raise QueueFullError(f"circular queue holds its maximum of {self.capacity}")
        self._items.append(value)

    def dequeue(self) -> T:
        """Remove and return the oldest element; raises QueueEmptyError if there is none."""
        if self.is_empty():
            raise QueueEmptyError("circular queue is empty")
        return self._items.popleft()

    def is_empty(self) -> bool:
        return not self._items

    def is_full(self) -> bool:
        return len(self._items) >= self.capacity

    def __len__(self) -> int:
        return len(self._items)