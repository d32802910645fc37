"""Bounded and unbounded circular FIFO queues."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Any


class QueueFullError(Exception):
    """Raised when a value is added to a queue that has no free slot."""


class QueueEmptyError(Exception):
    """Raised when a value is taken from an empty queue."""


class ArrayCircularQueue:
    """A fixed-capacity FIFO queue stored in a ring of slots."""

    def __init__(self, capacity: int = 5) -> None:
        if capacity < 1:
            raise ValueError("capacity must be at least 1")
        self._slots: list[Any] = [None] * capacity
        self._front = 0
        self._size = 0

    @property
    def capacity(self) -> int:
        return len(self._slots)

    def is_full(self) -> bool:
        return self._size == len(self._slots)

    def is_empty(self) -> bool:
        return self._size == 0

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the rear."""
        if self.is_full():
            raise QueueFullError("queue is full")
        rear = (self._front + self._size) % len(self._slots)
        self._slots[rear] = value
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self.is_empty():
            raise QueueEmptyError("queue is empty")
        value = self._slots[self._front]
        self._slots[self._front] = None
        self._size -= 1
        self._front = 0 if self._size == 0 else (self._front + 1) % len(self._slots)
        return value

    def __iter__(self) -> Iterator[Any]:
        capacity = len(self._slots)
        for offset in range(self._size):
            yield self._slots[(self._front + offset) % capacity]

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r}, capacity={self.capacity})"


@dataclass(eq=False, slots=True)
class _Node:
    value: Any
    next: _Node | None = None


class LinkedCircularQueue:
    """An unbounded FIFO queue kept as a ring of linked nodes."""

    def __init__(self) -> None:
        self._rear: _Node | None = None
        self._size = 0

    def is_empty(self) -> bool:
        return self._rear is None

    def enqueue(self, value: Any) -> None:
        """Append ``value`` at the rear."""
        node = _Node(value)
        if self._rear is None:
            node.next = node
        else:
            node.next = self._rear.next
            self._rear.next = node
        self._rear = node
        self._size += 1

    def dequeue(self) -> Any:
        """Remove and return the value at the front."""
        if self._rear is None:
            raise QueueEmptyError("queue is empty")
        front = self._rear.next
        assert front is not None
        if front is self._rear:
            self._rear = None
        else:
            self._rear.next = front.next
        self._size -= 1
        return front.value

    def __iter__(self) -> Iterator[Any]:
        if self._rear is None:
            return
        node = self._rear.next
        for _ in range(self._size):
            assert node is not None
            yield node.value
            node = node.next

    def __len__(self) -> int:
        return self._size

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"