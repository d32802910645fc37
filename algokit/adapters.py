"""Queues built from two stacks and stacks built from two queues."""

from __future__ import annotations

from collections import deque
from typing import Any


class EmptyError(IndexError):
    """Raised when an item is taken from an empty container."""


def _check_capacity(capacity: int) -> int:
    if capacity < 1:
        raise ValueError("capacity must be at least 1")
    return capacity


class PushCostlyQueue:
    """FIFO queue over two stacks; enqueue reorders, dequeue is a single pop."""

    def __init__(self, capacity: int) -> None:
        self._capacity = _check_capacity(capacity)
        self._main: list[Any] = []
        self._spare: list[Any] = []

    def enqueue(self, item: Any) -> None:
        if len(self._main) >= self._capacity:
            raise OverflowError("queue is full")
        while self._main:
            self._spare.append(self._main.pop())
        self._main.append(item)
        while self._spare:
            self._main.append(self._spare.pop())

    def dequeue(self) -> Any:
        if not self._main:
            raise EmptyError("queue is empty")
        return self._main.pop()

    def __len__(self) -> int:
        return len(self._main)


class PopCostlyQueue:
    """FIFO queue over two stacks; dequeue refills the out-stack when it runs dry."""

    def __init__(self, capacity: int) -> None:
        self._capacity = _check_capacity(capacity)
        self._inbox: list[Any] = []
        self._outbox: list[Any] = []

    def enqueue(self, item: Any) -> None:
        if len(self._inbox) >= self._capacity:
            raise OverflowError("queue is full")
        self._inbox.append(item)

    def dequeue(self) -> Any:
        if not self._inbox and not self._outbox:
            raise EmptyError("queue is empty")
        if not self._outbox:
            while self._inbox:
                self._outbox.append(self._inbox.pop())
        return self._outbox.pop()

    def __len__(self) -> int:
        return len(self._inbox) + len(self._outbox)


class PushCostlyStack:
    """LIFO stack over two queues; push reorders, pop is a single dequeue."""

    def __init__(self, capacity: int) -> None:
        self._capacity = _check_capacity(capacity)
        self._primary: deque[Any] = deque()
        self._spare: deque[Any] = deque()

    def push(self, item: Any) -> None:
        if len(self._primary) >= self._capacity:
            raise OverflowError("stack is full")
        self._spare.append(item)
        while self._primary:
            self._spare.append(self._primary.popleft())
        self._primary, self._spare = self._spare, self._primary

    def pop(self) -> Any:
        if not self._primary:
            raise EmptyError("stack is empty")
        return self._primary.popleft()

    def __len__(self) -> int:
        return len(self._primary)


class PopCostlyStack:
    """LIFO stack over two queues; pop moves all but the newest item across."""

    def __init__(self, capacity: int) -> None:
        self._capacity = _check_capacity(capacity)
        self._primary: deque[Any] = deque()
        self._spare: deque[Any] = deque()

    def push(self, item: Any) -> None:
        if len(self._primary) >= self._capacity:
            raise OverflowError("stack is full")
        self._primary.append(item)

    def pop(self) -> Any:
        if not self._primary:
            raise EmptyError("stack is empty")
        while len(self._primary) > 1:
            self._spare.append(self._primary.popleft())
        item = self._primary.popleft()
        self._primary, self._spare = self._spare, self._primary
        return item

    def __len__(self) -> int:
        return len(self._primary)