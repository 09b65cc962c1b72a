"""A first-in, first-out queue with an optional capacity limit."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any, Deque

__all__ = ["QueueFullError", "QueueEmptyError", "BoundedQueue"]


class QueueFullError(Exception):
    """Raised when an item is added to a queue that has reached its capacity."""


class QueueEmptyError(Exception):
    """Raised when an item is taken from or looked at in an empty queue."""


class BoundedQueue:
    """FIFO queue holding any objects, ``None`` included.

    ``max_capacity`` of 0 means the queue has no limit. ``preallocate`` is the
    number of slots the caller expects to need; it is capped at
    ``max_capacity`` when a limit is set. All operations are thread safe.
    """

    def __init__(self, preallocate: int = 0, max_capacity: int = 0) -> None:
        if preallocate < 0:
            raise ValueError(f"preallocate must not be negative: {preallocate}")
        if max_capacity < 0:
            raise ValueError(f"max_capacity must not be negative: {max_capacity}")
        if max_capacity > 0 and preallocate > max_capacity:
            preallocate = max_capacity
        self.preallocate = preallocate
        self.max_capacity = max_capacity
        self._items: Deque[Any] = deque()
        self._lock = threading.Lock()

    def _full(self) -> bool:
        return self.max_capacity > 0 and len(self._items) >= self.max_capacity

    def enqueue(self, item: Any) -> None:
        """Add ``item`` at the back; raise QueueFullError if the limit is reached."""
        with self._lock:
            if self._full():
                raise QueueFullError(f"queue is full ({self.max_capacity} items)")
            self._items.append(item)

    def dequeue(self) -> Any:
        """Remove and return the item at the front."""
        with self._lock:
            if not self._items:
                raise QueueEmptyError("queue is empty")
            return self._items.popleft()

    def peek(self) -> Any:
        """Return the item at the front without removing it."""
        with self._lock:
            if not self._items:
                raise QueueEmptyError("queue is empty")
            return self._items[0]

    def is_empty(self) -> bool:
        """Return True if the queue holds no items."""
        with self._lock:
            return not self._items

    def is_full(self) -> bool:
        """Return True if the queue has a limit and has reached it."""
        with self._lock:
            return self._full()

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)

    def __repr__(self) -> str:
        return f"BoundedQueue(size={len(self)}, max_capacity={self.max_capacity})"