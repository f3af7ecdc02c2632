"""A thread-safe FIFO queue whose operations never block."""

from __future__ import annotations

import threading
from collections import deque
from typing import Any


class WorkQueue:
    """FIFO queue shared between producer and consumer threads.

    ``pop_front`` never waits: it raises :class:`IndexError` when the queue
    holds nothing, so callers can poll while other work is still running.
    """

    def __init__(self) -> None:
        self._items: deque[Any] = deque()
        self._lock = threading.Lock()

    def push_back(self, value: Any) -> None:
        """Append ``value`` to the back of the queue."""
        with self._lock:
            self._items.append(value)

    def pop_front(self) -> Any:
        """Remove and return the front element; raise IndexError if empty."""
        with self._lock:
            if not self._items:
                raise IndexError("pop from an empty queue")
            return self._items.popleft()

    def is_empty(self) -> bool:
        """Return True when the queue holds no elements."""
        with self._lock:
            return not self._items

    def __len__(self) -> int:
        with self._lock:
            return len(self._items)