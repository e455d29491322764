"""Fixed-capacity FIFO ring buffer safe for concurrent use."""

from __future__ import annotations

import threading
from typing import Any

_EMPTY = object()


class RingBuffer:
    """A bounded FIFO queue whose capacity is a power of two."""

    def __init__(self, capacity: int) -> None:
        if (
            not isinstance(capacity, int)
            or isinstance(capacity, bool)
            or capacity <= 0
            or capacity & (capacity - 1)
        ):
            raise ValueError("capacity must be a power of two")
        self._slots: list[Any] = [_EMPTY] * capacity
        self._mask = capacity - 1
        self._head = 0  # next write position
        self._tail = 0  # next read position
        self._lock = threading.Lock()

    def push(self, value: Any) -> bool:
        """Append ``value``; return False without storing it if the buffer is full."""
        with self._lock:
            if self._head - self._tail >= len(self._slots):
                return False
            self._slots[self._head & self._mask] = value
            self._head += 1
            return True

    def pop(self) -> Any:
        """Remove and return the oldest value; raise IndexError if empty."""
        with self._lock:
            if self._head == self._tail:
                raise IndexError("pop from an empty ring buffer")
            pos = self._tail & self._mask
            value = self._slots[pos]
            self._slots[pos] = _EMPTY
            self._tail += 1
            return value

    def __len__(self) -> int:
        with self._lock:
            return self._head - self._tail

    def capacity(self) -> int:
        """Return the maximum number of values the buffer can hold."""
        return len(self._slots)