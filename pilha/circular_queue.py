"""A fixed-capacity FIFO queue stored in a ring buffer."""

from __future__ import annotations

__all__ = ["QueueEmptyError", "QueueFullError", "CircularQueue"]

DEFAULT_CAPACITY = 5


class QueueEmptyError(IndexError):
    """Raised when reading from an empty queue."""


class QueueFullError(OverflowError):
    """Raised when adding to a full queue."""


class CircularQueue:
    """Queue of at most ``capacity`` items kept in a ring buffer."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._elements = [0] * capacity
        self._start = 0
        self._end = 0

    def enqueue(self, item: int) -> None:
        """Add ``item`` at the back."""
        if self.is_full():
            raise QueueFullError("Queue is fully")
        self._elements[self._end % self.capacity] = item
        self._end += 1

    def dequeue(self) -> int:
        """Remove and return the front item."""
        if self.is_empty():
            raise QueueEmptyError("Queue is empty")
        item = self._elements[self._start % self.capacity]
        self._start += 1
        return item

    def front(self) -> int:
        """Return the front item without removing it."""
        if self.is_empty():
            raise QueueEmptyError("Queue is empty")
        return self._elements[self._start % self.capacity]

    def is_empty(self) -> bool:
        return self._start == self._end

    def is_full(self) -> bool:
        return self._end - self._start == self.capacity

    def __len__(self) -> int:
        return self._end - self._start

    def render(self) -> str:
        """Return the raw buffer, the cursors and the queued items."""
        raw = "".join(f"{value} " for value in self._elements)
        queued = "".join(
            f"{self._elements[i % self.capacity]} "
            for i in range(self._start, self._end)
        )
        return (
            "=========ON MEMORY========\n"
            f"[{raw}]\n"
            f"START =>{self._start}({self._start % self.capacity})\n"
            f"END =>{self._end}({self._end % self.capacity})\n"
            "=========ON MEMORY========\n"
            f"[{queued}]\n"
        )