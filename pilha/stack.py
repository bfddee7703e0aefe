"""A fixed-capacity LIFO stack."""

from __future__ import annotations

__all__ = ["StackUnderflowError", "StackOverflowError", "Stack"]

DEFAULT_CAPACITY = 10


class StackUnderflowError(IndexError):
    """Raised when reading from an empty stack."""


class StackOverflowError(OverflowError):
    """Raised when pushing onto a full stack."""


class Stack:
    """Stack holding at most ``capacity`` items."""

    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._elements: list[int] = []

    def push(self, x: int) -> None:
        """Put ``x`` on top."""
        if self.is_full():
            raise StackOverflowError("Stack is full")
        self._elements.append(x)

    def pop(self) -> int:
        """Remove and return the top item."""
        if self.is_empty():
            raise StackUnderflowError("Stack is empty")
        return self._elements.pop()

    def peek(self) -> int:
        """Return the top item without removing it."""
        if self.is_empty():
            raise StackUnderflowError("Stack is empty")
        return self._elements[-1]

    def is_empty(self) -> bool:
        return not self._elements

    def is_full(self) -> bool:
        return len(self._elements) == self.capacity

    def __len__(self) -> int:
        return len(self._elements)

    def render(self) -> str:
        """Return the stack drawn from top to base."""
        lines = [f"STACK({len(self._elements)})", "==========TOPO==========="]
        lines.extend(f"[{value}]" for value in reversed(self._elements))
        lines.append("=========BASE============")
        return "\n".join(lines) + "\n"