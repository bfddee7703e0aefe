"""A singly linked list of values with head and tail references."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Any

__all__ = ["EmptyListError", "LinkedList"]


class EmptyListError(IndexError):
    """Raised when an operation needs an element but the list has none."""


@dataclass(slots=True)
class _Node:
    value: Any
    next: _Node | None = None


class LinkedList:
    """Singly linked list where index ``-1`` means "the end"."""

    def __init__(self) -> None:
        self._head: _Node | None = None
        self._tail: _Node | None = None
        self._size = 0

    def _nodes(self) -> Iterator[_Node]:
        current = self._head
        while current is not None:
            yield current
            current = current.next

    def _node_at(self, index: int) -> _Node:
        return next(islice(self._nodes(), index, None))

    def add(self, value: Any, index: int = -1) -> None:
        """Insert ``value`` at ``index``; ``-1`` or the current size appends."""
        if index < -1 or index > self._size:
            raise IndexError("Indice invalido")

        node = _Node(value)
        if index in (-1, self._size):
            if self._tail is None:
                self._head = self._tail = node
            else:
                self._tail.next = node
                self._tail = node
        elif index == 0:
            node.next = self._head
            self._head = node
        else:
            previous = self._node_at(index - 1)
            node.next = previous.next
            previous.next = node
            if node.next is None:
                self._tail = node
        self._size += 1

    def remove(self, index: int = -1) -> None:
        """Remove the element at ``index``; ``-1`` removes the last one.

        An index equal to the size removes the last element.
        """
        if self._tail is None:
            raise EmptyListError("List is empty")
        if index == 0:
            self.remove_head()
            return
        if index == -1:
            self.remove_tail()
            return
        if index < -1 or index > self._size:
            raise IndexError("Inaccessible index")

        index = min(index, self._size - 1)
        if index == 0:
            self.remove_head()
            return
        previous = self._node_at(index - 1)
        target = previous.next
        previous.next = target.next
        if target is self._tail:
            self._tail = previous
        self._size -= 1

    def remove_head(self) -> None:
        """Remove the first element."""
        if self._head is None:
            raise EmptyListError("List is empty")
        self._head = self._head.next
        if self._head is None:
            self._tail = None
        self._size -= 1

    def remove_tail(self) -> None:
        """Remove the last element."""
        if self._tail is None:
            raise EmptyListError("List is empty")
        if self._head is self._tail:
            self._head = self._tail = None
        else:
            previous = self._node_at(self._size - 2)
            previous.next = None
            self._tail = previous
        self._size -= 1

    def get(self, index: int) -> Any:
        """Return the value at ``index``.

        Indices beyond the end (up to the size) give the last value and
        negative indices give the first.
        """
        if index > self._size:
            raise IndexError("Inaccessible index")
        if self._head is None:
            raise EmptyListError("List is empty")
        index = max(0, min(index, self._size - 1))
        return self._node_at(index).value

    def first(self) -> Any:
        """Return the first value."""
        if self._head is None:
            raise EmptyListError("List is empty")
        return self._head.value

    def last(self) -> Any:
        """Return the last value."""
        if self._tail is None:
            raise EmptyListError("List is empty")
        return self._tail.value

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in self._nodes())

    def render(self) -> str:
        """Return a listing of every element with its index."""
        lines = ["=========Vamos exibir a lista========="]
        lines.extend(f"{i} - ({value})" for i, value in enumerate(self))
        lines.append("=========Fim da lista=========")
        return "\n".join(lines) + "\n"