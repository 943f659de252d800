"""A generic FIFO queue built on singly linked nodes with a tail pointer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class EmptyQueueError(IndexError):
    """Raised when dequeuing from an empty queue."""


@dataclass(slots=True, eq=False)
class _Node(Generic[T]):
    data: T
    next: Optional["_Node[T]"] = None


class Queue(Generic[T]):
    """First-in, first-out queue; iteration runs from front to back."""

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._first: Optional[_Node[T]] = None
        self._last: Optional[_Node[T]] = None
        self._count = 0
        for item in items or ():
            self.enqueue(item)

    def enqueue(self, value: T) -> None:
        """Add ``value`` at the back of the queue."""
        node = _Node(value)
        if self._last is None:
            self._first = node
        else:
            self._last.next = node
        self._last = node
        self._count += 1

    def dequeue(self) -> T:
        """Remove and return the value at the front.

        Raises EmptyQueueError if the queue is empty.
        """
        node = self._first
        if node is None:
            raise EmptyQueueError("Queue is empty")
        self._first = node.next
        if self._first is None:
            self._last = None
        self._count -= 1
        return node.data

    def render(self) -> str:
        """Return the queue drawn as ``| a | | b | `` from front to back."""
        if self._first is None:
            return "Queue is empty"
        return "".join(f"| {value} | " for value in self)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        node = self._first
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"