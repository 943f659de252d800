"""A generic LIFO stack built on singly linked nodes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


class EmptyStackError(IndexError):
    """Raised when popping or peeking an empty stack."""


@dataclass(slots=True, eq=False)
class _Node(Generic[T]):
    data: T
    next: Optional["_Node[T]"] = None


class Stack(Generic[T]):
    """Last-in, first-out stack; iteration runs from top to bottom."""

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._top: Optional[_Node[T]] = None
        self._count = 0
        for item in items or ():
            self.push(item)

    def push(self, value: T) -> None:
        """Place ``value`` on top of the stack."""
        self._top = _Node(value, self._top)
        self._count += 1

    def pop(self) -> T:
        """Remove and return the top value.

        Raises EmptyStackError if the stack is empty.
        """
        node = self._top
        if node is None:
            raise EmptyStackError("Stack is empty")
        self._top = node.next
        self._count -= 1
        return node.data

    def peek(self) -> T:
        """Return the top value without removing it.

        Raises EmptyStackError if the stack is empty.
        """
        if self._top is None:
            raise EmptyStackError("Stack is empty")
        return self._top.data

    def render(self) -> str:
        """Return the stack drawn one framed value per line, top first."""
        if self._top is None:
            return "Stack is empty"
        return "\n".join(f"|\t{value}\t|" for value in self)

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        node = self._top
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(reversed(list(self)))!r})"