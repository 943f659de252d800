"""A generic doubly linked linear list with 1-based positional access."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(slots=True, eq=False)
class _Node(Generic[T]):
    data: T
    next: Optional["_Node[T]"] = None
    prev: Optional["_Node[T]"] = None


class DoublyLinkedList(Generic[T]):
    """Doubly linked list; positions passed to insert_at/delete_at start at 1."""

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._first: Optional[_Node[T]] = None
        self._last: Optional[_Node[T]] = None
        self._count = 0
        for item in items or ():
            self.insert_last(item)

    def _node_at(self, position: int) -> _Node[T]:
        """Return the node at 1-based ``position`` (which must be valid)."""
        node = self._first
        for _ in range(position - 1):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert_first(self, value: T) -> None:
        """Insert ``value`` at the head of the list."""
        node = _Node(value, next=self._first)
        if self._first is None:
            self._last = node
        else:
            self._first.prev = node
        self._first = node
        self._count += 1

    def insert_last(self, value: T) -> None:
        """Append ``value`` at the tail of the list."""
        node = _Node(value, prev=self._last)
        if self._last is None:
            self._first = node
        else:
            self._last.next = node
        self._last = node
        self._count += 1

    def insert_at(self, value: T, position: int) -> None:
        """Insert ``value`` so that it ends up at 1-based ``position``.

        Raises IndexError unless ``1 <= position <= len(self) + 1``.
        """
        if position < 1 or position > self._count + 1:
            raise IndexError(f"invalid position {position}")
        if position == 1:
            self.insert_first(value)
        elif position == self._count + 1:
            self.insert_last(value)
        else:
            before = self._node_at(position - 1)
            after = before.next
            assert after is not None
            node = _Node(value, next=after, prev=before)
            after.prev = node
            before.next = node
            self._count += 1

    def delete_first(self) -> Optional[T]:
        """Remove the head; return its value, or None if the list is empty."""
        removed = self._first
        if removed is None:
            return None
        self._first = removed.next
        if self._first is None:
            self._last = None
        else:
            self._first.prev = None
        self._count -= 1
        return removed.data

    def delete_last(self) -> Optional[T]:
        """Remove the tail; return its value, or None if the list is empty."""
        removed = self._last
        if removed is None:
            return None
        self._last = removed.prev
        if self._last is None:
            self._first = None
        else:
            self._last.next = None
        self._count -= 1
        return removed.data

    def delete_at(self, position: int) -> T:
        """Remove and return the element at 1-based ``position``.

        Raises IndexError unless ``1 <= position <= len(self)``.
        """
        if position < 1 or position > self._count:
            raise IndexError(f"invalid position {position}")
        if position == 1:
            value = self.delete_first()
        elif position == self._count:
            value = self.delete_last()
        else:
            target = self._node_at(position)
            assert target.prev is not None and target.next is not None
            target.prev.next = target.next
            target.next.prev = target.prev
            self._count -= 1
            value = target.data
        return value  # type: ignore[return-value]

    def render(self) -> str:
        """Return the list drawn as ``NULL <=>| a |<=> | b |<=> NULL``."""
        return "NULL <=>" + "".join(f"| {value} |<=> " for value in self) + "NULL"

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        node = self._first
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._last
        while node is not None:
            yield node.data
            node = node.prev

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, DoublyLinkedList):
            return NotImplemented
        return list(self) == list(other)