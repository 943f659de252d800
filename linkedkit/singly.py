"""A generic singly linked linear list with 1-based positional access."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, Iterable, Iterator, Optional, TypeVar

T = TypeVar("T")


@dataclass(slots=True)
class _Node(Generic[T]):
    data: T
    next: Optional["_Node[T]"] = None


class SinglyLinkedList(Generic[T]):
    """Singly linked list; positions passed to insert_at/delete_at start at 1."""

    def __init__(self, items: Iterable[T] | None = None) -> None:
        self._first: Optional[_Node[T]] = None
        self._count = 0
        for item in items or ():
            self.insert_last(item)

    def _node_before(self, position: int) -> _Node[T]:
        """Return the node at 1-based ``position - 1``."""
        node = self._first
        for _ in range(position - 2):
            assert node is not None
            node = node.next
        assert node is not None
        return node

    def insert_first(self, value: T) -> None:
        """Insert ``value`` at the head of the list."""
        self._first = _Node(value, self._first)
        self._count += 1

    def insert_last(self, value: T) -> None:
        """Append ``value`` at the tail of the list."""
        node = _Node(value)
        if self._first is None:
            self._first = node
        else:
            tail = self._first
            while tail.next is not None:
                tail = tail.next
            tail.next = node
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
            before = self._node_before(position)
            before.next = _Node(value, before.next)
            self._count += 1

    def delete_first(self) -> Optional[T]:
        """Remove the head; return its value, or None if the list is empty."""
        if self._first is None:
            return None
        removed = self._first
        self._first = removed.next
        self._count -= 1
        return removed.data

    def delete_last(self) -> Optional[T]:
        """Remove the tail; return its value, or None if the list is empty."""
        if self._first is None:
            return None
        if self._first.next is None:
            removed = self._first
            self._first = None
        else:
            node = self._first
            while node.next is not None and node.next.next is not None:
                node = node.next
            removed = node.next
            node.next = None
        self._count -= 1
        assert removed is not None
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
            before = self._node_before(position)
            target = before.next
            assert target is not None
            before.next = target.next
            self._count -= 1
            value = target.data
        return value  # type: ignore[return-value]

    def render(self) -> str:
        """Return the list drawn as ``| a | -> | b | -> NULL``."""
        return "".join(f"| {value} | -> " for value in self) + "NULL"

    def __len__(self) -> int:
        return self._count

    def __iter__(self) -> Iterator[T]:
        node = self._first
        while node is not None:
            yield node.data
            node = node.next

    def __repr__(self) -> str:
        return f"{type(self).__name__}({list(self)!r})"

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, SinglyLinkedList):
            return NotImplemented
        return list(self) == list(other)