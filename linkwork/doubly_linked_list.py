"""Doubly linked list of integers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Optional


@dataclass(eq=False, repr=False)
class DoublyNode:
    """A link with references in both directions."""

    data: int
    next: Optional["DoublyNode"] = None
    prev: Optional["DoublyNode"] = None

    def __repr__(self) -> str:
        return f"DoublyNode({self.data!r})"


class DoublyLinkedList:
    """A list that grows and shrinks at the front."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Optional[DoublyNode] = None
        self.tail: Optional[DoublyNode] = None
        for value in reversed(list(values)):
            self.push_front(value)

    def push_front(self, val: int) -> None:
        """Add a value before the current head."""
        node = DoublyNode(val, next=self.head)
        if self.head is None:
            self.tail = node
        else:
            self.head.prev = node
        self.head = node

    def pop_front(self) -> int:
        """Remove and return the first value."""
        if self.head is None:
            raise IndexError("linked list is empty")
        node = self.head
        self.head = node.next
        if self.head is None:
            self.tail = None
        else:
            self.head.prev = None
        node.next = None
        return node.data

    def __iter__(self) -> Iterator[int]:
        node = self.head
        while node is not None:
            yield node.data
            node = node.next

    def __len__(self) -> int:
        return sum(1 for _ in self)

    def __str__(self) -> str:
        return "".join(f"{value} <=> " for value in self) + "NULL"