"""Singly linked list of integers and cycle helpers for raw node chains."""

from __future__ import annotations

from dataclasses import dataclass
from itertools import islice
from typing import Iterable, Iterator, Optional


@dataclass(eq=False, repr=False)
class Node:
    """A single link holding one value."""

    data: int
    next: Optional["Node"] = None

    def __repr__(self) -> str:
        return f"Node({self.data!r})"


def format_chain(values: Iterable[int]) -> str:
    """Render values as ``a->b->c->``."""
    return "".join(f"{value}->" for value in values)


class LinkedList:
    """A singly linked list that keeps both a head and a tail reference."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Optional[Node] = None
        self.tail: Optional[Node] = None
        for value in values:
            self.push_back(value)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, val: int) -> None:
        """Add a value before the current head."""
        node = Node(val, self.head)
        if self.head is None:
            self.tail = node
        self.head = node

    def push_back(self, val: int) -> None:
        """Add a value after the current tail."""
        node = Node(val)
        if self.head is None:
            self.head = self.tail = node
        else:
            assert self.tail is not None
            self.tail.next = node
            self.tail = node

    def insert(self, val: int, pos: int) -> None:
        """Insert a value so that it ends up at index ``pos`` (1 to len)."""
        if pos < 1 or pos > len(self):
            raise IndexError(f"invalid position: {pos}")
        prev = next(islice(self._nodes(), pos - 1, None))
        prev.next = Node(val, prev.next)
        if prev is self.tail:
            self.tail = prev.next

    def pop_front(self) -> int:
        """Remove and return the first value."""
        if self.head is None:
            raise IndexError("list is empty")
        node = self.head
        self.head = node.next
        if self.head is None:
            self.tail = None
        node.next = None
        return node.data

    def pop_back(self) -> int:
        """Remove and return the last value."""
        if self.head is None:
            raise IndexError("list is empty")
        last = self.tail
        if self.head is last:
            self.head = self.tail = None
            return last.data
        prev = self.head
        while prev.next is not last:
            prev = prev.next
        prev.next = None
        self.tail = prev
        return last.data

    def index(self, key: int) -> int:
        """Return the position of the first node holding ``key``."""
        for pos, node in enumerate(self._nodes()):
            if node.data == key:
                return pos
        raise ValueError(f"{key!r} not found in list")

    def index_recursive(self, key: int) -> int:
        """Return the position of ``key`` found recursively, or -1."""

        def search(node: Optional[Node]) -> int:
            if node is None:
                return -1
            if node.data == key:
                return 0
            found = search(node.next)
            return -1 if found == -1 else found + 1

        return search(self.head)

    def reverse(self) -> None:
        """Reverse the list in place."""
        prev: Optional[Node] = None
        current = self.head
        self.tail = current
        while current is not None:
            following = current.next
            current.next = prev
            prev = current
            current = following
        self.head = prev

    def middle(self) -> int:
        """Return the middle value (the second of two for even lengths)."""
        if self.head is None:
            raise IndexError("list is empty")
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            fast = fast.next.next
            slow = slow.next
        return slow.data

    def is_palindrome(self) -> bool:
        """Tell whether the values read the same in both directions."""
        values = list(self)
        half = len(values) // 2
        return values[:half] == values[::-1][:half]

    def remove_nth_from_end(self, n: int) -> int:
        """Remove and return the n-th value counted from the end (1-based)."""
        size = len(self)
        if n <= 0 or n > size:
            raise IndexError(f"invalid position to delete: {n}")
        if n == size:
            return self.pop_front()
        prev = next(islice(self._nodes(), size - n - 1, None))
        removed = prev.next
        prev.next = removed.next
        if removed is self.tail:
            self.tail = prev
        removed.next = None
        return removed.data

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __str__(self) -> str:
        return format_chain(self)


def has_cycle(head: Optional[Node]) -> bool:
    """Detect a loop in a node chain with the slow/fast pointer method."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
        if fast is slow:
            return True
    return False


def remove_cycle(head: Optional[Node]) -> bool:
    """Break a loop in a node chain; return whether one was found."""
    slow = fast = head
    while fast is not None and fast.next is not None:
        fast = fast.next.next
        slow = slow.next
        if fast is slow:
            break
    else:
        return False

    slow = head
    if slow is fast:
        while fast.next is not slow:
            fast = fast.next
        fast.next = None
        return True

    prev = fast
    while fast is not slow:
        prev = fast
        fast = fast.next
        slow = slow.next
    prev.next = None
    return True