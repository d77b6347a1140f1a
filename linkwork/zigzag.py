"""Reorder a node chain as first, last, second, second-to-last, ..."""

from __future__ import annotations

from typing import Iterator, Optional

from linkwork.linked_list import Node, format_chain


def iter_nodes(head: Optional[Node]) -> Iterator[int]:
    """Yield the values of a node chain from ``head`` onward."""
    node = head
    while node is not None:
        yield node.data
        node = node.next


def format_nodes(head: Optional[Node]) -> str:
    """Render a node chain as ``a->b->c->``."""
    return format_chain(iter_nodes(head))


def split_at_mid(head: Optional[Node]) -> Optional[Node]:
    """Cut the chain before its middle node and return the second half."""
    slow = fast = head
    prev: Optional[Node] = None
    while fast is not None and fast.next is not None:
        prev = slow
        slow = slow.next
        fast = fast.next.next
    if prev is not None:
        prev.next = None
    return slow


def reverse_nodes(head: Optional[Node]) -> Optional[Node]:
    """Reverse a chain in place and return its new head."""
    prev: Optional[Node] = None
    current = head
    while current is not None:
        following = current.next
        current.next = prev
        prev = current
        current = following
    return prev


def zigzag(head: Optional[Node]) -> Optional[Node]:
    """Interleave the first half with the reversed second half."""
    right = reverse_nodes(split_at_mid(head))
    left = head
    tail = right
    while left is not None and right is not None:
        next_left = left.next
        next_right = right.next
        left.next = right
        right.next = next_left
        tail = right
        left = next_left
        right = next_right
    if right is not None:
        tail.next = right
    return head