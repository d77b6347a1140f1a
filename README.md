# linkwork

This package provides singly and doubly linked lists of integers as plain
Python objects. It includes the classic algorithms that go with them, such as
reversal, finding the middle, palindrome checks, cycle detection and removal,
and zig-zag reordering. It also has a primality test and two factorial
functions.

## Install

```
pip install linkwork
```

## Singly linked list (`linkwork.linked_list`)

```python
from linkwork.linked_list import LinkedList, Node, has_cycle, remove_cycle, format_chain

ll = LinkedList([1, 2, 3])
ll.push_front(0)
ll.push_back(4)
print(ll)                  # 0->1->2->3->4->
print(len(ll), list(ll))   # 5 [0, 1, 2, 3, 4]

ll.index(3)                # 3
ll.index_recursive(3)      # 3
ll.index_recursive(99)     # -1
ll.middle()                # 2
ll.reverse()
print(ll)                  # 4->3->2->1->0->
ll.is_palindrome()         # False
ll.remove_nth_from_end(2)  # 1
```

`LinkedList` keeps a `head` and a `tail` reference to `Node` objects. Each
node has the fields `data` and `next`.

| Method | What it does |
| --- | --- |
| `push_front(val)` / `push_back(val)` | Add a value at either end. |
| `insert(val, pos)` | Insert so the value ends up at index `pos`. The index must be between 1 and `len(list)`, otherwise `IndexError` is raised. |
| `pop_front()` / `pop_back()` | Remove and return a value from either end. Both raise `IndexError` when the list is empty. |
| `index(key)` | Return the position of the first match. Raises `ValueError` if the key is absent. |
| `index_recursive(key)` | Same search done recursively. Returns `-1` if the key is absent. |
| `reverse()` | Reverse the list in place. |
| `middle()` | Return the middle value; for an even length, the second of the two middle values. Raises `IndexError` on an empty list. |
| `is_palindrome()` | Check whether the values read the same both ways. |
| `remove_nth_from_end(n)` | Remove and return the n-th value from the end, counting from 1. Raises `IndexError` if `n` is out of range. |

The following functions work on a raw chain of `Node` objects given by its head:

- `has_cycle(head)` reports whether the chain loops back on itself.
- `remove_cycle(head)` breaks such a loop. It returns `True` if a loop was found and `False` otherwise.
- `format_chain(values)` renders any iterable of values in the `a->b->` style.

```python
ll = LinkedList([1, 2, 3, 4, 5, 6])
ll.tail.next = ll.head     # make a loop
has_cycle(ll.head)         # True
remove_cycle(ll.head)      # True
print(ll)                  # 1->2->3->4->5->6->
```

## Zig-zag reordering (`linkwork.zigzag`)

```python
from linkwork.linked_list import LinkedList
from linkwork.zigzag import zigzag, format_nodes

ll = LinkedList([1, 2, 3, 4, 5, 6])
print(format_nodes(zigzag(ll.head)))   # 1->6->2->5->3->4->
```

`zigzag(head)` interleaves the first half of a chain with its reversed second
half, in place, and returns the head. The building blocks are also available:

- `split_at_mid(head)` cuts the chain before its middle node and returns the second half.
- `reverse_nodes(head)` reverses a chain and returns its new head.
- `iter_nodes(head)` yields the values of a chain.
- `format_nodes(head)` renders a chain as `a->b->`.

After `zigzag`, the `tail` attribute of a `LinkedList` is not updated.

## Doubly linked list (`linkwork.doubly_linked_list`)

```python
from linkwork.doubly_linked_list import DoublyLinkedList

dl = DoublyLinkedList()
for value in (4, 3, 2, 1):
    dl.push_front(value)
print(dl)          # 1 <=> 2 <=> 3 <=> 4 <=> NULL
dl.pop_front()     # 1
print(dl)          # 2 <=> 3 <=> 4 <=> NULL
```

`DoublyLinkedList(values)` builds a list holding the given values in order. It
supports the following operations:

- `push_front` and `pop_front`.
- Iteration and `len()`.
- `pop_front()` on an empty list raises `IndexError`.

Its nodes are `DoublyNode` objects with the fields `data`, `next` and `prev`.

## Numbers (`linkwork.numbers`)

```python
from linkwork.numbers import is_prime, factorial, factorial_recursive

is_prime(13)              # True
is_prime(1)               # False
factorial(5)              # 120
factorial_recursive(5)    # 120
```

Negative arguments to either factorial function raise `ValueError`.

## What it does not do

This is a library only. It has no command-line program, and nothing is
printed by its functions: results are returned and errors are raised. The
doubly linked list only grows and shrinks at the front.

## Tests

```
pip install -e ".[test]"
pytest
```