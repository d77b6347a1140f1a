import pytest

from linkwork.linked_list import (
    LinkedList,
    format_chain,
    has_cycle,
    remove_cycle,
)


def test_push_back_keeps_order():
    ll = LinkedList()
    for value in [1, 2, 3, 4, 5]:
        ll.push_back(value)
    assert list(ll) == [1, 2, 3, 4, 5]
    assert ll.tail.data == 5


def test_push_front_then_back():
    ll = LinkedList()
    ll.push_front(2)
    ll.push_front(1)
    ll.push_back(3)
    ll.push_back(4)
    ll.push_back(5)
    assert str(ll) == "1->2->3->4->5->"


def test_format_chain_and_str_agree():
    values = [7, 8, 9]
    assert format_chain(values) == str(LinkedList(values))
    assert format_chain([]) == ""


def test_len():
    assert len(LinkedList([4, 5, 6])) == 3
    assert len(LinkedList()) == 0


def test_insert_middle():
    ll = LinkedList([1, 2, 3])
    ll.insert(9, 2)
    assert list(ll) == [1, 2, 9, 3]


def test_insert_at_end_updates_tail():
    ll = LinkedList([1, 2, 3])
    ll.insert(9, 3)
    assert list(ll)[-1] == 9
    assert ll.tail.data == 9
    ll.push_back(10)
    assert list(ll)[-2:] == [9, 10]


@pytest.mark.parametrize("pos", [0, -1, 4, 10])
def test_insert_invalid_position(pos):
    ll = LinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        ll.insert(9, pos)
    assert list(ll) == [1, 2, 3]


def test_pop_front_and_back():
    ll = LinkedList([1, 2, 3])
    assert ll.pop_front() == 1
    assert ll.pop_back() == 3
    assert list(ll) == [2]
    assert ll.pop_back() == 2
    assert len(ll) == 0
    assert ll.head is None and ll.tail is None


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        LinkedList().pop_front()
    with pytest.raises(IndexError):
        LinkedList().pop_back()


def test_index_matches_python_list():
    values = [5, 3, 8, 3]
    ll = LinkedList(values)
    for key in values:
        assert ll.index(key) == values.index(key)
        assert ll.index_recursive(key) == values.index(key)


def test_index_missing():
    ll = LinkedList([1, 2, 3])
    with pytest.raises(ValueError):
        ll.index(42)
    assert ll.index_recursive(42) == -1


def test_reverse():
    values = [1, 2, 3, 4]
    ll = LinkedList(values)
    ll.reverse()
    assert list(ll) == values[::-1]
    assert ll.tail.data == values[0]
    ll.reverse()
    assert list(ll) == values


@pytest.mark.parametrize("values", [[1], [1, 2], [1, 2, 3, 4, 5], [1, 2, 3, 4, 5, 6]])
def test_middle(values):
    assert LinkedList(values).middle() == values[len(values) // 2]


def test_middle_empty():
    with pytest.raises(IndexError):
        LinkedList().middle()


@pytest.mark.parametrize("values", [[], [1], [1, 2, 1], [1, 2, 2, 1]])
def test_palindromes(values):
    ll = LinkedList(values)
    assert ll.is_palindrome()
    assert list(ll) == values


@pytest.mark.parametrize("values", [[1, 2], [1, 2, 3], [1, 2, 3, 1]])
def test_not_palindromes(values):
    assert not LinkedList(values).is_palindrome()


def test_remove_nth_from_end():
    ll = LinkedList([1, 2, 3, 4, 5])
    assert ll.remove_nth_from_end(2) == 4
    assert list(ll) == [1, 2, 3, 5]


def test_remove_last_and_first_from_end():
    ll = LinkedList([1, 2, 3])
    assert ll.remove_nth_from_end(1) == 3
    assert ll.tail.data == 2
    assert ll.remove_nth_from_end(2) == 1
    assert list(ll) == [2]


@pytest.mark.parametrize("n", [0, -3, 4])
def test_remove_nth_invalid(n):
    ll = LinkedList([1, 2, 3])
    with pytest.raises(IndexError):
        ll.remove_nth_from_end(n)


def test_cycle_back_to_head_removed():
    ll = LinkedList([1, 2, 3, 4, 5, 6])
    ll.tail.next = ll.head
    assert has_cycle(ll.head)
    assert remove_cycle(ll.head)
    assert not has_cycle(ll.head)
    assert str(ll) == "1->2->3->4->5->6->"


def test_cycle_into_middle_removed():
    values = [1, 2, 3, 4, 5, 6, 7]
    ll = LinkedList(values)
    ll.tail.next = ll.head.next.next
    assert has_cycle(ll.head)
    assert remove_cycle(ll.head)
    assert list(ll) == values
    assert ll.tail.next is None


def test_no_cycle():
    ll = LinkedList([1, 2, 3])
    assert not has_cycle(ll.head)
    assert not remove_cycle(ll.head)
    assert list(ll) == [1, 2, 3]
    assert not has_cycle(None)