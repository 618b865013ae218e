import pytest

from singlylinked.linked_list import LinkedList, ListIterator, Node


def test_empty_list_has_no_head():
    ll = LinkedList()
    assert ll.head is None
    assert len(ll) == 0
    assert list(ll) == []


def test_constructor_values_in_order():
    ll = LinkedList([5, 6, 7])
    assert list(ll) == [5, 6, 7]
    assert len(ll) == 3


def test_insert_end_appends():
    ll = LinkedList()
    for i in range(1, 5):
        ll.insert_end(i)
    assert list(ll) == [1, 2, 3, 4]


def test_insert_front_prepends():
    ll = LinkedList()
    for i in (4, 3, 2, 1):
        ll.insert_front(i)
    assert list(ll) == [1, 2, 3, 4]
    assert len(ll) == 4


def test_insert_at_zero_is_front():
    ll = LinkedList([2, 3])
    ll.insert(0, 1)
    assert list(ll) == [1, 2, 3]


def test_insert_middle_and_end():
    ll = LinkedList([1, 3])
    ll.insert(1, 2)
    assert list(ll) == [1, 2, 3]
    ll.insert(3, 4)
    assert list(ll) == [1, 2, 3, 4]


def test_insert_past_end_raises():
    ll = LinkedList([1])
    with pytest.raises(IndexError):
        ll.insert(3, 9)
    assert list(ll) == [1]


def test_insert_into_empty_at_nonzero_raises():
    with pytest.raises(IndexError):
        LinkedList().insert(1, 9)


def test_find_returns_first_index():
    ll = LinkedList([7, 8, 7])
    assert ll.find(7) == 0
    assert list(ll)[ll.find(8)] == 8


def test_find_missing_raises():
    with pytest.raises(ValueError):
        LinkedList([1, 2]).find(3)
    with pytest.raises(ValueError):
        LinkedList().find(3)


def test_remove_head_middle_tail():
    ll = LinkedList([1, 2, 3, 4])
    assert ll.remove(0) == 1
    assert list(ll) == [2, 3, 4]
    assert ll.remove(1) == 3
    assert list(ll) == [2, 4]
    assert ll.remove(1) == 4
    assert list(ll) == [2]


def test_remove_errors():
    with pytest.raises(IndexError):
        LinkedList().remove(0)
    ll = LinkedList([1, 2])
    with pytest.raises(IndexError):
        ll.remove(2)
    assert list(ll) == [1, 2]


def test_clear_empties_list():
    ll = LinkedList([1, 2, 3])
    ll.clear()
    assert ll.head is None
    assert len(ll) == 0


def test_data_validation():
    ll = LinkedList()
    with pytest.raises(ValueError):
        ll.insert_end(-1)
    with pytest.raises(ValueError):
        ll.insert_front(2**32)
    with pytest.raises(TypeError):
        ll.insert(0, "x")
    assert len(ll) == 0


def test_iterator_walks_list():
    ll = LinkedList([1, 2, 3, 4])
    it = ll.iterator(0)
    seen = [(it.current_index, it.data)]
    while it.advance():
        seen.append((it.current_index, it.data))
    assert seen == [(i, v) for i, v in enumerate(list(ll))]
    assert it.advance() is False
    assert it.data == 4


def test_iterator_at_index():
    ll = LinkedList([10, 20, 30])
    it = ListIterator(ll, 2)
    assert it.data == 30
    assert it.current_index == 2
    assert it.linked_list is ll


def test_iterator_on_empty_list_raises():
    with pytest.raises(IndexError):
        LinkedList().iterator(0)


def test_iterator_out_of_range_raises():
    with pytest.raises(IndexError):
        LinkedList([1]).iterator(1)


def test_head_is_node_chain():
    ll = LinkedList([1, 2])
    assert ll.head == Node(1, Node(2))