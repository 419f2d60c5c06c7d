import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.linked_list import DoublyLinkedList, SinglyLinkedList


def _singly(values):
    lst = SinglyLinkedList()
    for value in values:
        lst.insert_last(value)
    return lst


def test_insert_last_keeps_order_and_str_format():
    lst = _singly([5, 10, 15, 20, 25])
    assert list(lst) == [5, 10, 15, 20, 25]
    assert len(lst) == 5
    assert str(lst) == "5 -> 10 -> 15 -> 20 -> 25 -> NULL"


def test_empty_str():
    assert str(SinglyLinkedList()) == "List is empty"


def test_insert_head_prepends():
    lst = _singly([2, 3])
    lst.insert_head(1)
    assert list(lst) == [1, 2, 3]


def test_insert_after_and_before():
    lst = _singly([1, 3])
    lst.insert_after(1, 2)
    lst.insert_before(1, 0)
    lst.insert_before(3, 9)
    assert list(lst) == [0, 1, 2, 9, 3]
    assert len(lst) == 5


def test_insert_after_missing_value_raises():
    lst = _singly([1, 2])
    with pytest.raises(ValueError):
        lst.insert_after(7, 8)
    with pytest.raises(ValueError):
        lst.insert_before(7, 8)
    assert list(lst) == [1, 2]


def test_insert_relative_on_empty_raises():
    lst = SinglyLinkedList()
    with pytest.raises(IndexError):
        lst.insert_after(1, 2)
    with pytest.raises(IndexError):
        lst.insert_before(1, 2)


def test_insert_at_position():
    lst = _singly([1, 2, 3])
    lst.insert_at_position(1, "a")
    lst.insert_at_position(3, "b")
    lst.insert_at_position(6, "c")
    assert list(lst) == ["a", 1, "b", 2, 3, "c"]


def test_insert_at_position_errors():
    lst = _singly([1, 2])
    with pytest.raises(IndexError):
        lst.insert_at_position(0, 9)
    with pytest.raises(IndexError):
        lst.insert_at_position(5, 9)
    with pytest.raises(IndexError):
        SinglyLinkedList().insert_at_position(2, 9)
    assert list(lst) == [1, 2]


def test_insert_at_position_one_on_empty():
    lst = SinglyLinkedList()
    lst.insert_at_position(1, 4)
    assert list(lst) == [4]


def test_delete_head_and_last():
    lst = _singly([1, 2, 3])
    assert lst.delete_head() == 1
    assert lst.delete_last() == 3
    assert lst.delete_last() == 2
    assert len(lst) == 0
    with pytest.raises(IndexError):
        lst.delete_head()
    with pytest.raises(IndexError):
        lst.delete_last()


def test_delete_at_position():
    lst = _singly([1, 2, 3, 4])
    assert lst.delete_at_position(3) == 3
    assert lst.delete_at_position(1) == 1
    assert list(lst) == [2, 4]
    with pytest.raises(IndexError):
        lst.delete_at_position(3)
    with pytest.raises(IndexError):
        lst.delete_at_position(0)
    with pytest.raises(IndexError):
        SinglyLinkedList().delete_at_position(1)


def test_search():
    lst = _singly([4, 5, 6, 5])
    assert lst.search(5) == 2
    assert lst.search(9) is None
    assert SinglyLinkedList().search(1) is None


def test_clear():
    lst = _singly([1, 2])
    lst.clear()
    assert list(lst) == []
    assert len(lst) == 0


@given(st.lists(st.integers()))
def test_singly_length_matches_contents(values):
    lst = _singly(values)
    assert list(lst) == values
    assert len(lst) == len(values)


def test_doubly_formats():
    lst = DoublyLinkedList()
    for value in (10, 20, 30):
        lst.insert_tail(value)
    assert lst.format_forward() == "HEAD -> 10 <-> 20 <-> 30 <-> TAIL"
    assert lst.format_backward() == "TAIL -> 30 <-> 20 <-> 10 <-> HEAD"


def test_doubly_empty_formats():
    lst = DoublyLinkedList()
    assert lst.format_forward() == "List is empty"
    assert lst.format_backward() == "List is empty"


def test_doubly_insert_head_and_tail():
    lst = DoublyLinkedList()
    lst.insert_head(2)
    lst.insert_tail(3)
    lst.insert_head(1)
    assert list(lst) == [1, 2, 3]
    assert list(reversed(lst)) == [3, 2, 1]
    assert len(lst) == 3
    lst.clear()
    assert list(lst) == [] and len(lst) == 0


@given(st.lists(st.integers()))
def test_doubly_reverse_is_mirror(values):
    lst = DoublyLinkedList()
    for value in values:
        lst.insert_head(value)
    assert list(reversed(lst)) == values
    assert list(lst) == values[::-1]