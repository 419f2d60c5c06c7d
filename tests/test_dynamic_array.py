import pytest
from hypothesis import given, strategies as st

from dsakit.dynamic_array import DynamicArray, main


def _filled(count, capacity=5):
    array = DynamicArray(capacity)
    for value in range(1, count + 1):
        array.append(value)
    return array


def test_new_array_is_empty():
    array = DynamicArray()
    assert len(array) == 0
    assert array.capacity == 5
    assert list(array) == []


def test_capacity_doubles_when_full():
    array = _filled(5)
    assert array.capacity == 5
    array.append(6)
    assert array.capacity == 10


def test_twenty_appends():
    array = _filled(20)
    assert list(array) == list(range(1, 21))
    assert array.capacity == 20


@given(st.lists(st.integers(), max_size=100), st.integers(min_value=1, max_value=8))
def test_append_preserves_order_and_capacity(values, capacity):
    array = DynamicArray(capacity)
    for value in values:
        array.append(value)
    assert list(array) == values
    assert len(array) == len(values)
    assert array.capacity >= len(array)
    ratio = array.capacity // capacity
    assert array.capacity % capacity == 0
    assert ratio & (ratio - 1) == 0


def test_getitem():
    array = _filled(3)
    assert array[0] == 1
    assert array[-1] == 3


def test_delete_shifts_items():
    array = _filled(20)
    assert array.delete(10) == 11
    assert list(array) == [v for v in range(1, 21) if v != 11]


@pytest.mark.parametrize("index", [-1, 3, 10])
def test_delete_out_of_range(index):
    array = _filled(3)
    with pytest.raises(IndexError):
        array.delete(index)


def test_shrink_halves_capacity():
    array = _filled(6)
    grown = array.capacity
    for _ in range(5):
        array.delete(0)
    array.shrink()
    assert array.capacity == grown // 2
    assert list(array) == [6]


def test_shrink_keeps_capacity_when_half_full():
    array = _filled(3)
    array.shrink()
    assert array.capacity == 5


def test_repeated_shrink_never_drops_below_length():
    array = _filled(12)
    for _ in range(9):
        array.delete(0)
    for _ in range(10):
        array.shrink()
    assert array.capacity >= len(array) >= 1


@pytest.mark.parametrize("capacity", [0, -3])
def test_invalid_capacity(capacity):
    with pytest.raises(ValueError):
        DynamicArray(capacity)


def test_main_prints_final_contents(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1] == " ".join(str(v) for v in range(1, 21) if v != 11)
    assert lines[0].endswith("5")