import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsakit.stacks import (
    DynamicArrayStack,
    FixedStack,
    LinkedStack,
    StackOverflow,
    StackUnderflow,
)


@pytest.mark.parametrize("factory", [LinkedStack, DynamicArrayStack, FixedStack])
def test_lifo_order(factory):
    stack = factory()
    for value in (1, 2, 3):
        stack.push(value)
    assert stack.peek() == 3
    assert len(stack) == 3
    assert [stack.pop(), stack.pop(), stack.pop()] == [3, 2, 1]
    assert stack.is_empty()


@pytest.mark.parametrize("factory", [LinkedStack, DynamicArrayStack, FixedStack])
def test_underflow(factory):
    stack = factory()
    with pytest.raises(StackUnderflow):
        stack.pop()
    with pytest.raises(StackUnderflow):
        stack.peek()


def test_fixed_stack_overflow():
    stack = FixedStack(5)
    for value in range(4, 9):
        stack.push(value)
    assert stack.is_full()
    with pytest.raises(StackOverflow):
        stack.push(9)
    assert stack.peek() == 8
    assert len(stack) == 5


def test_dynamic_stack_grows_when_full():
    stack = DynamicArrayStack(5)
    for value in range(1, 6):
        stack.push(value)
    assert stack.is_full()
    assert stack.capacity == 5
    stack.push(6)
    assert stack.capacity == 2 * 5
    assert not stack.is_full()
    assert stack.peek() == 6


def test_dynamic_stack_shrinks_when_sparse():
    stack = DynamicArrayStack(8)
    stack.push(1)
    stack.push(2)
    assert stack.pop() == 2
    assert stack.capacity == 8 // 2
    assert stack.pop() == 1


@pytest.mark.parametrize("cls", [DynamicArrayStack, FixedStack])
def test_bad_capacity(cls):
    with pytest.raises(ValueError):
        cls(0)


@given(st.lists(st.integers()))
def test_dynamic_stack_round_trip(values):
    stack = DynamicArrayStack(1)
    for value in values:
        stack.push(value)
        assert len(stack) <= stack.capacity
    popped = []
    while not stack.is_empty():
        popped.append(stack.pop())
        assert stack.capacity >= 1
        assert len(stack) <= stack.capacity
    assert popped == values[::-1]


@given(st.lists(st.integers()))
def test_linked_stack_round_trip(values):
    stack = LinkedStack()
    for value in values:
        stack.push(value)
    assert len(stack) == len(values)
    assert [stack.pop() for _ in values] == values[::-1]