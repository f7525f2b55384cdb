"""
Базовые тесты LinkedStack: LIFO, исчерпание, вспомогательные операции.
"""

import os
import sys
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

import numpy as np
import pytest

from core.link import EMPTY, More
from core.linked_stack import LinkedStack
from utils.int32 import INT32_MAX, INT32_MIN


def test_basics_scenario():
    """Эталонный сценарий: pop/push/pop вперемешку."""
    stack = LinkedStack.new()

    assert stack.pop() is None

    stack.push(1)
    stack.push(2)
    stack.push(3)

    assert stack.pop() == 3
    assert stack.pop() == 2

    stack.push(4)
    stack.push(5)

    assert stack.pop() == 5
    assert stack.pop() == 4

    assert stack.pop() == 1
    assert stack.pop() is None


def test_pop_empty_returns_none():
    stack = LinkedStack()
    assert stack.pop() is None
    assert stack.peek() is None
    assert len(stack) == 0
    assert stack.empty()


@pytest.mark.parametrize("values", [[7], [1, 2], list(range(100)), [-5, 0, 5, INT32_MIN, INT32_MAX]])
def test_pops_reverse_pushes(values):
    stack = LinkedStack()
    for v in values:
        stack.push(v)
    popped = [stack.pop() for _ in values]
    assert popped == list(reversed(values))
    assert stack.pop() is None


def test_interleaved_matches_list_model():
    rng = np.random.default_rng(0)
    stack = LinkedStack()
    model = []
    for _ in range(2000):
        if model and rng.random() < 0.45:
            assert stack.pop() == model.pop()
        else:
            v = int(rng.integers(INT32_MIN, INT32_MAX, endpoint=True))
            stack.push(v)
            model.append(v)
        assert len(stack) == len(model)
        assert stack.peek() == (model[-1] if model else None)


def test_exhaustion_is_stable():
    stack = LinkedStack.from_iterable([1, 2])
    assert stack.pop() == 2
    assert stack.pop() == 1
    for _ in range(5):
        assert stack.pop() is None
    stack.push(9)
    assert stack.pop() == 9
    assert stack.pop() is None


def test_push_keeps_previous_chain_as_successor():
    stack = LinkedStack()
    stack.push(1)
    first = stack._head.node
    stack.push(2)
    head = stack._head
    assert isinstance(head, More)
    assert head.node.elem == 2
    assert head.node.next.node is first
    assert first.next is EMPTY


def test_pop_detaches_node():
    stack = LinkedStack.from_iterable([1, 2])
    top = stack._head.node
    assert stack.pop() == 2
    assert top.next is EMPTY
    assert stack._head.node.elem == 1


def test_rejected_push_leaves_stack_unchanged():
    stack = LinkedStack.from_iterable([1, 2, 3])
    with pytest.raises(OverflowError):
        stack.push(INT32_MAX + 1)
    with pytest.raises(TypeError):
        stack.push(1.5)
    with pytest.raises(TypeError):
        stack.push(True)
    assert list(stack) == [3, 2, 1]
    assert len(stack) == 3


def test_numpy_scalars_accepted():
    stack = LinkedStack()
    stack.push(np.int32(-3))
    stack.push(np.int64(4))
    assert stack.pop() == 4
    value = stack.pop()
    assert value == -3
    assert type(value) is int


def test_iteration_does_not_consume():
    stack = LinkedStack.from_iterable([1, 2, 3])
    assert list(stack) == [3, 2, 1]
    assert list(stack) == [3, 2, 1]
    assert len(stack) == 3
    assert repr(stack) == "LinkedStack([3, 2, 1])"


def test_to_array():
    stack = LinkedStack.from_iterable([INT32_MIN, 0, INT32_MAX])
    arr = stack.to_array()
    assert arr.dtype == np.int32
    assert arr.tolist() == [INT32_MAX, 0, INT32_MIN]
    assert LinkedStack().to_array().shape == (0,)


def test_bool_and_len():
    stack = LinkedStack()
    assert not stack
    stack.extend([4, 5])
    assert stack
    assert len(stack) == 2
    assert not stack.is_empty()
