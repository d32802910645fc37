from collections import deque

import pytest
from hypothesis import given
from hypothesis import strategies as st

from algokit.adapters import (
    EmptyError,
    PopCostlyQueue,
    PopCostlyStack,
    PushCostlyQueue,
    PushCostlyStack,
)

OPS = st.lists(st.one_of(st.integers(-50, 50), st.none()), max_size=50)


def test_queue_scenario():
    for q in (PushCostlyQueue(10), PopCostlyQueue(10)):
        for value in (10, 20, 30):
            q.enqueue(value)
        assert q.dequeue() == 10
        assert q.dequeue() == 20
        assert len(q) == 1


def test_stack_scenario():
    for s in (PushCostlyStack(10), PopCostlyStack(10)):
        for value in (10, 20, 30):
            s.push(value)
        assert s.pop() == 30
        assert s.pop() == 20
        assert len(s) == 1


def test_queue_empty_raises():
    with pytest.raises(EmptyError):
        PushCostlyQueue(3).dequeue()
    with pytest.raises(EmptyError):
        PopCostlyQueue(3).dequeue()


def test_stack_empty_raises():
    with pytest.raises(EmptyError):
        PushCostlyStack(3).pop()
    with pytest.raises(EmptyError):
        PopCostlyStack(3).pop()


def test_queue_overflow():
    for q in (PushCostlyQueue(2), PopCostlyQueue(2)):
        q.enqueue(1)
        q.enqueue(2)
        with pytest.raises(OverflowError):
            q.enqueue(3)
        assert q.dequeue() == 1


def test_stack_overflow():
    for s in (PushCostlyStack(2), PopCostlyStack(2)):
        s.push(1)
        s.push(2)
        with pytest.raises(OverflowError):
            s.push(3)
        assert s.pop() == 2


def test_rejects_bad_capacity():
    with pytest.raises(ValueError):
        PushCostlyQueue(0)
    with pytest.raises(ValueError):
        PopCostlyQueue(0)
    with pytest.raises(ValueError):
        PushCostlyStack(0)
    with pytest.raises(ValueError):
        PopCostlyStack(0)


@given(ops=OPS)
def test_queue_matches_model(ops):
    for q in (PushCostlyQueue(100), PopCostlyQueue(100)):
        model: deque[int] = deque()
        for op in ops:
            if op is None:
                if model:
                    assert q.dequeue() == model.popleft()
                else:
                    with pytest.raises(EmptyError):
                        q.dequeue()
            else:
                q.enqueue(op)
                model.append(op)
            assert len(q) == len(model)


@given(ops=OPS)
def test_stack_matches_model(ops):
    for s in (PushCostlyStack(100), PopCostlyStack(100)):
        model: list[int] = []
        for op in ops:
            if op is None:
                if model:
                    assert s.pop() == model.pop()
                else:
                    with pytest.raises(EmptyError):
                        s.pop()
            else:
                s.push(op)
                model.append(op)
            assert len(s) == len(model)