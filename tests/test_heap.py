import random

import pytest

from ticketdesk.heap import Heap


def _drain(heap):
    out = []
    while len(heap):
        out.append(heap.top())
        heap.pop()
    return out


def test_empty_top_is_none():
    assert Heap().top() is None


def test_pop_empty_raises():
    with pytest.raises(IndexError):
        Heap().pop()


def test_top_is_highest_priority():
    heap = Heap()
    heap.push("low", 1)
    heap.push("high", 3)
    heap.push("mid", 2)
    assert heap.top() == "high"
    assert len(heap) == 3


def test_drain_gives_descending_priorities():
    rng = random.Random(1234)
    priorities = [rng.randint(0, 50) for _ in range(200)]
    heap = Heap()
    for priority in priorities:
        heap.push(priority, priority)
    assert _drain(heap) == sorted(priorities, reverse=True)


def test_equal_priority_keeps_first_on_top():
    heap = Heap()
    heap.push("first", 1)
    heap.push("second", 1)
    assert heap.top() == "first"


def test_pop_single_leaves_empty():
    heap = Heap()
    heap.push("only", 7)
    heap.pop()
    assert len(heap) == 0
    assert heap.top() is None


def test_interleaved_push_and_pop():
    heap = Heap()
    heap.push("a", 2)
    heap.push("b", 5)
    heap.pop()
    heap.push("c", 4)
    heap.push("d", 1)
    assert _drain(heap) == ["c", "a", "d"]