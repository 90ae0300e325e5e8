import random

import pytest

from wordcrawl.domain.indexed_heap import IndexedMinHeap


def _drain(heap):
    out = []
    while len(heap):
        out.append(heap.pop())
    return out


def test_pop_returns_lowest_priority_first():
    heap = IndexedMinHeap()
    for key, priority in [("c", 3), ("a", 1), ("d", 4), ("b", 2)]:
        heap.push(key, priority)
    assert heap.peek() == ("a", 1)
    assert _drain(heap) == [("a", 1), ("b", 2), ("c", 3), ("d", 4)]


def test_ties_are_first_in_first_out():
    heap = IndexedMinHeap()
    for key in ["first", "second", "third"]:
        heap.push(key, 1)
    assert [key for key, _ in _drain(heap)] == ["first", "second", "third"]


def test_update_counts_as_reinsertion_among_ties():
    heap = IndexedMinHeap()
    heap.push("old", 1)
    heap.push("new", 1)
    heap.update("old", 1)
    assert heap.peek() == ("new", 1)


def test_update_raises_and_lowers_priority():
    heap = IndexedMinHeap()
    for key, priority in [("a", 1), ("b", 2), ("c", 3)]:
        heap.push(key, priority)
    heap.update("a", 5)
    assert heap.peek() == ("b", 2)
    heap.update("c", 0)
    assert _drain(heap) == [("c", 0), ("b", 2), ("a", 5)]


def test_contains_len_and_iter():
    heap = IndexedMinHeap()
    heap.push("x", 2)
    heap.push("y", 1)
    assert "x" in heap and "y" in heap
    assert "z" not in heap
    assert len(heap) == 2
    assert sorted(heap) == ["x", "y"]
    heap.pop()
    assert "y" not in heap


def test_duplicate_push_rejected():
    heap = IndexedMinHeap()
    heap.push("x", 1)
    with pytest.raises(KeyError):
        heap.push("x", 2)


def test_update_unknown_key_raises():
    heap = IndexedMinHeap()
    with pytest.raises(KeyError):
        heap.update("missing", 1)


def test_empty_heap_pop_and_peek_raise():
    heap = IndexedMinHeap()
    with pytest.raises(IndexError):
        heap.pop()
    with pytest.raises(IndexError):
        heap.peek()


def test_random_updates_keep_heap_order():
    rng = random.Random(7)
    heap = IndexedMinHeap()
    priorities = {}
    for i in range(50):
        key = f"k{i}"
        priorities[key] = rng.randint(0, 20)
        heap.push(key, priorities[key])
    for _ in range(200):
        key = f"k{rng.randint(0, 49)}"
        priorities[key] = rng.randint(0, 20)
        heap.update(key, priorities[key])

    drained = _drain(heap)
    assert [p for _, p in drained] == sorted(priorities.values())
    assert {k: p for k, p in drained} == priorities
