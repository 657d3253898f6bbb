import pytest

from playground.priority_queue import MinPriorityQueue


def test_push_zero_to_nine_pops_in_order():
    pq = MinPriorityQueue()
    for i in range(10):
        pq.push(i)
    result = []
    while not pq.is_empty():
        result.append(pq.pop())
    assert result == list(range(10))


def test_minimal_queue_pops_smallest():
    pq = MinPriorityQueue()
    for value in [1, 6, 3]:
        pq.push(value)
    assert pq.pop() == 1


def test_unordered_pushes_pop_sorted():
    values = [5, -2, 9, 0, 5, 3, 7]
    pq = MinPriorityQueue()
    for value in values:
        pq.push(value)
    assert [pq.pop() for _ in range(len(values))] == sorted(values)


def test_initial_values_are_heapified():
    values = [8, 4, 6, 2]
    pq = MinPriorityQueue(values)
    assert len(pq) == len(values)
    assert pq.peek() == min(values)


def test_peek_does_not_remove():
    pq = MinPriorityQueue()
    pq.push(4)
    pq.push(2)
    assert pq.peek() == 2
    assert len(pq) == 2
    assert pq.pop() == 2
    assert pq.peek() == 4


def test_empty_queue_raises():
    pq = MinPriorityQueue()
    assert pq.is_empty()
    with pytest.raises(IndexError):
        pq.pop()
    with pytest.raises(IndexError):
        pq.peek()