import pytest

from tilepath.core.grid import GridNode
from tilepath.core.heap import IndexedMinHeap


def make_items(n):
    return [GridNode(index=i, x=i, y=0) for i in range(n)]


def test_pops_lowest_priority_first():
    heap = IndexedMinHeap(8)
    items = make_items(4)
    for item, priority in zip(items, (30, 10, 40, 20)):
        heap.enqueue(item, priority)

    order = [heap.dequeue().index for _ in range(4)]
    assert order == [1, 3, 0, 2]
    assert len(heap) == 0
    assert not heap


def test_equal_priorities_served_in_insertion_order():
    heap = IndexedMinHeap(8)
    items = make_items(5)
    for item in items:
        heap.enqueue(item, 7)

    assert [heap.dequeue().index for _ in range(5)] == [0, 1, 2, 3, 4]


def test_update_priority_moves_item_and_keeps_insertion_order():
    heap = IndexedMinHeap(8)
    a, b, c = make_items(3)
    heap.enqueue(a, 50)
    heap.enqueue(b, 40)
    heap.enqueue(c, 60)

    heap.update_priority(c, 40)
    # b and c now tie; b was inserted first
    assert heap.dequeue() is b
    assert heap.dequeue() is c
    heap.update_priority(a, 90)
    assert heap.first() is a


def test_contains_and_clear():
    heap = IndexedMinHeap(4)
    a, b = make_items(2)
    heap.enqueue(a, 1)
    assert heap.contains(a)
    assert not heap.contains(b)

    heap.clear()
    assert heap.count == 0
    assert not heap.contains(a)
    heap.enqueue(a, 5)
    assert heap.first() is a


def test_errors():
    with pytest.raises(ValueError):
        IndexedMinHeap(0)

    heap = IndexedMinHeap(1)
    a, b = make_items(2)
    with pytest.raises(IndexError):
        heap.dequeue()
    with pytest.raises(IndexError):
        heap.first()
    with pytest.raises(ValueError):
        heap.update_priority(a, 3)

    heap.enqueue(a, 1)
    with pytest.raises(OverflowError):
        heap.enqueue(b, 2)


def test_many_items_come_out_sorted():
    heap = IndexedMinHeap(64)
    items = make_items(64)
    priorities = [(i * 37) % 64 for i in range(64)]
    for item, priority in zip(items, priorities):
        heap.enqueue(item, priority)
    for item in items[::3]:
        heap.update_priority(item, item.queue_priority // 2)

    popped = [heap.dequeue().queue_priority for _ in range(64)]
    assert popped == sorted(popped)
