"""
Indexed Min-Heap
================

Binary min-heap whose items remember their own slot, so an item that is
already queued can have its priority changed in place (no stale duplicates
as with ``heapq`` lazy deletion).

Ordering: lower priority first; equal priorities are served in insertion
order. Updating a priority keeps the item's first insertion order.

Items must expose the writable attributes ``queue_index``,
``queue_priority`` and ``queue_insertion`` (see ``GridNode``).
"""

from typing import Any, List


class IndexedMinHeap:
    """
    Mutable-priority min-heap with FIFO tie-breaking.

    Args:
        capacity: Maximum number of items queued at once
    """

    def __init__(self, capacity: int):
        if capacity <= 0:
            raise ValueError(f"Heap capacity must be positive, got {capacity}")
        self.capacity = capacity
        self._items: List[Any] = []
        self._insertions = 0

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    @property
    def count(self) -> int:
        return len(self._items)

    def clear(self):
        for item in self._items:
            item.queue_index = -1
        self._items.clear()
        self._insertions = 0

    def contains(self, item) -> bool:
        index = item.queue_index
        return 0 <= index < len(self._items) and self._items[index] is item

    def first(self):
        if not self._items:
            raise IndexError("first() on an empty heap")
        return self._items[0]

    def enqueue(self, item, priority: int):
        if len(self._items) >= self.capacity:
            raise OverflowError(f"Heap is full (capacity {self.capacity})")
        if self.contains(item):
            raise ValueError("Item is already queued; use update_priority()")

        self._insertions += 1
        item.queue_priority = priority
        item.queue_insertion = self._insertions
        item.queue_index = len(self._items)
        self._items.append(item)
        self._sift_up(item.queue_index)

    def dequeue(self):
        if not self._items:
            raise IndexError("dequeue() on an empty heap")

        top = self._items[0]
        last = self._items.pop()
        if self._items:
            last.queue_index = 0
            self._items[0] = last
            self._sift_down(0)
        top.queue_index = -1
        return top

    def update_priority(self, item, priority: int):
        if not self.contains(item):
            raise ValueError("Item is not queued")

        old_priority = item.queue_priority
        item.queue_priority = priority
        if priority < old_priority:
            self._sift_up(item.queue_index)
        elif priority > old_priority:
            self._sift_down(item.queue_index)

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    @staticmethod
    def _before(a, b) -> bool:
        if a.queue_priority != b.queue_priority:
            return a.queue_priority < b.queue_priority
        return a.queue_insertion < b.queue_insertion

    def _swap(self, i: int, j: int):
        items = self._items
        items[i], items[j] = items[j], items[i]
        items[i].queue_index = i
        items[j].queue_index = j

    def _sift_up(self, index: int):
        items = self._items
        while index > 0:
            parent = (index - 1) >> 1
            if not self._before(items[index], items[parent]):
                break
            self._swap(index, parent)
            index = parent

    def _sift_down(self, index: int):
        items = self._items
        size = len(items)
        while True:
            left = 2 * index + 1
            if left >= size:
                break
            best = left
            right = left + 1
            if right < size and self._before(items[right], items[left]):
                best = right
            if not self._before(items[best], items[index]):
                break
            self._swap(index, best)
            index = best
