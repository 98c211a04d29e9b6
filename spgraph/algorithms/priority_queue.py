"""Binary min-heap ordered by a caller-supplied comparator.

Unlike ``heapq`` with ``(priority, item)`` tuples, the comparator is evaluated
at every sift. Callers may therefore order items by a score array that keeps
changing after the item was enqueued; the heap is never re-sorted when it does.
"""

from __future__ import annotations

from typing import Callable, Generic, List, Optional, TypeVar

T = TypeVar("T")

#: ``compare(a, b) < 0`` means ``a`` has strictly higher priority than ``b``.
Comparator = Callable[[T, T], float]


class PriorityQueue(Generic[T]):
    """Min-heap over arbitrary items.

    Items are not deduplicated; the same item may be enqueued several times
    and will be dequeued as many times.

    Args:
        compare: Ordering function, negative when the first argument should
            be dequeued first.
    """

    def __init__(self, compare: Comparator) -> None:
        self._compare = compare
        self._heap: List[T] = []

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __repr__(self) -> str:
        return f"PriorityQueue(size={len(self._heap)})"

    def is_empty(self) -> bool:
        return not self._heap

    def enqueue(self, item: T) -> None:
        """Add `item` and restore the heap property. O(log n)."""
        self._heap.append(item)
        self._sift_up(len(self._heap) - 1)

    def dequeue(self) -> Optional[T]:
        """Remove and return the highest-priority item, or None if empty."""
        if not self._heap:
            return None
        root = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._sift_down(0)
        return root

    def peek(self) -> Optional[T]:
        """Return the highest-priority item without removing it."""
        return self._heap[0] if self._heap else None

    def _sift_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if self._compare(heap[index], heap[parent]) < 0:
                heap[index], heap[parent] = heap[parent], heap[index]
                index = parent
            else:
                break

    def _sift_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            left = 2 * index + 1
            right = left + 1
            best = index

            if left < size and self._compare(heap[left], heap[best]) < 0:
                best = left
            # Strict comparison: on a tie between children the left one wins
            if right < size and self._compare(heap[right], heap[best]) < 0:
                best = right

            if best == index:
                break
            heap[index], heap[best] = heap[best], heap[index]
            index = best
