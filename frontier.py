from __future__ import annotations

from dataclasses import dataclass
from itertools import count
from typing import Dict, Generic, Hashable, List, TypeVar


T = TypeVar("T", bound=Hashable)


@dataclass
class _Entry(Generic[T]):
    priority: float
    order: int
    item: T

    def key(self) -> tuple:
        return (self.priority, self.order)


class Frontier(Generic[T]):
    """Binary min-heap of items keyed by priority, with in-place priority decrease.

    Every item is present at most once. ``_index`` maps each item to its slot in
    ``_heap`` and is rewritten on every swap, so ``update_priority`` can find an
    item without scanning. Equal priorities come out in insertion order.
    """

    def __init__(self) -> None:
        self._heap: List[_Entry[T]] = []
        self._index: Dict[T, int] = {}
        self._counter = count()

    def size(self) -> int:
        return len(self._heap)

    def __len__(self) -> int:
        return len(self._heap)

    def __bool__(self) -> bool:
        return bool(self._heap)

    def __contains__(self, item: object) -> bool:
        return item in self._index

    def priority(self, item: T) -> float:
        return self._heap[self._position(item)].priority

    def add(self, item: T, priority: float) -> None:
        if item in self._index:
            raise ValueError(f"{item} is already in the frontier.")
        self._heap.append(_Entry(priority, next(self._counter), item))
        last = len(self._heap) - 1
        self._index[item] = last
        self._bubble_up(last)

    def peek(self) -> T:
        if not self._heap:
            raise IndexError("peek from an empty frontier")
        return self._heap[0].item

    def poll(self) -> T:
        """Remove and return the item with the smallest priority."""
        if not self._heap:
            raise IndexError("poll from an empty frontier")
        self._swap(0, len(self._heap) - 1)
        entry = self._heap.pop()
        del self._index[entry.item]
        if self._heap:
            self._bubble_down(0)
        return entry.item

    def update_priority(self, item: T, priority: float) -> None:
        """Lower the priority of ``item``; a priority that is not smaller is ignored."""
        k = self._position(item)
        entry = self._heap[k]
        if priority >= entry.priority:
            return
        entry.priority = priority
        self._bubble_up(k)

    def _position(self, item: T) -> int:
        try:
            return self._index[item]
        except KeyError:
            raise KeyError(f"{item} is not in the frontier.") from None

    def _swap(self, h: int, k: int) -> None:
        if h == k:
            return
        heap = self._heap
        heap[h], heap[k] = heap[k], heap[h]
        self._index[heap[h].item] = h
        self._index[heap[k].item] = k

    def _bubble_up(self, k: int) -> None:
        heap = self._heap
        while k > 0:
            parent = (k - 1) // 2
            if heap[k].key() >= heap[parent].key():
                break
            self._swap(k, parent)
            k = parent

    def _bubble_down(self, k: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            child = 2 * k + 1
            if child >= size:
                break
            # Pick the smaller child.
            if child + 1 < size and heap[child + 1].key() < heap[child].key():
                child += 1
            if heap[k].key() <= heap[child].key():
                break
            self._swap(k, child)
            k = child
