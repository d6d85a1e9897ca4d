"""Heap exercises: running medians, k-way merging, nearly sorted input, order statistics."""

from __future__ import annotations

import heapq
from dataclasses import dataclass, field
from itertools import count
from typing import Any, Iterator, Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    value: Any
    next: Optional["ListNode"] = field(default=None, repr=False)

    def __iter__(self) -> Iterator[Any]:
        node: Optional[ListNode] = self
        while node is not None:
            yield node.value
            node = node.next


def to_linked_list(values):
    """Build a linked list holding ``values`` in order; an empty input gives None."""
    head = None
    for value in reversed(list(values)):
        head = ListNode(value, head)
    return head


def merge_k_sorted_lists(heads):
    """Merge sorted linked lists into one sorted list, relinking the existing nodes."""
    tie_breaker = count()
    pending = [(node.value, next(tie_breaker), node) for node in heads if node is not None]
    heapq.heapify(pending)
    head = last = None
    while pending:
        _, _, node = heapq.heappop(pending)
        if node.next is not None:
            heapq.heappush(pending, (node.next.value, next(tie_breaker), node.next))
        if last is None:
            head = node
        else:
            last.next = node
        last = node
    if last is not None:
        last.next = None
    return head


def _half_toward_zero(total):
    half = abs(total) // 2
    return half if total >= 0 else -half


def running_medians(values):
    """Return the median after each value of an integer stream.

    With an even count the median is the mean of the two middle values,
    truncated toward zero.
    """
    values = list(values)
    if not values:
        return []
    lower: list = []  # max-heap, stored negated
    upper: list = []  # min-heap
    median = values[0]
    heapq.heappush(lower, -values[0])
    medians = [median]
    for x in values[1:]:
        if len(lower) > len(upper):
            if x < median:
                heapq.heappush(upper, -heapq.heapreplace(lower, -x))
            else:
                heapq.heappush(upper, x)
            median = _half_toward_zero(upper[0] - lower[0])
        elif len(lower) == len(upper):
            if x < median:
                heapq.heappush(lower, -x)
                median = -lower[0]
            else:
                heapq.heappush(upper, x)
                median = upper[0]
        else:
            if x > median:
                heapq.heappush(lower, -heapq.heapreplace(upper, x))
            else:
                heapq.heappush(lower, -x)
            median = _half_toward_zero(upper[0] - lower[0])
        medians.append(median)
    return medians


def sort_nearly_sorted(values, k):
    """Sort a sequence in which every element is at most ``k`` places from its sorted position."""
    if k < 0:
        raise ValueError("k must not be negative")
    values = list(values)
    window = values[: k + 1]
    heapq.heapify(window)
    result = []
    for value in values[k + 1 :]:
        result.append(heapq.heapreplace(window, value))
    while window:
        result.append(heapq.heappop(window))
    return result


def kth_largest_stream(values, k):
    """Return, after each value, the k-th largest seen so far, or None before there are k."""
    if k < 1:
        raise ValueError("k must be positive")
    largest: list = []
    result = []
    for value in values:
        if len(largest) < k:
            heapq.heappush(largest, value)
            result.append(largest[0] if len(largest) == k else None)
        else:
            if value > largest[0]:
                heapq.heapreplace(largest, value)
            result.append(largest[0])
    return result


def kth_smallest(values, k):
    """Return the k-th smallest element (1-based) of ``values``."""
    values = list(values)
    if not 1 <= k <= len(values):
        raise ValueError("k must lie between 1 and the number of values")
    heapq.heapify(values)
    for _ in range(k - 1):
        heapq.heappop(values)
    return values[0]


class MaxHeap:
    """An array-backed binary max-heap."""

    def __init__(self):
        self._items: list = []

    def insert(self, value):
        """Add ``value`` and restore the heap order."""
        items = self._items
        items.append(value)
        index = len(items) - 1
        while index > 0:
            parent = (index - 1) // 2
            if items[parent] >= items[index]:
                break
            items[parent], items[index] = items[index], items[parent]
            index = parent

    def delete_max(self):
        """Remove and return the largest value."""
        items = self._items
        if not items:
            raise IndexError("delete from an empty heap")
        top = items[0]
        last = items.pop()
        if items:
            items[0] = last
            _sift_down(items, len(items), 0)
        return top

    def __len__(self):
        return len(self._items)

    def __iter__(self):
        """Yield the values in the heap's array order."""
        return iter(list(self._items))

    def __repr__(self):
        return f"MaxHeap({self._items!r})"


def _sift_down(items, size, index):
    while True:
        left, right = 2 * index + 1, 2 * index + 2
        largest = index
        if left < size and items[left] > items[largest]:
            largest = left
        if right < size and items[right] > items[largest]:
            largest = right
        if largest == index:
            return
        items[index], items[largest] = items[largest], items[index]
        index = largest


def heap_sort(values):
    """Return a new list of ``values`` in ascending order, sorted with a max-heap."""
    items = list(values)
    size = len(items)
    for index in range(size // 2 - 1, -1, -1):
        _sift_down(items, size, index)
    for end in range(size - 1, 0, -1):
        items[0], items[end] = items[end], items[0]
        _sift_down(items, end, 0)
    return items