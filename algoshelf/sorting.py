"""Classic comparison and distribution sorts.

Every function takes any iterable and returns a new sorted list, leaving
the input untouched.
"""

from __future__ import annotations

from typing import Any, Iterable, List


def bubble_sort(values: Iterable[Any]) -> List[Any]:
    """Sort with bubble sort, stopping early once a pass makes no swaps."""
    items = list(values)
    for _ in range(len(items)):
        swapped = False
        for i in range(len(items) - 1):
            if items[i] > items[i + 1]:
                items[i], items[i + 1] = items[i + 1], items[i]
                swapped = True
        if not swapped:
            break
    return items


def counting_sort(values: Iterable[int]) -> List[int]:
    """Sort non-negative integers by counting occurrences of each value."""
    items = list(values)
    if not items:
        return items
    if min(items) < 0:
        raise ValueError("counting sort requires non-negative integers")
    counts = [0] * (max(items) + 1)
    for value in items:
        counts[value] += 1
    return [value for value, count in enumerate(counts) for _ in range(count)]


def _sift_up(heap: List[Any], index: int) -> None:
    while index > 0:
        parent = (index - 1) // 2
        if not heap[parent] < heap[index]:
            break
        heap[parent], heap[index] = heap[index], heap[parent]
        index = parent


def _sift_down(heap: List[Any], size: int) -> None:
    index = 0
    while True:
        left = 2 * index + 1
        if left >= size:
            break
        right = left + 1
        if right >= size:
            child = left
        else:
            child = left if heap[left] > heap[right] else right
        if heap[index] >= heap[child]:
            break
        heap[index], heap[child] = heap[child], heap[index]
        index = child


def heap_sort(values: Iterable[Any]) -> List[Any]:
    """Sort by building a max-heap one insertion at a time, then draining it."""
    heap: List[Any] = []
    for value in values:
        heap.append(value)
        _sift_up(heap, len(heap) - 1)
    for end in range(len(heap) - 1, 0, -1):
        heap[0], heap[end] = heap[end], heap[0]
        _sift_down(heap, end)
    return heap


def insertion_sort(values: Iterable[Any]) -> List[Any]:
    """Sort by inserting each element into the sorted prefix before it."""
    items: List[Any] = []
    for current in values:
        position = len(items)
        while position > 0 and current < items[position - 1]:
            position -= 1
        items.insert(position, current)
    return items


def _merge(left: List[Any], right: List[Any]) -> List[Any]:
    merged: List[Any] = []
    i = j = 0
    while i < len(left) and j < len(right):
        if left[i] <= right[j]:
            merged.append(left[i])
            i += 1
        else:
            merged.append(right[j])
            j += 1
    merged.extend(left[i:])
    merged.extend(right[j:])
    return merged


def merge_sort(values: Iterable[Any]) -> List[Any]:
    """Stable top-down merge sort."""
    items = list(values)
    if len(items) < 2:
        return items
    middle = (len(items) - 1) // 2 + 1
    return _merge(merge_sort(items[:middle]), merge_sort(items[middle:]))


def radix_sort(values: Iterable[int]) -> List[int]:
    """Least-significant-digit radix sort in base 10 for non-negative integers."""
    items = list(values)
    if not items:
        return items
    if min(items) < 0:
        raise ValueError("radix sort requires non-negative integers")
    largest = max(items)
    exp = 1
    while largest // exp > 0:
        buckets: List[List[int]] = [[] for _ in range(10)]
        for value in items:
            buckets[(value // exp) % 10].append(value)
        items = [value for bucket in buckets for value in bucket]
        exp *= 10
    return items