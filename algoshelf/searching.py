"""Linear and binary search over sequences.

Index-returning searches give ``None`` when the key is absent.
"""

from __future__ import annotations

from bisect import bisect_left
from typing import Any, Optional, Sequence


def binary_search(values: Sequence[Any], key: Any) -> Optional[int]:
    """Iterative binary search over an ascending sequence."""
    lower, upper = 0, len(values) - 1
    while lower <= upper:
        middle = (lower + upper) // 2
        if values[middle] == key:
            return middle
        if values[middle] < key:
            lower = middle + 1
        else:
            upper = middle - 1
    return None


def recursive_binary_search(values: Sequence[Any], key: Any) -> Optional[int]:
    """Recursive binary search over an ascending sequence."""

    def search(lower: int, upper: int) -> Optional[int]:
        if lower > upper:
            return None
        middle = (lower + upper) // 2
        if values[middle] == key:
            return middle
        if values[middle] > key:
            return search(lower, middle - 1)
        return search(middle + 1, upper)

    return search(0, len(values) - 1)


def linear_search(values: Sequence[Any], key: Any) -> Optional[int]:
    """Return the index of the first element equal to ``key``."""
    for index, value in enumerate(values):
        if value == key:
            return index
    return None


def recursive_linear_search(values: Sequence[Any], key: Any) -> Optional[int]:
    """Search from the end backwards; returns the index of the last match."""

    def search(length: int) -> Optional[int]:
        if length == 0:
            return None
        if values[length - 1] == key:
            return length - 1
        return search(length - 1)

    return search(len(values))


def sorted_contains(values: Sequence[Any], key: Any) -> bool:
    """Report whether ``key`` occurs in an ascending sequence."""
    position = bisect_left(values, key)
    return position < len(values) and values[position] == key