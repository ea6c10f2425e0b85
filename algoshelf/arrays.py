"""Small array and number routines."""

from __future__ import annotations

from typing import Any, Iterable, List, Sequence

__all__ = [
    "left_rotate",
    "wave_order",
    "to_binary",
    "is_composite",
    "fibonacci_twist",
]


def left_rotate(values: Iterable[Any], d: int) -> List[Any]:
    """Return the elements rotated ``d`` places to the left.

    A non-positive ``d`` leaves the order unchanged.
    """
    items = list(values)
    if not items or d <= 0:
        return items
    shift = d % len(items)
    return items[shift:] + items[:shift]


def wave_order(matrix: Iterable[Sequence[Any]]) -> List[Any]:
    """Read a matrix column by column, alternating downwards and upwards."""
    rows = [list(row) for row in matrix]
    if not rows:
        return []
    width = len(rows[0])
    if any(len(row) != width for row in rows):
        raise ValueError("all rows must have the same length")
    result: List[Any] = []
    for index, column in enumerate(zip(*rows)):
        result.extend(column if index % 2 == 0 else reversed(column))
    return result


def to_binary(number: int) -> str:
    """Return the binary digits of a non-negative integer."""
    if number < 0:
        raise ValueError("number must be non-negative")
    return format(number, "b")


def is_composite(n: int) -> bool:
    """Report whether ``n`` has a divisor other than 1 and itself."""
    if n <= 1:
        return False
    divisor = 2
    while divisor * divisor <= n:
        if n % divisor == 0:
            return True
        divisor += 1
    return False


def fibonacci_twist(n: int) -> List[int]:
    """Return the first ``n`` terms of the Fibonacci twist sequence.

    The first term is 1. Each later Fibonacci term is kept only when it is
    composite and not a multiple of 5; otherwise it is replaced by 0.
    """
    if n < 1:
        raise ValueError("n must be at least 1")
    terms = [1]
    first, second = 0, 1
    term = first + second
    for _ in range(n - 1):
        if term % 5 == 0 or not is_composite(term):
            terms.append(0)
        else:
            terms.append(term)
        first, second = second, term
        term = first + second
    return terms