"""Shortest paths and a greedy travelling-salesman tour on weight matrices.

Graphs are square matrices of non-negative weights in which 0 means that
there is no edge between the two vertices.
"""

from __future__ import annotations

import heapq
import math
from dataclasses import dataclass, field
from typing import List, Sequence, Union

__all__ = ["TourResult", "dijkstra", "greedy_tsp"]

Distance = Union[int, float]


def _square(matrix: Sequence[Sequence[Distance]]) -> List[List[Distance]]:
    rows = [list(row) for row in matrix]
    size = len(rows)
    if any(len(row) != size for row in rows):
        raise ValueError("the weight matrix must be square")
    return rows


def _check_vertex(vertex: int, size: int) -> None:
    if not 0 <= vertex < size:
        raise IndexError(f"vertex {vertex} is outside 0..{size - 1}")


def dijkstra(graph: Sequence[Sequence[Distance]], source: int) -> List[Distance]:
    """Return the shortest distance from ``source`` to every vertex.

    Vertices that cannot be reached get ``math.inf``.
    """
    rows = _square(graph)
    size = len(rows)
    _check_vertex(source, size)
    if any(weight < 0 for row in rows for weight in row):
        raise ValueError("edge weights must be non-negative")

    dist: List[Distance] = [math.inf] * size
    dist[source] = 0
    done = [False] * size
    heap = [(0, source)]
    while heap:
        d, u = heapq.heappop(heap)
        if done[u]:
            continue
        done[u] = True
        for v, weight in enumerate(rows[u]):
            if weight and not done[v] and d + weight < dist[v]:
                dist[v] = d + weight
                heapq.heappush(heap, (dist[v], v))
    return dist


@dataclass
class TourResult:
    """A closed tour: the cities visited in order, ending at the start."""

    path: List[int] = field(default_factory=list)
    cost: Distance = 0


def greedy_tsp(distances: Sequence[Sequence[Distance]], start: int = 0) -> TourResult:
    """Build a tour by always moving to the nearest unvisited city.

    Ties go to the lower-numbered city. When no unvisited city can be
    reached the tour closes by returning to ``start``.
    """
    rows = _square(distances)
    size = len(rows)
    _check_vertex(start, size)

    visited = {start}
    path = [start]
    cost: Distance = 0
    city = start
    while True:
        candidates = [
            (weight, index)
            for index, weight in enumerate(rows[city])
            if weight and index not in visited
        ]
        if not candidates:
            break
        weight, city = min(candidates)
        visited.add(city)
        path.append(city)
        cost += weight
    cost += rows[city][start]
    path.append(start)
    return TourResult(path=path, cost=cost)