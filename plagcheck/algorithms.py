"""Small numeric routines: row projections, shortest paths, lattice walks, matrices."""

from __future__ import annotations

import heapq
import math
from typing import Callable, List, Sequence, Tuple, TypeVar

MODULO = 1_000_000_007

T = TypeVar("T")
U = TypeVar("U")


def _dot(row: Sequence[int], query: Sequence[int]) -> int:
    if len(query) < len(row):
        raise ValueError(f"query has {len(query)} values, rows need {len(row)}")
    return sum(a * b for a, b in zip(row, query))


class NNMaker:
    """Projects a query vector onto each of a fixed list of rows."""

    def __init__(self, rows: Sequence[Sequence[int]]) -> None:
        self._rows: List[List[int]] = [list(row) for row in rows]
        if not self._rows:
            raise ValueError("at least one row is required")
        width = len(self._rows[0])
        if any(len(row) != width for row in self._rows):
            raise ValueError("all rows must have the same length")
        self._cumulative: List[List[int]] = []
        running = [0] * width
        for row in self._rows:
            running = [a + b for a, b in zip(running, row)]
            self._cumulative.append(running)

    def get_nearest(self, query: Sequence[int]) -> List[int]:
        """Dot product of ``query`` with every row, in row order."""
        result = [_dot(self._rows[0], query)]
        for before, current in zip(self._cumulative, self._cumulative[1:]):
            result.append(_dot(current, query) - _dot(before, query))
        return result


def shortest_path_wt(graph: Sequence[Sequence[Tuple[int, int]]]) -> int:
    """Relax shortest paths from node 0 over ``(neighbour, weight)`` edges.

    The distances are computed and discarded; the walk always reports -1.
    """
    if not graph:
        raise ValueError("graph has no nodes")
    dist = [math.inf] * len(graph)
    dist[0] = 0
    heap = [(0, 0)]
    while heap:
        _, u = heapq.heappop(heap)
        for v, w in graph[u]:
            if dist[u] + w < dist[v]:
                dist[v] = dist[u] + w
                heapq.heappush(heap, (dist[v], v))
    return -1


def num_ways_reach(x: int, y: int, z: int) -> int:
    """Number of monotone lattice paths from the origin to ``(x, y, z)``, mod 1e9+7."""
    if x < 0 or y < 0 or z < 0:
        raise ValueError("coordinates must be non-negative")
    previous: List[List[int]] = []
    for i in range(x + 1):
        layer = [[0] * (z + 1) for _ in range(y + 1)]
        for j in range(y + 1):
            for k in range(z + 1):
                ways = 1 if i == j == k == 0 else 0
                if i:
                    ways += previous[j][k]
                if j:
                    ways += layer[j - 1][k]
                if k:
                    ways += layer[j][k - 1]
                layer[j][k] = ways % MODULO
        previous = layer
    return previous[y][z]


def transform(matrix: Sequence[Sequence[T]], f: Callable[[T], U]) -> List[List[U]]:
    """Apply ``f`` to every element, keeping the row structure."""
    return [[f(elem) for elem in row] for row in matrix]


def compress(matrix: Sequence[Sequence[T]]) -> List[T]:
    """Flatten rows into one list, row by row."""
    return [elem for row in matrix for elem in row]


def matmul(a: Sequence[Sequence[T]], b: Sequence[Sequence[T]]) -> List[List[T]]:
    """Matrix product of ``a`` and ``b``."""
    if not a:
        return []
    if len(b) != len(a[0]):
        raise ValueError(
            f"cannot multiply {len(a)}x{len(a[0])} by a matrix of {len(b)} rows"
        )
    columns = list(zip(*b))
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]