"""Undirected graphs with breadth-first and depth-first traversal.

A graph is either a ``Graph`` built from edges, whose adjacency lists keep the
most recently added neighbour first, or a square adjacency matrix whose
nonzero entries mark edges.
"""

from __future__ import annotations

from collections import deque
from collections.abc import Callable, Iterable, Sequence

Neighbors = Callable[[int], Iterable[int]]


def _breadth_first(start: int, neighbors: Neighbors) -> list[int]:
    visited = {start}
    order = [start]
    pending = deque([start])
    while pending:
        vertex = pending.popleft()
        for nxt in neighbors(vertex):
            if nxt not in visited:
                visited.add(nxt)
                order.append(nxt)
                pending.append(nxt)
    return order


def _depth_first(start: int, neighbors: Neighbors) -> list[int]:
    visited = {start}
    order = [start]
    stack = [iter(neighbors(start))]
    while stack:
        for nxt in stack[-1]:
            if nxt not in visited:
                visited.add(nxt)
                order.append(nxt)
                stack.append(iter(neighbors(nxt)))
                break
        else:
            stack.pop()
    return order


class Graph:
    """An undirected graph on the vertices ``0 .. num_vertices - 1``."""

    def __init__(self, num_vertices: int) -> None:
        if num_vertices < 0:
            raise ValueError(f"number of vertices must not be negative, got {num_vertices}")
        self._adjacency: list[deque[int]] = [deque() for _ in range(num_vertices)]

    @property
    def num_vertices(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise IndexError(f"vertex {vertex} outside 0..{len(self._adjacency) - 1}")

    def add_edge(self, src: int, dest: int) -> None:
        """Connect ``src`` and ``dest``; each becomes the other's first neighbour."""
        self._check(src)
        self._check(dest)
        self._adjacency[src].appendleft(dest)
        self._adjacency[dest].appendleft(src)

    def neighbors(self, vertex: int) -> list[int]:
        """Return the neighbours of ``vertex``, most recently added first."""
        self._check(vertex)
        return list(self._adjacency[vertex])

    def bfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in breadth-first order."""
        self._check(start)
        return _breadth_first(start, self._adjacency.__getitem__)

    def dfs(self, start: int) -> list[int]:
        """Return the vertices reachable from ``start`` in depth-first order."""
        self._check(start)
        return _depth_first(start, self._adjacency.__getitem__)


def _matrix_neighbors(matrix: Sequence[Sequence[int]], start: int) -> Neighbors:
    size = len(matrix)
    if any(len(row) != size for row in matrix):
        raise ValueError("an adjacency matrix must be square")
    if not 0 <= start < size:
        raise IndexError(f"vertex {start} outside 0..{size - 1}")
    rows = [[col for col, value in enumerate(row) if value] for row in matrix]
    return rows.__getitem__


def bfs_matrix(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Breadth-first order from ``start`` over an adjacency matrix, neighbours by ascending index."""
    return _breadth_first(start, _matrix_neighbors(matrix, start))


def dfs_matrix(matrix: Sequence[Sequence[int]], start: int) -> list[int]:
    """Depth-first order from ``start`` over an adjacency matrix, neighbours by ascending index."""
    return _depth_first(start, _matrix_neighbors(matrix, start))