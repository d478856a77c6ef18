"""Breadth-first search over adjacency lists and Kruskal's spanning tree."""

from __future__ import annotations

import string
from collections import deque
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

__all__ = ["Edge", "Graph", "format_spanning_tree", "kruskal"]


class Graph:
    """Undirected graph on vertices ``0 .. vertices - 1``."""

    def __init__(self, vertices: int) -> None:
        if vertices < 0:
            raise ValueError(f"vertex count must not be negative: {vertices}")
        self._adjacency: list[list[int]] = [[] for _ in range(vertices)]

    def __len__(self) -> int:
        return len(self._adjacency)

    def _check(self, vertex: int) -> None:
        if not 0 <= vertex < len(self._adjacency):
            raise ValueError(f"no such vertex: {vertex}")

    def add_edge(self, src: int, dest: int) -> None:
        """Join ``src`` and ``dest``; the newest neighbour is listed first."""
        self._check(src)
        self._check(dest)
        self._adjacency[src].insert(0, dest)
        self._adjacency[dest].insert(0, src)

    def neighbours(self, vertex: int) -> list[int]:
        """Neighbours of ``vertex``, most recently added first."""
        self._check(vertex)
        return list(self._adjacency[vertex])

    def bfs(self, start: int) -> list[int]:
        """Vertices reachable from ``start`` in breadth-first visiting order."""
        self._check(start)
        visited = {start}
        queue = deque([start])
        order: list[int] = []
        while queue:
            current = queue.popleft()
            order.append(current)
            for neighbour in self._adjacency[current]:
                if neighbour not in visited:
                    visited.add(neighbour)
                    queue.append(neighbour)
        return order


@dataclass(frozen=True)
class Edge:
    """Weighted edge between vertices ``u`` and ``v``."""

    u: int
    v: int
    weight: int


def kruskal(matrix: Sequence[Sequence[int]]) -> list[Edge]:
    """Minimum spanning forest of a cost adjacency matrix.

    Only the lower triangle is read; a zero means no edge. Edges of equal
    weight are considered in the order they appear.
    """
    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ValueError("cost matrix is not square")
    edges = [
        Edge(i, j, matrix[i][j])
        for i in range(1, n)
        for j in range(i)
        if matrix[i][j] != 0
    ]
    edges.sort(key=lambda edge: edge.weight)
    component = list(range(n))
    chosen: list[Edge] = []
    for edge in edges:
        first, second = component[edge.u], component[edge.v]
        if first != second:
            chosen.append(edge)
            component = [first if label == second else label for label in component]
    return chosen


def format_spanning_tree(edges: Iterable[Edge]) -> str:
    """Report each edge with lettered vertices, then the total cost."""
    names = string.ascii_uppercase
    lines = []
    cost = 0
    for edge in edges:
        if max(edge.u, edge.v) >= len(names):
            raise ValueError(f"vertex has no letter name: {max(edge.u, edge.v)}")
        lines.append(f"\n{names[edge.u]} - {names[edge.v]} : {edge.weight}")
        cost += edge.weight
    return "".join(lines) + f"\nSpanning tree cost: {cost}"