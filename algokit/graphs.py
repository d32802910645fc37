"""Shortest paths, spanning trees, DFS edge classification and cycle lengths.

Graphs given as matrices are square lists of rows; a zero (or any false
value) means there is no edge.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any


@dataclass(frozen=True)
class Edge:
    """A weighted edge from ``src`` to ``dest``."""

    src: int
    dest: int
    weight: Any


class EdgeKind(Enum):
    """The four kinds of edge a depth-first search distinguishes."""

    TREE = "Tree"
    BACK = "Back"
    FORWARD = "Forward"
    CROSS = "Cross"


class DisjointSet:
    """Union-find over ``0 .. size - 1`` with path compression and union by rank."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError("size must not be negative")
        self._parent = list(range(size))
        self._rank = [0] * size

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, item: int) -> int:
        """Return the representative of the set holding ``item``."""
        root = item
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[item] != root:
            self._parent[item], item = root, self._parent[item]
        return root

    def union(self, x: int, y: int) -> bool:
        """Merge the sets of ``x`` and ``y``; return False if already joined."""
        x_root = self.find(x)
        y_root = self.find(y)
        if x_root == y_root:
            return False
        if self._rank[x_root] < self._rank[y_root]:
            self._parent[x_root] = y_root
        elif self._rank[x_root] > self._rank[y_root]:
            self._parent[y_root] = x_root
        else:
            self._parent[y_root] = x_root
            self._rank[x_root] += 1
        return True


def _square(graph: Sequence[Sequence[Any]]) -> list[list[Any]]:
    rows = [list(row) for row in graph]
    n = len(rows)
    for row in rows:
        if len(row) != n:
            raise ValueError("adjacency matrix must be square")
    return rows


def dijkstra(graph: Sequence[Sequence[Any]], source: int) -> list[Any]:
    """Return the shortest distance from ``source`` to every vertex.

    Weights must be non-negative; unreachable vertices get ``math.inf``.
    """
    matrix = _square(graph)
    n = len(matrix)
    if not 0 <= source < n:
        raise IndexError(f"source {source} out of range")
    dist: list[Any] = [math.inf] * n
    done = [False] * n
    dist[source] = 0
    for _ in range(n):
        u = min((v for v in range(n) if not done[v]), key=dist.__getitem__)
        if dist[u] == math.inf:
            break
        done[u] = True
        for v, weight in enumerate(matrix[u]):
            if weight and not done[v] and dist[u] + weight < dist[v]:
                dist[v] = dist[u] + weight
    return dist


def prim_mst(graph: Sequence[Sequence[Any]]) -> list[Edge]:
    """Return a minimum spanning tree of a connected undirected graph.

    Edge ``i - 1`` of the result joins vertex ``i`` to its parent, grown
    from vertex 0.  A disconnected graph raises ``ValueError``.
    """
    matrix = _square(graph)
    n = len(matrix)
    if n == 0:
        return []
    key: list[Any] = [math.inf] * n
    parent: list[int] = [-1] * n
    in_tree = [False] * n
    key[0] = 0
    for _ in range(n):
        u = min((v for v in range(n) if not in_tree[v]), key=key.__getitem__)
        if key[u] == math.inf:
            raise ValueError("graph is not connected")
        in_tree[u] = True
        for v, weight in enumerate(matrix[u]):
            if weight and not in_tree[v] and weight < key[v]:
                parent[v] = u
                key[v] = weight
    return [Edge(parent[i], i, matrix[i][parent[i]]) for i in range(1, n)]


def kruskal_mst(
    num_vertices: int, edges: Iterable[Edge | tuple[int, int, Any]]
) -> list[Edge]:
    """Return the edges of a minimum spanning forest, in the order chosen."""
    candidates = [e if isinstance(e, Edge) else Edge(*e) for e in edges]
    for edge in candidates:
        for vertex in (edge.src, edge.dest):
            if not 0 <= vertex < num_vertices:
                raise ValueError(f"vertex {vertex} out of range")
    candidates.sort(key=lambda e: e.weight)
    sets = DisjointSet(num_vertices)
    chosen: list[Edge] = []
    for edge in candidates:
        if len(chosen) >= num_vertices - 1:
            break
        if sets.union(edge.src, edge.dest):
            chosen.append(edge)
    return chosen


def classify_edges(
    adjacency: Sequence[Sequence[Any]],
) -> list[tuple[int, int, EdgeKind]]:
    """Classify each directed edge as met by a depth-first search.

    Vertices and neighbours are visited in index order; edges are reported
    in the order the search examines them.
    """
    matrix = _square(adjacency)
    n = len(matrix)
    disc: list[int | None] = [None] * n
    finish: list[int | None] = [None] * n
    clock = 0
    result: list[tuple[int, int, EdgeKind]] = []
    for start in range(n):
        if disc[start] is not None:
            continue
        clock += 1
        disc[start] = clock
        stack = [(start, iter(range(n)))]
        while stack:
            u, neighbours = stack[-1]
            for v in neighbours:
                if not matrix[u][v]:
                    continue
                if disc[v] is None:
                    result.append((u, v, EdgeKind.TREE))
                    clock += 1
                    disc[v] = clock
                    stack.append((v, iter(range(n))))
                    break
                if finish[v] is None:
                    kind = EdgeKind.BACK
                elif disc[u] < disc[v]:
                    kind = EdgeKind.FORWARD
                else:
                    kind = EdgeKind.CROSS
                result.append((u, v, kind))
            else:
                clock += 1
                finish[u] = clock
                stack.pop()
    return result


def cycle_lengths(adjacency: Sequence[Sequence[Any]]) -> tuple[int, int] | None:
    """Return the smallest and largest cycle length, or None if acyclic.

    Every simple path is explored, so an undirected graph given as a
    symmetric matrix counts each edge as a cycle of length 2.
    """
    matrix = _square(adjacency)
    n = len(matrix)
    smallest: int | None = None
    largest: int | None = None
    for start in range(n):
        path = [start]
        position = {start: 0}
        stack = [iter(range(n))]
        while stack:
            u = path[-1]
            for v in stack[-1]:
                if not matrix[u][v]:
                    continue
                if v in position:
                    length = len(path) - position[v]
                    smallest = length if smallest is None else min(smallest, length)
                    largest = length if largest is None else max(largest, length)
                else:
                    position[v] = len(path)
                    path.append(v)
                    stack.append(iter(range(n)))
                    break
            else:
                stack.pop()
                del position[path.pop()]
    if smallest is None or largest is None:
        return None
    return smallest, largest