"""Single-source and all-pairs shortest paths."""

from __future__ import annotations

import heapq
import math
from collections.abc import Iterable, Sequence
from typing import NamedTuple

UNREACHABLE = 10**9
"""Distance used by :func:`all_pairs_shortest_path` for missing paths."""


class Edge(NamedTuple):
    """A directed weighted edge."""

    src: int
    dest: int
    weight: int


class NegativeCycleError(ValueError):
    """Raised when a reachable negative-weight cycle exists."""


def dijkstra(graph: Iterable[Sequence[int]], n: int, source: int) -> list[float]:
    """Distances from ``source`` over directed edges ``(u, v, w)`` on vertices 1..n.

    The result has ``n + 1`` entries; unreachable vertices get ``math.inf``.
    """
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n + 1)]
    for u, v, w in graph:
        adjacency[u].append((v, w))

    dist: list[float] = [math.inf] * (n + 1)
    dist[source] = 0
    heap = [(0, source)]
    while heap:
        current, u = heapq.heappop(heap)
        for v, w in adjacency[u]:
            if dist[v] > current + w:
                dist[v] = current + w
                heapq.heappush(heap, (dist[v], v))
    return dist


def bellman_ford(edges: Iterable[Sequence[int]], vertex_count: int, source: int, dest: int) -> float:
    """Shortest distance from ``source`` to ``dest``; ``math.inf`` if unreachable.

    Raises :class:`NegativeCycleError` if a negative cycle is detected.
    """
    edge_list = [Edge(*edge) for edge in edges]
    dist: list[float] = [math.inf] * vertex_count
    dist[source] = 0

    for _ in range(vertex_count - 1):
        for u, v, w in edge_list:
            if dist[u] != math.inf and dist[u] + w < dist[v]:
                dist[v] = dist[u] + w

    if any(dist[u] != math.inf and dist[u] + w < dist[v] for u, v, w in edge_list):
        raise NegativeCycleError("negative cycle is present")
    return dist[dest]


def all_pairs_shortest_path(n: int, edges: Iterable[Sequence[int]]) -> list[list[int]]:
    """Floyd-Warshall over directed edges; missing paths are :data:`UNREACHABLE`."""
    dist = [[UNREACHABLE] * n for _ in range(n)]
    for i in range(n):
        dist[i][i] = 0
    for u, v, w in edges:
        dist[u][v] = w

    for via in range(n):
        via_row = dist[via]
        for row in dist:
            through = row[via]
            for j, cost in enumerate(via_row):
                if row[j] > through + cost:
                    row[j] = through + cost
    return dist