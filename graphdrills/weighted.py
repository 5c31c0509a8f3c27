"""Shortest-path problems on weighted graphs and height grids."""

from __future__ import annotations

import heapq
import math
from collections import defaultdict
from collections.abc import Iterable, Iterator, Sequence

MOD = 10**9 + 7
"""Modulus applied to path counts by :func:`count_paths`."""

_DIRECTIONS = ((1, 0), (0, 1), (-1, 0), (0, -1))


def _neighbours(x: int, y: int, rows: int, cols: int) -> Iterator[tuple[int, int]]:
    for dx, dy in _DIRECTIONS:
        nx, ny = x + dx, y + dy
        if 0 <= nx < rows and 0 <= ny < cols:
            yield nx, ny


def network_delay_time(times: Iterable[Sequence[int]], n: int, k: int) -> int:
    """Time for a signal from ``k`` to reach nodes ``1 .. n``, or -1 if some never hear it."""
    adjacency: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
    for u, v, w in times:
        adjacency[u].append((v, w))

    dist: list[float] = [math.inf] * (n + 1)
    dist[k] = 0
    heap = [(0, k)]
    while heap:
        elapsed, u = heapq.heappop(heap)
        if elapsed > dist[u]:
            continue
        for v, w in adjacency[u]:
            if dist[v] > elapsed + w:
                dist[v] = elapsed + w
                heapq.heappush(heap, (dist[v], v))

    slowest = max(dist[1:], default=0)
    return -1 if slowest == math.inf else int(slowest)


def count_paths(n: int, roads: Iterable[Sequence[int]]) -> int:
    """Number of shortest routes from node 0 to node ``n - 1``, modulo :data:`MOD`."""
    adjacency: defaultdict[int, list[tuple[int, int]]] = defaultdict(list)
    for u, v, w in roads:
        adjacency[u].append((v, w))
        adjacency[v].append((u, w))

    dist: list[float] = [math.inf] * n
    ways = [0] * n
    dist[0] = 0
    ways[0] = 1
    heap = [(0, 0)]
    while heap:
        d, u = heapq.heappop(heap)
        if d > dist[u]:
            continue
        for v, w in adjacency[u]:
            candidate = d + w
            if candidate < dist[v]:
                dist[v] = candidate
                ways[v] = ways[u]
                heapq.heappush(heap, (candidate, v))
            elif candidate == dist[v]:
                ways[v] = (ways[v] + ways[u]) % MOD
    return ways[n - 1]


def city_distances(n: int, edges: Iterable[Sequence[int]]) -> list[list[float]]:
    """All-pairs distances over undirected edges ``(u, v, w)``; ``math.inf`` if unreachable.

    A later edge between the same pair replaces an earlier one.
    """
    dist: list[list[float]] = [[math.inf] * n for _ in range(n)]
    for i in range(n):
        dist[i][i] = 0
    for u, v, w in edges:
        dist[u][v] = w
        dist[v][u] = w

    for via in range(n):
        via_row = dist[via]
        for row in dist:
            through = row[via]
            for j, cost in enumerate(via_row):
                if row[j] > through + cost:
                    row[j] = through + cost
    return dist


def find_cheapest_price(
    n: int, flights: Iterable[Sequence[int]], src: int, dest: int, k: int
) -> int:
    """Cheapest fare from ``src`` to ``dest`` with at most ``k`` stops, or -1."""
    adjacency: list[list[tuple[int, int]]] = [[] for _ in range(n)]
    for u, v, price in flights:
        adjacency[u].append((v, price))

    best: list[list[float]] = [[math.inf] * (k + 2) for _ in range(n)]
    best[src][0] = 0
    heap = [(0, src, 0)]
    while heap:
        cost, node, stops = heapq.heappop(heap)
        if node == dest:
            return cost
        if stops > k:
            continue
        for nxt, price in adjacency[node]:
            candidate = cost + price
            if candidate < best[nxt][stops + 1]:
                best[nxt][stops + 1] = candidate
                heapq.heappush(heap, (candidate, nxt, stops + 1))
    return -1


def swim_in_water(grid: Sequence[Sequence[int]]) -> int:
    """Least water level at which the bottom-right cell is reachable from the top-left."""
    n = len(grid)
    visited = [[False] * n for _ in range(n)]
    level = 0
    heap = [(grid[0][0], 0, 0)]
    while heap:
        height, x, y = heapq.heappop(heap)
        if visited[x][y]:
            continue
        visited[x][y] = True
        level = max(level, height)
        if x == n - 1 and y == n - 1:
            return level
        for nx, ny in _neighbours(x, y, n, n):
            if not visited[nx][ny]:
                heapq.heappush(heap, (grid[nx][ny], nx, ny))
    return level


def minimum_effort_path(heights: Sequence[Sequence[int]]) -> float:
    """Smallest possible largest height step on a route from top-left to bottom-right."""
    rows, cols = len(heights), len(heights[0])
    effort: list[list[float]] = [[math.inf] * cols for _ in range(rows)]
    effort[0][0] = 0
    heap = [(0, 0, 0)]
    while heap:
        current, x, y = heapq.heappop(heap)
        if current > effort[x][y]:
            continue
        for nx, ny in _neighbours(x, y, rows, cols):
            step = max(abs(heights[x][y] - heights[nx][ny]), current)
            if step < effort[nx][ny]:
                effort[nx][ny] = step
                heapq.heappush(heap, (step, nx, ny))
    return effort[rows - 1][cols - 1]