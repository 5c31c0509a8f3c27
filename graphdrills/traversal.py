"""Breadth-first and depth-first traversal from vertex 0."""

from __future__ import annotations

from collections import deque
from collections.abc import Iterable, Mapping


def bfs_of_graph(vertex_count: int, adjacency: Mapping[int, Iterable[int]]) -> list[int]:
    """Return the vertices reachable from 0 in breadth-first order."""
    if vertex_count <= 0:
        return []
    visited = [False] * vertex_count
    visited[0] = True
    order: list[int] = []
    queue = deque([0])
    while queue:
        node = queue.popleft()
        order.append(node)
        for nbr in adjacency.get(node, ()):
            if not visited[nbr]:
                visited[nbr] = True
                queue.append(nbr)
    return order


def dfs_of_graph(vertex_count: int, adjacency: Mapping[int, Iterable[int]]) -> list[int]:
    """Return the vertices reachable from 0 in depth-first preorder."""
    if vertex_count <= 0:
        return []
    visited = [False] * vertex_count
    order: list[int] = []
    stack = [0]
    while stack:
        node = stack.pop()
        if visited[node]:
            continue
        visited[node] = True
        order.append(node)
        pending = [nbr for nbr in adjacency.get(node, ()) if not visited[nbr]]
        stack.extend(reversed(pending))
    return order