"""Small problems on undirected graphs, adjacency matrices and implicit graphs."""

from __future__ import annotations

from collections import Counter, deque
from collections.abc import Sequence
from dataclasses import dataclass, field

from graphdrills.disjoint_set import DisjointSet


@dataclass(eq=False)
class Node:
    """A graph node holding a value and its neighbours."""

    val: int = 0
    neighbors: list[Node] = field(default_factory=list)


def find_circle_num(is_connected: Sequence[Sequence[int]]) -> int:
    """Number of connected groups in an adjacency matrix."""
    n = len(is_connected)
    visited = [False] * n
    count = 0
    for start in range(n):
        if visited[start]:
            continue
        count += 1
        visited[start] = True
        stack = [start]
        while stack:
            u = stack.pop()
            for v, linked in enumerate(is_connected[u]):
                if linked == 1 and not visited[v]:
                    visited[v] = True
                    stack.append(v)
    return count


def clone_graph(node: Node | None) -> Node | None:
    """Deep copy of the graph reachable from ``node``."""
    if node is None:
        return None
    copies = {node: Node(node.val)}
    stack = [node]
    while stack:
        original = stack.pop()
        copy = copies[original]
        for nbr in original.neighbors:
            if nbr not in copies:
                copies[nbr] = Node(nbr.val)
                stack.append(nbr)
            copy.neighbors.append(copies[nbr])
    return copies[node]


def find_center(edges: Sequence[Sequence[int]]) -> int:
    """Centre of a star graph, or -1 if no node touches every edge."""
    target = len(edges)
    degree: Counter[int] = Counter()
    for u, v in edges:
        degree[u] += 1
        degree[v] += 1
        if degree[u] == target:
            return u
        if degree[v] == target:
            return v
    return -1


def is_bipartite(graph: Sequence[Sequence[int]]) -> bool:
    """True if the graph's nodes can be split into two independent sets."""
    n = len(graph)
    color = [-1] * n
    visited = [False] * n
    for start in range(n):
        if visited[start]:
            continue
        color[start] = 1
        queue = deque([start])
        while queue:
            top = queue.popleft()
            for nbr in graph[top]:
                if visited[nbr]:
                    if color[top] == color[nbr]:
                        return False
                else:
                    visited[nbr] = True
                    color[nbr] = 1 - color[top]
                    queue.append(nbr)
    return True


def can_visit_all_rooms(rooms: Sequence[Sequence[int]]) -> bool:
    """True if every room is reachable from room 0 using the keys found."""
    if not rooms:
        return True
    visited = [False] * len(rooms)
    visited[0] = True
    queue = deque([0])
    while queue:
        room = queue.popleft()
        for key in rooms[room]:
            if not visited[key]:
                visited[key] = True
                queue.append(key)
    return all(visited)


def lexical_order(n: int) -> list[int]:
    """The integers ``1 .. n`` in lexicographic order of their decimal form."""
    order: list[int] = []
    current = 1
    for _ in range(max(n, 0)):
        order.append(current)
        if current * 10 <= n:
            current *= 10
        else:
            while current % 10 == 9 or current + 1 > n:
                current //= 10
            current += 1
    return order


def remove_stones(stones: Sequence[Sequence[int]]) -> int:
    """Most stones removable when a stone may go if another shares its row or column."""
    sets = DisjointSet(len(stones))
    first_in_row: dict[int, int] = {}
    first_in_col: dict[int, int] = {}
    merges = 0
    for i, (row, col) in enumerate(stones):
        for first, key in ((first_in_row, row), (first_in_col, col)):
            if key in first:
                merges += sets.union(first[key], i)
            else:
                first[key] = i
    return merges