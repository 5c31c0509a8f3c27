"""Articulation points, bridges and strongly connected components."""

from __future__ import annotations

import argparse
import sys
from collections import defaultdict
from collections.abc import Iterable, Sequence


def _undirected(n: int, connections: Iterable[Sequence[int]]) -> defaultdict[int, list[int]]:
    adjacency: defaultdict[int, list[int]] = defaultdict(list)
    for u, v in connections:
        adjacency[u].append(v)
        adjacency[v].append(u)
    return adjacency


def articulation_points(n: int, connections: Iterable[Sequence[int]]) -> list[int]:
    """Vertices whose removal disconnects their component.

    A non-root vertex is reported once for each child subtree it separates.
    """
    adjacency = _undirected(n, connections)
    disc = [0] * n
    low = [0] * n
    children = [0] * n
    visited: set[int] = set()
    timer = 0
    points: list[int] = []

    for start in range(n):
        if start in visited:
            continue
        visited.add(start)
        disc[start] = low[start] = timer
        timer += 1
        stack = [(start, None, iter(adjacency[start]))]
        while stack:
            node, parent, neighbours = stack[-1]
            for nbr in neighbours:
                if nbr == parent:
                    continue
                if nbr not in visited:
                    visited.add(nbr)
                    disc[nbr] = low[nbr] = timer
                    timer += 1
                    stack.append((nbr, node, iter(adjacency[nbr])))
                    break
                low[node] = min(low[node], disc[nbr])
            else:
                stack.pop()
                if parent is None:
                    if children[node] > 1:
                        points.append(node)
                    continue
                low[parent] = min(low[parent], low[node])
                children[parent] += 1
                grandparent = stack[-1][1]
                if grandparent is not None and low[node] >= disc[parent]:
                    points.append(parent)
    return points


def critical_connections(n: int, connections: Iterable[Sequence[int]]) -> list[list[int]]:
    """Bridges of the component containing vertex 0, as ``[parent, child]`` pairs."""
    if n <= 0:
        return []
    adjacency = _undirected(n, connections)
    disc = [0] * n
    low = [0] * n
    visited = {0}
    disc[0] = low[0] = 1
    bridges: list[list[int]] = []
    stack = [(0, None, iter(adjacency[0]))]
    while stack:
        node, parent, neighbours = stack[-1]
        for nbr in neighbours:
            if nbr == parent:
                continue
            if nbr not in visited:
                visited.add(nbr)
                disc[nbr] = low[nbr] = disc[node] + 1
                stack.append((nbr, node, iter(adjacency[nbr])))
                break
            low[node] = min(low[node], disc[nbr])
        else:
            stack.pop()
            if parent is not None:
                low[parent] = min(low[parent], low[node])
                if disc[parent] < low[node]:
                    bridges.append([parent, node])
    return bridges


def strongly_connected_count(n: int, edges: Iterable[Sequence[int]]) -> int:
    """Number of strongly connected components among vertices ``0 .. n - 1``."""
    adjacency: defaultdict[int, list[int]] = defaultdict(list)
    for u, v in edges:
        adjacency[u].append(v)

    visited: set[int] = set()
    finished: list[int] = []
    for start in range(n):
        if start in visited:
            continue
        visited.add(start)
        stack = [(start, iter(adjacency[start]))]
        while stack:
            node, neighbours = stack[-1]
            for nbr in neighbours:
                if nbr not in visited:
                    visited.add(nbr)
                    stack.append((nbr, iter(adjacency[nbr])))
                    break
            else:
                stack.pop()
                finished.append(node)

    transpose: defaultdict[int, list[int]] = defaultdict(list)
    for node in range(n):
        visited.discard(node)
        for nbr in adjacency[node]:
            transpose[nbr].append(node)

    count = 0
    for start in reversed(finished):
        if start in visited:
            continue
        count += 1
        visited.add(start)
        pending = [start]
        while pending:
            node = pending.pop()
            for nbr in transpose[node]:
                if nbr not in visited:
                    visited.add(nbr)
                    pending.append(nbr)
    return count


def main(argv: Sequence[str] | None = None) -> int:
    """Read a directed edge list from standard input and print the SCC count."""
    parser = argparse.ArgumentParser(
        description="Read 'n e' and then e lines 'u v' from standard input "
        "and print the number of strongly connected components."
    )
    parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())
    print("Enter number of nodes and edges")
    try:
        n, e = int(next(tokens)), int(next(tokens))
        print("Enter edges")
        edges = [(int(next(tokens)), int(next(tokens))) for _ in range(e)]
    except (StopIteration, ValueError):
        print("error: expected integers 'n e' followed by e edges 'u v'", file=sys.stderr)
        return 1
    print(strongly_connected_count(n, edges))
    return 0