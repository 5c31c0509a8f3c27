"""Minimum spanning tree costs (Kruskal and Prim)."""

from __future__ import annotations

import argparse
import heapq
import itertools
import math
import sys
from collections.abc import Iterable, Mapping, Sequence
from typing import NamedTuple

from graphdrills.disjoint_set import DisjointSet


class WeightedEdge(NamedTuple):
    """An undirected weighted edge."""

    src: int
    dest: int
    weight: int


def kruskal_mst_cost(n: int, edges: Iterable[Sequence[int]]) -> int:
    """Total weight of a minimum spanning forest over vertices ``0 .. n - 1``."""
    ordered = sorted((WeightedEdge(*edge) for edge in edges), key=lambda e: e.weight)
    sets = DisjointSet(n)
    return sum(edge.weight for edge in ordered if sets.union(edge.src, edge.dest))


def prim_mst_cost(vertex_count: int, adjacency: Mapping[int, Iterable[tuple[int, int]]]) -> int:
    """Weight of the spanning tree grown from vertex 0 over ``u -> [(v, w), ...]``."""
    if vertex_count <= 0:
        return 0
    dist: list[float] = [math.inf] * vertex_count
    in_tree = [False] * vertex_count
    dist[0] = 0
    heap = [(0, 0)]
    while heap:
        _, u = heapq.heappop(heap)
        if in_tree[u]:
            continue
        in_tree[u] = True
        for v, w in adjacency.get(u, ()):
            if not in_tree[v] and dist[v] > w:
                dist[v] = w
                heapq.heappush(heap, (w, v))
    return sum(int(d) for d in dist if d != math.inf)


def min_cost_connect_points(points: Sequence[Sequence[int]]) -> int:
    """Cost to connect all points with Manhattan-distance edges."""
    edges = (
        WeightedEdge(i, j, abs(a[0] - b[0]) + abs(a[1] - b[1]))
        for (i, a), (j, b) in itertools.combinations(enumerate(points), 2)
    )
    return kruskal_mst_cost(len(points), edges)


def main(argv: Sequence[str] | None = None) -> int:
    """Read a weighted edge list from standard input and print the MST cost."""
    parser = argparse.ArgumentParser(
        description="Read 'n m' and then m lines 'u v w' from standard input "
        "and print the minimum spanning tree cost."
    )
    parser.parse_args(argv)

    tokens = iter(sys.stdin.read().split())
    print("Enter number of nodes and edges: ", end="")
    try:
        n, m = int(next(tokens)), int(next(tokens))
        print("Enter edges (u v w): ")
        edges = [
            WeightedEdge(int(next(tokens)), int(next(tokens)), int(next(tokens)))
            for _ in range(m)
        ]
    except (StopIteration, ValueError):
        print("\nerror: expected integers 'n m' followed by m edges 'u v w'", file=sys.stderr)
        return 1
    print(f"Minimum cost of spanning tree is: {kruskal_mst_cost(n, edges)}")
    return 0