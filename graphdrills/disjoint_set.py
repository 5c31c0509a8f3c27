"""Union-find structure with union by rank and path compression."""

from __future__ import annotations


class DisjointSet:
    """Disjoint sets over the integers ``0 .. size - 1``."""

    def __init__(self, size: int) -> None:
        if size < 0:
            raise ValueError(f"size must be non-negative, got {size}")
        self._parent = list(range(size))
        self._rank = [0] * size

    def __len__(self) -> int:
        return len(self._parent)

    def find(self, node: int) -> int:
        """Return the representative of the set holding ``node``."""
        if not 0 <= node < len(self._parent):
            raise IndexError(f"node {node} is outside 0..{len(self._parent) - 1}")
        root = node
        while self._parent[root] != root:
            root = self._parent[root]
        while self._parent[node] != root:
            self._parent[node], node = root, self._parent[node]
        return root

    def union(self, u: int, v: int) -> bool:
        """Merge the sets of ``u`` and ``v``; return False if already merged."""
        u = self.find(u)
        v = self.find(v)
        if u == v:
            return False
        if self._rank[u] < self._rank[v]:
            self._parent[u] = v
        elif self._rank[v] < self._rank[u]:
            self._parent[v] = u
        else:
            self._parent[v] = u
            self._rank[u] += 1
        return True