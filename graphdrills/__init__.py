"""Graph algorithms and graph-based puzzle solvers: traversals, shortest paths,
spanning trees, connectivity, DAGs, grids, word ladders and disjoint sets."""

__version__ = "0.1.0"