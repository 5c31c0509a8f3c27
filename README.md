# graphdrills

Graph algorithms and the classic puzzles built on them. The package is plain
Python and has no third-party dependencies.

## Installation

```
pip install graphdrills
```

To run the test suite:

```
pip install "graphdrills[test]"
pytest
```

## Modules

| Module | Contents |
| --- | --- |
| `graphdrills.disjoint_set` | `DisjointSet(size)` over `0 .. size - 1`, with path compression and union by rank. `find(node)` returns the representative. `union(u, v)` returns `False` if the two were already in one set. |
| `graphdrills.traversal` | `bfs_of_graph`, `dfs_of_graph`: the vertices reachable from vertex 0, given a vertex count and a mapping from vertex to neighbours. |
| `graphdrills.shortest_paths` | `dijkstra` (vertices `1 .. n`, unreachable ones get `math.inf`), `bellman_ford` (raises `NegativeCycleError`, returns `math.inf` if the target is unreachable), `all_pairs_shortest_path` (Floyd–Warshall, missing paths are `UNREACHABLE` = `10**9`), and the `Edge` named tuple. |
| `graphdrills.spanning_trees` | `kruskal_mst_cost`, `prim_mst_cost`, `min_cost_connect_points` (Manhattan distance), the `WeightedEdge` named tuple, and `main` for the `graphdrills-mst` command. |
| `graphdrills.connectivity` | `articulation_points` (a non-root vertex is listed once for each child subtree it cuts off, so it may repeat), `critical_connections` (bridges of the component holding vertex 0, as `[parent, child]`), `strongly_connected_count` (Kosaraju), and `main` for the `graphdrills-scc` command. |
| `graphdrills.dag` | `all_paths_source_target`, `can_finish`, `find_order`, `check_if_prerequisite`, `get_ancestors`, `find_all_recipes`, `eventual_safe_nodes`. |
| `graphdrills.graphs` | The `Node` dataclass with `clone_graph`, plus `find_circle_num`, `find_center`, `is_bipartite`, `can_visit_all_rooms`, `lexical_order`, `remove_stones`. |
| `graphdrills.weighted` | `network_delay_time`, `count_paths` (modulo `MOD` = `10**9 + 7`), `city_distances`, `find_cheapest_price`, `swim_in_water`, `minimum_effort_path`. |
| `graphdrills.grids` | `flood_fill`, `update_matrix`, `oranges_rotting`, `num_enclaves`, `shortest_path_binary_matrix`, `largest_island`, `num_islands`, `capture_surrounded`. |
| `graphdrills.ladders` | `ladder_length`, `find_ladders`, `snakes_and_ladders`. |
| `graphdrills.unions` | `accounts_merge`, `largest_component_size` (raises `ValueError` on an empty list), `find_redundant_connection`, `smallest_string_with_swaps`, `make_connected`, `equations_possible`. |

The grid functions work on copies of their input and return a result. The one
exception is `capture_surrounded`, which changes the board it is given and
returns `None`.

## Library use

```python
from graphdrills.dag import can_finish, find_order
from graphdrills.grids import num_islands
from graphdrills.disjoint_set import DisjointSet

# Course 1 requires course 0.
can_finish(2, [[1, 0]])        # True
find_order(2, [[1, 0]])        # [0, 1]

num_islands([
    ["1", "1", "0"],
    ["0", "0", "0"],
    ["0", "0", "1"],
])                             # 2

sets = DisjointSet(4)
sets.union(0, 1)               # True
sets.find(0) == sets.find(1)   # True
```

Inputs take the forms that the functions' parameters describe:

- edge lists are lists of `[u, v]` or `[u, v, w]`;
- adjacency is a list or a mapping of neighbour lists;
- grids are lists of rows.

## Command-line tools

Both commands read all of standard input as whitespace-separated integers and
print their prompts to standard output as they go. If the input is malformed,
they write an error to standard error and exit with status 1.

`graphdrills-mst` reads the number of nodes and edges, then each edge as
`u v w`, and prints the total weight of a minimum spanning forest:

```
printf '4 5\n0 1 10\n0 2 6\n0 3 5\n1 3 15\n2 3 4\n' | graphdrills-mst
```

For this input, the last line printed is `Minimum cost of spanning tree is: 19`.

`graphdrills-scc` reads the number of nodes and edges, then each directed edge
as `u v`, and prints the number of strongly connected components:

```
printf '5 5\n1 0\n0 2\n2 1\n0 3\n3 4\n' | graphdrills-scc
```

For this input, the last line printed is `3`.

## What it does not do

There is no general graph class. Each function takes plain lists and mappings
and returns plain values. The package does not read or write graph file
formats, and it does not draw graphs. Apart from the two commands above, the
solvers are available only as Python functions.