from graphdrills.traversal import bfs_of_graph, dfs_of_graph

GRAPH = {0: [1, 2], 1: [3], 2: [], 3: [], 4: [0]}


def test_bfs_visits_by_layers():
    assert bfs_of_graph(5, GRAPH) == [0, 1, 2, 3]


def test_dfs_goes_deep_first():
    assert dfs_of_graph(5, GRAPH) == [0, 1, 3, 2]


def test_both_visit_the_same_reachable_set_once():
    bfs = bfs_of_graph(5, GRAPH)
    dfs = dfs_of_graph(5, GRAPH)
    assert sorted(bfs) == sorted(dfs)
    assert len(set(bfs)) == len(bfs)
    assert 4 not in bfs


def test_traversals_start_at_zero():
    graph = {0: [2], 2: [1], 1: [0]}
    assert bfs_of_graph(3, graph)[0] == 0
    assert dfs_of_graph(3, graph)[0] == 0


def test_empty_graph():
    assert bfs_of_graph(0, {}) == []
    assert dfs_of_graph(0, {}) == []


def test_missing_adjacency_entries_mean_no_neighbours():
    assert bfs_of_graph(3, {}) == [0]
    assert dfs_of_graph(3, {}) == [0]