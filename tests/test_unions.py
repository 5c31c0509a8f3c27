import pytest

from graphdrills.unions import (
    accounts_merge,
    equations_possible,
    find_redundant_connection,
    largest_component_size,
    make_connected,
    smallest_string_with_swaps,
)

ACCOUNTS = [
    ["John", "john.smith@example.com", "john.ny@example.com"],
    ["John", "john.smith@example.com", "john00@example.com"],
    ["Mary", "mary@example.com"],
    ["John", "johnny@example.com"],
]


def test_accounts_merge_worked_example():
    assert accounts_merge(ACCOUNTS) == [
        ["John", "john.ny@example.com", "john.smith@example.com", "john00@example.com"],
        ["Mary", "mary@example.com"],
        ["John", "johnny@example.com"],
    ]


def test_accounts_merge_each_email_once():
    merged = accounts_merge(ACCOUNTS)
    emails = [email for group in merged for email in group[1:]]
    expected = {email for account in ACCOUNTS for email in account[1:]}
    assert sorted(emails) == sorted(expected)
    for group in merged:
        assert group[1:] == sorted(group[1:])


def test_accounts_merge_chain_joins_all():
    accounts = [
        ["Ann", "a@example.com", "b@example.com"],
        ["Ann", "c@example.com"],
        ["Ann", "b@example.com", "c@example.com"],
    ]
    merged = accounts_merge(accounts)
    assert merged == [["Ann", "a@example.com", "b@example.com", "c@example.com"]]


def test_largest_component_size_worked_example():
    assert largest_component_size([4, 6, 15, 35]) == 4


def test_largest_component_size_bounds():
    nums = [2, 3, 6, 7, 4, 12, 21, 39]
    size = largest_component_size(nums)
    assert 1 <= size <= len(nums)
    assert largest_component_size(nums + [14]) >= size


def test_largest_component_size_coprime_primes():
    primes = [2, 3, 5, 7, 11]
    assert largest_component_size(primes) == 1


def test_largest_component_size_empty_raises():
    with pytest.raises(ValueError):
        largest_component_size([])


def test_find_redundant_connection_returns_cycle_edge():
    edges = [[1, 2], [2, 3], [3, 4], [1, 4], [1, 5]]
    assert find_redundant_connection(edges) == edges[3]


def test_find_redundant_connection_last_cycle_edge_wins():
    edges = [[1, 2], [1, 3], [2, 3]]
    assert find_redundant_connection(edges) == edges[-1]


def test_smallest_string_with_swaps_worked_example():
    assert smallest_string_with_swaps("dcab", [[0, 3], [1, 2]]) == "bacd"


def test_smallest_string_with_swaps_all_connected_sorts():
    s = "cbad"
    pairs = [[0, 1], [1, 2], [2, 3]]
    assert smallest_string_with_swaps(s, pairs) == "".join(sorted(s))


def test_smallest_string_with_swaps_invariants():
    s = "zyxwvu"
    result = smallest_string_with_swaps(s, [[0, 5], [2, 3]])
    assert sorted(result) == sorted(s)
    assert result <= s
    assert smallest_string_with_swaps(s, []) == s


def test_make_connected_too_few_cables():
    assert make_connected(6, [[0, 1], [0, 2], [0, 3], [1, 2]]) == -1


def test_make_connected_spare_cable_used():
    assert make_connected(4, [[0, 1], [0, 2], [1, 2]]) == 1


def test_make_connected_tree_needs_nothing():
    edges = [[0, 1], [1, 2], [2, 3]]
    assert make_connected(4, edges) == 0


def test_make_connected_counts_isolated_groups():
    clique = [[0, 1], [0, 2], [0, 3], [1, 2], [1, 3], [2, 3]]
    isolated = 3
    assert make_connected(4 + isolated, clique) == isolated


def test_equations_contradiction():
    assert not equations_possible(["a==b", "b!=a"])


def test_equations_consistent():
    assert equations_possible(["b==a", "a==b"])


def test_equations_self_inequality():
    assert not equations_possible(["a!=a"])


def test_equations_transitive_contradiction():
    assert not equations_possible(["a==b", "b==c", "a!=c"])
    assert equations_possible(["a==b", "c==d", "a!=d"])