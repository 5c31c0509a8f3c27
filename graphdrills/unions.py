"""Problems solved by merging disjoint sets."""

from __future__ import annotations

from collections import Counter, defaultdict
from collections.abc import Iterable, Sequence

from graphdrills.disjoint_set import DisjointSet


def accounts_merge(accounts: Sequence[Sequence[str]]) -> list[list[str]]:
    """Merge accounts that share an e-mail address.

    Each result is ``[name, *sorted emails]``; groups follow the order in which
    their first account appears.
    """
    sets = DisjointSet(len(accounts))
    owner: dict[str, int] = {}
    for i, (_, *emails) in enumerate(accounts):
        for email in emails:
            if email in owner:
                sets.union(owner[email], i)
            else:
                owner[email] = i

    grouped: defaultdict[int, set[str]] = defaultdict(set)
    for email, i in owner.items():
        grouped[sets.find(i)].add(email)

    first_account: dict[int, int] = {}
    for i in range(len(accounts)):
        first_account.setdefault(sets.find(i), i)

    return [
        [accounts[first_account[root]][0], *sorted(grouped[root])]
        for root in sorted(grouped, key=first_account.__getitem__)
    ]


def largest_component_size(nums: Sequence[int]) -> int:
    """Size of the largest group of numbers linked by sharing a factor above 1."""
    if not nums:
        raise ValueError("nums must not be empty")
    sets = DisjointSet(max(nums) + 1)
    owner: dict[int, int] = {}

    def attach(num: int, factor: int) -> None:
        if factor in owner:
            sets.union(num, owner[factor])
        else:
            owner[factor] = num

    for num in nums:
        factor = 2
        while factor * factor <= num:
            if num % factor == 0:
                attach(num, factor)
                attach(num, num // factor)
            factor += 1
        attach(num, num)

    return max(Counter(sets.find(num) for num in nums).values())


def find_redundant_connection(edges: Sequence[Sequence[int]]) -> list[int]:
    """The last edge that closes a cycle among nodes ``1 .. len(edges)``, or ``[]``."""
    sets = DisjointSet(len(edges) + 1)
    redundant: list[int] = []
    for u, v in edges:
        if not sets.union(u, v):
            redundant = [u, v]
    return redundant


def smallest_string_with_swaps(s: str, pairs: Iterable[Sequence[int]]) -> str:
    """Lexicographically smallest string reachable by swapping the given index pairs."""
    sets = DisjointSet(len(s))
    for a, b in pairs:
        sets.union(a, b)

    groups: defaultdict[int, list[int]] = defaultdict(list)
    for i in range(len(s)):
        groups[sets.find(i)].append(i)

    result = list(s)
    for indices in groups.values():
        for index, char in zip(indices, sorted(s[i] for i in indices)):
            result[index] = char
    return "".join(result)


def make_connected(n: int, connections: Sequence[Sequence[int]]) -> int:
    """Cables to move so that all ``n`` computers connect, or -1 if too few cables."""
    if len(connections) < n - 1:
        return -1
    sets = DisjointSet(n)
    for u, v in connections:
        sets.union(u, v)
    return len({sets.find(i) for i in range(n)}) - 1


def equations_possible(equations: Iterable[str]) -> bool:
    """True if all ``"a==b"`` and ``"a!=b"`` equations over single letters can hold."""
    equations = list(equations)
    sets = DisjointSet(26)

    def letter(ch: str) -> int:
        return ord(ch) - ord("a")

    for eq in equations:
        if eq[1] == "=":
            sets.union(letter(eq[0]), letter(eq[3]))
    return not any(
        eq[1] == "!" and sets.find(letter(eq[0])) == sets.find(letter(eq[3]))
        for eq in equations
    )