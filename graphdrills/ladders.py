"""Shortest transformation sequences: word ladders and snakes and ladders."""

from __future__ import annotations

import string
from collections import deque
from collections.abc import Iterable, Iterator, Sequence


def _one_letter_variants(word: str) -> Iterator[str]:
    """Every word that differs from ``word`` in exactly one position (a-z)."""
    for i, original in enumerate(word):
        prefix, suffix = word[:i], word[i + 1 :]
        for letter in string.ascii_lowercase:
            if letter != original:
                yield prefix + letter + suffix


def ladder_length(begin_word: str, end_word: str, word_list: Iterable[str]) -> int:
    """Number of words in the shortest ladder from ``begin_word`` to ``end_word``, or 0."""
    unused = set(word_list)
    queue = deque([(begin_word, 1)])
    while queue:
        word, count = queue.popleft()
        if word == end_word:
            return count
        for candidate in _one_letter_variants(word):
            if candidate in unused:
                unused.discard(candidate)
                queue.append((candidate, count + 1))
    return 0


def find_ladders(begin_word: str, end_word: str, word_list: Iterable[str]) -> list[list[str]]:
    """Every shortest ladder from ``begin_word`` to ``end_word``."""
    unused = set(word_list)
    if end_word not in unused:
        return []
    unused.discard(begin_word)

    level = {begin_word: 1}
    queue = deque([begin_word])
    while queue:
        word = queue.popleft()
        steps = level[word]
        for candidate in _one_letter_variants(word):
            if candidate in unused:
                level[candidate] = steps + 1
                unused.discard(candidate)
                queue.append(candidate)

    if end_word not in level:
        return []

    ladders: list[list[str]] = []
    backwards = [end_word]

    def walk(word: str) -> None:
        if word == begin_word:
            ladders.append(backwards[::-1])
            return
        depth = level[word]
        for candidate in _one_letter_variants(word):
            if level.get(candidate, -1) + 1 == depth:
                backwards.append(candidate)
                walk(candidate)
                backwards.pop()

    walk(end_word)
    return ladders


def _square_position(square: int, n: int) -> tuple[int, int]:
    """Board row and column of a boustrophedon square numbered from 1."""
    row_from_bottom, col = divmod(square - 1, n)
    if row_from_bottom % 2 == 1:
        col = n - 1 - col
    return n - 1 - row_from_bottom, col


def snakes_and_ladders(board: Sequence[Sequence[int]]) -> int:
    """Fewest dice rolls to reach the last square, or -1 if it cannot be reached."""
    n = len(board)
    last = n * n
    visited = [[False] * n for _ in range(n)]
    visited[n - 1][0] = True
    frontier = [1]
    rolls = 0
    while frontier:
        following: list[int] = []
        for square in frontier:
            if square == last:
                return rolls
            for target in range(square + 1, min(square + 6, last) + 1):
                r, c = _square_position(target, n)
                if visited[r][c]:
                    continue
                visited[r][c] = True
                following.append(target if board[r][c] == -1 else board[r][c])
        frontier = following
        rolls += 1
    return -1