"""Breadth-first problems on rectangular grids."""

from __future__ import annotations

import math
from collections import deque
from collections.abc import Iterator, MutableSequence, Sequence

_ORTHOGONAL = ((1, 0), (0, 1), (-1, 0), (0, -1))
_ALL_EIGHT = _ORTHOGONAL + ((-1, -1), (-1, 1), (1, -1), (1, 1))


def _neighbours(
    x: int, y: int, rows: int, cols: int, directions=_ORTHOGONAL
) -> Iterator[tuple[int, int]]:
    for dx, dy in directions:
        nx, ny = x + dx, y + dy
        if 0 <= nx < rows and 0 <= ny < cols:
            yield nx, ny


def flood_fill(image: Sequence[Sequence[int]], sr: int, sc: int, color: int) -> list[list[int]]:
    """Copy of ``image`` with the region around ``(sr, sc)`` repainted in ``color``."""
    filled = [list(row) for row in image]
    initial = filled[sr][sc]
    if initial == color:
        return filled
    rows, cols = len(filled), len(filled[0])
    filled[sr][sc] = color
    queue = deque([(sr, sc)])
    while queue:
        x, y = queue.popleft()
        for nx, ny in _neighbours(x, y, rows, cols):
            if filled[nx][ny] == initial:
                filled[nx][ny] = color
                queue.append((nx, ny))
    return filled


def update_matrix(mat: Sequence[Sequence[int]]) -> list[list[float]]:
    """Distance from every cell to the nearest 0; ``math.inf`` if there is none."""
    rows, cols = len(mat), len(mat[0])
    dist: list[list[float]] = [[math.inf] * cols for _ in range(rows)]
    queue: deque[tuple[int, int]] = deque()
    for i, row in enumerate(mat):
        for j, value in enumerate(row):
            if value == 0:
                dist[i][j] = 0
                queue.append((i, j))
    while queue:
        x, y = queue.popleft()
        for nx, ny in _neighbours(x, y, rows, cols):
            if dist[nx][ny] > dist[x][y] + 1:
                dist[nx][ny] = dist[x][y] + 1
                queue.append((nx, ny))
    return dist


def oranges_rotting(grid: Sequence[Sequence[int]]) -> int:
    """Minutes until no fresh orange (1) is left beside a rotten one (2), or -1."""
    cells = [list(row) for row in grid]
    rows, cols = len(cells), len(cells[0])
    fresh = sum(row.count(1) for row in cells)
    frontier = [(i, j) for i, row in enumerate(cells) for j, value in enumerate(row) if value == 2]
    minutes = 0
    while frontier:
        spread: list[tuple[int, int]] = []
        for x, y in frontier:
            for nx, ny in _neighbours(x, y, rows, cols):
                if cells[nx][ny] == 1:
                    cells[nx][ny] = 2
                    fresh -= 1
                    spread.append((nx, ny))
        if spread:
            minutes += 1
        frontier = spread
    return minutes if fresh == 0 else -1


def num_enclaves(grid: Sequence[Sequence[int]]) -> int:
    """Number of land cells (1) from which the grid border cannot be reached."""
    cells = [list(row) for row in grid]
    rows, cols = len(cells), len(cells[0])
    queue: deque[tuple[int, int]] = deque()
    border = {(i, 0) for i in range(rows)} | {(i, cols - 1) for i in range(rows)}
    border |= {(0, j) for j in range(cols)} | {(rows - 1, j) for j in range(cols)}
    for x, y in border:
        if cells[x][y] == 1:
            cells[x][y] = 0
            queue.append((x, y))
    while queue:
        x, y = queue.popleft()
        for nx, ny in _neighbours(x, y, rows, cols):
            if cells[nx][ny] == 1:
                cells[nx][ny] = 0
                queue.append((nx, ny))
    return sum(row.count(1) for row in cells)


def shortest_path_binary_matrix(grid: Sequence[Sequence[int]]) -> int:
    """Cells on the shortest 8-connected clear path across a square grid, or -1."""
    n = len(grid)
    if grid[0][0] != 0 or grid[n - 1][n - 1] != 0:
        return -1
    cells = [list(row) for row in grid]
    cells[0][0] = 1
    frontier = [(0, 0)]
    length = 1
    while frontier:
        following: list[tuple[int, int]] = []
        for x, y in frontier:
            if x == n - 1 and y == n - 1:
                return length
            for nx, ny in _neighbours(x, y, n, n, _ALL_EIGHT):
                if cells[nx][ny] == 0:
                    cells[nx][ny] = 1
                    following.append((nx, ny))
        frontier = following
        length += 1
    return -1


def largest_island(grid: Sequence[Sequence[int]]) -> int:
    """Largest island in a square grid after turning at most one 0 into 1."""
    n = len(grid)
    labels = [list(row) for row in grid]
    areas: dict[int, int] = {}
    next_label = 2
    for i in range(n):
        for j in range(n):
            if labels[i][j] != 1:
                continue
            labels[i][j] = next_label
            queue = deque([(i, j)])
            area = 0
            while queue:
                x, y = queue.popleft()
                area += 1
                for nx, ny in _neighbours(x, y, n, n):
                    if labels[nx][ny] == 1:
                        labels[nx][ny] = next_label
                        queue.append((nx, ny))
            areas[next_label] = area
            next_label += 1

    best = 0
    found_water = False
    for i in range(n):
        for j in range(n):
            if labels[i][j] != 0:
                continue
            found_water = True
            touching = {labels[nx][ny] for nx, ny in _neighbours(i, j, n, n) if labels[nx][ny] > 1}
            best = max(best, 1 + sum(areas[label] for label in touching))
    return best if found_water else n * n


def num_islands(grid: Sequence[Sequence[str]]) -> int:
    """Number of 4-connected groups of ``'1'`` cells."""
    if not grid:
        return 0
    rows, cols = len(grid), len(grid[0])
    seen: set[tuple[int, int]] = set()
    count = 0
    for i in range(rows):
        for j in range(cols):
            if grid[i][j] != "1" or (i, j) in seen:
                continue
            count += 1
            seen.add((i, j))
            queue = deque([(i, j)])
            while queue:
                x, y = queue.popleft()
                for nx, ny in _neighbours(x, y, rows, cols):
                    if grid[nx][ny] == "1" and (nx, ny) not in seen:
                        seen.add((nx, ny))
                        queue.append((nx, ny))
    return count


def capture_surrounded(board: MutableSequence[MutableSequence[str]]) -> None:
    """Turn every ``'O'`` region not touching the border into ``'X'``, in place."""
    if not board or not board[0]:
        return
    rows, cols = len(board), len(board[0])
    border = {(i, 0) for i in range(rows)} | {(i, cols - 1) for i in range(rows)}
    border |= {(0, j) for j in range(cols)} | {(rows - 1, j) for j in range(cols)}
    queue: deque[tuple[int, int]] = deque()
    for x, y in border:
        if board[x][y] == "O":
            board[x][y] = "#"
            queue.append((x, y))
    while queue:
        x, y = queue.popleft()
        for nx, ny in _neighbours(x, y, rows, cols):
            if board[nx][ny] == "O":
                board[nx][ny] = "#"
                queue.append((nx, ny))
    for row in board:
        for j, cell in enumerate(row):
            if cell == "O":
                row[j] = "X"
            elif cell == "#":
                row[j] = "O"