import copy
import math
import random

from graphdrills.grids import (
    capture_surrounded,
    flood_fill,
    largest_island,
    num_enclaves,
    num_islands,
    oranges_rotting,
    shortest_path_binary_matrix,
    update_matrix,
)


def _around(x, y, rows, cols):
    for dx, dy in ((1, 0), (0, 1), (-1, 0), (0, -1)):
        nx, ny = x + dx, y + dy
        if 0 <= nx < rows and 0 <= ny < cols:
            yield nx, ny


def test_flood_fill_example():
    image = [[1, 1, 1], [1, 1, 0], [1, 0, 1]]
    assert flood_fill(image, 1, 1, 2) == [[2, 2, 2], [2, 2, 0], [2, 0, 1]]


def test_flood_fill_does_not_modify_input():
    image = [[1, 1], [0, 1]]
    original = copy.deepcopy(image)
    flood_fill(image, 0, 0, 3)
    assert image == original


def test_flood_fill_same_colour_gives_equal_copy():
    image = [[4, 4], [4, 0]]
    result = flood_fill(image, 0, 0, 4)
    assert result == image
    assert result is not image


def test_flood_fill_ignores_diagonals():
    image = [[1, 0], [0, 1]]
    colour = 5
    result = flood_fill(image, 0, 0, colour)
    assert result[0][0] == colour
    assert result[1][1] == image[1][1]


def test_update_matrix_example():
    mat = [[0, 0, 0], [0, 1, 0], [1, 1, 1]]
    assert update_matrix(mat) == [[0, 0, 0], [0, 1, 0], [1, 2, 1]]


def test_update_matrix_invariants():
    rng = random.Random(4)
    rows, cols = 6, 5
    mat = [[rng.choice((0, 1, 1)) for _ in range(cols)] for _ in range(rows)]
    mat[2][2] = 0
    dist = update_matrix(mat)
    for x in range(rows):
        for y in range(cols):
            assert (dist[x][y] == 0) == (mat[x][y] == 0)
            around = [dist[nx][ny] for nx, ny in _around(x, y, rows, cols)]
            assert all(abs(dist[x][y] - d) <= 1 for d in around)
            if dist[x][y] > 0:
                assert dist[x][y] - 1 in around


def test_update_matrix_without_zero_is_infinite():
    assert update_matrix([[1, 1]]) == [[math.inf, math.inf]]


def test_oranges_rot_along_a_row():
    fresh = 5
    assert oranges_rotting([[2] + [1] * fresh]) == fresh


def test_oranges_unreachable_fresh_orange():
    assert oranges_rotting([[2, 0, 1]]) == -1


def test_oranges_input_unchanged():
    grid = [[2, 1], [1, 1]]
    original = copy.deepcopy(grid)
    oranges_rotting(grid)
    assert grid == original


def test_enclaves_counts_inner_land():
    inner = [(1, 1), (2, 2), (2, 3)]
    grid = [[0] * 5 for _ in range(5)]
    for x, y in inner:
        grid[x][y] = 1
    assert num_enclaves(grid) == len(inner)


def test_enclaves_excludes_land_linked_to_border():
    grid = [[0] * 5 for _ in range(5)]
    escaping = [(0, 1), (1, 1)]
    trapped = [(3, 3)]
    for x, y in escaping + trapped:
        grid[x][y] = 1
    original = copy.deepcopy(grid)
    assert num_enclaves(grid) == len(trapped)
    assert grid == original


def test_binary_matrix_open_grid_uses_diagonal():
    for n in range(1, 5):
        assert shortest_path_binary_matrix([[0] * n for _ in range(n)]) == n


def test_binary_matrix_diagonal_only_path():
    grid = [[0, 1], [1, 0]]
    assert shortest_path_binary_matrix(grid) == len(grid)


def test_binary_matrix_blocked_start():
    assert shortest_path_binary_matrix([[1, 0], [0, 0]]) == -1


def test_largest_island_full_grid():
    n = 3
    assert largest_island([[1] * n for _ in range(n)]) == n * n


def test_largest_island_joins_two_islands():
    grid = [[1, 0, 1], [0, 0, 0], [0, 0, 0]]
    original = copy.deepcopy(grid)
    assert largest_island(grid) == sum(map(sum, grid)) + 1
    assert grid == original


def test_largest_island_all_water():
    grid = [[0, 0], [0, 0]]
    assert largest_island(grid) == sum(map(sum, grid)) + 1


def test_num_islands_checkerboard():
    n = 4
    grid = [["1" if (i + j) % 2 == 0 else "0" for j in range(n)] for i in range(n)]
    expected = sum(row.count("1") for row in grid)
    assert num_islands(grid) == expected


def test_num_islands_merges_touching_cells():
    grid = [list("1100"), list("0100"), list("0011")]
    original = copy.deepcopy(grid)
    result = num_islands(grid)
    assert result < sum(row.count("1") for row in grid)
    assert result == num_islands([list("1000"), list("0001")])
    assert grid == original


def test_capture_surrounded_example():
    board = [
        ["X", "X", "X", "X"],
        ["X", "O", "O", "X"],
        ["X", "X", "O", "X"],
        ["X", "O", "X", "X"],
    ]
    capture_surrounded(board)
    assert board == [
        ["X", "X", "X", "X"],
        ["X", "X", "X", "X"],
        ["X", "X", "X", "X"],
        ["X", "O", "X", "X"],
    ]


def test_capture_keeps_region_reaching_border():
    board = [
        ["X", "O", "X"],
        ["X", "O", "X"],
        ["X", "X", "X"],
    ]
    original = copy.deepcopy(board)
    capture_surrounded(board)
    assert board == original