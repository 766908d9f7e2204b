import pytest

from algokit.dlx import DancingLinks, best_target_sudoku, exact_cover, solve_sudoku

KNUTH = [
    [1, 0, 0, 1, 0, 0, 1],
    [1, 0, 0, 1, 0, 0, 0],
    [0, 0, 0, 1, 1, 0, 1],
    [0, 0, 1, 0, 1, 1, 0],
    [0, 1, 1, 0, 0, 1, 1],
    [0, 1, 0, 0, 0, 0, 1],
]


def _grid(lines):
    return [[int(ch) for ch in line] for line in lines]


PUZZLE = _grid([
    "530070000",
    "600195000",
    "098000060",
    "800060003",
    "400803001",
    "700020006",
    "060000280",
    "000419005",
    "000080079",
])

SOLUTION = _grid([
    "534678912",
    "672195348",
    "198342567",
    "859761423",
    "426853791",
    "713924856",
    "961537284",
    "287419635",
    "345286179",
])


def _is_valid(grid):
    digits = set(range(1, 10))
    rows = all(set(row) == digits for row in grid)
    cols = all(set(col) == digits for col in zip(*grid))
    boxes = all(
        {grid[r][c] for r in range(br, br + 3) for c in range(bc, bc + 3)} == digits
        for br in (0, 3, 6)
        for bc in (0, 3, 6)
    )
    return rows and cols and boxes


def test_exact_cover_knuth_example():
    assert sorted(exact_cover(KNUTH)) == [2, 4, 6]


def test_exact_cover_rows_partition_columns():
    chosen = exact_cover(KNUTH)
    sums = [sum(KNUTH[r - 1][j] for r in chosen) for j in range(7)]
    assert sums == [1] * 7


def test_exact_cover_without_solution():
    assert exact_cover([[1, 0], [1, 0]]) is None


def test_exact_cover_of_nothing_is_empty():
    assert exact_cover([]) == []


def test_solutions_enumerates_every_cover():
    links = DancingLinks(2)
    links.add_row("a", [1])
    links.add_row("b", [2])
    links.add_row("c", [1, 2])
    found = {frozenset(s) for s in links.solutions()}
    assert found == {frozenset({"a", "b"}), frozenset({"c"})}


def test_solve_restores_structure():
    links = DancingLinks(2)
    links.add_row("a", [1])
    links.add_row("b", [2])
    links.add_row("c", [1, 2])
    first = links.solve()
    list(links.solutions())
    assert links.solve() == first


def test_add_row_validation():
    links = DancingLinks(3)
    links.add_row(1, [1])
    with pytest.raises(ValueError):
        links.add_row(1, [2])
    with pytest.raises(ValueError):
        links.add_row(2, [4])
    with pytest.raises(ValueError):
        links.add_row(3, [2, 2])


def test_solve_sudoku_known_puzzle():
    assert solve_sudoku(PUZZLE) == SOLUTION


def test_solve_sudoku_keeps_givens_and_is_valid():
    result = solve_sudoku(PUZZLE)
    assert _is_valid(result)
    assert all(
        given == 0 or given == value
        for grow, rrow in zip(PUZZLE, result)
        for given, value in zip(grow, rrow)
    )


def test_solve_sudoku_unsolvable():
    grid = [[0] * 9 for _ in range(9)]
    grid[0][0] = grid[0][1] = 5
    with pytest.raises(ValueError):
        solve_sudoku(grid)


def test_solve_sudoku_bad_shape():
    with pytest.raises(ValueError):
        solve_sudoku([[0] * 9] * 8)


def test_best_target_matches_completed_grid():
    blanked = [row[:] for row in SOLUTION]
    blanked[4][4] = 0
    full = best_target_sudoku(SOLUTION)
    assert best_target_sudoku(PUZZLE) == full
    assert best_target_sudoku(blanked) == full


def test_best_target_unsolvable():
    grid = [[0] * 9 for _ in range(9)]
    grid[0][0] = grid[0][1] = 5
    assert best_target_sudoku(grid) == -1