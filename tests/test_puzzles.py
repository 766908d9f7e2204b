from itertools import combinations
from math import factorial

import pytest

from algokit.puzzles import (
    GOAL,
    count_paths,
    eight_puzzle_moves,
    n_queens,
    permutations_of,
)


def test_eight_puzzle_sample():
    assert eight_puzzle_moves("283104765") == 4


def test_eight_puzzle_goal_needs_nothing():
    assert eight_puzzle_moves(GOAL) == 0


def test_eight_puzzle_one_move():
    assert eight_puzzle_moves("123084765") >= 1
    assert eight_puzzle_moves("123084765") < eight_puzzle_moves("283104765")


def test_eight_puzzle_unsolvable():
    with pytest.raises(ValueError):
        eight_puzzle_moves("213804765")


def test_eight_puzzle_bad_board():
    with pytest.raises(ValueError):
        eight_puzzle_moves("11234567")


def test_n_queens_sample():
    first, total = n_queens(6)
    assert first == [(2, 4, 6, 1, 3, 5), (3, 6, 2, 5, 1, 4), (4, 1, 5, 2, 6, 3)]
    assert total == 4


def test_n_queens_solutions_are_valid():
    first, total = n_queens(8)
    assert len(first) == 3
    assert total >= len(first)
    for placement in first:
        assert sorted(placement) == list(range(1, 9))
        for (r1, c1), (r2, c2) in combinations(enumerate(placement, 1), 2):
            assert abs(r1 - r2) != abs(c1 - c2)


def test_n_queens_negative():
    with pytest.raises(ValueError):
        n_queens(-1)


def test_count_paths_sample():
    assert count_paths(2, 2, (1, 1), (2, 2), [(1, 2)]) == 1


def test_count_paths_symmetric():
    forward = count_paths(3, 3, (1, 1), (3, 3), [(2, 2)])
    backward = count_paths(3, 3, (3, 3), (1, 1), [(2, 2)])
    assert forward == backward
    assert forward > 0


def test_count_paths_blocked_end():
    assert count_paths(3, 3, (1, 1), (3, 3), [(3, 3)]) == 0


def test_count_paths_obstacle_reduces():
    free = count_paths(3, 3, (1, 1), (3, 3))
    blocked = count_paths(3, 3, (1, 1), (3, 3), [(2, 2)])
    assert blocked < free


def test_count_paths_outside():
    with pytest.raises(ValueError):
        count_paths(2, 2, (0, 1), (2, 2))


def test_permutations_order_and_count():
    perms = list(permutations_of(4))
    assert len(perms) == factorial(4)
    assert perms == sorted(perms)
    assert all(sorted(p) == [1, 2, 3, 4] for p in perms)
    assert len(set(perms)) == len(perms)