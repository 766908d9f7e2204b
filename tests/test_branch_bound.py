import random
from itertools import permutations

import pytest

from algokit.branch_bound import knapsack_max, min_assignment_cost


def test_knapsack_sample():
    assert knapsack_max(70, [(71, 100), (69, 1), (1, 2)]) == 3


def test_knapsack_zero_capacity():
    assert knapsack_max(0, [(1, 5), (2, 9)]) == 0


def test_knapsack_single_item_fits():
    assert knapsack_max(10, [(4, 17)]) == 17


def test_knapsack_everything_fits():
    items = [(2, 3), (3, 4), (1, 9)]
    assert knapsack_max(100, items) == sum(v for _, v in items)


def test_knapsack_order_and_bounds():
    rng = random.Random(4)
    items = [(rng.randint(1, 20), rng.randint(1, 30)) for _ in range(15)]
    result = knapsack_max(50, items)
    shuffled = items[:]
    rng.shuffle(shuffled)
    assert knapsack_max(50, shuffled) == result
    assert result <= sum(v for _, v in items)
    assert knapsack_max(50, items + [(5, 40)]) >= result
    assert knapsack_max(60, items) >= result


def test_knapsack_bad_time():
    with pytest.raises(ValueError):
        knapsack_max(5, [(0, 3)])


def test_assignment_is_minimal_over_permutations():
    rng = random.Random(9)
    costs = [[rng.randint(1, 50) for _ in range(5)] for _ in range(5)]
    best = min_assignment_cost(costs)
    totals = [sum(costs[i][p[i]] for i in range(5)) for p in permutations(range(5))]
    assert all(best <= t for t in totals)
    assert best in totals


def test_assignment_zero_diagonal():
    costs = [[0, 5, 5], [5, 0, 5], [5, 5, 0]]
    assert min_assignment_cost(costs) == 0


def test_assignment_empty():
    assert min_assignment_cost([]) == 0


def test_assignment_not_square():
    with pytest.raises(ValueError):
        min_assignment_cost([[1, 2], [3]])