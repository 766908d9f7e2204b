import random

import pytest

from algokit.dynamic_mst import dynamic_mst


def test_worked_example():
    edges = [(1, 2, 1), (2, 3, 2), (3, 4, 3), (4, 5, 4), (5, 1, 5)]
    updates = [(1, 6), (1, 1), (5, 3)]
    assert dynamic_mst(5, edges, updates) == [14, 10, 9]


def test_cycle_drops_heaviest_edge():
    rng = random.Random(5)
    n = 7
    weights = [rng.randint(1, 50) for _ in range(n)]
    edges = [(i + 1, (i + 1) % n + 1, w) for i, w in enumerate(weights)]
    updates = [(rng.randint(1, n), rng.randint(1, 50)) for _ in range(25)]
    expected = []
    current = weights[:]
    for number, weight in updates:
        current[number - 1] = weight
        expected.append(sum(current) - max(current))
    assert dynamic_mst(n, edges, updates) == expected


def test_tree_uses_every_edge():
    rng = random.Random(9)
    n = 8
    edges = [(i, rng.randint(1, i - 1), rng.randint(1, 20)) for i in range(2, n + 1)]
    updates = [(rng.randint(1, n - 1), rng.randint(1, 20)) for _ in range(12)]
    current = [w for _, _, w in edges]
    expected = []
    for number, weight in updates:
        current[number - 1] = weight
        expected.append(sum(current))
    assert dynamic_mst(n, edges, updates) == expected


def test_parallel_edges_pick_lighter():
    edges = [(1, 2, 10), (1, 2, 3)]
    result = dynamic_mst(2, edges, [(2, 20), (1, 25)])
    assert result == [10, 20]


def test_no_updates():
    assert dynamic_mst(3, [(1, 2, 1), (2, 3, 1)], []) == []


def test_bad_edge_number():
    with pytest.raises(ValueError):
        dynamic_mst(2, [(1, 2, 1)], [(2, 5)])


def test_bad_vertex():
    with pytest.raises(ValueError):
        dynamic_mst(2, [(1, 3, 1)], [(1, 5)])