import random
from fractions import Fraction

import pytest

from algokit.mo import (
    distinct_with_updates,
    max_importance,
    removed_after_triple_common,
    same_color_probabilities,
)


def _random_ranges(rng, n, count):
    result = []
    for _ in range(count):
        a, b = rng.randint(1, n), rng.randint(1, n)
        result.append((min(a, b), max(a, b)))
    return result


def test_same_color_known_value():
    assert same_color_probabilities([2, 2, 3, 3], [(1, 4)]) == [Fraction(1, 3)]


def test_same_color_uniform_and_single():
    answers = same_color_probabilities([5] * 6, [(1, 6), (2, 4), (3, 3)])
    assert answers[0] == answers[1] == Fraction(1)
    assert answers[2] == 0


def test_same_color_distinct_is_zero():
    assert same_color_probabilities(list(range(1, 8)), [(1, 7), (2, 5)]) == [0, 0]


def test_same_color_order_invariant_and_bounded():
    rng = random.Random(3)
    colors = [rng.randint(1, 4) for _ in range(40)]
    queries = _random_ranges(rng, 40, 30)
    forward = same_color_probabilities(colors, queries)
    backward = same_color_probabilities(colors, list(reversed(queries)))
    assert forward == list(reversed(backward))
    assert all(0 <= p <= 1 for p in forward)


def test_same_color_bad_range():
    with pytest.raises(ValueError):
        same_color_probabilities([1, 2], [(2, 3)])


def test_triple_same_range_removes_everything():
    assert removed_after_triple_common([4, 1, 4, 2], [((1, 4), (1, 4), (1, 4))]) == [0]


def test_triple_disjoint_distinct_keeps_everything():
    values = list(range(1, 10))
    triples = [((1, 3), (4, 6), (7, 9))]
    assert removed_after_triple_common(values, triples) == [9]


def test_triple_invariants_and_order():
    rng = random.Random(7)
    values = [rng.randint(1, 5) for _ in range(30)]
    triples = [tuple(_random_ranges(rng, 30, 3)) for _ in range(20)]
    forward = removed_after_triple_common(values, triples)
    backward = removed_after_triple_common(values, list(reversed(triples)))
    assert forward == list(reversed(backward))
    for triple, answer in zip(triples, forward):
        total = sum(r - l + 1 for l, r in triple)
        assert 0 <= answer <= total
        assert (total - answer) % 3 == 0


def test_triple_wrong_shape():
    with pytest.raises(ValueError):
        removed_after_triple_common([1, 2, 3], [((1, 2), (1, 3))])


def test_distinct_with_updates_sequence():
    ops = [("Q", 1, 5), ("R", 2, 1), ("Q", 1, 5), ("Q", 2, 2)]
    answers = distinct_with_updates([1, 2, 3, 4, 5], ops)
    assert answers[0] == 5
    assert answers[1] == 4
    assert answers[2] == 1


def test_distinct_after_repainting_everything():
    colors = [1, 2, 3, 4, 5, 6]
    ops = [("R", pos, 7) for pos in range(1, 7)] + [("Q", 1, 6)]
    assert distinct_with_updates(colors, ops) == [1]


def test_distinct_queries_before_updates_see_old_colors():
    colors = [1, 1, 1, 1]
    ops = [("Q", 1, 4), ("R", 3, 9), ("Q", 1, 4), ("R", 3, 1), ("Q", 1, 4)]
    answers = distinct_with_updates(colors, ops)
    assert answers[0] == answers[2]
    assert answers[1] == answers[0] + 1


def test_distinct_bad_operations():
    with pytest.raises(ValueError):
        distinct_with_updates([1, 2], [("X", 1, 2)])
    with pytest.raises(ValueError):
        distinct_with_updates([1, 2], [("R", 3, 2)])


def test_max_importance_repeated_value():
    values = [3] * 12
    assert max_importance(values, [(1, 12), (2, 6)]) == [3 * 12, 3 * 5]


def test_max_importance_single_element():
    values = [8, 2, 5, 7]
    assert max_importance(values, [(3, 3)]) == [5]


def test_max_importance_invariants():
    rng = random.Random(11)
    values = [rng.randint(1, 6) for _ in range(40)]
    queries = _random_ranges(rng, 40, 40)
    forward = max_importance(values, queries)
    backward = max_importance(values, list(reversed(queries)))
    assert forward == list(reversed(backward))
    for (l, r), answer in zip(queries, forward):
        window = values[l - 1 : r]
        assert max(window) <= answer <= max(window) * len(window)


def test_max_importance_monotone_in_range():
    rng = random.Random(5)
    values = [rng.randint(1, 9) for _ in range(36)]
    outer, inner = max_importance(values, [(2, 35), (10, 20)])
    assert outer >= inner