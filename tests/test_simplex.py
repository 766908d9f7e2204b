import pytest

from algokit.simplex import UnboundedError, min_volunteer_cost, simplex_maximize


def test_box_constraints():
    objective = [3, 2]
    bounds = [4, 5]
    result = simplex_maximize(objective, [[1, 0], [0, 1]], bounds)
    assert result == pytest.approx(sum(c * b for c, b in zip(objective, bounds)))


def test_textbook_program():
    result = simplex_maximize([3, 5], [[1, 0], [0, 2], [3, 2]], [4, 12, 18])
    assert result == pytest.approx(36)


def test_non_positive_objective_is_zero():
    assert simplex_maximize([-1, 0], [[1, 1]], [5]) == 0.0


def test_unbounded():
    with pytest.raises(UnboundedError):
        simplex_maximize([1], [[-1]], [1])


def test_inputs_not_mutated():
    objective = [3, 5]
    matrix = [[1, 0], [0, 2], [3, 2]]
    bounds = [4, 12, 18]
    simplex_maximize(objective, matrix, bounds)
    assert matrix == [[1, 0], [0, 2], [3, 2]]
    assert objective == [3, 5]
    assert bounds == [4, 12, 18]


@pytest.mark.parametrize(
    "objective, matrix, bounds",
    [([1], [[1]], [-1]), ([1, 2], [[1]], [1]), ([1], [[1], [2]], [1])],
)
def test_invalid_shapes(objective, matrix, bounds):
    with pytest.raises(ValueError):
        simplex_maximize(objective, matrix, bounds)


def test_volunteer_sample():
    assert min_volunteer_cost([2, 3, 4], [(1, 2, 2), (2, 3, 5), (3, 3, 2)]) == 14


def test_volunteer_single_day():
    need, cost = 5, 3
    assert min_volunteer_cost([need], [(1, 1, cost)]) == need * cost


def test_volunteer_picks_cheapest():
    assert min_volunteer_cost([4], [(1, 1, 7), (1, 1, 2)]) == 4 * 2


def test_volunteer_more_need_costs_more():
    kinds = [(1, 2, 2), (2, 3, 5), (3, 3, 2)]
    assert min_volunteer_cost([3, 3, 4], kinds) >= min_volunteer_cost([2, 3, 4], kinds)


def test_uncovered_day():
    with pytest.raises(UnboundedError):
        min_volunteer_cost([1, 2], [(1, 1, 3)])


def test_bad_day_range():
    with pytest.raises(ValueError):
        min_volunteer_cost([1], [(1, 2, 3)])