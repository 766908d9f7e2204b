"""Simplex method for linear programs in standard form."""

import math


class UnboundedError(ArithmeticError):
    """The linear program has no finite optimum."""


def _pivot(a, b, c, leaving, entering, value):
    pivot_row = a[leaving]
    pivot = pivot_row[entering]
    b[leaving] /= pivot
    pivot_row[:] = [x / pivot for x in pivot_row]
    pivot_row[entering] = 1 / pivot
    for i, row in enumerate(a):
        factor = row[entering]
        if i == leaving or factor == 0:
            continue
        b[i] -= factor * b[leaving]
        row[:] = [x - factor * y for x, y in zip(row, pivot_row)]
        row[entering] = -factor * pivot_row[entering]
    factor = c[entering]
    value += factor * b[leaving]
    c[:] = [x - factor * y for x, y in zip(c, pivot_row)]
    c[entering] = -factor * pivot_row[entering]
    return value


def simplex_maximize(objective, matrix, bounds):
    """Maximise objective . x subject to matrix x <= bounds and x >= 0.

    The bounds must be non-negative so that x = 0 is feasible.
    Raises UnboundedError when the optimum is infinite.
    """
    c = [float(v) for v in objective]
    a = [[float(v) for v in row] for row in matrix]
    b = [float(v) for v in bounds]
    if len(a) != len(b):
        raise ValueError("matrix and bounds must have the same number of rows")
    if any(len(row) != len(c) for row in a):
        raise ValueError("every row must match the objective length")
    if any(v < 0 for v in b):
        raise ValueError("bounds must be non-negative")
    value = 0.0
    while True:
        entering = next((j for j, weight in enumerate(c) if weight > 0), None)
        if entering is None:
            return value
        leaving, tightest = None, math.inf
        for i, (row, limit) in enumerate(zip(a, b)):
            coefficient = row[entering]
            if coefficient > 0 and limit / coefficient < tightest:
                tightest = limit / coefficient
                leaving = i
        if leaving is None:
            raise UnboundedError("objective is unbounded")
        value = _pivot(a, b, c, leaving, entering, value)


def min_volunteer_cost(needs, kinds):
    """Return the minimum cost of hiring volunteers to meet daily needs.

    `needs[d]` is the number required on day d + 1; each kind is a tuple
    (start, end, cost) of a volunteer serving days start..end inclusive.
    The dual program is solved; UnboundedError means some need cannot be met.
    """
    days = len(needs)
    matrix = []
    costs = []
    for start, end, cost in kinds:
        if not 1 <= start <= end <= days:
            raise ValueError("volunteer days must lie within the schedule")
        matrix.append([1.0 if start <= day <= end else 0.0 for day in range(1, days + 1)])
        costs.append(cost)
    optimum = simplex_maximize(needs, matrix, costs)
    return int(optimum + 0.5)