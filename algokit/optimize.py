"""Continuous search heuristics: gradient hill climbing and simulated annealing."""

import math
import random


def sphere_center(points):
    """Return the point equidistant from n + 1 points in n dimensions."""
    rows = [[float(c) for c in point] for point in points]
    dims = len(rows) - 1
    if dims < 1 or any(len(row) != dims for row in rows):
        raise ValueError("need n + 1 points of n coordinates each")
    count = dims + 1
    centre = [sum(column) / count for column in zip(*rows)]
    t = 10001.0
    while t >= 0.0001:
        distances = [math.dist(row, centre) for row in rows]
        mean = sum(distances) / count
        if mean == 0:
            raise ValueError("points must not all coincide")
        pulls = [(d - mean) / mean for d in distances]
        centre = [
            c + t * sum(k * (row[j] - c) for k, row in zip(pulls, rows))
            for j, c in enumerate(centre)
        ]
        t *= 0.99995
    return tuple(centre)


def _weighted_points(points):
    result = [(float(x), float(y), float(w)) for x, y, w in points]
    if not result:
        raise ValueError("at least one point is required")
    return result


def weighted_balance_point(points):
    """Return the point minimising the sum of weight * distance, by hill climbing.

    `points` holds (x, y, weight); points at zero distance exert no pull.
    """
    pts = _weighted_points(points)
    x = sum(p[0] for p in pts) / len(pts)
    y = sum(p[1] for p in pts) / len(pts)
    t = 1000.0
    while t > 1e-8:
        fx = fy = 0.0
        for px, py, w in pts:
            dist = math.hypot(px - x, py - y)
            if dist == 0:
                continue
            fx += (px - x) * w / dist
            fy += (py - y) * w / dist
        x += fx * t
        y += fy * t
        t = t * 0.5 if t > 0.5 else t * 0.97
    return x, y


def anneal_balance_point(points, rng=None):
    """Return the best point found by simulated annealing for the same objective."""
    pts = _weighted_points(points)
    rng = rng if rng is not None else random.Random()
    best_x = sum(p[0] for p in pts) / len(pts)
    best_y = sum(p[1] for p in pts) / len(pts)
    best_cost = math.inf

    def evaluate(x, y):
        nonlocal best_x, best_y, best_cost
        cost = sum(math.hypot(px - x, py - y) * w for px, py, w in pts)
        if cost < best_cost:
            best_x, best_y, best_cost = x, y, cost
        return cost

    def jitter(scale):
        return scale * (rng.random() * 2 - 1)

    evaluate(best_x, best_y)
    t = 100000.0
    cur_x, cur_y = best_x, best_y
    while t > 0.001:
        next_x = cur_x + jitter(t)
        next_y = cur_y + jitter(t)
        delta = evaluate(next_x, next_y) - evaluate(cur_x, cur_y)
        threshold = rng.random()
        if delta <= 0 or math.exp(-delta / t) > threshold:
            cur_x, cur_y = next_x, next_y
        t *= 0.97
    for _ in range(1000):
        evaluate(best_x + jitter(t), best_y + jitter(t))
    return best_x, best_y