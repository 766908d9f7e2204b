"""Maximal rectangles under histograms using extendable span pointers."""

from itertools import accumulate


def _spans(values):
    """Return, for each bar, the widest index span where it is the minimum."""
    n = len(values)
    left = list(range(n))
    for i, value in enumerate(values):
        while left[i] > 0 and values[left[i] - 1] >= value:
            left[i] = left[left[i] - 1]
    right = list(range(n))
    for i in reversed(range(n)):
        while right[i] < n - 1 and values[right[i] + 1] >= values[i]:
            right[i] = right[right[i] + 1]
    return left, right


def largest_rectangle(heights):
    """Return the largest rectangle area under a histogram."""
    heights = list(heights)
    left, right = _spans(heights)
    return max(
        [0] + [(r - l + 1) * h for h, l, r in zip(heights, left, right)]
    )


def best_min_times_sum(values):
    """Return (score, left, right) maximising min * sum over a 1-based range.

    Ties prefer the shorter range; non-negative values only.
    """
    values = list(values)
    if any(v < 0 for v in values):
        raise ValueError("values must be non-negative")
    prefix = [0, *accumulate(values)]
    left, right = _spans(values)
    best, best_left, best_right = 0, 1, 1
    for value, l, r in zip(values, left, right):
        score = value * (prefix[r + 1] - prefix[l])
        if score > best or (score == best and best_right - best_left > r - l):
            best, best_left, best_right = score, l + 1, r + 1
    return best, best_left, best_right


def largest_free_rectangle(grid):
    """Return three times the largest all-'F' rectangle in a grid of 'F'/'R' cells."""
    heights = None
    best = 0
    for row in grid:
        cells = list(row)
        if heights is None:
            heights = [0] * len(cells)
        elif len(cells) != len(heights):
            raise ValueError("all rows must have the same length")
        heights = [
            h + 1 if cell[:1] == "F" else 0 if cell[:1] == "R" else h
            for h, cell in zip(heights, cells)
        ]
        best = max(best, largest_rectangle(heights))
    return best * 3