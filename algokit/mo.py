"""Offline range queries answered with Mo's algorithm and its variants."""

from collections import Counter
from fractions import Fraction
from math import isqrt


def _check_range(left, right, n):
    if not 1 <= left <= right <= n:
        raise ValueError(f"range ({left}, {right}) is outside 1..{n}")


def _mo_order(ranges, block):
    """Return query indices in Mo's order, alternating right-end direction per block."""

    def key(i):
        left, right = ranges[i]
        b = left // block
        return b, right if b & 1 else -right

    return sorted(range(len(ranges)), key=key)


def same_color_probabilities(colors, queries):
    """Return, per 1-based range (l, r), the chance that two distinct picks share a colour."""
    colors = list(colors)
    n = len(colors)
    ranges = [tuple(q) for q in queries]
    for left, right in ranges:
        _check_range(left, right, n)
    block = max(1, isqrt(n))
    counts = Counter()
    pairs = 0
    lo, hi = 1, 0
    answers = [Fraction(0)] * len(ranges)

    def add(color):
        nonlocal pairs
        pairs += counts[color]
        counts[color] += 1

    def remove(color):
        nonlocal pairs
        counts[color] -= 1
        pairs -= counts[color]

    for idx in _mo_order(ranges, block):
        left, right = ranges[idx]
        if left == right:
            continue
        while lo > left:
            lo -= 1
            add(colors[lo - 1])
        while hi < right:
            hi += 1
            add(colors[hi - 1])
        while lo < left:
            remove(colors[lo - 1])
            lo += 1
        while hi > right:
            remove(colors[hi - 1])
            hi -= 1
        length = hi - lo + 1
        answers[idx] = Fraction(pairs, length * (length - 1) // 2)
    return answers


def removed_after_triple_common(values, triples):
    """For each triple of 1-based ranges, count the elements left after removing
    every value that occurs in all three ranges (as a multiset) from each range."""
    values = list(values)
    n = len(values)
    first_rank = {}
    for rank, value in enumerate(sorted(values), start=1):
        first_rank.setdefault(value, rank)
    ranks = [first_rank[v] for v in values]

    ranges, owners, totals = [], [], []
    for owner, triple in enumerate(triples):
        triple = [tuple(r) for r in triple]
        if len(triple) != 3:
            raise ValueError("each query must hold exactly three ranges")
        total = 0
        for left, right in triple:
            _check_range(left, right, n)
            ranges.append((left, right))
            owners.append(owner)
            total += right - left + 1
        totals.append(total)

    common = [-1] * len(totals)
    counts = [0] * (n + 2)
    present = 0
    lo, hi = 1, 0

    def add(rank):
        nonlocal present
        present |= 1 << (rank + counts[rank])
        counts[rank] += 1

    def remove(rank):
        nonlocal present
        counts[rank] -= 1
        present &= ~(1 << (rank + counts[rank]))

    for idx in _mo_order(ranges, max(1, isqrt(n))):
        left, right = ranges[idx]
        while lo > left:
            lo -= 1
            add(ranks[lo - 1])
        while hi < right:
            hi += 1
            add(ranks[hi - 1])
        while lo < left:
            remove(ranks[lo - 1])
            lo += 1
        while hi > right:
            remove(ranks[hi - 1])
            hi -= 1
        common[owners[idx]] &= present

    return [total - 3 * bin(bits).count("1") for total, bits in zip(totals, common)]


def distinct_with_updates(colors, operations):
    """Answer ("Q", l, r) distinct-colour queries interleaved with ("R", pos, colour) updates."""
    current = list(colors)
    n = len(current)
    working = list(current)
    queries, updates = [], []
    for kind, a, b in operations:
        if kind == "Q":
            _check_range(a, b, n)
            queries.append((a, b, len(updates)))
        elif kind == "R":
            if not 1 <= a <= n:
                raise ValueError(f"position {a} is outside 1..{n}")
            updates.append((a, current[a - 1], b))
            current[a - 1] = b
        else:
            raise ValueError(f"unknown operation {kind!r}")

    block = max(1, int(n ** (2 / 3)))
    order = sorted(
        range(len(queries)),
        key=lambda i: (queries[i][0] // block, queries[i][1] // block, i),
    )
    counts = Counter()
    distinct = 0
    lo, hi, applied = 1, 0, 0
    answers = [0] * len(queries)

    def add(color):
        nonlocal distinct
        if counts[color] == 0:
            distinct += 1
        counts[color] += 1

    def remove(color):
        nonlocal distinct
        counts[color] -= 1
        if counts[color] == 0:
            distinct -= 1

    for idx in order:
        left, right, time = queries[idx]
        while applied < time:
            pos, old, new = updates[applied]
            if lo <= pos <= hi:
                remove(old)
                add(new)
            working[pos - 1] = new
            applied += 1
        while applied > time:
            applied -= 1
            pos, old, new = updates[applied]
            if lo <= pos <= hi:
                remove(new)
                add(old)
            working[pos - 1] = old
        while lo > left:
            lo -= 1
            add(working[lo - 1])
        while hi < right:
            hi += 1
            add(working[hi - 1])
        while lo < left:
            remove(working[lo - 1])
            lo += 1
        while hi > right:
            remove(working[hi - 1])
            hi -= 1
        answers[idx] = distinct
    return answers


def max_importance(values, queries):
    """Return, per 1-based range, the largest value * occurrences within it (at least 0)."""
    values = list(values)
    n = len(values)
    ranges = [tuple(q) for q in queries]
    for left, right in ranges:
        _check_range(left, right, n)
    size = max(1, isqrt(n))

    def block(i):
        return (i - 1) // size

    def block_end(b):
        return min((b + 1) * size, n)

    order = sorted(range(len(ranges)), key=lambda i: (block(ranges[i][0]), ranges[i][1]))
    answers = [0] * len(ranges)
    counts = Counter()
    best = 0
    lo, hi = 1, 0
    last_block = None
    for idx in order:
        left, right = ranges[idx]
        b = block(left)
        if b == block(right):
            seen = Counter(values[left - 1 : right])
            answers[idx] = max([0] + [v * c for v, c in seen.items()])
            continue
        if b != last_block:
            counts.clear()
            best = 0
            hi = block_end(b)
            lo = hi + 1
            last_block = b
        while hi < right:
            hi += 1
            value = values[hi - 1]
            counts[value] += 1
            best = max(best, value * counts[value])
        result = best
        for pos in range(lo - 1, left - 1, -1):
            value = values[pos - 1]
            counts[value] += 1
            result = max(result, value * counts[value])
        answers[idx] = result
        for pos in range(left, lo):
            counts[values[pos - 1]] -= 1
    return answers