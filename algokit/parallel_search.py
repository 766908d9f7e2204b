"""Range k-th smallest queries answered by whole binary search."""

from dataclasses import dataclass


class _Fenwick:
    """Binary indexed tree over positions 1..size."""

    def __init__(self, size):
        self._tree = [0] * (size + 1)

    def add(self, index, delta):
        tree = self._tree
        while index < len(tree):
            tree[index] += delta
            index += index & -index

    def prefix(self, index):
        tree = self._tree
        total = 0
        while index > 0:
            total += tree[index]
            index -= index & -index
        return total


@dataclass
class _Query:
    left: int
    right: int
    k: int
    index: int


def kth_smallest_queries(values, queries):
    """Return the k-th smallest of values[l-1:r] for each (l, r, k), 1-based."""
    values = list(values)
    n = len(values)
    pending = []
    for index, (left, right, k) in enumerate(queries):
        if not 1 <= left <= right <= n:
            raise ValueError(f"range ({left}, {right}) is outside 1..{n}")
        if not 1 <= k <= right - left + 1:
            raise ValueError(f"k={k} is outside the range size")
        pending.append(_Query(left, right, k, index))
    if not pending:
        return []

    distinct = sorted(set(values))
    rank = {v: i + 1 for i, v in enumerate(distinct)}
    answers = [None] * len(pending)
    counter = _Fenwick(n)

    def solve(lo, hi, inserts, batch):
        if not batch:
            return
        if lo == hi:
            for query in batch:
                answers[query.index] = distinct[lo - 1]
            return
        mid = (lo + hi) // 2
        low_inserts = [item for item in inserts if item[0] <= mid]
        high_inserts = [item for item in inserts if item[0] > mid]
        for _, position in low_inserts:
            counter.add(position, 1)
        low_batch, high_batch = [], []
        for query in batch:
            found = counter.prefix(query.right) - counter.prefix(query.left - 1)
            if query.k <= found:
                low_batch.append(query)
            else:
                query.k -= found
                high_batch.append(query)
        for _, position in low_inserts:
            counter.add(position, -1)
        solve(lo, mid, low_inserts, low_batch)
        solve(mid + 1, hi, high_inserts, high_batch)

    inserts = [(rank[v], position) for position, v in enumerate(values, start=1)]
    solve(1, len(distinct), inserts, pending)
    return answers