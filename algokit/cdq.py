"""Divide and conquer over positions for partial-order counting problems."""

from heapq import merge


class _Fenwick:
    """Binary indexed tree over 1..size holding integer counts."""

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


def inversions_after_deletions(permutation, removals):
    """Return the inversion count of the sequence before each removal.

    `permutation` holds 1..n once each; `removals` lists distinct values that
    are deleted one after another.
    """
    permutation = list(permutation)
    n = len(permutation)
    if sorted(permutation) != list(range(1, n + 1)):
        raise ValueError("permutation must contain 1..n exactly once")
    removals = list(removals)
    m = len(removals)
    position = {value: index for index, value in enumerate(permutation)}
    never = m + 1
    removal_time = [never] * n
    for time, value in enumerate(removals, start=1):
        if value not in position:
            raise ValueError(f"{value!r} is not in the permutation")
        index = position[value]
        if removal_time[index] != never:
            raise ValueError(f"{value!r} is removed twice")
        removal_time[index] = time

    counter = _Fenwick(n)
    total = 0
    for seen, value in enumerate(permutation):
        total += seen - counter.prefix(value)
        counter.add(value, 1)

    lost = [0] * n
    times = _Fenwick(never)

    def value_of(index):
        return permutation[index]

    def solve(indices):
        if len(indices) <= 1:
            return indices
        mid = len(indices) // 2
        left = solve(indices[:mid])
        right = solve(indices[mid:])

        # Left elements against later-removed right elements with smaller values.
        added = []
        j = 0
        for x in left:
            while j < len(right) and permutation[right[j]] < permutation[x]:
                times.add(removal_time[right[j]], 1)
                added.append(right[j])
                j += 1
            lost[x] += len(added) - times.prefix(removal_time[x])
        for y in added:
            times.add(removal_time[y], -1)

        # Right elements against later-removed left elements with larger values.
        added = []
        j = len(left) - 1
        for y in reversed(right):
            while j >= 0 and permutation[left[j]] > permutation[y]:
                times.add(removal_time[left[j]], 1)
                added.append(left[j])
                j -= 1
            lost[y] += len(added) - times.prefix(removal_time[y])
        for x in added:
            times.add(removal_time[x], -1)

        return list(merge(left, right, key=value_of))

    solve(list(range(n)))

    answers = []
    for value in removals:
        answers.append(total)
        total -= lost[position[value]]
    return answers


def _chain_counts(points):
    """Longest chain ending at each point, predecessors having both keys >=.

    Returns per-point lengths and the (floating) number of such chains.
    """
    n = len(points)
    heights = [h for h, _ in points]
    distinct = sorted({v for _, v in points}, reverse=True)
    rank = {v: i + 1 for i, v in enumerate(distinct)}
    key = [rank[v] for _, v in points]
    size = len(distinct) + 1
    best_len = [0] * size
    best_ways = [0.0] * size
    length = [1] * n
    ways = [1.0] * n

    def update(i, chain, count):
        while i < size:
            if best_len[i] == chain:
                best_ways[i] += count
            elif best_len[i] < chain:
                best_len[i] = chain
                best_ways[i] = count
            i += i & -i

    def query(i):
        chain, count = 0, 0.0
        while i > 0:
            if best_len[i] == chain:
                count += best_ways[i]
            elif best_len[i] > chain:
                chain = best_len[i]
                count = best_ways[i]
            i -= i & -i
        return chain, count

    def clear(i):
        while i < size:
            best_len[i] = 0
            best_ways[i] = 0.0
            i += i & -i

    def by_height(i):
        return -heights[i]

    def solve(lo, hi):
        if hi - lo <= 1:
            return
        mid = (lo + hi) // 2
        solve(lo, mid)
        left = sorted(range(lo, mid), key=by_height)
        right = sorted(range(mid, hi), key=by_height)
        p = 0
        for i in right:
            while p < len(left) and heights[left[p]] >= heights[i]:
                j = left[p]
                update(key[j], length[j], ways[j])
                p += 1
            chain, count = query(key[i])
            if chain + 1 > length[i]:
                length[i] = chain + 1
                ways[i] = count
            elif chain + 1 == length[i]:
                ways[i] += count
        for j in left[:p]:
            clear(key[j])
        solve(mid, hi)

    solve(0, n)
    return length, ways


def longest_chain_probabilities(points):
    """Return (length, probabilities) for the longest non-increasing chain.

    A chain picks points in order with both coordinates non-increasing.
    Each probability is the chance that the point lies on a longest chain
    chosen uniformly at random.
    """
    points = [(h, v) for h, v in points]
    if not points:
        return 0, []
    forward_len, forward_ways = _chain_counts(points)
    backward_len, backward_ways = _chain_counts([(-h, -v) for h, v in reversed(points)])
    backward_len.reverse()
    backward_ways.reverse()
    best = max(forward_len)
    total = sum(w for chain, w in zip(forward_len, forward_ways) if chain == best)
    probabilities = [
        fw * bw / total if fl + bl - 1 == best else 0.0
        for fl, fw, bl, bw in zip(forward_len, forward_ways, backward_len, backward_ways)
    ]
    return best, probabilities