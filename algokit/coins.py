"""Counting coin combinations under per-coin limits by inclusion-exclusion."""

from itertools import combinations

DEFAULT_LIMIT = 100_005


class CoinCounter:
    """Counts ways to pay a total with bounded numbers of each coin."""

    def __init__(self, values, limit=DEFAULT_LIMIT):
        self.values = tuple(values)
        if any(v <= 0 for v in self.values):
            raise ValueError("coin values must be positive")
        if limit < 1:
            raise ValueError("limit must be positive")
        self.limit = limit
        ways = [0] * limit
        ways[0] = 1
        for value in self.values:
            for total in range(value, limit):
                ways[total] += ways[total - value]
        self._ways = ways

    def count(self, counts, total):
        """Return the number of ways to pay `total` using at most counts[i] of coin i."""
        counts = tuple(counts)
        if len(counts) != len(self.values):
            raise ValueError("one count is needed per coin")
        if any(c < 0 for c in counts):
            raise ValueError("counts must be non-negative")
        if not 0 <= total < self.limit:
            raise ValueError(f"total must lie in [0, {self.limit})")
        pairs = list(zip(self.values, counts))
        result = 0
        for size in range(len(pairs) + 1):
            sign = -1 if size % 2 else 1
            for subset in combinations(pairs, size):
                rest = total - sum((count + 1) * value for value, count in subset)
                if rest >= 0:
                    result += sign * self._ways[rest]
        return result