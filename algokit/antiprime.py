"""Searches over prime exponent signatures for highly composite numbers."""

PRIMES = (2, 3, 5, 7, 11, 13, 17, 19, 23, 29, 31, 37, 41, 43, 47, 53)


def smallest_with_divisors(n):
    """Return the smallest positive integer with exactly n divisors."""
    if n < 1:
        raise ValueError("n must be positive")
    best = None

    def visit(depth, value, count, cap):
        nonlocal best
        if count > n or depth >= len(PRIMES):
            return
        if count == n and (best is None or value < best):
            best = value
            return
        prime = PRIMES[depth]
        for exponent in range(1, cap + 1):
            value *= prime
            if best is not None and value > best:
                break
            visit(depth + 1, value, count * (exponent + 1), exponent)

    visit(0, 1, 1, 64)
    if best is None:
        raise ValueError(f"no number in the search space has {n} divisors")
    return best


def largest_antiprime(limit):
    """Return the smallest number <= limit having the most divisors."""
    if limit < 1:
        raise ValueError("limit must be positive")
    best, best_count = 1, 1

    def visit(depth, value, count, cap):
        nonlocal best, best_count
        if depth >= len(PRIMES) or value > limit:
            return
        if count > best_count:
            best, best_count = value, count
        elif count == best_count and value < best:
            best = value
        prime = PRIMES[depth]
        for exponent in range(1, cap + 1):
            if value * prime > limit:
                break
            value *= prime
            visit(depth + 1, value, count * (exponent + 1), exponent)

    visit(0, 1, 1, 60)
    return best