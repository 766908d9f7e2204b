"""Counting problems solved with Möbius inversion and divisor blocks."""

from itertools import accumulate
from math import isqrt

LCM_TABLE_MODULUS = 20101009


def _mobius_upto(limit):
    """Return the Möbius function for 0..limit as a list (mu[0] is 0)."""
    mu = [1] * (limit + 1)
    mu[0] = 0
    composite = bytearray(limit + 1)
    for p in range(2, limit + 1):
        if composite[p]:
            continue
        composite[p * p :: p] = b"\x01" * len(range(p * p, limit + 1, p))
        for multiple in range(p, limit + 1, p):
            mu[multiple] = -mu[multiple]
        for multiple in range(p * p, limit + 1, p * p):
            mu[multiple] = 0
    return mu


def _blocks(x, y):
    """Yield (i, j) ranges over which x // k and y // k stay constant."""
    i = 1
    top = min(x, y)
    while i <= top:
        j = min(x // (x // i), y // (y // i))
        yield i, j
        i = j + 1


def mobius_prefix(limit):
    """Return prefix sums of mu for 0..limit; entry 0 is 0."""
    if limit < 0:
        raise ValueError("limit must be non-negative")
    return list(accumulate(_mobius_upto(limit)))


def _coprime_pairs(n, m, prefix):
    return sum(
        (prefix[j] - prefix[i - 1]) * (n // i) * (m // i) for i, j in _blocks(n, m)
    )


def count_gcd_pairs(a, b, c, d, k):
    """Count pairs a <= x <= b, c <= y <= d with gcd(x, y) == k."""
    if k < 1:
        raise ValueError("k must be positive")
    prefix = mobius_prefix(max(b // k, d // k, 0))

    def upto(x, y):
        return _coprime_pairs(x, y, prefix)

    return (
        upto(b // k, d // k)
        - upto(b // k, (c - 1) // k)
        - upto((a - 1) // k, d // k)
        + upto((a - 1) // k, (c - 1) // k)
    )


def lcm_sum(n):
    """Return the sum of lcm(i, n) for 1 <= i <= n."""
    if n < 1:
        raise ValueError("n must be positive")
    weighted = 1
    rest = n
    p = 2
    while p * p <= rest:
        if rest % p == 0:
            exponent = 0
            while rest % p == 0:
                rest //= p
                exponent += 1
            weighted *= 1 + sum(p ** (2 * j - 1) * (p - 1) for j in range(1, exponent + 1))
        p += 1
    if rest > 1:
        weighted *= 1 + rest * (rest - 1)
    return (weighted + 1) * n // 2


def lcm_table_sum(n, m, modulus=LCM_TABLE_MODULUS):
    """Return the sum of lcm(i, j) over 1 <= i <= n, 1 <= j <= m, modulo modulus."""
    if n < 0 or m < 0:
        raise ValueError("n and m must be non-negative")
    if modulus < 2:
        raise ValueError("modulus must be at least 2")
    limit = min(n, m)
    mu = _mobius_upto(limit)
    weighted = [0] * (limit + 1)
    for i in range(1, limit + 1):
        weighted[i] = (weighted[i - 1] + i * i % modulus * (mu[i] + modulus)) % modulus

    def triangle(x):
        return x * (x + 1) // 2 % modulus

    def coprime_products(x, y):
        total = 0
        for i, j in _blocks(x, y):
            block = (weighted[j] - weighted[i - 1]) % modulus
            total = (total + block * triangle(x // i) % modulus * triangle(y // i)) % modulus
        return total

    total = 0
    for i, j in _blocks(n, m):
        span = (j - i + 1) * (i + j) // 2 % modulus
        total = (total + span * coprime_products(n // i, m // i)) % modulus
    return total


def _divisor_counts(limit):
    counts = [0] * (limit + 1)
    for i in range(1, limit + 1):
        for multiple in range(i, limit + 1, i):
            counts[multiple] += 1
    return counts


def divisor_count_sum(n, m):
    """Return the sum of d(i * j) over 1 <= i <= n, 1 <= j <= m."""
    if n < 0 or m < 0:
        raise ValueError("n and m must be non-negative")
    limit = max(n, m)
    mu_prefix = list(accumulate(_mobius_upto(limit)))
    divisor_prefix = list(accumulate(_divisor_counts(limit)))
    return sum(
        divisor_prefix[n // i] * divisor_prefix[m // i] * (mu_prefix[j] - mu_prefix[i - 1])
        for i, j in _blocks(n, m)
    )


__all__ = [
    "mobius_prefix",
    "count_gcd_pairs",
    "lcm_sum",
    "lcm_table_sum",
    "divisor_count_sum",
    "isqrt",
]