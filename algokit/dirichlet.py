"""Prefix sums of arithmetic functions beyond a sieve limit (Du's sieve)."""

from itertools import accumulate

DEFAULT_LIMIT = 2_000_010


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


def _totients_upto(limit):
    """Return Euler's totient for 0..limit as a list."""
    phi = list(range(limit + 1))
    for p in range(2, limit + 1):
        if phi[p] == p:
            for multiple in range(p, limit + 1, p):
                phi[multiple] -= phi[multiple] // p
    return phi


class MertensSieve:
    """Mertens function and totient prefix sums for arbitrarily large n.

    Values below ``limit`` come from a precomputed table; larger values are
    derived recursively and memoised.
    """

    def __init__(self, limit=DEFAULT_LIMIT):
        if limit < 1:
            raise ValueError("limit must be positive")
        self.limit = limit
        self._prefix = list(accumulate(_mobius_upto(limit - 1)))
        self._cache = {}

    def mertens(self, n):
        """Return the sum of mu(i) for 1 <= i <= n."""
        if n < 0:
            raise ValueError("n must be non-negative")
        if n < self.limit:
            return self._prefix[n]
        cached = self._cache.get(n)
        if cached is not None:
            return cached
        total = 1
        i = 2
        while i <= n:
            quotient = n // i
            j = n // quotient
            total -= self.mertens(quotient) * (j - i + 1)
            i = j + 1
        self._cache[n] = total
        return total

    def totient_sum(self, n):
        """Return the sum of phi(i) for 1 <= i <= n."""
        if n < 0:
            raise ValueError("n must be non-negative")
        if n == 0:
            return 0
        coprime_pairs = 0
        i = 1
        while i <= n:
            quotient = n // i
            j = n // quotient
            block = self.mertens(j) - self.mertens(i - 1)
            coprime_pairs += block * quotient * quotient
            i = j + 1
        return (coprime_pairs - 1) // 2 + 1


def gcd_weighted_sum(n, modulus):
    """Return sum of i * j * gcd(i, j) over 1 <= i, j <= n, modulo a prime > 3."""
    if n < 0:
        raise ValueError("n must be non-negative")
    if modulus <= 3:
        raise ValueError("modulus must be a prime greater than 3")
    p = modulus
    inv6 = pow(6, p - 2, p)
    small = int(n ** 0.666667)
    phi = _totients_upto(small)
    table = [0] * (small + 1)
    running = 0
    for i in range(1, small + 1):
        running = (running + i * i % p * phi[i]) % p
        table[i] = running

    def cube_sum(k):
        k %= p
        half = k * (k + 1) // 2 % p
        return half * half % p

    def square_sum(k):
        k %= p
        return k * (k + 1) % p * (2 * k + 1) % p * inv6 % p

    cache = {}

    def weighted_totient_sum(k):
        if k <= small:
            return table[k]
        if k in cache:
            return cache[k]
        result = cube_sum(k)
        previous = 1
        i = 2
        while i <= k:
            j = k // (k // i)
            current = square_sum(j)
            result = (result - weighted_totient_sum(k // i) * (current - previous)) % p
            previous = current
            i = j + 1
        cache[k] = result
        return result

    total = 0
    previous = 0
    i = 1
    while i <= n:
        quotient = n // i
        j = n // quotient
        current = weighted_totient_sum(j)
        total = (total + cube_sum(quotient) * (current - previous)) % p
        previous = current
        i = j + 1
    return total % p