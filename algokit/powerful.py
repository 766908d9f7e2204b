"""Prefix sums of multiplicative functions via the powerful number sieve."""

from math import isqrt

MOD = 1_000_000_007
_INV2 = pow(2, MOD - 2, MOD)
_INV6 = pow(6, MOD - 2, MOD)


def _totients_upto(limit):
    phi = list(range(limit + 1))
    for p in range(2, limit + 1):
        if phi[p] == p:
            for multiple in range(p, limit + 1, p):
                phi[multiple] -= phi[multiple] // p
    return phi


def _table_limit(n):
    return max(isqrt(n) + 1, int(n ** (2 / 3))) + 1


def _triangle(x):
    return x % MOD * ((x + 1) % MOD) % MOD * _INV2 % MOD


def _square_sum(x):
    return x % MOD * ((x + 1) % MOD) % MOD * ((2 * x + 1) % MOD) % MOD * _INV6 % MOD


def _sum_over_powerful(n, primes, prefix_g, local_f, local_g):
    """Sum h(d) * G(n // d) over powerful d <= n, where f = g * h."""
    coefficients = {}

    def h(p, c):
        known = coefficients.setdefault(p, [1])
        while len(known) <= c:
            k = len(known)
            value = local_f(p, k) - sum(
                local_g(p, j) * known[k - j] for j in range(1, k + 1)
            )
            known.append(value % MOD)
        return known[c]

    total = 0

    def visit(d, hd, start):
        nonlocal total
        total = (total + hd * prefix_g(n // d)) % MOD
        for idx in range(start, len(primes)):
            p = primes[idx]
            x = d * p * p
            if x > n:
                break
            exponent = 2
            while x <= n:
                coefficient = h(p, exponent)
                if coefficient:
                    visit(x, hd * coefficient % MOD, idx + 1)
                x *= p
                exponent += 1

    visit(1, 1, 0)
    return total


def sum_power_times_pred(n):
    """Return sum of f(i) for i <= n mod 1e9+7, f(p^k) = p^k * (p^k - 1)."""
    if n < 1:
        raise ValueError("n must be positive")
    limit = _table_limit(n)
    phi = _totients_upto(limit)
    primes = [p for p in range(2, limit + 1) if phi[p] == p - 1]
    table = [0] * (limit + 1)
    for i in range(1, limit + 1):
        table[i] = (table[i - 1] + i * phi[i]) % MOD

    cache = {}

    def prefix_g(m):
        if m <= limit:
            return table[m]
        if m in cache:
            return cache[m]
        result = _square_sum(m)
        i = 2
        while i <= m:
            j = m // (m // i)
            result = (result - (_triangle(j) - _triangle(i - 1)) * prefix_g(m // i)) % MOD
            i = j + 1
        cache[m] = result
        return result

    def local_f(p, c):
        power = pow(p, c, MOD)
        return power * (power - 1) % MOD

    def local_g(p, j):
        return p * (p - 1) % MOD * pow(p * p, j - 1, MOD) % MOD

    return _sum_over_powerful(n, primes, prefix_g, local_f, local_g)


def sum_prime_xor_exponent(n):
    """Return sum of f(i) for i <= n mod 1e9+7, f(p^c) = p xor c."""
    if n < 1:
        raise ValueError("n must be positive")
    limit = _table_limit(n)
    phi = _totients_upto(limit)
    primes = [p for p in range(2, limit + 1) if phi[p] == p - 1]
    phi_prefix = [0] * (limit + 1)
    for i in range(1, limit + 1):
        phi_prefix[i] = (phi_prefix[i - 1] + phi[i]) % MOD
    half = limit // 2
    even_prefix = [0] * (half + 1)
    for i in range(1, half + 1):
        even_prefix[i] = (even_prefix[i - 1] + phi[2 * i]) % MOD

    totient_cache = {}

    def totient_sum(m):
        if m <= limit:
            return phi_prefix[m]
        if m in totient_cache:
            return totient_cache[m]
        result = _triangle(m)
        i = 2
        while i <= m:
            j = m // (m // i)
            result = (result - (j - i + 1) % MOD * totient_sum(m // i)) % MOD
            i = j + 1
        totient_cache[m] = result
        return result

    even_cache = {}

    def even_totient_sum(m):
        if m <= half:
            return even_prefix[m]
        if m in even_cache:
            return even_cache[m]
        result = (totient_sum(m) + even_totient_sum(m // 2)) % MOD
        even_cache[m] = result
        return result

    def prefix_g(m):
        return (totient_sum(m) + 2 * even_totient_sum(m // 2)) % MOD

    def local_f(p, c):
        return p ^ c

    def local_g(p, j):
        base = (p - 1) * 3 if p == 2 else p - 1
        return base * pow(p, j - 1, MOD) % MOD

    return _sum_over_powerful(n, primes, prefix_g, local_f, local_g)