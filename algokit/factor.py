"""Probabilistic primality testing and Pollard's rho factorisation."""

import random
from math import gcd

_BATCH = 127


def _rng_or_default(rng):
    return rng if rng is not None else random.Random()


def is_probable_prime(n, rounds=10, rng=None):
    """Return True if n passes `rounds` Miller-Rabin rounds with random bases."""
    if n < 2:
        return False
    if n in (2, 3):
        return True
    if n % 2 == 0:
        return False
    rng = _rng_or_default(rng)
    d, r = n - 1, 0
    while d % 2 == 0:
        d //= 2
        r += 1
    for _ in range(rounds):
        a = rng.randrange(2, n)
        x = pow(a, d, n)
        if x in (1, n - 1):
            continue
        for _ in range(r - 1):
            x = x * x % n
            if x == n - 1:
                break
        else:
            return False
    return True


def pollard_rho(n, rng=None):
    """Return a divisor of n greater than 1, possibly n itself.

    Uses Brent's cycle detection and batches gcd computations.
    """
    if n < 2:
        raise ValueError("n must be at least 2")
    rng = _rng_or_default(rng)
    c = rng.randrange(1, n)
    saved = current = 0
    goal = 1
    while True:
        product = 1
        for step in range(1, goal + 1):
            current = (current * current + c) % n
            product = product * abs(current - saved) % n
            if step % _BATCH == 0:
                divisor = gcd(product, n)
                if divisor > 1:
                    return divisor
        divisor = gcd(product, n)
        if divisor > 1:
            return divisor
        saved = current
        goal *= 2


def largest_prime_factor(n, rng=None):
    """Return the largest prime factor of n, or 0 when n < 2."""
    rng = _rng_or_default(rng)
    best = 0

    def split(x):
        nonlocal best
        if x <= best or x < 2:
            return
        if is_probable_prime(x, rng=rng):
            best = max(best, x)
            return
        divisor = x
        while divisor >= x:
            divisor = pollard_rho(x, rng)
        while x % divisor == 0:
            x //= divisor
        split(x)
        split(divisor)

    split(n)
    return best