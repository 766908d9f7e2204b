import random
from math import prod

import pytest

from algokit.factor import is_probable_prime, largest_prime_factor, pollard_rho


@pytest.mark.parametrize("p", [2, 3, 5, 97, 7919, 1_000_000_007, 2**61 - 1])
def test_primes_pass(p):
    assert is_probable_prime(p, rng=random.Random(1)) is True


@pytest.mark.parametrize("n", [-7, 0, 1, 4, 9, 561, 1105, 8051, (2**31 - 1) * 3])
def test_non_primes_fail(n):
    assert is_probable_prime(n, rng=random.Random(2)) is False


@pytest.mark.parametrize("n", [4, 15, 91, 8051, 10403, (2**31 - 1) * (10**9 + 7)])
def test_pollard_rho_returns_divisor(n):
    divisor = pollard_rho(n, random.Random(3))
    assert 1 < divisor <= n
    assert n % divisor == 0


def test_pollard_rho_rejects_small():
    with pytest.raises(ValueError):
        pollard_rho(1)


@pytest.mark.parametrize(
    "factors",
    [[2, 2, 3], [1000003, 999983], [2**61 - 1, 3], [7, 7, 7, 7, 7], [2, 3, 5, 7, 11, 13]],
)
def test_largest_prime_factor(factors):
    n = prod(factors)
    assert largest_prime_factor(n, random.Random(4)) == max(factors)


@pytest.mark.parametrize("p", [2, 13, 1_000_000_007])
def test_prime_is_its_own_largest_factor(p):
    assert largest_prime_factor(p, random.Random(5)) == p


def test_default_rng_works():
    factors = [3, 5, 17, 257]
    assert largest_prime_factor(prod(factors)) == max(factors)


def test_below_two_gives_zero():
    assert largest_prime_factor(1) == 0