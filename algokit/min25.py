"""Min_25 sieve for the multiplicative function f(p^c) = p xor c."""

from math import isqrt

MOD = 1_000_000_007


def _primes_upto(limit):
    if limit < 2:
        return []
    composite = bytearray(limit + 1)
    primes = []
    for p in range(2, limit + 1):
        if not composite[p]:
            primes.append(p)
            composite[p * p :: p] = b"\x01" * len(range(p * p, limit + 1, p))
    return primes


def xor_function_sum(n):
    """Return sum of f(i) for 1 <= i <= n modulo 1e9+7.

    f is multiplicative with f(1) = 1 and f(p^c) = p xor c.
    """
    if n < 1:
        raise ValueError("n must be positive")
    root = isqrt(n)
    primes = _primes_upto(root + 1000)
    prime_prefix = [0]
    for p in primes:
        prime_prefix.append((prime_prefix[-1] + p) % MOD)

    values = []
    small_index = [0] * (root + 2)
    large_index = [0] * (root + 2)

    def index(v):
        return small_index[v] if v <= root else large_index[n // v]

    i = 1
    while i <= n:
        v = n // i
        if v <= root:
            small_index[v] = len(values)
        else:
            large_index[n // v] = len(values)
        values.append(v)
        i = n // v + 1

    count = [(v - 1) % MOD for v in values]
    total = [(v + 2) * (v - 1) // 2 % MOD for v in values]
    for k, p in enumerate(primes):
        square = p * p
        if square > n:
            break
        for pos, v in enumerate(values):
            if v < square:
                break
            other = index(v // p)
            count[pos] = (count[pos] - (count[other] - k)) % MOD
            total[pos] = (total[pos] - p * (total[other] - prime_prefix[k])) % MOD

    prime_values = [(t - c) % MOD for t, c in zip(total, count)]

    def rest(k, m):
        if m <= 1 or m < primes[k]:
            return 0
        answer = prime_values[index(m)] - (prime_prefix[k] - k)
        if k == 0:
            answer += 2
        for i in range(k, len(primes)):
            p = primes[i]
            if p * p > m:
                break
            power, exponent = p, 1
            while power * p <= m:
                answer += (p ^ exponent) * rest(i + 1, m // power) + (p ^ (exponent + 1))
                power *= p
                exponent += 1
        return answer % MOD

    return (rest(0, n) + 1) % MOD