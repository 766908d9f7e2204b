"""Egyptian fraction decomposition by iterative deepening search."""

from math import gcd

DEFAULT_MAX_DEPTH = 100


def _first_denominator(num, den):
    """Smallest c with 1/c < num/den."""
    return den // num + 1


def _search(a, b, depth):
    current = [0] * (depth + 1)
    best = None

    def better():
        for mine, theirs in zip(reversed(current), reversed(best)):
            if mine != theirs:
                return mine < theirs
        return False

    def dfs(d, start, num, den):
        nonlocal best
        if d == depth:
            if den % num:
                return False
            current[d] = den // num
            if best is None or better():
                best = list(current)
            return True
        found = False
        i = max(start, _first_denominator(num, den))
        while den * (depth + 1 - d) > i * num:
            current[d] = i
            rest_num = num * i - den
            rest_den = den * i
            g = gcd(rest_num, rest_den)
            if dfs(d + 1, i + 1, rest_num // g, rest_den // g):
                found = True
            i += 1
        return found

    dfs(0, _first_denominator(a, b), a, b)
    return best


def egyptian_fraction(a, b, max_depth=DEFAULT_MAX_DEPTH):
    """Return increasing denominators of unit fractions summing to a/b.

    Uses the fewest terms (at least two), then the smallest largest
    denominator. Returns None when no split within max_depth + 1 terms exists.
    """
    if a <= 0 or b <= 0:
        raise ValueError("numerator and denominator must be positive")
    for depth in range(1, max_depth + 1):
        best = _search(a, b, depth)
        if best is not None:
            return best
    return None