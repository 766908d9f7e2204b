"""Trailing digits of Mersenne numbers."""


def mersenne_last_digits(p, digits=100):
    """Return the last `digits` decimal digits of 2**p - 1, zero padded."""
    if p < 1:
        raise ValueError("p must be positive")
    if digits < 1:
        raise ValueError("digits must be positive")
    # 2**p never ends in 0, so subtracting one needs no borrow.
    tail = pow(2, p, 10**digits) - 1
    return str(tail).zfill(digits)