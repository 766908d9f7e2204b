"""Polynomial arithmetic: FFT, NTT, Lagrange interpolation, inverse and square root."""

import cmath

DEFAULT_MODULUS = 998244353
NTT_MODULUS = 998244353
NTT_ROOT = 3
_INV2 = pow(2, NTT_MODULUS - 2, NTT_MODULUS)


def _check_size(n):
    if n < 1 or n & (n - 1):
        raise ValueError("length must be a power of two")


def _bit_reverse(items):
    n = len(items)
    j = 0
    for i in range(1, n):
        bit = n >> 1
        while j & bit:
            j ^= bit
            bit >>= 1
        j |= bit
        if i < j:
            items[i], items[j] = items[j], items[i]


def fft(values, invert=False):
    """Return the discrete Fourier transform of values (length a power of two)."""
    data = [complex(v) for v in values]
    n = len(data)
    _check_size(n)
    _bit_reverse(data)
    sign = -1 if invert else 1
    size = 2
    while size <= n:
        step = cmath.exp(sign * 2j * cmath.pi / size)
        half = size // 2
        for start in range(0, n, size):
            w = 1
            for k in range(start, start + half):
                u = data[k]
                t = w * data[k + half]
                data[k] = u + t
                data[k + half] = u - t
                w *= step
        size *= 2
    if invert:
        data = [v / n for v in data]
    return data


def multiply_decimal(a, b):
    """Return the product of two non-negative decimal strings as a string."""
    for text in (a, b):
        if not text or not set(text) <= set("0123456789"):
            raise ValueError("operands must be non-empty decimal digit strings")
    size = 1
    while size < 2 * len(a) or size < 2 * len(b):
        size *= 2
    fa = fft([int(ch) for ch in reversed(a)] + [0] * (size - len(a)))
    fb = fft([int(ch) for ch in reversed(b)] + [0] * (size - len(b)))
    product = fft([x * y for x, y in zip(fa, fb)], invert=True)
    digits = []
    carry = 0
    for value in product:
        carry += int(value.real + 0.5)
        digits.append(carry % 10)
        carry //= 10
    while carry:
        digits.append(carry % 10)
        carry //= 10
    while len(digits) > 1 and digits[-1] == 0:
        digits.pop()
    return "".join(str(d) for d in reversed(digits))


def lagrange_eval(points, x, modulus=DEFAULT_MODULUS):
    """Evaluate at x the polynomial through the given (xi, yi) points, modulo a prime."""
    points = list(points)
    if len({xi % modulus for xi, _ in points}) != len(points):
        raise ValueError("interpolation points must have distinct x values")
    total = 0
    for i, (xi, yi) in enumerate(points):
        numerator = yi % modulus
        denominator = 1
        for j, (xj, _) in enumerate(points):
            if i != j:
                numerator = numerator * (x - xj) % modulus
                denominator = denominator * (xi - xj) % modulus
        total += numerator * pow(denominator, modulus - 2, modulus)
    return total % modulus


def ntt(values, invert=False):
    """Return the number-theoretic transform of values modulo 998244353."""
    data = [v % NTT_MODULUS for v in values]
    n = len(data)
    _check_size(n)
    if (NTT_MODULUS - 1) % n:
        raise ValueError("length too large for the modulus")
    _bit_reverse(data)
    size = 2
    while size <= n:
        step = pow(NTT_ROOT, (NTT_MODULUS - 1) // size, NTT_MODULUS)
        half = size // 2
        for start in range(0, n, size):
            w = 1
            for k in range(start, start + half):
                x = data[k]
                y = w * data[k + half] % NTT_MODULUS
                data[k] = (x + y) % NTT_MODULUS
                data[k + half] = (x - y) % NTT_MODULUS
                w = w * step % NTT_MODULUS
        size *= 2
    if invert:
        data[1:] = data[:0:-1]
        inverse_n = pow(n, NTT_MODULUS - 2, NTT_MODULUS)
        data = [v * inverse_n % NTT_MODULUS for v in data]
    return data


def _padded(coeffs, n):
    values = [c % NTT_MODULUS for c in coeffs][:n]
    return values + [0] * (n - len(values))


def _doubling_sizes(n):
    sizes = []
    while n > 1:
        sizes.append(n)
        n = (n + 1) // 2
    return reversed(sizes)


def _transform_size(deg):
    size = 1
    while size < 2 * deg:
        size *= 2
    return size


def poly_inverse(coeffs, n):
    """Return the first n coefficients of 1 / f modulo 998244353."""
    if n < 1:
        raise ValueError("n must be positive")
    f = _padded(coeffs, n)
    if f[0] == 0:
        raise ValueError("constant term must be invertible")
    h = [pow(f[0], NTT_MODULUS - 2, NTT_MODULUS)]
    for deg in _doubling_sizes(n):
        size = _transform_size(deg)
        g = ntt(f[:deg] + [0] * (size - deg))
        hh = ntt(h + [0] * (size - len(h)))
        step = [(2 - gi * hi) % NTT_MODULUS * hi % NTT_MODULUS for gi, hi in zip(g, hh)]
        h = ntt(step, invert=True)[:deg]
    return h


def poly_sqrt(coeffs, n):
    """Return the first n coefficients of sqrt(f) modulo 998244353; f[0] must be 1."""
    if n < 1:
        raise ValueError("n must be positive")
    f = _padded(coeffs, n)
    if f[0] != 1:
        raise ValueError("constant term must be 1")
    h = [1]
    for deg in _doubling_sizes(n):
        size = _transform_size(deg)
        g = ntt(poly_inverse(h, deg) + [0] * (size - deg))
        t = ntt(f[:deg] + [0] * (size - deg))
        hh = ntt(h + [0] * (size - len(h)))
        step = [_INV2 * (hi + gi * ti) % NTT_MODULUS for hi, gi, ti in zip(hh, g, t)]
        h = ntt(step, invert=True)[:deg]
    return h