r"""@package mxcalc.mathcollection.integers

Combinatorial and number theoretic functions of integer parameters.

These are the *integer forms* of the functions. They expect `int` values for
their integer parameters and return floats, with `NaN` signalling an undefined
result. The floating point forms, which round their arguments and forward to
the functions here, are created in the special module using the
adapters.round_args() adapter.

The recursive functions (Euler and Stirling numbers, Fibonacci and Lucas
numbers) are implemented as the plain textbook recursions without any
memoization. Their cost grows exponentially with the parameters and the
recursion depth grows linearly, so callers should keep the parameters small.


@b Examples

```
    >>> stirling2_number(4, 2)
    7.0
    >>> bell_number(5)
    52.0
    >>> gcd(12, 18, 8)
    2.0
```
"""

import numpy as np

from ..numutils import nan, isnan
from .elementary import power, div


__all__ = [
    "factorial",
    "binom_coeff",
    "bell_number",
    "euler_number",
    "bernoulli_number",
    "stirling1_number",
    "stirling2_number",
    "worpitzky_number",
    "harmonic_number",
    "generalized_harmonic_number",
    "catalan_number",
    "fibonacci_number",
    "lucas_number",
    "kronecker_delta",
    "euler_polynomial",
    "gcd",
    "lcm",
]


def factorial(n):
    r"""Factorial \f$ n! \f$, `NaN` for negative `n`.

    The product is accumulated in floating point, so it overflows to `inf`
    for ``n > 170``.
    """
    if n < 0:
        return nan
    f = 1.0
    for i in range(1, n+1):
        f *= i
    return f


def binom_coeff(n, k):
    r"""Generalized binomial coefficient \f$ {n \choose k} \f$.

    @param n
        Any real number (float).
    @param k
        Integer, ``k >= 0``.

    @return The falling factorial \f$ n (n-1) \cdots (n-k+1) \f$ divided by
        \f$ k! \f$, or `NaN` if `n` is `NaN` or ``k < 0``.
    """
    if isnan(n) or k < 0:
        return nan
    numerator = 1.0
    for i in range(k):
        numerator *= (n - i)
    denominator = 1.0
    for i in range(2, k+1):
        denominator *= i
    return numerator / denominator


def bell_number(n):
    r"""Bell number \f$ B_n \f$ computed via the Bell triangle.

    The triangle is stored as 64 bit integers. Like any fixed width integer
    computation, the values wrap around once they exceed the range, which
    happens for ``n > 25``.

    @return `NaN` for ``n < 0``, `1` for ``n in (0, 1)``.
    """
    if n < 0:
        return nan
    if n < 2:
        return 1.0
    n -= 1
    triangle = np.zeros((n+1, n+1), dtype=np.int64)
    triangle[0, 0] = 1
    triangle[1, 0] = 1
    for r in range(1, n+1):
        # triangle[r, k+1] = triangle[r-1, k] + triangle[r, k]
        triangle[r, 1:r+1] = triangle[r, 0] + np.cumsum(triangle[r-1, :r])
        if r < n:
            triangle[r+1, 0] = triangle[r, r]
    return float(triangle[n, n])


def euler_number(n, k):
    r"""Eulerian number \f$ \left\langle n \atop k \right\rangle \f$.

    Uses the recurrence
    \f[
        E(n, k) = (k+1) E(n-1, k) + (n-k) E(n-1, k-1)
    \f]
    with \f$ E(0, 0) = 1 \f$. Negative `k` gives `0` while negative `n` gives
    `NaN`.
    """
    if n < 0:
        return nan
    if k < 0:
        return 0.0
    if n == 0:
        return 1.0 if k == 0 else 0.0
    return (k+1) * euler_number(n-1, k) + (n-k) * euler_number(n-1, k-1)


def bernoulli_number(m, n):
    r"""Bernoulli number \f$ B_m(n) \f$ via the double sum
    \f[
        \sum_{k=0}^m \sum_{v=0}^k (-1)^v {k \choose v} \frac{(n+v)^m}{k+1}.
    \f]

    `NaN` is returned unless both `m` and `n` are non-negative.
    """
    if m < 0 or n < 0:
        return nan
    result = 0.0
    for k in range(m+1):
        for v in range(k+1):
            result += (power(-1, v) * binom_coeff(k, v)
                       * (power(n + v, m) / (k + 1)))
    return result


def stirling1_number(n, k):
    r"""Unsigned Stirling number of the first kind \f$ {n \brack k} \f$.

    Out of range parameters (``k > n`` or any negative parameter) give `0`.
    """
    if k > n or k < 0 or n < 0:
        return 0.0
    if n == 0:
        return 1.0 if k == 0 else 0.0
    if k == 0:
        return 0.0
    return (n-1) * stirling1_number(n-1, k) + stirling1_number(n-1, k-1)


def stirling2_number(n, k):
    r"""Stirling number of the second kind \f$ {n \brace k} \f$.

    Out of range parameters (``k > n`` or any negative parameter) give `0`.
    """
    if k > n or k < 0 or n < 0:
        return 0.0
    if n == 0:
        return 1.0 if k == 0 else 0.0
    if k == 0:
        return 0.0
    return k * stirling2_number(n-1, k) + stirling2_number(n-1, k-1)


def worpitzky_number(n, k):
    r"""Worpitzky number, `NaN` unless ``0 <= k <= n``."""
    if n < 0 or k < 0 or k > n:
        return nan
    result = 0.0
    for v in range(k+1):
        result += power(-1, v+k) * power(v+1, n) * binom_coeff(k, v)
    return result


def harmonic_number(n):
    r"""Harmonic number \f$ H_n = \sum_{k=1}^n 1/k \f$ (`0` for ``n <= 0``)."""
    if n <= 0:
        return 0.0
    h = 1.0
    for k in range(2, n+1):
        h += 1.0 / k
    return h


def generalized_harmonic_number(x, n):
    r"""Generalized harmonic number \f$ \sum_{k=1}^n k^{-x} \f$.

    @param x
        Float exponent, ``x >= 0``. Negative or `NaN` values give `NaN`.
    @param n
        Integer number of terms. ``n <= 0`` gives `0`.

    @b Notes

    For ``n == 1`` the value of `x` itself is returned, not `1`.
    """
    if isnan(x) or x < 0:
        return nan
    if n <= 0:
        return 0.0
    if n == 1:
        return x
    h = 1.0
    for k in range(2, n+1):
        h += 1 / power(k, x)
    return h


def catalan_number(n):
    r"""Catalan number \f$ C_n = {2n \choose n} \frac{1}{n+1} \f$."""
    return binom_coeff(2*n, n) * div(1, n+1)


def fibonacci_number(n):
    r"""Fibonacci number by naive recursion, `NaN` for negative `n`."""
    if n < 0:
        return nan
    if n == 0:
        return 0.0
    if n == 1:
        return 1.0
    return fibonacci_number(n-1) + fibonacci_number(n-2)


def lucas_number(n):
    r"""Lucas number by naive recursion, `NaN` for negative `n`."""
    if n < 0:
        return nan
    if n == 0:
        return 2.0
    if n == 1:
        return 1.0
    return lucas_number(n-1) + lucas_number(n-2)


def kronecker_delta(i, j):
    r"""Kronecker delta of two integers. Never returns `NaN`."""
    return 1.0 if i == j else 0.0


def euler_polynomial(m, x):
    r"""Euler polynomial \f$ E_m(x) \f$.

    Computed as
    \f[
        \sum_{n=0}^m \frac{1}{2^n} \sum_{k=0}^n (-1)^k {n \choose k} (x+k)^m,
    \f]
    where the running total is divided by \f$ 2^n \f$ after each outer
    step. `NaN` is returned for ``m < 0`` or a `NaN` value of `x`.
    """
    if isnan(x) or m < 0:
        return nan
    result = 0.0
    for n in range(m+1):
        for k in range(n+1):
            result += power(-1, k) * binom_coeff(n, k) * power(x + k, m)
        result /= power(2, n)
    return result


def _gcd(a, b):
    r"""Greatest common divisor of two integers (sign insensitive)."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def _lcm(a, b):
    r"""Least common multiple of two integers, `0` if any of them is zero."""
    if a == 0 or b == 0:
        return 0
    return abs(a * b) // _gcd(a, b)


def _fold(func, numbers):
    r"""Apply a binary function pairwise from left to right."""
    if not numbers:
        return nan
    result = numbers[0]
    for number in numbers[1:]:
        result = func(result, number)
    return float(result)


def gcd(*numbers):
    r"""Greatest common divisor of the given integers.

    Signs are ignored and ``gcd(0, 0) == 0``. A single number is returned
    unchanged (i.e. including its sign). More than two numbers are folded
    pairwise from left to right. `NaN` is returned for no numbers.
    """
    return _fold(_gcd, numbers)


def lcm(*numbers):
    r"""Least common multiple of the given integers.

    Signs are ignored and the result is `0` if any number is zero. A single
    number is returned unchanged. `NaN` is returned for no numbers.
    """
    return _fold(_lcm, numbers)
