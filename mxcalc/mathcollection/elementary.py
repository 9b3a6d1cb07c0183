r"""@package mxcalc.mathcollection.elementary

Elementary functions of floating point arguments.

All functions share the following contract:
    * if any argument is `NaN`, the result is `NaN` (checked first)
    * results follow native floating point semantics, i.e. instead of
      raising an exception like the `math` module does, infinities and `NaN`
      are returned (e.g. `ln(0) == -inf`, `sqrt(-1)` is `NaN`)
    * functions defined by a reciprocal (`ctan`, `sec`, `coth`, ...) return
      `NaN` instead of an infinity when the reciprocated value is exactly
      zero

The exceptions to the last rule are mod() and power(), which pass through
whatever the native operation produces.

@b Examples

```
    >>> div(1, 0)
    nan
    >>> power(0, -1)
    inf
    >>> continued_fraction(1, 2, 2)
    1.4
```
"""

import math

import numpy as np

from ..numutils import nan, isnan, any_nan, ieee


__all__ = [
    "div",
    "mod",
    "power",
    "log",
    "sin",
    "cos",
    "tan",
    "ctan",
    "sec",
    "cosec",
    "asin",
    "acos",
    "atan",
    "actan",
    "ln",
    "log2",
    "log10",
    "rad",
    "deg",
    "exp",
    "sqrt",
    "sinh",
    "cosh",
    "tanh",
    "coth",
    "sech",
    "csch",
    "arsinh",
    "arcosh",
    "artanh",
    "arcoth",
    "arsech",
    "arcsch",
    "sa",
    "sinc",
    "abs",
    "sgn",
    "floor",
    "ceil",
    "chi",
    "chi_lr",
    "chi_l",
    "chi_r",
    "kronecker_delta",
    "min",
    "max",
    "continued_fraction",
    "continued_polynomial",
]


def _reciprocal(value):
    r"""Return `1/value`, or `NaN` if `value` is exactly zero."""
    if value != 0:
        return float(1.0 / value)
    return nan


@ieee
def div(a, b):
    r"""Divide `a` by `b`, returning `NaN` (never an infinity) for ``b == 0``."""
    if any_nan(a, b):
        return nan
    if b != 0:
        return float(np.divide(a, b))
    return nan


@ieee
def mod(a, b):
    r"""Remainder of the truncated division `a/b`.

    The result has the sign of `a`, as with C's `fmod()`. Unlike Python's `%`
    operator, ``mod(a, 0)`` does not raise but returns `NaN`.
    """
    if any_nan(a, b):
        return nan
    return float(np.fmod(float(a), float(b)))


@ieee
def power(a, b):
    r"""Compute `a` raised to the power `b`.

    Native floating point results are returned for edge cases, e.g.
    ``power(0, -1) == inf`` and ``power(-8, 1/3)`` is `NaN`.
    """
    if any_nan(a, b):
        return nan
    return float(np.power(float(a), float(b)))


@ieee
def log(a, b):
    r"""Logarithm of `a` to the base `b`.

    `NaN` is returned for bases with ``ln(b) == 0``, i.e. for ``b == 1``.
    """
    if any_nan(a, b):
        return nan
    logb = np.log(b)
    if logb != 0:
        return float(np.log(a) / logb)
    return nan


@ieee
def sin(a):
    if isnan(a):
        return nan
    return float(np.sin(a))


@ieee
def cos(a):
    if isnan(a):
        return nan
    return float(np.cos(a))


@ieee
def tan(a):
    if isnan(a):
        return nan
    return float(np.tan(a))


@ieee
def ctan(a):
    r"""Cotangent, `NaN` where the tangent vanishes."""
    if isnan(a):
        return nan
    return _reciprocal(np.tan(a))


@ieee
def sec(a):
    r"""Secant, `NaN` where the cosine vanishes."""
    if isnan(a):
        return nan
    return _reciprocal(np.cos(a))


@ieee
def cosec(a):
    r"""Cosecant, `NaN` where the sine vanishes."""
    if isnan(a):
        return nan
    return _reciprocal(np.sin(a))


@ieee
def asin(a):
    if isnan(a):
        return nan
    return float(np.arcsin(a))


@ieee
def acos(a):
    if isnan(a):
        return nan
    return float(np.arccos(a))


@ieee
def atan(a):
    if isnan(a):
        return nan
    return float(np.arctan(a))


@ieee
def actan(a):
    r"""Inverse cotangent computed as ``atan(1/a)``.

    Since ``1/0 == inf`` here, ``actan(0) == pi/2``.
    """
    if isnan(a):
        return nan
    return float(np.arctan(np.divide(1.0, a)))


@ieee
def ln(a):
    r"""Natural logarithm."""
    if isnan(a):
        return nan
    return float(np.log(a))


@ieee
def log2(a):
    if isnan(a):
        return nan
    return float(np.log(a) / np.log(2.0))


@ieee
def log10(a):
    if isnan(a):
        return nan
    return float(np.log10(a))


def rad(a):
    r"""Convert degrees to radians."""
    if isnan(a):
        return nan
    return a * (math.pi / 180.0)


def deg(a):
    r"""Convert radians to degrees."""
    if isnan(a):
        return nan
    return a * (180.0 / math.pi)


@ieee
def exp(a):
    if isnan(a):
        return nan
    return float(np.exp(a))


@ieee
def sqrt(a):
    if isnan(a):
        return nan
    return float(np.sqrt(a))


@ieee
def sinh(a):
    if isnan(a):
        return nan
    return float(np.sinh(a))


@ieee
def cosh(a):
    if isnan(a):
        return nan
    return float(np.cosh(a))


@ieee
def tanh(a):
    if isnan(a):
        return nan
    return float(np.tanh(a))


@ieee
def coth(a):
    r"""Hyperbolic cotangent, `NaN` at zero."""
    if isnan(a):
        return nan
    return _reciprocal(np.tanh(a))


@ieee
def sech(a):
    if isnan(a):
        return nan
    return _reciprocal(np.cosh(a))


@ieee
def csch(a):
    r"""Hyperbolic cosecant, `NaN` at zero."""
    if isnan(a):
        return nan
    return _reciprocal(np.sinh(a))


@ieee
def arsinh(a):
    r"""Inverse hyperbolic sine via ``ln(a + sqrt(a^2 + 1))``."""
    if isnan(a):
        return nan
    a = np.float64(a)
    return float(np.log(a + np.sqrt(a*a + 1)))


@ieee
def arcosh(a):
    r"""Inverse hyperbolic cosine via ``ln(a + sqrt(a^2 - 1))``."""
    if isnan(a):
        return nan
    a = np.float64(a)
    return float(np.log(a + np.sqrt(a*a - 1)))


@ieee
def artanh(a):
    r"""Inverse hyperbolic tangent, `NaN` at ``a == 1``.

    Computed as \f$ \frac12 \ln\frac{1+a}{1-a} \f$. Arguments outside of
    ``[-1, 1]`` produce `NaN` through the logarithm.
    """
    if isnan(a):
        return nan
    a = np.float64(a)
    if 1 - a != 0:
        return float(0.5 * np.log((1 + a) / (1 - a)))
    return nan


@ieee
def arcoth(a):
    r"""Inverse hyperbolic cotangent, `NaN` at ``a == 1``."""
    if isnan(a):
        return nan
    a = np.float64(a)
    if a - 1 != 0:
        return float(0.5 * np.log((a + 1) / (a - 1)))
    return nan


@ieee
def arsech(a):
    r"""Inverse hyperbolic secant, `NaN` at zero."""
    if isnan(a):
        return nan
    a = np.float64(a)
    if a != 0:
        return float(np.log((1 + np.sqrt(1 - a*a)) / a))
    return nan


@ieee
def arcsch(a):
    r"""Inverse hyperbolic cosecant, `NaN` at zero."""
    if isnan(a):
        return nan
    a = np.float64(a)
    if a != 0:
        return float(np.log(1/a + np.sqrt(1 + a*a) / np.abs(a)))
    return nan


@ieee
def sa(a):
    r"""Normalized sinc function \f$ \sin(\pi a)/(\pi a) \f$.

    The removable singularity is not filled in, i.e. ``sa(0)`` is `NaN`.
    """
    if isnan(a):
        return nan
    x = math.pi * a
    if x != 0:
        return float(np.sin(x) / x)
    return nan


@ieee
def sinc(a):
    r"""Unnormalized sinc function \f$ \sin(a)/a \f$, `NaN` at zero."""
    if isnan(a):
        return nan
    if a != 0:
        return float(np.sin(a) / np.float64(a))
    return nan


def abs(a): # pylint: disable=redefined-builtin
    if isnan(a):
        return nan
    return float(np.abs(a))


def sgn(a):
    r"""Sign of `a` as one of ``-1.0, 0.0, 1.0``."""
    if isnan(a):
        return nan
    return float(np.sign(a))


def floor(a):
    if isnan(a):
        return nan
    return float(np.floor(a))


def ceil(a):
    if isnan(a):
        return nan
    return float(np.ceil(a))


def chi(x, a, b):
    r"""Characteristic function of the open interval ``(a, b)``."""
    if any_nan(x, a, b):
        return nan
    return 1.0 if a < x < b else 0.0


def chi_lr(x, a, b):
    r"""Characteristic function of the closed interval ``[a, b]``."""
    if any_nan(x, a, b):
        return nan
    return 1.0 if a <= x <= b else 0.0


def chi_l(x, a, b):
    r"""Characteristic function of the left-closed interval ``[a, b)``."""
    if any_nan(x, a, b):
        return nan
    return 1.0 if a <= x < b else 0.0


def chi_r(x, a, b):
    r"""Characteristic function of the right-closed interval ``(a, b]``."""
    if any_nan(x, a, b):
        return nan
    return 1.0 if a < x <= b else 0.0


def kronecker_delta(i, j):
    r"""Kronecker delta of two floats: `1` if ``i == j``, `0` otherwise.

    No rounding takes place, so ``kronecker_delta(1.0, 1.2) == 0``. For the
    integer form (which never returns `NaN`), see
    integers.kronecker_delta().
    """
    if any_nan(i, j):
        return nan
    return 1.0 if i == j else 0.0


def min(*numbers): # pylint: disable=redefined-builtin
    r"""Minimum of the given numbers.

    The numbers are scanned from left to right and `NaN` is returned as soon
    as a `NaN` is encountered. Without arguments, `inf` is returned.
    """
    result = np.inf
    for number in numbers:
        if isnan(number):
            return nan
        if number < result:
            result = number
    return float(result)


def max(*numbers): # pylint: disable=redefined-builtin
    r"""Maximum of the given numbers (see min())."""
    result = -np.inf
    for number in numbers:
        if isnan(number):
            return nan
        if number > result:
            result = number
    return float(result)


@ieee
def continued_fraction(*sequence):
    r"""Evaluate the continued fraction given by its terms.

    For a sequence \f$ a_0, a_1, \ldots, a_n \f$, this computes
    \f[
        a_0 + \frac{1}{a_1 + \frac{1}{\ddots + \frac{1}{a_n}}}.
    \f]

    The value is built from the right, starting with \f$ a_n \f$. A single
    term is returned unchanged. `NaN` is returned if any term is `NaN` or if
    an interim value is exactly zero when its reciprocal would be needed
    (e.g. ``continued_fraction(1, 0)``).

    @b Notes

    An empty sequence gives `0`.
    """
    if len(sequence) == 1:
        return sequence[0]
    cf = 0.0
    last_index = len(sequence) - 1
    for i in range(last_index, -1, -1):
        a = sequence[i]
        if isnan(a):
            return nan
        if i == last_index:
            cf = a
        else:
            if cf == 0:
                return nan
            cf = a + 1.0 / cf
    return float(cf)


def _continued_polynomial(n, x):
    r"""Recursive evaluation of the n'th continuant of `x`."""
    if n == 0:
        return 1.0
    if n == 1:
        return x[0]
    return x[n-1] * _continued_polynomial(n-1, x) + _continued_polynomial(n-2, x)


@ieee
def continued_polynomial(*x):
    r"""Continuant polynomial of the given values.

    Defined by the recurrence
    \f[
        K_0 = 1, \quad K_1 = x_1, \quad
        K_n = x_n K_{n-1} + K_{n-2},
    \f]
    where \f$ n \f$ is the number of values. The recursion is evaluated
    naively, i.e. the cost grows exponentially with the number of values.
    """
    if any_nan(*x):
        return nan
    return float(_continued_polynomial(len(x), [np.float64(v) for v in x]))
