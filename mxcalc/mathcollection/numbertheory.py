r"""@package mxcalc.mathcollection.numbertheory

Iterated operators: summation, product and finite differences.

These operators evaluate an expression repeatedly while rebinding one of its
arguments. The expression `f` can be any object with a `calculate()` method
that returns the value for the *current* values of its arguments (e.g. any
exprs.numexpr.NumericExpression). The argument `x` (or `index`) is any
object with `get_value()` and `set_value()` methods, usually an
exprs.argument.Argument referenced by `f`.

Two different policies apply to the rebound argument:
    * sigma_summation() and pi_product() leave the argument at the last value
      they assigned to it.
    * forward_difference() and backward_difference() restore the argument to
      the value it had on entry, on every exit path.

`NaN` inputs lead to a `NaN` result before the argument is touched.

@b Examples

```
    i = Argument('i')
    f = ArgumentExpression(i)
    sigma_summation(f, i, 1, 5, 1)          # 15.0
    forward_difference(f, i, x0=2, h=0.5)   # 0.5
```
"""

from contextlib import contextmanager
import logging

from ..numutils import nan, isnan, any_nan


__all__ = [
    "get_function_value",
    "sigma_summation",
    "pi_product",
    "forward_difference",
    "backward_difference",
]


logger = logging.getLogger(__name__)


def get_function_value(f, x, x0):
    r"""Evaluate `f` after assigning the value `x0` to the argument `x`.

    The argument keeps the value `x0` afterwards.
    """
    x.set_value(x0)
    return f.calculate()


def _index_values(from_, to, delta):
    r"""Generator for the index values of summation and product operators.

    The index runs from `from_` towards `to` in steps of `delta` (by repeated
    addition) while strictly before `to`. Then `to` itself is produced
    exactly once, regardless of whether `delta` divides the range. If the
    direction of `delta` does not lead from `from_` to `to`, nothing is
    produced, unless ``from_ == to``, in which case `from_` is produced once.
    """
    if to >= from_ and delta > 0:
        i = from_
        while i < to:
            yield i
            i += delta
        yield to
    elif to <= from_ and delta < 0:
        i = from_
        while i > to:
            yield i
            i += delta
        yield to
    elif from_ == to:
        yield from_
    else:
        logger.debug("Empty range from %r to %r by %r.", from_, to, delta)


def sigma_summation(f, index, from_, to, delta):
    r"""Summation operator \f$ \sum_{i=from}^{to} f(i) \f$ in steps of `delta`.

    @param f
        Expression to sum (has a `calculate()` method).
    @param index
        Argument (has a `set_value()` method) the index values are
        assigned to.
    @param from_
        First index value.
    @param to
        Last index value. A term at exactly this value is always included
        (if the range is not empty).
    @param delta
        Step size. May be negative for descending ranges.

    @return The sum, `0` for an empty range and `NaN` if any of `from_`, `to`
        or `delta` is `NaN`.

    @b Notes

    The `index` argument is left at the last value assigned to it.
    """
    if any_nan(delta, from_, to):
        logger.debug("NaN summation bounds: from=%r, to=%r, delta=%r",
                     from_, to, delta)
        return nan
    result = 0.0
    for i in _index_values(from_, to, delta):
        result += get_function_value(f, index, i)
    return result


def pi_product(f, index, from_, to, delta):
    r"""Product operator \f$ \prod_{i=from}^{to} f(i) \f$ in steps of `delta`.

    This works exactly like sigma_summation(), but multiplies the terms. The
    empty product is `1`.
    """
    if any_nan(delta, from_, to):
        logger.debug("NaN product bounds: from=%r, to=%r, delta=%r",
                     from_, to, delta)
        return nan
    result = 1.0
    for i in _index_values(from_, to, delta):
        result *= get_function_value(f, index, i)
    return result


@contextmanager
def _restoring(x, value):
    r"""Context manager setting the argument `x` to `value` upon exit."""
    try:
        yield
    finally:
        x.set_value(value)


def forward_difference(f, x, x0=None, h=1):
    r"""Forward difference \f$ f(x_0+h) - f(x_0) \f$.

    @param f
        Expression to evaluate (has a `calculate()` method).
    @param x
        Argument of `f` the evaluation points are assigned to.
    @param x0
        Point at which to compute the difference. If not given, the current
        value of `x` is used. A `NaN` value leads to a `NaN` result.
    @param h
        Step size, `1` by default. Negative values are allowed. The step is
        not checked for `NaN`.

    @return The difference. The value of `x` is restored before returning.
    """
    xb = x.get_value()
    if x0 is not None:
        if isnan(x0):
            return nan
        with _restoring(x, xb):
            return get_function_value(f, x, x0+h) - get_function_value(f, x, x0)
    if isnan(xb):
        return nan
    with _restoring(x, xb):
        fv = f.calculate()
        x.set_value(xb + h)
        return f.calculate() - fv


def backward_difference(f, x, x0=None, h=1):
    r"""Backward difference \f$ f(x_0) - f(x_0-h) \f$.

    The parameters are the same as for forward_difference(). The value of `x`
    is restored before returning.
    """
    xb = x.get_value()
    if x0 is not None:
        if isnan(x0):
            return nan
        with _restoring(x, xb):
            return get_function_value(f, x, x0) - get_function_value(f, x, x0-h)
    if isnan(xb):
        return nan
    with _restoring(x, xb):
        fv = f.calculate()
        x.set_value(xb - h)
        return fv - f.calculate()
