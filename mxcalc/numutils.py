r"""@package mxcalc.numutils

Miscellaneous numerical utilities and helpers.

Every function of the math collection treats `NaN` as the universal
"undefined" value. The helpers here implement the common parts of that
discipline: checking inputs for `NaN` before doing any work and computing with
native floating point semantics, i.e. producing infinities and `NaN` where
Python's `math` module would raise an exception.


@b Examples

```
    >>> any_nan(1.0, float('nan'))
    True
    >>> round_half_even(2.5)
    2
    >>> with ieee_arithmetic():
    ...     float(np.log(0.0))
    -inf
```
"""

from contextlib import contextmanager
import math

import numpy as np


__all__ = [
    "nan",
    "isnan",
    "any_nan",
    "round_half_even",
    "ieee_arithmetic",
    "ieee",
]


## Sentinel returned for undefined results.
nan = np.nan


def isnan(x):
    r"""Return whether `x` is a `NaN` value."""
    return math.isnan(x)


def any_nan(*values):
    r"""Return whether any of the given numbers is `NaN`.

    The scan stops at the first `NaN` found.
    """
    for v in values:
        if math.isnan(v):
            return True
    return False


def round_half_even(x):
    r"""Round a finite float to the nearest integer.

    Ties are rounded to the nearest even integer (``2.5 -> 2``,
    ``3.5 -> 4``, ``-2.5 -> -2``), which is what the integer forms of the math
    collection receive from their floating point counterparts.

    @param x
        Finite number to round. Integers are returned unchanged.

    @return An `int`.
    """
    if isinstance(x, (int, np.integer)):
        return int(x)
    return int(np.rint(x))


@contextmanager
def ieee_arithmetic():
    r"""Context manager for computing with native floating point semantics.

    Inside this context, NumPy operations on floats silently produce
    infinities and `NaN` values instead of issuing warnings. For example:
    ```
        with ieee_arithmetic():
            np.power(0.0, -1.0)  # inf
            np.fmod(1.0, 0.0)    # nan
    ```
    This is the counterpart of configuring NumPy to raise on such
    operations.
    """
    old_settings = np.seterr(all='ignore')
    try:
        yield
    finally:
        np.seterr(**old_settings)


def ieee(func):
    r"""Decorator running the decorated function inside ieee_arithmetic()."""
    return np.errstate(all='ignore')(func)
