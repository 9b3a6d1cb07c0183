r"""@package mxcalc.mathcollection.adapters

Adapter turning integer forms of functions into floating point forms.

Most combinatorial functions are naturally defined for integer parameters
only. Their floating point form is obtained by one uniform rule implemented
by round_args():

    1. If any argument is `NaN`, the result is `NaN`.
    2. Each argument at an integer position is rounded to the nearest integer
       (ties to even). Infinite values have no integer value and lead to
       `NaN`.
    3. The integer form is called with the rounded arguments.

@b Examples

```
    fact = round_args(integers.factorial)
    fact(4.4)   # 24.0
    fact(nan)   # nan
    binom = round_args(integers.binom_coeff, rounded=(1,))
    binom(2.5, 1.9)  # 2.5, only k is rounded
```
"""

import functools
import math

from ..numutils import nan, isnan, round_half_even


__all__ = [
    "round_args",
]


def round_args(func, rounded=None, zero_result=None):
    r"""Create the floating point form of an integer function.

    @param func
        The integer form to forward to. It is called with positional
        arguments only.
    @param rounded
        Positions of the arguments to round. Arguments at other positions
        are passed through unchanged (after the `NaN` check). By default,
        all arguments are rounded, which also applies to variadic functions.
    @param zero_result
        If given, the arguments are scanned from left to right and this value
        is returned as soon as an argument rounds to zero. Arguments further
        right are not inspected, so even a later `NaN` does not change the
        result. This is used for the least common multiple.

    @return A function taking floats (or ints) and returning a float.
    """
    @functools.wraps(func)
    def wrapper(*args):
        values = []
        for i, arg in enumerate(args):
            if isnan(arg):
                return nan
            if rounded is None or i in rounded:
                if not math.isfinite(arg):
                    return nan
                arg = round_half_even(arg)
                if zero_result is not None and arg == 0:
                    return zero_result
            values.append(arg)
        return func(*values)
    ## The integer form this function forwards to.
    wrapper.integer_form = func
    return wrapper
