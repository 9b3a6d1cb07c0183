r"""@package mxcalc.mathcollection

Collection of numeric functions and operators used by expressions.

The functions are organized as follows:
    * elementary: functions of floating point arguments (trigonometric,
      hyperbolic, logarithms, characteristic functions, continued fractions,
      etc.)
    * integers: combinatorial and number theoretic functions of integer
      parameters
    * special: floating point forms of the functions in `integers`, created
      by the adapter in `adapters`
    * numbertheory: summation, product and finite difference operators that
      repeatedly evaluate an expression

All functions use `NaN` to signal undefined results and never raise for
numeric reasons. The floating point forms of all functions are exported
here.
"""

from .elementary import *
from .special import *
from .numbertheory import (
    get_function_value,
    sigma_summation,
    pi_product,
    forward_difference,
    backward_difference,
)
