r"""@package mxcalc.mathcollection.special

Floating point forms of the combinatorial and number theoretic functions.

Each function here accepts floats, returns `NaN` if any argument is `NaN`,
rounds its integer parameters to the nearest integer (ties to even) and
forwards to the corresponding function in the integers module (available as
the `integer_form` attribute).

A few parameters are *not* rounded since they are real valued by nature:
    * `n` of binom_coeff(n, k)
    * `x` of generalized_harmonic_number(x, n)

Note that euler_polynomial(m, x) does round `x` as well.
"""

from . import integers
from .adapters import round_args
from .elementary import kronecker_delta


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


factorial = round_args(integers.factorial)
binom_coeff = round_args(integers.binom_coeff, rounded=(1,))
bell_number = round_args(integers.bell_number)
euler_number = round_args(integers.euler_number)
bernoulli_number = round_args(integers.bernoulli_number)
stirling1_number = round_args(integers.stirling1_number)
stirling2_number = round_args(integers.stirling2_number)
worpitzky_number = round_args(integers.worpitzky_number)
harmonic_number = round_args(integers.harmonic_number)
generalized_harmonic_number = round_args(
    integers.generalized_harmonic_number, rounded=(1,)
)
catalan_number = round_args(integers.catalan_number)
fibonacci_number = round_args(integers.fibonacci_number)
lucas_number = round_args(integers.lucas_number)
euler_polynomial = round_args(integers.euler_polynomial)
gcd = round_args(integers.gcd)
lcm = round_args(integers.lcm, zero_result=0.0)
