r"""@package mxcalc

Numeric core of a mathematical expression evaluator.

The project consists of two parts:
    * mxcalc.mathcollection: the special-function library (elementary,
      combinatorial and number theoretic functions) and the iterated
      operators (summation, product, finite differences) which repeatedly
      rebind an argument and re-evaluate an expression.
    * mxcalc.exprs: expressions as recomputable numeric functions of named
      arguments, built programmatically from constants, argument references,
      function applications and operators.

Throughout the project, `NaN` is used to signal undefined results. The
numeric functions never raise for numeric reasons.
"""

__version__ = "1.0.0"
