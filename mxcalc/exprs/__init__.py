r"""@package mxcalc.exprs

Expression system for composing numeric functions of named arguments and
evaluating them repeatedly.

Each expression represents either a leaf (a constant or a reference to an
exprs.argument.Argument) or a composite of sub-expressions, like the
application of a function of the math collection to the values of its
sub-expressions or an iterated operator such as a summation.

Expressions are evaluated for the current values of their arguments using
numexpr.NumericExpression.calculate(). The values are read at evaluation time,
so assigning a new value to an argument changes the result of the next
evaluation.

For repeated evaluation, you can take a *snapshot* of the current structure
of an expression and turn it into a callable object, here called an
*evaluator* (see the evaluators module).
"""

from .argument import Argument
from .numexpr import NumericExpression, ExpressionWarning
from .basics import (
    ConstantExpression,
    ArgumentExpression,
    FunctionExpression,
    ScaleExpression,
    SumExpression,
    ProductExpression,
)
from .operators import (
    SummationExpression,
    IteratedProductExpression,
    ForwardDifferenceExpression,
    BackwardDifferenceExpression,
)
