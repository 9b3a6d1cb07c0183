r"""@package mxcalc.exprs.operators

Expressions evaluating the iterated operators of the math collection.

Each of these expressions has a body expression `f` and an argument (the
index of a summation or the variable of a difference) which is rebound while
evaluating `f` repeatedly. The bounds, step sizes and evaluation points are
themselves expressions, evaluated once per evaluation of the operator (before
any rebinding takes place).

The rebinding policies of mathcollection.numbertheory apply: summation and
product leave the index at the last value assigned, while differences restore
their argument.

@b Examples

```
    i = Argument('i')
    x = Argument('x', 3.0)
    # sum_{i=1}^{x} i
    s = SummationExpression(i, i, 1, x)
    s.calculate()   # 6.0
    # forward difference of x^2 at the current value of x
    d = ForwardDifferenceExpression(FunctionExpression(power, x, 2), x)
    d.calculate()   # 7.0
```
"""

import warnings

from ..mathcollection.numbertheory import (
    sigma_summation, pi_product, forward_difference, backward_difference
)
from .numexpr import NumericExpression, ExpressionWarning
from .argument import Argument
from .evaluators import EvaluatorBase


__all__ = [
    "SummationExpression",
    "IteratedProductExpression",
    "ForwardDifferenceExpression",
    "BackwardDifferenceExpression",
]


def _check_argument(expr, argument, role):
    r"""Check the type of an operator argument and whether `expr` uses it."""
    if not isinstance(argument, Argument):
        raise TypeError("The %s must be an Argument, not %s."
                        % (role, type(argument).__name__))
    if not any(argument is a for a in expr.f.arguments()):
        warnings.warn(
            "%s %r does not occur in the expression %s."
            % (role.capitalize(), argument.name, expr.f.str()),
            ExpressionWarning,
        )


class _IteratedOperatorExpression(NumericExpression):
    r"""Base for the summation and product expressions."""

    ## Function of the numbertheory module implementing the operator.
    _operator = None
    ## Symbol used when printing the expression.
    _symbol = None

    def __init__(self, f, index, from_, to, delta=1, name=None):
        r"""Init function.

        Args:
            f:      Expression to iterate over.
            index:  Argument taking the index values.
            from_:  Expression (or number) for the first index value.
            to:     Expression (or number) for the last index value.
            delta:  Expression (or number) for the step. Default is `1`.
            name:   Name of the expression (e.g. for print_tree()).
        """
        super(_IteratedOperatorExpression, self).__init__(
            f=f, start=from_, end=to, step=delta, name=name,
        )
        _check_argument(self, index, "index")
        ## The index argument.
        self.index = index

    def _expr_str(self):
        return ("%s_{%s=a}^{b} f by d, where a=%s, b=%s, d=%s, f=%s"
                % (self._symbol, self.index.name, self.start.str(),
                   self.end.str(), self.step.str(), self.f.str()))

    @property
    def nice_name(self):
        return "%s (%s over %s)" % (self.name, self._symbol, self.index.name)

    def _evaluator(self):
        return _IteratedOperatorEval(self, type(self)._operator)


class _IteratedOperatorEval(EvaluatorBase):
    r"""Evaluator for summation and product expressions."""
    def __init__(self, expr, operator):
        f = expr.f.evaluator()
        start = expr.start.evaluator()
        end = expr.end.evaluator()
        step = expr.step.evaluator()
        super(_IteratedOperatorEval, self).__init__(expr, [f, start, end, step])
        self._operator = operator
        self._index = expr.index
        self.f = f
        self.start = start
        self.end = end
        self.step = step

    def _eval(self):
        return self._operator(self.f, self._index, self.start(), self.end(),
                              self.step())


class SummationExpression(_IteratedOperatorExpression):
    r"""Summation \f$ \sum_{i=a}^b f \f$ with step size `delta`.

    See numbertheory.sigma_summation() for the exact semantics. The value is
    `0` for empty ranges.
    """
    _operator = staticmethod(sigma_summation)
    _symbol = "sum"

    def __init__(self, f, index, from_, to, delta=1, name='sum'):
        super(SummationExpression, self).__init__(
            f, index, from_, to, delta=delta, name=name,
        )


class IteratedProductExpression(_IteratedOperatorExpression):
    r"""Product \f$ \prod_{i=a}^b f \f$ with step size `delta`.

    See numbertheory.pi_product() for the exact semantics. The value is `1`
    for empty ranges.
    """
    _operator = staticmethod(pi_product)
    _symbol = "prod"

    def __init__(self, f, index, from_, to, delta=1, name='prod'):
        super(IteratedProductExpression, self).__init__(
            f, index, from_, to, delta=delta, name=name,
        )


class _DifferenceExpression(NumericExpression):
    r"""Base for the finite difference expressions."""

    _operator = None
    _symbol = None

    def __init__(self, f, x, x0=None, h=1, name=None):
        r"""Init function.

        Args:
            f:      Expression to compute the difference of.
            x:      Argument of `f` with respect to which the difference is
                    taken.
            x0:     Expression (or number) for the point at which to compute
                    the difference. By default, the value `x` has at the time
                    of evaluation is used.
            h:      Expression (or number) for the step size. Default is `1`.
            name:   Name of the expression (e.g. for print_tree()).
        """
        sub_exprs = dict(f=f, h=h)
        if x0 is not None:
            sub_exprs['x0'] = x0
        super(_DifferenceExpression, self).__init__(name=name, **sub_exprs)
        if x0 is None:
            ## Expression for the evaluation point (`None` for the current
            ## value of `x`).
            self.x0 = None
        _check_argument(self, x, "argument")
        ## The argument the difference is taken with respect to.
        self.x = x

    def _expr_str(self):
        at = self.x.name if self.x0 is None else self.x0.str()
        return ("%s_h f at %s=%s, where h=%s, f=%s"
                % (self._symbol, self.x.name, at, self.h.str(), self.f.str()))

    def _evaluator(self):
        return _DifferenceEval(self, type(self)._operator)


class _DifferenceEval(EvaluatorBase):
    r"""Evaluator for forward and backward differences."""
    def __init__(self, expr, operator):
        f = expr.f.evaluator()
        h = expr.h.evaluator()
        x0 = None if expr.x0 is None else expr.x0.evaluator()
        subs = [f, h] if x0 is None else [f, h, x0]
        super(_DifferenceEval, self).__init__(expr, subs)
        self._operator = operator
        self._x = expr.x
        self.f = f
        self.h = h
        self.x0 = x0

    def _eval(self):
        x0 = None if self.x0 is None else self.x0()
        return self._operator(self.f, self._x, x0=x0, h=self.h())


class ForwardDifferenceExpression(_DifferenceExpression):
    r"""Forward difference \f$ f(x_0+h) - f(x_0) \f$.

    See numbertheory.forward_difference(). The argument `x` is restored after
    each evaluation.
    """
    _operator = staticmethod(forward_difference)
    _symbol = "Delta"

    def __init__(self, f, x, x0=None, h=1, name='fwd-diff'):
        super(ForwardDifferenceExpression, self).__init__(
            f, x, x0=x0, h=h, name=name,
        )


class BackwardDifferenceExpression(_DifferenceExpression):
    r"""Backward difference \f$ f(x_0) - f(x_0-h) \f$.

    See numbertheory.backward_difference(). The argument `x` is restored after
    each evaluation.
    """
    _operator = staticmethod(backward_difference)
    _symbol = "nabla"

    def __init__(self, f, x, x0=None, h=1, name='bwd-diff'):
        super(BackwardDifferenceExpression, self).__init__(
            f, x, x0=x0, h=h, name=name,
        )
