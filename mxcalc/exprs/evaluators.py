r"""@package mxcalc.exprs.evaluators

Base classes for simple or custom evaluators of numexpr.NumericExpression sub
classes.
"""

from abc import ABCMeta, abstractmethod


__all__ = [
    "TrivialEvaluator",
    "EvaluatorBase",
]


class _Evaluator(object):
    r"""Base class for all evaluator classes.

    Users of the expression system who don't need to implement their own new
    expression don't need to deal with how evaluators are implemented at all.

    An evaluator is a snapshot of an expression tree: it is created from the
    current structure of the expression and any later change of that
    structure (e.g. replacing a sub-expression) does not affect it. The
    values of arguments, however, are read each time the evaluator is
    called.

    Evaluators are callable without parameters and return the numeric value
    of the expression for the current argument values. They also provide
    calculate() so that they can be passed to anything expecting an
    expression, e.g. the operators in mathcollection.numbertheory.
    """
    def __init__(self, expr, sub_evaluators=None):
        r"""Base class init for evaluators.

        @param expr
            The expression object for which this evaluator is created.
        @param sub_evaluators
            List of further evaluators required to evaluate this one.
        """
        ## Name of the expression this evaluator was created for.
        self.name = expr.name
        self._sub_evaluators = [] if sub_evaluators is None else sub_evaluators

    @property
    def sub_evaluators(self):
        r"""Evaluators of the sub-expressions (read-only list)."""
        return list(self._sub_evaluators)

    def calculate(self):
        r"""Evaluate the expression for the current argument values."""
        return self()

    def __repr__(self):
        return "<%s of %s>" % (type(self).__name__, self.name)


class TrivialEvaluator(_Evaluator):
    r"""Convenience class to create simple evaluators.

    If your expression can be represented by a simple lambda function without
    parameters, this convenience class can be used to bypass the need to
    implement a full evaluator child class.
    """
    def __init__(self, expr, f, sub_evaluators=None):
        r"""Create an evaluator for a given function.

        @param expr
            The expression object for which this evaluator is created.
        @param f
            Callable without parameters computing the value.
        @param sub_evaluators
            List of further evaluators required to evaluate this one.
        """
        super(TrivialEvaluator, self).__init__(expr, sub_evaluators=sub_evaluators)
        if not callable(f):
            raise TypeError("`f` argument must be callable.")
        self._f = f

    def __call__(self):
        r"""Evaluate the expression."""
        return self._f()


class EvaluatorBase(_Evaluator, metaclass=ABCMeta):
    r"""Base class for custom evaluator classes.

    Sub classes need to implement only _eval(). This is useful for
    expressions that need to keep state between evaluations or that pass
    their sub-evaluators on to operators.
    """
    def __call__(self):
        r"""Compute the result of this evaluator."""
        return self._eval()

    @abstractmethod
    def _eval(self):
        r"""Compute the value for the current argument values."""
        pass
