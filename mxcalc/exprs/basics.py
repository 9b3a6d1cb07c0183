r"""@package mxcalc.exprs.basics

Collection of basic numexpr.NumericExpression subclasses.
"""

import numbers

from .numexpr import NumericExpression
from .argument import Argument
from .evaluators import TrivialEvaluator


__all__ = [
    "ConstantExpression",
    "ArgumentExpression",
    "FunctionExpression",
    "ScaleExpression",
    "SumExpression",
    "ProductExpression",
]


class ConstantExpression(NumericExpression):
    r"""Represent an expression that is a constant.

    Represents an expression of the form \f$ f = c = \mathrm{const} \f$.

    The value of the constant can be accessed through the `c` property.
    """

    def __init__(self, value=0, name='const'):
        r"""Init function.

        Args:
            value:  The constant value (a real number, may be `NaN`).
            name:   Name of the expression (e.g. for print_tree()).
        """
        super(ConstantExpression, self).__init__(name=name)
        if not isinstance(value, numbers.Real):
            raise TypeError("Constant must be a real number, not %s."
                            % type(value).__name__)
        ## The constant value this expression represents.
        self.c = value

    def _expr_str(self):
        return "%r" % self.c

    @property
    def nice_name(self):
        return "%s (%r)" % (self.name, self.c)

    def is_zero_expression(self):
        return self.c == 0

    def _evaluator(self):
        c = self.c
        return lambda: c


class ArgumentExpression(NumericExpression):
    r"""Reference to an argument.

    Evaluates to the value the argument has at the time of evaluation.
    """
    def __init__(self, argument, name=None):
        r"""Init function.

        Args:
            argument: The exprs.argument.Argument to reference.
            name:   Name of the expression (e.g. for print_tree()). Defaults
                    to the name of the argument.
        """
        if not isinstance(argument, Argument):
            raise TypeError("Expected an Argument, got %s."
                            % type(argument).__name__)
        super(ArgumentExpression, self).__init__(
            name=name if name else argument.name
        )
        ## The referenced argument.
        self.argument = argument

    def _expr_str(self):
        return self.argument.name

    def _own_arguments(self):
        return [self.argument]

    def _evaluator(self):
        return self.argument.get_value


class FunctionExpression(NumericExpression):
    r"""Apply a function to the values of sub-expressions.

    Represents an expression of the form \f$ f = g(e_1, \ldots, e_n) \f$,
    where \f$ g \f$ is any callable taking `n` numbers and returning a number,
    usually one of the functions of the math collection.

    The sub-expressions are stored as `arg0`, `arg1`, etc.

    @b Examples

    ```
        x = Argument('x', 0.5)
        expr = FunctionExpression(mathcollection.sin, x)
        expr.calculate()  # sin(0.5)
        expr = FunctionExpression(mathcollection.max, x, 1, 2)
        expr.calculate()  # 2.0
    ```
    """
    def __init__(self, func, *args, desc=None, name=None):
        r"""Init function.

        Args:
            func:   Callable to apply.
            *args:  Sub-expressions whose values are passed to `func`.
                    Numbers and arguments are converted to expressions.
            desc:   Description of the function used when printing the
                    expression. By default, the function's name is used.
            name:   Name of the expression (e.g. for print_tree()).
        """
        if not callable(func):
            raise TypeError("`func` argument must be callable.")
        self._func = func
        self._desc = desc if desc else getattr(func, '__name__', repr(func))
        self._num_args = len(args)
        sub_exprs = dict(("arg%d" % i, e) for i, e in enumerate(args))
        super(FunctionExpression, self).__init__(
            name=name if name else self._desc, **sub_exprs
        )

    @property
    def func(self):
        r"""The applied function."""
        return self._func

    @property
    def args(self):
        r"""List of the sub-expressions in order."""
        return [getattr(self, "arg%d" % i) for i in range(self._num_args)]

    def _expr_str(self):
        return "%s(%s)" % (self._desc, ", ".join(e.str() for e in self.args))

    def _evaluator(self):
        func = self._func
        evs = [e.evaluator() for e in self.args]
        if len(evs) == 1:
            ev, = evs
            f = lambda: func(ev())
        elif len(evs) == 2:
            ev1, ev2 = evs
            f = lambda: func(ev1(), ev2())
        else:
            f = lambda: func(*[ev() for ev in evs])
        return TrivialEvaluator(self, f, evs)


class ScaleExpression(NumericExpression):
    r"""Scale another expression by a factor.

    Represents an expression of the form \f$ f = a g \f$.
    """
    def __init__(self, expr, a, name='scale'):
        r"""Init function.

        Args:
            expr:   The expression to scale.
            a:      Factor to multiply the `expr` with.
            name:   Name of the expression (e.g. for print_tree()).
        """
        super(ScaleExpression, self).__init__(e=expr, name=name)
        ## Factor to scale the expression by.
        self.a = a

    def _expr_str(self):
        return "a f, where a=%r, f=%s" % (self.a, self.e.str())

    @property
    def nice_name(self):
        return "%s (%r)" % (self.name, self.a)

    def _evaluator(self):
        a = self.a
        e = self.e.evaluator()
        return TrivialEvaluator(self, lambda: a * e(), [e])


class SumExpression(NumericExpression):
    r"""Sum of two expressions with an optional coefficient for the second term.

    Represents an expression of the form \f$ f = g + a h \f$.

    The coefficient \f$ a \f$ can be set/retrieved using the `coeff` property.
    """
    def __init__(self, expr1, expr2, coeff=1.0, name='add'):
        r"""Init function.

        Args:
            expr1:  First expression.
            expr2:  Second expression.
            coeff:  Coefficient for the second expression. Default is `1.0`.
            name:   Name of the expression (e.g. for print_tree()).
        """
        super(SumExpression, self).__init__(e1=expr1, e2=expr2, name=name)
        self._coeff = coeff

    @property
    def coeff(self):
        r"""Coefficient of the second term in the sum."""
        return self._coeff
    @coeff.setter
    def coeff(self, value):
        self._coeff = value

    def _expr_str(self):
        where = "e1=%s, e2=%s" % (self.e1.str(), self.e2.str())
        if self._coeff == 1.0:
            op = "+"
        elif self._coeff == -1.0:
            op = "-"
        else:
            op = "+ c"
            where += ", c=%r" % self._coeff
        return "e1 %s e2, where %s" % (op, where)

    @property
    def nice_name(self):
        if self._coeff == 1.0:
            return "%s (e1 + e2)" % self.name
        elif self._coeff == -1.0:
            return "%s (e1 - e2)" % self.name
        op = "+" if self._coeff >= 0 else "-"
        return "%s (e1 %s %r * e2)" % (self.name, op, abs(self._coeff))

    def _evaluator(self):
        e1 = self.e1.evaluator()
        e2 = self.e2.evaluator()
        c = self._coeff
        if c == 1.0:
            f = lambda: e1() + e2()
        else:
            f = lambda: e1() + c * e2()
        return TrivialEvaluator(self, f, [e1, e2])


class ProductExpression(NumericExpression):
    r"""Multiply two expressions.

    Represents an expression of the form \f$ f = g h \f$.
    """
    def __init__(self, expr1, expr2, name='mult'):
        r"""Init function.

        Args:
            expr1:  First expression.
            expr2:  Second expression.
            name:   Name of the expression (e.g. for print_tree()).
        """
        super(ProductExpression, self).__init__(e1=expr1, e2=expr2, name=name)

    def _expr_str(self):
        return "e1 * e2, where e1=%s, e2=%s" % (self.e1.str(), self.e2.str())

    def _evaluator(self):
        e1 = self.e1.evaluator()
        e2 = self.e2.evaluator()
        return TrivialEvaluator(self, lambda: e1() * e2(), [e1, e2])
