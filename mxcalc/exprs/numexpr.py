r"""@package mxcalc.exprs.numexpr

Base of the NumericExpression system.

A numeric expression is a tree of expression objects, each representing a
function of the current values of the arguments (exprs.argument.Argument)
occurring in the tree. The leaves are constants and argument references,
inner nodes apply functions of the math collection or operators like the
summation to the values of their sub-expressions.

Expressions are evaluated with calculate(), which always reflects the current
structure of the tree and the current values of all arguments. Alternatively,
evaluator() creates a *snapshot* of the current structure, which is a
callable object that can be evaluated repeatedly without re-traversing the
expression tree. The operators of the math collection get passed such
snapshots.

As a simple example, let's sum \f$ i^2 \f$ for \f$ i = 1, \ldots, n \f$:

~~~.py
i = Argument('i')
n = Argument('n', 4)
f = FunctionExpression(power, i, 2)
expr = SummationExpression(f, i, 1, n)
print("sum =", expr.calculate())   # sum = 30.0
n.value = 5
print("sum =", expr.calculate())   # sum = 55.0
~~~
"""

from abc import ABCMeta, abstractmethod

from .evaluators import TrivialEvaluator


__all__ = [
    "NumericExpression",
    "ExpressionWarning",
]


class ExpressionWarning(UserWarning):
    """Warning issued when expressions might not evaluate as expected."""
    pass


class NumericExpression(object, metaclass=ABCMeta):
    """Parent class for numeric expressions.

    Expressions can be evaluated using calculate() or by creating an
    evaluator() for the current structure of the expression.

    They also support building a string representation of the complete
    expression, including any sub-expressions, and can list the arguments
    they depend on.

    The methods a child has to override are:
        * _expr_str() returning a representation of the expression and its
          settings
        * _evaluator() creating callable evaluator objects
    """

    def __init__(self, name=None, verbosity=1, **sub_exprs):
        r"""Base class init for numeric expressions.

        The ``**sub_exprs`` sub expressions given as keyword arguments here
        are stored in this object and can be accessed with the keys used here.
        They are used when traversing through a complete expression hierarchy
        in e.g. print_tree() or traverse_tree().

        Args:
            name: (string, optional)
                Name for the expression. Can be useful to label expressions in
                a more complex expression tree to indicate their role/meaning.
                By default, the current class name is used as name.
            verbosity: (int, optional)
                Verbosity to be used by child classes through the `verbosity`
                attribute. Default is `1`.

        """
        self.__verbosity = verbosity
        self.__sub_expressions = dict()
        self.__name = name if name else self.__class__.__name__
        self.set_sub_exprs(**sub_exprs)

    @property
    def name(self):
        r"""Name given to this instance of the expression."""
        return self.__name
    @name.setter
    def name(self, name):
        self.__name = name

    @property
    def verbosity(self):
        r"""Verbosity setting, which may be used during complex computations."""
        return self.__verbosity
    @verbosity.setter
    def verbosity(self, verbosity):
        self.__verbosity = verbosity

    @property
    def nice_name(self):
        r"""More descriptive name, which may be overridden by sub classes."""
        return self.__name

    def traverse_tree(self, include_root=False, parents=None):
        r"""Generator that walks through a complete expression tree.

        In each iteration, the returned values represent the current node's
        parents (as a list from root to immediate parent), its key under which
        it is stored in its parent, and the node itself.

        Args:
            include_root: Whether to include the root as first item. Default
                is `False`.
            parents: Optional list of parents of the root. Normally only used
                internally for the recursion.

        @b Examples
        \code
            for parents, name, expr in root_expr.traverse_tree():
                print("-"*len(parents), name)
        \endcode

        """
        if parents is None:
            parents = []
        if include_root:
            yield parents, "", self
        parents = parents + [self]
        for name, expr in self.__sub_expressions.items():
            yield parents, name, expr
            for node in expr.traverse_tree(include_root=False,
                                           parents=parents):
                yield node

    def print_tree(self, root_name='root', nice_names=True):
        r"""Print the whole expression tree.

        Each expression's key under which it is stored as sub expression will
        be shown as well as its actual name and the class name.

        Args:
            root_name: Key name to print for the root expression.
            nice_names: Whether to use the nice more descriptive name (when
                implemented) or the usually shorter abstract names.
        """
        def _p(expr, name, parents=()):
            n = expr.nice_name if nice_names else expr.name
            print("%s%s [%s] <%s>" % (
                ". " * len(parents), name, n, type(expr).__name__
            ))
        _p(self, root_name)
        for parents, name, expr in self.traverse_tree():
            _p(expr, name, parents)

    def arguments(self):
        r"""List of all arguments occurring in the expression tree.

        Each argument is listed once, in the order of first occurrence in a
        depth-first traversal of the tree.
        """
        result = []
        for _, _, expr in self.traverse_tree(include_root=True):
            for arg in expr._own_arguments():
                if not any(arg is a for a in result):
                    result.append(arg)
        return result

    def _own_arguments(self):
        r"""Arguments referenced directly by this node (not its children).

        Child classes referencing arguments should override this.
        """
        return []

    def __repr__(self):
        r"""Return a string representing the whole expression tree."""
        cls = self.__class__.__name__
        return "<%s%s>" % (cls, self.str())

    def calculate(self):
        r"""Evaluate the expression for the current argument values.

        This creates a new evaluator for the current structure of the
        expression on each call. For many evaluations of an unchanged
        expression, create one evaluator() and call it instead.
        """
        return self.evaluator()()

    def evaluator(self):
        r"""Create an evaluator for the expression in the current state.

        The result is a callable (without parameters) returning the value of
        the expression for the current values of its arguments.
        """
        e = self._evaluator()
        if not hasattr(e, 'calculate'):
            e = TrivialEvaluator(self, e)
        return e

    def str(self):
        """Return the expression and any values of local parameters as a string."""
        return "(%s)" % self._expr_str()

    @abstractmethod
    def _expr_str(self):
        """String representing the expression with any parameter values.

        For example, if the expression is ``a + b x``, with ``a`` and ``b``
        parameters and ``x`` a sub-expression, then this method should return
        for example:

            "a + b x, where a=0.3, b=0.5, x=(...)"

        If ``x`` is a sub-expressions, be sure to use its `str` method and
        not the `_expr_str`. For example:

            def _expr_str(self):
                return ("a + b x, where a=%r, b=%r, x=%s"
                        % (self.a, self.b, self.x.str()))
        """
        pass

    @abstractmethod
    def _evaluator(self):
        r"""Child classes need to implement this and create their evaluator here.

        Either an evaluator object (see the evaluators module) or a plain
        callable without parameters may be returned.
        """
        pass

    def is_zero_expression(self):
        r"""Return whether this expression is zero and constant.

        Child classes should override this if they can determine whether
        they're zero. By default, all expressions will deny being zero.
        """
        return False

    def set_sub_exprs(self, **sub_exprs):
        r"""Set/replace sub expressions under public attributes of this object.

        Each of the ``**sub_exprs`` keyword arguments will be stored on this
        object such that it is accessible via the key name used here as
        attribute name on the object.

        Numeric values given here will be converted to ConstantExpression
        objects and arguments to ArgumentExpression objects.
        """
        sub_exprs = dict((k, self.__ensure_expr(e)) for k, e in sub_exprs.items())
        for k, e in sub_exprs.items():
            setattr(self, k, e)
        self.__sub_expressions.update(sub_exprs)

    def __ensure_expr(self, expr):
        """Ensure an object is an expression, converting it if necessary.

        If `expr` is an exprs.argument.Argument, it is converted to an
        `ArgumentExpression`. Any other non-expression is converted to a
        `ConstantExpression`.
        """
        if isinstance(expr, NumericExpression):
            return expr
        from .argument import Argument
        from .basics import ConstantExpression, ArgumentExpression
        if isinstance(expr, Argument):
            return ArgumentExpression(expr)
        return ConstantExpression(expr)
