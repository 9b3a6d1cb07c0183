r"""@package mxcalc.exprs.argument

Named numeric arguments that expressions read during evaluation.
"""

from ..numutils import nan


__all__ = [
    "Argument",
]


class Argument(object):
    r"""Named, mutable numeric value.

    Expressions referencing an argument (via basics.ArgumentExpression) read
    its value each time they are evaluated. Assigning a new value is visible
    to the very next evaluation.

    Operators like the summation in mathcollection.numbertheory assign values
    to arguments temporarily, which means an argument must not be shared
    between concurrently running evaluations.

    @b Examples

    ```
        x = Argument('x', 2.0)
        x.value = 3.0
        x.get_value()   # 3.0
    ```
    """

    def __init__(self, name, value=nan):
        r"""Create an argument.

        @param name
            Name of the argument (string).
        @param value
            Initial value. Default is `NaN`, i.e. undefined.
        """
        if not isinstance(name, str):
            raise TypeError("Argument name must be a string, not %s."
                            % type(name).__name__)
        self.__name = name
        self._value = value

    @property
    def name(self):
        r"""Name of the argument (read-only)."""
        return self.__name

    @property
    def value(self):
        r"""Current value of the argument."""
        return self._value
    @value.setter
    def value(self, value):
        self._value = value

    def get_value(self):
        r"""Return the current value (may be `NaN`)."""
        return self._value

    def set_value(self, value):
        r"""Assign a new value. No validation is performed."""
        self._value = value

    def __repr__(self):
        return "<Argument %s=%r>" % (self.__name, self._value)
