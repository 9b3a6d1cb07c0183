#!/usr/bin/env python3

import unittest
import sys
import warnings

from testutils import CalcTestCase
from ..mathcollection import power, sin, factorial
from .argument import Argument
from .numexpr import ExpressionWarning
from .basics import FunctionExpression, ProductExpression
from .operators import SummationExpression, IteratedProductExpression
from .operators import ForwardDifferenceExpression
from .operators import BackwardDifferenceExpression


class TestIteratedOperators(CalcTestCase):
    def setUp(self):
        self.i = Argument('i')
        self.n = Argument('n', 4)

    def test_sum_of_squares(self):
        expr = SummationExpression(FunctionExpression(power, self.i, 2),
                                   self.i, 1, self.n)
        self.assertEqual(expr.calculate(), 30.0)
        self.n.value = 5
        self.assertEqual(expr.calculate(), 55.0)

    def test_evaluator_reuse(self):
        expr = SummationExpression(self.i, self.i, 1, self.n)
        ev = expr.evaluator()
        self.assertEqual(ev(), 10.0)
        self.n.value = 10
        self.assertEqual(ev(), 55.0)

    def test_index_left_at_last_value(self):
        SummationExpression(self.i, self.i, 1, self.n).calculate()
        self.assertEqual(self.i.value, 4)

    def test_step_expression(self):
        step = Argument('step', 2)
        expr = SummationExpression(self.i, self.i, 0, 5, step)
        self.assertEqual(expr.calculate(), 0 + 2 + 4 + 5)
        step.value = -1
        self.assertEqual(expr.calculate(), 0.0)

    def test_nested(self):
        j = Argument('j')
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            inner = SummationExpression(j, j, 1, self.i)
            outer = SummationExpression(inner, self.i, 1, 3)
        self.assertEqual(outer.calculate(), 1 + 3 + 6)

    def test_product(self):
        expr = IteratedProductExpression(self.i, self.i, 1, self.n)
        self.assertEqual(expr.calculate(), factorial(4))
        self.assertEqual(IteratedProductExpression(self.i, self.i, 3, 1).calculate(), 1.0)

    def test_nan_bounds(self):
        expr = SummationExpression(self.i, self.i, 1, Argument('m'))
        self.assertIsNan(expr.calculate())
        self.assertIsNan(self.i.value)

    def test_unused_index(self):
        x = Argument('x', 0.5)
        with self.assertWarns(ExpressionWarning):
            expr = SummationExpression(FunctionExpression(sin, x), self.i, 1, 3)
        self.assertAlmostEqual(expr.calculate(), 3*sin(0.5))

    def test_index_type(self):
        with self.assertRaises(TypeError):
            SummationExpression(self.i, 'i', 1, 3)

    def test_str(self):
        expr = SummationExpression(self.i, self.i, 1, self.n)
        self.assertEqual(
            expr.str(),
            "(sum_{i=a}^{b} f by d, where a=(1), b=(n), d=(1), f=(i))"
        )
        self.assertEqual(expr.nice_name, "sum (sum over i)")
        args = expr.arguments()
        self.assertIs(args[0], self.i)
        self.assertIs(args[1], self.n)


class TestDifferences(CalcTestCase):
    def setUp(self):
        self.x = Argument('x', 3)
        self.f = FunctionExpression(power, self.x, 2)

    def test_current_value(self):
        self.assertEqual(ForwardDifferenceExpression(self.f, self.x).calculate(), 7.0)
        self.assertEqual(BackwardDifferenceExpression(self.f, self.x).calculate(), 5.0)
        self.assertEqual(self.x.value, 3)

    def test_at_point(self):
        y = Argument('y', 2)
        fwd = ForwardDifferenceExpression(self.f, self.x, x0=y)
        bwd = BackwardDifferenceExpression(self.f, self.x, x0=y, h=0.5)
        self.assertEqual(fwd.calculate(), 5.0)
        self.assertEqual(bwd.calculate(), 1.75)
        y.value = 4
        self.assertEqual(fwd.calculate(), 9.0)
        self.assertEqual(self.x.value, 3)

    def test_point_depends_on_argument(self):
        # x0 is evaluated before x is rebound
        expr = ForwardDifferenceExpression(
            self.f, self.x, x0=ProductExpression(self.x, 2)
        )
        self.assertEqual(expr.calculate(), 13.0)
        self.assertEqual(self.x.value, 3)

    def test_difference_of_sum(self):
        i = Argument('i')
        s = SummationExpression(i, i, 1, self.x)
        expr = ForwardDifferenceExpression(s, self.x, x0=4)
        self.assertEqual(expr.calculate(), 5.0)
        self.assertEqual(self.x.value, 3)

    def test_nan(self):
        self.assertIsNan(ForwardDifferenceExpression(self.f, self.x, x0=Argument('z')).calculate())
        self.x.value = float('nan')
        self.assertIsNan(BackwardDifferenceExpression(self.f, self.x).calculate())
        self.assertIsNan(self.x.value)

    def test_unused_argument(self):
        with self.assertWarns(ExpressionWarning):
            expr = ForwardDifferenceExpression(FunctionExpression(sin, 1.0),
                                               self.x)
        self.assertEqual(expr.calculate(), 0.0)

    def test_argument_type(self):
        with self.assertRaises(TypeError):
            BackwardDifferenceExpression(self.f, 3.0)

    def test_str(self):
        expr = ForwardDifferenceExpression(self.f, self.x)
        self.assertEqual(expr.str(),
                         "(Delta_h f at x=x, where h=(1), f=(power((x), (2))))")
        expr = BackwardDifferenceExpression(self.f, self.x, x0=2)
        self.assertEqual(expr.str(),
                         "(nabla_h f at x=(2), where h=(1), f=(power((x), (2))))")


def run_tests():
    suite = unittest.TestLoader().loadTestsFromModule(sys.modules[__name__])
    return len(unittest.TextTestRunner(verbosity=2).run(suite).failures)


if __name__ == '__main__':
    unittest.main()
