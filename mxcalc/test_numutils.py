#!/usr/bin/env python3

import unittest
import sys
import warnings

import numpy as np

from testutils import CalcTestCase
from .numutils import nan, isnan, any_nan, round_half_even
from .numutils import ieee_arithmetic, ieee


class TestNanChecks(CalcTestCase):
    def test_isnan(self):
        self.assertTrue(isnan(nan))
        self.assertTrue(isnan(float('nan')))
        self.assertFalse(isnan(np.inf))
        self.assertFalse(isnan(0))

    def test_any_nan(self):
        self.assertFalse(any_nan())
        self.assertFalse(any_nan(1.0, 2, -np.inf))
        self.assertTrue(any_nan(1.0, nan))
        # Scanning stops at the first NaN.
        self.assertTrue(any_nan(nan, None))


class TestRounding(CalcTestCase):
    def test_ties_to_even(self):
        self.assertEqual(round_half_even(0.5), 0)
        self.assertEqual(round_half_even(1.5), 2)
        self.assertEqual(round_half_even(2.5), 2)
        self.assertEqual(round_half_even(3.5), 4)
        self.assertEqual(round_half_even(-2.5), -2)
        self.assertEqual(round_half_even(-3.5), -4)

    def test_nearest(self):
        self.assertEqual(round_half_even(2.4999), 2)
        self.assertEqual(round_half_even(2.5001), 3)
        self.assertEqual(round_half_even(-0.7), -1)

    def test_types(self):
        self.assertIsType(round_half_even(2.6), int)
        self.assertIsType(round_half_even(np.float64(2.6)), int)
        self.assertIsType(round_half_even(7), int)
        self.assertIsType(round_half_even(np.int64(7)), int)
        self.assertEqual(round_half_even(10**20), 10**20)


class TestIeee(CalcTestCase):
    def test_context(self):
        old = np.geterr()
        with ieee_arithmetic():
            self.assertEqual(np.geterr()['divide'], 'ignore')
            with warnings.catch_warnings():
                warnings.simplefilter('error')
                self.assertEqual(np.power(0.0, -1.0), np.inf)
                self.assertTrue(np.isnan(np.fmod(1.0, 0.0)))
        self.assertEqual(np.geterr(), old)

    def test_context_restores_on_error(self):
        old = np.geterr()
        with self.assertRaises(ZeroDivisionError):
            with ieee_arithmetic():
                1 / 0 # pylint: disable=pointless-statement
        self.assertEqual(np.geterr(), old)

    def test_decorator(self):
        @ieee
        def f(a, b):
            return float(np.divide(np.float64(a), b))
        with warnings.catch_warnings():
            warnings.simplefilter('error')
            self.assertEqual(f(1.0, 0.0), np.inf)
            self.assertEqual(f(-1.0, 0.0), -np.inf)
            self.assertIsNan(f(0.0, 0.0))


def run_tests():
    suite = unittest.TestLoader().loadTestsFromModule(sys.modules[__name__])
    return len(unittest.TextTestRunner(verbosity=2).run(suite).failures)


if __name__ == '__main__':
    unittest.main()
