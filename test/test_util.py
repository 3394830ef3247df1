import logging
import unittest

import numpy as np

from fixrat import util


class TestLimits(unittest.TestCase):

    def test_int_limits(self):
        self.assertTrue(util.INT_MAX == np.iinfo(np.int64).max)
        self.assertTrue(util.INT_MIN == np.iinfo(np.int64).min)
        self.assertTrue(util.INT_BITS == 64)

    def test_maximum_power(self):
        self.assertTrue(util.MAXIMUM_POWER == 18)
        self.assertTrue(10**util.MAXIMUM_POWER <= util.INT_MAX)
        self.assertTrue(10**(util.MAXIMUM_POWER + 1) > util.INT_MAX)


class TestGCD(unittest.TestCase):

    def test_gcd(self):
        self.assertTrue(util.gcd(12, 18) == 6)
        self.assertTrue(util.gcd(18, 12) == 6)
        self.assertTrue(util.gcd(17, 5) == 1)

    def test_gcd_zero(self):
        self.assertTrue(util.gcd(0, 5) == 5)
        self.assertTrue(util.gcd(7, 0) == 7)
        self.assertTrue(util.gcd(0, 0) == 0)

    def test_gcd_min_magnitude(self):
        self.assertTrue(util.gcd(abs(util.INT_MIN), 2**62) == 2**62)
        self.assertTrue(util.gcd(abs(util.INT_MIN), 3) == 1)

    def test_gcd_random(self):
        rng = np.random.default_rng(1234)
        for u, v in rng.integers(1, 10**6, size=(100, 2)):
            self.assertTrue(util.gcd(int(u), int(v)) == np.gcd(u, v))

    def test_gcd_negative(self):
        with self.assertRaises(ValueError):
            util.gcd(-4, 2)


class TestAsFixed(unittest.TestCase):

    def test_as_fixed(self):
        self.assertTrue(util.as_fixed(5) == 5)
        self.assertTrue(util.as_fixed(np.int32(-5)) == -5)
        self.assertIsInstance(util.as_fixed(np.int64(3)), int)

    def test_as_fixed_type_error(self):
        for value in [True, 1.0, "1", None]:
            with self.assertRaises(TypeError):
                util.as_fixed(value)

    def test_as_fixed_overflow(self):
        with self.assertRaises(OverflowError):
            util.as_fixed(util.INT_MAX + 1)
        with self.assertRaises(OverflowError):
            util.as_fixed(util.INT_MIN - 1)


class TestCheckedPrimitives(unittest.TestCase):

    def test_wrap(self):
        self.assertTrue(util.wrap(util.INT_MAX + 1) == util.INT_MIN)
        self.assertTrue(util.wrap(util.INT_MIN - 1) == util.INT_MAX)
        self.assertTrue(util.wrap(42) == 42)
        self.assertTrue(util.wrap(2**64 + 3) == 3)

    def test_wrap_matches_numpy(self):
        a = np.array([util.INT_MAX, 2**40], dtype=np.int64)
        b = np.array([2, 2**30], dtype=np.int64)
        with np.errstate(over="ignore"):
            expected = a * b
        for i in range(len(a)):
            self.assertTrue(
                util.wrap(int(a[i]) * int(b[i])) == int(expected[i]))

    def test_add_with_overflow(self):
        self.assertTrue(util.add_with_overflow(1, 2) == (3, False))
        self.assertTrue(
            util.add_with_overflow(util.INT_MAX, 1) == (util.INT_MIN, True))

    def test_subtract_with_overflow(self):
        self.assertTrue(util.subtract_with_overflow(1, 2) == (-1, False))
        self.assertTrue(
            util.subtract_with_overflow(util.INT_MIN, 1) ==
            (util.INT_MAX, True))

    def test_multiply_with_overflow(self):
        self.assertTrue(util.multiply_with_overflow(-3, 4) == (-12, False))
        self.assertTrue(util.multiply_with_overflow(2**32, 2**32) == (0, True))
        self.assertTrue(
            util.multiply_with_overflow(util.INT_MIN, -1) ==
            (util.INT_MIN, True))


if __name__ == '__main__':
    logging.basicConfig(level=logging.DEBUG)
    unittest.main()
