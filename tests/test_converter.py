"""Unit tests for base conversion."""

import math
import unittest

from basekalk_pkg.converter import (
    check_base,
    digit_value,
    from_base10,
    is_digit_string,
    to_base10,
)
from basekalk_pkg.types import (
    ConversionError,
    InvalidDigitError,
    MultipleDecimalPointsError,
    UnsupportedBaseError,
)


class TestToBase10(unittest.TestCase):
    """Test digit string -> float conversion."""

    def test_integers(self):
        self.assertEqual(to_base10("ff", 16), 255)
        self.assertEqual(to_base10("1010", 2), 10)
        self.assertEqual(to_base10("777", 8), 511)
        self.assertEqual(to_base10("123", 10), 123)

    def test_fractions(self):
        self.assertEqual(to_base10("0.1", 2), 0.5)
        self.assertEqual(to_base10("1.8", 16), 1.5)
        self.assertEqual(to_base10("2.25", 10), 2.25)

    def test_trailing_point(self):
        self.assertEqual(to_base10("12.", 10), 12)

    def test_case_insensitive_up_to_36(self):
        self.assertEqual(to_base10("FF", 16), 255)
        self.assertEqual(to_base10("Z", 36), 35)
        self.assertEqual(to_base10("z", 36), 35)

    def test_case_sensitive_above_36(self):
        self.assertEqual(to_base10("a", 37), 10)
        self.assertEqual(to_base10("A", 37), 36)
        self.assertEqual(to_base10("Y", 61), 60)

    def test_special_values(self):
        self.assertTrue(math.isnan(to_base10("nan", 10)))
        self.assertEqual(to_base10("inf", 2), math.inf)

    def test_invalid_digit(self):
        with self.assertRaises(InvalidDigitError):
            to_base10("2", 2)
        with self.assertRaises(InvalidDigitError):
            to_base10("g", 16)
        with self.assertRaises(InvalidDigitError):
            to_base10("Z", 61)
        with self.assertRaises(InvalidDigitError):
            to_base10("1_", 10)

    def test_invalid_fraction_digit(self):
        with self.assertRaises(InvalidDigitError):
            to_base10("1.9", 8)

    def test_multiple_decimal_points(self):
        with self.assertRaises(MultipleDecimalPointsError):
            to_base10("1.2.3", 10)

    def test_unsupported_base(self):
        for base in (0, 1, 62, 100):
            with self.assertRaises(UnsupportedBaseError):
                to_base10("1", base)

    def test_errors_share_base_class(self):
        with self.assertRaises(ConversionError):
            to_base10("9", 8)


class TestFromBase10(unittest.TestCase):
    """Test float -> digit string conversion."""

    def test_integers(self):
        self.assertEqual(from_base10(255, 16), "ff")
        self.assertEqual(from_base10(10, 16), "a")
        self.assertEqual(from_base10(10, 2), "1010")
        self.assertEqual(from_base10(61, 61), "10")
        self.assertEqual(from_base10(60, 61), "Y")

    def test_zero(self):
        for base in range(2, 62):
            self.assertEqual(from_base10(0, base), "0")
        self.assertEqual(from_base10(-0.0, 10), "0")

    def test_negative(self):
        self.assertEqual(from_base10(-10, 2), "-1010")
        self.assertEqual(from_base10(-2.5, 10), "-2.5")

    def test_fractions(self):
        self.assertEqual(from_base10(0.5, 2), "0.1")
        self.assertEqual(from_base10(0.25, 10), "0.25")
        self.assertEqual(from_base10(2.5, 16), "2.8")
        self.assertEqual(from_base10(0.75, 2), "0.11")

    def test_fraction_digits_use_alphabet(self):
        # 0.6875 = 11/16
        self.assertEqual(from_base10(0.6875, 16), "0.b")

    def test_fraction_cap(self):
        self.assertEqual(from_base10(1 / 3, 2), "0.010101010101010")
        self.assertEqual(from_base10(1 / 3, 2, max_fraction_digits=4), "0.0101")

    def test_no_trailing_point(self):
        self.assertNotIn(".", from_base10(42.0, 10))

    def test_special_values(self):
        self.assertEqual(from_base10(math.nan, 10), "nan")
        self.assertEqual(from_base10(math.inf, 2), "inf")
        self.assertEqual(from_base10(-math.inf, 16), "inf")

    def test_unsupported_base(self):
        with self.assertRaises(UnsupportedBaseError):
            from_base10(1.0, 1)
        with self.assertRaises(UnsupportedBaseError):
            from_base10(1.0, 62)


class TestRoundTrip(unittest.TestCase):
    """Integers survive a trip through every base."""

    def test_integers_all_bases(self):
        for base in range(2, 62):
            for n in (0, 1, base - 1, base, 12345, 2**52):
                with self.subTest(base=base, n=n):
                    self.assertEqual(to_base10(from_base10(n, base), base), n)


class TestHelpers(unittest.TestCase):
    def test_check_base(self):
        self.assertEqual(check_base(2), 2)
        self.assertEqual(check_base(61), 61)
        with self.assertRaises(UnsupportedBaseError):
            check_base(62)

    def test_digit_value(self):
        self.assertEqual(digit_value("0"), 0)
        self.assertEqual(digit_value("z"), 35)
        self.assertEqual(digit_value("Z"), 61)
        self.assertEqual(digit_value("$"), -1)
        self.assertEqual(digit_value("ab"), -1)

    def test_is_digit_string(self):
        self.assertTrue(is_digit_string("ff", 16))
        self.assertTrue(is_digit_string("FF", 16))
        self.assertFalse(is_digit_string("fg", 16))
        self.assertFalse(is_digit_string("x", 10))
        self.assertFalse(is_digit_string("", 10))
        self.assertTrue(is_digit_string("A", 37))
        self.assertFalse(is_digit_string("Z", 40))
        self.assertFalse(is_digit_string("a_1", 36))


if __name__ == "__main__":
    unittest.main()
