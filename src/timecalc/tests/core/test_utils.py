import doctest
import unittest
from datetime import timedelta

from timecalc.core.utils import (
    MINUTES_PER_DAY,
    MINUTES_PER_WEEK,
    UNITS,
    as_minutes,
    truncdiv,
    truncmod,
)


def doctest_as_minutes():
    """Tests for as_minutes

        >>> as_minutes(timedelta(0))
        0
        >>> as_minutes(timedelta(minutes=90))
        90
        >>> as_minutes(timedelta(days=2))
        2880
        >>> as_minutes(timedelta(minutes=-90))
        -90

    Leftover seconds are dropped, rounding toward zero

        >>> as_minutes(timedelta(seconds=90))
        1
        >>> as_minutes(timedelta(seconds=-90))
        -1
        >>> as_minutes(timedelta(seconds=-30))
        0

    """


def doctest_truncdiv():
    """Tests for truncdiv

        >>> truncdiv(7, 2)
        3
        >>> truncdiv(-7, 2)
        -3
        >>> truncdiv(7, -2)
        -3
        >>> truncdiv(-7, -2)
        3

    """


class TestUtils(unittest.TestCase):

    def test_units(self):
        self.assertEqual(UNITS, {'w': 10080, 'd': 1440, 'h': 60, 'm': 1})
        self.assertEqual(list(UNITS), ['w', 'd', 'h', 'm'])
        self.assertEqual(MINUTES_PER_DAY, 1440)
        self.assertEqual(MINUTES_PER_WEEK, 10080)

    def test_truncmod(self):
        self.assertEqual(truncmod(7, 2), 1)
        self.assertEqual(truncmod(-7, 2), -1)
        self.assertEqual(truncmod(-1380, 1440), -1380)
        self.assertEqual(truncmod(0, 60), 0)


def load_tests(loader, tests, pattern):
    tests.addTests(doctest.DocTestSuite(
        __name__, optionflags=doctest.NORMALIZE_WHITESPACE))
    return tests
