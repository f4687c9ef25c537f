"""Tests for timecalc"""
import unittest

from timecalc.tests import test_main, test_settings
from timecalc.tests.core import test_formatter, test_parser, test_utils


def test_suite():
    loader = unittest.defaultTestLoader
    return unittest.TestSuite([
        loader.loadTestsFromModule(test_utils),
        loader.loadTestsFromModule(test_parser),
        loader.loadTestsFromModule(test_formatter),
        loader.loadTestsFromModule(test_settings),
        loader.loadTestsFromModule(test_main),
    ])


def main():
    unittest.main(module='timecalc.tests', defaultTest='test_suite')
