# encoding: utf-8
from contextlib import contextmanager
from unittest import TestCase

from mo_testing.fuzzytestcase import FuzzyTestCase

from mo_scanning import ParseError


class ScannerTestCase(FuzzyTestCase):
    """
    Assertions for scanner state and reported errors
    """

    def assertRest(self, scanner, expected, msg=None):
        self.assertEqual(scanner.remaining_text(), expected, msg=msg)

    def assertError(self, error, position=None, messages=None, excerpt=None, rendered=None):
        """
        Compare the parts of a ParseError that are given
        """
        self.assertIsInstance(error, ParseError)
        if position is not None:
            self.assertEqual(error.position, position)
        if messages is not None:
            self.assertEqual(error.messages, messages)
        if excerpt is not None:
            self.assertEqual(error.excerpt, excerpt)
        if rendered is not None:
            self.assertEqual(error.default_str(), rendered)

    @contextmanager
    def assertRaisesParseError(self, msg=None):
        with TestCase.assertRaises(self, ParseError, msg=msg) as context:
            yield context
