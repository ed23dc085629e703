# -*- coding: utf-8 -*-
"""
@author:XuMing(xuming624@qq.com)
@description:
"""
import sys
import unittest

from hypothesis import given, settings
from hypothesis import strategies as st

sys.path.append('..')
from cmdquote.windows import parse_windows, quote_windows


class WindowsParseTestCase(unittest.TestCase):

    def test_basic(self):
        self.assertEqual(parse_windows(""), [])
        self.assertEqual(parse_windows("   \t  "), [])
        self.assertEqual(parse_windows("hello there world"), ["hello", "there", "world"])
        self.assertEqual(parse_windows("   /foo/bar  \t /bar/baz\t/biz   "), ["/foo/bar", "/bar/baz", "/biz"])

    def test_double_quotes(self):
        self.assertEqual(parse_windows("\"basic arg\" \"and another\""), ["basic arg", "and another"])
        self.assertEqual(parse_windows("\"weird \"arg an\"d a\"nother an\"d again\""),
                         ["weird arg", "and another", "and again"])
        self.assertEqual(parse_windows("\"can \\\" embed quotes ' like this\""),
                         ["can \" embed quotes ' like this"])
        self.assertEqual(parse_windows("\\\"isn't counted."), ["\"isn't", "counted."])

    def test_single_quotes_are_literal(self):
        self.assertEqual(parse_windows("'a b'"), ["'a", "b'"])

    def test_escapes(self):
        self.assertEqual(parse_windows("Show\\\\\\\\the result"), ["Show\\\\\\\\the", "result"])
        self.assertEqual(parse_windows("Show\\\\\\the result"), ["Show\\\\\\the", "result"])
        self.assertEqual(parse_windows("Show\\\\\\\"the result"), ["Show\\\"the", "result"])
        self.assertEqual(parse_windows("Show\\\\\\\\\"the result\""), ["Show\\\\the result"])
        self.assertEqual(parse_windows("Show \\\\\\\\ the result\""), ["Show", "\\\\\\\\", "the", "result"])
        self.assertEqual(parse_windows("trailing\\\\"), ["trailing\\\\"])

    def test_ms_docs(self):
        self.assertEqual(parse_windows("\"a b c\" d e"), ["a b c", "d", "e"])
        self.assertEqual(parse_windows("\"ab\\\"c\" \"\\\\\" d"), ["ab\"c", "\\", "d"])
        self.assertEqual(parse_windows("a\\\\\\b d\"e f\"g h"), ["a\\\\\\b", "de fg", "h"])
        self.assertEqual(parse_windows("a\\\\\\\"b c d"), ["a\\\"b", "c", "d"])
        self.assertEqual(parse_windows("a\\\\\\\\\"b c\" d e"), ["a\\\\b c", "d", "e"])

    def test_newline_is_content(self):
        self.assertEqual(parse_windows("a\nb c"), ["a\nb", "c"])

    def test_empty_arguments(self):
        self.assertEqual(parse_windows("\"\""), [""])
        self.assertEqual(parse_windows("a \"\" b"), ["a", "", "b"])
        self.assertEqual(parse_windows("a \""), ["a", ""])


class WindowsQuoteTestCase(unittest.TestCase):

    def check(self, args, expected):
        result = quote_windows(args)
        self.assertEqual(result, expected)
        self.assertEqual(parse_windows(result), args)

    def test_basic(self):
        self.assertEqual(quote_windows([]), "")
        self.check(["foo", "bar", "baz"], "foo bar baz")
        self.check(["/foofoo", "/bar", "baz"], "/foofoo /bar baz")

    def test_spaces(self):
        self.check(["foo", "bar biz", "baz"], "foo \"bar biz\" baz")
        self.check(["foo", " bar biz", "baz"], "foo \" bar biz\" baz")
        self.check(["foo", "bar biz ", "baz"], "foo \"bar biz \" baz")

    def test_double_quotes(self):
        self.check(["double", "\"test\""], "double \\\"test\\\"")
        self.check(["double", "t\"e\"st\""], "double t\\\"e\\\"st\\\"")
        self.check(["double", "foo\""], "double foo\\\"")
        self.check(["double", "foo\\\""], "double foo\\\\\\\"")
        self.check(["double", "foo\\ \\\""], "double \"foo\\ \\\\\\\"\"")

    def test_single_quotes(self):
        self.check(["single", "'test'"], "single 'test'")
        self.check(["single", "t'e'st'"], "single t'e'st'")

    def test_escapes(self):
        self.check(["escape", "foo\\ba\\r"], "escape foo\\ba\\r")
        self.check(["escape", "C:\\Program Files\\"], "escape \"C:\\Program Files\\\\\"")

    def test_complex(self):
        self.check(["complex", "foo \"test\" bar\\\\baz"], "complex \"foo \\\"test\\\" bar\\\\baz\"")

    def test_tabs_and_empty(self):
        self.check(["a\tb", ""], "\"a\tb\" \"\"")

    def test_round_trip(self):
        cases = [
            ["plain", "with space", "tab\there", "new\nline"],
            ["\\", "\\\\", "'", "\"", "'\"", "\\'", "\\\"", "\\\\\""],
            ["a b\\", "a b\\\\", "\" \\", "\\\" \\\"\\"],
            ["", " ", "\t", "(x)", "%PATH%"],
        ]
        for args in cases:
            self.assertEqual(parse_windows(quote_windows(args)), args)

    @settings(max_examples=500)
    @given(st.lists(st.text(alphabet=" \t\n\\\"'()ab")))
    def test_round_trip_any_arguments(self, args):
        self.assertEqual(parse_windows(quote_windows(args)), args)


if __name__ == '__main__':
    unittest.main()
