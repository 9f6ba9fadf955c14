"""
Test cases for the jsonbuilder core engine functionality.

Tests focus on the values the parser builds for well-formed input.
"""

import io
import logging
import unittest

import jsonbuilder
from jsonbuilder.core.engine import Parser, load, loads, parse
from jsonbuilder.core.values import Array, Boolean, Null, Number, Object, String
from jsonbuilder.utils.config import ParseConfig


class TestScalarParsing(unittest.TestCase):
    """Test literals, strings and numbers."""

    def test_null(self):
        self.assertEqual(parse("null"), Null())

    def test_true(self):
        self.assertEqual(parse("true"), Boolean(True))

    def test_false(self):
        self.assertEqual(parse("false"), Boolean(False))

    def test_string(self):
        self.assertEqual(parse('"foo"'), String("foo"))

    def test_string_with_escaped_quote(self):
        self.assertEqual(parse('"fo\\"o"'), String('fo"o'))

    def test_string_with_escaped_backslash(self):
        self.assertEqual(parse('"a\\\\b"'), String("a\\b"))

    def test_string_keeps_literal_newline(self):
        self.assertEqual(parse('"line1\nline2"'), String("line1\nline2"))

    def test_empty_string(self):
        self.assertEqual(parse('""'), String(""))

    def test_number(self):
        self.assertEqual(parse("9876"), Number(9876))

    def test_zero_and_leading_zeros(self):
        self.assertEqual(parse("0"), Number(0))
        self.assertEqual(parse("007"), Number(7))

    def test_native_unsigned_maximum(self):
        maximum = ParseConfig().limits.max_number_value
        self.assertEqual(parse(str(maximum)), Number(maximum))

    def test_leading_whitespace(self):
        self.assertEqual(parse("  \n null"), Null())


class TestArrayParsing(unittest.TestCase):
    """Test array parsing."""

    def test_empty(self):
        self.assertEqual(parse("[]"), Array(()))

    def test_empty_with_whitespace(self):
        self.assertEqual(parse("[ \n ]"), Array(()))

    def test_one_item(self):
        self.assertEqual(parse("[null]"), Array((Null(),)))

    def test_two_items(self):
        self.assertEqual(parse("[null, false]"), Array((Null(), Boolean(False))))

    def test_nested(self):
        self.assertEqual(
            parse("[[null, false], [null, true]]"),
            Array(
                (
                    Array((Null(), Boolean(False))),
                    Array((Null(), Boolean(True))),
                )
            ),
        )

    def test_numbers_followed_by_commas(self):
        self.assertEqual(
            parse('[1,22,"x"]'), Array((Number(1), Number(22), String("x")))
        )

    def test_order_preserved_with_duplicates(self):
        self.assertEqual(
            parse("[true, false, true]"),
            Array((Boolean(True), Boolean(False), Boolean(True))),
        )

    def test_commas_are_not_validated(self):
        # Separators are skipped, never checked
        self.assertEqual(parse("[,]"), Array(()))
        self.assertEqual(parse("[null,,true]"), Array((Null(), Boolean(True))))
        self.assertEqual(parse('["a" "b"]'), Array((String("a"), String("b"))))


class TestObjectParsing(unittest.TestCase):
    """Test object parsing."""

    def test_empty(self):
        self.assertEqual(parse("{}"), Object({}))

    def test_one_item(self):
        self.assertEqual(parse('{"something":null}'), Object({"something": Null()}))

    def test_two_items(self):
        self.assertEqual(
            parse('{"something":null,"something_else":true}'),
            Object({"something": Null(), "something_else": Boolean(True)}),
        )

    def test_nested(self):
        self.assertEqual(
            parse('{"1":{}, "2":{}}'),
            Object({"1": Object({}), "2": Object({})}),
        )

    def test_duplicate_keys_keep_last_value(self):
        self.assertEqual(
            parse('{"k":null, "k":"second"}'), Object({"k": String("second")})
        )

    def test_whitespace_after_colon(self):
        self.assertEqual(parse('{"k": \n true}'), Object({"k": Boolean(True)}))

    def test_number_value_followed_by_comma(self):
        self.assertEqual(
            parse('{"n":5,"m":null}'), Object({"n": Number(5), "m": Null()})
        )

    def test_key_with_escapes(self):
        self.assertEqual(parse('{"a\\"b":null}'), Object({'a"b': Null()}))


class TestMultilineDocument(unittest.TestCase):
    """Test an indented, nested document spanning several lines."""

    DOCUMENT = """{
  "name": "builder",
  "flags": [true, false, null],
  "nested": {
    "inner": [
      {"ok": true},
      []
    ],
    "note": "two
lines"
  }
}"""

    def test_document(self):
        expected = Object(
            {
                "name": String("builder"),
                "flags": Array((Boolean(True), Boolean(False), Null())),
                "nested": Object(
                    {
                        "inner": Array((Object({"ok": Boolean(True)}), Array(()))),
                        "note": String("two\nlines"),
                    }
                ),
            }
        )
        self.assertEqual(parse(self.DOCUMENT), expected)

    def test_deterministic(self):
        self.assertEqual(parse(self.DOCUMENT), parse(self.DOCUMENT))


class TestLenientNumberTerminators(unittest.TestCase):
    """Test numbers ended by ']', '}' or whitespace when strict mode is off."""

    def setUp(self):
        self.config = ParseConfig(strict_number_terminators=False)

    def test_array_of_numbers(self):
        self.assertEqual(
            parse("[1, 2, 3]", self.config), Array((Number(1), Number(2), Number(3)))
        )

    def test_single_number_in_array(self):
        self.assertEqual(parse("[1]", self.config), Array((Number(1),)))

    def test_number_before_closing_brace(self):
        self.assertEqual(
            parse('{"a":1}', self.config), Object({"a": Number(1)})
        )

    def test_number_before_whitespace(self):
        self.assertEqual(parse("1 ", self.config), Number(1))
        self.assertEqual(
            parse('{"a": 1 , "b": [2\n]}', self.config),
            Object({"a": Number(1), "b": Array((Number(2),))}),
        )

    def test_nested_closers(self):
        self.assertEqual(
            parse("[[1],[2]]", self.config),
            Array((Array((Number(1),)), Array((Number(2),)))),
        )


class TestInputSources(unittest.TestCase):
    """Test parsing from iterables and streams."""

    def test_iterable_of_characters(self):
        self.assertEqual(parse(iter("[true]")), Array((Boolean(True),)))

    def test_stream(self):
        self.assertEqual(parse(io.StringIO('{"k":"v"}')), Object({"k": String("v")}))

    def test_parser_build(self):
        parser = Parser("[null]", ParseConfig())
        self.assertEqual(parser.build(), Array((Null(),)))
        self.assertFalse(parser.eof_allowed)


class TestPythonConversion(unittest.TestCase):
    """Test loads() and load()."""

    def test_loads(self):
        self.assertEqual(
            loads('{"a":[null, true], "b":"x"}'), {"a": [None, True], "b": "x"}
        )

    def test_loads_bytes(self):
        self.assertEqual(loads(b'["caf\xc3\xa9"]'), ["café"])

    def test_load(self):
        self.assertEqual(load(io.StringIO("[false, null]")), [False, None])

    def test_package_exports(self):
        self.assertEqual(jsonbuilder.loads("12"), 12)
        self.assertEqual(jsonbuilder.parse("null"), jsonbuilder.Null())


class TestLogging(unittest.TestCase):
    """Test debug logging of dispatches and results."""

    def test_trace_dispatch(self):
        config = ParseConfig(trace_dispatch=True)
        with self.assertLogs("jsonbuilder.core.engine", level="DEBUG") as logs:
            parse("[null]", config)

        output = "\n".join(logs.output)
        self.assertIn("dispatch '['", output)
        self.assertIn("dispatch 'n' at line 0, column 1", output)
        self.assertIn("Parsed array value", output)

    def test_custom_logger(self):
        custom = logging.getLogger("jsonbuilder.tests.custom")
        config = ParseConfig(logger=custom)
        with self.assertLogs(custom, level="DEBUG") as logs:
            parse("true", config)
        self.assertIn("Parsed boolean value", logs.output[0])


if __name__ == "__main__":
    unittest.main()
