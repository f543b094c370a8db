from __future__ import annotations

import unittest

from hanpw.core.error_dialect import InvalidArgument
from hanpw.core.transformations import capitalize_first, leet_speak, transform_case


class TransformationTests(unittest.TestCase):
    def test_leet_speak(self) -> None:
        self.assertEqual(leet_speak("leet"), "1337")
        self.assertEqual(leet_speak("Password"), "P455w0rd")
        self.assertEqual(leet_speak("BIGZ"), "8192")

    def test_leet_speak_leaves_other_characters(self) -> None:
        self.assertEqual(leet_speak("xyz-7 한글"), "xy2-7 한글")
        self.assertEqual(leet_speak(""), "")

    def test_transform_case(self) -> None:
        self.assertEqual(transform_case("hELLO wORLD", "lowercase"), "hello world")
        self.assertEqual(transform_case("hello", "uppercase"), "HELLO")
        self.assertEqual(transform_case("hELLO wORLD", "titlecase"), "Hello world")
        self.assertEqual(transform_case("", "titlecase"), "")

    def test_transform_case_rejects_unknown(self) -> None:
        with self.assertRaisesRegex(InvalidArgument, "case must be one of"):
            transform_case("abc", "camel")

    def test_capitalize_first(self) -> None:
        self.assertEqual(capitalize_first("apple"), "Apple")
        self.assertEqual(capitalize_first("aPPLE"), "APPLE")
        self.assertEqual(capitalize_first(""), "")
        self.assertEqual(capitalize_first("사과"), "사과")


if __name__ == "__main__":
    unittest.main()
