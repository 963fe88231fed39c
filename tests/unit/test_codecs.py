import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))

from octopt_core.codecs import decode_quirk, decode_quirk_text, decode_u16, encode_quirk
from octopt_core.errors import InvalidFieldValue, InvalidQuirkValue


class QuirkCodecTests(unittest.TestCase):
    def test_integers_and_booleans(self):
        self.assertIs(decode_quirk(1), True)
        self.assertIs(decode_quirk(0), False)
        self.assertIs(decode_quirk(True), True)
        self.assertIs(decode_quirk(False), False)

    def test_out_of_range_integer(self):
        with self.assertRaises(InvalidQuirkValue) as ctx:
            decode_quirk(2)
        self.assertEqual(ctx.exception.value, 2)
        self.assertIn("zero or one", str(ctx.exception))

    def test_unexpected_type(self):
        for bad in ("1", 1.0, [1]):
            with self.subTest(bad=bad):
                with self.assertRaises(InvalidQuirkValue):
                    decode_quirk(bad)

    def test_text(self):
        self.assertIs(decode_quirk_text("1"), True)
        self.assertIs(decode_quirk_text(" 0 "), False)
        with self.assertRaises(InvalidQuirkValue) as ctx:
            decode_quirk_text("2")
        self.assertEqual(ctx.exception.value, 2)
        with self.assertRaises(InvalidQuirkValue):
            decode_quirk_text("yes")

    def test_encode(self):
        self.assertEqual(encode_quirk(True), 1)
        self.assertEqual(encode_quirk(False), 0)


class NumericCodecTests(unittest.TestCase):
    def test_native_integer(self):
        self.assertEqual(decode_u16(20), 20)
        self.assertEqual(decode_u16(0xFFFF), 0xFFFF)

    def test_numeric_string(self):
        self.assertEqual(decode_u16("3215"), 3215)
        self.assertEqual(decode_u16("+7"), 7)

    def test_bad_string_degrades_to_none(self):
        for text in ("fast", "", " 20", "-1", "70000", "0x200"):
            with self.subTest(text=text):
                self.assertIsNone(decode_u16(text))

    def test_wrong_native_type(self):
        for bad in (True, 20.5, 65536, -1, [20]):
            with self.subTest(bad=bad):
                with self.assertRaises(InvalidFieldValue):
                    decode_u16(bad, "tickrate")


if __name__ == "__main__":
    unittest.main()
