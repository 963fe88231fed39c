import dataclasses
import sys
import unittest
from pathlib import Path

ROOT = Path(__file__).resolve().parents[2]
sys.path.insert(0, str(ROOT / "packages" / "core"))

from octopt_core.color import Color
from octopt_core.models import Colors, Font, LoResDxy0Behavior, Options, Quirks, ScreenRotation, TouchMode


class OptionsDefaultsTests(unittest.TestCase):
    def test_empty_value_leaves_everything_unspecified(self):
        options = Options()
        self.assertIsNone(options.tickrate)
        self.assertIsNone(options.max_size)
        self.assertIsNone(options.start_address)
        self.assertEqual(options.screen_rotation, ScreenRotation.NORMAL)
        self.assertEqual(options.font_style, Font.OCTO)
        self.assertEqual(options.touch_input_mode, TouchMode.NONE)
        self.assertEqual(options.colors, Colors())
        self.assertEqual(options.quirks, Quirks())
        self.assertIsNone(options.quirks.shift)

    def test_seeded_defaults(self):
        options = Options.default()
        self.assertEqual(options.tickrate, 500)
        self.assertEqual(options.max_size, 3584)
        self.assertEqual(options.start_address, 512)
        self.assertEqual(options.colors.fill_color, Color(255, 255, 255))
        self.assertEqual(options.colors.background_color, Color(0, 0, 0))
        self.assertEqual(options.colors.buzz_color, Color(0x99, 0, 0))
        self.assertEqual(options.colors.quiet_color, Color(0x33, 0, 0))
        self.assertIs(options.quirks.shift, False)
        self.assertIs(options.quirks.res_clear, True)
        self.assertEqual(options.quirks.lores_dxy0, LoResDxy0Behavior.BIG_SPRITE)

    def test_default_quirks_are_fully_specified(self):
        for f in dataclasses.fields(Quirks):
            with self.subTest(quirk=f.name):
                self.assertIsNotNone(getattr(Quirks.default(), f.name))

    def test_values_are_immutable(self):
        options = Options.default()
        with self.assertRaises(dataclasses.FrozenInstanceError):
            options.tickrate = 10  # type: ignore[misc]

    def test_false_and_unspecified_differ(self):
        self.assertNotEqual(Quirks(shift=False), Quirks())

    def test_replace_keeps_other_fields(self):
        options = dataclasses.replace(Options.default(), tickrate=20)
        self.assertEqual(options.tickrate, 20)
        self.assertEqual(options.max_size, 3584)


class EnumTests(unittest.TestCase):
    def test_rotation_codes(self):
        self.assertEqual([int(r) for r in ScreenRotation], [0, 90, 180, 270])
        self.assertEqual(ScreenRotation(180), ScreenRotation.UPSIDE_DOWN)

    def test_font_values(self):
        self.assertEqual(Font("akouz1"), Font.AKOUZ1)
        self.assertEqual(len(Font), 7)


if __name__ == "__main__":
    unittest.main()
