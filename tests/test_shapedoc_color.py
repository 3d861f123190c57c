from __future__ import annotations

import itertools
import unittest

from shapedoc.color import Color, ColorName


class ColorTests(unittest.TestCase):
    def test_named_color_describes_as_lowercase_name(self) -> None:
        self.assertEqual(Color.named(ColorName.RED).describe(), "red")
        self.assertEqual(Color.named("teal").describe(), "teal")
        self.assertEqual(str(Color.named(ColorName.FUCHSIA)), "fuchsia")

    def test_rgb_describes_as_uppercase_zero_padded_hex(self) -> None:
        self.assertEqual(Color.rgb(170, 170, 170).describe(), "#AAAAAA")
        self.assertEqual(Color.rgb(10, 0, 255).describe(), "#0A00FF")

    def test_from_gray_matches_equal_channels(self) -> None:
        for level in range(256):
            self.assertEqual(Color.from_gray(level).describe(), Color.rgb(level, level, level).describe())
            self.assertEqual(Color.from_gray(level), Color.rgb(level, level, level))

    def test_rgb_description_is_injective_on_sample(self) -> None:
        levels = (0, 1, 15, 16, 127, 128, 254, 255)
        seen: dict[str, tuple[int, int, int]] = {}
        for triple in itertools.product(levels, repeat=3):
            text = Color.rgb(*triple).describe()
            self.assertRegex(text, r"^#[0-9A-F]{6}$")
            self.assertNotIn(text, seen)
            seen[text] = triple

    def test_palette_has_sixteen_names_in_order(self) -> None:
        names = [name.value for name in ColorName]
        self.assertEqual(len(names), 16)
        self.assertEqual(names[0], "black")
        self.assertEqual(names[-1], "aqua")

    def test_rejects_out_of_range_channel(self) -> None:
        with self.assertRaisesRegex(ValueError, r"\[0, 255\]"):
            Color.rgb(256, 0, 0)
        with self.assertRaisesRegex(ValueError, r"\[0, 255\]"):
            Color.from_gray(-1)

    def test_rejects_non_int_channel(self) -> None:
        with self.assertRaisesRegex(ValueError, "must be an int"):
            Color.rgb(1.5, 0, 0)  # type: ignore[arg-type]

    def test_rejects_unknown_name_and_ambiguous_cases(self) -> None:
        with self.assertRaisesRegex(ValueError, "Unknown color name"):
            Color.named("orange")
        with self.assertRaisesRegex(ValueError, "exactly one"):
            Color()
        with self.assertRaisesRegex(ValueError, "exactly one"):
            Color(name=ColorName.RED, channels=(1, 2, 3))

    def test_color_is_immutable(self) -> None:
        color = Color.rgb(1, 2, 3)
        with self.assertRaises(AttributeError):
            color.channels = (4, 5, 6)  # type: ignore[misc]

    def test_channels_are_copied_from_caller_sequence(self) -> None:
        source = [1, 2, 3]
        color = Color(channels=source)  # type: ignore[arg-type]
        source[0] = 999
        self.assertEqual(color.channels, (1, 2, 3))
        self.assertEqual(color.describe(), "#010203")
        self.assertEqual(color, Color.rgb(1, 2, 3))

    def test_as_rgba_uses_css_palette(self) -> None:
        self.assertEqual(Color.named(ColorName.TEAL).as_rgba(), (0, 128, 128, 255))
        self.assertEqual(Color.rgb(1, 2, 3).as_rgba(alpha=9), (1, 2, 3, 9))
        self.assertTrue(Color.named(ColorName.RED).is_named)
        self.assertFalse(Color.from_gray(5).is_named)


if __name__ == "__main__":
    unittest.main()
