"""ANSI-aware clipping and padding."""

import unittest

from lazyapi import ansi


class AnsiTests(unittest.TestCase):
    def test_clip_keeps_escapes_and_counts_visible_columns(self) -> None:
        self.assertEqual(ansi.clip_ansi_line("\x1b[1mabcdef\x1b[0m", 3), "\x1b[1mabc")

    def test_wide_characters_are_not_split(self) -> None:
        self.assertEqual(ansi.clip_ansi_line("a界b", 2), "a")
        self.assertEqual(ansi.display_width("a界b"), 4)

    def test_pad_fills_to_exact_width(self) -> None:
        self.assertEqual(ansi.pad_ansi_line("ab", 4), "ab  ")
        self.assertEqual(ansi.display_width(ansi.pad_ansi_line("\x1b[2mabcdef", 4)), 4)

    def test_sanitize_escapes_control_bytes(self) -> None:
        self.assertEqual(ansi.sanitize_terminal_text("a\x1bb\x07"), "a\\x1bb\\x07")
        self.assertEqual(ansi.sanitize_terminal_text("plain"), "plain")


if __name__ == "__main__":
    unittest.main()
