"""Pygments highlighting for generated commands."""

from __future__ import annotations

import unittest

from lazyapi import highlight
from lazyapi.ansi import ANSI_ESCAPE_RE


class HighlightTests(unittest.TestCase):
    def test_unknown_style_falls_back_to_default(self) -> None:
        self.assertEqual(highlight.normalize_style("no-such-style"), highlight.DEFAULT_STYLE)
        self.assertEqual(highlight.normalize_style(None), highlight.DEFAULT_STYLE)
        self.assertEqual(highlight.normalize_style("default"), "default")

    def test_no_color_returns_text_unchanged(self) -> None:
        command = "curl -X GET 'https://x' \\\n  -H 'A: b'"
        self.assertEqual(highlight.highlight_command(command, no_color=True), command)

    def test_highlighting_preserves_visible_text(self) -> None:
        command = "curl -X GET 'https://x' \\\n  -H 'A: b'"
        rendered = highlight.highlight_command(command, "monokai")
        self.assertIn("\x1b[", rendered)
        self.assertEqual(ANSI_ESCAPE_RE.sub("", rendered), command)


if __name__ == "__main__":
    unittest.main()
