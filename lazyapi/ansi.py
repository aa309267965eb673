"""ANSI-aware text measurement and clipping.

Escape sequences are kept verbatim and never count toward display width,
so styled lines can be cut to the terminal width without breaking colors.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Iterator

ANSI_ESCAPE_RE = re.compile(r"\x1b\[[0-9;?]*[ -/]*[@-~]")
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b-\x1f\x7f-\x9f]")
_WIDE_EAST_ASIAN = frozenset({"W", "F"})
TAB_STOP = 8


def _segments(text: str) -> Iterator[tuple[bool, str]]:
    """Yield ``(is_escape, chunk)`` pieces of ``text`` in order."""
    pos = 0
    for match in ANSI_ESCAPE_RE.finditer(text):
        if match.start() > pos:
            yield False, text[pos : match.start()]
        yield True, match.group(0)
        pos = match.end()
    if pos < len(text):
        yield False, text[pos:]


def char_display_width(ch: str, col: int) -> int:
    """Columns ``ch`` occupies when drawn at visual column ``col``."""
    if ch == "\t":
        return TAB_STOP - col % TAB_STOP
    if unicodedata.combining(ch):
        return 0
    return 2 if unicodedata.east_asian_width(ch) in _WIDE_EAST_ASIAN else 1


def display_width(text: str) -> int:
    """Return the visible column count of ``text`` ignoring escape sequences."""
    col = 0
    for is_escape, chunk in _segments(text):
        if is_escape:
            continue
        for ch in chunk:
            col += char_display_width(ch, col)
    return col


def sanitize_terminal_text(text: str) -> str:
    """Replace control bytes from document text so they cannot drive the terminal."""
    if _CONTROL_RE.search(text) is None:
        return text
    return _CONTROL_RE.sub(lambda match: f"\\x{ord(match.group(0)):02x}", text)


def clip_ansi_line(text: str, max_cols: int) -> str:
    """Cut ``text`` at ``max_cols`` visible columns, keeping escapes seen before the cut.

    Tabs become spaces and a wide character that would straddle the edge is
    dropped whole.
    """
    if max_cols <= 0:
        return ""
    out: list[str] = []
    col = 0
    for is_escape, chunk in _segments(text):
        if is_escape:
            out.append(chunk)
            continue
        for ch in chunk:
            width = char_display_width(ch, col)
            if col + width > max_cols:
                return "".join(out)
            out.append(" " * width if ch == "\t" else ch)
            col += width
    return "".join(out)


def pad_ansi_line(text: str, width: int) -> str:
    """Clip ``text`` to ``width`` and right-pad it with spaces to exactly ``width``."""
    clipped = clip_ansi_line(text, width)
    return clipped + " " * max(0, width - display_width(clipped))
