"""Variable-height list viewport math.

Items render as one line when folded and as a multi-line block when
unfolded, so scrolling works on summed item heights rather than item
counts. Everything here is pure and safe to call with empty inputs.
"""

from __future__ import annotations

from collections.abc import Sequence

# Height
HEADER_APPROX_LINES = 2  # title line + blank line
FOOTER_APPROX_LINES = 4
LAYOUT_BUFFER = 2  # keeps the header on screen when indicators are drawn

# Width
LEFT_PADDING_CHARS = 2  # "▶" + space

HALF_SCREEN_JUMP_LINES = 21


def content_height(total_height: int) -> int:
    """Return list rows available for a terminal ``total_height`` rows tall."""
    return max(1, total_height - HEADER_APPROX_LINES - FOOTER_APPROX_LINES - LAYOUT_BUFFER)


def content_width(total_width: int) -> int:
    """Return columns available to item text after the cursor marker."""
    return max(1, total_width - LEFT_PADDING_CHARS)


def span_height(heights: Sequence[int], start: int, end: int) -> int:
    """Return lines used by items ``start..end`` inclusive, plus the above marker."""
    used = 1 if start > 0 else 0
    for idx in range(start, min(end, len(heights) - 1) + 1):
        used += heights[idx]
    return used


def ensure_cursor_visible(
    cursor: int,
    scroll_offset: int,
    heights: Sequence[int],
    available: int,
) -> int:
    """Return the scroll offset that keeps item ``cursor`` fully visible.

    ``cursor == 0`` always pins the list to the top. A cursor above the
    window scrolls up to it. Otherwise the offset only moves forward, to the
    first value whose span through the cursor fits ``available`` rows. When
    no offset fits (the cursor item plus the above marker is taller than the
    viewport) the cursor item is pinned to the top of the window.
    """
    if cursor <= 0:
        return 0
    if not heights:
        return max(0, scroll_offset)
    if cursor < scroll_offset:
        return cursor

    if span_height(heights, scroll_offset, cursor) > available:
        for candidate in range(scroll_offset + 1, cursor + 1):
            if span_height(heights, candidate, cursor) <= available:
                scroll_offset = candidate
                break
        else:
            scroll_offset = cursor

    return max(0, scroll_offset)


def visible_window(
    heights: Sequence[int],
    scroll_offset: int,
    available: int,
) -> tuple[int, int]:
    """Return ``(start, stop)`` item indices that start inside the viewport.

    The first item is always included even when it alone overflows; the
    renderer truncates it.
    """
    start = max(0, min(scroll_offset, len(heights)))
    used = 1 if start > 0 else 0
    stop = start
    while stop < len(heights):
        if stop > start and used + heights[stop] > available:
            break
        used += heights[stop]
        stop += 1
    return start, stop
