"""Item list rendering for the current view.

Reads state only; the scroll offset is assumed to already keep the cursor
item visible.
"""

from __future__ import annotations

from ..ansi import clip_ansi_line, sanitize_terminal_text
from ..model import Component, Endpoint, ListItem, Webhook
from ..state import AppState
from ..ui_theme import UITheme
from ..viewport import LEFT_PADDING_CHARS, content_width, visible_window

CURSOR_MARKER = "▶ "
DETAIL_INDENT = "  "
TRUNCATION_MARKER = "⬇ Content truncated to fit viewport..."

METHOD_COLUMN_WIDTH = 7


def _with_suffix(text: str, suffix: str, theme: UITheme) -> str:
    if not suffix:
        return text
    return f"{text} {theme.summary}- {sanitize_terminal_text(suffix)}{theme.reset}"


def item_title(item: ListItem, theme: UITheme) -> str:
    """Return the styled one-line title for ``item``."""
    if isinstance(item, Endpoint):
        method = f"{theme.method(item.method)}{item.method:<{METHOD_COLUMN_WIDTH}}{theme.reset}"
        text = f"{method} {theme.path}{sanitize_terminal_text(item.path)}{theme.reset}"
        return _with_suffix(text, item.summary, theme)
    if isinstance(item, Webhook):
        method = f"{theme.method(item.method)}{item.method:<{METHOD_COLUMN_WIDTH}}{theme.reset}"
        text = f"{method} {theme.path}{sanitize_terminal_text(item.name)}{theme.reset}"
        return _with_suffix(text, item.summary, theme)
    if isinstance(item, Component):
        text = (
            f"{theme.path}{sanitize_terminal_text(item.name)}{theme.reset} "
            f"{theme.component_kind}({item.kind}){theme.reset}"
        )
        return _with_suffix(text, item.description, theme)
    return repr(item)


def item_lines(item: ListItem, selected: bool, width: int, theme: UITheme) -> list[str]:
    """Return exactly ``item.height()`` rendered lines for ``item``."""
    text_width = content_width(width)
    marker = f"{theme.cursor_marker}{CURSOR_MARKER}{theme.reset}" if selected else " " * LEFT_PADDING_CHARS
    lines = [marker + clip_ansi_line(item_title(item, theme), text_width)]
    if item.folded:
        return lines
    for detail in item.detail_lines():
        body = f"{DETAIL_INDENT}{theme.detail}{sanitize_terminal_text(detail)}{theme.reset}"
        lines.append(" " * LEFT_PADDING_CHARS + clip_ansi_line(body, text_width))
    lines.append("")
    return lines


def truncate_lines(lines: list[str], max_lines: int, theme: UITheme) -> list[str]:
    """Cut ``lines`` to ``max_lines`` rows, marking the cut on the last row."""
    max_lines = max(1, max_lines)
    if len(lines) <= max_lines:
        return lines
    return lines[: max_lines - 1] + [f"{theme.indicator}{TRUNCATION_MARKER}{theme.reset}"]


def empty_message(state: AppState) -> str:
    if state.query:
        return f"No matches for '{sanitize_terminal_text(state.query)}'"
    return f"No {state.mode} in this document"


def render_plain_listing(state: AppState, theme: UITheme) -> str:
    """Return every master collection as text, one title per item, for non-interactive output."""
    sections: list[str] = []
    for mode in ("endpoints", "webhooks", "components"):
        items = state.collection(mode).master
        if not items and mode == "webhooks":
            continue
        sections.append(f"{mode.capitalize()} ({len(items)})")
        sections.extend(f"  {item_title(item, theme)}" for item in items)
        sections.append("")
    return "\n".join(sections)


def render_list_lines(state: AppState, theme: UITheme, rows: int) -> list[str]:
    """Render the list region for the current view into at most ``rows`` lines."""
    items = state.active_items()
    if not items:
        return [" " * LEFT_PADDING_CHARS + f"{theme.empty}{empty_message(state)}{theme.reset}"]

    heights = [item.height() for item in items]
    # One row is held back for the "more below" indicator.
    start, stop = visible_window(heights, state.scroll_offset, max(1, rows - 1))
    lines: list[str] = []
    if start > 0:
        lines.append(f"{theme.indicator}  ▲ {start} more above{theme.reset}")
    for idx in range(start, stop):
        lines.extend(item_lines(items[idx], idx == state.cursor, state.width, theme))
    if stop < len(items):
        lines.append(f"{theme.indicator}  ▼ {len(items) - stop} more below{theme.reset}")
    return truncate_lines(lines, rows, theme)
