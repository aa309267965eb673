"""Frame composition: header, item list, footer, and modal overlays.

``render_screen`` is a pure read of ``AppState`` returning one text block
with ``\\n``-separated rows; the runtime owns cursor positioning and writes.
"""

from __future__ import annotations

from ..ansi import clip_ansi_line, sanitize_terminal_text
from ..highlight import highlight_command
from ..state import VIEW_COMPONENTS, VIEW_ENDPOINTS, VIEW_WEBHOOKS, AppState
from ..ui_theme import UITheme
from ..viewport import FOOTER_APPROX_LINES, HEADER_APPROX_LINES
from .help import render_help_modal, render_modal
from .listing import render_list_lines

COMMAND_TITLE = "curl command"
VIEW_LABELS: dict[str, str] = {
    VIEW_ENDPOINTS: "Endpoints",
    VIEW_WEBHOOKS: "Webhooks",
    VIEW_COMPONENTS: "Components",
}


def list_region_rows(height: int) -> int:
    """Return rows between the header and footer for a terminal ``height`` rows tall."""
    return max(1, height - HEADER_APPROX_LINES - FOOTER_APPROX_LINES)


def render_header(state: AppState, theme: UITheme) -> list[str]:
    """Return the title row (document + view tabs) and a spacer row."""
    document = state.document
    version = f" v{document.version}" if document.version else ""
    title = f"{theme.title}{sanitize_terminal_text(document.title)}{version}{theme.reset}"

    tabs: list[str] = []
    modes = [VIEW_ENDPOINTS]
    if state.has_webhooks():
        modes.append(VIEW_WEBHOOKS)
    modes.append(VIEW_COMPONENTS)
    for mode in modes:
        collection = state.collection(mode)
        count = len(collection.active())
        label = f"{VIEW_LABELS[mode]} ({count})"
        if mode == state.mode:
            tabs.append(f"{theme.tab_active}[{label}]{theme.reset}")
        else:
            tabs.append(f"{theme.tab_inactive} {label} {theme.reset}")
    return [clip_ansi_line(f"{title}  {' '.join(tabs)}", state.width), ""]


def _search_line(state: AppState, theme: UITheme) -> str:
    search = state.search_input
    if state.search_editing:
        if not search.value:
            body = f"{theme.reverse} {theme.reset}{theme.search_placeholder}{search.placeholder}{theme.reset}"
        else:
            before = search.value[: search.caret]
            at = search.value[search.caret : search.caret + 1] or " "
            after = search.value[search.caret + 1 :]
            body = (
                f"{theme.search_query}{sanitize_terminal_text(before)}{theme.reset}"
                f"{theme.reverse}{sanitize_terminal_text(at)}{theme.reset}"
                f"{theme.search_query}{sanitize_terminal_text(after)}{theme.reset}"
            )
        return f"{theme.search_prompt}/{theme.reset} {body}"
    if state.query:
        return (
            f"{theme.search_prompt}Filter:{theme.reset} "
            f"{theme.search_query}{sanitize_terminal_text(state.query)}{theme.reset}"
            f"{theme.hint_dim}  (/ new search, Esc clear){theme.reset}"
        )
    return ""


def _position_line(state: AppState, theme: UITheme) -> str:
    total = len(state.active_items())
    if total == 0:
        return f"{theme.hint_dim}0 items{theme.reset}"
    return f"{theme.hint_dim}{state.cursor + 1}/{total}{theme.reset}"


def _hints_line(state: AppState, theme: UITheme) -> str:
    k = theme.hint_key
    d = theme.hint_dim
    r = theme.reset
    if state.search_editing:
        pairs = (("Enter", "keep filter"), ("Esc", "clear"), ("Ctrl+C", "quit"))
    else:
        pairs = (
            ("j/k", "move"),
            ("Enter", "fold"),
            ("r", "curl"),
            ("/", "search"),
            ("Tab", "view"),
            ("?", "help"),
            ("q", "quit"),
        )
    return "  ".join(f"{k}{key}{r} {d}{label}{r}" for key, label in pairs)


def render_footer(state: AppState, theme: UITheme) -> list[str]:
    """Return the spacer, search/filter, position, and key-hint rows."""
    rows = ["", _search_line(state, theme), _position_line(state, theme), _hints_line(state, theme)]
    return [clip_ansi_line(row, state.width) for row in rows]


def render_command_modal(state: AppState, theme: UITheme, style: str, no_color: bool) -> list[str]:
    body = [""]
    body.extend(highlight_command(state.command_text, style, no_color).splitlines())
    body.extend(["", f"{theme.hint_dim}Press Esc / q to close{theme.reset}"])
    return render_modal(COMMAND_TITLE, body, state.width, state.height, theme, max_width=120)


def render_screen(state: AppState, theme: UITheme, style: str = "monokai", no_color: bool = False) -> str:
    """Compose one full frame for the current state."""
    if state.show_help:
        return "\n".join(render_help_modal(state.width, state.height, theme))
    if state.show_command:
        return "\n".join(render_command_modal(state, theme, style, no_color))

    rows = list_region_rows(state.height)
    body = render_list_lines(state, theme, rows)
    body.extend([""] * (rows - len(body)))
    return "\n".join(render_header(state, theme) + body + render_footer(state, theme))
