"""Help content and modal box rendering.

Modals replace the whole frame: a dimmed backdrop with a centered rounded
box. Everything here returns lines and writes nothing.
"""

from __future__ import annotations

from ..ansi import clip_ansi_line, pad_ansi_line
from ..ui_theme import UITheme

HELP_TITLE = "lazyapi help"


def help_lines(theme: UITheme) -> list[str]:
    """Return the styled body of the help modal."""
    k = theme.hint_key
    r = theme.reset
    h = theme.help_heading
    return [
        "",
        f"{h}Navigation{r}",
        f"  {k}j/k{r} or {k}Up/Down{r}   move one item",
        f"  {k}Ctrl+D/Ctrl+U{r}     half-page down/up",
        f"  {k}gg{r} / {k}Home{r}         first item",
        f"  {k}G{r} / {k}End{r}           last item",
        f"  {k}Tab/L{r}, {k}Shift+Tab/H{r}  next/previous view",
        "",
        f"{h}Items{r}",
        f"  {k}Enter{r} / {k}Space{r}     expand or collapse details",
        f"  {k}r{r}                 curl example (endpoints and webhooks)",
        "",
        f"{h}Search{r}",
        f"  {k}/{r}                 start a new search",
        f"  {k}Enter{r}             keep the filter and browse results",
        f"  {k}Esc{r}               clear the filter",
        "",
        f"{h}General{r}",
        f"  {k}?{r}                 toggle help",
        f"  {k}q{r} / {k}Ctrl+C{r}        quit (closes an open dialog first)",
        "",
        f"{theme.hint_dim}Press ? / Esc / q to close{r}",
    ]


def render_modal(
    title: str,
    body: list[str],
    width: int,
    height: int,
    theme: UITheme,
    *,
    max_width: int = 84,
) -> list[str]:
    """Return ``height`` lines drawing ``body`` in a centered box over a backdrop."""
    width = max(1, width)
    height = max(1, height)
    modal_w = max(4, min(max_width, width - 4, max(52, width - 10)))
    modal_h = max(3, min(height - 2, len(body) + 2))
    inner_w = modal_w - 2
    inner_h = modal_h - 2
    x = max(0, (width - modal_w) // 2)
    y = max(0, (height - modal_h) // 2)

    backdrop = f"{theme.backdrop}{' ' * max(0, width - 1)}{theme.reset}"
    rows = [backdrop] * height

    title_text = f" {title} "
    top_fill = max(0, inner_w - len(title_text))
    left_fill = top_fill // 2
    pad = " " * x
    b = theme.modal_border
    r = theme.reset
    rows[y] = (
        f"{pad}{b}╭{'─' * left_fill}{r}{theme.modal_title}{title_text[:inner_w]}{r}"
        f"{b}{'─' * (top_fill - left_fill)}╮{r}"
    )
    visible_body = body[:inner_h]
    if len(body) > inner_h and inner_h > 0:
        visible_body = body[: inner_h - 1] + [f"{theme.hint_dim}...{r}"]
    for i in range(inner_h):
        text = visible_body[i] if i < len(visible_body) else ""
        cell = pad_ansi_line(" " + clip_ansi_line(text, max(0, inner_w - 2)), inner_w)
        if y + 1 + i < height:
            rows[y + 1 + i] = f"{pad}{b}│{r}{cell}{b}│{r}"
    if y + modal_h - 1 < height:
        rows[y + modal_h - 1] = f"{pad}{b}╰{'─' * inner_w}╯{r}"
    return rows


def render_help_modal(width: int, height: int, theme: UITheme) -> list[str]:
    return render_modal(HELP_TITLE, help_lines(theme), width, height, theme)
