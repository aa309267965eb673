"""Syntax highlighting for generated commands via Pygments."""

from __future__ import annotations

from pygments import highlight
from pygments.formatters import TerminalFormatter
from pygments.lexers import BashLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

DEFAULT_STYLE = "monokai"

_FORMATTERS: dict[str, TerminalFormatter] = {}
_VALID_STYLES: set[str] = set()
_INVALID_STYLES: set[str] = set()


def normalize_style(style: str | None) -> str:
    """Return ``style`` when Pygments knows it, else the default style."""
    if not style:
        return DEFAULT_STYLE
    if style in _VALID_STYLES:
        return style
    if style in _INVALID_STYLES:
        return DEFAULT_STYLE
    try:
        get_style_by_name(style)
    except ClassNotFound:
        _INVALID_STYLES.add(style)
        return DEFAULT_STYLE
    _VALID_STYLES.add(style)
    return style


def _formatter_for_style(style: str) -> TerminalFormatter:
    formatter = _FORMATTERS.get(style)
    if formatter is None:
        formatter = TerminalFormatter(style=style)
        _FORMATTERS[style] = formatter
    return formatter


def highlight_command(command: str, style: str | None = DEFAULT_STYLE, no_color: bool = False) -> str:
    """Return ``command`` with ANSI shell highlighting (unchanged when ``no_color``)."""
    if no_color or not command:
        return command
    rendered = highlight(command, BashLexer(), _formatter_for_style(normalize_style(style)))
    # Pygments always terminates output with a newline.
    return rendered[:-1] if rendered.endswith("\n") and not command.endswith("\n") else rendered
