"""Rendering: pure functions from browser state to frame text."""

from .help import help_lines, render_help_modal, render_modal
from .listing import (
    TRUNCATION_MARKER,
    item_lines,
    item_title,
    render_list_lines,
    render_plain_listing,
    truncate_lines,
)
from .screen import list_region_rows, render_command_modal, render_footer, render_header, render_screen

__all__ = [
    "TRUNCATION_MARKER",
    "help_lines",
    "item_lines",
    "item_title",
    "list_region_rows",
    "render_command_modal",
    "render_footer",
    "render_header",
    "render_help_modal",
    "render_list_lines",
    "render_modal",
    "render_plain_listing",
    "render_screen",
    "truncate_lines",
]
