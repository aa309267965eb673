"""Runtime composition: build state from a document and start the loop."""

from __future__ import annotations

import contextlib
import logging
import os
import shutil
import sys
from collections.abc import Iterator

from ..document import LoadedDocument
from ..navigation import recompute_viewport
from ..render import render_plain_listing
from ..state import DEFAULT_HEIGHT, DEFAULT_WIDTH, AppState, build_state
from ..ui_theme import resolve_theme
from .loop import RenderOptions, run_main_loop
from .terminal import TerminalController

logger = logging.getLogger(__name__)

TTY_PATH = "/dev/tty"


@contextlib.contextmanager
def interactive_input_fd() -> Iterator[int]:
    """Yield a readable tty descriptor, opening the controlling terminal when stdin is piped."""
    if os.isatty(sys.stdin.fileno()):
        yield sys.stdin.fileno()
        return
    try:
        fd = os.open(TTY_PATH, os.O_RDONLY)
    except OSError as exc:
        raise SystemExit(f"No terminal available for keyboard input ({exc.strerror}); use --dump.") from exc
    try:
        yield fd
    finally:
        os.close(fd)


def _build_logged_state(document: LoadedDocument, width: int, height: int) -> AppState:
    state = build_state(document, width=width, height=height)
    for warning in document.resolver.warnings:
        logger.warning("%s: %s", document.source_name, warning)
    return state


def print_listing(document: LoadedDocument, no_color: bool, theme_name: str | None) -> None:
    """Write every endpoint, webhook, and component title to stdout."""
    state = _build_logged_state(document, DEFAULT_WIDTH, DEFAULT_HEIGHT)
    theme = resolve_theme(theme_name, no_color=no_color or not os.isatty(sys.stdout.fileno()))
    sys.stdout.write(render_plain_listing(state, theme))


def run_browser(
    document: LoadedDocument,
    style: str,
    no_color: bool,
    dump: bool,
    theme_name: str | None = None,
) -> None:
    """Start the interactive browser, or print a listing when not on a terminal."""
    if dump or not os.isatty(sys.stdout.fileno()):
        print_listing(document, no_color, theme_name)
        return

    term = shutil.get_terminal_size((DEFAULT_WIDTH, DEFAULT_HEIGHT))
    # Warnings must be logged before the alternate screen takes over.
    state = _build_logged_state(document, term.columns, term.lines)
    recompute_viewport(state)
    options = RenderOptions(theme=resolve_theme(theme_name, no_color=no_color), style=style, no_color=no_color)

    with interactive_input_fd() as input_fd:
        terminal = TerminalController(input_fd, sys.stdout.fileno())
        run_main_loop(state, terminal, input_fd, options)
