"""Main interactive event loop for the terminal UI.

One iteration: poll the terminal size, draw when dirty, then read and
dispatch at most one key. Feature logic lives in ``navigation`` and
``input.keys``.
"""

from __future__ import annotations

import shutil
import time
from collections.abc import Callable
from dataclasses import dataclass

from ..input import handle_key, read_key
from ..navigation import resize
from ..render import render_screen
from ..state import AppState
from ..ui_theme import UITheme
from .terminal import TerminalController

KEY_POLL_TIMEOUT_MS = 120


@dataclass(frozen=True)
class RenderOptions:
    """Presentation settings fixed for the lifetime of one session."""

    theme: UITheme
    style: str
    no_color: bool


def run_main_loop(
    state: AppState,
    terminal: TerminalController,
    input_fd: int,
    options: RenderOptions,
    clock: Callable[[], float] = time.monotonic,
) -> None:
    """Run the interactive loop until a quit key is handled."""
    with terminal.raw_mode():
        while True:
            term = shutil.get_terminal_size((state.width, state.height))
            resize(state, term.columns, term.lines)

            if state.dirty:
                frame = render_screen(state, options.theme, options.style, options.no_color)
                terminal.write_frame(frame, state.width, state.height)
                state.dirty = False

            key = read_key(input_fd, timeout_ms=KEY_POLL_TIMEOUT_MS)
            if key == "":
                continue
            if handle_key(key, state, clock()):
                return
