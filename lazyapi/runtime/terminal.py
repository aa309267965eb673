"""Terminal control helpers for the TUI session.

Owns raw-mode lifecycle, alternate-screen switching, and frame writes.
"""

from __future__ import annotations

import contextlib
import os
import termios
import tty

from ..ansi import clip_ansi_line


class TerminalController:
    """Manage terminal mode transitions and full-frame output."""

    def __init__(self, stdin_fd: int, stdout_fd: int) -> None:
        """Capture tty state and bind input/output file descriptors."""
        self.stdin_fd = stdin_fd
        self.stdout_fd = stdout_fd
        self._saved_tty_state = termios.tcgetattr(stdin_fd)

    def enable_tui_mode(self) -> None:
        """Enter raw alternate-screen mode with the cursor hidden."""
        tty.setraw(self.stdin_fd, termios.TCSAFLUSH)
        os.write(self.stdout_fd, b"\x1b[?1049h\x1b[?25l")

    def disable_tui_mode(self) -> None:
        """Show the cursor, restore the main screen, and restore tty settings."""
        os.write(self.stdout_fd, b"\x1b[?25h\x1b[?1049l")
        termios.tcsetattr(self.stdin_fd, termios.TCSAFLUSH, self._saved_tty_state)

    def write_frame(self, frame: str, width: int, height: int) -> None:
        """Draw ``frame`` rows at absolute positions, clipping to the screen size."""
        rows = frame.split("\n")
        out: list[str] = []
        for row in range(max(1, height)):
            text = clip_ansi_line(rows[row], max(1, width)) if row < len(rows) else ""
            out.append(f"\x1b[{row + 1};1H{text}\x1b[0m\x1b[K")
        os.write(self.stdout_fd, "".join(out).encode("utf-8", errors="replace"))

    @contextlib.contextmanager
    def raw_mode(self):
        """Run the block in TUI mode and restore the terminal even on error."""
        try:
            self.enable_tui_mode()
            yield
        finally:
            self.disable_tui_mode()
