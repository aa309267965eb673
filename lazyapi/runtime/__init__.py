"""Interactive runtime: terminal control, main loop, and session bootstrap."""

from .app import print_listing, run_browser
from .loop import RenderOptions, run_main_loop
from .terminal import TerminalController

__all__ = [
    "RenderOptions",
    "TerminalController",
    "print_listing",
    "run_browser",
    "run_main_loop",
]
