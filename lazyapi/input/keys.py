"""Keyboard dispatch for overlays, search editing, and browsing."""

from __future__ import annotations

from .. import navigation
from ..state import AppState
from .key_registry import KeyComboBinding, KeyComboRegistry

OVERLAY_DISMISS_KEYS = frozenset({"ESC", "q", "CTRL_C"})
HELP_DISMISS_KEYS = OVERLAY_DISMISS_KEYS | {"?"}


def _handle_search_key(key: str, state: AppState) -> bool:
    if key == "ESC":
        navigation.cancel_search(state)
        return False
    if key == "ENTER":
        navigation.commit_search(state)
        return False
    if key == "CTRL_C":
        return True
    navigation.edit_search(state, key)
    return False


def _browsing_bindings(state: AppState) -> KeyComboRegistry:
    def quit_action() -> bool:
        """Signal application shutdown."""
        return True

    def toggle_help_action() -> bool:
        navigation.toggle_help(state)
        return False

    def enter_search_action() -> bool:
        navigation.enter_search(state)
        return False

    def escape_action() -> bool:
        """Drop a committed query; otherwise nothing to back out of."""
        if state.query:
            navigation.cancel_search(state)
        return False

    def step_action(delta: int):
        def action() -> bool:
            navigation.move_cursor(state, delta)
            return False

        return action

    def cycle_action(direction: int):
        def action() -> bool:
            navigation.cycle_view(state, direction)
            return False

        return action

    def half_page_down_action() -> bool:
        navigation.half_page_down(state)
        return False

    def half_page_up_action() -> bool:
        navigation.half_page_up(state)
        return False

    def first_action() -> bool:
        navigation.jump_to_first(state)
        return False

    def last_action() -> bool:
        navigation.jump_to_last(state)
        return False

    def toggle_fold_action() -> bool:
        navigation.toggle_fold(state)
        return False

    def generate_command_action() -> bool:
        navigation.generate_command(state)
        return False

    return KeyComboRegistry(
        [
            KeyComboBinding(("q", "CTRL_C"), quit_action),
            KeyComboBinding(("?",), toggle_help_action),
            KeyComboBinding(("/",), enter_search_action),
            KeyComboBinding(("ESC",), escape_action),
            KeyComboBinding(("UP", "k"), step_action(-1)),
            KeyComboBinding(("DOWN", "j"), step_action(1)),
            KeyComboBinding(("TAB", "L"), cycle_action(1)),
            KeyComboBinding(("SHIFT_TAB", "H"), cycle_action(-1)),
            KeyComboBinding(("CTRL_D", "PAGE_DOWN"), half_page_down_action),
            KeyComboBinding(("CTRL_U", "PAGE_UP"), half_page_up_action),
            KeyComboBinding(("HOME",), first_action),
            KeyComboBinding(("G", "END"), last_action),
            KeyComboBinding(("ENTER", " "), toggle_fold_action),
            KeyComboBinding(("r",), generate_command_action),
        ]
    )


def handle_key(key: str, state: AppState, now: float) -> bool:
    """Handle one key token and return ``True`` when the app should quit.

    Modal states are checked first: the command overlay, then search
    editing, then the help overlay. ``now`` is a monotonic timestamp used
    for the ``gg`` gesture.
    """
    if state.show_command or state.search_editing or state.show_help:
        state.gesture.reset()

    if state.show_command:
        if key in OVERLAY_DISMISS_KEYS:
            navigation.close_overlays(state)
        return False

    if state.search_editing:
        return _handle_search_key(key, state)

    if state.show_help:
        if key in HELP_DISMISS_KEYS:
            navigation.close_overlays(state)
        return False

    if state.gesture.press(key, now):
        navigation.jump_to_first(state)
        return False

    if state.key_bindings is None:
        state.key_bindings = _browsing_bindings(state)
    handled = state.key_bindings.dispatch(key)
    return bool(handled)
