"""Cursor, view, search, and overlay transitions on ``AppState``.

Every operation keeps ``0 <= scroll_offset <= cursor <= last index`` and
recomputes the viewport itself; rendering never repairs state.
"""

from __future__ import annotations

from .commands import generate_curl
from .model import Endpoint, Webhook
from .state import VIEW_COMPONENTS, VIEW_ENDPOINTS, VIEW_WEBHOOKS, AppState
from .viewport import HALF_SCREEN_JUMP_LINES, content_height, ensure_cursor_visible


def last_index(state: AppState) -> int:
    """Return the last valid cursor index, or ``-1`` when the view is empty."""
    return len(state.active_items()) - 1


def clamp_cursor(state: AppState) -> None:
    """Pull cursor and scroll offset back inside the active collection."""
    state.cursor = max(0, min(state.cursor, last_index(state)))
    state.scroll_offset = max(0, min(state.scroll_offset, state.cursor))


def recompute_viewport(state: AppState) -> None:
    """Re-clamp the cursor and update ``scroll_offset`` for current heights."""
    clamp_cursor(state)
    state.scroll_offset = ensure_cursor_visible(
        state.cursor,
        state.scroll_offset,
        state.collection().heights(),
        content_height(state.height),
    )
    state.dirty = True


def reset_position(state: AppState) -> None:
    state.cursor = 0
    state.scroll_offset = 0
    state.dirty = True


def resize(state: AppState, width: int, height: int) -> None:
    """Apply a terminal size change."""
    if (width, height) == (state.width, state.height):
        return
    state.width = max(1, width)
    state.height = max(1, height)
    recompute_viewport(state)


def move_cursor(state: AppState, delta: int) -> bool:
    """Move by ``delta`` items; out-of-range moves are no-ops."""
    target = state.cursor + delta
    if target < 0 or target > last_index(state):
        return False
    state.cursor = target
    recompute_viewport(state)
    return True


def half_page_down(state: AppState) -> None:
    state.cursor = min(state.cursor + HALF_SCREEN_JUMP_LINES, max(0, last_index(state)))
    recompute_viewport(state)


def half_page_up(state: AppState) -> None:
    # Step is half the viewport, not HALF_SCREEN_JUMP_LINES.
    step = max(1, content_height(state.height) // 2)
    state.cursor = 0 if state.cursor < step else state.cursor - step
    recompute_viewport(state)


def jump_to_first(state: AppState) -> None:
    state.cursor = 0
    recompute_viewport(state)


def jump_to_last(state: AppState) -> None:
    if last_index(state) < 0:
        return
    state.cursor = last_index(state)
    recompute_viewport(state)


def cycle_view(state: AppState, direction: int) -> None:
    """Rotate Endpoints -> Webhooks -> Components, skipping an empty webhook view."""
    if direction > 0:
        order = {
            VIEW_ENDPOINTS: VIEW_WEBHOOKS if state.has_webhooks() else VIEW_COMPONENTS,
            VIEW_WEBHOOKS: VIEW_COMPONENTS,
            VIEW_COMPONENTS: VIEW_ENDPOINTS,
        }
    else:
        order = {
            VIEW_ENDPOINTS: VIEW_COMPONENTS,
            VIEW_WEBHOOKS: VIEW_ENDPOINTS,
            VIEW_COMPONENTS: VIEW_WEBHOOKS if state.has_webhooks() else VIEW_ENDPOINTS,
        }
    state.mode = order.get(state.mode, VIEW_ENDPOINTS)
    reset_position(state)


def toggle_fold(state: AppState) -> bool:
    """Fold or unfold the item under the cursor through its master entry."""
    if not state.collection().toggle_fold(state.cursor):
        return False
    recompute_viewport(state)
    return True


def apply_query(state: AppState) -> None:
    """Re-filter every collection with the current query text."""
    query = state.search_input.value
    for collection in (state.endpoints, state.components, state.webhooks):
        collection.apply_query(query)


def enter_search(state: AppState) -> None:
    """Start editing a fresh query; a previously committed query is dropped."""
    had_query = bool(state.query)
    state.search_editing = True
    state.search_input.set_value("")
    state.search_input.focus()
    apply_query(state)
    if had_query:
        reset_position(state)
    else:
        clamp_cursor(state)
    state.dirty = True


def cancel_search(state: AppState) -> None:
    """Leave search mode and clear the query, restoring the master lists."""
    state.search_editing = False
    state.search_input.set_value("")
    state.search_input.blur()
    apply_query(state)
    reset_position(state)


def commit_search(state: AppState) -> None:
    """Leave search mode keeping the query and the cursor."""
    state.search_editing = False
    state.search_input.blur()
    recompute_viewport(state)


def edit_search(state: AppState, key: str) -> None:
    """Route one key to the query editor and re-filter when the text changed."""
    if state.search_input.handle_key(key):
        apply_query(state)
        reset_position(state)
    state.dirty = True


def toggle_help(state: AppState) -> None:
    state.show_help = not state.show_help
    state.dirty = True


def close_overlays(state: AppState) -> bool:
    """Close any open modal and return whether one was open."""
    if not (state.show_help or state.show_command):
        return False
    state.show_help = False
    state.show_command = False
    state.dirty = True
    return True


def generate_command(state: AppState) -> bool:
    """Open the command overlay for the endpoint or webhook under the cursor."""
    items = state.active_items()
    if not 0 <= state.cursor < len(items):
        return False
    item = items[state.cursor]
    if isinstance(item, Endpoint):
        path = item.path
    elif isinstance(item, Webhook):
        path = item.name
    else:
        return False
    state.command_text = generate_curl(
        item.method,
        path,
        item.operation,
        state.document.data,
        state.document.resolver,
    )
    state.show_command = True
    state.dirty = True
    return True
