"""State transitions for cursor movement, folding, search, and view switching."""

from __future__ import annotations

import unittest

from lazyapi import navigation
from lazyapi.document import LoadedDocument
from lazyapi.model import Component, Endpoint, FilterableCollection, Webhook
from lazyapi.state import VIEW_COMPONENTS, VIEW_ENDPOINTS, VIEW_WEBHOOKS, AppState


def _make_state(count: int = 30, height: int = 18, webhooks: bool = False) -> AppState:
    document = LoadedDocument(data={"openapi": "3.1.0", "info": {"title": "Pets", "version": "1"}}, source_name="test")
    endpoints = [
        Endpoint(
            method="GET",
            path=f"/items/{idx}",
            operation={"summary": "even item" if idx % 2 == 0 else "odd item"},
            details="".join(f"detail {n}\n" for n in range(8)),
        )
        for idx in range(count)
    ]
    components = [Component(name="Pet", kind="schema", details="Type: object\n")]
    hooks = [Webhook(name="petCreated", method="POST")] if webhooks else []
    return AppState(
        document=document,
        endpoints=FilterableCollection(endpoints),
        components=FilterableCollection(components),
        webhooks=FilterableCollection(hooks),
        height=height,
    )


def _type_query(state: AppState, text: str) -> None:
    navigation.enter_search(state)
    for ch in text:
        navigation.edit_search(state, ch)


class CursorMovementTests(unittest.TestCase):
    def test_move_down_then_out_of_range_is_noop(self) -> None:
        state = _make_state(count=3)
        self.assertTrue(navigation.move_cursor(state, 1))
        self.assertTrue(navigation.move_cursor(state, 1))
        self.assertFalse(navigation.move_cursor(state, 1))
        self.assertEqual(state.cursor, 2)
        navigation.jump_to_first(state)
        self.assertFalse(navigation.move_cursor(state, -1))
        self.assertEqual(state.cursor, 0)

    def test_stepping_keeps_scroll_offset_tracking_cursor(self) -> None:
        state = _make_state(count=30, height=18)
        for _ in range(29):
            navigation.move_cursor(state, 1)
            self.assertLessEqual(state.scroll_offset, state.cursor)
        self.assertEqual(state.cursor, 29)
        self.assertEqual(state.scroll_offset, 21)

    def test_half_page_down_jumps_fixed_lines_and_clamps(self) -> None:
        state = _make_state(count=30)
        navigation.half_page_down(state)
        self.assertEqual(state.cursor, 21)
        navigation.half_page_down(state)
        self.assertEqual(state.cursor, 29)

    def test_half_page_up_steps_half_the_viewport(self) -> None:
        state = _make_state(count=30, height=18)
        navigation.jump_to_last(state)
        navigation.half_page_up(state)
        self.assertEqual(state.cursor, 24)
        state.cursor = 3
        navigation.half_page_up(state)
        self.assertEqual(state.cursor, 0)
        self.assertEqual(state.scroll_offset, 0)

    def test_jump_to_last_and_first(self) -> None:
        state = _make_state(count=30)
        navigation.jump_to_last(state)
        self.assertEqual(state.cursor, 29)
        self.assertGreater(state.scroll_offset, 0)
        navigation.jump_to_first(state)
        self.assertEqual((state.cursor, state.scroll_offset), (0, 0))

    def test_resize_recomputes_offset(self) -> None:
        state = _make_state(count=30, height=40)
        navigation.jump_to_last(state)
        navigation.resize(state, 80, 18)
        self.assertEqual(state.scroll_offset, 21)


class FoldTests(unittest.TestCase):
    def test_unfolding_tall_item_scrolls_it_fully_into_view(self) -> None:
        state = _make_state(count=10, height=18)
        state.endpoints.master[5].folded = False
        for _ in range(5):
            navigation.move_cursor(state, 1)
        self.assertEqual(state.cursor, 5)
        self.assertEqual(state.scroll_offset, 5)

    def test_toggle_fold_keeps_cursor_and_other_flags(self) -> None:
        state = _make_state(count=5)
        navigation.move_cursor(state, 2)
        self.assertTrue(navigation.toggle_fold(state))
        self.assertEqual(state.cursor, 2)
        self.assertEqual([item.folded for item in state.endpoints.master], [True, True, False, True, True])
        navigation.toggle_fold(state)
        self.assertTrue(all(item.folded for item in state.endpoints.master))


class SearchTests(unittest.TestCase):
    def test_typing_filters_every_view_and_resets_position(self) -> None:
        state = _make_state(count=6)
        navigation.move_cursor(state, 3)
        _type_query(state, "odd")
        self.assertEqual(len(state.active_items()), 3)
        self.assertEqual((state.cursor, state.scroll_offset), (0, 0))
        self.assertEqual(len(state.components.active()), 0)

    def test_commit_keeps_query_and_cursor(self) -> None:
        state = _make_state(count=6)
        _type_query(state, "odd")
        navigation.move_cursor(state, 1)
        navigation.commit_search(state)
        self.assertFalse(state.search_editing)
        self.assertEqual(state.query, "odd")
        self.assertEqual(state.cursor, 1)

    def test_cancel_restores_master_and_preserves_folds(self) -> None:
        state = _make_state(count=6)
        _type_query(state, "odd")
        navigation.toggle_fold(state)
        navigation.cancel_search(state)
        self.assertEqual(state.query, "")
        self.assertIs(state.active_items(), state.endpoints.master)
        self.assertFalse(state.endpoints.master[1].folded)
        self.assertEqual((state.cursor, state.scroll_offset), (0, 0))

    def test_no_matches_survive_navigation_commands(self) -> None:
        state = _make_state(count=6)
        _type_query(state, "nothing-matches")
        navigation.commit_search(state)
        self.assertEqual(len(state.active_items()), 0)
        navigation.move_cursor(state, 1)
        navigation.move_cursor(state, -1)
        navigation.half_page_down(state)
        navigation.half_page_up(state)
        navigation.jump_to_last(state)
        navigation.jump_to_first(state)
        self.assertFalse(navigation.toggle_fold(state))
        self.assertFalse(navigation.generate_command(state))
        self.assertEqual((state.cursor, state.scroll_offset), (0, 0))

    def test_new_search_drops_previous_committed_query(self) -> None:
        state = _make_state(count=6)
        _type_query(state, "odd")
        navigation.commit_search(state)
        navigation.enter_search(state)
        self.assertEqual(state.query, "")
        self.assertEqual(len(state.active_items()), 6)


class ViewCycleTests(unittest.TestCase):
    def test_cycle_skips_empty_webhooks(self) -> None:
        state = _make_state(count=3)
        navigation.cycle_view(state, 1)
        self.assertEqual(state.mode, VIEW_COMPONENTS)
        navigation.cycle_view(state, 1)
        self.assertEqual(state.mode, VIEW_ENDPOINTS)
        navigation.cycle_view(state, -1)
        self.assertEqual(state.mode, VIEW_COMPONENTS)

    def test_cycle_visits_webhooks_when_present(self) -> None:
        state = _make_state(count=3, webhooks=True)
        navigation.cycle_view(state, 1)
        self.assertEqual(state.mode, VIEW_WEBHOOKS)
        navigation.cycle_view(state, 1)
        self.assertEqual(state.mode, VIEW_COMPONENTS)
        navigation.cycle_view(state, -1)
        self.assertEqual(state.mode, VIEW_WEBHOOKS)

    def test_switching_view_resets_position_but_keeps_query(self) -> None:
        state = _make_state(count=10)
        _type_query(state, "item")
        navigation.commit_search(state)
        navigation.move_cursor(state, 4)
        navigation.cycle_view(state, 1)
        self.assertEqual((state.cursor, state.scroll_offset), (0, 0))
        self.assertEqual(state.query, "item")


class CommandTests(unittest.TestCase):
    def test_generate_command_opens_overlay_for_endpoint(self) -> None:
        state = _make_state(count=2)
        self.assertTrue(navigation.generate_command(state))
        self.assertTrue(state.show_command)
        self.assertTrue(state.command_text.startswith("curl -X GET 'https://api.example.com/items/0'"))

    def test_generate_command_ignores_components(self) -> None:
        state = _make_state(count=2)
        navigation.cycle_view(state, 1)
        self.assertFalse(navigation.generate_command(state))
        self.assertFalse(state.show_command)

    def test_close_overlays_reports_whether_anything_was_open(self) -> None:
        state = _make_state(count=2)
        self.assertFalse(navigation.close_overlays(state))
        navigation.toggle_help(state)
        self.assertTrue(navigation.close_overlays(state))
        self.assertFalse(state.show_help)


if __name__ == "__main__":
    unittest.main()
