"""Frame rendering: list window, indicators, truncation, and modals.

Uses the plain theme so assertions can compare visible text directly.
"""

from __future__ import annotations

import unittest

from lazyapi import navigation
from lazyapi.document import LoadedDocument
from lazyapi.model import Component, Endpoint, FilterableCollection, Webhook
from lazyapi.render import (
    TRUNCATION_MARKER,
    item_lines,
    render_list_lines,
    render_plain_listing,
    render_screen,
)
from lazyapi.render.screen import list_region_rows
from lazyapi.state import AppState
from lazyapi.ui_theme import PLAIN_THEME, resolve_theme


def _make_state(count: int = 30, height: int = 18, detail_lines: int = 8) -> AppState:
    document = LoadedDocument(data={"openapi": "3.1.0", "info": {"title": "Pets", "version": "2"}}, source_name="test")
    endpoints = [
        Endpoint(
            method="GET",
            path=f"/items/{idx}",
            operation={"summary": f"item {idx}"},
            details="".join(f"detail {n}\n" for n in range(detail_lines)),
        )
        for idx in range(count)
    ]
    return AppState(
        document=document,
        endpoints=FilterableCollection(endpoints),
        components=FilterableCollection([Component(name="Pet", kind="schema", description="A pet")]),
        webhooks=FilterableCollection([Webhook(name="petAdded", method="POST")]),
        height=height,
    )


class ItemLinesTests(unittest.TestCase):
    def test_folded_selected_item_is_one_marked_line(self) -> None:
        item = Endpoint(method="GET", path="/pets", operation={"summary": "List"})
        self.assertEqual(item_lines(item, True, 80, PLAIN_THEME), ["▶ GET     /pets - List"])
        self.assertEqual(item_lines(item, False, 80, PLAIN_THEME), ["  GET     /pets - List"])

    def test_unfolded_item_line_count_matches_height(self) -> None:
        item = Endpoint(method="POST", path="/pets", details="a\nb\nc\n", folded=False)
        lines = item_lines(item, False, 80, PLAIN_THEME)
        self.assertEqual(len(lines), item.height())
        self.assertEqual(lines[1], "    a")
        self.assertEqual(lines[-1], "")

    def test_component_title_shows_kind(self) -> None:
        item = Component(name="Pet", kind="schema", description="A pet")
        self.assertEqual(item_lines(item, False, 80, PLAIN_THEME), ["  Pet (schema) - A pet"])

    def test_control_characters_in_document_text_are_escaped(self) -> None:
        item = Endpoint(method="GET", path="/a\x1b[2J", details="")
        self.assertNotIn("\x1b", item_lines(item, False, 80, PLAIN_THEME)[0])


class ListRegionTests(unittest.TestCase):
    def test_top_of_list_shows_more_below_indicator(self) -> None:
        state = _make_state()
        lines = render_list_lines(state, PLAIN_THEME, list_region_rows(state.height))
        self.assertEqual(len(lines), 12)
        self.assertEqual(lines[0], "▶ GET     /items/0 - item 0")
        self.assertEqual(lines[-1], "  ▼ 19 more below")

    def test_bottom_of_list_shows_more_above_indicator(self) -> None:
        state = _make_state()
        navigation.jump_to_last(state)
        lines = render_list_lines(state, PLAIN_THEME, list_region_rows(state.height))
        self.assertEqual(lines[0], "  ▲ 21 more above")
        self.assertEqual(lines[-1], "▶ GET     /items/29 - item 29")

    def test_tall_unfolded_item_is_fully_visible_after_scrolling(self) -> None:
        state = _make_state(count=10)
        state.endpoints.master[5].folded = False
        for _ in range(5):
            navigation.move_cursor(state, 1)
        lines = render_list_lines(state, PLAIN_THEME, list_region_rows(state.height))
        self.assertEqual(lines[0], "  ▲ 5 more above")
        self.assertEqual(lines[1], "▶ GET     /items/5 - item 5")
        self.assertEqual(lines[2:10], [f"    detail {n}" for n in range(8)])
        self.assertNotIn(TRUNCATION_MARKER, lines)

    def test_item_taller_than_region_is_truncated_with_marker(self) -> None:
        state = _make_state(count=3, detail_lines=40)
        navigation.toggle_fold(state)
        lines = render_list_lines(state, PLAIN_THEME, 12)
        self.assertEqual(len(lines), 12)
        self.assertEqual(lines[-1], TRUNCATION_MARKER)

    def test_empty_filter_result_message(self) -> None:
        state = _make_state()
        navigation.enter_search(state)
        for ch in "zzz":
            navigation.edit_search(state, ch)
        self.assertEqual(render_list_lines(state, PLAIN_THEME, 12), ["  No matches for 'zzz'"])

    def test_empty_view_message(self) -> None:
        state = _make_state(count=0)
        self.assertEqual(render_list_lines(state, PLAIN_THEME, 12), ["  No endpoints in this document"])


class ScreenTests(unittest.TestCase):
    def test_frame_fills_terminal_height(self) -> None:
        state = _make_state()
        rows = render_screen(state, PLAIN_THEME).split("\n")
        self.assertEqual(len(rows), state.height)
        self.assertTrue(rows[0].startswith("Pets v2"))
        self.assertIn("[Endpoints (30)]", rows[0])
        self.assertIn("Webhooks (1)", rows[0])
        self.assertIn("1/30", rows)

    def test_search_footer_shows_placeholder_then_filter(self) -> None:
        state = _make_state()
        navigation.enter_search(state)
        self.assertIn("Search...", render_screen(state, PLAIN_THEME))
        navigation.edit_search(state, "9")
        navigation.commit_search(state)
        frame = render_screen(state, PLAIN_THEME)
        self.assertIn("Filter: 9", frame)
        self.assertIn("[Endpoints (3)]", frame)

    def test_help_modal_replaces_frame(self) -> None:
        state = _make_state()
        navigation.toggle_help(state)
        frame = render_screen(state, PLAIN_THEME)
        self.assertIn("lazyapi help", frame)
        self.assertEqual(len(frame.split("\n")), state.height)

    def test_command_modal_shows_plain_command(self) -> None:
        state = _make_state()
        navigation.generate_command(state)
        frame = render_screen(state, PLAIN_THEME, no_color=True)
        self.assertIn("curl command", frame)
        self.assertIn("curl -X GET 'https://api.example.com/items/0'", frame)

    def test_colored_theme_uses_escape_codes(self) -> None:
        state = _make_state()
        self.assertIn("\033[", render_screen(state, resolve_theme("ocean")))


class PlainListingTests(unittest.TestCase):
    def test_listing_groups_every_view(self) -> None:
        text = render_plain_listing(_make_state(count=2), PLAIN_THEME)
        self.assertEqual(
            text.split("\n"),
            [
                "Endpoints (2)",
                "  GET     /items/0 - item 0",
                "  GET     /items/1 - item 1",
                "",
                "Webhooks (1)",
                "  POST    petAdded",
                "",
                "Components (1)",
                "  Pet (schema) - A pet",
                "",
            ],
        )


if __name__ == "__main__":
    unittest.main()
