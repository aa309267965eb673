from __future__ import annotations

import unittest

from lazyapi.search_input import SEARCH_CHAR_LIMIT, SearchInput


class SearchInputTests(unittest.TestCase):
    def test_typing_inserts_at_caret(self) -> None:
        field = SearchInput()
        for key in ("p", "t", "LEFT", "e"):
            field.handle_key(key)
        self.assertEqual(field.value, "pet")
        self.assertEqual(field.caret, 2)

    def test_backspace_and_ctrl_u(self) -> None:
        field = SearchInput()
        field.set_value("orders")
        self.assertTrue(field.handle_key("BACKSPACE"))
        self.assertEqual(field.value, "order")
        field.handle_key("LEFT")
        field.handle_key("LEFT")
        self.assertTrue(field.handle_key("CTRL_U"))
        self.assertEqual((field.value, field.caret), ("er", 0))
        self.assertFalse(field.handle_key("BACKSPACE"))

    def test_navigation_keys_do_not_change_value(self) -> None:
        field = SearchInput()
        field.set_value("abc")
        self.assertFalse(field.handle_key("HOME"))
        self.assertEqual(field.caret, 0)
        self.assertFalse(field.handle_key("END"))
        self.assertEqual(field.caret, 3)
        self.assertFalse(field.handle_key("TAB"))

    def test_length_is_capped(self) -> None:
        field = SearchInput()
        field.set_value("x" * (SEARCH_CHAR_LIMIT + 10))
        self.assertEqual(len(field.value), SEARCH_CHAR_LIMIT)
        self.assertFalse(field.handle_key("y"))


if __name__ == "__main__":
    unittest.main()
