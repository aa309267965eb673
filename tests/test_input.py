"""Regression tests for raw-key decoding.

Covers ESC timing, CSI navigation sequences, and control-key token mapping.
"""

import os
import time
import unittest

from lazyapi.input import reader


def _read_tokens(payload: bytes, count: int) -> list[str]:
    read_fd, write_fd = os.pipe()
    try:
        os.write(write_fd, payload)
        return [reader.read_key(read_fd, timeout_ms=20) for _ in range(count)]
    finally:
        os.close(read_fd)
        os.close(write_fd)


class ReadKeyTests(unittest.TestCase):
    def setUp(self) -> None:
        reader._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        reader._PENDING_BYTES.clear()

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, b"\x1b")
            started = time.monotonic()
            key = reader.read_key(read_fd, timeout_ms=20)
            elapsed = time.monotonic() - started
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertEqual(key, "ESC")
        self.assertLess(elapsed, 0.2)

    def test_escape_does_not_swallow_following_printable_key(self) -> None:
        self.assertEqual(_read_tokens(b"\x1bj", 2), ["ESC", "j"])

    def test_arrow_and_shift_tab_sequences(self) -> None:
        self.assertEqual(
            _read_tokens(b"\x1b[A\x1b[B\x1b[C\x1b[D\x1b[Z", 5),
            ["UP", "DOWN", "RIGHT", "LEFT", "SHIFT_TAB"],
        )

    def test_tilde_sequences(self) -> None:
        self.assertEqual(
            _read_tokens(b"\x1b[5~\x1b[6~\x1b[1~\x1b[4~", 4),
            ["PAGE_UP", "PAGE_DOWN", "HOME", "END"],
        )

    def test_modified_arrow_is_read_as_one_token(self) -> None:
        self.assertEqual(_read_tokens(b"\x1b[1;5C\x1b[1;2D", 3), ["RIGHT", "LEFT", ""])

    def test_function_key_is_consumed_whole(self) -> None:
        self.assertEqual(_read_tokens(b"\x1b[15~j", 3), [reader.UNKNOWN_KEY, "j", ""])

    def test_modified_tilde_key_uses_first_parameter(self) -> None:
        self.assertEqual(_read_tokens(b"\x1b[6;5~", 2), ["PAGE_DOWN", ""])

    def test_ss3_home_end(self) -> None:
        self.assertEqual(_read_tokens(b"\x1bOH\x1bOF", 2), ["HOME", "END"])

    def test_control_keys(self) -> None:
        self.assertEqual(
            _read_tokens(b"\x03\x04\x15\t\x7f\r", 6),
            ["CTRL_C", "CTRL_D", "CTRL_U", "TAB", "BACKSPACE", "ENTER"],
        )

    def test_multibyte_utf8_character_is_one_token(self) -> None:
        self.assertEqual(_read_tokens("é✓".encode("utf-8"), 2), ["é", "✓"])

    def test_timeout_returns_empty_token(self) -> None:
        self.assertEqual(_read_tokens(b"", 1), [""])


if __name__ == "__main__":
    unittest.main()
