"""Single-line query editor used by search mode."""

from __future__ import annotations

SEARCH_CHAR_LIMIT = 100
SEARCH_PLACEHOLDER = "Search..."


class SearchInput:
    """Editable text with a caret, a length cap, and focus state."""

    def __init__(self, char_limit: int = SEARCH_CHAR_LIMIT, placeholder: str = SEARCH_PLACEHOLDER) -> None:
        self.char_limit = max(1, char_limit)
        self.placeholder = placeholder
        self.value = ""
        self.caret = 0
        self.focused = False

    def focus(self) -> None:
        self.focused = True

    def blur(self) -> None:
        self.focused = False

    def set_value(self, text: str) -> None:
        """Replace the value, truncating to the limit and moving the caret to the end."""
        self.value = text[: self.char_limit]
        self.caret = len(self.value)

    def handle_key(self, key: str) -> bool:
        """Apply one editing key and return whether ``value`` changed."""
        previous = self.value
        if key == "BACKSPACE":
            if self.caret > 0:
                self.value = self.value[: self.caret - 1] + self.value[self.caret :]
                self.caret -= 1
        elif key == "CTRL_U":
            self.value = self.value[self.caret :]
            self.caret = 0
        elif key == "LEFT":
            self.caret = max(0, self.caret - 1)
        elif key == "RIGHT":
            self.caret = min(len(self.value), self.caret + 1)
        elif key == "HOME":
            self.caret = 0
        elif key == "END":
            self.caret = len(self.value)
        elif len(key) == 1 and key.isprintable():
            if len(self.value) < self.char_limit:
                self.value = self.value[: self.caret] + key + self.value[self.caret :]
                self.caret += 1
        return self.value != previous
