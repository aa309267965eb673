"""Double-press key gesture detection (``gg``)."""

from __future__ import annotations

KEY_SEQUENCE_THRESHOLD_SECONDS = 0.5


class DoubleTapDetector:
    """Recognize two consecutive presses of one key within a time window.

    Every key press must be reported; a different key in between cancels a
    pending first press. Memory clears after a recognized double tap so a
    third press starts over instead of triggering again.
    """

    def __init__(self, key: str = "g", timeout: float = KEY_SEQUENCE_THRESHOLD_SECONDS) -> None:
        self.key = key
        self.timeout = timeout
        self.last_key = ""
        self.last_at = 0.0

    def reset(self) -> None:
        self.last_key = ""
        self.last_at = 0.0

    def press(self, key: str, now: float) -> bool:
        """Record ``key`` pressed at ``now`` and return whether it completes a double tap."""
        if key != self.key:
            self.reset()
            return False
        if self.last_key == key and now - self.last_at < self.timeout:
            self.reset()
            return True
        self.last_key = key
        self.last_at = now
        return False
