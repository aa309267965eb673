"""Input-layer public API for key decoding and dispatch.

``read_key`` turns raw tty bytes into key tokens; ``handle_key`` applies one
token to the browser state.
"""

from .key_registry import KeyComboBinding, KeyComboRegistry
from .keys import handle_key
from .reader import ESC_SEQUENCE_TIMEOUT_MS, UNKNOWN_KEY, _PENDING_BYTES, read_key

__all__ = [
    "read_key",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "UNKNOWN_KEY",
    "KeyComboBinding",
    "KeyComboRegistry",
    "handle_key",
]
