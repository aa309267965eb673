"""Key-token dispatch tables."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass

KeyAction = Callable[[], bool]


@dataclass(frozen=True)
class KeyComboBinding:
    """Key tokens that all run one action; the action returns ``True`` to quit."""

    combos: tuple[str, ...]
    handler: KeyAction


class KeyComboRegistry:
    """Exact-match lookup from a key token to its bound action.

    When two bindings name the same token the later one wins.
    """

    def __init__(self, bindings: Iterable[KeyComboBinding] = ()) -> None:
        self._actions: dict[str, KeyAction] = {
            combo: binding.handler for binding in bindings for combo in binding.combos
        }

    def __contains__(self, key: str) -> bool:
        return key in self._actions

    def dispatch(self, key: str) -> bool | None:
        """Run the action bound to ``key``; ``None`` when nothing is bound."""
        action = self._actions.get(key)
        return None if action is None else action()
