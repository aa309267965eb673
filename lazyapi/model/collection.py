"""Master/filtered item sequences driven by a live query."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Generic, TypeVar

from .items import ListItem

ItemT = TypeVar("ItemT", bound=ListItem)


class FilterableCollection(Generic[ItemT]):
    """One master sequence plus its derived, read-only filtered view.

    The filtered view holds the same item objects as the master, so fold
    flags are never copied or duplicated. With an empty query no view exists
    and ``active()`` returns the master list itself.
    """

    def __init__(self, items: Sequence[ItemT]) -> None:
        self.master: list[ItemT] = list(items)
        self.query = ""
        self._filtered: tuple[ItemT, ...] | None = None

    def __len__(self) -> int:
        return len(self.master)

    @property
    def filtering(self) -> bool:
        return self._filtered is not None

    def active(self) -> Sequence[ItemT]:
        """Return the sequence the cursor currently indexes into."""
        if self._filtered is None:
            return self.master
        return self._filtered

    def apply_query(self, query: str) -> None:
        """Rebuild the filtered view for ``query`` (case-insensitive substring)."""
        self.query = query
        if not query:
            self._filtered = None
            return
        query_lower = query.lower()
        self._filtered = tuple(item for item in self.master if item.matches(query_lower))

    def find_master(self, key: tuple[str, ...]) -> ItemT | None:
        """Return the master item with identity ``key``."""
        for item in self.master:
            if item.key == key:
                return item
        return None

    def toggle_fold(self, index: int) -> bool:
        """Flip the fold flag of the active item at ``index`` via its master entry.

        Returns ``False`` when ``index`` is out of range or the identity is no
        longer present in the master sequence.
        """
        active = self.active()
        if not 0 <= index < len(active):
            return False
        target = self.find_master(active[index].key)
        if target is None:
            return False
        target.folded = not target.folded
        self.apply_query(self.query)
        return True

    def heights(self) -> list[int]:
        """Return rendered heights for the active sequence."""
        return [item.height() for item in self.active()]
