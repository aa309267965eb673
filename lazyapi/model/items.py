"""List item variants shown by the browser.

Endpoints, components, and webhooks share one capability surface:
a stable identity key, searchable text fields, and a fold-aware height.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any


def _text(value: Any) -> str:
    return value if isinstance(value, str) else ""


class ListItem(ABC):
    """Behavior shared by every foldable list entry.

    Subclasses provide ``details`` (newline-terminated lines) and a mutable
    ``folded`` flag, plus an identity ``key`` and the text ``search_fields``.
    """

    details: str
    folded: bool

    @property
    @abstractmethod
    def key(self) -> tuple[str, ...]:
        """Identity that survives re-filtering."""

    @abstractmethod
    def search_fields(self) -> tuple[str, ...]:
        """Text a query is matched against."""

    def detail_lines(self) -> list[str]:
        """Return detail lines without their trailing newlines."""
        return self.details.splitlines()

    def height(self) -> int:
        """Rendered line count: the main line, plus details and a separator when unfolded."""
        if self.folded:
            return 1
        return 1 + self.details.count("\n") + 1

    def matches(self, query_lower: str) -> bool:
        """Return whether any search field contains ``query_lower``."""
        return any(query_lower in value.lower() for value in self.search_fields())


class _OperationItem(ListItem):
    operation: Mapping[str, Any]
    method: str

    @property
    def summary(self) -> str:
        return _text(self.operation.get("summary"))

    @property
    def description(self) -> str:
        return _text(self.operation.get("description"))

    def _operation_fields(self, name: str) -> tuple[str, ...]:
        fields = [name, self.method]
        if self.summary:
            fields.append(self.summary)
        if self.description:
            fields.append(self.description)
        return tuple(fields)


@dataclass(eq=False)
class Endpoint(_OperationItem):
    method: str
    path: str
    operation: Mapping[str, Any] = field(default_factory=dict)
    details: str = ""
    folded: bool = True

    @property
    def key(self) -> tuple[str, ...]:
        return ("endpoint", self.method, self.path)

    def search_fields(self) -> tuple[str, ...]:
        return self._operation_fields(self.path)


@dataclass(eq=False)
class Webhook(_OperationItem):
    name: str
    method: str
    operation: Mapping[str, Any] = field(default_factory=dict)
    details: str = ""
    folded: bool = True

    @property
    def key(self) -> tuple[str, ...]:
        return ("webhook", self.method, self.name)

    def search_fields(self) -> tuple[str, ...]:
        return self._operation_fields(self.name)


@dataclass(eq=False)
class Component(ListItem):
    name: str
    kind: str
    description: str = ""
    details: str = ""
    folded: bool = True

    @property
    def key(self) -> tuple[str, ...]:
        return ("component", self.kind, self.name)

    def search_fields(self) -> tuple[str, ...]:
        return (self.name, self.kind, self.description)
