"""Mutable browser state owned by the single event-processing path."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .document import LoadedDocument, extract_components, extract_endpoints, extract_webhooks
from .gesture import DoubleTapDetector
from .model import Component, Endpoint, FilterableCollection, ListItem, Webhook
from .search_input import SearchInput

if TYPE_CHECKING:
    from .input.key_registry import KeyComboRegistry

VIEW_ENDPOINTS = "endpoints"
VIEW_COMPONENTS = "components"
VIEW_WEBHOOKS = "webhooks"

DEFAULT_WIDTH = 80
DEFAULT_HEIGHT = 24


@dataclass
class AppState:
    document: LoadedDocument
    endpoints: FilterableCollection[Endpoint]
    components: FilterableCollection[Component]
    webhooks: FilterableCollection[Webhook]
    mode: str = VIEW_ENDPOINTS
    cursor: int = 0
    scroll_offset: int = 0
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    show_help: bool = False
    show_command: bool = False
    command_text: str = ""
    search_editing: bool = False
    search_input: SearchInput = field(default_factory=SearchInput)
    gesture: DoubleTapDetector = field(default_factory=DoubleTapDetector)
    dirty: bool = True
    # Browsing bindings close over this state; built on the first key press.
    key_bindings: KeyComboRegistry | None = field(default=None, repr=False, compare=False)

    @property
    def query(self) -> str:
        return self.search_input.value

    def collection(self, mode: str | None = None) -> FilterableCollection:
        """Return the filterable collection backing ``mode`` (default: current)."""
        mode = self.mode if mode is None else mode
        if mode == VIEW_COMPONENTS:
            return self.components
        if mode == VIEW_WEBHOOKS:
            return self.webhooks
        return self.endpoints

    def active_items(self) -> Sequence[ListItem]:
        return self.collection().active()

    def has_webhooks(self) -> bool:
        return len(self.webhooks.master) > 0


def build_state(document: LoadedDocument, width: int = DEFAULT_WIDTH, height: int = DEFAULT_HEIGHT) -> AppState:
    """Extract entities once and build the initial browsing state."""
    return AppState(
        document=document,
        endpoints=FilterableCollection(extract_endpoints(document)),
        components=FilterableCollection(extract_components(document)),
        webhooks=FilterableCollection(extract_webhooks(document)),
        width=width,
        height=height,
    )
